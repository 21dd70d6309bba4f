"""Reference scanner — which identifiers does the document actually point at?

Two modes:
- structural: walk attribute values (and <style> text) for reference tokens.
  A value that is exactly ``#id`` is a direct reference (href); ``url(#id)``
  anywhere in a value is a functional reference.
- textual: substring search for ``#id`` in the serialized document, the
  conservative legacy behaviour.
"""

from __future__ import annotations

import re

from svgbuilder.engine.config import ReferenceScanMode
from svgbuilder.svg.serializer import serialize_svg
from svgbuilder.svg.tree import Element

_URL_REF_RE = re.compile(r"""url\(\s*['"]?#([^'")\s]+)['"]?\s*\)""")
_DIRECT_REF_RE = re.compile(r"^\s*#(\S+?)\s*$")


def references_in_value(value: str) -> set[str]:
    """Identifiers referenced by a single attribute value."""
    refs = set(_URL_REF_RE.findall(value))
    direct = _DIRECT_REF_RE.match(value)
    if direct:
        refs.add(direct.group(1))
    return refs


def collect_references(root: Element) -> dict[str, list[Element]]:
    """Map each referenced identifier to the elements whose markup references it."""
    refs: dict[str, list[Element]] = {}
    for el in root.iter():
        found: set[str] = set()
        for value in el.attributes.values():
            found |= references_in_value(value)
        if el.tag == "style":
            found |= set(_URL_REF_RE.findall(el.text))
        for ident in found:
            refs.setdefault(ident, []).append(el)
    return refs


class ReferenceScanner:
    """Answers "is this element referenced from outside its own subtree?" for one tree state.

    Build a new scanner after mutating the tree; results are cached per instance.
    """

    def __init__(self, root: Element, mode: ReferenceScanMode = "structural") -> None:
        self.root = root
        self.mode = mode
        self._refs: dict[str, list[Element]] | None = None
        self._text: str | None = None

    def is_referenced(self, el: Element) -> bool:
        if not el.id:
            return False
        if self.mode == "textual":
            return self._textual(el)
        if self._refs is None:
            self._refs = collect_references(self.root)
        return any(not el.contains(r) for r in self._refs.get(el.id, ()))

    def _textual(self, el: Element) -> bool:
        if self._text is None:
            self._text = serialize_svg(self.root)
        # Mask out the element's own markup so self-references don't keep it alive
        rest = self._text.replace(serialize_svg(el), "", 1)
        return f"#{el.id}" in rest
