"""SVG parser — facade over xml.etree.ElementTree.

Converts raw SVG text into a RootElement tree. Names from the SVG namespace
are stored bare; every other namespace keeps the prefix bound in the source.
"""

from __future__ import annotations

import io
import logging
import xml.etree.ElementTree as ET

from svgbuilder.errors import MalformedDocument
from svgbuilder.svg.namespaces import XML_NS
from svgbuilder.svg.tree import SVG_NS, Comment, Element, RootElement, Text

logger = logging.getLogger(__name__)


class _NameTable:
    """Maps Clark-notation names ({uri}local) to prefixed names."""

    def __init__(self, bindings: list[tuple[str, str]]) -> None:
        self.namespaces: dict[str, str] = {}
        self._uri_to_prefix: dict[str, str] = {XML_NS: "xml"}
        for prefix, uri in bindings:
            if uri in self._uri_to_prefix:
                continue
            if prefix in self.namespaces:
                # Prefix rebound further down the document
                self._bind(self._fresh_prefix(), uri)
            else:
                self._bind(prefix, uri)

    def _bind(self, prefix: str, uri: str) -> None:
        self.namespaces[prefix] = uri
        self._uri_to_prefix[uri] = prefix

    def _fresh_prefix(self) -> str:
        n = 0
        while f"ns{n}" in self.namespaces:
            n += 1
        return f"ns{n}"

    def qualify(self, name: str) -> str:
        if not name.startswith("{"):
            return name
        uri, local = name[1:].split("}", 1)
        if uri == SVG_NS:
            return local
        prefix = self._uri_to_prefix.get(uri)
        if prefix is None:
            prefix = self._fresh_prefix()
            self._bind(prefix, uri)
        return f"{prefix}:{local}" if prefix else local


def parse_svg(svg_text: str) -> RootElement:
    """Parse raw SVG text into an element tree. Comments are kept as Comment leaves."""
    try:
        bindings = [ns for _, ns in ET.iterparse(io.StringIO(svg_text), events=("start-ns",))]
        parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
        et_root = ET.fromstring(svg_text, parser=parser)
    except ET.ParseError as e:
        raise MalformedDocument(f"Invalid SVG markup: {e}") from e

    names = _NameTable(bindings)
    tag = names.qualify(et_root.tag)
    if tag.split(":")[-1] != "svg":
        raise MalformedDocument(f"Root element is <{tag}>, expected <svg>")

    root = RootElement(tag, namespaces=names.namespaces)
    _copy_attributes(et_root, root, names)

    # Explicit stack: (source node, destination element)
    stack: list[tuple[ET.Element, Element]] = [(et_root, root)]
    count = 1
    while stack:
        src, dst = stack.pop()
        if src.text:
            dst.append_child(Text(src.text))
        for child in src:
            if child.tag is ET.Comment:
                dst.append_child(Comment(child.text or ""))
            elif isinstance(child.tag, str):
                el = Element(names.qualify(child.tag))
                _copy_attributes(child, el, names)
                dst.append_child(el)
                stack.append((child, el))
                count += 1
            if child.tail:
                dst.append_child(Text(child.tail))

    logger.info("Parsed SVG: %d elements, canvas %.0f×%.0f", count, root.width, root.height)
    return root


def _copy_attributes(src: ET.Element, dst: Element, names: _NameTable) -> None:
    for name, value in src.attrib.items():
        dst.set(names.qualify(name), value)
