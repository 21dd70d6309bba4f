"""Write SVG markup from an element tree."""

from __future__ import annotations

from xml.sax.saxutils import escape

from svgbuilder.svg.namespaces import KNOWN_NAMESPACES, prefix_of
from svgbuilder.svg.tree import Comment, Element, RootElement, Text

_ATTR_ENTITIES = {'"': "&quot;", "\n": "&#10;", "\t": "&#9;"}


def serialize_svg(root: Element, xml_declaration: bool = False) -> str:
    """Serialize a tree to markup. Namespace bindings are emitted on the root only."""
    parts: list[str] = []
    if xml_declaration:
        parts.append('<?xml version="1.0" encoding="UTF-8"?>\n')

    declarations = _namespace_declarations(root)

    # Explicit stack of pending work: a node to open, or a closing tag string
    stack: list[Element | Text | Comment | str] = [root]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Text):
            parts.append(escape(item.value))
        elif isinstance(item, Comment):
            parts.append(f"<!--{item.value}-->")
        else:
            attrs = declarations if item is root else []
            attrs = attrs + _attribute_pairs(item)
            attr_str = "".join(f' {k}="{escape(v, _ATTR_ENTITIES)}"' for k, v in attrs)
            if not item.children:
                parts.append(f"<{item.tag}{attr_str}/>")
                continue
            parts.append(f"<{item.tag}{attr_str}>")
            stack.append(f"</{item.tag}>")
            stack.extend(reversed(item.children))

    return "".join(parts)


def _attribute_pairs(el: Element) -> list[tuple[str, str]]:
    pairs = [("id", el.id)] if el.id is not None else []
    pairs.extend(el.attributes.items())
    return pairs


def _namespace_declarations(root: Element) -> list[tuple[str, str]]:
    if not isinstance(root, RootElement):
        return []
    namespaces = dict(root.namespaces)

    # Prefixes in use but never declared (e.g. set programmatically) get their well-known URI
    for prefix in sorted(used_prefixes(root)):
        if prefix not in namespaces and prefix in KNOWN_NAMESPACES:
            namespaces[prefix] = KNOWN_NAMESPACES[prefix]

    decls: list[tuple[str, str]] = []
    for prefix, uri in namespaces.items():
        decls.append(("xmlns" if not prefix else f"xmlns:{prefix}", uri))
    return decls


def used_prefixes(root: Element) -> set[str]:
    """Every namespace prefix appearing in a tag or attribute name, excluding 'xml'."""
    found: set[str] = set()
    for el in root.iter():
        for name in (el.tag, *el.attributes):
            prefix = prefix_of(name)
            if prefix and prefix != "xml":
                found.add(prefix)
    return found
