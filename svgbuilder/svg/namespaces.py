"""Well-known XML namespaces found in authored SVG files."""

from __future__ import annotations

from svgbuilder.svg.tree import SVG_NS

XML_NS = "http://www.w3.org/XML/1998/namespace"

KNOWN_NAMESPACES: dict[str, str] = {
    "svg": SVG_NS,
    "xlink": "http://www.w3.org/1999/xlink",
    "xhtml": "http://www.w3.org/1999/xhtml",
    "inkscape": "http://www.inkscape.org/namespaces/inkscape",
    "sodipodi": "http://sodipodi.sourceforge.net/DTD/sodipodi-0.0.dtd",
    "sketch": "http://www.bohemiancoding.com/sketch/ns",
    "rdf": "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
    "dc": "http://purl.org/dc/elements/1.1/",
    "cc": "http://creativecommons.org/ns#",
}


def prefix_of(name: str) -> str | None:
    """'inkscape:label' -> 'inkscape'; unprefixed names -> None."""
    if ":" not in name:
        return None
    return name.split(":", 1)[0]
