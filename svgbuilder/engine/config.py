"""Cleaner configuration — vocabularies, deny-lists and pass gating."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

# SVG 1.1 + SVG 2 element vocabulary
SVG_TAGS = frozenset({
    "a", "altGlyph", "altGlyphDef", "altGlyphItem", "animate", "animateColor",
    "animateMotion", "animateTransform", "circle", "clipPath", "color-profile",
    "cursor", "defs", "desc", "discard", "ellipse", "feBlend", "feColorMatrix",
    "feComponentTransfer", "feComposite", "feConvolveMatrix", "feDiffuseLighting",
    "feDisplacementMap", "feDistantLight", "feDropShadow", "feFlood", "feFuncA",
    "feFuncB", "feFuncG", "feFuncR", "feGaussianBlur", "feImage", "feMerge",
    "feMergeNode", "feMorphology", "feOffset", "fePointLight", "feSpecularLighting",
    "feSpotLight", "feTile", "feTurbulence", "filter", "font", "font-face",
    "font-face-format", "font-face-name", "font-face-src", "font-face-uri",
    "foreignObject", "g", "glyph", "glyphRef", "hkern", "image", "line",
    "linearGradient", "marker", "mask", "metadata", "missing-glyph", "mpath",
    "path", "pattern", "polygon", "polyline", "radialGradient", "rect", "script",
    "set", "stop", "style", "svg", "switch", "symbol", "text", "textPath",
    "title", "tref", "tspan", "use", "view", "vkern",
})

# Attributes that make an otherwise empty element worth keeping
GEOMETRY_ATTRIBUTES = (
    "d", "points", "x", "y", "width", "height",
    "r", "rx", "ry", "cx", "cy", "x1", "y1", "x2", "y2",
)

# Inline style properties that map 1:1 onto presentation attributes
CONVERTIBLE_STYLE_PROPERTIES = (
    "fill", "stroke", "stroke-width", "opacity",
    "fill-opacity", "stroke-opacity", "stroke-linecap",
    "stroke-linejoin", "stroke-dasharray",
)

ReferenceScanMode = Literal["structural", "textual"]


@dataclass
class CleanerConfig:
    """Controls which passes run and what each pass considers dead weight."""

    svg_tags: frozenset[str] = SVG_TAGS

    # Authoring-tool metadata: exact attribute names and name prefixes
    denied_attributes: tuple[str, ...] = ("data-name", "sketch:type")
    denied_attribute_prefixes: tuple[str, ...] = ("data-", "inkscape:", "sodipodi:")
    # Root namespace bindings dropped once nothing uses the prefix
    denied_namespaces: tuple[str, ...] = (
        "xlink", "svg", "sodipodi", "inkscape", "sketch", "rdf", "dc", "cc",
    )

    container_tags: tuple[str, ...] = ("g",)
    geometry_attributes: tuple[str, ...] = GEOMETRY_ATTRIBUTES
    definitions_tag: str = "defs"
    # Definitions children that take effect without being referenced
    always_live_definitions: tuple[str, ...] = ("style", "script")

    # attribute -> tags it is canonicalized on (None = any tag)
    path_data_attributes: dict[str, tuple[str, ...] | None] = field(
        default_factory=lambda: {"d": None, "points": ("polyline", "polygon")}
    )

    reference_scan: ReferenceScanMode = "structural"
    id_prefix: str = "id-"

    convertible_style_properties: tuple[str, ...] = CONVERTIBLE_STYLE_PROPERTIES

    # Passes tagged "optional" only run when listed here
    enabled_optional: set[str] = field(default_factory=set)

    @classmethod
    def from_settings(cls, settings) -> CleanerConfig:
        return cls(reference_scan=settings.reference_scan, id_prefix=settings.id_prefix)
