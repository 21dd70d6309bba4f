"""Error taxonomy for the simplification core."""

from __future__ import annotations


class SvgBuilderError(Exception):
    """Base class for all svgbuilder errors."""


class MalformedDocument(SvgBuilderError, ValueError):
    """Input violates the tree invariants (unique ids, consistent tree shape) or is not SVG."""


class NotFound(SvgBuilderError, KeyError):
    """Identifier lookup against a tree with no matching element."""

    def __init__(self, element_id: str) -> None:
        super().__init__(element_id)
        self.element_id = element_id

    def __str__(self) -> str:
        return f"No element with id {self.element_id!r}"
