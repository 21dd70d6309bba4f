"""Freehand stroke finalization — discard, degrade to a line, or simplify to a path."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

import numpy as np

from svgbuilder.svg.tree import Element
from svgbuilder.utils.geometry import polyline_length
from svgbuilder.utils.pathdata import format_number, points_to_path_data
from svgbuilder.utils.simplify import Point, simplify

logger = logging.getLogger(__name__)

# Policy constants, overridable through Settings
DEFAULT_TOLERANCE = 2.0
DEFAULT_DENSE_THRESHOLD = 20


@dataclass(frozen=True)
class Discarded:
    kind = "discarded"

    @property
    def points(self) -> tuple[Point, ...]:
        return ()


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    kind = "line"

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.start, self.end)

    @property
    def length(self) -> float:
        return polyline_length(np.asarray(self.points, dtype=np.float64))


@dataclass(frozen=True)
class Path:
    points: tuple[Point, ...]
    kind = "path"

    @property
    def length(self) -> float:
        return polyline_length(np.asarray(self.points, dtype=np.float64))


StrokeResult = Union[Discarded, Line, Path]


def finalize_stroke(
    points: Sequence[Point],
    tolerance: float = DEFAULT_TOLERANCE,
    dense_threshold: int = DEFAULT_DENSE_THRESHOLD,
) -> StrokeResult:
    """Classify a captured stroke.

    0-1 points are discarded, 2 become a line, up to ``dense_threshold`` points
    become a path verbatim, and denser strokes are simplified first.
    """
    captured = [(float(x), float(y)) for x, y in points]
    n = len(captured)
    if n <= 1:
        return Discarded()
    if n == 2:
        return Line(captured[0], captured[1])
    if n <= dense_threshold:
        return Path(tuple(captured))

    simplified = simplify(captured, tolerance)
    logger.debug("Stroke simplified: %d -> %d points (tolerance %.2f)", n, len(simplified), tolerance)
    return Path(tuple(simplified))


def stroke_to_element(
    result: StrokeResult,
    stroke: str = "black",
    stroke_width: str = "2",
) -> Element | None:
    """Drawable element for a finalized stroke; None when it was discarded."""
    style = {"fill": "none", "stroke": stroke, "stroke-width": stroke_width}
    if isinstance(result, Line):
        (x1, y1), (x2, y2) = result.start, result.end
        return Element(
            "line",
            {
                "x1": format_number(x1),
                "y1": format_number(y1),
                "x2": format_number(x2),
                "y2": format_number(y2),
                **style,
            },
        )
    if isinstance(result, Path):
        return Element("path", {"d": points_to_path_data(result.points), **style})
    return None
