"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def segment_distances(
    points: NDArray[np.float64],
    start: NDArray[np.float64],
    end: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Distance from each point to the segment start→end.

    The projection parameter is clamped to [0, 1], so points beyond either end
    measure to the nearer endpoint. Inside the segment the distance is
    |cross| / length, which is exactly zero for exactly collinear input.
    """
    if len(points) == 0:
        return np.empty(0)

    chord = end - start
    length_sq = float(np.dot(chord, chord))
    rel = points - start

    if length_sq == 0.0:
        # Degenerate chord: plain distance to the shared endpoint
        return np.hypot(rel[:, 0], rel[:, 1])

    t = (rel @ chord) / length_sq
    cross = np.abs(chord[0] * rel[:, 1] - chord[1] * rel[:, 0]) / np.sqrt(length_sq)

    to_end = points - end
    before = np.hypot(rel[:, 0], rel[:, 1])
    after = np.hypot(to_end[:, 0], to_end[:, 1])

    return np.where(t < 0.0, before, np.where(t > 1.0, after, cross))


def polyline_length(points: NDArray[np.float64]) -> float:
    """Total length of an open polyline."""
    if len(points) < 2:
        return 0.0
    diffs = np.diff(points, axis=0)
    return float(np.sum(np.sqrt(np.sum(diffs**2, axis=1))))
