"""Douglas–Peucker point-sequence simplification."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from svgbuilder.utils.geometry import segment_distances

Point = tuple[float, float]


def simplify(points: Sequence[Point], tolerance: float) -> list[Point]:
    """Reduce ``points`` to the subset needed to stay within ``tolerance`` of the input.

    The first and last points are always kept. Within a range, the intermediate
    point farthest from the chord (lowest index on ties) is kept when its
    distance exceeds ``tolerance`` and the range is split there; otherwise the
    range collapses to its endpoints. Uses an explicit work-list instead of
    recursion, so long strokes cannot exhaust the stack.
    """
    if tolerance < 0:
        raise ValueError(f"tolerance must be non-negative, got {tolerance}")
    if len(points) <= 2:
        return list(points)

    arr = np.asarray(points, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"expected a sequence of (x, y) pairs, got shape {arr.shape}")

    n = len(arr)
    keep = np.zeros(n, dtype=bool)
    keep[0] = keep[n - 1] = True

    stack: list[tuple[int, int]] = [(0, n - 1)]
    while stack:
        lo, hi = stack.pop()
        if hi - lo < 2:
            continue
        distances = segment_distances(arr[lo + 1:hi], arr[lo], arr[hi])
        offset = int(np.argmax(distances))  # first occurrence wins ties
        if distances[offset] > tolerance:
            split = lo + 1 + offset
            keep[split] = True
            stack.append((split, hi))
            stack.append((lo, split))

    return [points[int(i)] for i in np.flatnonzero(keep)]
