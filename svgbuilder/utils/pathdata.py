"""Path-data text helpers. No engine imports."""

from __future__ import annotations

import re
from collections.abc import Sequence

# A decimal with a fractional part; the integer part may be empty (".5")
_DECIMAL_RE = re.compile(r"(\d*)\.(\d+)")


def _strip_trailing_zeros(match: re.Match[str]) -> str:
    whole, frac = match.group(1), match.group(2).rstrip("0")
    if frac:
        return f"{whole}.{frac}"
    result = whole or "0"
    # "1.0.5" is two numbers; "1.5" would be one
    if match.string[match.end():match.end() + 1] == ".":
        return result + " "
    return result


def canonicalize_path_data(d: str) -> str:
    """Collapse separators to single spaces and strip trailing fractional zeros.

    >>> canonicalize_path_data("10.500000  20,   ,30.00")
    '10.5 20 30'
    """
    text = " ".join(d.replace(",", " ").split())
    return _DECIMAL_RE.sub(_strip_trailing_zeros, text)


def format_number(value: float, precision: int = 3) -> str:
    """Shortest fixed-point rendering: 10.0 → '10', 2.50 → '2.5'."""
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def points_to_path_data(points: Sequence[tuple[float, float]]) -> str:
    """'M x0 y0 L x1 y1 L ...' for an open polyline."""
    if not points:
        return ""
    head, *rest = points
    parts = [f"M {format_number(head[0])} {format_number(head[1])}"]
    parts.extend(f"L {format_number(x)} {format_number(y)}" for x, y in rest)
    return " ".join(parts)
