"""P3.03 — Normalize viewBox (opt-in).

Pixel-suffixed root dimensions become bare numbers, and a root with width and
height but no viewBox gets ``0 0 width height``.
"""

from __future__ import annotations

import re

from svgbuilder.engine.context import CleanContext
from svgbuilder.engine.registry import Stage, cleaning_pass

_PX_RE = re.compile(r"^\s*([-+]?[\d.]+(?:[eE][-+]?\d+)?)px\s*$")


@cleaning_pass(
    id="P3.03",
    stage=Stage.CANONICALIZE,
    dependencies=["P3.02"],
    description="Strip px units from root dimensions and ensure a viewBox",
    tags={"optional"},
)
def normalize_viewbox(ctx: CleanContext) -> None:
    root = ctx.root
    for attr in ("width", "height"):
        value = root.attributes.get(attr)
        match = _PX_RE.match(value) if value else None
        if match:
            root.set(attr, match.group(1))
            ctx.record("P3.03")

    width = root.attributes.get("width")
    height = root.attributes.get("height")
    if "viewBox" not in root.attributes and width and height:
        root.set("viewBox", f"0 0 {width} {height}")
        ctx.record("P3.03")
