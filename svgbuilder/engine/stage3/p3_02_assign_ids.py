"""P3.02 — Assign missing identifiers.

Every element except the root ends up with an id. New ids follow
``<prefix><n>`` in document order and never collide with existing ones.
"""

from __future__ import annotations

from svgbuilder.engine.context import CleanContext
from svgbuilder.engine.registry import Stage, cleaning_pass


@cleaning_pass(
    id="P3.02",
    stage=Stage.CANONICALIZE,
    dependencies=["P3.01"],
    description="Give every non-root element a unique id",
    tags={"default"},
)
def assign_ids(ctx: CleanContext) -> None:
    for el in ctx.root.iter():
        if el is ctx.root or el.id:
            continue
        el.id = ctx.next_id()
        ctx.record("P3.02")
