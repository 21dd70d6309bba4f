"""P1.01 — Strip comments.

Removes every comment leaf anywhere in the tree.
"""

from __future__ import annotations

from svgbuilder.engine.context import CleanContext
from svgbuilder.engine.registry import Stage, cleaning_pass
from svgbuilder.svg.tree import Comment


@cleaning_pass(
    id="P1.01",
    stage=Stage.STRIP,
    description="Remove comment leaves",
    tags={"default"},
)
def strip_comments(ctx: CleanContext) -> None:
    for el in ctx.root.iter():
        kept = [c for c in el.children if not isinstance(c, Comment)]
        ctx.record("P1.01", len(el.children) - len(kept))
        el.children[:] = kept
