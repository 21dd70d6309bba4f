"""P2.02 — Prune dead leaves.

Removes non-root elements that have no content and none of the
geometry-significant attributes (position, size, radius, path data, endpoints).
Children of a definitions container, such as gradient stops and filter
primitives, are out of reach: P2.03 decides whether a definition lives.
"""

from __future__ import annotations

from svgbuilder.engine.context import CleanContext
from svgbuilder.engine.pruning import is_dead_leaf, sweep
from svgbuilder.engine.registry import Stage, cleaning_pass


@cleaning_pass(
    id="P2.02",
    stage=Stage.PRUNE,
    dependencies=["P2.01"],
    description="Remove empty elements without geometry",
    tags={"default"},
)
def prune_dead_leaves(ctx: CleanContext) -> None:
    removed = sweep(ctx.root, ctx.config, is_dead_leaf)
    ctx.record("P2.02", removed)
