"""P2.01 — Prune dead containers.

A group with no element children and no non-blank text renders nothing.
Post-order sweeps also catch parents emptied by the removal of their last
child group. Definitions and referenced elements are left alone.
"""

from __future__ import annotations

from svgbuilder.engine.context import CleanContext
from svgbuilder.engine.pruning import is_dead_container, sweep
from svgbuilder.engine.registry import Stage, cleaning_pass


@cleaning_pass(
    id="P2.01",
    stage=Stage.PRUNE,
    dependencies=["P1.03"],
    description="Remove empty groups",
    tags={"default"},
)
def prune_dead_containers(ctx: CleanContext) -> None:
    removed = sweep(ctx.root, ctx.config, is_dead_container)
    ctx.record("P2.01", removed)
