"""P3.01 — Canonicalize path data.

Separators collapse to single spaces and trailing fractional zeros go
(``10.50`` → ``10.5``, ``10.00`` → ``10``). Integers are left alone.
"""

from __future__ import annotations

from svgbuilder.engine.context import CleanContext
from svgbuilder.engine.registry import Stage, cleaning_pass
from svgbuilder.utils.pathdata import canonicalize_path_data


@cleaning_pass(
    id="P3.01",
    stage=Stage.CANONICALIZE,
    dependencies=["P2.03"],
    description="Collapse separators and strip trailing zeros in path data",
    tags={"default"},
)
def canonicalize_paths(ctx: CleanContext) -> None:
    targets = ctx.config.path_data_attributes
    for el in ctx.root.iter():
        for attr, tags in targets.items():
            value = el.attributes.get(attr)
            if value is None or (tags is not None and el.tag not in tags):
                continue
            canonical = canonicalize_path_data(value)
            if canonical != value:
                el.set(attr, canonical)
                ctx.record("P3.01")
