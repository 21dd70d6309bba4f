"""P2.03 — Prune unused definitions.

Children of a definitions container are only ever drawn through a reference.
A child with no identifier, or whose identifier nobody outside its own subtree
references, is removed (style and script blocks apply without a reference and
are kept). Removing one definition can orphan another that only it
referenced, so the scan repeats until nothing changes. Emptied containers are
removed, then the dead-node sweep runs again for ancestors they leave empty;
that sweep can itself drop the last referencer of a definition, hence the
outer loop.
"""

from __future__ import annotations

import logging

from svgbuilder.engine.config import CleanerConfig
from svgbuilder.engine.context import CleanContext
from svgbuilder.engine.pruning import is_dead, sweep
from svgbuilder.engine.references import ReferenceScanner
from svgbuilder.engine.registry import Stage, cleaning_pass
from svgbuilder.svg.tree import Element

logger = logging.getLogger(__name__)


def _containers(root: Element, config: CleanerConfig) -> list[Element]:
    return [el for el in root.iter() if el.tag == config.definitions_tag and el is not root]


def _drop_unreferenced(root: Element, config: CleanerConfig) -> int:
    removed = 0
    changed = True
    while changed:
        changed = False
        scanner = ReferenceScanner(root, mode=config.reference_scan)
        for defs in _containers(root, config):
            for item in defs.element_children:
                if item.tag in config.always_live_definitions:
                    continue
                if not scanner.is_referenced(item):
                    logger.debug("Dropping unreferenced <%s id=%r>", item.tag, item.id)
                    defs.remove_child(item)
                    removed += 1
                    changed = True
    return removed


@cleaning_pass(
    id="P2.03",
    stage=Stage.PRUNE,
    dependencies=["P2.02"],
    description="Remove unreferenced definitions",
    tags={"default"},
)
def prune_unused_defs(ctx: CleanContext) -> None:
    config = ctx.config
    root = ctx.root

    while True:
        removed = _drop_unreferenced(root, config)
        # Innermost first, so a container holding only an emptied one goes too
        for defs in reversed(_containers(root, config)):
            if not defs.has_content():
                defs.detach()
                removed += 1
        if not removed:
            return
        ctx.record("P2.03", removed)

        swept = sweep(root, config, is_dead)
        ctx.record("P2.03", swept)
        if not swept:
            return
