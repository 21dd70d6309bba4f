"""Dead-node predicates and post-order removal shared by the prune passes.

Definitions containers and anything referenced from outside its own subtree
are protected, together with their descendants. A gradient's ``<stop>`` or a
filter's primitives carry no geometry but are still what the reference draws;
whether a definition lives is decided by the unused-definitions pass alone.
"""

from __future__ import annotations

import logging
from typing import Callable

from svgbuilder.engine.config import CleanerConfig
from svgbuilder.engine.references import ReferenceScanner
from svgbuilder.svg.tree import Element

logger = logging.getLogger(__name__)

DeadPredicate = Callable[[Element, CleanerConfig], bool]


def is_dead_container(el: Element, config: CleanerConfig) -> bool:
    return el.tag in config.container_tags and not el.has_content()


def is_dead_leaf(el: Element, config: CleanerConfig) -> bool:
    if el.has_content():
        return False
    return not any(el.has(name) for name in config.geometry_attributes)


def is_dead(el: Element, config: CleanerConfig) -> bool:
    return is_dead_container(el, config) or is_dead_leaf(el, config)


def protected_nodes(root: Element, config: CleanerConfig) -> set[int]:
    """Identities of elements the dead-node sweeps must leave alone."""
    scanner = ReferenceScanner(root, mode=config.reference_scan)
    protected: set[int] = set()
    for el in root.iter():
        if el is root or id(el) in protected:
            continue
        if el.tag == config.definitions_tag or scanner.is_referenced(el):
            protected.update(id(node) for node in el.iter())
    return protected


def prune_post_order(root: Element, is_dead: Callable[[Element], bool]) -> int:
    """Remove every non-root element for which ``is_dead`` holds, children before parents.

    Reversed pre-order visits all descendants of a node before the node itself,
    so a parent emptied by removals is caught in the same sweep.
    """
    removed = 0
    for el in reversed(list(root.iter())):
        if el is root:
            continue
        if is_dead(el):
            el.detach()
            removed += 1
    return removed


def sweep(root: Element, config: CleanerConfig, predicate: DeadPredicate) -> int:
    """Prune unprotected dead nodes until none remain.

    Removing a dead referencer can leave its target unreferenced, so protection
    is recomputed and the sweep repeated until a round removes nothing.
    """
    total = 0
    while True:
        protected = protected_nodes(root, config)
        removed = prune_post_order(root, lambda el: id(el) not in protected and predicate(el, config))
        if not removed:
            return total
        logger.debug("Sweep removed %d nodes", removed)
        total += removed
