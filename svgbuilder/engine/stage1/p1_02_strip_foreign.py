"""P1.02 — Strip foreign content.

Anything outside the SVG tag vocabulary (XHTML pasted into the document,
RDF blocks, editor-private elements such as sodipodi:namedview) is removed
together with its subtree. The root is exempt.
"""

from __future__ import annotations

from svgbuilder.engine.config import CleanerConfig
from svgbuilder.engine.context import CleanContext
from svgbuilder.engine.registry import Stage, cleaning_pass
from svgbuilder.svg.namespaces import prefix_of
from svgbuilder.svg.tree import Element


def is_foreign(tag: str, config: CleanerConfig) -> bool:
    prefix = prefix_of(tag)
    if prefix is not None and prefix != "svg":
        return True
    local = tag.split(":", 1)[-1]
    return local not in config.svg_tags


@cleaning_pass(
    id="P1.02",
    stage=Stage.STRIP,
    dependencies=["P1.01"],
    description="Remove elements outside the SVG vocabulary",
    tags={"default"},
)
def strip_foreign(ctx: CleanContext) -> None:
    stack: list[Element] = [ctx.root]
    while stack:
        el = stack.pop()
        for child in el.element_children:
            if is_foreign(child.tag, ctx.config):
                el.remove_child(child)
                ctx.record("P1.02")
            else:
                stack.append(child)
