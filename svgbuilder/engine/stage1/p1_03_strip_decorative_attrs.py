"""P1.03 — Strip decorative attributes.

Authoring-tool metadata (data-*, inkscape:*, sodipodi:*, sketch:type) carries
nothing the renderer uses. Empty style attributes go too, and namespace
bindings for those tools are dropped from the root once no name uses them.
"""

from __future__ import annotations

from svgbuilder.engine.config import CleanerConfig
from svgbuilder.engine.context import CleanContext
from svgbuilder.engine.registry import Stage, cleaning_pass
from svgbuilder.svg.serializer import used_prefixes


def is_decorative(name: str, config: CleanerConfig) -> bool:
    if name in config.denied_attributes:
        return True
    return any(name.startswith(prefix) for prefix in config.denied_attribute_prefixes)


@cleaning_pass(
    id="P1.03",
    stage=Stage.STRIP,
    dependencies=["P1.02"],
    description="Remove authoring-tool attributes and empty styles",
    tags={"default"},
)
def strip_decorative_attrs(ctx: CleanContext) -> None:
    config = ctx.config
    for el in ctx.root.iter():
        for name in list(el.attributes):
            if is_decorative(name, config):
                el.remove_attribute(name)
                ctx.record("P1.03")
        style = el.attributes.get("style")
        if style is not None and not style.strip():
            el.remove_attribute("style")
            ctx.record("P1.03")

    in_use = used_prefixes(ctx.root)
    for prefix in config.denied_namespaces:
        if prefix in ctx.root.namespaces and prefix not in in_use:
            del ctx.root.namespaces[prefix]
            ctx.record("P1.03")
