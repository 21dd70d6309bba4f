"""P1.04 — Inline style → presentation attributes (opt-in).

Moves simple paint declarations out of ``style`` into attributes of the same
name. Declarations without an attribute equivalent stay in ``style`` verbatim.
"""

from __future__ import annotations

from svgbuilder.engine.context import CleanContext
from svgbuilder.engine.registry import Stage, cleaning_pass


def parse_declaration(item: str) -> tuple[str, str] | None:
    parts = item.split(":")
    if len(parts) != 2:
        return None
    return parts[0].strip(), parts[1].strip()


@cleaning_pass(
    id="P1.04",
    stage=Stage.STRIP,
    dependencies=["P1.03"],
    description="Convert inline style declarations to presentation attributes",
    tags={"optional"},
)
def style_to_attributes(ctx: CleanContext) -> None:
    convertible = ctx.config.convertible_style_properties
    for el in ctx.root.iter():
        style = el.attributes.get("style")
        if style is None:
            continue
        remaining = []
        for item in style.split(";"):
            declaration = parse_declaration(item)
            if declaration is not None and declaration[0] in convertible:
                el.set(*declaration)
                ctx.record("P1.04")
            elif item.strip():
                remaining.append(item.strip())
        if remaining:
            el.set("style", ";".join(remaining))
        else:
            el.remove_attribute("style")
