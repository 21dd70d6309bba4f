"""Pass registry.

Passes run in a fixed chain: by stage, then by id within a stage. Declared
dependencies are not used to reorder anything; they are checked against that
chain, so a pass registered ahead of something it needs fails loudly instead
of running on a half-cleaned tree.

    @cleaning_pass(id="P1.01", stage=Stage.STRIP)
    def strip_comments(ctx: CleanContext) -> None:
        ...
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from svgbuilder.engine.context import CleanContext

logger = logging.getLogger(__name__)

PassFn = Callable[["CleanContext"], None]


class Stage(enum.IntEnum):
    STRIP = 1
    PRUNE = 2
    CANONICALIZE = 3


@dataclass
class PassSpec:
    id: str
    stage: Stage
    fn: PassFn
    dependencies: list[str] = field(default_factory=list)
    tags: set[str] = field(default_factory=set)
    description: str = ""

    @property
    def optional(self) -> bool:
        return "optional" in self.tags

    @property
    def sort_key(self) -> tuple[int, str]:
        return (int(self.stage), self.id)


class PassRegistry:
    """Cleaning passes keyed by id."""

    def __init__(self) -> None:
        self._passes: dict[str, PassSpec] = {}

    def __len__(self) -> int:
        return len(self._passes)

    def __contains__(self, pass_id: object) -> bool:
        return pass_id in self._passes

    def register(self, spec: PassSpec) -> None:
        if spec.id in self._passes:
            raise ValueError(f"Duplicate pass ID: {spec.id}")
        if spec.id in spec.dependencies:
            raise ValueError(f"Pass {spec.id} depends on itself")
        self._passes[spec.id] = spec
        logger.debug("Registered pass %s (%s)", spec.id, spec.stage.name)

    def get(self, pass_id: str) -> PassSpec:
        return self._passes[pass_id]

    def all(self) -> list[PassSpec]:
        return sorted(self._passes.values(), key=lambda s: s.sort_key)

    def chain(self, enabled_optional: Iterable[str] = (), stage: Stage | None = None) -> list[PassSpec]:
        """Passes to run, in order. Optional passes are included only when enabled.

        Raises ValueError if a selected pass depends on one that is unknown,
        disabled, or ordered after it.
        """
        enabled = set(enabled_optional)
        selected = [s for s in self.all() if not s.optional or s.id in enabled]

        position = {s.id: i for i, s in enumerate(selected)}
        for i, spec in enumerate(selected):
            for dep in spec.dependencies:
                if dep not in self._passes:
                    raise ValueError(f"Pass {spec.id} depends on unknown pass {dep}")
                if dep not in position:
                    raise ValueError(f"Pass {spec.id} depends on {dep}, which is not enabled")
                if position[dep] > i:
                    raise ValueError(f"Pass {spec.id} is ordered before its dependency {dep}")

        if stage is not None:
            selected = [s for s in selected if s.stage == stage]
        return selected

    def cleaning_pass(
        self,
        *,
        id: str,
        stage: Stage,
        dependencies: list[str] | None = None,
        tags: set[str] | None = None,
        description: str = "",
    ) -> Callable[[PassFn], PassFn]:
        """Decorator registering the wrapped function under ``id``."""

        def decorator(fn: PassFn) -> PassFn:
            self.register(PassSpec(
                id=id,
                stage=stage,
                fn=fn,
                dependencies=list(dependencies or ()),
                tags=set(tags or ()),
                description=description,
            ))
            return fn

        return decorator


_default_registry = PassRegistry()
cleaning_pass = _default_registry.cleaning_pass


def get_registry() -> PassRegistry:
    return _default_registry
