"""Pipeline orchestrator — runs cleaning passes in dependency order."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from svgbuilder.engine.config import CleanerConfig
from svgbuilder.engine.context import CleanContext
from svgbuilder.engine.registry import PassRegistry, PassSpec, Stage, get_registry
from svgbuilder.svg.parser import parse_svg
from svgbuilder.svg.serializer import serialize_svg
from svgbuilder.svg.tree import RootElement, check_invariants

logger = logging.getLogger(__name__)

_STAGE_PACKAGES = ["stage1", "stage2", "stage3"]


class Pipeline:
    """Orchestrates the cleaning passes."""

    def __init__(
        self,
        registry: PassRegistry | None = None,
        config: CleanerConfig | None = None,
    ) -> None:
        self.registry = registry if registry is not None else get_registry()
        self.config = config or CleanerConfig()

    def run(self, root: RootElement) -> CleanContext:
        """Validate ``root`` and clean a deep copy of it. The caller's tree is never touched."""
        check_invariants(root)
        ctx = CleanContext(root=root.clone(), config=self.config)
        start = time.perf_counter()

        ordered = self._ordered_passes()
        logger.info("Pipeline: %d passes queued", len(ordered))

        for spec in ordered:
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
            except Exception:
                logger.exception("  %s FAILED", spec.id)
                raise
            ctx.completed_passes.append(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s completed in %.1fms (%d changes)", spec.id, elapsed, ctx.changes.get(spec.id, 0))

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d passes, %d changes in %.0fms",
            len(ctx.completed_passes),
            sum(ctx.changes.values()),
            total,
        )
        return ctx

    def run_stage(self, root: RootElement, stage: Stage) -> CleanContext:
        """Run only the enabled passes of one stage, in chain order."""
        check_invariants(root)
        ctx = CleanContext(root=root.clone(), config=self.config)
        for spec in self.registry.chain(self.config.enabled_optional, stage=stage):
            spec.fn(ctx)
            ctx.completed_passes.append(spec.id)
        return ctx

    def _ordered_passes(self) -> list[PassSpec]:
        return self.registry.chain(self.config.enabled_optional)


def load_passes() -> None:
    """Import all pass modules so @cleaning_pass decorators fire."""
    for stage_name in _STAGE_PACKAGES:
        package_name = f"svgbuilder.engine.{stage_name}"
        package = importlib.import_module(package_name)
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package_name}.{module_name}")


def create_pipeline(config: CleanerConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline over the registered passes."""
    load_passes()
    return Pipeline(config=config)


def optimize(root: RootElement, config: CleanerConfig | None = None) -> RootElement:
    """Return the smallest structurally-equivalent copy of ``root``."""
    return create_pipeline(config).run(root).root


def optimize_svg(svg_text: str, config: CleanerConfig | None = None) -> str:
    """Parse, clean and re-serialize SVG markup. Raises MalformedDocument."""
    return serialize_svg(optimize(parse_svg(svg_text), config))
