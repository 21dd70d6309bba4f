"""SVG Builder document simplification engine."""

from svgbuilder.engine.registry import cleaning_pass, Stage, get_registry
from svgbuilder.engine.context import CleanContext
from svgbuilder.engine.config import CleanerConfig
from svgbuilder.engine.pipeline import Pipeline, create_pipeline, optimize, optimize_svg

__all__ = [
    "cleaning_pass",
    "Stage",
    "get_registry",
    "CleanContext",
    "CleanerConfig",
    "Pipeline",
    "create_pipeline",
    "optimize",
    "optimize_svg",
]
