"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class OptimizeRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    options: dict[str, bool] = Field(
        default_factory=dict,
        description="Opt-in passes by id (e.g., {'P3.03': true})",
    )


class FinalizeStrokeRequest(BaseModel):
    points: list[tuple[float, float]] = Field(..., description="Captured (x, y) samples in time order")
    tolerance: float | None = Field(default=None, ge=0, description="Simplification tolerance")
    dense_threshold: int | None = Field(default=None, ge=2, description="Point count above which strokes are simplified")
