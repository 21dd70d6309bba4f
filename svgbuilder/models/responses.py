"""API response models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    passes_registered: int = 0


class OptimizeResponse(BaseModel):
    svg: str
    processing_time_ms: float = 0.0
    passes_completed: list[str] = Field(default_factory=list)
    changes: dict[str, int] = Field(default_factory=dict)


class FinalizeStrokeResponse(BaseModel):
    kind: Literal["discarded", "line", "path"]
    points: list[tuple[float, float]] = Field(default_factory=list)
    element: str | None = None
