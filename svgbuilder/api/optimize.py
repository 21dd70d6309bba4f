"""POST /api/optimize — clean an SVG document."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from svgbuilder.config import Settings
from svgbuilder.dependencies import get_settings
from svgbuilder.engine.config import CleanerConfig
from svgbuilder.engine.pipeline import create_pipeline
from svgbuilder.errors import MalformedDocument
from svgbuilder.models.requests import OptimizeRequest
from svgbuilder.models.responses import OptimizeResponse
from svgbuilder.svg.parser import parse_svg
from svgbuilder.svg.serializer import serialize_svg

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/optimize", response_model=OptimizeResponse)
async def optimize(req: OptimizeRequest, settings: Settings = Depends(get_settings)) -> OptimizeResponse:
    start = time.perf_counter()

    config = CleanerConfig.from_settings(settings)
    config.enabled_optional = {pass_id for pass_id, enabled in req.options.items() if enabled}

    try:
        ctx = create_pipeline(config).run(parse_svg(req.svg))
    except MalformedDocument as e:
        logger.warning("Rejected document: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000
    return OptimizeResponse(
        svg=serialize_svg(ctx.root),
        processing_time_ms=round(elapsed, 2),
        passes_completed=ctx.completed_passes,
        changes=ctx.changes,
    )
