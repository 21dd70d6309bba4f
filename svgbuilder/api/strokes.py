"""POST /api/strokes/finalize — classify and simplify a freehand stroke."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from svgbuilder.config import Settings
from svgbuilder.dependencies import get_settings
from svgbuilder.models.requests import FinalizeStrokeRequest
from svgbuilder.models.responses import FinalizeStrokeResponse
from svgbuilder.svg.serializer import serialize_svg
from svgbuilder.svg.stroke import finalize_stroke, stroke_to_element

router = APIRouter()


@router.post("/strokes/finalize", response_model=FinalizeStrokeResponse)
async def finalize(
    req: FinalizeStrokeRequest,
    settings: Settings = Depends(get_settings),
) -> FinalizeStrokeResponse:
    tolerance = req.tolerance if req.tolerance is not None else settings.stroke_tolerance
    threshold = req.dense_threshold if req.dense_threshold is not None else settings.stroke_dense_threshold

    result = finalize_stroke(req.points, tolerance=tolerance, dense_threshold=threshold)
    element = stroke_to_element(result)

    return FinalizeStrokeResponse(
        kind=result.kind,
        points=list(result.points),
        element=serialize_svg(element) if element is not None else None,
    )
