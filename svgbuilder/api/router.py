"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from svgbuilder.api import health, optimize, strokes

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(optimize.router)
api_router.include_router(strokes.router)
