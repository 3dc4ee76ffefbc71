"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from transform_lab.api import health, operations, pipeline, presets

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(pipeline.router)
api_router.include_router(presets.router)
api_router.include_router(operations.router)
