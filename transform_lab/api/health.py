"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from transform_lab import __version__
from transform_lab.models.operations import OPERATION_TYPES
from transform_lab.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        operation_kinds=list(OPERATION_TYPES),
    )
