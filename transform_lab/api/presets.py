"""Shape preset endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from transform_lab.dependencies import get_engine
from transform_lab.engine.pipeline import TransformEngine
from transform_lab.engine.shapes import PresetKind, circle_from_params, preset_points
from transform_lab.models.geometry import CircleParams
from transform_lab.models.requests import CircleRequest
from transform_lab.models.responses import ShapeResponse

router = APIRouter(prefix="/presets")


@router.post("/circle", response_model=ShapeResponse)
async def circle(req: CircleRequest, engine: TransformEngine = Depends(get_engine)) -> ShapeResponse:
    params = CircleParams(cx=req.cx, cy=req.cy, r=req.r)
    points = circle_from_params(params, engine.config.circle_segments)
    return ShapeResponse(kind="circle", points=points)


@router.get("/{kind}", response_model=ShapeResponse)
async def preset(kind: PresetKind, engine: TransformEngine = Depends(get_engine)) -> ShapeResponse:
    return ShapeResponse(
        kind=kind,
        points=preset_points(kind, segments=engine.config.circle_segments),
    )
