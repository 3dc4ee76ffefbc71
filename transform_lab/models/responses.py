"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from transform_lab.models.geometry import Point, ShapePoint


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    operation_kinds: list[str] = Field(default_factory=list)


class StepOut(BaseModel):
    index: int
    label: str
    title: str
    points: list[Point]
    # (u, v) in the presentation square
    presentation: list[tuple[float, float]]
    matrix: list[list[float]]
    accumulated: list[list[float]]
    pivot: Point | None = None
    centroid: Point


class ViewportOut(BaseModel):
    min_x: float
    max_x: float
    min_y: float
    max_y: float
    width: float
    height: float


class GridLineOut(BaseModel):
    orientation: str
    model_coordinate: float
    is_axis: bool
    position: float
    label: str


class RunResponse(BaseModel):
    steps: list[StepOut]
    viewport: ViewportOut
    grid_step: int
    grid_lines: list[GridLineOut]
    selected_step: int = 0


class ShapeResponse(BaseModel):
    kind: str
    points: list[ShapePoint]
