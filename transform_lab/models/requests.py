"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from transform_lab.models.geometry import ShapePoint
from transform_lab.models.operations import TransformOperation


class RunRequest(BaseModel):
    points: list[ShapePoint] = Field(..., description="Shape vertices in order")
    operations: list[TransformOperation] = Field(
        default_factory=list,
        description="Ordered operations, applied first to last",
    )
    step: int = Field(default=0, description="Selected step; clamped to the history")


class CircleRequest(BaseModel):
    cx: float | str = Field(default=2.0, description="Center x")
    cy: float | str = Field(default=2.0, description="Center y")
    r: float | str = Field(default=1.5, description="Radius")
