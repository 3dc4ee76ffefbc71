"""Shape and point models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Point(BaseModel):
    """A parsed model-space point."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class ShapePoint(BaseModel):
    """A caller-editable shape vertex; coordinates may still be raw text."""

    model_config = ConfigDict(frozen=True)

    x: float | str = 0.0
    y: float | str = 0.0


class CircleParams(BaseModel):
    """Circle preset parameters, kept as entered."""

    model_config = ConfigDict(frozen=True)

    cx: float | str = 2.0
    cy: float | str = 2.0
    r: float | str = 1.5
