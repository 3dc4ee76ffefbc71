"""Adaptive gridlines for a fitted viewport."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

from transform_lab.engine.viewport import Viewport
from transform_lab.utils.parsing import format_number

Orientation = Literal["vertical", "horizontal"]


@dataclass(frozen=True)
class GridLine:
    orientation: Orientation
    model_coordinate: float
    is_axis: bool
    # u for vertical lines, v for horizontal ones
    position: float

    @property
    def label(self) -> str:
        return format_number(round(self.model_coordinate, 1))


def _is_finite(viewport: Viewport) -> bool:
    values = (
        viewport.min_x,
        viewport.max_x,
        viewport.min_y,
        viewport.max_y,
        viewport.width,
        viewport.height,
    )
    return all(math.isfinite(v) for v in values)


def grid_step(viewport: Viewport, divisions: int = 10) -> int:
    """Whole-unit spacing giving roughly ``divisions`` lines per axis, at least 1.

    A viewport whose bounds or extent overflow gets 1 and no lines.
    """
    if not _is_finite(viewport):
        return 1
    extent = max(viewport.width, viewport.height)
    return max(1, math.ceil(extent / divisions))


def _coordinates(lo: float, hi: float, step: int) -> list[float]:
    start = math.floor(lo / step) * step
    values = []
    k = 0
    while start + k * step <= hi:
        values.append(float(start + k * step))
        k += 1
    return values


def grid_lines(viewport: Viewport, divisions: int = 10) -> list[GridLine]:
    """Vertical lines over x first, then horizontal lines over y."""
    if not _is_finite(viewport):
        return []

    step = grid_step(viewport, divisions)
    lines = [
        GridLine("vertical", x, x == 0, viewport.map_x(x))
        for x in _coordinates(viewport.min_x, viewport.max_x, step)
    ]
    lines.extend(
        GridLine("horizontal", y, y == 0, viewport.map_y(y))
        for y in _coordinates(viewport.min_y, viewport.max_y, step)
    )
    return lines
