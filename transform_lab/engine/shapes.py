"""Shape presets and the circle polygon generator."""

from __future__ import annotations

import math
from typing import Literal

from transform_lab.models.geometry import CircleParams, ShapePoint
from transform_lab.utils.parsing import read_number

PresetKind = Literal["line", "triangle", "square", "circle", "custom"]

_PRESETS: dict[str, tuple[tuple[float, float], ...]] = {
    "line": ((1, 1), (4, 3)),
    "triangle": ((1, 1), (4, 1), (2.5, 4)),
    "square": ((1, 1), (4, 1), (4, 4), (1, 4)),
    "custom": ((0, 0), (2, 0), (2, 2), (0, 2), (-1, 1)),
}

PRESET_KINDS: tuple[str, ...] = ("line", "triangle", "square", "circle", "custom")


def circle_points(cx: float, cy: float, r: float, segments: int = 36) -> list[ShapePoint]:
    """Regular polygon approximation, starting at angle 0 and going CCW."""
    points = []
    for i in range(segments):
        theta = i / segments * 2 * math.pi
        points.append(ShapePoint(x=cx + r * math.cos(theta), y=cy + r * math.sin(theta)))
    return points


def _read(value: float | str, fallback: float) -> float:
    number = read_number(value)
    return fallback if number is None else number


def circle_from_params(params: CircleParams, segments: int = 36) -> list[ShapePoint]:
    """Polygon for stored parameters.

    Numeric values are used as given, so r=0 collapses onto the center;
    unreadable ones fall back to cx, cy -> 0 and r -> 1.
    """
    return circle_points(
        _read(params.cx, 0.0),
        _read(params.cy, 0.0),
        _read(params.r, 1.0),
        segments,
    )


def preset_points(
    kind: str,
    circle: CircleParams | None = None,
    segments: int = 36,
) -> list[ShapePoint]:
    """Vertices for a named preset. Unknown kinds give a single origin point."""
    if kind == "circle":
        return circle_from_params(circle or CircleParams(), segments)
    coords = _PRESETS.get(kind, ((0.0, 0.0),))
    return [ShapePoint(x=float(x), y=float(y)) for x, y in coords]
