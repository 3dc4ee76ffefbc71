"""Transform operation resolution.

Turns one TransformOperation into its step matrix, its display label and its
pivot. Parameters are parsed with the fallback table below before any matrix
is built:

    translate  dx, dy  -> 0
    scale      sx, sy  -> 1
    rotate     angle   -> 0
    shear      shx,shy -> 0
    pivot      cx, cy  -> 0
"""

from __future__ import annotations

from typing import assert_never

from transform_lab.models.operations import (
    Reflect,
    Rotate,
    Scale,
    Shear,
    TransformOperation,
    Translate,
)
from transform_lab.utils import matrix as mx
from transform_lab.utils.parsing import format_number, format_raw, parse_number


def pivot_of(op: TransformOperation) -> tuple[float, float] | None:
    """Pivot of a point-anchored scale/rotate, else None."""
    if isinstance(op, (Scale, Rotate)) and op.anchor == "point":
        return (parse_number(op.cx, 0.0), parse_number(op.cy, 0.0))
    return None


def effective_angle(op: Rotate) -> float:
    """Signed angle in degrees; clockwise turns are negative."""
    deg = parse_number(op.angle, 0.0)
    return -deg if op.direction == "CW" else deg


def resolve_matrix(op: TransformOperation) -> mx.Matrix:
    match op:
        case Translate():
            return mx.translation(parse_number(op.dx, 0.0), parse_number(op.dy, 0.0))
        case Scale():
            base = mx.scaling(parse_number(op.sx, 1.0), parse_number(op.sy, 1.0))
            return _anchored(base, op)
        case Rotate():
            return _anchored(mx.rotation(effective_angle(op)), op)
        case Shear():
            return mx.shear(parse_number(op.shx, 0.0), parse_number(op.shy, 0.0))
        case Reflect():
            return mx.reflection(op.axis)
        case _:
            assert_never(op)


def _anchored(base: mx.Matrix, op: Scale | Rotate) -> mx.Matrix:
    pivot = pivot_of(op)
    if pivot is None:
        return base
    return mx.about_pivot(base, *pivot)


def step_label(op: TransformOperation) -> str:
    match op:
        case Translate():
            return f"Trans({format_raw(op.dx)}, {format_raw(op.dy)})"
        case Scale():
            sx = format_number(parse_number(op.sx, 1.0))
            sy = format_number(parse_number(op.sy, 1.0))
            return f"Scale({sx},{sy}){_pivot_suffix(op)}"
        case Rotate():
            return f"Rot({format_number(effective_angle(op))}°){_pivot_suffix(op)}"
        case Shear():
            return f"Shear({format_raw(op.shx)}, {format_raw(op.shy)})"
        case Reflect():
            return f"Reflect {op.axis}"
        case _:
            assert_never(op)


def _pivot_suffix(op: Scale | Rotate) -> str:
    pivot = pivot_of(op)
    if pivot is None:
        return ""
    return f" @({format_number(pivot[0])},{format_number(pivot[1])})"
