"""3x3 homogeneous matrix helpers. No engine imports.

Every factory returns a float64 array whose bottom row is [0, 0, 1].
Composition order matters: ``multiply(a, b)`` applies ``b`` first.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

Matrix = NDArray[np.float64]

_REFLECTIONS: dict[str, tuple[tuple[float, ...], ...]] = {
    "x-axis": ((1, 0, 0), (0, -1, 0), (0, 0, 1)),
    "y-axis": ((-1, 0, 0), (0, 1, 0), (0, 0, 1)),
    "origin": ((-1, 0, 0), (0, -1, 0), (0, 0, 1)),
    "y=x": ((0, 1, 0), (1, 0, 0), (0, 0, 1)),
    "y=-x": ((0, -1, 0), (-1, 0, 0), (0, 0, 1)),
}

REFLECTION_AXES = tuple(_REFLECTIONS)


def identity() -> Matrix:
    return np.eye(3, dtype=np.float64)


def translation(dx: float, dy: float) -> Matrix:
    return np.array([[1.0, 0.0, dx], [0.0, 1.0, dy], [0.0, 0.0, 1.0]], dtype=np.float64)


def scaling(sx: float, sy: float) -> Matrix:
    return np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]], dtype=np.float64)


def rotation(degrees: float) -> Matrix:
    """Counterclockwise-positive rotation about the origin."""
    rad = math.radians(degrees)
    cos = math.cos(rad)
    sin = math.sin(rad)
    return np.array([[cos, -sin, 0.0], [sin, cos, 0.0], [0.0, 0.0, 1.0]], dtype=np.float64)


def shear(shx: float, shy: float) -> Matrix:
    return np.array([[1.0, shx, 0.0], [shy, 1.0, 0.0], [0.0, 0.0, 1.0]], dtype=np.float64)


def reflection(axis: str) -> Matrix:
    """Reflection across one of REFLECTION_AXES. Unknown axes give identity."""
    rows = _REFLECTIONS.get(axis)
    if rows is None:
        return identity()
    return np.array(rows, dtype=np.float64)


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """Matrix product ``a @ b``."""
    return np.asarray(a, dtype=np.float64) @ np.asarray(b, dtype=np.float64)


def about_pivot(base: Matrix, cx: float, cy: float) -> Matrix:
    """T(cx, cy) * base * T(-cx, -cy): apply ``base`` with (cx, cy) held fixed."""
    return multiply(translation(cx, cy), multiply(base, translation(-cx, -cy)))


def apply(matrix: Matrix, x: float, y: float) -> tuple[float, float]:
    """Transform a single point treated as (x, y, 1)."""
    nx = matrix[0, 0] * x + matrix[0, 1] * y + matrix[0, 2]
    ny = matrix[1, 0] * x + matrix[1, 1] * y + matrix[1, 2]
    return (float(nx), float(ny))


def apply_points(matrix: Matrix, points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Transform an Nx2 array point-wise. Returns a new array."""
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    return pts @ matrix[:2, :2].T + matrix[:2, 2]


def is_affine(matrix: Matrix) -> bool:
    return bool(np.array_equal(matrix[2], [0.0, 0.0, 1.0]))
