"""Viewport fitter — one stable model-space window for a whole history.

The fit scans every step, not only the one on screen, so the shape does not
jump in scale while the user moves between steps.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, NamedTuple

import numpy as np
from numpy.typing import NDArray

from transform_lab.engine.config import EngineConfig
from transform_lab.utils.geometry import bbox

if TYPE_CHECKING:
    from transform_lab.engine.pipeline import History


class PresentationPoint(NamedTuple):
    u: float
    v: float


@dataclass(frozen=True)
class Viewport:
    min_x: float
    max_x: float
    min_y: float
    max_y: float
    # Side of the square presentation space the viewport maps onto
    size: float = 100.0

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @classmethod
    def default(cls, config: EngineConfig | None = None) -> Viewport:
        config = config or EngineConfig()
        half = config.default_half_extent
        return cls(-half, half, -half, half, size=config.presentation_size)

    def contains(self, x: float, y: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def map_x(self, x: float) -> float:
        return (x - self.min_x) / self.width * self.size

    def map_y(self, y: float) -> float:
        # Model y grows upward, presentation v grows downward
        return (1 - (y - self.min_y) / self.height) * self.size

    def map_to_presentation(self, point: Any) -> PresentationPoint:
        """Map a model point (Point model or (x, y) pair) to (u, v)."""
        if hasattr(point, "x") and hasattr(point, "y"):
            x, y = point.x, point.y
        else:
            x, y = point
        return PresentationPoint(self.map_x(float(x)), self.map_y(float(y)))

    def map_points(self, points: NDArray[np.float64]) -> NDArray[np.float64]:
        """Vectorised map_to_presentation over an Nx2 array."""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        u = (pts[:, 0] - self.min_x) / self.width * self.size
        v = (1 - (pts[:, 1] - self.min_y) / self.height) * self.size
        return np.column_stack([u, v])


def fit_viewport(history: History, config: EngineConfig | None = None) -> Viewport:
    """Padded bounding box of the origin and every point of every step.

    A history without any shape points gets the fixed default viewport.
    """
    config = config or EngineConfig()
    points = history.all_points()
    if len(points) == 0:
        return Viewport.default(config)

    candidates = np.vstack([points, [[0.0, 0.0]]])
    xmin, ymin, xmax, ymax = bbox(candidates)

    padding = max(abs(xmax - xmin), abs(ymax - ymin)) * config.padding_ratio + config.padding_min
    return Viewport(
        min_x=xmin - padding,
        max_x=xmax + padding,
        min_y=ymin - padding,
        max_y=ymax + padding,
        size=config.presentation_size,
    )
