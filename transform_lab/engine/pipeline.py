"""Transformation pipeline — applies an ordered operation list to a shape.

Each step transforms the previous step's points, never the original shape.
Results are immutable snapshots; TransformEngine memoizes whole evaluations
keyed by the structural value of (shape, operations).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

import numpy as np
from numpy.typing import NDArray

from transform_lab.engine.config import EngineConfig
from transform_lab.engine.grid import GridLine, grid_lines, grid_step
from transform_lab.engine.resolve import pivot_of, resolve_matrix, step_label
from transform_lab.engine.viewport import Viewport, fit_viewport
from transform_lab.models.operations import TransformOperation
from transform_lab.utils import matrix as mx
from transform_lab.utils.geometry import centroid
from transform_lab.utils.parsing import parse_number

logger = logging.getLogger(__name__)

ORIGINAL_LABEL = "Original"


def _frozen(array: NDArray[np.float64]) -> NDArray[np.float64]:
    array.setflags(write=False)
    return array


@dataclass(frozen=True)
class PipelineStep:
    """Shape state after one operation (or the untransformed shape at index 0)."""

    index: int
    label: str
    # Nx2 array of (x, y)
    points: NDArray[np.float64]
    # Matrix of this step alone
    matrix: mx.Matrix
    # Product of all step matrices so far; diagnostic only
    accumulated: mx.Matrix
    pivot: tuple[float, float] | None = None

    @property
    def title(self) -> str:
        if self.index == 0:
            return self.label
        return f"Step {self.index}: {self.label}"

    @property
    def centroid(self) -> tuple[float, float]:
        return centroid(self.points)

    def point_list(self) -> list[tuple[float, float]]:
        return [(float(x), float(y)) for x, y in self.points]


@dataclass(frozen=True)
class History:
    """Ordered pipeline steps; always ``len(operations) + 1`` long."""

    steps: tuple[PipelineStep, ...]

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[PipelineStep]:
        return iter(self.steps)

    def __getitem__(self, index: int) -> PipelineStep:
        return self.steps[index]

    @property
    def original(self) -> PipelineStep:
        return self.steps[0]

    def all_points(self) -> NDArray[np.float64]:
        """Every point of every step stacked into one Nx2 array."""
        if not self.steps:
            return np.empty((0, 2))
        return np.vstack([step.points for step in self.steps])

    def clamp(self, index: int) -> int:
        return max(0, min(index, len(self.steps) - 1))


def _coordinates(point: Any) -> tuple[Any, Any]:
    if isinstance(point, Mapping):
        return point.get("x"), point.get("y")
    if hasattr(point, "x") and hasattr(point, "y"):
        return point.x, point.y
    x, y = point
    return x, y


def parse_shape(shape: Iterable[Any]) -> NDArray[np.float64]:
    """Parse shape vertices into an Nx2 array; unreadable coordinates become 0."""
    coords = [
        (parse_number(x, 0.0), parse_number(y, 0.0))
        for x, y in (_coordinates(p) for p in shape)
    ]
    return np.array(coords, dtype=np.float64).reshape(-1, 2)


def run_pipeline(
    shape: Iterable[Any],
    operations: Sequence[TransformOperation],
) -> History:
    """Apply ``operations`` in order, recording one step per operation."""
    current = _frozen(parse_shape(shape))
    accumulated = _frozen(mx.identity())
    steps = [
        PipelineStep(
            index=0,
            label=ORIGINAL_LABEL,
            points=current,
            matrix=_frozen(mx.identity()),
            accumulated=accumulated,
        )
    ]

    for i, op in enumerate(operations, start=1):
        step_matrix = _frozen(resolve_matrix(op))
        current = _frozen(mx.apply_points(step_matrix, current))
        accumulated = _frozen(mx.multiply(step_matrix, accumulated))
        steps.append(
            PipelineStep(
                index=i,
                label=step_label(op),
                points=current,
                matrix=step_matrix,
                accumulated=accumulated,
                pivot=pivot_of(op),
            )
        )

    return History(steps=tuple(steps))


@dataclass(frozen=True)
class EngineResult:
    """Everything a renderer needs for one (shape, operations) value."""

    history: History
    viewport: Viewport
    grid_step: int
    grid_lines: tuple[GridLine, ...]


ShapeKey = tuple[tuple[Any, Any], ...]


class TransformEngine:
    """Memoizing front end over run_pipeline / fit_viewport / grid_lines."""

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()
        self._evaluate = lru_cache(maxsize=self.config.cache_size)(self._compute)

    def evaluate(
        self,
        shape: Iterable[Any],
        operations: Sequence[TransformOperation],
    ) -> EngineResult:
        key: ShapeKey = tuple(_coordinates(p) for p in shape)
        return self._evaluate(key, tuple(operations))

    def _compute(
        self,
        shape: ShapeKey,
        operations: tuple[TransformOperation, ...],
    ) -> EngineResult:
        logger.debug(
            "Recomputing pipeline: %d points, %d operations", len(shape), len(operations)
        )
        history = run_pipeline(shape, operations)
        viewport = fit_viewport(history, self.config)
        return EngineResult(
            history=history,
            viewport=viewport,
            grid_step=grid_step(viewport, self.config.grid_divisions),
            grid_lines=tuple(grid_lines(viewport, self.config.grid_divisions)),
        )

    def cache_info(self):
        return self._evaluate.cache_info()

    def clear_cache(self) -> None:
        self._evaluate.cache_clear()


def create_engine(config: EngineConfig | None = None) -> TransformEngine:
    """Factory function for creating an engine instance."""
    return TransformEngine(config=config)
