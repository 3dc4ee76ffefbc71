"""TransformSession — caller-owned shape, operation queue and view state.

Every mutation replaces state with new values; derived output is always read
back through the memoizing TransformEngine, so changing display-only state
(selected step, toggles) never recomputes anything. Refused mutations are
no-ops that log a warning and return False.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from transform_lab.engine.grid import GridLine
from transform_lab.engine.pipeline import EngineResult, History, PipelineStep, TransformEngine
from transform_lab.engine.shapes import circle_points, preset_points
from transform_lab.engine.viewport import Viewport
from transform_lab.models.geometry import CircleParams, ShapePoint
from transform_lab.models.operations import (
    NUMERIC_FIELDS,
    OperationKind,
    TransformOperation,
    editable_fields,
    new_operation,
)
from transform_lab.utils.parsing import as_raw, parse_number, read_number

logger = logging.getLogger(__name__)

# Fallbacks for stored circle parameters that were not just edited
_CIRCLE_FALLBACKS = {"cx": 0.0, "cy": 0.0, "r": 1.0}


def _as_shape_point(point: Any) -> ShapePoint:
    if isinstance(point, ShapePoint):
        return point
    if isinstance(point, Mapping):
        return ShapePoint.model_validate(point)
    if hasattr(point, "x") and hasattr(point, "y"):
        return ShapePoint(x=point.x, y=point.y)
    x, y = point
    return ShapePoint(x=x, y=y)


class TransformSession:
    def __init__(self, engine: TransformEngine | None = None) -> None:
        self.engine = engine or TransformEngine()
        self.shape_kind = "triangle"
        self.circle = CircleParams()
        self.points: list[ShapePoint] = preset_points("triangle")
        self.operations: list[TransformOperation] = []
        self.view_step = 0
        self.show_grid = True
        self.show_coordinates = True

    # -- derived, read-only ------------------------------------------------

    @property
    def result(self) -> EngineResult:
        return self.engine.evaluate(self.points, self.operations)

    @property
    def history(self) -> History:
        return self.result.history

    @property
    def viewport(self) -> Viewport:
        return self.result.viewport

    @property
    def grid_lines(self) -> tuple[GridLine, ...]:
        return self.result.grid_lines

    @property
    def current_step(self) -> PipelineStep:
        history = self.history
        return history[history.clamp(self.view_step)]

    def pivot(self, step_index: int) -> tuple[float, float] | None:
        """Pivot of the operation that produced ``step_index``, if point-anchored."""
        history = self.history
        if not 0 <= step_index < len(history):
            return None
        return history[step_index].pivot

    # -- shape ---------------------------------------------------------------

    def replace_points(self, points: Iterable[Any]) -> bool:
        try:
            new_points = [_as_shape_point(p) for p in points]
        except (TypeError, ValueError) as e:
            logger.warning("Replace points: invalid input: %s", e)
            return False
        if not new_points:
            logger.warning("Refusing to replace shape with zero points")
            return False
        self.points = new_points
        self.shape_kind = "custom"
        return True

    def add_point(self) -> None:
        self.points = [*self.points, ShapePoint(x=0.0, y=0.0)]

    def remove_point(self, index: int) -> bool:
        if len(self.points) <= 1:
            logger.warning("Refusing to remove the last shape point")
            return False
        if not 0 <= index < len(self.points):
            logger.warning("Remove point: index %d out of range, skipping", index)
            return False
        self.points = [p for i, p in enumerate(self.points) if i != index]
        return True

    def update_point(self, index: int, field: str, value: float | str) -> bool:
        if field not in ("x", "y") or not 0 <= index < len(self.points):
            logger.warning("Update point: invalid target %r[%d], skipping", field, index)
            return False
        updated = self.points[index].model_copy(update={field: as_raw(value)})
        points = list(self.points)
        points[index] = updated
        self.points = points
        return True

    def load_preset(self, kind: str) -> None:
        """Swap in a preset shape; clears the operation queue."""
        self.shape_kind = kind
        self.points = preset_points(kind, self.circle, self.engine.config.circle_segments)
        self.operations = []
        self.view_step = 0

    def update_circle_param(self, key: str, value: Any) -> bool:
        """Store a raw circle parameter.

        Returns True whenever the value was stored. The polygon is regenerated
        only when the new value is numeric; the edited value is used as parsed
        (a radius of 0 collapses the polygon), the other stored parameters fall
        back to cx, cy -> 0 and r -> 1.
        """
        if key not in _CIRCLE_FALLBACKS:
            logger.warning("Update circle: unknown parameter %r, skipping", key)
            return False
        self.circle = self.circle.model_copy(update={key: as_raw(value)})
        edited = read_number(value)
        if edited is None:
            return True
        params = {
            name: parse_number(getattr(self.circle, name), fallback)
            for name, fallback in _CIRCLE_FALLBACKS.items()
        }
        params[key] = edited
        self.points = circle_points(
            params["cx"], params["cy"], params["r"], self.engine.config.circle_segments
        )
        return True

    def set_circle(self, cx: float, cy: float, r: float) -> None:
        self.circle = CircleParams(cx=cx, cy=cy, r=r)
        self.shape_kind = "circle"
        self.points = circle_points(cx, cy, r, self.engine.config.circle_segments)

    # -- operation queue -------------------------------------------------------

    def add_operation(self, kind: OperationKind) -> TransformOperation:
        op = new_operation(kind)
        self.operations = [*self.operations, op]
        self.view_step = len(self.operations)
        return op

    def _find(self, op_id: str) -> int | None:
        for i, op in enumerate(self.operations):
            if op.id == op_id:
                return i
        return None

    def update_operation(self, op_id: str, field: str, value: Any) -> bool:
        idx = self._find(op_id)
        if idx is None:
            logger.warning("Update operation: unknown id %r, skipping", op_id)
            return False
        op = self.operations[idx]
        if field not in editable_fields(op):
            logger.warning("Update operation %s: unknown field %r, skipping", op_id, field)
            return False
        try:
            if field in NUMERIC_FIELDS:
                value = as_raw(value)
            updated = type(op).model_validate({**op.model_dump(), field: value})
        except ValidationError as e:
            logger.warning("Update operation %s: invalid %s=%r: %s", op_id, field, value, e)
            return False
        operations = list(self.operations)
        operations[idx] = updated
        self.operations = operations
        return True

    def remove_operation(self, op_id: str) -> bool:
        idx = self._find(op_id)
        if idx is None:
            logger.warning("Remove operation: unknown id %r, skipping", op_id)
            return False
        self.operations = [op for op in self.operations if op.id != op_id]
        if self.view_step > len(self.operations):
            self.view_step = max(0, len(self.operations))
        return True

    # -- view state ------------------------------------------------------------

    def select_step(self, index: int) -> int:
        self.view_step = max(0, min(index, len(self.operations)))
        return self.view_step

    def next_step(self) -> int:
        return self.select_step(self.view_step + 1)

    def previous_step(self) -> int:
        return self.select_step(self.view_step - 1)
