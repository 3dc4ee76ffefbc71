"""Transform operation models.

One frozen model per operation kind, combined into a discriminated union on
``kind``. Numeric parameters accept raw text so that whatever the user typed
is kept until the operation is resolved into a matrix.
"""

from __future__ import annotations

import uuid
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

Anchor = Literal["origin", "point"]
Direction = Literal["CW", "CCW"]
ReflectionAxis = Literal["x-axis", "y-axis", "origin", "y=x", "y=-x"]
OperationKind = Literal["translate", "scale", "rotate", "shear", "reflect"]

Param = float | str

# Fields holding a Param; edits to these are coerced with as_raw
NUMERIC_FIELDS = frozenset({"dx", "dy", "sx", "sy", "angle", "cx", "cy", "shx", "shy"})


def _new_id() -> str:
    return uuid.uuid4().hex


class _Operation(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(default_factory=_new_id)


class Translate(_Operation):
    kind: Literal["translate"] = "translate"
    dx: Param = 2.0
    dy: Param = 2.0


class Scale(_Operation):
    kind: Literal["scale"] = "scale"
    sx: Param = 2.0
    sy: Param = 2.0
    anchor: Anchor = "origin"
    cx: Param = 0.0  # ignored while anchor == "origin"
    cy: Param = 0.0


class Rotate(_Operation):
    kind: Literal["rotate"] = "rotate"
    angle: Param = 90.0  # degrees
    direction: Direction = "CCW"
    anchor: Anchor = "origin"
    cx: Param = 0.0
    cy: Param = 0.0


class Shear(_Operation):
    kind: Literal["shear"] = "shear"
    shx: Param = 1.0
    shy: Param = 0.0


class Reflect(_Operation):
    kind: Literal["reflect"] = "reflect"
    axis: ReflectionAxis = "x-axis"


TransformOperation = Annotated[
    Union[Translate, Scale, Rotate, Shear, Reflect],
    Field(discriminator="kind"),
]

OPERATION_TYPES: dict[str, type[_Operation]] = {
    "translate": Translate,
    "scale": Scale,
    "rotate": Rotate,
    "shear": Shear,
    "reflect": Reflect,
}

# Fields a caller may not edit through update_operation
IMMUTABLE_FIELDS = frozenset({"id", "kind"})

operation_adapter: TypeAdapter[TransformOperation] = TypeAdapter(TransformOperation)


def new_operation(kind: OperationKind) -> TransformOperation:
    """Create an operation of ``kind`` with its default parameters."""
    return OPERATION_TYPES[kind]()


def editable_fields(op: TransformOperation) -> list[str]:
    return [name for name in type(op).model_fields if name not in IMMUTABLE_FIELDS]
