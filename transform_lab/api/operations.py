"""GET /api/operations/{kind}/defaults — a fresh operation with default parameters."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from transform_lab.models.operations import OperationKind, new_operation

router = APIRouter(prefix="/operations")


@router.get("/{kind}/defaults")
async def defaults(kind: OperationKind) -> dict[str, Any]:
    return new_operation(kind).model_dump()
