"""Shared test fixtures."""

from __future__ import annotations

import pytest

from transform_lab.engine.config import EngineConfig
from transform_lab.engine.pipeline import TransformEngine
from transform_lab.models.geometry import ShapePoint

TRIANGLE = [(1.0, 1.0), (4.0, 1.0), (2.5, 4.0)]
SQUARE = [(1.0, 1.0), (4.0, 1.0), (4.0, 4.0), (1.0, 4.0)]
# Irregular, off-origin, crosses both axes
PENTAGON = [(-3.0, 2.0), (1.5, -4.0), (6.0, 0.5), (3.0, 5.5), (-1.0, 7.0)]


def as_shape(coords: list[tuple[float, float]]) -> list[ShapePoint]:
    return [ShapePoint(x=x, y=y) for x, y in coords]


@pytest.fixture
def triangle() -> list[ShapePoint]:
    return as_shape(TRIANGLE)


@pytest.fixture
def square() -> list[ShapePoint]:
    return as_shape(SQUARE)


@pytest.fixture
def pentagon() -> list[ShapePoint]:
    return as_shape(PENTAGON)


@pytest.fixture
def engine() -> TransformEngine:
    return TransformEngine(EngineConfig(cache_size=8))
