"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from transform_lab.config import settings
from transform_lab.engine.config import EngineConfig
from transform_lab.engine.pipeline import TransformEngine, create_engine


@lru_cache(maxsize=1)
def get_engine() -> TransformEngine:
    return create_engine(EngineConfig(cache_size=settings.pipeline_cache_size))
