"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    transform_lab_env: str = "development"
    transform_lab_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Memoized pipeline evaluations kept by the shared engine
    pipeline_cache_size: int = 128

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
