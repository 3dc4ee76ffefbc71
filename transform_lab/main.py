"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from transform_lab import __version__
from transform_lab.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.transform_lab_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="transform-lab",
        description="2D affine transformation pipeline with auto-fitted viewport and grid",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from transform_lab.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
