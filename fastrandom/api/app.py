"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fastrandom.api.dependencies import set_stream_registry
from fastrandom.api.routes import api_router
from fastrandom.api.stream_registry import StreamRegistry
from fastrandom.config import GeneratorConfig
from fastrandom.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: GeneratorConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = GeneratorConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        registry = StreamRegistry(_config)
        set_stream_registry(registry)
        logger.info("API server started (base seed %d).", registry.base_seed)
        yield
        logger.info("API server shutting down.")

    app = FastAPI(
        title="fastrandom",
        description=(
            "Reproducible xorshift128 random streams over HTTP.\n\n"
            "## API Groups\n\n"
            "- **Sample**: Draw ints, floats, bools or bytes from a named stream\n"
            "- **Streams**: Inspect, reseed and reset streams\n"
            "- **Config**: Read-only service configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Sample", "description": "Batch draws from a stream. Each request holds the stream's lock for the whole batch."},
            {"name": "Streams", "description": "Per-stream state words and bit buffer, reseeding, and a full reset back to the base seed."},
            {"name": "Config", "description": "Read-only service configuration parameters."},
        ],
    )

    # CORS: allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
