"""Versioned API route modules."""

from fastapi import APIRouter

from fastrandom.api.routes.config import router as config_router
from fastrandom.api.routes.sample import router as sample_router
from fastrandom.api.routes.streams import router as streams_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(sample_router, tags=["Sample"])
api_router.include_router(streams_router, tags=["Streams"])
api_router.include_router(config_router, tags=["Config"])

__all__ = ["api_router"]
