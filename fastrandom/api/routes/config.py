"""GET /api/v1/config: expose generator service configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fastrandom.api.dependencies import get_stream_registry
from fastrandom.api.schemas import GeneratorConfigResponse
from fastrandom.api.stream_registry import StreamRegistry

router = APIRouter()


@router.get("/config", response_model=GeneratorConfigResponse)
def get_config(
    registry: StreamRegistry = Depends(get_stream_registry),
) -> GeneratorConfigResponse:
    cfg = registry.config
    return GeneratorConfigResponse(
        base_seed=registry.base_seed,
        default_stream=cfg.default_stream,
        max_sample_count=cfg.max_sample_count,
    )
