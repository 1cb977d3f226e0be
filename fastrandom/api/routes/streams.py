"""Stream inspection and reseeding."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from fastrandom.api.dependencies import get_stream_registry
from fastrandom.api.schemas import StreamListResponse, StreamStateResponse
from fastrandom.api.stream_registry import StreamRegistry
from fastrandom.core.state import INT32_MAX, INT32_MIN

router = APIRouter()


@router.get("/streams", response_model=StreamListResponse)
def list_streams(
    registry: StreamRegistry = Depends(get_stream_registry),
) -> StreamListResponse:
    return StreamListResponse(base_seed=registry.base_seed, streams=registry.names())


@router.get("/streams/{name}", response_model=StreamStateResponse)
def get_stream(
    name: str,
    registry: StreamRegistry = Depends(get_stream_registry),
) -> StreamStateResponse:
    seed, snapshot = registry.peek(name)
    return StreamStateResponse.from_snapshot(name, seed, snapshot)


@router.post("/streams/{name}/reseed", response_model=StreamStateResponse)
def reseed_stream(
    name: str,
    seed: int = Query(..., ge=INT32_MIN, le=INT32_MAX, description="Signed 32-bit seed"),
    registry: StreamRegistry = Depends(get_stream_registry),
) -> StreamStateResponse:
    new_seed, snapshot = registry.reseed(name, seed)
    return StreamStateResponse.from_snapshot(name, new_seed, snapshot)


@router.post("/streams/reset", response_model=StreamListResponse)
def reset_streams(
    registry: StreamRegistry = Depends(get_stream_registry),
) -> StreamListResponse:
    registry.reset()
    return StreamListResponse(base_seed=registry.base_seed, streams=registry.names())
