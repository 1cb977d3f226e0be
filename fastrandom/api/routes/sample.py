"""GET /api/v1/sample/{kind}: draw values from a named stream."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from fastrandom.api.dependencies import get_stream_registry
from fastrandom.api.schemas import SampleResponse
from fastrandom.api.stream_registry import StreamRegistry
from fastrandom.core.enums import SampleKind
from fastrandom.core.errors import InvalidArgumentError
from fastrandom.systems.sampling import draw_samples

router = APIRouter()


@router.get("/sample/{kind}", response_model=SampleResponse)
def sample(
    kind: SampleKind,
    stream: str | None = Query(None, description="Stream name; the configured default when omitted"),
    count: int = Query(1, ge=1, description="Number of values (bytes for 'bytes')"),
    lower: int | None = Query(None, description="Inclusive lower bound, 'next' only"),
    upper: int | None = Query(None, description="Exclusive upper bound, 'next' only"),
    registry: StreamRegistry = Depends(get_stream_registry),
) -> SampleResponse:
    name = stream or registry.config.default_stream
    limit = registry.config.max_sample_count
    if count > limit:
        raise HTTPException(status_code=422, detail=f"count must be <= {limit}")

    try:
        values = registry.draw(name, lambda gen: draw_samples(gen, kind, count, lower, upper))
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return SampleResponse(stream=name, kind=kind.value, count=count, values=values)
