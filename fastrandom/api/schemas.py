"""Pydantic response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from fastrandom.core.state import GeneratorSnapshot


# --- Samples ---

class SampleResponse(BaseModel):
    stream: str
    kind: str
    count: int
    values: list[bool | int | float] = Field(default_factory=list)


# --- Streams ---

class StreamStateResponse(BaseModel):
    stream: str
    seed: int
    x: int
    y: int
    z: int
    w: int
    bit_buffer: int = 0
    bit_mask: int = 1

    @classmethod
    def from_snapshot(cls, stream: str, seed: int, snapshot: GeneratorSnapshot) -> StreamStateResponse:
        state = snapshot.state
        return cls(
            stream=stream, seed=seed,
            x=state.x, y=state.y, z=state.z, w=state.w,
            bit_buffer=snapshot.bit_buffer, bit_mask=snapshot.bit_mask,
        )


class StreamListResponse(BaseModel):
    base_seed: int
    streams: list[str] = Field(default_factory=list)


# --- Config ---

class GeneratorConfigResponse(BaseModel):
    base_seed: int
    default_stream: str
    max_sample_count: int
