"""FastAPI dependency injection: provides the StreamRegistry singleton."""

from __future__ import annotations

from fastrandom.api.stream_registry import StreamRegistry

_stream_registry: StreamRegistry | None = None


def set_stream_registry(registry: StreamRegistry) -> None:
    global _stream_registry
    _stream_registry = registry


def get_stream_registry() -> StreamRegistry:
    if _stream_registry is None:
        raise RuntimeError("StreamRegistry not initialized; server not started correctly.")
    return _stream_registry
