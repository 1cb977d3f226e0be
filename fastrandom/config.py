"""Service configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeneratorConfig:
    """Immutable configuration for the generator service and CLI."""

    # Seeding
    base_seed: int | None = 42             # None seeds from the monotonic clock
    default_stream: str = "default"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Requests
    max_sample_count: int = 10_000         # Upper limit on values returned per request

    # Logging
    log_level: str = "INFO"
