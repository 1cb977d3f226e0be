"""StreamRegistry: named generator streams shared by concurrent API requests.

``Xorshift128`` carries no locking of its own, so each stream owns a
``threading.Lock`` and every read or draw goes through the registry while
holding it. Streams are created lazily and seeded from the configured base
seed, so a stream name always maps to the same sequence.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Callable, TypeVar

from fastrandom.core.state import GeneratorSnapshot
from fastrandom.systems.streams import StreamFactory
from fastrandom.systems.xorshift import Xorshift128

if TYPE_CHECKING:
    from fastrandom.config import GeneratorConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _Stream:
    __slots__ = ("generator", "lock")

    def __init__(self, generator: Xorshift128) -> None:
        self.generator = generator
        self.lock = threading.Lock()


class StreamRegistry:
    """Owns one generator per stream name.

    Provides thread-safe access to:
      - draws (per-stream lock held for the whole batch)
      - state snapshots
      - reseeding and full reset
    """

    def __init__(self, config: GeneratorConfig) -> None:
        self.config = config
        self._streams_lock = threading.Lock()
        self._streams: dict[str, _Stream] = {}
        self._factory = self._build_factory()

    # -- public properties --

    @property
    def base_seed(self) -> int:
        return self._factory.base_seed

    def names(self) -> list[str]:
        with self._streams_lock:
            return sorted(self._streams)

    # -- stream access --

    def draw(self, name: str, fn: Callable[[Xorshift128], T]) -> T:
        """Run *fn* against stream *name* while holding its lock."""
        stream = self._get(name)
        with stream.lock:
            return fn(stream.generator)

    def snapshot(self, name: str) -> tuple[int, GeneratorSnapshot]:
        """Return ``(seed, snapshot)`` for stream *name*, creating it if needed."""
        return self.draw(name, lambda gen: (gen.seed, gen.snapshot()))

    def peek(self, name: str) -> tuple[int, GeneratorSnapshot]:
        """Like :meth:`snapshot`, but an unknown stream is not registered.

        For a stream that does not exist yet the state it would start from
        is returned.
        """
        with self._streams_lock:
            stream = self._streams.get(name)
        if stream is None:
            gen = self._factory.create(name)
            return gen.seed, gen.snapshot()
        with stream.lock:
            return stream.generator.seed, stream.generator.snapshot()

    def reseed(self, name: str, seed: int) -> tuple[int, GeneratorSnapshot]:
        def _reseed(gen: Xorshift128) -> tuple[int, GeneratorSnapshot]:
            gen.reinitialize(seed)
            return gen.seed, gen.snapshot()

        result = self.draw(name, _reseed)
        logger.info("Stream %r reseeded with %d", name, seed)
        return result

    # -- lifecycle --

    def reset(self) -> None:
        """Drop every stream; the next access re-derives it from the base seed."""
        with self._streams_lock:
            self._streams.clear()
        logger.info("StreamRegistry reset (base_seed=%d).", self.base_seed)

    # -- internals --

    def _build_factory(self) -> StreamFactory:
        base_seed = self.config.base_seed
        if base_seed is None:
            base_seed = Xorshift128().seed  # clock-seeded
            logger.info("No base seed configured; using clock seed %d", base_seed)
        return StreamFactory(base_seed)

    def _get(self, name: str) -> _Stream:
        with self._streams_lock:
            stream = self._streams.get(name)
            if stream is None:
                stream = _Stream(self._factory.create(name))
                self._streams[name] = stream
                logger.info("Created stream %r (seed=%d)", name, stream.generator.seed)
            return stream
