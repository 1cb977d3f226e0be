"""Independent per-consumer generators derived from one base seed.

A single ``Xorshift128`` is not safe to share between threads. Instead each
consumer gets its own instance whose seed is a hash of the base seed and a
stream id:

    StreamSeed = xxh32(BaseSeed, StreamID)

The derivation is pure, so the same (base seed, stream id) pair always
produces the same stream regardless of how many other streams exist or the
order in which they are created.
"""

from __future__ import annotations

import struct

import xxhash

from fastrandom.core.errors import require_int32
from fastrandom.core.state import INT32_MAX
from fastrandom.systems.xorshift import Xorshift128

StreamId = int | str


def _stream_payload(base_seed: int, stream_id: StreamId) -> bytes:
    if isinstance(stream_id, str):
        return struct.pack("<i", base_seed) + b"s" + stream_id.encode("utf-8")
    return struct.pack("<iq", base_seed, stream_id)


def derive_seed(base_seed: int, stream_id: StreamId) -> int:
    """Return the signed 32-bit seed for *stream_id* under *base_seed*."""
    require_int32("base_seed", base_seed)
    digest = xxhash.xxh32(_stream_payload(base_seed, stream_id)).intdigest()
    return digest - (1 << 32) if digest > INT32_MAX else digest


class StreamFactory:
    """Creates one generator per stream id, all derived from *base_seed*."""

    __slots__ = ("_base_seed",)

    def __init__(self, base_seed: int) -> None:
        require_int32("base_seed", base_seed)
        self._base_seed = base_seed

    @property
    def base_seed(self) -> int:
        return self._base_seed

    def seed_for(self, stream_id: StreamId) -> int:
        return derive_seed(self._base_seed, stream_id)

    def create(self, stream_id: StreamId) -> Xorshift128:
        return Xorshift128(self.seed_for(stream_id))
