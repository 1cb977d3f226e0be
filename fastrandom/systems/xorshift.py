"""Fast xorshift128 pseudo-random number generator.

A drop-in style replacement for a conventional seeded RNG with a period of
2^128 - 1. Reseeding is cheap: only the ``x`` word carries the seed and the
other three words are reset to fixed non-zero constants, so a sequence can be
regenerated many times from a single ``int``.

Not suitable for cryptographic use, and a single instance must not be shared
between threads without external locking (see ``fastrandom.systems.streams``
for deriving one independent instance per consumer).
"""

from __future__ import annotations

import logging
import struct
import time
from typing import MutableSequence

from fastrandom.core.errors import InvalidArgumentError, require_int32
from fastrandom.core.state import (
    BIT_MASK_EMPTY,
    BIT_MASK_TOP,
    INT32_MAX,
    MASK31,
    MASK32,
    REAL_UNIT_INT,
    REAL_UNIT_UINT,
    SEED_W,
    SEED_Y,
    SEED_Z,
    GeneratorSnapshot,
    GeneratorState,
)

logger = logging.getLogger(__name__)

_SINGLE = struct.Struct("<f")
_SINGLE_BELOW_ONE = 1.0 - 2.0 ** -24


def _to_single(value: float) -> float:
    """Round *value* to IEEE-754 single precision, staying below 1.0."""
    single = _SINGLE.unpack(_SINGLE.pack(value))[0]
    return single if single < 1.0 else _SINGLE_BELOW_ONE


def _tick_count() -> int:
    """Milliseconds on the monotonic clock, wrapped to a signed 32-bit int."""
    ticks = (time.monotonic_ns() // 1_000_000) & MASK32
    return ticks - (1 << 32) if ticks > INT32_MAX else ticks


class Xorshift128:
    """Seeded xorshift128 generator with int, float, bool and byte outputs.

    Every accessor advances the internal state; the same seed always yields
    the same sequence of values.
    """

    __slots__ = ("_x", "_y", "_z", "_w", "_bit_buffer", "_bit_mask", "_seed")

    def __init__(self, seed: int | None = None) -> None:
        self.reinitialize(_tick_count() if seed is None else seed)

    # -- seeding --

    def reinitialize(self, seed: int) -> None:
        """Reset the sequence to the one determined by *seed*.

        The bit buffer is emptied as well, so boolean draws after a reseed
        are reproducible from the seed alone.
        """
        require_int32("seed", seed)
        self._x = seed & MASK32
        self._y = SEED_Y
        self._z = SEED_Z
        self._w = SEED_W
        self._bit_buffer = 0
        self._bit_mask = BIT_MASK_EMPTY
        self._seed = seed
        logger.debug("Seeded xorshift128 with %d", seed)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def state(self) -> GeneratorState:
        return GeneratorState(self._x, self._y, self._z, self._w)

    def snapshot(self) -> GeneratorSnapshot:
        """Capture the state words and bit buffer without advancing."""
        return GeneratorSnapshot(self.state, self._bit_buffer, self._bit_mask)

    def restore(self, snapshot: GeneratorSnapshot) -> None:
        """Resume exactly where *snapshot* was taken."""
        state = snapshot.state
        if not all(0 <= word <= MASK32 for word in state.as_tuple()):
            raise InvalidArgumentError("snapshot", state, "state words must be unsigned 32-bit integers")
        if state.is_zero():
            raise InvalidArgumentError("snapshot", state, "all-zero state is not a valid xorshift state")
        self._x, self._y, self._z, self._w = state.as_tuple()
        self._bit_buffer = snapshot.bit_buffer & MASK32
        self._bit_mask = snapshot.bit_mask & MASK32 or BIT_MASK_EMPTY
        logger.debug("Restored xorshift128 state %s", state)

    # -- kernel --

    def _advance(self) -> int:
        x = self._x
        t = (x ^ (x << 11)) & MASK32
        w = self._w
        self._x = self._y
        self._y = self._z
        self._z = w
        w = (w ^ (w >> 19)) ^ (t ^ (t >> 8))
        self._w = w
        return w

    # -- integers --

    def next(self, *bounds: int) -> int:
        """Return a random int.

        ``next()``
            In [0, 2**31 - 1). The value 2**31 - 1 is rejected and redrawn,
            which keeps the usual exclusive upper bound. The retry loop is
            unbounded in principle; the expected number of steps is 1.
        ``next(upper_bound)``
            In [0, upper_bound). See :meth:`next_below`.
        ``next(lower_bound, upper_bound)``
            In [lower_bound, upper_bound). See :meth:`next_in_range`.

        Bounds are positional only. Use ``next_below(upper_bound=...)`` or
        ``next_in_range(lower_bound=..., upper_bound=...)`` to pass them by
        keyword.
        """
        if len(bounds) == 1:
            return self.next_below(bounds[0])
        if len(bounds) == 2:
            return self.next_in_range(bounds[0], bounds[1])
        if bounds:
            raise TypeError(f"next() takes at most 2 bounds ({len(bounds)} given)")

        while True:
            value = self._advance() & MASK31
            if value != MASK31:
                return value

    def next_uint(self) -> int:
        """Raw 32-bit output in [0, 2**32 - 1]. The cheapest accessor."""
        return self._advance()

    def next_int(self) -> int:
        """Int in [0, 2**31 - 1] inclusive; unlike :meth:`next` never redraws."""
        return self._advance() & MASK31

    def next_below(self, upper_bound: int) -> int:
        """Int in [0, upper_bound); always 0 when *upper_bound* is 0."""
        if upper_bound < 0:
            raise InvalidArgumentError("upper_bound", upper_bound, "must be >= 0")
        require_int32("upper_bound", upper_bound)
        return int(REAL_UNIT_INT * (self._advance() & MASK31) * upper_bound)

    def next_in_range(self, lower_bound: int, upper_bound: int) -> int:
        """Int in [lower_bound, upper_bound). *lower_bound* may be negative.

        Ranges that fit in 31 bits use 31 bits of the output. Wider ranges
        (where ``upper_bound - lower_bound`` would overflow a signed 32-bit
        subtraction) use all 32 bits and the exact range instead.
        """
        require_int32("lower_bound", lower_bound)
        require_int32("upper_bound", upper_bound)
        if lower_bound > upper_bound:
            raise InvalidArgumentError("upper_bound", upper_bound, f"must be >= lower_bound ({lower_bound})")

        w = self._advance()
        span = upper_bound - lower_bound
        if span > INT32_MAX:
            return lower_bound + int(REAL_UNIT_UINT * w * span)
        return lower_bound + int(REAL_UNIT_INT * (w & MASK31) * span)

    # -- floats --

    def next_double(self) -> float:
        """Float in [0.0, 1.0) with 31 bits of precision."""
        return REAL_UNIT_INT * (self._advance() & MASK31)

    def next_float(self) -> float:
        """Single-precision float in [0.0, 1.0)."""
        x, y, z, w = self._x, self._y, self._z, self._w
        t = (x ^ (x << 11)) & MASK32
        x, y, z = y, z, w
        w = (w ^ (w >> 19)) ^ (t ^ (t >> 8))
        value = _to_single(REAL_UNIT_INT * (w & MASK31))
        self._x, self._y, self._z, self._w = x, y, z, w
        return value

    def next_floats(self, buffer: MutableSequence[float]) -> None:
        """Fill *buffer* with single-precision floats in [0.0, 1.0)."""
        x, y, z, w = self._x, self._y, self._z, self._w
        for i in range(len(buffer)):
            t = (x ^ (x << 11)) & MASK32
            x, y, z = y, z, w
            w = (w ^ (w >> 19)) ^ (t ^ (t >> 8))
            buffer[i] = _to_single(REAL_UNIT_INT * (w & MASK31))
        self._x, self._y, self._z, self._w = x, y, z, w

    # -- bits and bytes --

    def next_bool(self) -> bool:
        """Single random bit; one kernel step is shared by 32 calls."""
        if self._bit_mask != BIT_MASK_EMPTY:
            self._bit_mask >>= 1
            return not self._bit_buffer & self._bit_mask

        self._bit_buffer = self._advance()
        self._bit_mask = BIT_MASK_TOP
        return not self._bit_buffer & BIT_MASK_TOP

    def next_bytes(self, buffer: bytearray | memoryview) -> None:
        """Fill a writable byte buffer, four bytes per step, least significant first.

        A trailing group of 1-3 bytes costs one more step; the unused high
        bytes of that word are discarded.
        """
        length = len(buffer)
        x, y, z, w = self._x, self._y, self._z, self._w
        words: list[int] = []
        for _ in range((length + 3) // 4):
            t = (x ^ (x << 11)) & MASK32
            x, y, z = y, z, w
            w = (w ^ (w >> 19)) ^ (t ^ (t >> 8))
            words.append(w)
        buffer[:length] = struct.pack(f"<{len(words)}I", *words)[:length]
        self._x, self._y, self._z, self._w = x, y, z, w

    def random_bytes(self, count: int) -> bytes:
        """Return *count* fresh random bytes."""
        if count < 0:
            raise InvalidArgumentError("count", count, "must be >= 0")
        buffer = bytearray(count)
        self.next_bytes(buffer)
        return bytes(buffer)
