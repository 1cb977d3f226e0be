"""Xorshift128 state words, the pure state-transition kernel and snapshots.

The kernel is the recurrence from Marsaglia's "Xorshift RNGs" (2003):

    t = x ^ (x << 11)
    x, y, z = y, z, w
    w = (w ^ (w >> 19)) ^ (t ^ (t >> 8))

Every value produced by the generator is derived from the new ``w``.
"""

from __future__ import annotations

from dataclasses import dataclass

MASK32 = 0xFFFFFFFF
MASK31 = 0x7FFFFFFF

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
UINT32_MAX = MASK32

# Fixed seed constants for y, z, w. Only x carries the seed.
SEED_Y = 842502087
SEED_Z = 3579807591
SEED_W = 273326509

# The +1 in the denominators keeps the unit-interval mappings below 1.0.
REAL_UNIT_INT = 1.0 / (INT32_MAX + 1.0)
REAL_UNIT_UINT = 1.0 / (UINT32_MAX + 1.0)

BIT_MASK_EMPTY = 1
BIT_MASK_TOP = 0x80000000


@dataclass(frozen=True, slots=True)
class GeneratorState:
    """The four unsigned 32-bit words of an xorshift128 generator."""

    x: int
    y: int
    z: int
    w: int

    @classmethod
    def from_seed(cls, seed: int) -> GeneratorState:
        return cls(seed & MASK32, SEED_Y, SEED_Z, SEED_W)

    def is_zero(self) -> bool:
        return not (self.x or self.y or self.z or self.w)

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.z, self.w)


@dataclass(frozen=True, slots=True)
class GeneratorSnapshot:
    """Everything needed to resume a generator exactly: words plus bit buffer."""

    state: GeneratorState
    bit_buffer: int = 0
    bit_mask: int = BIT_MASK_EMPTY


def step(state: GeneratorState) -> tuple[int, GeneratorState]:
    """Advance *state* by one kernel step.

    Returns ``(output, new_state)`` where *output* is the raw 32-bit value.
    """
    x, y, z, w = state.x, state.y, state.z, state.w
    t = (x ^ (x << 11)) & MASK32
    w = (w ^ (w >> 19)) ^ (t ^ (t >> 8))
    return w, GeneratorState(y, z, state.w, w)
