"""Error types raised by the generator."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A caller passed bounds or a seed outside the accepted domain.

    Raised before any generator state is touched, so a failed call never
    advances the sequence.
    """

    def __init__(self, name: str, value: object, reason: str) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"{name}={value!r}: {reason}")


def require_int32(name: str, value: int) -> None:
    """Raise :class:`InvalidArgumentError` unless *value* fits in a signed 32-bit int."""
    if not -(1 << 31) <= value <= (1 << 31) - 1:
        raise InvalidArgumentError(name, value, "must fit in a signed 32-bit integer")
