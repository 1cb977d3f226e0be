"""Batch draws of one accessor, shared by the CLI and the HTTP API."""

from __future__ import annotations

from fastrandom.core.enums import SampleKind
from fastrandom.core.errors import InvalidArgumentError
from fastrandom.systems.xorshift import Xorshift128

SampleValue = bool | int | float


def draw_samples(
    generator: Xorshift128,
    kind: SampleKind,
    count: int,
    lower: int | None = None,
    upper: int | None = None,
) -> list[SampleValue]:
    """Draw *count* values of *kind* from *generator*.

    Bounds only apply to ``SampleKind.NEXT``: ``upper`` alone selects
    ``next(upper)``, both select ``next(lower, upper)``. For
    ``SampleKind.BYTES`` the result is *count* byte values.
    """
    if count < 0:
        raise InvalidArgumentError("count", count, "must be >= 0")
    if kind is not SampleKind.NEXT and (lower is not None or upper is not None):
        raise InvalidArgumentError("kind", kind.value, "bounds are only accepted for 'next'")

    match kind:
        case SampleKind.NEXT:
            if lower is not None and upper is None:
                raise InvalidArgumentError("upper_bound", upper, "required when lower_bound is given")
            bounds = tuple(b for b in (lower, upper) if b is not None)
            return [generator.next(*bounds) for _ in range(count)]
        case SampleKind.UINT:
            return [generator.next_uint() for _ in range(count)]
        case SampleKind.INT:
            return [generator.next_int() for _ in range(count)]
        case SampleKind.DOUBLE:
            return [generator.next_double() for _ in range(count)]
        case SampleKind.FLOAT:
            values: list[SampleValue] = [0.0] * count
            generator.next_floats(values)
            return values
        case SampleKind.BOOL:
            return [generator.next_bool() for _ in range(count)]
        case SampleKind.BYTES:
            return list(generator.random_bytes(count))
    raise InvalidArgumentError("kind", kind, "unknown sample kind")
