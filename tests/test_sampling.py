"""Tests for batch sampling shared by the CLI and API."""

import pytest

from fastrandom.core.enums import SampleKind
from fastrandom.core.errors import InvalidArgumentError
from fastrandom.systems.sampling import draw_samples
from fastrandom.systems.xorshift import Xorshift128


@pytest.mark.parametrize("kind", list(SampleKind))
def test_count_respected(kind):
    assert len(draw_samples(Xorshift128(1), kind, 13)) == 13


def test_matches_direct_calls():
    ref = Xorshift128(4)
    assert draw_samples(Xorshift128(4), SampleKind.UINT, 5) == [ref.next_uint() for _ in range(5)]

    ref = Xorshift128(4)
    assert draw_samples(Xorshift128(4), SampleKind.FLOAT, 5) == [ref.next_float() for _ in range(5)]

    ref = Xorshift128(4)
    assert draw_samples(Xorshift128(4), SampleKind.BYTES, 6) == list(ref.random_bytes(6))


def test_value_types():
    assert all(isinstance(v, bool) for v in draw_samples(Xorshift128(1), SampleKind.BOOL, 10))
    assert all(isinstance(v, float) for v in draw_samples(Xorshift128(1), SampleKind.DOUBLE, 10))
    assert all(0 <= v <= 255 for v in draw_samples(Xorshift128(1), SampleKind.BYTES, 10))


def test_next_bounds():
    values = draw_samples(Xorshift128(2), SampleKind.NEXT, 500, lower=-10, upper=10)
    assert all(-10 <= v < 10 for v in values)
    values = draw_samples(Xorshift128(2), SampleKind.NEXT, 500, upper=3)
    assert set(values) <= {0, 1, 2}


def test_lower_without_upper_rejected():
    with pytest.raises(InvalidArgumentError):
        draw_samples(Xorshift128(2), SampleKind.NEXT, 1, lower=5)


def test_bounds_on_other_kinds_rejected():
    with pytest.raises(InvalidArgumentError):
        draw_samples(Xorshift128(2), SampleKind.DOUBLE, 1, upper=5)


def test_invalid_bounds_propagate():
    with pytest.raises(InvalidArgumentError):
        draw_samples(Xorshift128(2), SampleKind.NEXT, 1, lower=5, upper=2)
