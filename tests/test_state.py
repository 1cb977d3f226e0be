"""Tests for the pure state-transition kernel and generator snapshots."""

import pytest

from fastrandom.core.errors import InvalidArgumentError
from fastrandom.core.state import (
    BIT_MASK_EMPTY,
    SEED_W,
    SEED_Y,
    SEED_Z,
    GeneratorSnapshot,
    GeneratorState,
    step,
)
from fastrandom.systems.xorshift import Xorshift128


class TestKernel:

    def test_from_seed_reinterprets_as_unsigned(self):
        state = GeneratorState.from_seed(-2)
        assert state == GeneratorState(0xFFFFFFFE, SEED_Y, SEED_Z, SEED_W)

    def test_step_shifts_words(self):
        state = GeneratorState.from_seed(17)
        output, new_state = step(state)
        assert (new_state.x, new_state.y, new_state.z) == (state.y, state.z, state.w)
        assert new_state.w == output

    def test_step_first_output_seed_zero(self):
        output, _ = step(GeneratorState.from_seed(0))
        assert output == 273327012

    def test_step_matches_generator(self):
        gen = Xorshift128(2718)
        state = GeneratorState.from_seed(2718)
        for _ in range(1000):
            output, state = step(state)
            assert gen.next_uint() == output
        assert gen.state == state

    def test_step_does_not_mutate(self):
        state = GeneratorState.from_seed(1)
        step(state)
        assert state == GeneratorState.from_seed(1)

    def test_outputs_are_32_bit(self):
        state = GeneratorState.from_seed(-1)
        for _ in range(1000):
            output, state = step(state)
            assert 0 <= output <= 0xFFFFFFFF
            assert all(0 <= word <= 0xFFFFFFFF for word in state.as_tuple())

    def test_state_is_frozen(self):
        state = GeneratorState.from_seed(1)
        with pytest.raises(Exception):
            state.x = 5  # type: ignore


class TestSnapshots:

    def test_fresh_snapshot_has_empty_bit_buffer(self):
        snap = Xorshift128(3).snapshot()
        assert snap.bit_mask == BIT_MASK_EMPTY
        assert snap.bit_buffer == 0

    def test_snapshot_does_not_advance(self):
        gen = Xorshift128(3)
        gen.snapshot()
        assert gen.state == GeneratorState.from_seed(3)

    def test_restore_resumes_mixed_sequence(self):
        gen = Xorshift128(8)
        gen.next_uint()
        for _ in range(5):
            gen.next_bool()
        snap = gen.snapshot()
        expected = [(gen.next_bool(), gen.next_uint(), gen.next_double()) for _ in range(40)]

        other = Xorshift128(1)
        other.restore(snap)
        assert [(other.next_bool(), other.next_uint(), other.next_double()) for _ in range(40)] == expected

    def test_restore_keeps_seed(self):
        gen = Xorshift128(8)
        gen.restore(Xorshift128(9).snapshot())
        assert gen.seed == 8

    def test_restore_rejects_zero_state(self):
        gen = Xorshift128(8)
        before = gen.snapshot()
        with pytest.raises(InvalidArgumentError):
            gen.restore(GeneratorSnapshot(GeneratorState(0, 0, 0, 0)))
        assert gen.snapshot() == before

    @pytest.mark.parametrize(
        "state",
        [
            GeneratorState(1 << 32, 0, 0, 0),
            GeneratorState(0, 0, 0, 1 << 33),
            GeneratorState(-1, SEED_Y, SEED_Z, SEED_W),
        ],
    )
    def test_restore_rejects_words_outside_32_bits(self, state):
        gen = Xorshift128(8)
        before = gen.snapshot()
        with pytest.raises(InvalidArgumentError):
            gen.restore(GeneratorSnapshot(state))
        assert gen.snapshot() == before
        # still a live generator afterwards
        assert gen.next_uint() == Xorshift128(8).next_uint()

    def test_restore_zero_mask_means_empty_buffer(self):
        gen = Xorshift128(8)
        gen.restore(GeneratorSnapshot(GeneratorState.from_seed(8), bit_buffer=123, bit_mask=0))
        assert gen.snapshot().bit_mask == BIT_MASK_EMPTY
