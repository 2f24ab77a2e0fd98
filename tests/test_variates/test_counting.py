"""Tests for CountingVariateSource."""

from __future__ import annotations

from seq_sampler.variates.counting import CountingVariateSource
from seq_sampler.variates.mock import ScriptedVariateSource
from seq_sampler.variates.numpy_source import NumpyVariateSource


class TestCountingVariateSource:
    """Tests for the draw-counting wrapper."""

    def test_counts_each_kind(self) -> None:
        source = CountingVariateSource(ScriptedVariateSource(reals=[0.1, 0.2, 0.3], ints=[0]))
        source.uniform_real()
        source.uniform_open()
        source.uniform_open()
        source.uniform_int(0, 2)
        assert source.real_draws == 3
        assert source.int_draws == 1
        assert source.draws == 4

    def test_passes_values_through(self) -> None:
        source = CountingVariateSource(ScriptedVariateSource(reals=[0.125], ints=[1]))
        assert source.uniform_open() == 0.125
        assert source.uniform_int(5, 7) == 6

    def test_bytes_not_counted(self) -> None:
        source = CountingVariateSource(NumpyVariateSource(seed=0))
        source.get_random_bytes(32)
        assert source.draws == 0

    def test_reset(self) -> None:
        source = CountingVariateSource(NumpyVariateSource(seed=0))
        source.uniform_real()
        source.reset()
        assert source.draws == 0

    def test_duplicate_keeps_counts_and_state(self) -> None:
        source = CountingVariateSource(NumpyVariateSource(seed=3))
        source.uniform_real()
        clone = source.duplicate()
        assert clone.draws == 1
        assert clone.uniform_real() == source.uniform_real()

    def test_name_and_health(self) -> None:
        source = CountingVariateSource(NumpyVariateSource(seed=0))
        source.uniform_real()
        assert source.name == "counting(numpy)"
        assert source.health_check()["draws"] == 1
