"""Tests for SelectionSampler (Knuth's Algorithm S)."""

from __future__ import annotations

import pytest

from seq_sampler.sampling.selection import SelectionSampler
from seq_sampler.sampling.types import Algorithm
from seq_sampler.variates.counting import CountingVariateSource
from seq_sampler.variates.mock import ScriptedVariateSource
from seq_sampler.variates.numpy_source import NumpyVariateSource


class TestSelectionSampler:
    """Selection sampling draws one variate per visited element."""

    def test_scripted_run(self) -> None:
        # Element 0: 5 * 0.5 >= 2 skip; element 1: 4 * 0.4 < 2 select.
        # Element 2: 3 * 0.9 >= 1 skip; element 3: 2 * 0.6 >= 1 skip;
        # element 4: 1 * 0.5 < 1 select.
        source = ScriptedVariateSource(reals=[0.5, 0.4, 0.9, 0.6, 0.5])
        sampler = SelectionSampler(range(5), 2, source=source)
        assert sampler.algorithm is Algorithm.S
        assert list(sampler) == [1, 4]
        assert source.pending_reals == 0

    def test_v_prime_is_none(self) -> None:
        sampler = SelectionSampler(range(10), 2, source=NumpyVariateSource(seed=0))
        assert sampler.v_prime is None
        assert sampler.state().algorithm is Algorithm.S

    def test_whole_population_draws_once_per_element(self) -> None:
        source = CountingVariateSource(NumpyVariateSource(seed=0))
        assert list(SelectionSampler(range(20), 20, source=source)) == list(range(20))
        assert source.draws == 20

    def test_draws_match_last_selected_position(self) -> None:
        source = CountingVariateSource(NumpyVariateSource(seed=4))
        picked = list(SelectionSampler(range(1000), 10, source=source))
        assert source.draws == picked[-1] + 1

    @pytest.mark.parametrize(("n", "total"), [(0, 5), (1, 1), (3, 10), (10, 500)])
    def test_exact_count_strictly_increasing(self, n: int, total: int) -> None:
        for seed in range(20):
            picked = list(SelectionSampler(range(total), n, source=NumpyVariateSource(seed=seed)))
            assert len(picked) == n
            assert all(a < b for a, b in zip(picked, picked[1:]))
            assert all(0 <= i < total for i in picked)

    def test_duplicate_replays(self) -> None:
        sampler = SelectionSampler(range(500), 20, source=NumpyVariateSource(seed=9))
        next(sampler)
        clone = sampler.duplicate()
        assert list(clone) == list(sampler)

    def test_generator_population(self) -> None:
        sampler = SelectionSampler(
            (chr(97 + i) for i in range(26)), 3, total=26, source=NumpyVariateSource(seed=1)
        )
        picked = list(sampler)
        assert len(picked) == 3
        assert picked == sorted(picked)
