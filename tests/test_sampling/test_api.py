"""Tests for the random_sample and sample_indices convenience functions."""

from __future__ import annotations

import pytest

from seq_sampler.config import SamplerConfig
from seq_sampler.exceptions import ConfigValidationError, InvalidSampleSizeError
from seq_sampler.sampling.api import random_sample, sample_indices
from seq_sampler.sampling.selection import SelectionSampler
from seq_sampler.sampling.types import Algorithm
from seq_sampler.sampling.vitter import VitterSampler
from seq_sampler.variates.factory import set_default_source
from seq_sampler.variates.mock import ScriptedVariateSource
from seq_sampler.variates.numpy_source import NumpyVariateSource


class TestRandomSample:
    """Sampler construction through random_sample()."""

    def test_default_is_vitter(self) -> None:
        sampler = random_sample(range(100), 5, source=NumpyVariateSource(seed=0))
        assert isinstance(sampler, VitterSampler)

    @pytest.mark.parametrize("algorithm", ["S", Algorithm.S])
    def test_selection_sampler(self, algorithm: str | Algorithm) -> None:
        sampler = random_sample(range(100), 5, source=NumpyVariateSource(seed=0), algorithm=algorithm)
        assert isinstance(sampler, SelectionSampler)

    def test_algorithm_a_cannot_be_requested(self) -> None:
        with pytest.raises(ValueError, match="cannot be requested"):
            random_sample(range(100), 5, algorithm="A")

    def test_unknown_algorithm(self) -> None:
        with pytest.raises(ValueError):
            random_sample(range(100), 5, algorithm="Z")

    def test_overrides_apply(self) -> None:
        sampler = random_sample(range(100), 5, source=NumpyVariateSource(seed=0), alpha_inverse=50)
        assert sampler.algorithm is Algorithm.A

    def test_overrides_on_explicit_config(self) -> None:
        config = SamplerConfig(alpha_inverse=50)
        sampler = random_sample(
            range(100), 5, source=NumpyVariateSource(seed=0), config=config, alpha_inverse=13
        )
        assert sampler.algorithm is Algorithm.D

    def test_unknown_override(self) -> None:
        with pytest.raises(ConfigValidationError, match="Unknown config field"):
            random_sample(range(10), 2, alpha=3)

    def test_infrastructure_override_rejected(self) -> None:
        with pytest.raises(ConfigValidationError, match="infrastructure field"):
            random_sample(range(10), 2, seed=3)

    def test_invalid_override_value(self) -> None:
        with pytest.raises(ConfigValidationError):
            random_sample(range(10), 2, alpha_inverse=1)

    def test_diagnostic_override(self) -> None:
        sampler = random_sample(range(50), 4, source=NumpyVariateSource(seed=0), diagnostic_mode=True)
        list(sampler)
        assert sampler.sampling_logger is not None
        assert len(sampler.sampling_logger.get_diagnostic_data()) == 4

    def test_invalid_sizes_propagate(self) -> None:
        with pytest.raises(InvalidSampleSizeError):
            random_sample([1, 2], 3)


class TestSampleIndices:
    """Index sampling over range(total)."""

    def test_matches_vitter_sampler(self) -> None:
        expected = list(VitterSampler(range(1000), 8, source=NumpyVariateSource(seed=5)))
        assert sample_indices(8, 1000, source=NumpyVariateSource(seed=5)) == expected

    def test_uses_ambient_source(self) -> None:
        set_default_source(ScriptedVariateSource(reals=[0.7, 0.3, 0.05, 0.9], ints=[1]))
        assert sample_indices(5, 10) == [0, 2, 6, 7, 9]

    def test_selection_baseline(self) -> None:
        picked = sample_indices(5, 50, source=NumpyVariateSource(seed=1), algorithm="S")
        assert len(picked) == 5
        assert picked == sorted(set(picked))

    def test_empty(self) -> None:
        assert sample_indices(0, 0, source=NumpyVariateSource(seed=1)) == []
