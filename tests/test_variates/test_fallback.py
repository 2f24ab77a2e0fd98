"""Tests for FallbackVariateSource."""

from __future__ import annotations

import logging

import pytest

from seq_sampler.exceptions import VariateUnavailableError
from seq_sampler.variates.fallback import FallbackVariateSource
from seq_sampler.variates.mock import ScriptedVariateSource
from seq_sampler.variates.pool import EntropyPoolSource


class _RuntimeErrorSource(ScriptedVariateSource):
    """Test double: fails with RuntimeError (not VariateUnavailableError)."""

    @property
    def name(self) -> str:
        return "runtime_error"

    def uniform_real(self) -> float:
        raise RuntimeError("unexpected error")


class TestFallbackVariateSource:
    """Tests for the failover composition wrapper."""

    def test_compound_name(self) -> None:
        source = FallbackVariateSource(ScriptedVariateSource(), EntropyPoolSource())
        assert source.name == "scripted+entropy_pool"

    def test_primary_used_when_available(self) -> None:
        source = FallbackVariateSource(
            ScriptedVariateSource(reals=[0.25]), ScriptedVariateSource(reals=[0.75])
        )
        assert source.uniform_real() == 0.25
        assert source.last_source_used == "scripted"

    def test_falls_back_when_primary_runs_dry(self) -> None:
        primary = EntropyPoolSource(b"\x00" * 8 + b"\xff" * 4)
        fallback = ScriptedVariateSource(reals=[0.5])
        source = FallbackVariateSource(primary, fallback)
        assert source.uniform_real() == 0.0
        assert source.uniform_real() == 0.5
        assert source.last_source_used == "scripted"

    def test_fallback_for_each_draw_kind(self) -> None:
        source = FallbackVariateSource(
            EntropyPoolSource(), ScriptedVariateSource(reals=[0.1, 0.2], ints=[3])
        )
        assert source.uniform_real() == 0.1
        assert source.uniform_open() == 0.2
        assert source.uniform_int(10, 20) == 13

    def test_fallback_bytes(self) -> None:
        source = FallbackVariateSource(EntropyPoolSource(b"ab"), EntropyPoolSource(b"xyz"))
        assert source.get_random_bytes(3) == b"xyz"

    def test_both_failing_raises(self) -> None:
        source = FallbackVariateSource(EntropyPoolSource(), EntropyPoolSource())
        with pytest.raises(VariateUnavailableError):
            source.uniform_real()

    def test_other_errors_propagate(self) -> None:
        source = FallbackVariateSource(_RuntimeErrorSource(), ScriptedVariateSource(reals=[0.5]))
        with pytest.raises(RuntimeError, match="unexpected"):
            source.uniform_real()

    def test_warns_once_per_failover(self, caplog: pytest.LogCaptureFixture) -> None:
        source = FallbackVariateSource(
            EntropyPoolSource(), ScriptedVariateSource(reals=[0.1, 0.2, 0.3])
        )
        with caplog.at_level(logging.WARNING, logger="seq_sampler"):
            source.uniform_real()
            source.uniform_real()
            source.uniform_real()
        warnings = [r for r in caplog.records if "falling back" in r.getMessage()]
        assert len(warnings) == 1

    def test_is_available(self) -> None:
        assert FallbackVariateSource(EntropyPoolSource(), ScriptedVariateSource([0.1])).is_available
        assert not FallbackVariateSource(EntropyPoolSource(), EntropyPoolSource()).is_available

    def test_duplicate_duplicates_both(self) -> None:
        source = FallbackVariateSource(
            EntropyPoolSource(b"\x00" * 8), ScriptedVariateSource(reals=[0.4])
        )
        clone = source.duplicate()
        assert [source.uniform_real(), source.uniform_real()] == [0.0, 0.4]
        assert [clone.uniform_real(), clone.uniform_real()] == [0.0, 0.4]

    def test_health_check(self) -> None:
        health = FallbackVariateSource(EntropyPoolSource(), ScriptedVariateSource()).health_check()
        assert health["primary"]["source"] == "entropy_pool"
        assert health["fallback"]["source"] == "scripted"
        assert "last_source_used" in health
