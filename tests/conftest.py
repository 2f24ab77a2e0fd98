"""Shared pytest fixtures for seq-sampler tests.

Provides reusable configuration objects and seeded variate sources, and
isolates every test from the process-wide ambient source and the cached
environment config.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from seq_sampler.config import SamplerConfig, get_default_config
from seq_sampler.variates.factory import set_default_source
from seq_sampler.variates.numpy_source import NumpyVariateSource


@pytest.fixture(autouse=True)
def _isolate_ambient_state() -> Iterator[None]:
    """Reset the ambient source and the cached default config around each test."""
    previous = set_default_source(None)
    get_default_config.cache_clear()
    yield
    set_default_source(previous)
    get_default_config.cache_clear()


@pytest.fixture
def default_config() -> SamplerConfig:
    """Return a SamplerConfig with all default values."""
    return SamplerConfig()


@pytest.fixture
def diagnostic_config() -> SamplerConfig:
    """Return a config that keeps every selection record in memory."""
    return SamplerConfig(diagnostic_mode=True)


@pytest.fixture
def seeded_source() -> NumpyVariateSource:
    """Return a NumpyVariateSource with a fixed seed for reproducibility."""
    return NumpyVariateSource(seed=42)
