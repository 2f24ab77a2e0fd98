"""Seedable variate source backed by ``numpy.random.Generator``.

This is the default source. Seeding makes sampling runs reproducible, and
``duplicate()`` copies the bit-generator state so a duplicated sampler
replays exactly the draws the original would have made.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING

import numpy as np

from seq_sampler.variates.base import UniformVariateSource
from seq_sampler.variates.registry import register_variate_source

if TYPE_CHECKING:
    from seq_sampler.config import SamplerConfig


@register_variate_source("numpy")
class NumpyVariateSource(UniformVariateSource):
    """``numpy.random.default_rng`` wrapper with native float and integer draws.

    Args:
        seed: Optional seed for reproducible output. ``None`` seeds from
            fresh OS entropy.
        rng: An existing generator to wrap instead of creating one. Takes
            precedence over *seed*.
    """

    def __init__(self, seed: int | None = None, rng: np.random.Generator | None = None) -> None:
        self._seed = seed
        self._rng = rng if rng is not None else np.random.default_rng(seed)

    @classmethod
    def from_config(cls, config: SamplerConfig) -> NumpyVariateSource:
        """Build a generator seeded with ``config.seed``."""
        return cls(seed=config.seed)

    @property
    def name(self) -> str:
        """Return ``'numpy'``."""
        return "numpy"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    @property
    def seed(self) -> int | None:
        """Seed the generator was created with, if any."""
        return self._seed

    def get_random_bytes(self, n: int) -> bytes:
        """Return *n* bytes from the generator."""
        return self._rng.bytes(n)

    def uniform_real(self) -> float:
        """Return ``Generator.random()`` as a Python float in [0, 1)."""
        return float(self._rng.random())

    def uniform_int(self, low: int, high: int) -> int:
        """Return ``Generator.integers(low, high)`` as a Python int.

        Raises:
            ValueError: If the range is empty.
        """
        if high <= low:
            raise ValueError(f"Empty integer range [{low}, {high})")
        return int(self._rng.integers(low, high))

    def duplicate(self) -> NumpyVariateSource:
        """Return a source whose generator continues from the same state."""
        return NumpyVariateSource(seed=self._seed, rng=copy.deepcopy(self._rng))

    def close(self) -> None:
        """No-op, no resources to release."""
