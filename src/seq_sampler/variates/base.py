"""Abstract base class for all uniform variate sources.

Every source of randomness the samplers draw from (a seeded numpy
generator, OS randomness, a recorded entropy pool, or a test double)
implements this interface. The ABC derives ``uniform_real()``,
``uniform_open()`` and ``uniform_int()`` from ``get_random_bytes()``;
sources with a native generator override them. Subclasses must implement
the abstract members: ``name``, ``is_available``, ``get_random_bytes()``,
``duplicate()`` and ``close()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

# 53 random mantissa bits taken from 8 bytes, as CPython's random() does.
_FLOAT_SHIFT = 11
_FLOAT_SCALE = 2.0**-53


class UniformVariateSource(ABC):
    """Abstract base for uniform variate sources.

    A source is an opaque capability: samplers only ever call the
    ``uniform_*`` methods. Sources are not safe for concurrent use from
    multiple threads without external synchronization.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'numpy'``, ``'system'``)."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Whether the source can currently provide randomness."""

    @abstractmethod
    def get_random_bytes(self, n: int) -> bytes:
        """Return exactly *n* random bytes.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes of randomness.

        Raises:
            VariateUnavailableError: If the source cannot provide bytes.
        """

    def uniform_real(self) -> float:
        """Return a uniform float in [0, 1).

        The default implementation takes the top 53 bits of an 8-byte
        integer from ``get_random_bytes()``.
        """
        raw = int.from_bytes(self.get_random_bytes(8), "little")
        return (raw >> _FLOAT_SHIFT) * _FLOAT_SCALE

    def uniform_open(self) -> float:
        """Return a uniform float in the open interval (0, 1).

        Redraws ``uniform_real()`` until it is non-zero.
        """
        value = self.uniform_real()
        while value == 0.0:
            value = self.uniform_real()
        return value

    def uniform_int(self, low: int, high: int) -> int:
        """Return a uniform integer in [*low*, *high*).

        The default implementation rejection-samples the smallest number of
        bytes covering the span, so every value is exactly equally likely.

        Args:
            low: Inclusive lower bound.
            high: Exclusive upper bound.

        Returns:
            An integer ``low <= k < high``.

        Raises:
            ValueError: If the range is empty.
        """
        span = high - low
        if span <= 0:
            raise ValueError(f"Empty integer range [{low}, {high})")
        bits = (span - 1).bit_length()
        if bits == 0:
            return low
        n_bytes = (bits + 7) // 8
        mask = (1 << bits) - 1
        while True:
            candidate = int.from_bytes(self.get_random_bytes(n_bytes), "little") & mask
            if candidate < span:
                return low + candidate

    @abstractmethod
    def duplicate(self) -> UniformVariateSource:
        """Return an independent source that continues with the same state.

        Seedable sources return a copy that will produce the same future
        draws as this one. Stateless sources may return a fresh instance.
        """

    @abstractmethod
    def close(self) -> None:
        """Release resources (file handles, buffers)."""

    @classmethod
    def from_config(cls, config: Any) -> UniformVariateSource:
        """Build a source from a SamplerConfig.

        Sources with constructor arguments override this; the default calls
        the constructor with no arguments.
        """
        return cls()

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this source.

        Returns:
            Dictionary with at least ``'source'`` and ``'healthy'`` keys.
        """
        return {"source": self.name, "healthy": self.is_available}
