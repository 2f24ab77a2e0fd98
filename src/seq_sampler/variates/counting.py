"""Draw-counting wrapper for measuring sampler cost.

Counts every uniform variate a sampler requests, so the number of draws
for a full sampling run can be compared across population sizes.
"""

from __future__ import annotations

from typing import Any

from seq_sampler.variates.base import UniformVariateSource


class CountingVariateSource(UniformVariateSource):
    """Delegates to *inner* and counts each ``uniform_*`` call as one draw.

    Raw ``get_random_bytes()`` calls are passed through uncounted.

    Args:
        inner: The source that actually produces the variates.
    """

    def __init__(self, inner: UniformVariateSource) -> None:
        self._inner = inner
        self.real_draws = 0
        self.int_draws = 0

    @property
    def draws(self) -> int:
        """Total number of variates drawn so far."""
        return self.real_draws + self.int_draws

    @property
    def name(self) -> str:
        return f"counting({self._inner.name})"

    @property
    def is_available(self) -> bool:
        return self._inner.is_available

    def get_random_bytes(self, n: int) -> bytes:
        return self._inner.get_random_bytes(n)

    def uniform_real(self) -> float:
        self.real_draws += 1
        return self._inner.uniform_real()

    def uniform_open(self) -> float:
        self.real_draws += 1
        return self._inner.uniform_open()

    def uniform_int(self, low: int, high: int) -> int:
        self.int_draws += 1
        return self._inner.uniform_int(low, high)

    def reset(self) -> None:
        """Zero both counters."""
        self.real_draws = 0
        self.int_draws = 0

    def duplicate(self) -> CountingVariateSource:
        """Duplicate the inner source; the copy starts with the same counts."""
        clone = CountingVariateSource(self._inner.duplicate())
        clone.real_draws = self.real_draws
        clone.int_draws = self.int_draws
        return clone

    def close(self) -> None:
        self._inner.close()

    def health_check(self) -> dict[str, Any]:
        health = self._inner.health_check()
        health["draws"] = self.draws
        return health
