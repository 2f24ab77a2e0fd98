"""Fallback variate source: composition wrapper with transparent failover.

``FallbackVariateSource`` wraps a *primary* and a *fallback* source. When the
primary raises :class:`~seq_sampler.exceptions.VariateUnavailableError`, the
wrapper delegates to the fallback. **All other exceptions propagate
unchanged**: only variate-unavailability is a recoverable condition.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from seq_sampler.exceptions import VariateUnavailableError
from seq_sampler.variates.base import UniformVariateSource

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("seq_sampler")

_T = TypeVar("_T")


class FallbackVariateSource(UniformVariateSource):
    """Composition wrapper: tries primary, falls back on ``VariateUnavailableError``.

    Reports which source served the last draw via :attr:`last_source_used`.

    Args:
        primary: The preferred variate source.
        fallback: The source to use when the primary is unavailable.
    """

    def __init__(self, primary: UniformVariateSource, fallback: UniformVariateSource) -> None:
        self._primary = primary
        self._fallback = fallback
        self._last_source_used: str = primary.name

    @property
    def name(self) -> str:
        """Return a compound name: ``'<primary>+<fallback>'``."""
        return f"{self._primary.name}+{self._fallback.name}"

    @property
    def is_available(self) -> bool:
        """Returns ``True`` if either the primary or fallback is available."""
        return self._primary.is_available or self._fallback.is_available

    @property
    def primary(self) -> UniformVariateSource:
        """The wrapped preferred source."""
        return self._primary

    @property
    def last_source_used(self) -> str:
        """Name of the source that served the last draw."""
        return self._last_source_used

    def _call(self, method: Callable[[UniformVariateSource], _T]) -> _T:
        try:
            value = method(self._primary)
            self._last_source_used = self._primary.name
            return value
        except VariateUnavailableError:
            if self._last_source_used != self._fallback.name:
                logger.warning(
                    "Primary variate source %r unavailable, falling back to %r",
                    self._primary.name,
                    self._fallback.name,
                )
            value = method(self._fallback)
            self._last_source_used = self._fallback.name
            return value

    def get_random_bytes(self, n: int) -> bytes:
        """Fetch bytes from the primary source, falling back if unavailable.

        Raises:
            VariateUnavailableError: If **both** primary and fallback fail.
        """
        return self._call(lambda source: source.get_random_bytes(n))

    def uniform_real(self) -> float:
        """Draw from the primary's native generator, falling back if unavailable."""
        return self._call(lambda source: source.uniform_real())

    def uniform_open(self) -> float:
        """Draw from the primary's native generator, falling back if unavailable."""
        return self._call(lambda source: source.uniform_open())

    def uniform_int(self, low: int, high: int) -> int:
        """Draw from the primary's native generator, falling back if unavailable."""
        return self._call(lambda source: source.uniform_int(low, high))

    def duplicate(self) -> FallbackVariateSource:
        """Duplicate both wrapped sources."""
        clone = FallbackVariateSource(self._primary.duplicate(), self._fallback.duplicate())
        clone._last_source_used = self._last_source_used
        return clone

    def close(self) -> None:
        """Close both primary and fallback sources."""
        self._primary.close()
        self._fallback.close()

    def health_check(self) -> dict[str, Any]:
        """Return health status for both sources."""
        return {
            "source": self.name,
            "healthy": self.is_available,
            "primary": self._primary.health_check(),
            "fallback": self._fallback.health_check(),
            "last_source_used": self._last_source_used,
        }
