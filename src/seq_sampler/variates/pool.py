"""Finite entropy pool source.

Serves variates from a fixed buffer of recorded random bytes (for example
bytes captured from a hardware RNG). Replaying the same pool reproduces a
sampling run exactly. Once the pool is spent the source raises
:class:`~seq_sampler.exceptions.VariateUnavailableError`, which
:class:`~seq_sampler.variates.fallback.FallbackVariateSource` turns into a
transparent failover.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from seq_sampler.exceptions import VariateUnavailableError
from seq_sampler.variates.base import UniformVariateSource
from seq_sampler.variates.registry import register_variate_source

if TYPE_CHECKING:
    from seq_sampler.config import SamplerConfig

logger = logging.getLogger("seq_sampler")


@register_variate_source("entropy_pool")
class EntropyPoolSource(UniformVariateSource):
    """Serve bytes sequentially from an in-memory pool.

    Args:
        pool: The recorded random bytes.
        offset: Position of the next unread byte.
    """

    def __init__(self, pool: bytes = b"", offset: int = 0) -> None:
        self._pool = memoryview(bytes(pool))
        self._offset = offset

    @classmethod
    def from_file(cls, path: str | Path) -> EntropyPoolSource:
        """Load the whole pool from *path*.

        Raises:
            VariateUnavailableError: If the file cannot be read.
        """
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise VariateUnavailableError(f"Cannot read entropy pool {str(path)!r}: {exc}") from exc
        logger.debug("Loaded entropy pool %s (%d bytes)", path, len(data))
        return cls(data)

    @classmethod
    def from_config(cls, config: SamplerConfig) -> EntropyPoolSource:
        """Load the pool named by ``config.entropy_pool_path``.

        An empty path yields an empty (immediately spent) pool.
        """
        if not config.entropy_pool_path:
            logger.warning("entropy_pool source configured without entropy_pool_path")
            return cls()
        return cls.from_file(config.entropy_pool_path)

    @property
    def name(self) -> str:
        """Return ``'entropy_pool'``."""
        return "entropy_pool"

    @property
    def is_available(self) -> bool:
        """Whether any unread bytes remain."""
        return self._offset < len(self._pool)

    @property
    def remaining_bytes(self) -> int:
        """Number of unread bytes left in the pool."""
        return len(self._pool) - self._offset

    def get_random_bytes(self, n: int) -> bytes:
        """Return the next *n* bytes of the pool.

        Raises:
            VariateUnavailableError: If fewer than *n* bytes remain. The pool
                position is left unchanged in that case.
        """
        end = self._offset + n
        if end > len(self._pool):
            raise VariateUnavailableError(
                f"Entropy pool exhausted: requested {n} bytes, {self.remaining_bytes} left"
            )
        data = self._pool[self._offset : end].tobytes()
        self._offset = end
        return data

    def duplicate(self) -> EntropyPoolSource:
        """Return a source reading the same pool from the same position."""
        return EntropyPoolSource(self._pool, self._offset)

    def close(self) -> None:
        """Drop the pool; the source is spent afterwards."""
        self._pool = memoryview(b"")
        self._offset = 0

    def health_check(self) -> dict[str, Any]:
        """Return health status including the unread byte count."""
        return {
            "source": self.name,
            "healthy": self.is_available,
            "remaining_bytes": self.remaining_bytes,
        }
