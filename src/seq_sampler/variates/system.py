"""System variate source using ``os.urandom()``.

Cryptographically secure and always available, but not seedable. It is
the default fallback for sources that can run dry.
"""

from __future__ import annotations

import os

from seq_sampler.variates.base import UniformVariateSource
from seq_sampler.variates.registry import register_variate_source


@register_variate_source("system")
class SystemVariateSource(UniformVariateSource):
    """``os.urandom()`` wrapper, always available and stateless.

    Float and integer draws use the byte-derived defaults from
    :class:`UniformVariateSource`.
    """

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    def get_random_bytes(self, n: int) -> bytes:
        """Return *n* bytes from the OS CSPRNG."""
        return os.urandom(n)

    def duplicate(self) -> SystemVariateSource:
        """Return a fresh instance; there is no state to replay."""
        return SystemVariateSource()

    def close(self) -> None:
        """No-op, no resources to release."""
