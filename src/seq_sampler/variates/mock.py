"""Scripted variate source for deterministic tests.

Replays caller-supplied reals and integers in order, so a sampler's
output for a known draw sequence can be checked exactly.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from seq_sampler.exceptions import VariateUnavailableError
from seq_sampler.variates.base import UniformVariateSource

if TYPE_CHECKING:
    from collections.abc import Iterable


class ScriptedVariateSource(UniformVariateSource):
    """Replays fixed variates.

    ``uniform_real()`` and ``uniform_open()`` pop from *reals*;
    ``uniform_int()`` pops from *ints* (offset by ``low``). Running out of
    either queue raises :class:`VariateUnavailableError`.

    Args:
        reals: Floats to return, each in [0, 1).
        ints: Offsets to return from ``uniform_int``; each must lie in
            ``[0, high - low)`` for the call that consumes it.
    """

    def __init__(self, reals: Iterable[float] = (), ints: Iterable[int] = ()) -> None:
        self._reals: deque[float] = deque(reals)
        self._ints: deque[int] = deque(ints)

    @property
    def name(self) -> str:
        """Return ``'scripted'``."""
        return "scripted"

    @property
    def is_available(self) -> bool:
        """Whether any scripted value remains."""
        return bool(self._reals or self._ints)

    @property
    def pending_reals(self) -> int:
        """Number of unread floats."""
        return len(self._reals)

    @property
    def pending_ints(self) -> int:
        """Number of unread integers."""
        return len(self._ints)

    def get_random_bytes(self, n: int) -> bytes:
        raise VariateUnavailableError("ScriptedVariateSource does not produce raw bytes")

    def uniform_real(self) -> float:
        if not self._reals:
            raise VariateUnavailableError("Scripted reals exhausted")
        return self._reals.popleft()

    def uniform_open(self) -> float:
        # Scripted values are returned verbatim, including 0.0.
        return self.uniform_real()

    def uniform_int(self, low: int, high: int) -> int:
        if not self._ints:
            raise VariateUnavailableError("Scripted integers exhausted")
        offset = self._ints.popleft()
        if not 0 <= offset < high - low:
            raise ValueError(f"Scripted offset {offset} outside [0, {high - low})")
        return low + offset

    def duplicate(self) -> ScriptedVariateSource:
        """Return a source that replays the same remaining values."""
        return ScriptedVariateSource(self._reals, self._ints)

    def close(self) -> None:
        """Drop all pending values."""
        self._reals.clear()
        self._ints.clear()
