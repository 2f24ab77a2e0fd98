"""Vitter's sequential random sampler.

Selects ``n`` of ``total`` elements in one pass with O(n) variates and O(n)
expected work, independent of ``total``: Algorithm D while the sample is a
small fraction of what remains, Algorithm A once ``alpha_inverse *
to_select > available``. The switch is one-way.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from seq_sampler.sampling.base import SequentialSampler
from seq_sampler.sampling.skip import AlgorithmD, skip_a
from seq_sampler.sampling.types import Algorithm

logger = logging.getLogger("seq_sampler")

T = TypeVar("T")


class VitterSampler(SequentialSampler[T]):
    """Order-preserving random sample using Vitter's Algorithms D and A.

    Example::

        >>> from seq_sampler.variates import NumpyVariateSource
        >>> sampler = VitterSampler(range(100), 5, source=NumpyVariateSource(seed=7))
        >>> picked = list(sampler)
        >>> len(picked), picked == sorted(picked)
        (5, True)

    See :class:`~seq_sampler.sampling.base.SequentialSampler` for the
    arguments and the iteration contract.
    """

    def _start(self) -> None:
        self._alpha_inverse = self._config.alpha_inverse
        self._d = AlgorithmD()
        # Checking up front saves a variate when A would be chosen anyway.
        if self._alpha_inverse * self._to_select > self._available:
            self._algorithm = Algorithm.A
        else:
            self._algorithm = Algorithm.D
            if self._to_select:
                self._d.new_v_prime(self._to_select, self._source)

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @property
    def v_prime(self) -> float | None:
        if self._algorithm is Algorithm.D:
            return self._d.v_prime
        return None

    def _skip(self) -> int:
        if self._algorithm is Algorithm.A:
            return skip_a(self._available, self._to_select, self._source)
        if self._alpha_inverse * self._to_select > self._available:
            self._algorithm = Algorithm.A
            logger.debug(
                "Switching to Algorithm A at index %d (available=%d, to_select=%d)",
                self._index,
                self._available,
                self._to_select,
            )
            return skip_a(self._available, self._to_select, self._source)
        return self._d.skip(self._available, self._to_select, self._source)

    def _copy_strategy_state(self, clone: SequentialSampler[T]) -> None:
        clone._d = AlgorithmD(self._d.v_prime)  # type: ignore[attr-defined]
