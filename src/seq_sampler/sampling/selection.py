"""Knuth's Algorithm S, the baseline sequential sampler.

Visits every element and draws one variate per element, so its cost is
O(total). Its output distribution is the same as
:class:`~seq_sampler.sampling.vitter.VitterSampler`'s, which makes it the
reference for benchmarks and statistical comparisons.
"""

from __future__ import annotations

from typing import TypeVar

from seq_sampler.sampling.base import SequentialSampler
from seq_sampler.sampling.types import Algorithm

T = TypeVar("T")


class SelectionSampler(SequentialSampler[T]):
    """Selection sampling: select each element with probability ``to_select / available``."""

    @property
    def algorithm(self) -> Algorithm:
        return Algorithm.S

    def _skip(self) -> int:
        s = 0
        available = self._available
        to_select = self._to_select
        while (available - s) * self._source.uniform_real() >= to_select:
            s += 1
        return s
