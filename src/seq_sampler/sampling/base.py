"""Iterator contract shared by all sequential samplers.

A sequential sampler walks its population once, front to back, and yields
exactly ``n`` of the first ``total`` elements in their original order.
Subclasses only decide how many unselected elements to skip before each
selection; the bookkeeping, validation, logging and duplication live here.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Sized
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from seq_sampler.config import get_default_config
from seq_sampler.exceptions import (
    InvalidSampleSizeError,
    SamplerExhaustedError,
    SamplerInvariantError,
)
from seq_sampler.logging.logger import SamplingLogger
from seq_sampler.logging.types import SelectionRecord
from seq_sampler.sampling.cursor import make_cursor
from seq_sampler.sampling.types import Algorithm, SamplerState
from seq_sampler.variates.factory import get_default_source

if TYPE_CHECKING:
    from collections.abc import Iterator

    from seq_sampler.config import SamplerConfig
    from seq_sampler.variates.base import UniformVariateSource

logger = logging.getLogger("seq_sampler")

T = TypeVar("T")


class SequentialSampler(ABC, Generic[T]):
    """Lazy, order-preserving sample of ``n`` elements out of ``total``.

    The sampler is its own iterator. It also exposes the range-style
    primitives ``empty``, ``front`` and ``pop_front()`` together with
    ``index`` (position of the current selection in the population) and
    ``duplicate()`` for restartable iteration.

    Args:
        population: Sequence, numpy array, iterable or InputCursor holding
            at least ``total`` elements. Only the first ``total`` are
            considered.
        n: Number of elements to select.
        total: Population size. Defaults to ``len(population)``.
        source: Uniform variate source. If given, the sampler owns it and
            duplicates it along with itself. If ``None``, the ambient source
            from :func:`~seq_sampler.variates.factory.get_default_source` is
            borrowed.
        config: Sampling configuration. Defaults to the environment config.

    Raises:
        InvalidSampleSizeError: If ``n > total``, a size is negative, or the
            population size cannot be determined.
    """

    def __init__(
        self,
        population: Any,
        n: int,
        total: int | None = None,
        *,
        source: UniformVariateSource | None = None,
        config: SamplerConfig | None = None,
    ) -> None:
        self._config = config if config is not None else get_default_config()
        cursor = make_cursor(population)
        known = cursor.remaining
        if known is None and isinstance(population, Sized):
            known = len(population)

        if total is None:
            if known is None:
                raise InvalidSampleSizeError(
                    "total must be given for a population of unknown length"
                )
            total = known
        if n < 0 or total < 0:
            raise InvalidSampleSizeError(f"Sample sizes must be non-negative (n={n}, total={total})")
        if n > total:
            raise InvalidSampleSizeError(f"Cannot select {n} elements out of {total}")
        if self._config.strict_length and known is not None and known < total:
            raise InvalidSampleSizeError(
                f"Population holds {known} elements, fewer than total={total}"
            )

        self._cursor = cursor
        self._total = total
        self._n = n
        self._available = total
        self._to_select = n
        self._index = 0
        self._owns_source = source is not None
        self._source: UniformVariateSource = source if source is not None else get_default_source()
        self._logger: SamplingLogger | None = SamplingLogger(self._config)
        if not self._logger.enabled:
            self._logger = None

        self._start()
        self._prime()

    # --- Strategy hooks ---

    @property
    @abstractmethod
    def algorithm(self) -> Algorithm:
        """Skip strategy that will produce the next skip distance."""

    def _start(self) -> None:
        """Initialize strategy state before the first skip."""

    @abstractmethod
    def _skip(self) -> int:
        """Return the number of unselected elements before the next selection."""

    def _copy_strategy_state(self, clone: SequentialSampler[T]) -> None:
        """Give *clone* its own copy of any mutable strategy state."""

    # --- Range primitives ---

    @property
    def empty(self) -> bool:
        """Whether all ``n`` selections have been consumed."""
        return self._to_select == 0

    @property
    def front(self) -> T:
        """The current selection.

        Raises:
            SamplerExhaustedError: If the sampler is empty.
        """
        if self._to_select == 0:
            raise SamplerExhaustedError("front of an exhausted sampler")
        return self._cursor.front

    def pop_front(self) -> None:
        """Consume the current selection and move to the next one.

        Raises:
            SamplerExhaustedError: If the sampler is empty.
        """
        if self._to_select == 0:
            raise SamplerExhaustedError("pop_front on an exhausted sampler")
        self._cursor.pop_front()
        self._available -= 1
        self._to_select -= 1
        self._index += 1
        self._prime()

    @property
    def remaining(self) -> int:
        """Selections still to be produced, including the current one."""
        return self._to_select

    @property
    def index(self) -> int:
        """Position of the current selection within the population.

        Once the sampler is empty this is one past the last selection.
        """
        return self._index

    @property
    def source(self) -> UniformVariateSource:
        """The variate source this sampler draws from."""
        return self._source

    @property
    def owns_source(self) -> bool:
        """Whether the source was supplied by the caller (and is duplicated)."""
        return self._owns_source

    @property
    def sampling_logger(self) -> SamplingLogger | None:
        """Per-selection logger, ``None`` when logging and diagnostics are off."""
        return self._logger

    @property
    def v_prime(self) -> float | None:
        """Algorithm D's carried variate, ``None`` for other strategies."""
        return None

    def state(self) -> SamplerState:
        """Return a snapshot of the sampler's counters."""
        return SamplerState(
            total=self._total,
            n=self._n,
            available=self._available,
            to_select=self._to_select,
            index=self._index,
            algorithm=self.algorithm,
            v_prime=self.v_prime,
        )

    def duplicate(self) -> SequentialSampler[T]:
        """Return an independent sampler at the same position.

        The copy has the same counters and strategy state and a duplicate
        of the input cursor. An owned variate source is duplicated too, so
        a seeded sampler and its duplicate produce identical remaining
        output; a borrowed ambient source stays shared.
        """
        cls = type(self)
        clone = cls.__new__(cls)
        clone.__dict__.update(self.__dict__)
        clone._cursor = self._cursor.duplicate()
        if self._owns_source:
            clone._source = self._source.duplicate()
        if self._logger is not None:
            clone._logger = SamplingLogger(self._config)
        self._copy_strategy_state(clone)
        return clone

    __copy__ = duplicate

    # --- Python iteration ---

    def __iter__(self) -> SequentialSampler[T]:
        return self

    def __next__(self) -> T:
        if self._to_select == 0:
            raise StopIteration
        value = self._cursor.front
        self.pop_front()
        return value

    def __len__(self) -> int:
        return self._to_select

    def enumerate_selected(self) -> Iterator[tuple[int, T]]:
        """Consume the sampler, yielding ``(index, element)`` pairs."""
        while self._to_select:
            yield self._index, self._cursor.front
            self.pop_front()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(n={self._n}, total={self._total}, "
            f"remaining={self._to_select}, index={self._index}, "
            f"algorithm={self.algorithm.value})"
        )

    # --- Advance ---

    def _prime(self) -> None:
        """Skip ahead so the cursor rests on the next selected element."""
        if self._to_select == 0:
            return
        if self._available < self._to_select:
            raise SamplerInvariantError(
                f"{self._to_select} selections owed but only {self._available} elements left"
            )

        started = time.perf_counter() if self._logger is not None else 0.0
        skip = self._skip()
        self._cursor.pop_front_n(skip)
        self._index += skip
        self._available -= skip

        if self._available < self._to_select:
            raise SamplerInvariantError(
                f"Skipped {skip} elements leaving {self._available} for "
                f"{self._to_select} selections"
            )
        if self._cursor.empty:
            raise SamplerInvariantError(
                f"Population ran out at index {self._index} before the sample was complete"
            )

        if self._logger is not None:
            self._logger.log_selection(
                SelectionRecord(
                    timestamp_ns=time.time_ns(),
                    index=self._index,
                    skip=skip,
                    available=self._available,
                    to_select=self._to_select,
                    algorithm=self.algorithm.value,
                    v_prime=self.v_prime,
                    skip_ms=(time.perf_counter() - started) * 1000.0,
                )
            )
