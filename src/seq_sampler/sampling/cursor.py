"""Forward cursors over a sampler's population.

A sampler only needs to look at the current element, step past it, skip a
run of unselected elements, and duplicate its position for restartable
iteration. :func:`make_cursor` picks the cheapest cursor for the
population: random-access sequences (including ``range`` and numpy arrays)
skip by index arithmetic in O(1); any other iterable is consumed element
by element and duplicated with :func:`itertools.tee`.
"""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar

import numpy as np

T = TypeVar("T")

_EMPTY = object()


class InputCursor(ABC, Generic[T]):
    """Forward-only cursor with bulk skip and independent duplication."""

    @property
    @abstractmethod
    def empty(self) -> bool:
        """Whether the cursor has run past the last element."""

    @property
    @abstractmethod
    def front(self) -> T:
        """The element under the cursor.

        Raises:
            IndexError: If the cursor is empty.
        """

    @abstractmethod
    def pop_front(self) -> None:
        """Advance past the current element."""

    def pop_front_n(self, n: int) -> None:
        """Advance past *n* elements, stopping early at the end."""
        for _ in range(n):
            if self.empty:
                return
            self.pop_front()

    @property
    def remaining(self) -> int | None:
        """Number of elements left, or ``None`` when unknown."""
        return None

    @abstractmethod
    def duplicate(self) -> InputCursor[T]:
        """Return a cursor at the same position that advances independently."""


class SequenceCursor(InputCursor[T]):
    """Cursor over a random-access sequence.

    The sequence itself is never mutated, so duplicates share it and only
    copy the position.

    Args:
        sequence: Anything supporting ``len()`` and integer indexing.
        position: Index of the current element.
    """

    __slots__ = ("_length", "_position", "_sequence")

    def __init__(self, sequence: Sequence[T] | np.ndarray, position: int = 0) -> None:
        self._sequence = sequence
        self._length = len(sequence)
        self._position = position

    @property
    def empty(self) -> bool:
        return self._position >= self._length

    @property
    def front(self) -> T:
        if self.empty:
            raise IndexError("front of an empty cursor")
        return self._sequence[self._position]  # type: ignore[return-value]

    @property
    def position(self) -> int:
        """Index of the current element within the sequence."""
        return self._position

    def pop_front(self) -> None:
        self._position += 1

    def pop_front_n(self, n: int) -> None:
        self._position = min(self._position + n, self._length)

    @property
    def remaining(self) -> int:
        return max(self._length - self._position, 0)

    def duplicate(self) -> SequenceCursor[T]:
        return SequenceCursor(self._sequence, self._position)


class IteratorCursor(InputCursor[T]):
    """Cursor over an arbitrary iterable, buffering only the current element.

    Skips consume the underlying iterator without storing the skipped
    elements. :meth:`duplicate` splits the iterator with
    :func:`itertools.tee`; after that, this cursor and the duplicate each
    read from their own tee branch.
    """

    __slots__ = ("_head", "_iterator")

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iterator: Iterator[T] = iter(iterable)
        self._head: Any = next(self._iterator, _EMPTY)

    @classmethod
    def _at(cls, iterator: Iterator[T], head: Any) -> IteratorCursor[T]:
        cursor = cls.__new__(cls)
        cursor._iterator = iterator
        cursor._head = head
        return cursor

    @property
    def empty(self) -> bool:
        return self._head is _EMPTY

    @property
    def front(self) -> T:
        if self._head is _EMPTY:
            raise IndexError("front of an empty cursor")
        return self._head  # type: ignore[no-any-return]

    def pop_front(self) -> None:
        self._head = next(self._iterator, _EMPTY)

    def pop_front_n(self, n: int) -> None:
        if n <= 0 or self._head is _EMPTY:
            return
        # The head counts as the first skipped element.
        deque(itertools.islice(self._iterator, n - 1), maxlen=0)
        self._head = next(self._iterator, _EMPTY)

    def duplicate(self) -> IteratorCursor[T]:
        self._iterator, branch = itertools.tee(self._iterator)
        return IteratorCursor._at(branch, self._head)


def make_cursor(population: Any) -> InputCursor[Any]:
    """Wrap *population* in the cheapest suitable cursor.

    Args:
        population: An existing InputCursor (duplicated, so the caller's
            cursor is never advanced), a sequence or numpy array (random
            access), or any other iterable.

    Returns:
        An InputCursor positioned at the first element.

    Raises:
        TypeError: If *population* is not iterable.
    """
    if isinstance(population, InputCursor):
        return population.duplicate()
    if isinstance(population, (Sequence, np.ndarray)):
        return SequenceCursor(population)
    if not isinstance(population, Iterable):
        raise TypeError(f"Population of type {type(population).__name__} is not iterable")
    return IteratorCursor(population)
