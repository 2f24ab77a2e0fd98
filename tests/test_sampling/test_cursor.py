"""Tests for the input cursors."""

from __future__ import annotations

import numpy as np
import pytest

from seq_sampler.sampling.cursor import (
    InputCursor,
    IteratorCursor,
    SequenceCursor,
    make_cursor,
)


def _drain(cursor: InputCursor[int]) -> list[int]:
    out = []
    while not cursor.empty:
        out.append(cursor.front)
        cursor.pop_front()
    return out


class TestSequenceCursor:
    """Tests for the random-access cursor."""

    def test_walks_sequence(self) -> None:
        assert _drain(SequenceCursor([3, 1, 4])) == [3, 1, 4]

    def test_pop_front_n_is_index_arithmetic(self) -> None:
        cursor = SequenceCursor(range(1_000_000_000))
        cursor.pop_front_n(999_999_990)
        assert cursor.front == 999_999_990
        assert cursor.remaining == 10

    def test_pop_front_n_stops_at_end(self) -> None:
        cursor = SequenceCursor([1, 2, 3])
        cursor.pop_front_n(10)
        assert cursor.empty
        assert cursor.remaining == 0

    def test_front_of_empty_raises(self) -> None:
        with pytest.raises(IndexError):
            SequenceCursor([]).front

    def test_duplicate_is_independent(self) -> None:
        cursor = SequenceCursor([0, 1, 2, 3])
        cursor.pop_front()
        clone = cursor.duplicate()
        clone.pop_front_n(2)
        assert cursor.front == 1
        assert clone.front == 3
        assert cursor.position == 1

    def test_numpy_array(self) -> None:
        cursor = make_cursor(np.arange(5) * 10)
        assert isinstance(cursor, SequenceCursor)
        cursor.pop_front_n(3)
        assert cursor.front == 30


class TestIteratorCursor:
    """Tests for the cursor over arbitrary iterables."""

    def test_walks_generator(self) -> None:
        assert _drain(IteratorCursor(x * x for x in range(4))) == [0, 1, 4, 9]

    def test_remaining_unknown(self) -> None:
        assert IteratorCursor(iter([1])).remaining is None

    def test_pop_front_n(self) -> None:
        cursor = IteratorCursor(iter(range(10)))
        cursor.pop_front_n(4)
        assert cursor.front == 4
        cursor.pop_front_n(0)
        assert cursor.front == 4

    def test_pop_front_n_past_end(self) -> None:
        cursor = IteratorCursor(iter(range(3)))
        cursor.pop_front_n(5)
        assert cursor.empty

    def test_empty_iterable(self) -> None:
        cursor = IteratorCursor(iter([]))
        assert cursor.empty
        with pytest.raises(IndexError):
            cursor.front

    def test_duplicate_replays_remaining_elements(self) -> None:
        cursor = IteratorCursor(iter(range(6)))
        cursor.pop_front()
        clone = cursor.duplicate()
        assert _drain(clone) == [1, 2, 3, 4, 5]
        assert _drain(cursor) == [1, 2, 3, 4, 5]

    def test_duplicate_of_duplicate(self) -> None:
        cursor = IteratorCursor(iter("abcd"))
        first = cursor.duplicate()
        first.pop_front()
        second = first.duplicate()
        second.pop_front_n(2)
        assert (cursor.front, first.front, second.front) == ("a", "b", "d")


class TestMakeCursor:
    """Tests for cursor selection."""

    def test_existing_cursor_is_duplicated(self) -> None:
        cursor = SequenceCursor([1, 2, 3])
        wrapped = make_cursor(cursor)
        assert wrapped is not cursor
        wrapped.pop_front_n(2)
        assert (cursor.position, cursor.front, wrapped.front) == (0, 1, 3)

    def test_existing_iterator_cursor_is_duplicated(self) -> None:
        cursor = IteratorCursor(iter("abc"))
        assert _drain(make_cursor(cursor)) == ["a", "b", "c"]
        assert _drain(cursor) == ["a", "b", "c"]

    @pytest.mark.parametrize("population", [[1, 2], (1, 2), range(2), "ab"])
    def test_sequences_get_random_access(self, population: object) -> None:
        assert isinstance(make_cursor(population), SequenceCursor)

    def test_other_iterables_get_iterator_cursor(self) -> None:
        assert isinstance(make_cursor({1, 2}), IteratorCursor)
        assert isinstance(make_cursor(x for x in range(2)), IteratorCursor)

    def test_non_iterable_raises(self) -> None:
        with pytest.raises(TypeError):
            make_cursor(42)
