"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SelectionRecord:
    """Immutable record of a single selection made by a sampler.

    Attributes:
        timestamp_ns: Wall-clock time of the selection (nanoseconds since epoch).
        index: Absolute position of the selected element in the population.
        skip: Number of unselected elements passed over before it.
        available: Unvisited elements, counting the selected one.
        to_select: Selections still owed, counting this one.
        algorithm: Skip strategy that produced *skip* (``'A'``, ``'D'`` or ``'S'``).
        v_prime: Algorithm D's carried variate after the skip, ``None`` otherwise.
        skip_ms: Time spent computing the skip distance (milliseconds).
    """

    timestamp_ns: int
    index: int
    skip: int
    available: int
    to_select: int
    algorithm: str
    v_prime: float | None
    skip_ms: float
