"""Data types for the sampling subsystem."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Algorithm(str, Enum):
    """Skip-distance strategy in use by a sampler."""

    A = "A"
    """Vitter's Algorithm A: sequential rejection, one draw per skip."""

    D = "D"
    """Vitter's Algorithm D: constant expected draws via the carried V'."""

    S = "S"
    """Knuth's Algorithm S: one draw per visited element (baseline)."""


@dataclass(frozen=True, slots=True)
class SamplerState:
    """Snapshot of a sampler's counters.

    Attributes:
        total: Population size the sampler was built with.
        n: Requested sample size.
        available: Elements not yet visited, including the current one.
        to_select: Selections still owed, including the current one.
        index: Absolute position of the current (or last) selection.
        algorithm: Active skip strategy.
        v_prime: Algorithm D's carried variate, ``None`` outside mode D.
    """

    total: int
    n: int
    available: int
    to_select: int
    index: int
    algorithm: Algorithm
    v_prime: float | None
