"""Skip-distance strategies for sequential random sampling.

Given ``available`` unvisited elements of which ``to_select`` must still be
chosen, a skip strategy draws the number of elements to pass over before
the next selection. The distribution is the same for every strategy; they
differ only in how many uniform variates they consume.

For an extensive description of the algorithms see:

  * Vitter, J.S. (1984), "Faster methods for random sampling",
    Commun. ACM 27(7): 703--718
  * Vitter, J.S. (1987), "An efficient algorithm for sequential random
    sampling", ACM Trans. Math. Softw. 13(1): 58--67

Variable names follow the papers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from seq_sampler.variates.base import UniformVariateSource


def skip_a(available: int, to_select: int, source: UniformVariateSource) -> int:
    """Vitter's Algorithm A.

    Cheap per call, but the loop runs once per skipped element, so it is
    only used when the sample is a large fraction of what remains.

    Args:
        available: Unvisited elements (``available >= to_select >= 1``).
        to_select: Selections still owed.
        source: Variate source to draw from.

    Returns:
        Number of elements to skip before the next selection.
    """
    if to_select == 1:
        return source.uniform_int(0, available)

    s = 0
    top = available - to_select
    quot = top / available
    v = source.uniform_open()
    while quot > v:
        s += 1
        quot *= (top - s) / (available - s)
    return s


class AlgorithmD:
    """Vitter's Algorithm D.

    Needs O(1) expected variates per selection regardless of the
    population size. The transformed variate ``v_prime`` is carried from
    one call to the next; callers must seed it with :meth:`new_v_prime`
    before the first :meth:`skip`.

    Requires ``available > to_select`` strictly; the sampler guarantees this
    by switching to Algorithm A before the ratio gets that close.
    """

    __slots__ = ("v_prime",)

    def __init__(self, v_prime: float = 1.0) -> None:
        self.v_prime = v_prime

    def new_v_prime(self, remaining: int, source: UniformVariateSource) -> None:
        """Reset ``v_prime`` to ``U ** (1/remaining)`` for a fresh uniform ``U``."""
        self.v_prime = source.uniform_open() ** (1.0 / remaining)

    def skip(self, available: int, to_select: int, source: UniformVariateSource) -> int:
        """Draw the next skip distance.

        Args:
            available: Unvisited elements (``available > to_select >= 1``).
            to_select: Selections still owed.
            source: Variate source to draw from.

        Returns:
            Number of elements to skip before the next selection.
        """
        # This branch must stay ahead of the loop: the loop raises to the
        # power 1/(to_select - 1).
        if to_select == 1:
            # V' carried from a fast accept may be exactly 1.0.
            return min(int(available * self.v_prime), available - 1)

        qu1 = 1 + available - to_select
        exponent = 1.0 / (to_select - 1)

        while True:
            # Step D2: generate X and U.
            x = available * (1.0 - self.v_prime)
            s = int(x)
            while s >= qu1:
                self.new_v_prime(to_select, source)
                x = available * (1.0 - self.v_prime)
                s = int(x)

            u = source.uniform_open()
            y1 = (u * available / qu1) ** exponent
            self.v_prime = y1 * (1.0 - x / available) * (qu1 / (qu1 - s))

            # Step D3: accept immediately if V' <= 1.
            if self.v_prime <= 1.0:
                return s

            top = available - 1
            if to_select > s + 1:
                bottom = float(available - to_select)
                limit = available - s
            else:
                bottom = float(available - (s + 1))
                limit = qu1

            y2 = 1.0
            for _ in range(limit, available):
                y2 *= top / bottom
                top -= 1
                bottom -= 1

            # Step D4: accept or reject S.
            if available / (available - x) < y1 * y2**exponent:
                self.new_v_prime(to_select, source)
            else:
                # Prime V' for the next call, which owes one selection less.
                self.new_v_prime(to_select - 1, source)
                return s
