"""Benchmark harness comparing the sequential samplers.

Repeatedly samples ``n`` of ``range(total)``, counts how often each
position is selected and times the whole run. Under a correct sampler
every position is picked ``repeats * n / total`` times on average.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from seq_sampler.sampling.selection import SelectionSampler
from seq_sampler.sampling.types import Algorithm
from seq_sampler.sampling.vitter import VitterSampler

if TYPE_CHECKING:
    from seq_sampler.config import SamplerConfig
    from seq_sampler.sampling.base import SequentialSampler
    from seq_sampler.variates.base import UniformVariateSource

logger = logging.getLogger("seq_sampler")

SamplerFactory = Callable[[int, int], "SequentialSampler[int]"]


@dataclass(frozen=True, slots=True)
class BenchmarkResult:
    """Outcome of one benchmark run.

    Attributes:
        algorithm: Sampler that was benchmarked.
        total: Population size.
        n: Sample size.
        repeats: Number of complete samples drawn.
        counts: Selections per position, shape ``(total,)``.
        elapsed_s: Wall-clock time for all repeats (seconds).
    """

    algorithm: Algorithm
    total: int
    n: int
    repeats: int
    counts: np.ndarray
    elapsed_s: float

    @property
    def expected_count(self) -> float:
        """Mean selections per position under uniform sampling."""
        if self.total == 0:
            return 0.0
        return self.repeats * self.n / self.total


def count_selections(factory: SamplerFactory, total: int, n: int, repeats: int) -> np.ndarray:
    """Run *repeats* samples and count selections per position.

    Args:
        factory: Called as ``factory(total, n)``; must return a sampler over
            ``range(total)``.
        total: Population size.
        n: Sample size.
        repeats: Number of samples to draw.

    Returns:
        Integer array of shape ``(total,)``.
    """
    counts = np.zeros(total, dtype=np.int64)
    for _ in range(repeats):
        for position in factory(total, n):
            counts[position] += 1
    return counts


def sampler_factory(
    algorithm: Algorithm | str,
    source: UniformVariateSource | None = None,
    config: SamplerConfig | None = None,
) -> SamplerFactory:
    """Return a factory building *algorithm* samplers over ``range(total)``.

    All samplers built by the factory share *source* (or the ambient
    source when it is ``None``).
    """
    algorithm = Algorithm(algorithm)
    if algorithm is Algorithm.S:
        sampler_cls: type[SequentialSampler[int]] = SelectionSampler
    elif algorithm is Algorithm.D:
        sampler_cls = VitterSampler
    else:
        raise ValueError(f"Algorithm {algorithm.value} cannot be benchmarked directly")

    def factory(total: int, n: int) -> SequentialSampler[int]:
        return sampler_cls(range(total), n, total, source=source, config=config)

    return factory


def run_benchmark(
    total: int,
    n: int,
    repeats: int = 1,
    algorithms: Sequence[Algorithm | str] = (Algorithm.S, Algorithm.D),
    source: UniformVariateSource | None = None,
    config: SamplerConfig | None = None,
) -> list[BenchmarkResult]:
    """Benchmark each of *algorithms* on the same ``(total, n, repeats)``.

    Args:
        total: Population size.
        n: Sample size.
        repeats: Number of samples per algorithm.
        algorithms: Samplers to run, in order.
        source: Variate source shared by every run.
        config: Sampling configuration.

    Returns:
        One BenchmarkResult per algorithm.
    """
    results: list[BenchmarkResult] = []
    for algorithm in algorithms:
        algorithm = Algorithm(algorithm)
        factory = sampler_factory(algorithm, source=source, config=config)
        logger.info(
            "Benchmarking algorithm %s: picking %d from %d, %d times",
            algorithm.value,
            n,
            total,
            repeats,
        )
        started = time.perf_counter()
        counts = count_selections(factory, total, n, repeats)
        elapsed = time.perf_counter() - started
        logger.info("Algorithm %s completed in %.3fs", algorithm.value, elapsed)
        results.append(
            BenchmarkResult(
                algorithm=algorithm,
                total=total,
                n=n,
                repeats=repeats,
                counts=counts,
                elapsed_s=elapsed,
            )
        )
    return results


def format_result(result: BenchmarkResult, verbose: bool = False) -> str:
    """Render *result* as the text report printed by the CLI."""
    lines = [f"Algorithm {result.algorithm.value}:"]
    if verbose:
        lines.extend(
            f"\trecord {i} was picked {int(c)} times." for i, c in enumerate(result.counts)
        )
    lines.append(f"\t\tSampling completed in {result.elapsed_s:.6f} seconds.")
    return "\n".join(lines)
