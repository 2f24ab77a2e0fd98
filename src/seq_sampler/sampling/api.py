"""Convenience constructors for the common sampling calls."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from seq_sampler.config import get_default_config, resolve_config
from seq_sampler.sampling.selection import SelectionSampler
from seq_sampler.sampling.types import Algorithm
from seq_sampler.sampling.vitter import VitterSampler

if TYPE_CHECKING:
    from seq_sampler.config import SamplerConfig
    from seq_sampler.sampling.base import SequentialSampler
    from seq_sampler.variates.base import UniformVariateSource


def random_sample(
    population: Any,
    n: int,
    total: int | None = None,
    *,
    source: UniformVariateSource | None = None,
    config: SamplerConfig | None = None,
    algorithm: Algorithm | str = Algorithm.D,
    **overrides: Any,
) -> SequentialSampler[Any]:
    """Return a lazy sampler over *n* elements of *population*.

    Args:
        population: Sequence, numpy array or iterable to sample from.
        n: Number of elements to select.
        total: Population size; defaults to ``len(population)``.
        source: Variate source to own. ``None`` borrows the ambient source.
        config: Base configuration; defaults to the environment config.
        algorithm: ``'D'`` (Vitter, switching to A as needed) or ``'S'``
            (selection sampling baseline).
        **overrides: Per-call config overrides, e.g. ``alpha_inverse=20``
            or ``diagnostic_mode=True``.

    Returns:
        A VitterSampler or SelectionSampler.

    Raises:
        ConfigValidationError: If an override is unknown, non-overridable or invalid.
        InvalidSampleSizeError: If the sample cannot be drawn.
        ValueError: If *algorithm* is not ``'D'`` or ``'S'``.
    """
    resolved = resolve_config(config if config is not None else get_default_config(), overrides)
    algorithm = Algorithm(algorithm)
    if algorithm is Algorithm.S:
        return SelectionSampler(population, n, total, source=source, config=resolved)
    if algorithm is Algorithm.D:
        return VitterSampler(population, n, total, source=source, config=resolved)
    raise ValueError(f"Algorithm {algorithm.value} cannot be requested directly")


def sample_indices(
    n: int,
    total: int,
    *,
    source: UniformVariateSource | None = None,
    config: SamplerConfig | None = None,
    algorithm: Algorithm | str = Algorithm.D,
    **overrides: Any,
) -> list[int]:
    """Return *n* distinct indices from ``range(total)`` in increasing order."""
    return list(
        random_sample(
            range(total),
            n,
            total,
            source=source,
            config=config,
            algorithm=algorithm,
            **overrides,
        )
    )
