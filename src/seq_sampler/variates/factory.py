"""Construction of configured variate sources and the ambient default.

Samplers always hold an explicit source. When the caller does not supply
one, they borrow the process-wide ambient source returned by
:func:`get_default_source`, which is built lazily from a
:class:`~seq_sampler.config.SamplerConfig` loaded from the environment.
The ambient source is shared and not thread-safe.
"""

from __future__ import annotations

import logging

from seq_sampler.config import SamplerConfig, get_default_config
from seq_sampler.variates.base import UniformVariateSource
from seq_sampler.variates.fallback import FallbackVariateSource
from seq_sampler.variates.registry import VariateSourceRegistry

logger = logging.getLogger("seq_sampler")

_default_source: UniformVariateSource | None = None

# Sources that never run dry and so need no fallback.
_LOCAL_SOURCES = ("numpy", "system")


def _build_fallback(config: SamplerConfig) -> UniformVariateSource:
    mode = config.fallback_mode
    if mode not in _LOCAL_SOURCES:
        logger.warning("Unknown fallback_mode %r, using system fallback", mode)
        mode = "system"
    return VariateSourceRegistry.create(mode, config)


def build_variate_source(config: SamplerConfig) -> UniformVariateSource:
    """Build the variate source from config, wrapping with fallback if needed.

    Sources that never run dry (``numpy``, ``system``) are returned
    unwrapped, as is any source when ``fallback_mode == 'error'``. A
    ``numpy`` fallback is seeded with ``config.seed``.

    Args:
        config: Configuration specifying source type, seed and fallback mode.

    Returns:
        A UniformVariateSource, potentially wrapped in FallbackVariateSource.

    Raises:
        KeyError: If ``config.variate_source_type`` is not registered.
        VariateUnavailableError: If the configured source cannot be set up.
    """
    primary = VariateSourceRegistry.create(config.variate_source_type, config)
    if config.fallback_mode == "error" or config.variate_source_type in _LOCAL_SOURCES:
        return primary
    return FallbackVariateSource(primary, _build_fallback(config))


def get_default_source() -> UniformVariateSource:
    """Return the ambient variate source, building it on first use.

    The source is built from :func:`~seq_sampler.config.get_default_config`,
    the same cached config samplers fall back to.
    """
    global _default_source
    if _default_source is None:
        _default_source = build_variate_source(get_default_config())
        logger.debug("Built ambient variate source %r", _default_source.name)
    return _default_source


def set_default_source(source: UniformVariateSource | None) -> UniformVariateSource | None:
    """Replace the ambient variate source.

    Passing ``None`` makes the next :func:`get_default_source` call rebuild
    it from the environment.

    Returns:
        The previous ambient source (``None`` if it was never built).
    """
    global _default_source
    previous = _default_source
    _default_source = source
    return previous
