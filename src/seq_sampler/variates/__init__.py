"""Uniform variate source subsystem for seq-sampler.

Re-exports the ABC, registry, factory and all built-in source
implementations for convenient access::

    from seq_sampler.variates import UniformVariateSource, NumpyVariateSource
    from seq_sampler.variates import get_default_source, set_default_source
"""

from seq_sampler.variates.base import UniformVariateSource
from seq_sampler.variates.counting import CountingVariateSource
from seq_sampler.variates.factory import (
    build_variate_source,
    get_default_source,
    set_default_source,
)
from seq_sampler.variates.fallback import FallbackVariateSource
from seq_sampler.variates.mock import ScriptedVariateSource
from seq_sampler.variates.numpy_source import NumpyVariateSource
from seq_sampler.variates.pool import EntropyPoolSource
from seq_sampler.variates.registry import VariateSourceRegistry, register_variate_source
from seq_sampler.variates.system import SystemVariateSource

__all__ = [
    "CountingVariateSource",
    "EntropyPoolSource",
    "FallbackVariateSource",
    "NumpyVariateSource",
    "ScriptedVariateSource",
    "SystemVariateSource",
    "UniformVariateSource",
    "VariateSourceRegistry",
    "build_variate_source",
    "get_default_source",
    "register_variate_source",
    "set_default_source",
]
