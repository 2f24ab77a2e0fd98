"""seq-sampler: order-preserving sequential random sampling.

Selects exactly ``n`` of ``total`` sequentially presented elements in a
single pass, using Vitter's Algorithm D (with Algorithm A once the sample
is a large fraction of what remains) so that the number of random variates
and the expected work are O(n) regardless of ``total``. Randomness comes
from pluggable uniform variate sources.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("seq-sampler")
except PackageNotFoundError:
    __version__ = "0.0.0"

from seq_sampler.config import SamplerConfig, get_default_config, resolve_config, validate_overrides
from seq_sampler.exceptions import (
    ConfigValidationError,
    InvalidSampleSizeError,
    SamplerExhaustedError,
    SamplerInvariantError,
    SeqSamplerError,
    VariateUnavailableError,
)
from seq_sampler.sampling import (
    Algorithm,
    SelectionSampler,
    SequentialSampler,
    VitterSampler,
    random_sample,
    sample_indices,
)
from seq_sampler.variates import UniformVariateSource, get_default_source, set_default_source

__all__ = [
    "Algorithm",
    "ConfigValidationError",
    "InvalidSampleSizeError",
    "SamplerConfig",
    "SamplerExhaustedError",
    "SamplerInvariantError",
    "SelectionSampler",
    "SeqSamplerError",
    "SequentialSampler",
    "UniformVariateSource",
    "VariateUnavailableError",
    "VitterSampler",
    "__version__",
    "get_default_config",
    "get_default_source",
    "random_sample",
    "resolve_config",
    "sample_indices",
    "set_default_source",
    "validate_overrides",
]
