"""Exception hierarchy for seq-sampler.

All exceptions derive from SeqSamplerError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
"""


class SeqSamplerError(Exception):
    """Base exception for all seq-sampler errors."""


class InvalidSampleSizeError(SeqSamplerError):
    """The requested sample cannot be drawn from the population.

    Raised at construction when ``n > total``, when either size is negative,
    when no ``total`` is given for an unsized population, or (in strict mode)
    when a sized population holds fewer than ``total`` elements.
    """


class SamplerInvariantError(SeqSamplerError):
    """An internal sampler invariant was violated.

    Raised when the remaining selection quota exceeds the unvisited
    population, or when the input runs dry before the sample is complete.
    Not recoverable.
    """


class SamplerExhaustedError(SeqSamplerError, IndexError):
    """The front of an exhausted sampler was requested."""


class VariateUnavailableError(SeqSamplerError):
    """A uniform variate source cannot provide randomness.

    Raised when a finite source (e.g. a recorded entropy pool) runs dry and
    no fallback is configured, or when the fallback also fails.
    """


class ConfigValidationError(SeqSamplerError):
    """Configuration field validation failed.

    Raised when per-call overrides contain unknown keys, attempt to override
    infrastructure fields, or fail type validation.
    """
