"""Diagnostic logging subsystem for seq-sampler.

Provides immutable per-selection records and a configurable logger
that supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from seq_sampler.logging.logger import SamplingLogger
from seq_sampler.logging.types import SelectionRecord

__all__ = [
    "SamplingLogger",
    "SelectionRecord",
]
