"""Sequential sampling subsystem for seq-sampler.

Vitter's Algorithm D/A sampler, the Algorithm S baseline, their shared
iterator contract and the input cursors they walk.
"""

from seq_sampler.sampling.api import random_sample, sample_indices
from seq_sampler.sampling.base import SequentialSampler
from seq_sampler.sampling.cursor import (
    InputCursor,
    IteratorCursor,
    SequenceCursor,
    make_cursor,
)
from seq_sampler.sampling.selection import SelectionSampler
from seq_sampler.sampling.skip import AlgorithmD, skip_a
from seq_sampler.sampling.types import Algorithm, SamplerState
from seq_sampler.sampling.vitter import VitterSampler

__all__ = [
    "Algorithm",
    "AlgorithmD",
    "InputCursor",
    "IteratorCursor",
    "SamplerState",
    "SelectionSampler",
    "SequenceCursor",
    "SequentialSampler",
    "VitterSampler",
    "make_cursor",
    "random_sample",
    "sample_indices",
    "skip_a",
]
