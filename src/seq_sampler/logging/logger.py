"""Diagnostic logger for per-selection sampling events.

Uses the standard ``logging`` module with the ``"seq_sampler"`` logger.
No ``print()`` statements. Supports three verbosity levels and an
in-memory diagnostic mode for post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from seq_sampler.config import SamplerConfig
    from seq_sampler.logging.types import SelectionRecord

logger = logging.getLogger("seq_sampler")


class SamplingLogger:
    """Per-selection diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per selection (index, skip, counts,
        algorithm).

        ``"full"``: Full JSON dump of all record fields.

    Diagnostic mode stores all records in memory for post-hoc statistical
    analysis via ``get_diagnostic_data()`` and ``get_summary_stats()``.
    """

    def __init__(self, config: SamplerConfig) -> None:
        """Initialize the logger from configuration.

        Args:
            config: Configuration providing ``log_level`` and ``diagnostic_mode``.
        """
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[SelectionRecord] = []

    @property
    def enabled(self) -> bool:
        """Whether records are emitted or stored at all."""
        return self._diagnostic_mode or self._log_level != "none"

    def log_selection(self, record: SelectionRecord) -> None:
        """Log a single selection.

        Args:
            record: Immutable record of the selection.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "select index=%d skip=%d available=%d to_select=%d algorithm=%s skip=%.3fms",
                record.index,
                record.skip,
                record.available,
                record.to_select,
                record.algorithm,
                record.skip_ms,
            )
        elif self._log_level == "full":
            logger.info("selection_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[SelectionRecord]:
        """Return all stored records (requires ``diagnostic_mode=True``).

        Returns:
            List of all SelectionRecord instances logged so far.
            Empty if diagnostic_mode is False.
        """
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        skips = [r.skip for r in self._records]
        skip_times = [r.skip_ms for r in self._records]
        counts: dict[str, int] = {}
        for r in self._records:
            counts[r.algorithm] = counts.get(r.algorithm, 0) + 1
        switch_index = next(
            (
                later.index
                for earlier, later in zip(self._records, self._records[1:])
                if earlier.algorithm == "D" and later.algorithm == "A"
            ),
            None,
        )

        n = len(self._records)
        return {
            "total_selections": n,
            "total_skipped": sum(skips),
            "mean_skip": sum(skips) / n,
            "max_skip": max(skips),
            "algorithm_counts": counts,
            "switch_index": switch_index,
            "mean_skip_ms": sum(skip_times) / n,
            "max_skip_ms": max(skip_times),
        }
