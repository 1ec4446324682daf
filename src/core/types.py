"""Shared typed models.

This module defines the record alias and the immutable parse result
handed from the ingest layer to the dataset store.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

JobRecord = dict[str, str]


@dataclass(frozen=True)
class JobTable:
    """Parsed tabular job source.

    Attributes:
        source_path: File the table was read from.
        columns: Header names in file order.
        records: One mapping per data row, in file order.
    """

    source_path: Path
    columns: tuple[str, ...]
    records: tuple[JobRecord, ...]

    @property
    def record_count(self) -> int:
        """Return number of data rows."""
        return len(self.records)
