"""In-memory job dataset store.

This module loads the job data source once and answers read-only
lookups by linear scan. Returned records are always independent copies.
"""

from __future__ import annotations

import threading

from core.config import TechJobsConfig
from core.errors import ColumnNotFoundError, TechJobsIngestError
from core.logging_config import get_logger
from core.types import JobRecord
from ingest.csv_reader import read_job_table
from store.record_filtering import (
    copy_records,
    distinct_sorted_values,
    records_matching_any,
    records_matching_column,
)

_LOGGER = get_logger(__name__)


class JobDataStore:
    """Lazily loaded, read-only job dataset."""

    def __init__(self, config: TechJobsConfig) -> None:
        """Create an unloaded store.

        Args:
            config: Runtime configuration naming the data source.
        """
        self._config = config
        self._lock = threading.Lock()
        self._loaded = False
        self._columns: tuple[str, ...] = ()
        self._records: tuple[JobRecord, ...] = ()
        self._load_error: TechJobsIngestError | None = None

    @property
    def config(self) -> TechJobsConfig:
        """Return the configuration this store reads from."""
        return self._config

    @property
    def is_loaded(self) -> bool:
        """Return whether the single load attempt has happened."""
        return self._loaded

    @property
    def load_error(self) -> TechJobsIngestError | None:
        """Return the failure captured by the load attempt, if any."""
        return self._load_error

    @property
    def column_names(self) -> tuple[str, ...]:
        """Return header columns of the loaded source."""
        self.ensure_loaded()
        return self._columns

    @property
    def record_count(self) -> int:
        """Return number of loaded records."""
        self.ensure_loaded()
        return len(self._records)

    def ensure_loaded(self) -> None:
        """Load the data source on first use.

        Later calls return without reading the source again. Load failures
        are logged and leave the store empty; they are never raised.
        """
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            self._load()
            self._loaded = True

    def list_distinct_values(self, column_name: str) -> list[str]:
        """List unique values of a column.

        Args:
            column_name: Column to collect.

        Returns:
            Distinct values sorted in code-point order, so uppercase
            letters sort before lowercase ones.

        Raises:
            ColumnNotFoundError: If the loaded source has no such column.
        """
        self._require_column(column_name)
        return distinct_sorted_values(self._records, column_name)

    def find_all_records(self) -> list[JobRecord]:
        """Return copies of every record in file order."""
        self.ensure_loaded()
        return copy_records(self._records)

    def search_column(self, column_name: str, query: str) -> list[JobRecord]:
        """Find records whose column value contains the query.

        For example, searching employer "enterprise" includes records
        with "Enterprise Holdings, Inc".

        Args:
            column_name: Column to search.
            query: Case-insensitive search text.

        Returns:
            Copies of matching records in file order.

        Raises:
            ColumnNotFoundError: If the loaded source has no such column.
        """
        self._require_column(column_name)
        return copy_records(records_matching_column(self._records, column_name, query))

    def search_all(self, query: str) -> list[JobRecord]:
        """Find records where any column contains the query.

        Args:
            query: Case-insensitive search text.

        Returns:
            Copies of matching records in file order, each at most once.
        """
        self.ensure_loaded()
        return copy_records(records_matching_any(self._records, query))

    def _require_column(self, column_name: str) -> None:
        self.ensure_loaded()
        if self._columns and column_name not in self._columns:
            raise ColumnNotFoundError(column_name, self._columns)

    def _load(self) -> None:
        source_path = str(self._config.data_file)
        try:
            table = read_job_table(self._config)
        except TechJobsIngestError as error:
            self._load_error = error
            _LOGGER.error(
                "job_data_load_failed",
                source_path=source_path,
                error_type=type(error).__name__,
                message=str(error),
                exc_info=error,
            )
            return
        self._columns = table.columns
        self._records = table.records
        _LOGGER.info(
            "job_data_loaded",
            source_path=source_path,
            column_count=len(table.columns),
            record_count=table.record_count,
        )
