"""TechJobs exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Ingest failures are contained by the store; query failures reach callers.
"""

from __future__ import annotations


class TechJobsError(Exception):
    """Base exception for all TechJobs failures."""


class TechJobsConfigError(TechJobsError):
    """Raised for invalid runtime configuration."""


class TechJobsIngestError(TechJobsError):
    """Raised for source reading and parsing failures."""


class SourceUnavailableError(TechJobsIngestError):
    """Raised when the job data source cannot be opened or decoded."""


class MalformedSourceError(TechJobsIngestError):
    """Raised when the job data source is not valid delimited text."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        super().__init__(message)
        self.line_number = line_number


class TechJobsQueryError(TechJobsError):
    """Raised for invalid dataset queries."""


class ColumnNotFoundError(TechJobsQueryError):
    """Raised when a query names a column missing from the dataset."""

    def __init__(self, column_name: str, available_columns: tuple[str, ...]) -> None:
        available = ", ".join(available_columns)
        super().__init__(
            f"Unknown column '{column_name}'. Use one of: {available}."
        )
        self.column_name = column_name
        self.available_columns = available_columns
