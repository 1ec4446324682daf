"""Public SDK surface for TechJobs.

This module provides a stable import path for dataset consumers.
It re-exports the store, its configuration and error types.
"""

from __future__ import annotations

from core.config import TechJobsConfig
from core.errors import (
    ColumnNotFoundError,
    MalformedSourceError,
    SourceUnavailableError,
    TechJobsConfigError,
    TechJobsError,
)
from core.types import JobRecord, JobTable
from store.job_store import JobDataStore

__all__ = [
    "ColumnNotFoundError",
    "JobDataStore",
    "JobRecord",
    "JobTable",
    "MalformedSourceError",
    "SourceUnavailableError",
    "TechJobsConfig",
    "TechJobsConfigError",
    "TechJobsError",
]
