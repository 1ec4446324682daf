"""Core constants used across TechJobs modules.

This module centralizes source location and CSV dialect values.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_FILE = Path("resources") / "job_data.csv"
DEFAULT_SOURCE_ENCODING = "utf-8-sig"
CSV_DELIMITER = ","
CSV_QUOTE_CHAR = '"'
SUPPORTED_CONFIG_KEYS = ("data_file", "encoding")
RECORD_DIVIDER = "*****"
NO_RESULTS_MESSAGE = "No results"
