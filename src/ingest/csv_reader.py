"""Delimited job data reader.

This module parses RFC-4180 style CSV sources into a typed job table.
The first row supplies column names for every following row.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, Iterator

from core.config import TechJobsConfig
from core.constants import CSV_DELIMITER, CSV_QUOTE_CHAR
from core.errors import MalformedSourceError, SourceUnavailableError
from core.logging_config import get_logger
from core.types import JobRecord, JobTable

_LOGGER = get_logger(__name__)


def read_job_table(config: TechJobsConfig) -> JobTable:
    """Read the configured job data file.

    Args:
        config: Runtime configuration naming the data file and encoding.

    Returns:
        Parsed table with header columns and records in file order.

    Raises:
        SourceUnavailableError: If the file cannot be opened or decoded.
        MalformedSourceError: If the file is not valid delimited text.
    """
    source_path = config.data_file
    try:
        with source_path.open("r", encoding=config.encoding, newline="") as source_file:
            columns, records = _parse_rows(source_path, _csv_rows(source_path, source_file))
    except UnicodeDecodeError as error:
        raise SourceUnavailableError(
            f"Failed to decode job data at {source_path} as {config.encoding}: {error.reason}. "
            "Set the encoding option to match the file."
        ) from error
    except LookupError as error:
        raise SourceUnavailableError(
            f"Cannot read job data at {source_path}: unknown encoding '{config.encoding}'. "
            "Set the encoding option to a known codec such as utf-8."
        ) from error
    except OSError as error:
        raise SourceUnavailableError(
            f"Failed to open job data at {source_path}: {error.strerror or error}. "
            "Provide an existing, readable CSV file."
        ) from error
    _LOGGER.debug(
        "job_source_parsed",
        source_path=str(source_path),
        column_count=len(columns),
        record_count=len(records),
    )
    return JobTable(source_path=source_path, columns=columns, records=tuple(records))


def _csv_rows(source_path: Path, lines: Iterable[str]) -> Iterator[tuple[int, list[str]]]:
    """Yield CSV rows with their starting line numbers.

    Args:
        source_path: File path for error context.
        lines: Open text stream.

    Yields:
        Pairs of one-based line number and row fields.

    Raises:
        MalformedSourceError: If quoting is invalid.
    """
    reader = csv.reader(
        lines,
        delimiter=CSV_DELIMITER,
        quotechar=CSV_QUOTE_CHAR,
        doublequote=True,
        strict=True,
    )
    start_line = 1
    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as error:
            raise MalformedSourceError(
                f"Invalid CSV syntax in {source_path} near line {reader.line_num}: {error}. "
                "Check quoting and retry.",
                line_number=reader.line_num,
            ) from error
        yield start_line, row
        start_line = reader.line_num + 1


def _parse_rows(
    source_path: Path,
    rows: Iterator[tuple[int, list[str]]],
) -> tuple[tuple[str, ...], list[JobRecord]]:
    """Split header and data rows into aligned records.

    Args:
        source_path: File path for error context.
        rows: Numbered CSV rows.

    Returns:
        Header columns and one record per data row.

    Raises:
        MalformedSourceError: If the header is missing or rows are misaligned.
    """
    header = next(((number, names) for number, names in rows if names), None)
    if header is None:
        raise MalformedSourceError(
            f"Job data at {source_path} is empty. Add a header row naming the columns.",
            line_number=1,
        )
    columns = _validate_header(source_path, *header)
    records: list[JobRecord] = []
    for line_number, values in rows:
        if not values:
            # A blank line is an empty value only when there is one column.
            if len(columns) > 1:
                continue
            values = [""]
        if len(values) != len(columns):
            raise MalformedSourceError(
                f"Invalid row at {source_path}:{line_number}: expected {len(columns)} "
                f"fields, got {len(values)}. Align the row with the header.",
                line_number=line_number,
            )
        records.append(dict(zip(columns, values)))
    return columns, records


def _validate_header(source_path: Path, line_number: int, names: list[str]) -> tuple[str, ...]:
    seen: set[str] = set()
    for name in names:
        if not name:
            raise MalformedSourceError(
                f"Invalid header at {source_path}:{line_number}: empty column name.",
                line_number=line_number,
            )
        if name in seen:
            raise MalformedSourceError(
                f"Invalid header at {source_path}:{line_number}: duplicate column '{name}'.",
                line_number=line_number,
            )
        seen.add(name)
    return tuple(names)
