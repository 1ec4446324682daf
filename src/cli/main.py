"""TechJobs CLI entry points.
This module exposes read-only lookups over the job dataset.
It maps argparse commands onto dataset store calls.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Sequence

from core.config import TechJobsConfig
from core.constants import NO_RESULTS_MESSAGE, RECORD_DIVIDER
from core.errors import TechJobsConfigError, TechJobsQueryError
from core.types import JobRecord
from store.job_store import JobDataStore


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="techjobs", description="TechJobs dataset lookups")
    parser.add_argument("--config", help="YAML config file naming the data source")
    parser.add_argument("--data-file", help="Override the job data CSV path")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("columns", help="List dataset column names")
    _add_values_command(subparsers)
    subparsers.add_parser("all", help="Print every job record")
    _add_search_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the TechJobs CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        store = JobDataStore(_build_config(args.config, args.data_file))
        return _dispatch(store, args)
    except (TechJobsConfigError, TechJobsQueryError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1


def _dispatch(store: JobDataStore, args: argparse.Namespace) -> int:
    if args.command == "columns":
        _print_lines(store.column_names)
    elif args.command == "values":
        _print_lines(store.list_distinct_values(args.column))
    elif args.command == "all":
        _print_records(store.find_all_records())
    elif args.column:
        _print_records(store.search_column(args.column, args.query))
    else:
        _print_records(store.search_all(args.query))
    return 0


def _build_config(config_path: str | None, data_file: str | None) -> TechJobsConfig:
    """Build config with optional file and data-file overrides.

    Args:
        config_path: Optional YAML config path.
        data_file: Optional data file override.

    Returns:
        Validated config.
    """
    config = TechJobsConfig.from_file(config_path) if config_path else TechJobsConfig.default()
    if data_file:
        config = config.with_data_file(data_file)
    return config


def _add_values_command(subparsers: Any) -> None:
    """Register values subcommand."""
    parser = subparsers.add_parser("values", help="List distinct values of a column")
    parser.add_argument("column", help="Column name, e.g. employer")


def _add_search_command(subparsers: Any) -> None:
    """Register search subcommand."""
    parser = subparsers.add_parser("search", help="Case-insensitive substring search")
    parser.add_argument("query", help="Text to look for")
    parser.add_argument("--column", help="Restrict search to one column")


def _print_lines(values: Sequence[str]) -> None:
    if not values:
        print(NO_RESULTS_MESSAGE)
    for value in values:
        print(value)


def _print_records(records: Sequence[JobRecord]) -> None:
    if not records:
        print(NO_RESULTS_MESSAGE)
        return
    for record in records:
        print(RECORD_DIVIDER)
        for column, value in record.items():
            print(f"{column}: {value}")
        print(RECORD_DIVIDER)
        print()
