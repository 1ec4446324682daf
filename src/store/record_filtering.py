"""Record scanning helpers.

This module implements the linear scans behind dataset queries.
It keeps matching logic reusable and free of load-state concerns.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from core.types import JobRecord


def copy_records(records: Iterable[JobRecord]) -> list[JobRecord]:
    """Copy records so callers never share mappings with the store.

    Args:
        records: Records to copy.

    Returns:
        New list of new record mappings.
    """
    return [dict(record) for record in records]


def distinct_sorted_values(records: Sequence[JobRecord], column_name: str) -> list[str]:
    """Collect unique values of one column in code-point order.

    Args:
        records: Records to scan.
        column_name: Column whose values are collected.

    Returns:
        Sorted values without duplicates.
    """
    values: list[str] = []
    seen: set[str] = set()
    for record in records:
        value = record[column_name]
        if value not in seen:
            seen.add(value)
            values.append(value)
    return sorted(values)


def records_matching_column(
    records: Sequence[JobRecord],
    column_name: str,
    query: str,
) -> list[JobRecord]:
    """Filter records whose column value contains the query.

    Matching is case-insensitive substring containment.

    Args:
        records: Records to scan.
        column_name: Column to test.
        query: Search text.

    Returns:
        Matching records in input order.
    """
    needle = query.lower()
    return [record for record in records if needle in record[column_name].lower()]


def records_matching_any(records: Sequence[JobRecord], query: str) -> list[JobRecord]:
    """Filter records where any field contains the query.

    Args:
        records: Records to scan.
        query: Search text.

    Returns:
        Matching records in input order, each at most once.
    """
    needle = query.lower()
    matched: list[JobRecord] = []
    for record in records:
        for value in record.values():
            if needle in value.lower():
                matched.append(record)
                break
    return matched
