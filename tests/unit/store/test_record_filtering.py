"""Unit tests for record scanning helpers."""

from __future__ import annotations

from store.record_filtering import (
    copy_records,
    distinct_sorted_values,
    records_matching_any,
    records_matching_column,
)


def _records() -> list[dict[str, str]]:
    return [
        {"title": "Developer", "city": "Boston"},
        {"title": "apple", "city": "Boston"},
        {"title": "Apple", "city": "Austin"},
        {"title": "Developer", "city": "Denver"},
    ]


def test_distinct_sorted_values_uses_code_point_order() -> None:
    """Uppercase values should sort before lowercase ones."""
    values = distinct_sorted_values(_records(), "title")

    assert values == ["Apple", "Developer", "apple"]


def test_distinct_sorted_values_is_case_sensitive() -> None:
    """Values differing only by case should both be kept."""
    values = distinct_sorted_values(_records(), "title")

    assert "Apple" in values and "apple" in values


def test_distinct_sorted_values_empty_input() -> None:
    """No records should yield no values."""
    assert distinct_sorted_values([], "title") == []


def test_records_matching_column_is_case_insensitive() -> None:
    """Column search should ignore case on both sides."""
    matched = records_matching_column(_records(), "title", "APP")

    assert [record["city"] for record in matched] == ["Boston", "Austin"]


def test_records_matching_column_ignores_other_columns() -> None:
    """Column search should only look at the named column."""
    matched = records_matching_column(_records(), "title", "boston")

    assert matched == []


def test_records_matching_any_adds_record_once() -> None:
    """A record matching in several fields should appear once."""
    records = [{"title": "Boston Analyst", "city": "Boston"}]

    matched = records_matching_any(records, "boston")

    assert len(matched) == 1


def test_records_matching_any_empty_query_matches_all() -> None:
    """An empty query should match every record in order."""
    matched = records_matching_any(_records(), "")

    assert matched == _records()


def test_copy_records_returns_new_mappings() -> None:
    """Copies should not share mappings with the input."""
    records = _records()

    copies = copy_records(records)
    copies[0]["title"] = "changed"

    assert records[0]["title"] == "Developer"
