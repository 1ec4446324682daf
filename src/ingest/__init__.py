"""Source ingestion.

This package reads delimited job data sources into typed tables.
It prepares immutable rows for the store layer.
"""
