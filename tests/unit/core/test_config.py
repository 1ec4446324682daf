"""Unit tests for core config parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import TechJobsConfig
from core.constants import DEFAULT_DATA_FILE, DEFAULT_SOURCE_ENCODING
from core.errors import TechJobsConfigError
from tests.fixture_paths import fixture_path


def test_default_points_at_resources_file() -> None:
    """Default config should read the bundled resources CSV."""
    config = TechJobsConfig.default()

    assert config.data_file == DEFAULT_DATA_FILE and config.encoding == DEFAULT_SOURCE_ENCODING


def test_from_file_resolves_relative_data_file() -> None:
    """Relative data_file values should resolve next to the config file."""
    config = TechJobsConfig.from_file(fixture_path("techjobs.yaml"))

    assert config.data_file == fixture_path("job_data.csv")


def test_from_file_reads_encoding() -> None:
    """Config file encoding should override the default."""
    config = TechJobsConfig.from_file(fixture_path("techjobs.yaml"))

    assert config.encoding == "utf-8"


def test_from_file_allows_empty_document(tmp_path: Path) -> None:
    """An empty YAML file should yield default values."""
    config_path = tmp_path / "empty.yaml"
    config_path.write_text("", encoding="utf-8")

    config = TechJobsConfig.from_file(config_path)

    assert config.data_file == DEFAULT_DATA_FILE


def test_from_file_raises_for_unknown_key(tmp_path: Path) -> None:
    """Unsupported keys should be rejected."""
    config_path = tmp_path / "bad.yaml"
    config_path.write_text("data_root: somewhere\n", encoding="utf-8")

    with pytest.raises(TechJobsConfigError):
        TechJobsConfig.from_file(config_path)


def test_from_file_raises_for_invalid_encoding(tmp_path: Path) -> None:
    """Unknown codecs should fail config validation."""
    config_path = tmp_path / "bad.yaml"
    config_path.write_text("encoding: not-a-codec\n", encoding="utf-8")

    with pytest.raises(TechJobsConfigError):
        TechJobsConfig.from_file(config_path)


def test_from_file_raises_for_non_mapping_root(tmp_path: Path) -> None:
    """A YAML list root should be rejected."""
    config_path = tmp_path / "bad.yaml"
    config_path.write_text("- data_file\n", encoding="utf-8")

    with pytest.raises(TechJobsConfigError):
        TechJobsConfig.from_file(config_path)


def test_from_file_raises_for_missing_file(tmp_path: Path) -> None:
    """A missing config path should fail with a config error."""
    with pytest.raises(TechJobsConfigError):
        TechJobsConfig.from_file(tmp_path / "missing.yaml")


def test_with_data_file_keeps_encoding() -> None:
    """Overriding the data file should leave other values untouched."""
    config = TechJobsConfig(data_file=Path("a.csv"), encoding="latin-1")

    updated = config.with_data_file("b.csv")

    assert updated.data_file == Path("b.csv") and updated.encoding == "latin-1"
