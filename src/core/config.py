"""Runtime configuration model for TechJobs.

This module owns source location and encoding validation.
Other modules consume a typed config object instead of raw paths.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, cast

import yaml

from core.constants import DEFAULT_DATA_FILE, DEFAULT_SOURCE_ENCODING, SUPPORTED_CONFIG_KEYS
from core.errors import TechJobsConfigError


@dataclass(frozen=True)
class TechJobsConfig:
    """Validated runtime configuration.

    Attributes:
        data_file: Delimited job data file loaded by the store.
        encoding: Text encoding used to decode the data file.
    """

    data_file: Path
    encoding: str = DEFAULT_SOURCE_ENCODING

    @classmethod
    def default(cls) -> "TechJobsConfig":
        """Build config pointing at the bundled resources location.

        Returns:
            Config with default data file and encoding.
        """
        return cls(data_file=DEFAULT_DATA_FILE)

    @classmethod
    def from_file(cls, config_path: str | Path) -> "TechJobsConfig":
        """Build config from a YAML file.

        Relative ``data_file`` values resolve against the config file's
        directory.

        Args:
            config_path: Path to YAML config file.

        Returns:
            A validated config object.

        Raises:
            TechJobsConfigError: If the file is missing or has invalid values.
        """
        config_file = Path(config_path).expanduser().resolve()
        payload = _load_yaml_mapping(config_file)
        data_file = DEFAULT_DATA_FILE
        raw_data_file = _optional_string(payload, "data_file")
        if raw_data_file is not None:
            data_file = Path(raw_data_file).expanduser()
            if not data_file.is_absolute():
                data_file = config_file.parent / data_file
        encoding = _optional_string(payload, "encoding") or DEFAULT_SOURCE_ENCODING
        return cls(data_file=data_file, encoding=_parse_encoding(encoding))

    def with_data_file(self, data_file: str | Path) -> "TechJobsConfig":
        """Clone the config with a different data file."""
        return replace(self, data_file=Path(data_file).expanduser())


def _load_yaml_mapping(config_file: Path) -> Mapping[str, object]:
    if not config_file.is_file():
        raise TechJobsConfigError(
            f"Config file does not exist at {config_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(config_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise TechJobsConfigError(
            f"Failed to read config at {config_file}: {error}. Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise TechJobsConfigError(
            f"Failed to parse YAML config at {config_file}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise TechJobsConfigError(
            f"Invalid config at {config_file}: expected object mapping, "
            f"got {type(payload).__name__}."
        )
    unknown_keys = sorted(str(key) for key in payload if key not in SUPPORTED_CONFIG_KEYS)
    if unknown_keys:
        supported = ", ".join(SUPPORTED_CONFIG_KEYS)
        raise TechJobsConfigError(
            f"Unsupported config keys {unknown_keys} in {config_file}. Use only: {supported}."
        )
    return cast(Mapping[str, object], payload)


def _optional_string(payload: Mapping[str, object], key: str) -> str | None:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise TechJobsConfigError(f"Config field '{key}' must be a non-empty string.")
    return value


def _parse_encoding(raw_value: str) -> str:
    """Validate a text encoding name.

    Args:
        raw_value: Encoding name from config.

    Returns:
        The encoding name unchanged.

    Raises:
        TechJobsConfigError: If Python does not know the encoding.
    """
    try:
        codecs.lookup(raw_value)
    except LookupError as error:
        raise TechJobsConfigError(
            f"Invalid encoding value: '{raw_value}' is not a known codec. "
            "Set encoding to a name such as utf-8."
        ) from error
    return raw_value
