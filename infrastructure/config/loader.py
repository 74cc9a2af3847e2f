"""Configuration loading from YAML files."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from infrastructure.config.models import ConverterConfig


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # An empty file means "all defaults"
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def parse_converter_config(data: dict[str, Any]) -> ConverterConfig:
    """
    Build a ConverterConfig from a pre-loaded YAML dict.

    Raises:
        ValueError: If sections have the wrong type or values are invalid
    """
    source = data.get("source") or {}
    output = data.get("output") or {}

    if not isinstance(source, dict):
        raise ValueError("source must be a mapping")
    if not isinstance(output, dict):
        raise ValueError("output must be a mapping")

    unknown = set(data) - {"source", "output", "tracing"}
    if unknown:
        raise ValueError(f"Unknown converter config keys: {sorted(unknown)}")

    try:
        return ConverterConfig(
            source=source,
            output=output,
            tracing=bool(data.get("tracing", False)),
        )
    except ValidationError as e:
        raise ValueError(f"Invalid converter config: {e}") from e


def load_converter_config(path: Path) -> ConverterConfig:
    """
    Load converter.yaml into a ConverterConfig.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML is not a mapping or has invalid values
    """
    data = _load_yaml(path)
    try:
        return parse_converter_config(data)
    except ValueError as e:
        raise ValueError(f"{e} (in {path})") from e
