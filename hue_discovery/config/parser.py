"""YAML config parser for bridge discovery.

Parses YAML settings files into DiscoveryConfig objects. Settings may be given
flat or nested under a top-level ``discovery`` mapping.
"""

from pathlib import Path
from typing import Union

import yaml

from .schema import DiscoveryConfig


def load_config(file_path: Union[str, Path]) -> DiscoveryConfig:
    """Parse a YAML config file into a DiscoveryConfig.

    Args:
        file_path: Path to the YAML config file.

    Returns:
        Parsed DiscoveryConfig.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ValueError: If the YAML is malformed or has wrongly typed values.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")

    if file_path.suffix not in (".yaml", ".yml"):
        raise ValueError(f"Expected .yaml or .yml file, got: {file_path.suffix}")

    with open(file_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Malformed YAML in {file_path}: {e}") from e

    if data is None:
        raise ValueError(f"Empty config file: {file_path}")

    return parse_config_data(data, source=str(file_path))


def parse_config_data(data: dict, source: str = "<inline>") -> DiscoveryConfig:
    """Parse settings from a dictionary (already loaded YAML).

    Unknown keys are ignored.

    Raises:
        ValueError: If the data is not a mapping or a value has the wrong type.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data).__name__}")

    if "discovery" in data:
        data = data["discovery"]
        if not isinstance(data, dict):
            raise ValueError(f"'discovery' must be a mapping in {source}")

    fields = DiscoveryConfig.__dataclass_fields__
    values = {}
    for key, value in data.items():
        if key not in fields:
            continue
        values[key] = _coerce(key, value, fields[key].type, source)

    return DiscoveryConfig(**values)


def _coerce(key: str, value, expected: type, source: str):
    """Check a single value against the field's declared type."""

    if expected is float and isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    if expected is int and isinstance(value, bool):
        raise ValueError(f"'{key}' must be an integer in {source}")
    if not isinstance(value, expected):
        raise ValueError(
            f"'{key}' must be of type {expected.__name__}, "
            f"got {type(value).__name__} in {source}"
        )
    return value
