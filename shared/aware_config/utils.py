"""
Utility functions for configuration loading.

This module provides common utilities used by the loader:
- load_yaml_file: Parse a YAML config file
- parse_int: Parse integers from strings, strictly
- parse_bool: Parse booleans from strings, strictly
"""

from pathlib import Path
from typing import Any

import yaml

from .errors import MalformedValueError


TRUE_STRINGS = ("true", "yes", "1", "on")
FALSE_STRINGS = ("false", "no", "0", "off")


def load_yaml_file(path: Path) -> Any:
    """Load a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Parsed YAML content, or None for an empty document

    Raises:
        FileNotFoundError: If the file does not exist
        yaml.YAMLError: If the file is not valid YAML
    """
    with open(path) as f:
        return yaml.safe_load(f)


def parse_int(value: Any, field_name: str) -> int:
    """Parse an integer field value.

    Accepts ints (but not bools) and strings holding a base-10 integer.

    Raises:
        MalformedValueError: If the value cannot be read as an integer
    """
    if isinstance(value, bool):
        raise MalformedValueError(
            f"{field_name} must be an integer, got boolean {value}",
            field=field_name,
            value=value,
        )
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise MalformedValueError(
        f"{field_name} must be an integer, got {value!r}",
        field=field_name,
        value=value,
    )


def parse_bool(value: Any, field_name: str) -> bool:
    """Parse a boolean field value.

    Accepts bools and the strings true, yes, 1, on, false, no, 0, off
    (case-insensitive).

    Raises:
        MalformedValueError: If the value is not a recognized boolean
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        value_lower = value.lower().strip()
        if value_lower in TRUE_STRINGS:
            return True
        if value_lower in FALSE_STRINGS:
            return False
    raise MalformedValueError(
        f"{field_name} must be a boolean, got {value!r}",
        field=field_name,
        value=value,
    )
