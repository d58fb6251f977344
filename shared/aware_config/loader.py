"""
Load config requests from mappings, the environment, and files.

Sources:
- from_mapping: any dict-like object with config request field names
- from_env: AWARE_* environment variables, optionally merged with a .env file
- from_yaml: a YAML file, either flat or nested under "config_request"

Every source goes through ConfigRequestBuilder, so loaded requests carry the
same guarantees as ones built in code.
"""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import dotenv_values

from aware_logging import get_logger

from .errors import MalformedValueError, UnknownFieldError
from .request import ConfigRequest
from .utils import load_yaml_file, parse_bool, parse_int


logger = get_logger("aware-config", component="loader")

FIELD_NAMES = ("support_alt_band", "master_preference", "cluster_low", "cluster_high")

ENV_VARS = {
    "support_alt_band": "AWARE_SUPPORT_ALT_BAND",
    "master_preference": "AWARE_MASTER_PREFERENCE",
    "cluster_low": "AWARE_CLUSTER_LOW",
    "cluster_high": "AWARE_CLUSTER_HIGH",
}

YAML_SECTION = "config_request"


def from_mapping(data: Mapping[str, Any]) -> ConfigRequest:
    """Build a request from a mapping of field names to values.

    Missing fields keep their defaults. Values may be native or strings.

    Raises:
        UnknownFieldError: If the mapping has a key that is not a field
        MalformedValueError: If a value cannot be parsed
        InvalidConfigError: If a value violates an invariant
    """
    unknown = sorted(str(key) for key in data if key not in FIELD_NAMES)
    if unknown:
        raise UnknownFieldError(
            f"Unknown config request field(s): {', '.join(unknown)}",
            field=unknown[0],
        )

    builder = ConfigRequest.builder()
    if "support_alt_band" in data:
        builder.set_support_alt_band(parse_bool(data["support_alt_band"], "support_alt_band"))
    if "master_preference" in data:
        builder.set_master_preference(parse_int(data["master_preference"], "master_preference"))
    if "cluster_low" in data:
        builder.set_cluster_low(parse_int(data["cluster_low"], "cluster_low"))
    if "cluster_high" in data:
        builder.set_cluster_high(parse_int(data["cluster_high"], "cluster_high"))
    return builder.build()


def from_env(
    environ: Mapping[str, str] | None = None,
    env_file: Path | None = None,
) -> ConfigRequest:
    """Build a request from AWARE_* environment variables.

    Args:
        environ: Environment to read (defaults to os.environ)
        env_file: Optional .env file; variables set in environ take precedence

    Empty values are treated as unset. The process environment is not modified.
    """
    if environ is None:
        environ = os.environ

    values: dict[str, str | None] = {}
    if env_file is not None:
        if not Path(env_file).exists():
            raise FileNotFoundError(f"Env file not found: {env_file}")
        values.update(dotenv_values(env_file))
    values.update(environ)

    data = {}
    for field_name, var in ENV_VARS.items():
        value = values.get(var)
        if value:
            data[field_name] = value

    request = from_mapping(data)
    logger.info(
        "Loaded config request",
        source="environment",
        env_file=str(env_file) if env_file else None,
        fields=sorted(data),
    )
    return request


def from_yaml(path: Path) -> ConfigRequest:
    """Build a request from a YAML file.

    The file may hold the fields at top level or under a "config_request"
    key. An empty file yields the default request.

    Raises:
        FileNotFoundError: If the file does not exist
        yaml.YAMLError: If the file is not valid YAML
        MalformedValueError: If the document is not a mapping
    """
    content = load_yaml_file(path)
    if content is None:
        content = {}

    if isinstance(content, Mapping) and YAML_SECTION in content:
        content = content[YAML_SECTION] or {}

    if not isinstance(content, Mapping):
        raise MalformedValueError(
            f"{path}: expected a mapping of config request fields, "
            f"got {type(content).__name__}",
            value=content,
        )

    request = from_mapping(content)
    logger.info("Loaded config request", source="yaml", path=str(path))
    return request
