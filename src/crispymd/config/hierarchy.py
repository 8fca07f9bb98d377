"""Layered configuration lookup.

Sources, lowest priority first:
  1. Package defaults
  2. User file      ~/.crispymd/config.yaml
  3. Project file   crispymd.yaml in the working directory or any parent
  4. CRISPYMD_* environment variables
  5. Keyword overrides passed by the caller
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from crispymd.config.defaults import get_defaults

logger = logging.getLogger(__name__)

_GLOBAL_CONFIG_PATH = Path.home() / ".crispymd" / "config.yaml"
_PROJECT_CONFIG_NAME = "crispymd.yaml"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in _TRUTHY


# env var -> (config key, converter)
_ENV_VARS: dict[str, tuple[str, Callable[[str], Any]]] = {
    "CRISPYMD_PARSER": ("parser_type", str),
    "CRISPYMD_ALLOW_UNSAFE_HTML": ("allow_unsafe_html", _parse_bool),
    "CRISPYMD_CONTAINER_CLASS": ("container_class", str),
    "CRISPYMD_CACHE_EXPIRATION": ("cache_expiration", int),
    "CRISPYMD_CACHE_DISABLED": ("cache_disabled", _parse_bool),
    "CRISPYMD_CACHE_BACKEND": ("cache_backend", str),
    "CRISPYMD_CACHE_DB_PATH": ("cache_db_path", str),
    "CRISPYMD_CACHE_MEMORY_MB": ("cache_memory_mb", float),
    "CRISPYMD_CACHE_DISK_MB": ("cache_disk_mb", float),
    "CRISPYMD_EXCERPT_LENGTH": ("excerpt_length", int),
    "CRISPYMD_FEED_MODE": ("feed_mode", str),
    "CRISPYMD_LOG_LEVEL": ("log_level", str),
}


def load_config_hierarchy(**runtime_overrides: Any) -> dict[str, Any]:
    """Merge every configuration source into one flat dict.

    Overrides whose value is None are skipped, so unset CLI options
    do not mask values from files or the environment.
    """
    merged = get_defaults()
    for layer in (
        read_config_file(_GLOBAL_CONFIG_PATH),
        read_config_file(find_project_config()),
        read_env_config(),
    ):
        merged.update(layer)
    merged.update({k: v for k, v in runtime_overrides.items() if v is not None})
    return merged


def read_config_file(path: Path | None) -> dict[str, Any]:
    """Read a YAML mapping; missing, unreadable or non-mapping files give {}."""
    if path is None or not path.is_file():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Skipping unreadable config file %s: %s", path, e)
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Skipping config file %s: top level is not a mapping", path)
        return {}
    logger.debug("Loaded config file %s", path)
    return data


def find_project_config(start: Path | None = None) -> Path | None:
    """Return the nearest crispymd.yaml at or above ``start`` (default: cwd)."""
    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / _PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
    return None


def read_env_config() -> dict[str, Any]:
    found: dict[str, Any] = {}
    for env_name, (key, convert) in _ENV_VARS.items():
        raw = os.environ.get(env_name)
        if raw is not None:
            found[key] = convert_env_value(env_name, raw)
    return found


def convert_env_value(env_name: str, raw: str) -> Any:
    """Convert a raw environment string for ``env_name``.

    Values that fail numeric conversion are passed through unchanged so
    that schema validation reports them against the right field.
    """
    key, convert = _ENV_VARS[env_name]
    try:
        return convert(raw)
    except ValueError:
        logger.warning("%s=%r is not a valid %s value", env_name, raw, key)
        return raw
