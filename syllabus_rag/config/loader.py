# syllabus_rag/config/loader.py
"""
Layered configuration loading.

Merge strategy:
    1. Package defaults (syllabus_rag/config/default.yaml) - always loaded
    2. User config - overrides defaults

User config location, first hit wins:
    - explicit path argument (CLI --config)
    - SYLLABUS_RAG_CONFIG environment variable
    - .syllabus_rag/config.yaml in the working directory (optional)

The `scope:` section may be:
    - null: package default scope rules
    - a mapping: merged over the package default scope rules
    - a string: path to a scope rules YAML file (relative to the config file)

Usage:
    from syllabus_rag.config.loader import load_config

    config = load_config()               # defaults + optional user file
    config = load_config("tutor.yaml")   # explicit user file (must exist)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from syllabus_rag.config.schema import SyllabusRagConfig
from syllabus_rag.core.exceptions import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
)
from syllabus_rag.logging.logger import get_logger
from syllabus_rag.logging.tags import CONFIG
from syllabus_rag.scope.rules import DEFAULT_SCOPE_PATH

logger = get_logger(__name__)

DEFAULTS_PATH = Path(__file__).parent / "default.yaml"
CONFIG_ENV_VAR = "SYLLABUS_RAG_CONFIG"
DEFAULT_USER_CONFIG_PATH = Path(".syllabus_rag") / "config.yaml"


# =============================================================================
# Deep Merge
# =============================================================================


def deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Values from `override` take precedence over `base`.
    Nested dicts are merged recursively.
    Lists are replaced entirely (not merged).

    Examples:
        >>> deep_merge({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"c": 10}})
        {'a': 1, 'b': {'c': 10, 'd': 3}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


# =============================================================================
# Loading Functions
# =============================================================================


def load_yaml(path: Union[str, Path]) -> dict[str, Any]:
    """
    Read a YAML mapping from disk.

    Raises:
        ConfigNotFoundError: File does not exist
        ConfigParseError: Invalid YAML, or the top level is not a mapping
    """
    path = Path(path)
    if not path.exists():
        raise ConfigNotFoundError("Config file not found", path)

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML: {e}", path) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping", path)
    return data


def load_defaults() -> dict[str, Any]:
    """Load package defaults."""
    defaults = load_yaml(DEFAULTS_PATH)
    logger.debug(f"{CONFIG} Loaded defaults from {DEFAULTS_PATH}")
    return defaults


def resolve_user_config_path(path: Union[str, Path, None] = None) -> Optional[Path]:
    """
    Decide which user config file applies.

    Returns None when no explicit path or env var is given and the default
    location does not exist.
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    if DEFAULT_USER_CONFIG_PATH.exists():
        return DEFAULT_USER_CONFIG_PATH

    return None


def _resolve_scope(raw_scope: Any, base_dir: Path) -> Optional[dict[str, Any]]:
    if raw_scope is None:
        return None

    if isinstance(raw_scope, str):
        scope_path = Path(raw_scope)
        if not scope_path.is_absolute():
            scope_path = base_dir / scope_path
        return load_yaml(scope_path)

    if isinstance(raw_scope, dict):
        return deep_merge(load_yaml(DEFAULT_SCOPE_PATH), raw_scope)

    raise ConfigValidationError(
        f"'scope' must be null, a mapping or a file path, got {type(raw_scope).__name__}"
    )


def load_config_dict(path: Union[str, Path, None] = None) -> dict[str, Any]:
    """
    Defaults merged with the user config, before validation.

    Raises:
        ConfigNotFoundError: An explicitly requested user config is missing
        ConfigParseError: A config file is not valid YAML
    """
    merged = load_defaults()
    user_path = resolve_user_config_path(path)
    base_dir = Path.cwd()

    if user_path is not None:
        user_config = load_yaml(user_path)
        merged = deep_merge(merged, user_config)
        base_dir = user_path.parent
        logger.debug(f"{CONFIG} Merged user config from {user_path}")
    else:
        logger.debug(f"{CONFIG} No user config, using defaults")

    merged["scope"] = _resolve_scope(merged.get("scope"), base_dir)
    return merged


def load_config(path: Union[str, Path, None] = None) -> SyllabusRagConfig:
    """
    Load and validate the complete configuration.

    Raises:
        ConfigNotFoundError: An explicitly requested config file is missing
        ConfigParseError: Invalid YAML
        ConfigValidationError: Merged config does not match the schema
    """
    data = load_config_dict(path)
    try:
        return SyllabusRagConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid configuration: {e}") from e


__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULTS_PATH",
    "deep_merge",
    "load_config",
    "load_config_dict",
    "load_defaults",
    "load_yaml",
    "resolve_user_config_path",
]
