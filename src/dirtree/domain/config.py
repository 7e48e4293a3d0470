from __future__ import annotations

"""
Configuration Domain Management.

Loads user preferences from a JSON file in the user data directory and
validates them against the known schema. Command line values are merged
on top by the interface layer.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from dirtree.infra.fs import get_user_data_dir, normalize_path
from dirtree.infra.logging.config import _LEVEL_MAP

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_ENV_VAR = "DIRTREE_CONFIG"
CONFIG_FILE_NAME = "config.json"

_BOOL_KEYS = ("include_files",)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "include_files": False,
        "log_level": "WARNING",
        "log_file": None,
    }


def get_config_path() -> str:
    """Resolve the config file location, honouring DIRTREE_CONFIG."""
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return normalize_path(override)
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration file merged over the defaults.

    A missing file yields the defaults. A file that cannot be read or
    parsed is reported as a warning and also yields the defaults.

    Args:
        path: Explicit config file, defaults to get_config_path().

    Returns:
        Dict[str, Any]: Merged raw configuration (not yet validated).
    """
    config = get_default_config()
    config_path = path or get_config_path()

    if not os.path.exists(config_path):
        logger.debug(f"No config file at {config_path}. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable config file '{config_path}': {e}")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config file '{config_path}': top level is not an object")
        return config

    config.update(data)
    logger.debug(f"Configuration loaded from {config_path}")
    return config


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------
def validate_config(raw: Dict[str, Any]) -> Tuple[Dict[str, Any], List[str]]:
    """
    Normalize a raw configuration dictionary.

    Invalid values fall back to their defaults and unknown keys are
    dropped; each correction produces a warning message.

    Args:
        raw: Configuration as loaded and merged.

    Returns:
        Tuple[Dict[str, Any], List[str]]: (Clean configuration, warnings).
    """
    defaults = get_default_config()
    clean: Dict[str, Any] = dict(defaults)
    warnings: List[str] = []

    for key in raw:
        if key not in defaults:
            warnings.append(f"Unknown configuration key '{key}' ignored.")

    for key in _BOOL_KEYS:
        value = raw.get(key, defaults[key])
        if isinstance(value, bool):
            clean[key] = value
        else:
            warnings.append(f"'{key}' must be a boolean. Using default.")

    level = raw.get("log_level", defaults["log_level"])
    if isinstance(level, str) and level.strip().upper() in _LEVEL_MAP:
        clean["log_level"] = level.strip().upper()
    else:
        warnings.append(f"Invalid log level '{level}'. Using {defaults['log_level']}.")

    log_file = raw.get("log_file")
    if log_file is None or (isinstance(log_file, str) and log_file.strip()):
        clean["log_file"] = normalize_path(log_file) if isinstance(log_file, str) else None
    else:
        warnings.append("'log_file' must be a non-empty string or null. Logging to file disabled.")

    return clean, warnings
