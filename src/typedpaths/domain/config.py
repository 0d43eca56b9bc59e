from __future__ import annotations

"""
Configuration Domain Management.

Loads and saves the typedpaths settings as JSON. Unknown keys are ignored
and missing keys fall back to defaults; a missing or corrupt file never
prevents startup.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from typedpaths.infra.fs import get_default_config_path
from typedpaths.utils.text import PATH_SEPARATOR

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default settings.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Construction
        "validate": True,
        "separator": PATH_SEPARATOR,

        # Diagnostics
        "log_level": "INFO",
        "log_file": None,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load settings from disk, merged over the defaults.

    Args:
        path: JSON file to read. Defaults to the user data config.json.

    Returns:
        Dict[str, Any]: The merged settings, or defaults on failure.
    """
    config = get_default_config()
    path = path or get_default_config_path()

    if not os.path.exists(path):
        logger.debug(f"Config file not found at {path}. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Using defaults.")
        return config

    for key in config:
        if key in data:
            config[key] = data[key]

    return _sanitize(config)


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Persist settings to disk.

    Args:
        config: The settings to save.
        path: Target JSON file. Defaults to the user data config.json.

    Returns:
        bool: True if the file was written.
    """
    path = path or get_default_config_path()
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config, f, ensure_ascii=False, indent=4)
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False

    logger.debug(f"Configuration saved to {path}")
    return True


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------
def _sanitize(config: Dict[str, Any]) -> Dict[str, Any]:
    """Replace values of the wrong type with their defaults, logging each one."""
    defaults = get_default_config()

    if not isinstance(config["validate"], bool):
        logger.warning(f"Invalid validate {config['validate']!r} in config. Using {defaults['validate']}.")
        config["validate"] = defaults["validate"]

    sep = config["separator"]
    if not isinstance(sep, str) or len(sep) != 1:
        logger.warning(f"Invalid separator {sep!r} in config. Using '{PATH_SEPARATOR}'.")
        config["separator"] = PATH_SEPARATOR

    if not isinstance(config["log_level"], str):
        logger.warning(f"Invalid log_level {config['log_level']!r} in config. Using {defaults['log_level']}.")
        config["log_level"] = defaults["log_level"]

    log_file = config["log_file"]
    if log_file is not None and not isinstance(log_file, str):
        logger.warning(f"Invalid log_file {log_file!r} in config. Logging to console only.")
        config["log_file"] = defaults["log_file"]

    return config
