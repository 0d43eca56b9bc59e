from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the per-user application directory that holds the persisted
configuration and the optional diagnostic log. The value types never touch
the filesystem; only the ambient layers (config, logging) use this module.
"""

import os

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "typedpaths"
UNIX_APP_DIR_NAME = ".typedpaths"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir(create: bool = True) -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/typedpaths
    - Linux/Mac: ~/.typedpaths

    Args:
        create: Create the hierarchy if it does not exist.

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    if create:
        try:
            os.makedirs(path, exist_ok=True)
        except OSError:
            pass

    return os.path.abspath(path)


def get_default_config_path() -> str:
    """Return the location of the persisted config.json."""
    return os.path.join(get_user_data_dir(create=False), "config.json")
