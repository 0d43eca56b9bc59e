from __future__ import annotations

"""
Platform Absoluteness Rules.

Pure predicates deciding whether a path string is absolute under posix or
windows conventions. No filesystem access is performed.
"""

import os
from typing import Optional

POSIX = "posix"
WINDOWS = "windows"


def host_flavour() -> str:
    """Return the path flavour of the running interpreter."""
    return WINDOWS if os.name == "nt" else POSIX


def is_absolute_path(path: str, flavour: Optional[str] = None) -> bool:
    """
    Check whether `path` denotes an absolute location.

    Posix paths must start with '/'. Windows paths must start with a drive
    letter followed by ':' and a separator ('C:/' or 'C:\\').

    Args:
        path: Raw path text.
        flavour: 'posix' or 'windows'. Defaults to the host flavour.

    Returns:
        bool: True if the path is absolute.
    """
    flavour = flavour or host_flavour()
    if flavour == WINDOWS:
        return _is_absolute_windows(path)
    return _is_absolute_posix(path)


def _is_absolute_posix(path: str) -> bool:
    return bool(path) and path[0] == "/"


def _is_absolute_windows(path: str) -> bool:
    return (
        len(path) > 3
        and path[0].isalpha()
        and path[1] == ":"
        and path[2] in ("/", "\\")
    )
