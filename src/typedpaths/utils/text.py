from __future__ import annotations

"""
String helpers for path text.
"""

# Canonical separator; directory paths are normalized to forward slashes.
PATH_SEPARATOR = "/"


def ensure_ends_in_slash(path: str, sep: str = PATH_SEPARATOR) -> str:
    """
    Append `sep` to `path` unless it already ends with it.

    Idempotent. An empty string becomes `sep`.
    """
    if not path.endswith(sep):
        return path + sep
    return path
