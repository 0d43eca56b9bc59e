from __future__ import annotations

from .domain.errors import InvalidAbsolutePath, SerializationError, TypedPathsError
from .domain.file_types import AbsolutePath, Directory
from .infra.platform import is_absolute_path
from .utils.text import ensure_ends_in_slash

__version__ = "0.1.0"

__all__ = [
    "AbsolutePath",
    "Directory",
    "InvalidAbsolutePath",
    "SerializationError",
    "TypedPathsError",
    "ensure_ends_in_slash",
    "is_absolute_path",
]
