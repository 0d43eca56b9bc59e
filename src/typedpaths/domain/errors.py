from __future__ import annotations

"""
Error Types and Diagnostic Records.

Defines the exception hierarchy raised by the serialization layer and the
non-fatal diagnostic record produced when a path fails the absoluteness
check. The record is reported, never raised.
"""

from dataclasses import dataclass
from typing import Optional

# -----------------------------------------------------------------------------
# EXCEPTIONS
# -----------------------------------------------------------------------------

class TypedPathsError(Exception):
    """Base class for all errors raised by typedpaths."""


class SerializationError(TypedPathsError):
    """
    Raised by a reader cursor when the token stream is malformed.

    Covers invalid documents, non-string tokens and exhausted cursors.
    """


# -----------------------------------------------------------------------------
# DIAGNOSTIC RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class InvalidAbsolutePath:
    """
    Diagnostic emitted when a validated path is not absolute.

    Attributes:
        path: The offending path text, exactly as supplied.
        stack: Formatted call stack at the point of construction.
    """
    path: str
    stack: Optional[str] = None

    @property
    def message(self) -> str:
        return f"Expected {self.path} to be absolute"

    def __str__(self) -> str:
        return self.message
