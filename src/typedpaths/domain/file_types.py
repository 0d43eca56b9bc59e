from __future__ import annotations

"""
Typed Path Value Objects.

Provides the two immutable value types of the package:
- AbsolutePath: path text expected to be absolute (validate-and-warn).
- Directory: an absolute path normalized to end with a separator.

Both compare and hash by their text only and serialize to plain string
tokens through the reader/writer cursors.
"""

import logging
import traceback
from dataclasses import dataclass
from typing import Optional

from typedpaths.domain.errors import InvalidAbsolutePath
from typedpaths.infra.diagnostics import DiagnosticSink, get_default_sink
from typedpaths.infra.platform import is_absolute_path
from typedpaths.infra.serialization import Reader, Writer
from typedpaths.utils.text import PATH_SEPARATOR, ensure_ends_in_slash

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# ABSOLUTE PATH
# -----------------------------------------------------------------------------

@dataclass(frozen=True, init=False)
class AbsolutePath:
    """
    Path text that should denote an absolute filesystem location.

    Validation never rejects: a non-absolute path is reported to the
    diagnostic sink (message plus call stack) and the value is still built
    with the text untouched. Callers needing a hard guarantee must check
    `is_absolute_path(str(value))` themselves.

    Attributes:
        path: The stored path text, verbatim.
    """
    path: str

    def __init__(
            self,
            path: Optional[str] = None,
            validate: bool = True,
            reporter: Optional[DiagnosticSink] = None,
    ) -> None:
        """
        Wrap path text, optionally checking that it is absolute.

        Args:
            path: Path text. Omitted means an empty, unvalidated value.
            validate: Run the absoluteness check and report on failure.
            reporter: Sink receiving the diagnostic. Defaults to the
                process-wide default sink.
        """
        if path is None:
            object.__setattr__(self, "path", "")
            return

        object.__setattr__(self, "path", path)
        if validate and not is_absolute_path(path):
            _report_invalid(path, reporter)

    def __str__(self) -> str:
        return self.path

    @classmethod
    def read(cls, reader: Reader) -> AbsolutePath:
        """Build a value from the next string token. No validation."""
        return cls(reader.get_string(), validate=False)

    def write(self, writer: Writer) -> None:
        """Emit the path text as a single string token."""
        writer.write_string(self.path, len(self.path))


# -----------------------------------------------------------------------------
# DIRECTORY
# -----------------------------------------------------------------------------

@dataclass(frozen=True, init=False)
class Directory:
    """
    Absolute directory path, always ending with the separator.

    Built from an AbsolutePath whose construction already ran (or skipped)
    validation; the source is trusted and not checked again, so an invalid
    source is reported exactly once.

    Attributes:
        path: Non-empty path text ending with the separator.
    """
    path: str

    def __init__(self, source: AbsolutePath, sep: str = PATH_SEPARATOR) -> None:
        """
        Copy the source text and append `sep` unless already present.

        Raises:
            ValueError: If `sep` is not exactly one character.
        """
        if not isinstance(sep, str) or len(sep) != 1:
            raise ValueError(f"separator must be a single character, got {sep!r}")
        object.__setattr__(self, "path", ensure_ends_in_slash(source.path, sep))

    def __str__(self) -> str:
        return self.path

    @classmethod
    def read(cls, reader: Reader) -> Directory:
        return cls(AbsolutePath(reader.get_string(), validate=False))

    def write(self, writer: Writer) -> None:
        writer.write_string(self.path, len(self.path))


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _report_invalid(path: str, reporter: Optional[DiagnosticSink]) -> None:
    """Send an InvalidAbsolutePath diagnostic; sink failures are contained."""
    stack = "".join(traceback.format_stack()[:-2])
    record = InvalidAbsolutePath(path=path, stack=stack)
    sink = reporter if reporter is not None else get_default_sink()
    try:
        sink.report(logging.ERROR, record.message, record.stack)
    except Exception:
        logger.debug("Diagnostic sink failed while reporting %r", path, exc_info=True)
