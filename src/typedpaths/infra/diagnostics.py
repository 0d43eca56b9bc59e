from __future__ import annotations

"""
Diagnostic Reporting Infrastructure.

Provides the sink abstraction that value types use to report soft
validation failures, along with the stock implementations:
- LoggingDiagnosticSink: routes reports to the standard logging tree.
- NullDiagnosticSink: discards everything.
- RecordingDiagnosticSink: keeps reports in memory for inspection.

Reporting is fire-and-forget. Sinks never hold locks shared with the
callers and their return values are ignored.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

DIAGNOSTICS_LOGGER_NAME = "typedpaths.diagnostics"


# -----------------------------------------------------------------------------
# SINK INTERFACE
# -----------------------------------------------------------------------------

class DiagnosticSink(ABC):
    """
    Abstract receiver of non-fatal diagnostics.
    """

    @abstractmethod
    def report(self, level: int, message: str, stack: Optional[str] = None) -> None:
        """
        Accept a diagnostic.

        Args:
            level: Numeric logging severity (e.g. logging.ERROR).
            message: Human readable description.
            stack: Optional formatted call stack.
        """
        pass


# -----------------------------------------------------------------------------
# IMPLEMENTATIONS
# -----------------------------------------------------------------------------

class LoggingDiagnosticSink(DiagnosticSink):
    """Emit diagnostics through a standard library logger."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger(DIAGNOSTICS_LOGGER_NAME)

    def report(self, level: int, message: str, stack: Optional[str] = None) -> None:
        if stack:
            self.logger.log(level, f"{message}\n{stack}")
        else:
            self.logger.log(level, message)


class NullDiagnosticSink(DiagnosticSink):
    """Discard every diagnostic."""

    def report(self, level: int, message: str, stack: Optional[str] = None) -> None:
        return None


@dataclass(frozen=True)
class DiagnosticEntry:
    """
    A single diagnostic captured by RecordingDiagnosticSink.

    Attributes:
        level: Numeric logging severity.
        message: Reported message.
        stack: Formatted call stack, if one was attached.
    """
    level: int
    message: str
    stack: Optional[str] = None


class RecordingDiagnosticSink(DiagnosticSink):
    """Keep diagnostics in memory, in arrival order."""

    def __init__(self) -> None:
        self.entries: List[DiagnosticEntry] = []

    def report(self, level: int, message: str, stack: Optional[str] = None) -> None:
        self.entries.append(DiagnosticEntry(level=level, message=message, stack=stack))

    def clear(self) -> None:
        self.entries.clear()

    def __len__(self) -> int:
        return len(self.entries)


# -----------------------------------------------------------------------------
# DEFAULT SINK REGISTRY
# -----------------------------------------------------------------------------

_default_sink: DiagnosticSink = LoggingDiagnosticSink()


def get_default_sink() -> DiagnosticSink:
    """Return the sink used when no reporter is injected."""
    return _default_sink


def set_default_sink(sink: Optional[DiagnosticSink]) -> DiagnosticSink:
    """
    Replace the process-wide default sink.

    Args:
        sink: New sink. None restores the logging sink.

    Returns:
        DiagnosticSink: The previously installed sink, so callers can restore it.
    """
    global _default_sink
    previous = _default_sink
    _default_sink = sink if sink is not None else LoggingDiagnosticSink()
    return previous
