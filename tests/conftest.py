from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports uninstalled.
2. Restores the process-wide diagnostic sink after every test.
3. Provides shared fixtures for sinks, host flavour and settings.
"""

import os
import sys
from typing import Any, Dict, Iterator

import pytest

_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from typedpaths.infra import platform as platform_rules  # noqa: E402
from typedpaths.infra.diagnostics import (  # noqa: E402
    RecordingDiagnosticSink,
    get_default_sink,
    set_default_sink,
)


@pytest.fixture(autouse=True)
def restore_default_sink() -> Iterator[None]:
    previous = get_default_sink()
    yield
    set_default_sink(previous)


@pytest.fixture
def recording_sink() -> RecordingDiagnosticSink:
    """A fresh in-memory sink, also installed as the default sink."""
    sink = RecordingDiagnosticSink()
    set_default_sink(sink)
    return sink


@pytest.fixture
def posix_host(monkeypatch: pytest.MonkeyPatch) -> None:
    """Force posix absoluteness rules regardless of the running OS."""
    monkeypatch.setattr(platform_rules, "host_flavour", lambda: platform_rules.POSIX)


@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a complete settings dictionary as produced by
    'typedpaths.domain.config.get_default_config'.
    """
    return {
        "validate": True,
        "separator": "/",
        "log_level": "INFO",
        "log_file": None,
    }
