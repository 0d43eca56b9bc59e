from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script in a subprocess and checks exit codes,
stdout and the diagnostics written to stderr.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "typedpaths" / "main.py"

pytestmark = pytest.mark.skipif(os.name == "nt", reason="posix path rules")


def run_cli(args: List[str], home: Path) -> subprocess.CompletedProcess[str]:
    """Execute the CLI with 'src' on PYTHONPATH and an isolated HOME."""
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home)

    return subprocess.run(
        [sys.executable, str(ENTRY_POINT)] + args,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_absolute_directory(tmp_path: Path) -> None:
    result = run_cli(["/home/user", "--dir"], tmp_path)

    assert result.returncode == 0
    assert result.stdout.splitlines() == ["/home/user", "/home/user/"]


def test_relative_path_warns_on_stderr(tmp_path: Path) -> None:
    result = run_cli(["relative/path"], tmp_path)

    assert result.returncode == 1
    assert result.stdout.splitlines() == ["relative/path"]
    assert "Expected relative/path to be absolute" in result.stderr


def test_json_round_trip_through_cli(tmp_path: Path) -> None:
    first = run_cli(["/var/lib", "--json"], tmp_path)
    assert json.loads(first.stdout) == "/var/lib"

    second = run_cli([first.stdout.strip(), "--from-json", "--dir"], tmp_path)
    assert second.returncode == 0
    assert second.stdout.splitlines() == ["/var/lib", "/var/lib/"]


def test_persisted_config_is_honoured(tmp_path: Path) -> None:
    config_dir = tmp_path / ".typedpaths"
    config_dir.mkdir()
    (config_dir / "config.json").write_text(json.dumps({"validate": False}), encoding="utf-8")

    result = run_cli(["relative"], tmp_path)

    assert result.returncode == 0
    assert "Expected" not in result.stderr
