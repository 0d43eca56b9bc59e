from __future__ import annotations

"""
Unit tests for settings persistence.

Verifies default fallback on missing or corrupt files, merging of known
keys, separator sanitizing and the save/load cycle.
"""

import json
from pathlib import Path
from typing import Any, Dict

from typedpaths.domain.config import get_default_config, load_config, save_config


def test_defaults(mock_config_dict: Dict[str, Any]) -> None:
    assert get_default_config() == mock_config_dict


def test_missing_file_returns_defaults(tmp_path: Path) -> None:
    assert load_config(str(tmp_path / "absent.json")) == get_default_config()


def test_corrupt_file_returns_defaults(tmp_path: Path) -> None:
    target = tmp_path / "config.json"
    target.write_text("{broken", encoding="utf-8")

    assert load_config(str(target)) == get_default_config()


def test_non_dict_file_returns_defaults(tmp_path: Path) -> None:
    target = tmp_path / "config.json"
    target.write_text("[1, 2]", encoding="utf-8")

    assert load_config(str(target)) == get_default_config()


def test_known_keys_are_merged_and_unknown_ignored(tmp_path: Path) -> None:
    target = tmp_path / "config.json"
    target.write_text(json.dumps({"validate": False, "bogus": 1}), encoding="utf-8")

    config = load_config(str(target))

    assert config["validate"] is False
    assert config["separator"] == "/"
    assert "bogus" not in config


def test_invalid_separator_falls_back(tmp_path: Path) -> None:
    target = tmp_path / "config.json"
    target.write_text(json.dumps({"separator": "::"}), encoding="utf-8")

    assert load_config(str(target))["separator"] == "/"


def test_save_then_load(tmp_path: Path, mock_config_dict: Dict[str, Any]) -> None:
    target = tmp_path / "nested" / "config.json"
    mock_config_dict["separator"] = "\\"
    mock_config_dict["log_level"] = "DEBUG"

    assert save_config(mock_config_dict, str(target)) is True
    assert load_config(str(target)) == mock_config_dict


def test_string_validate_flag_falls_back_to_default(tmp_path: Path) -> None:
    """A quoted "false" must not be read as a truthy value."""
    target = tmp_path / "config.json"
    target.write_text(json.dumps({"validate": "false"}), encoding="utf-8")

    assert load_config(str(target))["validate"] is True


def test_wrongly_typed_logging_settings_fall_back(tmp_path: Path) -> None:
    target = tmp_path / "config.json"
    target.write_text(json.dumps({"log_level": 10, "log_file": ["a.log"]}), encoding="utf-8")

    config = load_config(str(target))

    assert config["log_level"] == "INFO"
    assert config["log_file"] is None


def test_well_typed_logging_settings_are_kept(tmp_path: Path) -> None:
    target = tmp_path / "config.json"
    log_file = str(tmp_path / "out.log")
    target.write_text(json.dumps({"log_level": "DEBUG", "log_file": log_file}), encoding="utf-8")

    config = load_config(str(target))

    assert config["log_level"] == "DEBUG"
    assert config["log_file"] == log_file
