from __future__ import annotations

"""
Unit tests for the separator normalization helper.
"""

import pytest

from typedpaths.utils.text import PATH_SEPARATOR, ensure_ends_in_slash


@pytest.mark.parametrize("path, expected", [
    ("/home/user", "/home/user/"),
    ("/home/user/", "/home/user/"),
    ("/", "/"),
    ("", "/"),
    ("relative", "relative/"),
])
def test_ensure_ends_in_slash(path: str, expected: str) -> None:
    assert ensure_ends_in_slash(path) == expected


def test_ensure_ends_in_slash_is_idempotent() -> None:
    once = ensure_ends_in_slash("/var/log")
    assert ensure_ends_in_slash(once) == once


def test_ensure_ends_in_slash_custom_separator() -> None:
    assert ensure_ends_in_slash("C:\\data", "\\") == "C:\\data\\"
    assert ensure_ends_in_slash("C:\\data\\", "\\") == "C:\\data\\"


def test_default_separator_is_forward_slash() -> None:
    assert PATH_SEPARATOR == "/"


def test_ensure_ends_in_slash_multi_character_separator_is_idempotent() -> None:
    once = ensure_ends_in_slash("/x", "::")

    assert once == "/x::"
    assert ensure_ends_in_slash(once, "::") == once
