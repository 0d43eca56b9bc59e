from __future__ import annotations

"""
Unit tests for the error hierarchy and diagnostic records.
"""

import dataclasses

import pytest

from typedpaths.domain.errors import InvalidAbsolutePath, SerializationError, TypedPathsError


def test_serialization_error_is_package_error() -> None:
    assert issubclass(SerializationError, TypedPathsError)
    assert issubclass(TypedPathsError, Exception)


def test_invalid_absolute_path_message() -> None:
    record = InvalidAbsolutePath(path="a/b", stack="trace")

    assert record.message == "Expected a/b to be absolute"
    assert str(record) == record.message
    assert record.stack == "trace"


def test_invalid_absolute_path_is_frozen() -> None:
    record = InvalidAbsolutePath(path="a")

    with pytest.raises(dataclasses.FrozenInstanceError):
        record.path = "b"  # type: ignore[misc]
