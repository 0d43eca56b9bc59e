from __future__ import annotations

"""
Serialization Cursors.

Defines the reader/writer cursor interfaces consumed by the value types and
a JSON-backed implementation of both. A writer accumulates string tokens; a
reader hands them back in order. A document holding a single token is
encoded as a bare JSON string, several tokens as a JSON array.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, List

from typedpaths.domain.errors import SerializationError

# -----------------------------------------------------------------------------
# CURSOR INTERFACES
# -----------------------------------------------------------------------------

class Reader(ABC):
    """Deserialization cursor positioned at the next token."""

    @abstractmethod
    def get_string(self) -> str:
        """
        Consume the next token as a string.

        Raises:
            SerializationError: If the next token is missing or not a string.
        """
        pass


class Writer(ABC):
    """Serialization cursor appending tokens to an output stream."""

    @abstractmethod
    def write_string(self, text: str, length: int) -> None:
        """
        Emit the first `length` characters of `text` as a string token.
        """
        pass


# -----------------------------------------------------------------------------
# JSON IMPLEMENTATION
# -----------------------------------------------------------------------------

class JsonWriter(Writer):
    """Collect string tokens and render them as a JSON document."""

    def __init__(self) -> None:
        self.tokens: List[str] = []

    def write_string(self, text: str, length: int) -> None:
        self.tokens.append(text[:length])

    def getvalue(self) -> str:
        if len(self.tokens) == 1:
            return json.dumps(self.tokens[0], ensure_ascii=False)
        return json.dumps(self.tokens, ensure_ascii=False)


class JsonReader(Reader):
    """Walk the string tokens of a JSON document produced by JsonWriter."""

    def __init__(self, document: str) -> None:
        try:
            data: Any = json.loads(document)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Invalid JSON document: {e}") from e

        if isinstance(data, list):
            self._tokens = list(data)
        else:
            self._tokens = [data]
        self._pos = 0

    @property
    def remaining(self) -> int:
        return len(self._tokens) - self._pos

    def get_string(self) -> str:
        if self._pos >= len(self._tokens):
            raise SerializationError("Unexpected end of token stream")

        token = self._tokens[self._pos]
        if not isinstance(token, str):
            raise SerializationError(
                f"Expected string token at position {self._pos}, got {type(token).__name__}"
            )
        self._pos += 1
        return token


# -----------------------------------------------------------------------------
# FACADE API
# -----------------------------------------------------------------------------

def dumps(*values: Any) -> str:
    """
    Serialize one or more values exposing `write(writer)` into JSON text.
    """
    writer = JsonWriter()
    for value in values:
        value.write(writer)
    return writer.getvalue()


def loads(document: str, value_type: Any) -> Any:
    """
    Deserialize a single value of `value_type` (which must expose a
    `read(reader)` classmethod) from JSON text.
    """
    return value_type.read(JsonReader(document))
