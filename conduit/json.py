"""A small JSON value model with its own parser and serializer."""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional

__all__ = ["JsonType", "JsonValue", "parse_json", "serialize_json"]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_LONG_LONG_LIMIT = 2**63

_UNESCAPE = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_ESCAPE = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


class JsonType(Enum):
    """The kinds of value a JSON document can hold."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def _classify(value: Any) -> tuple[JsonType, Any]:
    if value is None:
        return JsonType.NULL, None
    if isinstance(value, JsonValue):
        return value.type, value.value
    if isinstance(value, bool):
        return JsonType.BOOLEAN, value
    if isinstance(value, (int, float)):
        return JsonType.NUMBER, float(value)
    if isinstance(value, str):
        return JsonType.STRING, value
    if isinstance(value, (list, tuple)):
        return JsonType.ARRAY, [_wrap(item) for item in value]
    if isinstance(value, Mapping):
        members = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"JSON object keys must be strings, not {type(key).__name__}")
            members[key] = _wrap(item)
        return JsonType.OBJECT, members
    raise TypeError(f"cannot represent {type(value).__name__} as JSON")


def _wrap(value: Any) -> "JsonValue":
    return value if isinstance(value, JsonValue) else JsonValue(value)


class JsonValue:
    """A JSON value: null, boolean, number, string, array or object.

    Numbers are held as floats. Arrays hold a list of ``JsonValue`` and
    objects a dict from string keys to ``JsonValue``; plain Python values
    given to the constructor are wrapped on the way in.
    """

    __slots__ = ("_type", "_value")

    def __init__(self, value: Any = None) -> None:
        self._type, self._value = _classify(value)

    @property
    def type(self) -> JsonType:
        return self._type

    @property
    def value(self) -> Any:
        """The held payload: None, bool, float, str, list or dict."""
        return self._value

    def is_null(self) -> bool:
        return self._type is JsonType.NULL

    def is_bool(self) -> bool:
        return self._type is JsonType.BOOLEAN

    def is_number(self) -> bool:
        return self._type is JsonType.NUMBER

    def is_string(self) -> bool:
        return self._type is JsonType.STRING

    def is_array(self) -> bool:
        return self._type is JsonType.ARRAY

    def is_object(self) -> bool:
        return self._type is JsonType.OBJECT

    def _member(self, key: str, kind: JsonType) -> Any:
        if self._type is not JsonType.OBJECT:
            return None
        member = self._value.get(key)
        if member is None or member.type is not kind:
            return None
        return member.value

    def get_int(self, key: str) -> Optional[int]:
        """The number under ``key`` truncated toward zero, or None."""
        number = self._member(key, JsonType.NUMBER)
        return None if number is None else int(number)

    def get_string(self, key: str) -> Optional[str]:
        return self._member(key, JsonType.STRING)

    def get_bool(self, key: str) -> Optional[bool]:
        return self._member(key, JsonType.BOOLEAN)

    def get_number(self, key: str) -> Optional[float]:
        return self._member(key, JsonType.NUMBER)

    def to_python(self) -> Any:
        """Convert to plain Python data, recursively."""
        if self._type is JsonType.ARRAY:
            return [item.to_python() for item in self._value]
        if self._type is JsonType.OBJECT:
            return {key: item.to_python() for key, item in self._value.items()}
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        return self._type is other._type and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"JsonValue({self.to_python()!r})"


class _ParseError(Exception):
    pass


class _Parser:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def parse(self) -> Optional[JsonValue]:
        self._skip_whitespace()
        if self._pos >= len(self._text):
            return None
        try:
            result = self._parse_value()
            self._skip_whitespace()
            if self._pos < len(self._text):
                raise _ParseError("unexpected characters after JSON value")
        except _ParseError:
            return None
        return result

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos] in _WHITESPACE:
            self._pos += 1

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else "\0"

    def _consume(self) -> str:
        if self._pos >= len(self._text):
            return "\0"
        char = self._text[self._pos]
        self._pos += 1
        return char

    def _expect(self, expected: str) -> None:
        if self._consume() != expected:
            raise _ParseError(f"expected {expected!r}")

    def _startswith(self, word: str) -> bool:
        return self._text.startswith(word, self._pos)

    def _parse_value(self) -> JsonValue:
        self._skip_whitespace()
        char = self._peek()
        if char == "n":
            return self._parse_literal("null", None)
        if char == "t":
            return self._parse_literal("true", True)
        if char == "f":
            return self._parse_literal("false", False)
        if char == '"':
            return JsonValue(self._parse_string())
        if char == "[":
            return self._parse_array()
        if char == "{":
            return self._parse_object()
        if char == "-" or char in _DIGITS:
            return self._parse_number()
        raise _ParseError("unexpected character in JSON")

    def _parse_literal(self, word: str, value: Any) -> JsonValue:
        if not self._startswith(word):
            raise _ParseError(f"expected {word!r}")
        self._pos += len(word)
        return JsonValue(value)

    def _parse_string(self) -> str:
        self._expect('"')
        parts = []
        while self._peek() not in ('"', "\0"):
            char = self._consume()
            if char == "\\":
                escaped = self._consume()
                parts.append(_UNESCAPE.get(escaped, escaped))
            else:
                parts.append(char)
        self._expect('"')
        return "".join(parts)

    def _digits(self) -> None:
        while self._peek() in _DIGITS:
            self._pos += 1

    def _parse_number(self) -> JsonValue:
        start = self._pos
        if self._peek() == "-":
            self._pos += 1

        if self._peek() == "0":
            self._pos += 1
        elif self._peek() in _DIGITS:
            self._digits()
        else:
            raise _ParseError("invalid number format")

        if self._peek() == ".":
            self._pos += 1
            if self._peek() not in _DIGITS:
                raise _ParseError("invalid number format")
            self._digits()

        if self._peek() in ("e", "E"):
            self._pos += 1
            if self._peek() in ("+", "-"):
                self._pos += 1
            if self._peek() not in _DIGITS:
                raise _ParseError("invalid number format")
            self._digits()

        number = float(self._text[start:self._pos])
        if math.isinf(number):
            raise _ParseError("number out of range")
        return JsonValue(number)

    def _parse_array(self) -> JsonValue:
        self._expect("[")
        self._skip_whitespace()
        items: list[JsonValue] = []
        if self._peek() == "]":
            self._pos += 1
            return JsonValue(items)
        while True:
            items.append(self._parse_value())
            self._skip_whitespace()
            char = self._peek()
            if char == "]":
                self._pos += 1
                return JsonValue(items)
            if char != ",":
                raise _ParseError("expected ',' or ']' in array")
            self._pos += 1
            self._skip_whitespace()

    def _parse_object(self) -> JsonValue:
        self._expect("{")
        self._skip_whitespace()
        members: dict[str, JsonValue] = {}
        if self._peek() == "}":
            self._pos += 1
            return JsonValue(members)
        while True:
            if self._peek() != '"':
                raise _ParseError("expected string key in object")
            key = self._parse_string()
            self._skip_whitespace()
            self._expect(":")
            self._skip_whitespace()
            members[key] = self._parse_value()
            self._skip_whitespace()
            char = self._peek()
            if char == "}":
                self._pos += 1
                return JsonValue(members)
            if char != ",":
                raise _ParseError("expected ',' or '}' in object")
            self._pos += 1
            self._skip_whitespace()


def parse_json(text: str) -> Optional[JsonValue]:
    """Parse a JSON document; return None if it is empty or malformed."""
    return _Parser(text).parse()


def _serialize_number(number: float) -> str:
    if math.isfinite(number) and number.is_integer() and abs(number) < _LONG_LONG_LIMIT:
        return str(int(number))
    return f"{number:f}"


def _serialize_string(text: str) -> str:
    return '"' + "".join(_ESCAPE.get(char, char) for char in text) + '"'


def serialize_json(value: JsonValue) -> str:
    """Render a value as compact JSON with object keys in sorted order."""
    kind = value.type
    if kind is JsonType.NULL:
        return "null"
    if kind is JsonType.BOOLEAN:
        return "true" if value.value else "false"
    if kind is JsonType.NUMBER:
        return _serialize_number(value.value)
    if kind is JsonType.STRING:
        return _serialize_string(value.value)
    if kind is JsonType.ARRAY:
        return "[" + ",".join(serialize_json(item) for item in value.value) + "]"
    members = value.value
    return (
        "{"
        + ",".join(
            _serialize_string(key) + ":" + serialize_json(members[key])
            for key in sorted(members)
        )
        + "}"
    )