"""A lenient JSON parser that builds arrays and objects inside a buffer."""

from __future__ import annotations

from typing import Any

from .array import JsonArray
from .encoding import skip_spaces_and_comments, unescape_char
from .jsonobject import JsonObject
from .variant import JsonVariant, Unparsed

_QUOTES = ("'", '"')


def _is_letter_or_number(c: str) -> bool:
    return (
        "0" <= c <= "9"
        or "a" <= c <= "z"
        or "A" <= c <= "Z"
        or c in ("-", ".")
    )


class JsonParser:
    """Parses one JSON document.

    Strings may use single or double quotes, or none at all; unquoted
    tokens (numbers, ``true``, ``null``...) are kept as raw text. C and C++
    style comments are skipped. Failures yield the invalid array or object.
    """

    def __init__(self, buffer: Any, json: str | None, nesting_limit: int = 10) -> None:
        self._buffer = buffer
        self._text = json if json is not None else ""
        self._pos = 0
        self._nesting_limit = nesting_limit

    def _char_at(self, pos: int) -> str:
        return self._text[pos] if pos < len(self._text) else "\0"

    def _skip(self, char: str) -> bool:
        pos = skip_spaces_and_comments(self._text, self._pos)
        if self._char_at(pos) != char:
            return False
        self._pos = skip_spaces_and_comments(self._text, pos + 1)
        return True

    def _parse_value(self) -> JsonVariant | None:
        if self._nesting_limit == 0:
            return None
        self._nesting_limit -= 1
        try:
            return self._parse_value_unchecked()
        finally:
            self._nesting_limit += 1

    def _parse_value_unchecked(self) -> JsonVariant | None:
        self._pos = skip_spaces_and_comments(self._text, self._pos)
        c = self._char_at(self._pos)
        if c == "[":
            array = self.parse_array()
            return JsonVariant(array) if array.success() else None
        if c == "{":
            obj = self.parse_object()
            return JsonVariant(obj) if obj.success() else None
        has_quotes = c in _QUOTES
        text = self._parse_string()
        return JsonVariant(text) if has_quotes else JsonVariant(Unparsed(text))

    def _parse_string(self) -> str:
        pos = self._pos
        chars: list[str] = []
        c = self._char_at(pos)
        if c in _QUOTES:
            stop = c
            while True:
                pos += 1
                c = self._char_at(pos)
                if c == "\0":
                    break
                if c == stop:
                    pos += 1
                    break
                if c == "\\":
                    pos += 1
                    c = unescape_char(self._char_at(pos))
                    if c == "\0":
                        break
                chars.append(c)
        else:
            while _is_letter_or_number(c):
                chars.append(c)
                pos += 1
                c = self._char_at(pos)
        self._pos = min(pos, len(self._text))
        return "".join(chars)

    def parse_array(self) -> JsonArray:
        """Parse an array at the current position, or return the invalid array."""
        array = self._buffer.create_array()
        if not self._skip("["):
            return JsonArray.invalid()
        if self._skip("]"):
            return array
        while True:
            value = self._parse_value()
            if value is None or not array.add(value):
                return JsonArray.invalid()
            if self._skip("]"):
                return array
            if not self._skip(","):
                return JsonArray.invalid()

    def parse_object(self) -> JsonObject:
        """Parse an object at the current position, or return the invalid object."""
        obj = self._buffer.create_object()
        if not self._skip("{"):
            return JsonObject.invalid()
        if self._skip("}"):
            return obj
        while True:
            key = self._parse_string()
            if not self._skip(":"):
                return JsonObject.invalid()
            value = self._parse_value()
            if value is None or not obj.set(key, value):
                return JsonObject.invalid()
            if self._skip("}"):
                return obj
            if not self._skip(","):
                return JsonObject.invalid()