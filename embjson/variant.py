"""A tagged value holding any JSON value, with lenient typed accessors."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from .writer import JsonPrintable, JsonWriter

LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)

_LONG_PREFIX = re.compile(r"\s*([+-]?\d+)")
_DOUBLE_PREFIX = re.compile(
    r"\s*([+-]?(?:infinity|inf|nan|\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?))",
    re.IGNORECASE,
)
_INTEGER = re.compile(r"-?\d+")
_FLOAT = re.compile(r"-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class Unparsed:
    """Raw text taken verbatim from JSON input, converted only on demand."""

    text: str | None


class _Type(Enum):
    UNDEFINED = auto()
    UNPARSED = auto()
    STRING = auto()
    BOOLEAN = auto()
    LONG = auto()
    DOUBLE = auto()
    ARRAY = auto()
    OBJECT = auto()


_UNDEFINED: Any = object()


def _container_types() -> tuple[type, type]:
    from .array import JsonArray
    from .jsonobject import JsonObject

    return JsonArray, JsonObject


def _clamp_long(value: int) -> int:
    return max(LONG_MIN, min(LONG_MAX, value))


def _parse_long(text: str) -> int:
    match = _LONG_PREFIX.match(text)
    if not match:
        return 0
    return _clamp_long(int(match.group(1)))


def _parse_double(text: str) -> float:
    match = _DOUBLE_PREFIX.match(text)
    if not match:
        return 0.0
    return float(match.group(1))


def _is_long_text(text: str) -> bool:
    return bool(_INTEGER.fullmatch(text)) and LONG_MIN <= int(text) <= LONG_MAX


def _is_double_text(text: str) -> bool:
    return bool(_FLOAT.fullmatch(text)) and not _INTEGER.fullmatch(text)


def invalid_value(kind: Any) -> Any:
    """The value returned when a lookup of ``kind`` finds nothing."""
    if kind is bool:
        return False
    if kind is int:
        return 0
    if kind is float:
        return 0.0
    if kind is str:
        return None
    if isinstance(kind, type) and hasattr(kind, "invalid"):
        return kind.invalid()
    raise TypeError(f"unsupported kind: {kind!r}")


class JsonVariant(JsonPrintable):
    """Holds a boolean, integer, float, string, array, object or raw text.

    A variant built without a value is undefined. Typed accessors never
    fail: they convert when they can and fall back to a neutral value.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Any = _UNDEFINED, decimals: int = 2) -> None:
        self.decimals = decimals
        if value is _UNDEFINED:
            self._type, self._value = _Type.UNDEFINED, None
        elif isinstance(value, JsonVariant):
            self._type, self._value = value._type, value._value
            self.decimals = value.decimals
        elif isinstance(value, Unparsed):
            self._type, self._value = _Type.UNPARSED, value.text
        elif value is None or isinstance(value, str):
            self._type, self._value = _Type.STRING, value
        elif isinstance(value, bool):
            self._type, self._value = _Type.BOOLEAN, value
        elif isinstance(value, int):
            self._type, self._value = _Type.LONG, value
        elif isinstance(value, float):
            self._type, self._value = _Type.DOUBLE, value
        else:
            array_type, object_type = _container_types()
            if isinstance(value, array_type):
                self._type = _Type.ARRAY
            elif isinstance(value, object_type):
                self._type = _Type.OBJECT
            else:
                raise TypeError(f"cannot store {type(value).__name__} in a JsonVariant")
            self._value = value

    def __repr__(self) -> str:
        return f"JsonVariant({self._type.name.lower()}, {self._value!r})"

    # Conversions

    def _as_long(self) -> int:
        if self._type in (_Type.LONG, _Type.BOOLEAN):
            return int(self._value)
        if self._type is _Type.DOUBLE:
            if math.isnan(self._value):
                return 0
            if math.isinf(self._value):
                return LONG_MAX if self._value > 0 else LONG_MIN
            return _clamp_long(int(self._value))
        if self._type in (_Type.STRING, _Type.UNPARSED) and self._value is not None:
            if self._value == "true":
                return 1
            return _parse_long(self._value)
        return 0

    def _as_double(self) -> float:
        if self._type is _Type.DOUBLE:
            return self._value
        if self._type in (_Type.LONG, _Type.BOOLEAN):
            return float(self._value)
        if self._type in (_Type.STRING, _Type.UNPARSED) and self._value is not None:
            return _parse_double(self._value)
        return 0.0

    def _as_bool(self) -> bool:
        if self._type is _Type.BOOLEAN:
            return self._value
        if self._type in (_Type.LONG, _Type.DOUBLE):
            return self._value != 0
        if self._type in (_Type.STRING, _Type.UNPARSED):
            return self._value == "true"
        return False

    def _as_str(self) -> str | None:
        if self._type is _Type.STRING:
            return self._value
        if self._type is _Type.UNPARSED and self._value != "null":
            return self._value
        return None

    def as_(self, kind: Any) -> Any:
        """Return the value converted to ``kind`` (bool, int, float, str or a container class)."""
        if kind is bool:
            return self._as_bool()
        if kind is int:
            return self._as_long()
        if kind is float:
            return self._as_double()
        if kind is str:
            return self._as_str()
        if isinstance(kind, type) and hasattr(kind, "invalid"):
            if self._type in (_Type.ARRAY, _Type.OBJECT) and isinstance(self._value, kind):
                return self._value
            return kind.invalid()
        raise TypeError(f"unsupported kind: {kind!r}")

    def is_(self, kind: Any) -> bool:
        """Tell whether the stored value is of ``kind``."""
        raw = self._type is _Type.UNPARSED and self._value is not None
        if kind is bool:
            return self._type is _Type.BOOLEAN or (raw and self._value in ("true", "false"))
        if kind is int:
            return self._type is _Type.LONG or (raw and _is_long_text(self._value))
        if kind is float:
            return self._type is _Type.DOUBLE or (raw and _is_double_text(self._value))
        if kind is str:
            return self._type is _Type.STRING
        if isinstance(kind, type):
            return self._type in (_Type.ARRAY, _Type.OBJECT) and isinstance(self._value, kind)
        return False

    def as_string(self) -> str | None:
        return self.as_(str)

    def as_array(self) -> Any:
        """The stored array, or the invalid array."""
        array_type, _ = _container_types()
        return self.as_(array_type)

    def as_object(self) -> Any:
        """The stored object, or the invalid object."""
        _, object_type = _container_types()
        return self.as_(object_type)

    def success(self) -> bool:
        """False when the variant holds nothing."""
        return self._type is not _Type.UNDEFINED

    def size(self) -> int:
        """Element count of a held array or object, otherwise 0."""
        return self.as_array().size() + self.as_object().size()

    def __getitem__(self, key: int | str) -> Any:
        if isinstance(key, int):
            return self.as_array()[key]
        return self.as_object()[key]

    def __bool__(self) -> bool:
        return self._as_bool()

    # Comparisons convert the variant to the type of the other operand.

    def _converted_for(self, other: Any) -> Any:
        kind = type(other)
        if other is None:
            kind = str
        return self.as_(kind)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, JsonVariant):
            if self._type in (_Type.ARRAY, _Type.OBJECT):
                return other._type is self._type and other._value is self._value
            return other._type is self._type and other._value == self._value
        try:
            mine = self._converted_for(other)
        except TypeError:
            return NotImplemented
        if isinstance(other, (bool, int, float, str)) or other is None:
            return mine == other
        return mine is other

    def _ordered(self, other: Any) -> Any:
        if isinstance(other, JsonVariant) or not isinstance(other, (int, float, str)):
            return NotImplemented
        return self.as_(type(other))

    def __lt__(self, other: Any) -> bool:
        mine = self._ordered(other)
        return mine if mine is NotImplemented else mine < other

    def __le__(self, other: Any) -> bool:
        mine = self._ordered(other)
        return mine if mine is NotImplemented else mine <= other

    def __gt__(self, other: Any) -> bool:
        mine = self._ordered(other)
        return mine if mine is NotImplemented else mine > other

    def __ge__(self, other: Any) -> bool:
        mine = self._ordered(other)
        return mine if mine is NotImplemented else mine >= other

    def write_to(self, writer: JsonWriter) -> None:
        """Emit the stored value as JSON; an undefined variant emits nothing."""
        if self._type in (_Type.ARRAY, _Type.OBJECT):
            self._value.write_to(writer)
        elif self._type is _Type.STRING:
            writer.write_string(self._value)
        elif self._type is _Type.UNPARSED:
            if self._value is not None:
                writer.write_raw(self._value)
        elif self._type is _Type.DOUBLE:
            writer.write_double(self._value, self.decimals)
        elif self._type is _Type.LONG:
            writer.write_long(self._value)
        elif self._type is _Type.BOOLEAN:
            writer.write_boolean(self._value)