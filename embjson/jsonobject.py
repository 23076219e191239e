"""An ordered collection of key/value pairs whose storage is accounted to a buffer."""

from __future__ import annotations

from typing import Any, Iterator

from .array import JsonArray
from .variant import JsonVariant, invalid_value
from .writer import JsonPrintable, JsonWriter


class JsonPair:
    """One entry of a JsonObject: a string key and its value."""

    __slots__ = ("key", "_value")

    def __init__(self, key: str, value: Any) -> None:
        self.key = key
        self.value = value

    @property
    def value(self) -> JsonVariant:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._value = JsonVariant(value)

    def __repr__(self) -> str:
        return f"JsonPair({self.key!r}, {self._value!r})"


class JsonObject(JsonPrintable):
    """A map from string keys to JsonVariant values, kept in insertion order.

    Instances are meant to come from a JSON buffer's ``create_object`` or
    ``parse_object``. Each new key charges one node to the buffer; when the
    buffer refuses, the key is not added. An object without a buffer is the
    invalid object. Two objects are equal only when they are the same instance.
    """

    SIZE = 16
    """Bytes charged to a buffer for the object itself."""

    NODE_SIZE = 32
    """Bytes charged to a buffer for each key/value pair."""

    _invalid: JsonObject

    def __init__(self, buffer: Any) -> None:
        self._buffer = buffer
        self._pairs: list[JsonPair] = []

    def __repr__(self) -> str:
        if not self.success():
            return "JsonObject.invalid()"
        return f"JsonObject({self.to_string()})"

    @classmethod
    def invalid(cls) -> JsonObject:
        """The shared object that stands in for a failed allocation or parse."""
        return cls._invalid

    def success(self) -> bool:
        """True unless this is the invalid object."""
        return self._buffer is not None

    def size(self) -> int:
        return len(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[JsonPair]:
        return iter(self._pairs)

    def _node_at(self, key: str) -> JsonPair | None:
        return next((pair for pair in self._pairs if pair.key == key), None)

    def _get_or_create_node(self, key: str) -> JsonPair | None:
        node = self._node_at(key)
        if node is not None:
            return node
        if self._buffer is None or self._buffer.alloc(self.NODE_SIZE) is None:
            return None
        node = JsonPair(key, JsonVariant())
        self._pairs.append(node)
        return node

    def set(self, key: str, value: Any, decimals: int = 2) -> bool:
        """Store ``value`` under ``key``; return False when the buffer has no room."""
        variant = JsonVariant(value, decimals)
        node = self._get_or_create_node(key)
        if node is None:
            return False
        node.key = key
        node.value = variant
        return True

    def get(self, key: str) -> JsonVariant:
        """The value stored under ``key``, or an undefined variant."""
        node = self._node_at(key)
        return node.value if node is not None else JsonVariant()

    def get_as(self, key: str, kind: Any) -> Any:
        """The value stored under ``key`` converted to ``kind``."""
        node = self._node_at(key)
        return node.value.as_(kind) if node is not None else invalid_value(kind)

    def is_(self, key: str, kind: Any) -> bool:
        """Tell whether ``key`` exists and its value is of ``kind``."""
        node = self._node_at(key)
        return node.value.is_(kind) if node is not None else False

    def contains_key(self, key: str) -> bool:
        return self._node_at(key) is not None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains_key(key)

    def __getitem__(self, key: str) -> JsonVariant:
        return self.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def remove(self, key: str) -> None:
        """Remove ``key``; a missing key is ignored."""
        node = self._node_at(key)
        if node is not None:
            self._pairs.remove(node)

    def create_nested_array(self, key: str) -> JsonArray:
        """Create an array in the same buffer and store it under ``key``."""
        if self._buffer is None:
            return JsonArray.invalid()
        array = self._buffer.create_array()
        self.set(key, array)
        return array

    def create_nested_object(self, key: str) -> JsonObject:
        """Create an object in the same buffer and store it under ``key``."""
        if self._buffer is None:
            return JsonObject.invalid()
        obj = self._buffer.create_object()
        self.set(key, obj)
        return obj

    def write_to(self, writer: JsonWriter) -> None:
        writer.begin_object()
        for position, pair in enumerate(self._pairs):
            if position:
                writer.write_comma()
            writer.write_string(pair.key)
            writer.write_colon()
            pair.value.write_to(writer)
        writer.end_object()


JsonObject._invalid = JsonObject(None)