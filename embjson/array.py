"""An ordered list of JSON values whose storage is accounted to a buffer."""

from __future__ import annotations

from typing import Any, Iterator

from .variant import JsonVariant, invalid_value
from .writer import JsonPrintable, JsonWriter


class JsonArray(JsonPrintable):
    """An array of JsonVariant values.

    Instances are meant to come from a JSON buffer's ``create_array`` or
    ``parse_array``. Every element added charges one node to the buffer;
    when the buffer refuses, the element is not added. An array without a
    buffer is the invalid array: it never grows and reports no success.
    Two arrays are equal only when they are the same instance.
    """

    SIZE = 16
    """Bytes charged to a buffer for the array itself."""

    NODE_SIZE = 24
    """Bytes charged to a buffer for each element."""

    _invalid: JsonArray

    def __init__(self, buffer: Any) -> None:
        self._buffer = buffer
        self._items: list[JsonVariant] = []

    def __repr__(self) -> str:
        if not self.success():
            return "JsonArray.invalid()"
        return f"JsonArray({self.to_string()})"

    @classmethod
    def invalid(cls) -> JsonArray:
        """The shared array that stands in for a failed allocation or parse."""
        return cls._invalid

    def success(self) -> bool:
        """True unless this is the invalid array."""
        return self._buffer is not None

    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[JsonVariant]:
        return iter(self._items)

    def _allocate_node(self) -> bool:
        return self._buffer is not None and self._buffer.alloc(self.NODE_SIZE) is not None

    def _node_at(self, index: int) -> JsonVariant | None:
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def add(self, value: Any, decimals: int = 2) -> bool:
        """Append ``value``; return False when the buffer has no room."""
        variant = JsonVariant(value, decimals)
        if not self._allocate_node():
            return False
        self._items.append(variant)
        return True

    def set(self, index: int, value: Any, decimals: int = 2) -> None:
        """Replace the element at ``index``; out-of-range indexes are ignored."""
        if self._node_at(index) is None:
            return
        self._items[index] = JsonVariant(value, decimals)

    def get(self, index: int) -> JsonVariant:
        """The element at ``index``, or an undefined variant."""
        node = self._node_at(index)
        return node if node is not None else JsonVariant()

    def get_as(self, index: int, kind: Any) -> Any:
        """The element at ``index`` converted to ``kind``."""
        node = self._node_at(index)
        return node.as_(kind) if node is not None else invalid_value(kind)

    def is_(self, index: int, kind: Any) -> bool:
        """Tell whether the element at ``index`` exists and is of ``kind``."""
        node = self._node_at(index)
        return node.is_(kind) if node is not None else False

    def __getitem__(self, index: int) -> JsonVariant:
        return self.get(index)

    def __setitem__(self, index: int, value: Any) -> None:
        self.set(index, value)

    def create_nested_array(self) -> JsonArray:
        """Create an array in the same buffer and append it."""
        if self._buffer is None:
            return JsonArray.invalid()
        array = self._buffer.create_array()
        self.add(array)
        return array

    def create_nested_object(self) -> Any:
        """Create an object in the same buffer and append it."""
        if self._buffer is None:
            from .jsonobject import JsonObject

            return JsonObject.invalid()
        obj = self._buffer.create_object()
        self.add(obj)
        return obj

    def remove_at(self, index: int) -> None:
        """Remove the element at ``index``; out-of-range indexes are ignored."""
        if self._node_at(index) is not None:
            del self._items[index]

    def write_to(self, writer: JsonWriter) -> None:
        writer.begin_array()
        for position, item in enumerate(self._items):
            if position:
                writer.write_comma()
            item.write_to(writer)
        writer.end_array()


JsonArray._invalid = JsonArray(None)