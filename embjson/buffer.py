"""Buffers that account for the memory of arrays and objects, and create them."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .array import JsonArray
from .jsonobject import JsonObject
from .parser import JsonParser

_ALIGNMENT = 8
DEFAULT_NESTING_LIMIT = 10


def _round_size_up(nbytes: int) -> int:
    return (nbytes + _ALIGNMENT - 1) // _ALIGNMENT * _ALIGNMENT


def json_array_size(count: int) -> int:
    """Bytes a buffer needs for an array of ``count`` elements."""
    return JsonArray.SIZE + count * JsonArray.NODE_SIZE


def json_object_size(count: int) -> int:
    """Bytes a buffer needs for an object of ``count`` pairs."""
    return JsonObject.SIZE + count * JsonObject.NODE_SIZE


class JsonBuffer(ABC):
    """Hands out arrays and objects, charging their size to ``alloc``."""

    @abstractmethod
    def alloc(self, nbytes: int) -> int | None:
        """Reserve ``nbytes``; return the offset reserved, or None when full."""

    def create_array(self) -> JsonArray:
        """A new empty array, or the invalid array when there is no room."""
        if self.alloc(JsonArray.SIZE) is None:
            return JsonArray.invalid()
        return JsonArray(self)

    def create_object(self) -> JsonObject:
        """A new empty object, or the invalid object when there is no room."""
        if self.alloc(JsonObject.SIZE) is None:
            return JsonObject.invalid()
        return JsonObject(self)

    def parse_array(self, json: str | None, nesting_limit: int = DEFAULT_NESTING_LIMIT) -> JsonArray:
        """Parse ``json`` as an array; the invalid array on failure."""
        if json is None:
            return JsonArray.invalid()
        return JsonParser(self, json, nesting_limit).parse_array()

    def parse_object(self, json: str | None, nesting_limit: int = DEFAULT_NESTING_LIMIT) -> JsonObject:
        """Parse ``json`` as an object; the invalid object on failure."""
        if json is None:
            return JsonObject.invalid()
        return JsonParser(self, json, nesting_limit).parse_object()


class DynamicJsonBuffer(JsonBuffer):
    """A buffer without a size limit."""

    def __init__(self) -> None:
        self._size = 0

    def size(self) -> int:
        return self._size

    def alloc(self, nbytes: int) -> int | None:
        offset = self._size
        self._size += _round_size_up(nbytes)
        return offset


class StaticJsonBuffer(JsonBuffer):
    """A buffer with a fixed capacity in bytes."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._size = 0

    def capacity(self) -> int:
        return self._capacity

    def size(self) -> int:
        return self._size

    def alloc(self, nbytes: int) -> int | None:
        if self._size + nbytes > self._capacity:
            return None
        offset = self._size
        self._size += _round_size_up(nbytes)
        return offset