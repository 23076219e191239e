"""Character sinks used by the serializer, and number formatting helpers."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TextIO

_BIG_DOUBLE = 4294967040.0
_MAX_LEVEL = 15
_MAX_TAB_SIZE = 7


def format_double(value: float, digits: int) -> str:
    """Format a float the way a print sink does.

    NaN prints as ``nan`` and either infinity as ``inf``. Values whose
    magnitude exceeds what fits in 32 bits use ``%g``; others use a fixed
    number of decimals.
    """
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf"
    if value > _BIG_DOUBLE or value < -_BIG_DOUBLE:
        return "%g" % value
    return "%.*f" % (digits, value)


def format_fixed(value: float, digits: int) -> str:
    """Format a float with exactly ``digits`` decimals."""
    return "%.*f" % (digits, value)


class Print(ABC):
    """A sink that receives characters one at a time."""

    @abstractmethod
    def write(self, c: str) -> int:
        """Write one character and return how many characters were stored."""

    def print(self, text: str) -> int:
        """Write every character of ``text``; return the number stored."""
        return sum(self.write(c) for c in text)

    def println(self) -> int:
        """Write a CR LF line ending."""
        return self.write("\r") + self.write("\n")


class StringBuilder(Print):
    """Accumulates everything written into a growing string."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def write(self, c: str) -> int:
        self._parts.append(c)
        return 1

    def __str__(self) -> str:
        return "".join(self._parts)


class StaticStringBuilder(Print):
    """Accumulates at most ``capacity`` characters; extra ones are dropped."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._chars: list[str] = []

    def write(self, c: str) -> int:
        if len(self._chars) >= self.capacity:
            return 0
        self._chars.append(c)
        return 1

    def __str__(self) -> str:
        return "".join(self._chars)


class CountingPrint(Print):
    """Discards every character while reporting it as written."""

    def write(self, c: str) -> int:
        return 1


class StreamPrintAdapter(Print):
    """Forwards characters to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def write(self, c: str) -> int:
        self.stream.write(c)
        return 1


class IndentedPrint(Print):
    """Decorates another sink, indenting every line with spaces."""

    def __init__(self, sink: Print) -> None:
        self.sink = sink
        self.level = 0
        self.tab_size = 2
        self._is_new_line = True

    def write(self, c: str) -> int:
        n = 0
        if self._is_new_line:
            n += self.sink.print(" " * (self.level * self.tab_size))
        n += self.sink.write(c)
        self._is_new_line = c == "\n"
        return n

    def indent(self) -> None:
        """Add one level of indentation, up to fifteen levels."""
        if self.level < _MAX_LEVEL:
            self.level += 1

    def unindent(self) -> None:
        """Remove one level of indentation."""
        if self.level > 0:
            self.level -= 1

    def set_tab_size(self, n: int) -> None:
        """Set the number of spaces per level; values of seven or more are ignored."""
        if n < _MAX_TAB_SIZE:
            self.tab_size = n & _MAX_TAB_SIZE