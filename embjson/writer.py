"""JSON token writer, pretty-printing filter and the printable mixin."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .encoding import escape_char
from .printing import (
    CountingPrint,
    IndentedPrint,
    Print,
    StaticStringBuilder,
    StringBuilder,
    format_double,
)


class JsonWriter:
    """Writes JSON tokens to a sink and counts the characters stored."""

    def __init__(self, sink: Print) -> None:
        self._sink = sink
        self._length = 0

    def bytes_written(self) -> int:
        """Number of characters the sink accepted so far."""
        return self._length

    def _write(self, text: str) -> None:
        self._length += self._sink.print(text)

    def begin_array(self) -> None:
        self._write("[")

    def end_array(self) -> None:
        self._write("]")

    def begin_object(self) -> None:
        self._write("{")

    def end_object(self) -> None:
        self._write("}")

    def write_colon(self) -> None:
        self._write(":")

    def write_comma(self) -> None:
        self._write(",")

    def write_boolean(self, value: bool) -> None:
        self._write("true" if value else "false")

    def write_string(self, value: str | None) -> None:
        """Write a quoted, escaped string, or ``null`` for None."""
        if value is None:
            self._write("null")
            return
        self._write('"')
        for c in value:
            self.write_char(c)
        self._write('"')

    def write_char(self, c: str) -> None:
        special = escape_char(c)
        if special:
            self._write("\\" + special)
        else:
            self._write(c)

    def write_long(self, value: int) -> None:
        self._write("%d" % value)

    def write_double(self, value: float, decimals: int) -> None:
        self._write(format_double(value, decimals))

    def write_raw(self, text: str) -> None:
        self._write(text)


class Prettyfier(Print):
    """Reformats compact JSON into indented JSON on an IndentedPrint."""

    def __init__(self, sink: IndentedPrint) -> None:
        self._sink = sink
        self._previous_char = "\0"
        self._in_string = False

    def write(self, c: str) -> int:
        if self._in_string:
            n = self._handle_string_char(c)
        else:
            n = self._handle_markup_char(c)
        self._previous_char = c
        return n

    def _in_empty_block(self) -> bool:
        return self._previous_char in ("{", "[")

    def _handle_string_char(self, c: str) -> int:
        if c == '"' and self._previous_char != "\\":
            self._in_string = False
        return self._sink.write(c)

    def _handle_markup_char(self, c: str) -> int:
        if c in "{[":
            return self._indent_if_needed() + self._sink.write(c)
        if c in "}]":
            return self._unindent_if_needed() + self._sink.write(c)
        if c == ":":
            return self._sink.write(":") + self._sink.write(" ")
        if c == ",":
            return self._sink.write(",") + self._sink.println()
        if c == '"':
            self._in_string = True
            return self._indent_if_needed() + self._sink.write('"')
        return self._indent_if_needed() + self._sink.write(c)

    def _indent_if_needed(self) -> int:
        if not self._in_empty_block():
            return 0
        self._sink.indent()
        return self._sink.println()

    def _unindent_if_needed(self) -> int:
        if self._in_empty_block():
            return 0
        self._sink.unindent()
        return self._sink.println()


class JsonPrintable(ABC):
    """Mixin giving compact and pretty serialization to anything with write_to."""

    @abstractmethod
    def write_to(self, writer: JsonWriter) -> None:
        """Emit this value's JSON tokens through ``writer``."""

    def print_to(self, sink: Print) -> int:
        """Write compact JSON to ``sink``; return the characters stored."""
        writer = JsonWriter(sink)
        self.write_to(writer)
        return writer.bytes_written()

    def pretty_print_to(self, sink: Print) -> int:
        """Write indented JSON to ``sink``; return the characters stored."""
        if not isinstance(sink, IndentedPrint):
            sink = IndentedPrint(sink)
        return self.print_to(Prettyfier(sink))

    def to_string(self) -> str:
        sb = StringBuilder()
        self.print_to(sb)
        return str(sb)

    def to_pretty_string(self) -> str:
        sb = StringBuilder()
        self.pretty_print_to(sb)
        return str(sb)

    def print_to_buffer(self, capacity: int) -> str:
        """Compact JSON truncated to at most ``capacity`` characters."""
        sb = StaticStringBuilder(capacity)
        self.print_to(sb)
        return str(sb)

    def measure_length(self) -> int:
        return self.print_to(CountingPrint())

    def measure_pretty_length(self) -> int:
        return self.pretty_print_to(CountingPrint())

    def __str__(self) -> str:
        return self.to_string()