"""Escape tables for JSON strings and skipping of whitespace and comments."""

from __future__ import annotations

# Pairs of (escape letter, character it stands for).
_ESCAPES = (
    ('"', '"'),
    ("\\", "\\"),
    ("b", "\b"),
    ("f", "\f"),
    ("n", "\n"),
    ("r", "\r"),
    ("t", "\t"),
)

_ESCAPE_OF = {char: letter for letter, char in _ESCAPES}
# Unescaping only covers the control-character letters; any other
# character after a backslash stands for itself.
_UNESCAPE_OF = {letter: char for letter, char in _ESCAPES[2:]}

_SPACES = frozenset(" \t\r\n")


def escape_char(c: str) -> str | None:
    """Return the letter to put after a backslash for ``c``, or None."""
    return _ESCAPE_OF.get(c)


def unescape_char(c: str) -> str:
    """Return the character that ``\\c`` stands for."""
    return _UNESCAPE_OF.get(c, c)


def _char_at(text: str, pos: int) -> str:
    return text[pos] if pos < len(text) else "\0"


def _skip_c_comment(text: str, pos: int) -> int:
    pos += 2
    while True:
        c = _char_at(text, pos)
        if c == "\0":
            return min(pos, len(text))
        if c == "*" and _char_at(text, pos + 1) == "/":
            return pos + 2
        pos += 1


def _skip_cpp_comment(text: str, pos: int) -> int:
    pos += 2
    while True:
        c = _char_at(text, pos)
        if c in ("\0", "\n"):
            return min(pos, len(text))
        pos += 1


def skip_spaces_and_comments(text: str, pos: int) -> int:
    """Return the first position at or after ``pos`` that is not blank or a comment."""
    while True:
        c = _char_at(text, pos)
        if c in _SPACES:
            pos += 1
        elif c == "/":
            following = _char_at(text, pos + 1)
            if following == "*":
                pos = _skip_c_comment(text, pos)
            elif following == "/":
                pos = _skip_cpp_comment(text, pos)
            else:
                return pos
        else:
            return min(pos, len(text))