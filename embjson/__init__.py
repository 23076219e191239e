"""A small JSON library with bounded buffers, a lenient parser and compact or pretty printing."""

__version__ = "0.1.0"

__all__ = ["array", "buffer", "encoding", "jsonobject", "parser", "printing", "variant", "writer"]