"""Core pieces of a small scripting language: byte buffers, codecs, classes, option parsing and file helpers."""

__version__ = "0.1.0"

__all__ = [
    "buffer",
    "bytesobj",
    "classes",
    "cli",
    "codec",
    "fileio",
]