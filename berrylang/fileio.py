"""File-system helpers used by the interpreter's ``os`` facilities."""

from __future__ import annotations

import os
from typing import IO

__all__ = [
    "is_dir",
    "is_file",
    "exists",
    "get_cwd",
    "change_dir",
    "make_dir",
    "remove_file",
    "list_dir",
    "file_size",
]

# rwxrwxr-x, the permission set given to newly created directories.
DIRECTORY_MODE = 0o775


def is_dir(path: str | os.PathLike) -> bool:
    """Return True if *path* names an existing directory."""
    try:
        return os.path.isdir(path)
    except (OSError, ValueError):
        return False


def is_file(path: str | os.PathLike) -> bool:
    """Return True if *path* exists and is not a directory."""
    try:
        return os.path.exists(path) and not os.path.isdir(path)
    except (OSError, ValueError):
        return False


def exists(path: str | os.PathLike) -> bool:
    """Return True if *path* exists at all."""
    try:
        return os.path.exists(path)
    except (OSError, ValueError):
        return False


def get_cwd() -> str:
    """Return the current working directory."""
    return os.getcwd()


def change_dir(path: str | os.PathLike) -> None:
    """Change the current working directory; raises OSError on failure."""
    os.chdir(path)


def make_dir(path: str | os.PathLike) -> None:
    """Create a single directory; raises OSError on failure."""
    os.mkdir(path, DIRECTORY_MODE)


def remove_file(path: str | os.PathLike) -> None:
    """Remove a file, or an empty directory; raises OSError on failure."""
    if os.path.isdir(path) and not os.path.islink(path):
        os.rmdir(path)
    else:
        os.remove(path)


def list_dir(path: str | os.PathLike) -> list[str]:
    """Return the entry names of the directory *path*."""
    with os.scandir(path) as entries:
        return [entry.name for entry in entries]


def file_size(fileobj: IO) -> int:
    """Return the size of an open seekable file, keeping its position."""
    position = fileobj.tell()
    try:
        fileobj.seek(0, os.SEEK_END)
        return fileobj.tell()
    finally:
        fileobj.seek(position, os.SEEK_SET)