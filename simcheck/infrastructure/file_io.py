"""File I/O helpers.

Reads and writes whole files as raw bytes. Files are always opened in binary
mode so no newline translation happens before cleansing.
"""

from __future__ import annotations

import os
from pathlib import Path


class FileReadError(Exception):
    """Raised when a file cannot be read or exceeds the size limit."""

    pass


class FileWriteError(Exception):
    """Raised when a file cannot be written."""

    pass


def read_file(path: str | Path, max_size: int) -> bytes:
    """Read an entire file into memory.

    Args:
        path: File to read
        max_size: Largest accepted file size in bytes

    Returns:
        The file contents

    Raises:
        FileReadError: If the file is missing, unreadable or too large
    """
    try:
        with open(path, "rb") as f:
            size = os.fstat(f.fileno()).st_size
            if size > max_size:
                raise FileReadError(
                    f"File too large: {path} ({size} bytes, limit {max_size})"
                )
            data = f.read()
    except OSError as e:
        raise FileReadError(f"Failed to read {path}: {e.strerror or e}")

    # The file may have grown between stat and read.
    if len(data) > max_size:
        raise FileReadError(
            f"File too large: {path} ({len(data)} bytes, limit {max_size})"
        )
    return data


def write_file(path: str | Path, data: bytes) -> None:
    """Write bytes to a file, replacing any existing content.

    Raises:
        FileWriteError: If the file cannot be opened or written
    """
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise FileWriteError(f"Failed to write {path}: {e.strerror or e}")


def file_extension(path: str | Path) -> str:
    """Return the text after the last '.' of a path, or the whole path if none.

    Examples:
        >>> file_extension("src/main.c")
        'c'
        >>> file_extension("Makefile")
        'Makefile'
    """
    name = str(path)
    dot = name.rfind(".")
    if dot == -1:
        return name
    return name[dot + 1 :]
