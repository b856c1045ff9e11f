"""Infrastructure components for simcheck.

This layer handles the collaborators the core relies on:
- File system reads and writes of whole buffers
- Fixed-width overflow-checked arithmetic
"""

from .file_io import FileReadError, FileWriteError, file_extension, read_file, write_file
from .safe_int import SIZE_BITS, safe_add, safe_mul, safe_sub

__all__ = [
    # File I/O
    "FileReadError",
    "FileWriteError",
    "file_extension",
    "read_file",
    "write_file",
    # Checked arithmetic
    "SIZE_BITS",
    "safe_add",
    "safe_mul",
    "safe_sub",
]
