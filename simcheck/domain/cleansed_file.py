"""Domain models for cleansed files and their line tables.

A LineTable is derived from a finished canonical buffer. Spans are plain
(start, length) offsets into that buffer and the buffer is stored as
immutable bytes, so the table can never observe a later mutation.
"""

from __future__ import annotations

from dataclasses import dataclass


class CleanseError(Exception):
    """Raised when a file's cleansed form cannot be scored."""

    pass


class EmptyContentError(CleanseError):
    """Raised when cleansing leaves no content at all."""

    pass


class LineTooLongError(CleanseError):
    """Raised when a cleansed line exceeds the configured maximum length."""

    pass


@dataclass(frozen=True)
class LineSpan:
    """A (start, length) view over a buffer."""

    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True)
class LineTable:
    """Ordered line spans of a canonical buffer plus the longest line length."""

    buffer: bytes
    spans: tuple[LineSpan, ...]
    max_line_length: int

    def __len__(self) -> int:
        return len(self.spans)

    def line(self, index: int) -> bytes:
        """Return the bytes of the line at index."""
        span = self.spans[index]
        return self.buffer[span.start : span.end]

    def lines(self) -> list[bytes]:
        return [self.buffer[span.start : span.end] for span in self.spans]


@dataclass(frozen=True)
class CleansedFile:
    """A canonical buffer, its line table, and the identity of its input.

    Attributes:
        buffer: Canonical buffer produced by the cleansing pipeline
        lines: Line table borrowed from buffer
        origin: Position of the file in the original input list
        path: Display name of the input
        profile_name: Name of the profile the file was cleansed with
    """

    buffer: bytes
    lines: LineTable
    origin: int
    path: str
    profile_name: str

    @property
    def line_count(self) -> int:
        return len(self.lines)
