"""Line indexer for canonical buffers."""

from __future__ import annotations

from simcheck.domain.cleansed_file import LineSpan, LineTable
from simcheck.infrastructure.safe_int import SIZE_BITS, safe_add, safe_mul

# Storage model of one line entry (start and length words) and of the table
# header (line count and maximum length words), in bytes.
LINE_ENTRY_SIZE = 16
TABLE_HEADER_SIZE = 16


class LineIndexError(Exception):
    """Raised when the storage needed for a line table cannot be represented."""

    pass


def index_lines(buffer: bytes, size_bits: int = SIZE_BITS) -> LineTable:
    """Split a non-empty canonical buffer into line spans.

    The first pass counts newlines to size the table, the second records
    each line's start and its length up to the next newline or the end.

    Args:
        buffer: Canonical buffer, must not be empty
        size_bits: Word size used to check the table size computation

    Returns:
        LineTable over buffer

    Raises:
        LineIndexError: If the table size overflows the word size
    """
    assert buffer, "cannot index an empty buffer"

    line_count = buffer.count(b"\n") + 1

    entries_size, overflow = safe_mul(line_count, LINE_ENTRY_SIZE, size_bits)
    table_size, overflow_header = safe_add(TABLE_HEADER_SIZE, entries_size, size_bits)
    if overflow or overflow_header:
        raise LineIndexError(
            f"Line table for {line_count} lines exceeds the {size_bits}-bit size limit"
        )

    spans: list[LineSpan] = []
    max_line_length = 0
    line_start = 0
    while True:
        newline = buffer.find(b"\n", line_start)
        line_end = len(buffer) if newline == -1 else newline
        span = LineSpan(start=line_start, length=line_end - line_start)
        spans.append(span)
        max_line_length = max(max_line_length, span.length)
        if newline == -1:
            break
        line_start = newline + 1

    assert len(spans) == line_count
    return LineTable(buffer=buffer, spans=tuple(spans), max_line_length=max_line_length)
