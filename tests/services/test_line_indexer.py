"""Tests for the line indexer.

Tests cover:
- Span boundaries and maximum line length
- Single-line buffers
- Table size overflow detection
"""

import unittest

from simcheck.domain.cleansed_file import LineSpan
from simcheck.services.line_indexer import LineIndexError, index_lines


class TestIndexLines(unittest.TestCase):

    def test_multiple_lines(self):
        table = index_lines(b"ab\ncde\nf")
        self.assertEqual(table.spans, (LineSpan(0, 2), LineSpan(3, 3), LineSpan(7, 1)))
        self.assertEqual(table.max_line_length, 3)
        self.assertEqual(table.lines(), [b"ab", b"cde", b"f"])
        self.assertEqual(len(table), 3)

    def test_single_line(self):
        table = index_lines(b"abc")
        self.assertEqual(table.spans, (LineSpan(0, 3),))
        self.assertEqual(table.line(0), b"abc")

    def test_spans_cover_buffer(self):
        """Test that lines joined by newlines rebuild the buffer."""
        buffer = b"inta=1\nintb=2\nreturna+b"
        table = index_lines(buffer)
        self.assertEqual(b"\n".join(table.lines()), buffer)
        self.assertEqual(table.spans[-1].end, len(buffer))

    def test_empty_buffer_is_rejected(self):
        with self.assertRaises(AssertionError):
            index_lines(b"")

    def test_table_size_overflow(self):
        # Two 16-byte entries need 32 bytes, which does not fit in 5 bits.
        with self.assertRaises(LineIndexError):
            index_lines(b"a\nb", size_bits=5)

    def test_table_size_fits(self):
        self.assertEqual(len(index_lines(b"a\nb", size_bits=6)), 2)


if __name__ == "__main__":
    unittest.main()
