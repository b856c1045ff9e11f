"""Levenshtein edit distance with bounded working memory.

Only two matrix rows exist at a time. The first "previous" row is supplied by
the caller so the trivial 1..N row is built once and reused; every new row is
written into a caller-owned scratch list.
"""

from __future__ import annotations

from collections.abc import Sequence


def initial_row(max_length: int) -> list[int]:
    """Return the first Levenshtein matrix row without its leading 0: 1..max_length."""
    return list(range(1, max_length + 1))


def levenshtein_distance(
    top_row: Sequence[int],
    scratch: list[int],
    str1: bytes,
    str2: bytes,
) -> int:
    """Compute the edit distance from str1 to str2.

    Insert, delete and substitute all cost 1. When the diagonal cost is not
    greater than the cheaper of insert and delete, the diagonal is taken.

    Args:
        top_row: First matrix row (1..len(str2)); at least len(str2) long
        scratch: Row buffer at least len(str2) long; overwritten
        str1: First span, must not be empty
        str2: Second span, must not be empty

    Returns:
        The Levenshtein distance
    """
    top = top_row
    for row, char1 in enumerate(str1):
        top_left = row
        left = row + 1
        for column, char2 in enumerate(str2):
            top_value = top[column]
            current = top_value if top_value < left else left
            if top_left <= current:
                current = top_left
                if char1 != char2:
                    current += 1
            else:
                current += 1

            scratch[column] = current
            left = current
            top_left = top_value
        # From the second row on, the previous row lives in scratch itself.
        top = scratch

    return top[len(str2) - 1]


class LevenshteinScratch:
    """Per-worker distance buffers sized to the longest supported line."""

    def __init__(self, max_line_length: int):
        self.max_line_length = max_line_length
        self.top_row = initial_row(max_line_length)
        self.row = [0] * max_line_length

    def distance(self, str1: bytes, str2: bytes) -> int:
        """Edit distance between two non-empty spans no longer than max_line_length."""
        assert str1 and str2, "spans must not be empty"
        assert len(str2) <= self.max_line_length, "span exceeds scratch capacity"
        return levenshtein_distance(self.top_row, self.row, str1, str2)
