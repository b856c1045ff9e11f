"""Triangular storage for all unordered pairwise scores.

For N files the scores of every pair (i, j), i < j, live in one flat list of
N*(N-1)/2 entries ordered anchor-major: all pairs of anchor 0 first, then all
pairs of anchor 1, and so on. Offsets are computed in closed form so blocks
for different anchors can be filled independently.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

# Marks a pair that could not be scored. Valid scores are finite and <= 1.
SENTINEL_SCORE = math.inf


def is_failed_score(score: float) -> bool:
    """Check whether a score is the sentinel failure value."""
    return score >= SENTINEL_SCORE


def gauss_sum(x: int) -> int:
    """Return 0 + 1 + ... + x."""
    return x * (x + 1) // 2


def pair_count(file_count: int) -> int:
    """Number of unordered pairs among file_count files."""
    if file_count < 2:
        return 0
    return gauss_sum(file_count - 1)


@dataclass
class RatingMatrix:
    """Flat triangular matrix of pair scores."""

    file_count: int
    scores: list[float]

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def allocate(cls, file_count: int) -> RatingMatrix:
        """Allocate a matrix for file_count files, every slot set to the sentinel."""
        return cls(file_count=file_count, scores=[SENTINEL_SCORE] * pair_count(file_count))

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def block_start(self, anchor: int) -> int:
        """Flat offset of the first pair whose lower index is anchor.

        Equal to N*(N-1)/2 - (N-1-anchor)*(N-anchor)/2.
        """
        return pair_count(self.file_count) - gauss_sum(self.file_count - 1 - anchor)

    def block_size(self, anchor: int) -> int:
        """Number of pairs whose lower index is anchor."""
        return self.file_count - 1 - anchor

    def index_of(self, first: int, second: int) -> int:
        """Flat offset of the unordered pair (first, second)."""
        if first == second:
            raise ValueError(f"A file is not paired with itself: {first}")
        if first > second:
            first, second = second, first
        if second >= self.file_count:
            raise IndexError(f"File index {second} out of range for {self.file_count} files")
        return self.block_start(first) + (second - first - 1)

    def get(self, first: int, second: int) -> float:
        return self.scores[self.index_of(first, second)]

    def set(self, first: int, second: int, score: float) -> None:
        self.scores[self.index_of(first, second)] = score

    def iter_pairs(self) -> Iterator[tuple[int, int, float]]:
        """Yield (i, j, score) for every pair in anchor-major order."""
        flat_index = 0
        for first in range(self.file_count):
            for second in range(first + 1, self.file_count):
                assert flat_index == self.block_start(first) + (second - first - 1)
                yield first, second, self.scores[flat_index]
                flat_index += 1
