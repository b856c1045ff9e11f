"""Windowed similarity scorer.

Scores a pair of cleansed files by matching every line of the file with fewer
lines (the anchor) against the lines of the other file (the target) that lie
within a radius of the same index. The best match per anchor line is the one
with the lowest distance relative to the longer of the two lines.
"""

from __future__ import annotations

from simcheck.domain.cleansed_file import CleansedFile, LineTable
from simcheck.domain.rating_matrix import SENTINEL_SCORE
from simcheck.infrastructure.safe_int import SIZE_BITS, safe_add
from simcheck.services.distance import LevenshteinScratch


def _order_pair(file1: CleansedFile, file2: CleansedFile) -> tuple[LineTable, LineTable]:
    """Return (anchor, target) line tables.

    The file with fewer lines is the anchor. With equal line counts the
    smaller canonical buffer is, so the result does not depend on argument
    order.
    """
    lines1, lines2 = file1.lines, file2.lines
    if len(lines1) != len(lines2):
        return (lines1, lines2) if len(lines1) < len(lines2) else (lines2, lines1)
    if (len(file2.buffer), file2.buffer) < (len(file1.buffer), file1.buffer):
        return lines2, lines1
    return lines1, lines2


def window_bounds(anchor_index: int, radius: int, target_count: int) -> tuple[int, int]:
    """Half-open target range [start, stop) searched for an anchor line."""
    start = anchor_index - radius if anchor_index > radius else 0
    stop = min(target_count, anchor_index + radius + 1)
    return start, stop


def score_files(
    file1: CleansedFile,
    file2: CleansedFile,
    radius: int,
    scratch: LevenshteinScratch,
    size_bits: int = SIZE_BITS,
) -> float:
    """Compute the similarity of two cleansed files.

    Args:
        file1: First file
        file2: Second file
        radius: Lines searched on each side of the anchor line index
        scratch: Distance buffers at least as long as the longest line
        size_bits: Word size for the running length total

    Returns:
        1 - total_distance / total_length, a value in (-inf, 1], or
        SENTINEL_SCORE if the running length total overflows
    """
    anchor, target = _order_pair(file1, file2)
    target_count = len(target)
    target_lines = target.lines()

    total_distance = 0
    total_length = 0
    for anchor_index, anchor_line in enumerate(anchor.lines()):
        best_cost = float("inf")
        best_distance = 0
        match_length = 1

        start, stop = window_bounds(anchor_index, radius, target_count)
        for target_index in range(start, stop):
            target_line = target_lines[target_index]
            distance = scratch.distance(anchor_line, target_line)
            length = max(len(anchor_line), len(target_line))
            cost = 0.0 if distance == 0 else distance / length
            if cost < best_cost:
                best_cost = cost
                best_distance = distance
                match_length = length

        total_length, overflow = safe_add(total_length, match_length, size_bits)
        if overflow:
            return SENTINEL_SCORE
        # Each distance is bounded by its match length, so this cannot
        # overflow when the length total did not.
        total_distance += best_distance

    return 1.0 - total_distance / total_length
