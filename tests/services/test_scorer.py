"""Tests for the windowed similarity scorer.

Tests cover:
- Identical and partially similar files
- Swap radius windows
- Order independence, including files with equal line counts
- Overflow of the length total
"""

import unittest

from simcheck.domain.rating_matrix import SENTINEL_SCORE
from simcheck.domain.rule_profile import RuleProfile
from simcheck.services.comparison import build_cleansed_file
from simcheck.services.distance import LevenshteinScratch
from simcheck.services.scorer import score_files, window_bounds

PLAIN = RuleProfile(name="unknown")


def _file(text: bytes, origin: int = 0):
    return build_cleansed_file(text, PLAIN, origin=origin, path=f"f{origin}", max_line_length=64)


class TestWindowBounds(unittest.TestCase):

    def test_start_of_file(self):
        self.assertEqual(window_bounds(0, 3, 10), (0, 4))

    def test_middle_of_file(self):
        self.assertEqual(window_bounds(5, 3, 10), (2, 9))

    def test_end_of_file(self):
        self.assertEqual(window_bounds(9, 3, 10), (6, 10))

    def test_index_equal_to_radius(self):
        self.assertEqual(window_bounds(3, 3, 10), (0, 7))

    def test_zero_radius(self):
        self.assertEqual(window_bounds(4, 0, 10), (4, 5))


class TestScoreFiles(unittest.TestCase):

    def setUp(self):
        self.scratch = LevenshteinScratch(64)

    def test_identical_files_score_one(self):
        text = b"inta=1\nintb=2\nreturna+b"
        score = score_files(_file(text), _file(text, 1), 3, self.scratch)
        self.assertEqual(score, 1.0)

    def test_partial_similarity(self):
        # Anchor "abd" best matches "abc" (1 of 3), anchor "xyz" takes the
        # first of equally bad candidates (3 of 3): 1 - 4/6.
        score = score_files(_file(b"abc\ndef\nghi"), _file(b"abd\nxyz", 1), 3, self.scratch)
        self.assertAlmostEqual(score, 1 / 3)

    def test_reordered_lines_within_radius(self):
        file1 = _file(b"a\nb\nc")
        file2 = _file(b"c\nb\na", 1)
        self.assertEqual(score_files(file1, file2, 2, self.scratch), 1.0)

    def test_reordered_lines_outside_radius(self):
        file1 = _file(b"a\nb\nc")
        file2 = _file(b"c\nb\na", 1)
        self.assertAlmostEqual(score_files(file1, file2, 0, self.scratch), 1 / 3)

    def test_length_relative_distance(self):
        score = score_files(_file(b"abcd"), _file(b"ab", 1), 3, self.scratch)
        self.assertAlmostEqual(score, 0.5)

    def test_score_is_order_independent(self):
        pairs = [
            (b"abc\ndef\nghi", b"abd\nxyz"),
            (b"a\nb\nc", b"c\nb\na"),
            (b"abcd", b"ab"),
            (b"intx\nreturnx", b"inty\nreturny+1"),
            (b"foo\nbar\nbaz\nqux", b"baz\nfoo\nqux\nbar"),
        ]
        for text1, text2 in pairs:
            for radius in (0, 1, 3):
                with self.subTest(text1=text1, text2=text2, radius=radius):
                    forward = score_files(_file(text1), _file(text2, 1), radius, self.scratch)
                    backward = score_files(_file(text2, 1), _file(text1), radius, self.scratch)
                    self.assertEqual(forward, backward)

    def test_score_never_exceeds_one(self):
        score = score_files(_file(b"x\ny"), _file(b"longerline\nother", 1), 1, self.scratch)
        self.assertLessEqual(score, 1.0)

    def test_length_total_overflow_returns_sentinel(self):
        # A 4-character match length does not fit in 2 bits.
        score = score_files(_file(b"abcd"), _file(b"abcd", 1), 3, self.scratch, size_bits=2)
        self.assertEqual(score, SENTINEL_SCORE)

    def test_length_total_within_limit(self):
        score = score_files(_file(b"abc"), _file(b"abc", 1), 3, self.scratch, size_bits=2)
        self.assertEqual(score, 1.0)


if __name__ == "__main__":
    unittest.main()
