"""Tests for comparison report models.

Tests cover:
- Pair result formatting and failure detection
- Mapping matrix positions back to original input indices
- JSON-ready dictionaries
"""

import unittest

from simcheck.domain.cleansed_file import CleansedFile, LineSpan, LineTable
from simcheck.domain.rating_matrix import SENTINEL_SCORE, RatingMatrix
from simcheck.domain.report import ComparisonReport, FileFailure, PairResult


def _cleansed(text: bytes, origin: int, path: str) -> CleansedFile:
    table = LineTable(buffer=text, spans=(LineSpan(0, len(text)),), max_line_length=len(text))
    return CleansedFile(buffer=text, lines=table, origin=origin, path=path, profile_name="c")


class TestPairResult(unittest.TestCase):

    def test_format_line(self):
        result = PairResult(0, 2, "a.c", "c.c", 0.5)
        self.assertEqual(result.format_line(), "0 2 0.500000")

    def test_format_negative_score(self):
        result = PairResult(1, 2, "b.c", "c.c", -0.25)
        self.assertEqual(result.format_line(), "1 2 -0.250000")

    def test_sentinel_is_failed(self):
        result = PairResult(0, 1, "a.c", "b.c", SENTINEL_SCORE)
        self.assertTrue(result.failed)
        self.assertEqual(result.format_line(), "0 1 inf")
        self.assertIsNone(result.to_dict()["score"])

    def test_to_dict(self):
        data = PairResult(0, 1, "a.c", "b.c", 1.0).to_dict()
        self.assertEqual(data["score"], 1.0)
        self.assertFalse(data["failed"])


class TestComparisonReport(unittest.TestCase):

    def setUp(self):
        files = [_cleansed(b"a", 0, "a.c"), _cleansed(b"b", 2, "c.c"), _cleansed(b"c", 3, "d.c")]
        matrix = RatingMatrix.allocate(3)
        matrix.set(0, 1, 0.5)
        matrix.set(0, 2, 1.0)
        self.report = ComparisonReport(
            files=files,
            matrix=matrix,
            failures=[FileFailure(origin=1, path="b.c", reason="missing")],
        )

    def test_pair_results_use_original_indices(self):
        pairs = [(r.index1, r.index2) for r in self.report.pair_results()]
        self.assertEqual(pairs, [(0, 2), (0, 3), (2, 3)])

    def test_failed_pairs(self):
        failed = self.report.failed_pairs()
        self.assertEqual(len(failed), 1)
        self.assertEqual((failed[0].path1, failed[0].path2), ("c.c", "d.c"))

    def test_to_dict(self):
        data = self.report.to_dict()
        self.assertEqual([f["index"] for f in data["files"]], [0, 2, 3])
        self.assertEqual(data["failures"], [{"index": 1, "path": "b.c", "reason": "missing"}])
        self.assertEqual(len(data["pairs"]), 3)
        self.assertIsNone(data["truncated_from"])


if __name__ == "__main__":
    unittest.main()
