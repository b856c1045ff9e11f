"""Domain models for comparison results."""

from __future__ import annotations

from dataclasses import dataclass, field

from simcheck.domain.cleansed_file import CleansedFile
from simcheck.domain.rating_matrix import RatingMatrix, is_failed_score


@dataclass(frozen=True)
class FileFailure:
    """An input that was excluded from all comparisons."""

    origin: int
    path: str
    reason: str

    def to_dict(self) -> dict:
        return {"index": self.origin, "path": self.path, "reason": self.reason}


@dataclass(frozen=True)
class PairResult:
    """Score for one unordered pair, addressed by original input positions."""

    index1: int
    index2: int
    path1: str
    path2: str
    score: float

    @property
    def failed(self) -> bool:
        return is_failed_score(self.score)

    def format_line(self) -> str:
        """Format as '<index1> <index2> <score>'."""
        return f"{self.index1} {self.index2} {self.score:f}"

    def to_dict(self) -> dict:
        return {
            "index1": self.index1,
            "index2": self.index2,
            "path1": self.path1,
            "path2": self.path2,
            "score": None if self.failed else self.score,
            "failed": self.failed,
        }


@dataclass
class ComparisonReport:
    """Outcome of an all-pairs comparison run.

    Attributes:
        files: Surviving cleansed files, in original input order
        matrix: Scores for every pair of surviving files
        failures: Inputs excluded because reading or cleansing failed
        truncated_from: Original input count when inputs were truncated
    """

    files: list[CleansedFile]
    matrix: RatingMatrix
    failures: list[FileFailure] = field(default_factory=list)
    truncated_from: int | None = None

    def pair_results(self) -> list[PairResult]:
        """All pair results in anchor-major order."""
        results: list[PairResult] = []
        for first, second, score in self.matrix.iter_pairs():
            file1 = self.files[first]
            file2 = self.files[second]
            results.append(
                PairResult(
                    index1=file1.origin,
                    index2=file2.origin,
                    path1=file1.path,
                    path2=file2.path,
                    score=score,
                )
            )
        return results

    def failed_pairs(self) -> list[PairResult]:
        return [result for result in self.pair_results() if result.failed]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "files": [
                {
                    "index": f.origin,
                    "path": f.path,
                    "profile": f.profile_name,
                    "lines": f.line_count,
                }
                for f in self.files
            ],
            "failures": [failure.to_dict() for failure in self.failures],
            "pairs": [result.to_dict() for result in self.pair_results()],
            "truncated_from": self.truncated_from,
        }
