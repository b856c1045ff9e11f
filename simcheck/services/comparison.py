"""All-pairs comparison service.

Reads, cleanses and indexes every input file, prunes the ones that failed,
and scores every unordered pair of survivors into a triangular RatingMatrix.

Both the per-file phase and the per-pair phase run on a thread pool. Each
worker writes only to its own slot; the shared failure flag is written by
workers but read only after the pool has been joined. Failure compaction and
result emission are strictly serial and keep the original input order.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from tqdm import tqdm

from simcheck.domain.cleansed_file import (
    CleanseError,
    CleansedFile,
    EmptyContentError,
    LineTooLongError,
)
from simcheck.domain.profile_type import ProfileType
from simcheck.domain.rating_matrix import RatingMatrix
from simcheck.domain.report import ComparisonReport, FileFailure
from simcheck.domain.rule_profile import RuleProfile
from simcheck.domain.settings import CheckerSettings
from simcheck.infrastructure.file_io import FileReadError, read_file
from simcheck.services.cleanser import cleanse_buffer
from simcheck.services.distance import LevenshteinScratch
from simcheck.services.line_indexer import LineIndexError, index_lines
from simcheck.services.profile_loader import ProfileLoaderService
from simcheck.services.scorer import score_files


def build_cleansed_file(
    data: bytes,
    profile: RuleProfile,
    origin: int,
    path: str,
    max_line_length: int,
) -> CleansedFile:
    """Cleanse and index a raw buffer.

    Raises:
        EmptyContentError: If nothing is left after cleansing
        LineTooLongError: If a cleansed line exceeds max_line_length
        LineIndexError: If the line table size overflows
    """
    buffer = cleanse_buffer(data, profile)
    if not buffer:
        raise EmptyContentError(f"No content left after cleansing: {path}")

    lines = index_lines(buffer)
    if lines.max_line_length > max_line_length:
        raise LineTooLongError(
            f"Cleansed line of {lines.max_line_length} characters exceeds "
            f"the limit of {max_line_length}: {path}"
        )

    return CleansedFile(
        buffer=buffer,
        lines=lines,
        origin=origin,
        path=path,
        profile_name=profile.name,
    )


@dataclass
class _FilePhaseState:
    """Per-file phase results; each worker owns one slot of each list."""

    files: list[CleansedFile | None]
    errors: list[str | None]
    any_failed: bool = False


@dataclass
class ComparisonService:
    """Service for scoring every pair of a set of source files.

    Attributes:
        profile_loader: Resolves the cleansing profile per input path
        settings: Size limits, swap radius and worker count
        show_progress: Render progress bars on stderr
    """

    profile_loader: ProfileLoaderService
    settings: CheckerSettings = field(default_factory=CheckerSettings)
    show_progress: bool = False
    _worker_state: threading.local = field(default_factory=threading.local, init=False, repr=False)

    # ============================================================
    # Public API
    # ============================================================

    def run(
        self,
        paths: Sequence[str | Path],
        profile_type: ProfileType | None = None,
    ) -> ComparisonReport:
        """Load every path and score every surviving pair.

        Args:
            paths: Input files; their positions identify them in the results
            profile_type: Profile for all files, or None to detect per file

        Returns:
            ComparisonReport with surviving files, failures and scores
        """
        truncated_from = None
        if len(paths) > self.settings.max_files:
            truncated_from = len(paths)
            paths = paths[: self.settings.max_files]

        files, failures = self.load_files(paths, profile_type)
        matrix = self.score_all(files)
        return ComparisonReport(
            files=files,
            matrix=matrix,
            failures=failures,
            truncated_from=truncated_from,
        )

    def load_file(
        self,
        path: str | Path,
        origin: int,
        profile_type: ProfileType | None = None,
    ) -> CleansedFile:
        """Read, cleanse and index a single file.

        Raises:
            FileReadError: If the file cannot be read or is too large
            CleanseError: If the cleansed content cannot be scored
            LineIndexError: If the line table size overflows
        """
        profile = self.profile_loader.resolve(path, profile_type)
        data = read_file(path, self.settings.max_file_size)
        return build_cleansed_file(
            data,
            profile,
            origin=origin,
            path=str(path),
            max_line_length=self.settings.max_line_length,
        )

    def load_files(
        self,
        paths: Sequence[str | Path],
        profile_type: ProfileType | None = None,
    ) -> tuple[list[CleansedFile], list[FileFailure]]:
        """Load all files in parallel, then prune failures serially.

        Returns:
            (files, failures), both in original input order
        """
        state = _FilePhaseState(files=[None] * len(paths), errors=[None] * len(paths))

        def load_one(index: int) -> None:
            try:
                state.files[index] = self.load_file(paths[index], index, profile_type)
            except (FileReadError, CleanseError, LineIndexError) as e:
                state.errors[index] = str(e)
                state.any_failed = True

        with ThreadPoolExecutor(max_workers=self.settings.jobs) as executor:
            for _ in self._progress(
                executor.map(load_one, range(len(paths))),
                total=len(paths),
                desc="Cleansing",
                unit="file",
            ):
                pass

        # The pool is joined; the flag may be read now.
        if not state.any_failed:
            return [f for f in state.files if f is not None], []

        files: list[CleansedFile] = []
        failures: list[FileFailure] = []
        for index, cleansed in enumerate(state.files):
            if cleansed is None:
                failures.append(
                    FileFailure(
                        origin=index,
                        path=str(paths[index]),
                        reason=state.errors[index] or "unknown error",
                    )
                )
            else:
                files.append(cleansed)
        return files, failures

    def score_all(self, files: Sequence[CleansedFile]) -> RatingMatrix:
        """Score every unordered pair of files into a RatingMatrix."""
        matrix = RatingMatrix.allocate(len(files))
        if len(files) < 2:
            return matrix

        radius = self.settings.swap_radius

        def score_anchor(anchor: int) -> None:
            scratch = self._scratch()
            # Derived from the anchor index alone so anchors stay independent.
            start = matrix.block_start(anchor)
            remaining = matrix.block_size(anchor)
            for offset in range(remaining):
                matrix.scores[start + offset] = score_files(
                    files[anchor],
                    files[anchor + 1 + offset],
                    radius,
                    scratch,
                )

        with ThreadPoolExecutor(
            max_workers=self.settings.jobs,
            initializer=self._init_worker,
        ) as executor:
            for _ in self._progress(
                executor.map(score_anchor, range(len(files))),
                total=len(files),
                desc="Scoring",
                unit="file",
            ):
                pass

        return matrix

    # ============================================================
    # Private Methods
    # ============================================================

    def _init_worker(self) -> None:
        self._worker_state.scratch = LevenshteinScratch(self.settings.max_line_length)

    def _scratch(self) -> LevenshteinScratch:
        scratch = getattr(self._worker_state, "scratch", None)
        if scratch is None:
            self._init_worker()
            scratch = self._worker_state.scratch
        return scratch

    def _progress(self, iterable, total: int, desc: str, unit: str):
        return tqdm(
            iterable,
            total=total,
            desc=desc,
            unit=unit,
            disable=not self.show_progress,
            leave=False,
        )
