"""Compare command - score every pair of input files.

Prints one line per compared pair to stdout as "<index1> <index2> <score>",
where the indices are the files' positions on the command line. Files that
could not be read or cleansed, and pairs that could not be scored, are
reported on stderr without aborting the run.
"""

from __future__ import annotations

import json
import sys

from simcheck.domain.profile_type import ProfileType
from simcheck.domain.settings import CheckerSettings
from simcheck.services.comparison import ComparisonService
from simcheck.services.profile_loader import ProfileLoaderService


def cmd_compare(
    paths: list[str],
    settings: CheckerSettings,
    profile_type: ProfileType | None = None,
    profiles_dir: str | None = None,
    output_format: str = "text",
    progress: bool = False,
) -> int:
    """Execute the compare command.

    Args:
        paths: Input files to cross-compare
        settings: Limits, swap radius and worker count
        profile_type: Profile for all files, or None to detect by extension
        profiles_dir: Directory with profile YAML files (default: built-ins)
        output_format: "text" or "json"
        progress: Show progress bars on stderr

    Returns:
        Exit code (0 on success, including per-file and per-pair failures;
        1 for environment errors)
    """
    if len(paths) < 2:
        print("usage: simcheck compare <input file 1> ... <input file n>", file=sys.stderr)
        return 0

    loader = ProfileLoaderService.create(profiles_dir)
    service = ComparisonService(
        profile_loader=loader,
        settings=settings,
        show_progress=progress,
    )

    try:
        report = service.run(paths, profile_type)
    except MemoryError:
        print("Allocation error", file=sys.stderr)
        return 1

    if report.truncated_from is not None:
        print(f"Truncated input files to {settings.max_files}.", file=sys.stderr)

    for failure in report.failures:
        print(f"Cleansed read error: {failure.path} ({failure.reason})", file=sys.stderr)

    for failed in report.failed_pairs():
        print(f"Failed to compare files {failed.path1} and {failed.path2}", file=sys.stderr)

    if output_format == "json":
        print(json.dumps(report.to_dict(), indent=2))
    else:
        for result in report.pair_results():
            print(result.format_line())

    return 0
