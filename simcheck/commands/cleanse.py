"""Cleanse command - write the canonical form of a single file."""

from __future__ import annotations

import sys

from simcheck.domain.cleansed_file import CleanseError
from simcheck.domain.profile_type import ProfileType
from simcheck.domain.settings import CheckerSettings
from simcheck.infrastructure.file_io import FileReadError, FileWriteError, read_file, write_file
from simcheck.services.cleanser import cleanse_buffer
from simcheck.services.comparison import build_cleansed_file
from simcheck.services.line_indexer import LineIndexError
from simcheck.services.profile_loader import ProfileLoaderService


def cmd_cleanse(
    path: str,
    settings: CheckerSettings,
    profile_type: ProfileType | None = None,
    profiles_dir: str | None = None,
    output: str | None = None,
    check: bool = False,
) -> int:
    """Execute the cleanse command.

    Args:
        path: File to cleanse
        settings: Size limits
        profile_type: Explicit profile, or None to detect by extension
        profiles_dir: Directory with profile YAML files (default: built-ins)
        output: Destination file; None or "-" writes to stdout
        check: Also validate that the result is scoreable (non-empty, lines
            within the length limit)

    Returns:
        Exit code (0 for success, 1 for error)
    """
    loader = ProfileLoaderService.create(profiles_dir)
    profile = loader.resolve(path, profile_type)

    try:
        data = read_file(path, settings.max_file_size)
    except FileReadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if check:
        try:
            cleansed = build_cleansed_file(
                data,
                profile,
                origin=0,
                path=path,
                max_line_length=settings.max_line_length,
            )
        except (CleanseError, LineIndexError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        buffer = cleansed.buffer
    else:
        buffer = cleanse_buffer(data, profile)

    print(f"Cleansed {path} with profile '{profile.name}'", file=sys.stderr)

    if output is None or output == "-":
        # Raw bytes, so stdout matches what --output would write.
        sys.stdout.flush()
        sys.stdout.buffer.write(buffer)
        if buffer:
            sys.stdout.buffer.write(b"\n")
        sys.stdout.buffer.flush()
        return 0

    try:
        write_file(output, buffer)
    except FileWriteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"  Wrote {output} ({len(buffer)} bytes)", file=sys.stderr)
    return 0
