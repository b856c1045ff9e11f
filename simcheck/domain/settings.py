"""Checker settings.

Tunable limits for reading, cleansing and scoring. Defaults can be overridden
through SIMCHECK_* environment variables and then by command-line flags.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_MAX_FILE_SIZE = 1024 * 1024
DEFAULT_MAX_LINE_LENGTH = 512
DEFAULT_SWAP_RADIUS = 3
DEFAULT_MAX_FILES = 2**31 - 1

_ENV_PREFIX = "SIMCHECK_"


def _read_int(environ: Mapping[str, str], name: str, default: int | None, minimum: int) -> int | None:
    raw = environ.get(_ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{_ENV_PREFIX}{name} must be an integer, got {raw!r}")
    if value < minimum:
        raise ValueError(f"{_ENV_PREFIX}{name} must be at least {minimum}, got {value}")
    return value


@dataclass(frozen=True)
class CheckerSettings:
    """Limits applied by the comparison pipeline.

    Attributes:
        max_file_size: Largest input file accepted, in bytes
        max_line_length: Longest cleansed line accepted; longer lines reject the file
        swap_radius: Lines searched on each side of an anchor line
        max_files: Inputs beyond this count are ignored
        jobs: Worker threads per parallel phase (None lets the executor decide)
    """

    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH
    swap_radius: int = DEFAULT_SWAP_RADIUS
    max_files: int = DEFAULT_MAX_FILES
    jobs: int | None = None

    def __post_init__(self) -> None:
        if self.max_file_size < 1:
            raise ValueError(f"max_file_size must be positive, got {self.max_file_size}")
        if self.max_line_length < 1:
            raise ValueError(f"max_line_length must be positive, got {self.max_line_length}")
        if self.swap_radius < 0:
            raise ValueError(f"swap_radius must not be negative, got {self.swap_radius}")
        if self.max_files < 2:
            raise ValueError(f"max_files must be at least 2, got {self.max_files}")
        if self.jobs is not None and self.jobs < 1:
            raise ValueError(f"jobs must be positive, got {self.jobs}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CheckerSettings:
        """Build settings from SIMCHECK_* environment variables.

        Raises:
            ValueError: If a variable is not a valid integer for its setting
        """
        if environ is None:
            environ = os.environ
        return cls(
            max_file_size=_read_int(environ, "MAX_FILE_SIZE", DEFAULT_MAX_FILE_SIZE, 1),
            max_line_length=_read_int(environ, "MAX_LINE_LENGTH", DEFAULT_MAX_LINE_LENGTH, 1),
            swap_radius=_read_int(environ, "SWAP_RADIUS", DEFAULT_SWAP_RADIUS, 0),
            max_files=_read_int(environ, "MAX_FILES", DEFAULT_MAX_FILES, 2),
            jobs=_read_int(environ, "JOBS", None, 1),
        )
