"""Domain models for simcheck."""

from simcheck.domain.cleansed_file import (
    CleanseError,
    CleansedFile,
    EmptyContentError,
    LineSpan,
    LineTable,
    LineTooLongError,
)
from simcheck.domain.profile_type import AUTO_PROFILE, ProfileType
from simcheck.domain.rating_matrix import SENTINEL_SCORE, RatingMatrix, is_failed_score
from simcheck.domain.report import ComparisonReport, FileFailure, PairResult
from simcheck.domain.rule_profile import GeneralizeRule, ProfileConfigError, RuleProfile
from simcheck.domain.settings import CheckerSettings

__all__ = [
    "AUTO_PROFILE",
    "CheckerSettings",
    "CleanseError",
    "CleansedFile",
    "ComparisonReport",
    "EmptyContentError",
    "FileFailure",
    "GeneralizeRule",
    "LineSpan",
    "LineTable",
    "LineTooLongError",
    "PairResult",
    "ProfileConfigError",
    "ProfileType",
    "RatingMatrix",
    "RuleProfile",
    "SENTINEL_SCORE",
    "is_failed_score",
]
