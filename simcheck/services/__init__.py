"""Services for simcheck.

Services hold the cleansing and scoring logic and orchestrate domain models.
They receive dependencies via constructor injection.
"""

from simcheck.services.cleanser import cleanse_buffer
from simcheck.services.comparison import ComparisonService, build_cleansed_file
from simcheck.services.distance import LevenshteinScratch, levenshtein_distance
from simcheck.services.line_indexer import LineIndexError, index_lines
from simcheck.services.profile_loader import ProfileLoaderService
from simcheck.services.scorer import score_files

__all__ = [
    "ComparisonService",
    "LevenshteinScratch",
    "LineIndexError",
    "ProfileLoaderService",
    "build_cleansed_file",
    "cleanse_buffer",
    "index_lines",
    "levenshtein_distance",
    "score_files",
]
