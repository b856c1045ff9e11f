"""Source code similarity checker.

Normalizes away cosmetic differences between source files (comments,
whitespace, qualifier and numeric type choices) and scores how closely the
remaining lines of each pair of files match, tolerating small reorderings.

Usage:
    python -m simcheck <command> [options]
    simcheck <command> [options]

Structure:
    simcheck/
    ├── __main__.py          # Entry point dispatcher
    ├── domain/              # Domain models (profiles, cleansed files, ratings)
    ├── profiles/            # Per-language cleansing rules (YAML)
    ├── services/            # Cleansing, distance, scoring, all-pairs driver
    ├── infrastructure/      # File I/O and checked arithmetic
    └── commands/            # Thin command orchestrators
        ├── compare.py
        ├── cleanse.py
        └── profiles.py
"""
