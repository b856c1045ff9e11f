"""Domain model for cleansing rule profiles.

Profiles are loaded from YAML files. This module provides the RuleProfile and
GeneralizeRule models, parsed once at the boundary with from_dict()/from_file()
and validated there so the cleansing passes never re-check them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


class ProfileConfigError(Exception):
    """Raised when a profile definition is malformed or violates an invariant."""

    pass


def _to_bytes(value: object, what: str) -> bytes:
    if not isinstance(value, str):
        raise ProfileConfigError(f"{what} must be a string, got {value!r}")
    return value.encode("utf-8")


def _list_field(data: dict, key: str) -> list[str]:
    values = data.get(key) or []
    if not isinstance(values, list):
        raise ProfileConfigError(f"'{key}' must be a list, got {values!r}")
    return values


# ============================================================
# Domain Models
# ============================================================


@dataclass(frozen=True)
class GeneralizeRule:
    """Replace any generalizee token with the generalizer token.

    The generalizer is written over the start of the matched generalizee and
    the remainder is padded with blanks, so no generalizee may be shorter
    than its generalizer.
    """

    generalizer: bytes
    generalizees: tuple[bytes, ...]

    @classmethod
    def from_dict(cls, data: dict) -> GeneralizeRule:
        """Parse a generalize group from YAML.

        Raises:
            ProfileConfigError: If a generalizee is shorter than the generalizer
        """
        if not isinstance(data, dict):
            raise ProfileConfigError(f"Generalize group must be a mapping, got {data!r}")

        generalizer = _to_bytes(data.get("generalizer", ""), "generalizer")
        generalizees = tuple(
            _to_bytes(g, "generalizee") for g in _list_field(data, "generalizees")
        )

        for generalizee in generalizees:
            if len(generalizee) < len(generalizer):
                raise ProfileConfigError(
                    f"Generalizee {generalizee!r} is shorter than its "
                    f"generalizer {generalizer!r}"
                )
            if not generalizee:
                raise ProfileConfigError("Generalizees must not be empty")

        return cls(generalizer=generalizer, generalizees=generalizees)


@dataclass(frozen=True)
class RuleProfile:
    """Language-specific settings consumed by the cleansing pipeline.

    Attributes:
        name: Profile identifier (matches a ProfileType value for built-ins)
        file_extensions: Extensions (without dot) that select this profile
        multi_comment_start: Opening marker, empty to disable the feature
        multi_comment_end: Closing marker, empty iff the start is empty
        line_drop_prefixes: Prefixes that blank the rest of their line
        newline_chars: Bytes treated as logical newlines
        generalize_rules: Generalize groups, evaluated in order
    """

    name: str
    file_extensions: tuple[str, ...] = ()
    multi_comment_start: bytes = b""
    multi_comment_end: bytes = b""
    line_drop_prefixes: tuple[bytes, ...] = ()
    newline_chars: frozenset[int] = field(default_factory=frozenset)
    generalize_rules: tuple[GeneralizeRule, ...] = ()

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict) -> RuleProfile:
        """Parse and validate a profile from a YAML mapping.

        Raises:
            ProfileConfigError: If any field is malformed
        """
        if not isinstance(data, dict):
            raise ProfileConfigError(f"Profile must be a mapping, got {data!r}")

        name = data.get("name")
        if not name or not isinstance(name, str):
            raise ProfileConfigError("Profile is missing a 'name'")

        comment = data.get("multi_line_comment") or {}
        if not isinstance(comment, dict):
            raise ProfileConfigError(
                f"Profile '{name}': multi_line_comment must be a mapping with "
                f"'start' and 'end', got {comment!r}"
            )
        start = _to_bytes(comment.get("start", ""), "multi_line_comment.start")
        end = _to_bytes(comment.get("end", ""), "multi_line_comment.end")
        if bool(start) != bool(end):
            raise ProfileConfigError(
                f"Profile '{name}': multi-line comment start and end must both "
                "be set or both be empty"
            )

        prefixes = tuple(
            _to_bytes(p, "line_drop_prefix") for p in _list_field(data, "line_drop_prefixes")
        )
        if any(not p for p in prefixes):
            raise ProfileConfigError(f"Profile '{name}': line-drop prefixes must not be empty")

        newline_chars: set[int] = set()
        for char in _list_field(data, "newline_chars"):
            encoded = _to_bytes(char, "newline_char")
            if len(encoded) != 1:
                raise ProfileConfigError(
                    f"Profile '{name}': logical newline {char!r} must be a single byte"
                )
            newline_chars.add(encoded[0])

        extensions = tuple(str(ext) for ext in _list_field(data, "file_extensions"))

        try:
            rules = tuple(
                GeneralizeRule.from_dict(group) for group in _list_field(data, "generalize")
            )
        except ProfileConfigError as e:
            raise ProfileConfigError(f"Profile '{name}': {e}")

        return cls(
            name=name,
            file_extensions=extensions,
            multi_comment_start=start,
            multi_comment_end=end,
            line_drop_prefixes=prefixes,
            newline_chars=frozenset(newline_chars),
            generalize_rules=rules,
        )

    @classmethod
    def from_file(cls, file_path: Path) -> RuleProfile:
        """Load a profile from a YAML file.

        Raises:
            ProfileConfigError: If the file cannot be parsed or is invalid
        """
        try:
            data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ProfileConfigError(f"Failed to load profile {file_path}: {e}")
        return cls.from_dict(data)

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    @property
    def has_multi_comments(self) -> bool:
        return bool(self.multi_comment_start)

    def matches_extension(self, extension: str) -> bool:
        """Check whether a file extension selects this profile (case-sensitive)."""
        return extension in self.file_extensions

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        result: dict = {
            "name": self.name,
            "file_extensions": list(self.file_extensions),
        }
        if self.has_multi_comments:
            result["multi_line_comment"] = {
                "start": self.multi_comment_start.decode("utf-8"),
                "end": self.multi_comment_end.decode("utf-8"),
            }
        if self.line_drop_prefixes:
            result["line_drop_prefixes"] = [p.decode("utf-8") for p in self.line_drop_prefixes]
        if self.newline_chars:
            result["newline_chars"] = [chr(c) for c in sorted(self.newline_chars)]
        if self.generalize_rules:
            result["generalize"] = [
                {
                    "generalizer": rule.generalizer.decode("utf-8"),
                    "generalizees": [g.decode("utf-8") for g in rule.generalizees],
                }
                for rule in self.generalize_rules
            ]
        return result
