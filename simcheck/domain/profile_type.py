"""Domain enum for cleansing profile selection.

The member order is the auto-detection order: when a file's profile is
detected by extension, profiles are tried in this order and the first match
wins. UNKNOWN is the fallback and never matches by extension.
"""

from __future__ import annotations

from enum import Enum

AUTO_PROFILE = "auto"


class ProfileType(Enum):
    """Known cleansing profiles.

    Attributes:
        C: C and C++ sources and headers
        JAVA: Java sources
        FSHARP: F# sources and scripts
        UNKNOWN: Fallback with every optional cleansing feature disabled
    """

    C = "c"
    JAVA = "java"
    FSHARP = "fsharp"
    UNKNOWN = "unknown"

    @classmethod
    def from_string(cls, value: str) -> ProfileType | None:
        """Parse ProfileType from string value.

        Args:
            value: Profile name, or "auto" to request extension detection

        Returns:
            Corresponding ProfileType, or None for the "auto" wildcard

        Raises:
            ValueError: If value is not a known profile name

        Examples:
            >>> ProfileType.from_string("Java")
            <ProfileType.JAVA: 'java'>
            >>> ProfileType.from_string("auto") is None
            True
        """
        value_lower = value.lower()
        if value_lower == AUTO_PROFILE:
            return None
        for member in cls:
            if member.value == value_lower:
                return member
        valid_values = [m.value for m in cls] + [AUTO_PROFILE]
        raise ValueError(
            f"Invalid profile: {value}. Must be one of: {', '.join(valid_values)}"
        )

    @classmethod
    def detection_order(cls) -> list[ProfileType]:
        """Profiles that take part in extension detection, in scan order."""
        return [member for member in cls if member is not cls.UNKNOWN]
