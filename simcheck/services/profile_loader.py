"""Profile loader service.

Loads cleansing profiles from a directory of YAML files and resolves the
profile to use for an input path, either by explicit choice or by matching the
file extension against every known profile in detection order.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from simcheck.domain.profile_type import ProfileType
from simcheck.domain.rule_profile import ProfileConfigError, RuleProfile
from simcheck.infrastructure.file_io import file_extension

BUILTIN_PROFILES_DIR = Path(__file__).resolve().parent.parent / "profiles"


@dataclass
class ProfileLoaderService:
    """Service for loading and selecting cleansing profiles.

    Attributes:
        profiles: Loaded profiles keyed by ProfileType, in detection order
    """

    profiles: dict[ProfileType, RuleProfile]

    # ============================================================
    # Factory Methods
    # ============================================================

    @classmethod
    def create(cls, profiles_dir: str | Path | None = None) -> ProfileLoaderService:
        """Load one profile per ProfileType from a directory.

        Each profile is read from "<type value>.yaml".

        Args:
            profiles_dir: Directory holding the YAML files (default: built-ins)

        Raises:
            ProfileConfigError: If a file is missing, malformed or misnamed
        """
        path = Path(profiles_dir) if profiles_dir is not None else BUILTIN_PROFILES_DIR
        if not path.is_dir():
            raise ProfileConfigError(f"Profiles directory does not exist: {path}")

        profiles: dict[ProfileType, RuleProfile] = {}
        for profile_type in ProfileType:
            profile_file = path / f"{profile_type.value}.yaml"
            if not profile_file.is_file():
                raise ProfileConfigError(f"Missing profile file: {profile_file}")
            profile = RuleProfile.from_file(profile_file)
            if profile.name != profile_type.value:
                raise ProfileConfigError(
                    f"Profile file {profile_file} declares name '{profile.name}', "
                    f"expected '{profile_type.value}'"
                )
            profiles[profile_type] = profile

        if profiles[ProfileType.UNKNOWN].file_extensions:
            raise ProfileConfigError("The unknown profile must not claim file extensions")

        return cls(profiles=profiles)

    # ============================================================
    # Public API
    # ============================================================

    def get(self, profile_type: ProfileType) -> RuleProfile:
        return self.profiles[profile_type]

    def detect(self, path: str | Path) -> RuleProfile:
        """Select a profile by file extension.

        Profiles are scanned in ProfileType order; the first whose extension
        list contains the path's extension wins. Falls back to the unknown
        profile.
        """
        extension = file_extension(path)
        for profile_type in ProfileType.detection_order():
            profile = self.get(profile_type)
            if profile.matches_extension(extension):
                return profile
        return self.get(ProfileType.UNKNOWN)

    def resolve(self, path: str | Path, profile_type: ProfileType | None) -> RuleProfile:
        """Resolve the profile for a path.

        Args:
            path: Input path, used for auto-detection
            profile_type: Explicit choice, or None to auto-detect
        """
        if profile_type is None:
            return self.detect(path)
        return self.get(profile_type)

    def list_profiles(self) -> list[RuleProfile]:
        """All profiles in detection order, the unknown fallback last."""
        return [self.profiles[profile_type] for profile_type in ProfileType]
