"""Profiles command - list cleansing profiles in detection order."""

from __future__ import annotations

import json

from simcheck.services.profile_loader import ProfileLoaderService


def cmd_profiles(profiles_dir: str | None = None, output_format: str = "text") -> int:
    """Print the available profiles.

    Returns:
        Exit code (always 0)
    """
    loader = ProfileLoaderService.create(profiles_dir)
    profiles = loader.list_profiles()

    if output_format == "json":
        print(json.dumps([p.to_dict() for p in profiles], indent=2))
        return 0

    for profile in profiles:
        extensions = ", ".join(profile.file_extensions) or "(fallback)"
        print(f"{profile.name}: {extensions}")
    return 0
