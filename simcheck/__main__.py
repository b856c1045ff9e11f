#!/usr/bin/env python3
"""CLI entry point for the similarity checker.

Usage:
    python -m simcheck <command> [options]

Commands:
    compare   Score every pair of input files
    cleanse   Write the canonical form of a file
    profiles  List cleansing profiles
"""

from __future__ import annotations

import argparse
import dataclasses
import sys

from simcheck.commands.cleanse import cmd_cleanse
from simcheck.commands.compare import cmd_compare
from simcheck.commands.profiles import cmd_profiles
from simcheck.domain.profile_type import AUTO_PROFILE, ProfileType
from simcheck.domain.rule_profile import ProfileConfigError
from simcheck.domain.settings import CheckerSettings

PROFILE_CHOICES = [AUTO_PROFILE] + [p.value for p in ProfileType]


def _add_profile_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--profile",
        choices=PROFILE_CHOICES,
        default=AUTO_PROFILE,
        help="Cleansing profile (default: auto-detect by file extension)",
    )
    parser.add_argument(
        "--profiles-dir",
        help="Directory with profile YAML files (default: built-in profiles)",
    )


def _add_limit_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--max-file-size",
        type=int,
        help="Largest input file in bytes (default: $SIMCHECK_MAX_FILE_SIZE or 1048576)",
    )
    parser.add_argument(
        "--max-line-length",
        type=int,
        help="Longest cleansed line; longer lines reject the file (default: 512)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simcheck",
        description="Detect structural similarity between source files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  compare   Score every pair of input files
  cleanse   Write the canonical form of a file
  profiles  List cleansing profiles

Examples:
  simcheck compare a.c b.c c.c
  simcheck compare --profile java --swap-radius 5 Main.java Copy.java
  simcheck cleanse src/main.c --output main.clean
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # compare command
    parser_compare = subparsers.add_parser(
        "compare",
        help="Score every pair of input files",
    )
    parser_compare.add_argument("paths", nargs="*", help="Files to cross-compare")
    _add_profile_arguments(parser_compare)
    _add_limit_arguments(parser_compare)
    parser_compare.add_argument(
        "--swap-radius",
        type=int,
        help="Lines searched on each side of an anchor line (default: 3)",
    )
    parser_compare.add_argument(
        "--max-files",
        type=int,
        help="Ignore inputs beyond this count",
    )
    parser_compare.add_argument(
        "--jobs",
        type=int,
        help="Worker threads per phase (default: executor default)",
    )
    parser_compare.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser_compare.add_argument(
        "--progress",
        action="store_true",
        help="Show progress bars on stderr",
    )

    # cleanse command
    parser_cleanse = subparsers.add_parser(
        "cleanse",
        help="Write the canonical form of a file",
    )
    parser_cleanse.add_argument("path", help="File to cleanse")
    _add_profile_arguments(parser_cleanse)
    _add_limit_arguments(parser_cleanse)
    parser_cleanse.add_argument(
        "--output",
        help="Destination file (default: stdout)",
    )
    parser_cleanse.add_argument(
        "--check",
        action="store_true",
        help="Fail if the cleansed file could not be compared",
    )

    # profiles command
    parser_profiles = subparsers.add_parser(
        "profiles",
        help="List cleansing profiles",
    )
    parser_profiles.add_argument("--profiles-dir", help="Directory with profile YAML files")
    parser_profiles.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )

    return parser


def _settings_from_args(args: argparse.Namespace) -> CheckerSettings:
    """Environment settings overridden by any flags given on the command line."""
    overrides = {
        name: getattr(args, name)
        for name in ("max_file_size", "max_line_length", "swap_radius", "max_files", "jobs")
        if getattr(args, name, None) is not None
    }
    return dataclasses.replace(CheckerSettings.from_env(), **overrides)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "compare":
            return cmd_compare(
                paths=args.paths,
                settings=_settings_from_args(args),
                profile_type=ProfileType.from_string(args.profile),
                profiles_dir=args.profiles_dir,
                output_format=args.format,
                progress=args.progress,
            )

        elif args.command == "cleanse":
            return cmd_cleanse(
                path=args.path,
                settings=_settings_from_args(args),
                profile_type=ProfileType.from_string(args.profile),
                profiles_dir=args.profiles_dir,
                output=args.output,
                check=args.check,
            )

        elif args.command == "profiles":
            return cmd_profiles(
                profiles_dir=args.profiles_dir,
                output_format=args.format,
            )

    except (ProfileConfigError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
