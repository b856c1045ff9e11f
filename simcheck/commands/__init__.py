"""CLI command implementations."""

from simcheck.commands.cleanse import cmd_cleanse
from simcheck.commands.compare import cmd_compare
from simcheck.commands.profiles import cmd_profiles

__all__ = ["cmd_cleanse", "cmd_compare", "cmd_profiles"]
