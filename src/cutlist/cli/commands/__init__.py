"""CLI subcommands."""

from .validate import validate_command

__all__ = ["validate_command"]
