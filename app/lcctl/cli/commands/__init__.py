"""CLI commands for lcctl.

This package contains all subcommand implementations.
"""

from lcctl.cli.commands import data, history, settings

__all__ = ["data", "history", "settings"]
