"""CLI package for lcctl.

This package contains the Typer application and all subcommands.
"""

from lcctl.cli.main import app

__all__ = ["app"]
