"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.table import Table

from lcctl.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


_quiet = False


def set_quiet(quiet: bool) -> None:
    """Suppress info messages (--quiet)."""
    global _quiet
    _quiet = quiet


def create_table(title: str) -> Table:
    """Create a table with the shared header and border styling.

    Args:
        title: Table title.

    Returns:
        Rich Table with no columns yet.
    """
    return Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )


def format_toggle(enabled: bool) -> str:
    """Format a boolean setting as on/off markup."""
    if enabled:
        return "[setting_on]on[/]"
    return "[setting_off]off[/]"


def print_info(message: str) -> None:
    """Print an info message, unless quiet."""
    if _quiet:
        return
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
