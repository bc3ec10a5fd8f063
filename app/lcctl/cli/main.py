"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from lcctl import __version__
from lcctl.cli.commands import data, history, settings
from lcctl.utils.formatting import err_console, set_quiet

# Create main Typer app
app = typer.Typer(
    name="lcctl",
    help="Settings and data folder maintenance for the app launcher.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"lcctl version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool, quiet: bool) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: Log DEBUG and above.
        quiet: Log ERROR and above only.
    """
    level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """lcctl - settings and data folder maintenance for the app launcher.

    Toggle launcher settings and remove data folders left behind by
    apps that are no longer registered.
    """
    configure_logging(verbose, quiet)
    set_quiet(quiet)


# Register commands
app.add_typer(data.app, name="data")
app.add_typer(settings.app, name="settings")
app.add_typer(history.app, name="history")


if __name__ == "__main__":
    app()
