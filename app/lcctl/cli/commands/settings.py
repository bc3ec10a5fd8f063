"""Launcher settings commands.

Provides commands to show the launcher toggles and to switch one of
them on or off.
"""

from typing import Annotated

import typer

from lcctl.cli.display import create_settings_table
from lcctl.settings.config import SettingsError, load_settings, setting_names, update_setting
from lcctl.settings.history import record_setting_change
from lcctl.utils.formatting import console, format_toggle, print_error, print_warning

app = typer.Typer(
    help="Show and change launcher settings.",
    invoke_without_command=True,
    no_args_is_help=True,
)

_TRUE_VALUES = {"on", "true", "yes", "1"}
_FALSE_VALUES = {"off", "false", "no", "0"}


@app.command()
def show(
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON."),
    ] = False,
) -> None:
    """Show current launcher settings."""
    try:
        settings = load_settings()
    except SettingsError as e:
        print_error(f"Failed to load settings: {e}")
        raise typer.Exit(code=1) from e

    if json_output:
        console.print_json(settings.model_dump_json())
        return

    console.print(create_settings_table(settings))


@app.command("set")
def set_setting(
    name: Annotated[str, typer.Argument(help="Setting name.")],
    value: Annotated[str, typer.Argument(help="New value: on or off.")],
) -> None:
    """Switch a launcher setting on or off."""
    enabled = _parse_toggle(value)
    if enabled is None:
        print_error(f"Invalid value '{value}'. Use on or off.")
        raise typer.Exit(code=1)

    if name not in setting_names():
        print_error(f"Unknown setting '{name}'. Valid settings: {', '.join(setting_names())}")
        raise typer.Exit(code=1)

    try:
        update_setting(name, enabled)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    try:
        record_setting_change(name, enabled)
    except (OSError, RuntimeError) as e:
        print_warning(f"Could not record to history: {e}")

    console.print(f"{name} = {format_toggle(enabled)}")


def _parse_toggle(value: str) -> bool | None:
    """Parse an on/off style value, returning None if unrecognized."""
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return None
