"""History command for viewing past actions.

This module provides the `lcctl history` command for viewing recorded
data folder deletions and settings changes.
"""

import json
from datetime import datetime
from typing import Annotated

import typer

from lcctl.core.state import StateManager
from lcctl.models.history import HistoryEntry
from lcctl.utils.formatting import console, create_table, print_info

app = typer.Typer(
    name="history",
    help="View history of data folder and settings changes.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def history(
    ctx: typer.Context,
    limit: Annotated[
        int,
        typer.Option(
            "--limit",
            "-n",
            help="Maximum number of entries to show.",
        ),
    ] = 20,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output as JSON.",
        ),
    ] = False,
) -> None:
    """Show history of data folder deletions and settings changes.

    Examples:
        lcctl history              # Show last 20 entries
        lcctl history -n 50        # Show last 50 entries
        lcctl history --json       # JSON output for scripting
    """
    if ctx.invoked_subcommand is not None:
        return

    entries = StateManager().get_history(limit=limit)

    if not entries:
        print_info("No history entries found.")
        return

    if json_output:
        console.print(json.dumps([entry.to_dict() for entry in entries], indent=2))
    else:
        _print_table(entries)


def _print_table(entries: list[HistoryEntry]) -> None:
    """Print history as Rich table."""
    table = create_table("History")
    table.add_column("ID", style="dim")
    table.add_column("Timestamp")
    table.add_column("Action")
    table.add_column("Items")
    table.add_column("Status", width=8)

    for entry in entries:
        count = len(entry.items)
        names = ", ".join(_format_item(item.name, item.detail) for item in entry.items[:3])
        if count > 3:
            names += f" (+{count - 3} more)"

        table.add_row(
            entry.id[:8],
            _format_timestamp(entry.timestamp),
            entry.action_type.value,
            names,
            "[success]ok[/]" if entry.success else "[error]partial[/]",
        )

    console.print(table)


def _format_item(name: str, detail: str | None) -> str:
    """Format a history item name with its optional detail."""
    return f"{name}={detail}" if detail else name


def _format_timestamp(iso_timestamp: str) -> str:
    """Format ISO timestamp as YYYY-MM-DD HH:MM."""
    dt = datetime.fromisoformat(iso_timestamp.replace("Z", "+00:00"))
    return dt.strftime("%Y-%m-%d %H:%M")
