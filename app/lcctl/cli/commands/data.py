"""Data folder commands.

Provides commands to list per-app data folders and to clean up the
folders that no registered app refers to.
"""

import asyncio
import functools
import json
from typing import Annotated

import typer

from lcctl.cli.display import create_candidates_table, create_folders_table
from lcctl.core.registry import require_registry
from lcctl.folders.history import record_folder_deletions
from lcctl.folders.operator import FolderOperator
from lcctl.folders.reconciler import (
    ConfirmCallback,
    FolderDeletionError,
    FolderReconciler,
    find_orphan_folders,
)
from lcctl.utils.formatting import (
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

app = typer.Typer(
    help="Inspect and clean up per-app data folders.",
    invoke_without_command=True,
    no_args_is_help=True,
)

NOTHING_TO_DELETE = "No data folder to remove. All data folders are in use."


@app.command("list")
def list_folders(
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON."),
    ] = False,
) -> None:
    """List known data folders and the apps that use them."""
    registry = require_registry()
    unused = set(find_orphan_folders(registry.apps, registry.data_folder_names))

    if json_output:
        data = []
        for name in registry.data_folder_names:
            owner = registry.owner_of(name)
            data.append(
                {
                    "folder": name,
                    "in_use": name not in unused,
                    "bundle_id": owner.bundle_id if owner else None,
                }
            )
        console.print_json(json.dumps(data))
        return

    if not registry.data_folder_names:
        print_info(f"No data folders in {registry.data_dir}")
        return

    console.print(create_folders_table(registry, unused))
    console.print(
        f"\n[dim]{len(registry.data_folder_names)} data folder(s), {len(unused)} unused[/dim]"
    )


@app.command()
def clean(
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show unused folders without deleting."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete data folders that no registered app uses."""
    registry = require_registry()
    candidates = find_orphan_folders(registry.apps, registry.data_folder_names)

    if candidates:
        console.print(create_candidates_table(candidates, registry.data_dir, dry_run))

    if dry_run:
        if candidates:
            print_info(f"Dry-run: {len(candidates)} unused data folder(s) would be deleted.")
        else:
            print_info(NOTHING_TO_DELETE)
        return

    operator = FolderOperator(registry.data_dir)
    reconciler = FolderReconciler(operator.delete_folder)
    confirm: ConfirmCallback = _assume_yes if yes else _prompt_confirm

    try:
        result = asyncio.run(
            reconciler.run(registry.apps, registry.data_folder_names, confirm)
        )
    except FolderDeletionError as e:
        if e.deleted:
            _record_history(list(e.deleted), error=e.message)
        print_error(e.message)
        raise typer.Exit(code=1) from e

    if result.cancelled:
        if result.candidates:
            print_info("Aborted.")
        return

    if result.deleted_count == 0:
        print_info(NOTHING_TO_DELETE)
        return

    _record_history(list(result.deleted))
    print_success(f"Deleted {result.deleted_count} unused data folder(s).")


# === Private helper functions ===


async def _prompt_confirm(candidate_count: int) -> bool:
    """Ask the user whether to delete the unused folders.

    With nothing to delete, only an informational message is shown and
    dismissing it counts as a cancel.
    """
    if candidate_count == 0:
        print_info(NOTHING_TO_DELETE)
        return False

    prompt = functools.partial(
        typer.confirm,
        f"\nDo you want to delete {candidate_count} unused data folder(s)?",
        default=False,
    )
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, prompt)


async def _assume_yes(candidate_count: int) -> bool:
    """Confirm without prompting (--yes)."""
    return True


def _record_history(deleted: list[str], error: str | None = None) -> None:
    """Record deletions to history, warning instead of failing."""
    try:
        record_folder_deletions(deleted, error=error)
    except (OSError, RuntimeError) as e:
        print_warning(f"Could not record to history: {e}")

