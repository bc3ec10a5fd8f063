"""Shared Rich display functions for data folders and settings.

Provides reusable table builders for listing data folders, planned
deletions, and launcher settings across CLI commands.
"""

from pathlib import Path

from rich.table import Table

from lcctl.core.registry import AppRegistry
from lcctl.settings.config import SETTING_DESCRIPTIONS, LauncherSettings
from lcctl.utils.formatting import create_table, format_toggle


def create_folders_table(registry: AppRegistry, unused: set[str]) -> Table:
    """Create a Rich table of known data folders and their owners.

    Args:
        registry: Registry holding apps and folder names.
        unused: Folder names that no app refers to.

    Returns:
        Rich Table with Folder, Status and App columns.
    """
    table = create_table("Data Folders")
    table.add_column("Folder", no_wrap=True)
    table.add_column("Status", width=8)
    table.add_column("App")

    for name in registry.data_folder_names:
        if name in unused:
            table.add_row(
                f"[folder_orphan]{name}[/]",
                "[warning]unused[/]",
                "[muted]-[/]",
            )
            continue
        owner = registry.owner_of(name)
        owner_text = f"{owner.name} [muted]({owner.bundle_id})[/]" if owner else "-"
        table.add_row(f"[folder_owned]{name}[/]", "[success]in use[/]", owner_text)

    return table


def create_candidates_table(names: list[str], data_dir: Path, dry_run: bool = False) -> Table:
    """Create a Rich table of data folders planned for deletion.

    Args:
        names: Unused folder names in deletion order.
        data_dir: Base data path, used to measure folder sizes.
        dry_run: Whether this is a dry-run (changes table title).

    Returns:
        Rich Table with Folder and Size columns.
    """
    title = "Unused Data Folders (dry-run)" if dry_run else "Unused Data Folders"
    table = create_table(title)
    table.add_column("Folder", no_wrap=True)
    table.add_column("Size", style="info", justify="right", width=10)

    for name in names:
        table.add_row(f"[folder_candidate]{name}[/]", format_size(folder_size(data_dir / name)))

    return table


def create_settings_table(settings: LauncherSettings) -> Table:
    """Create a Rich table of launcher settings.

    Args:
        settings: Current settings.

    Returns:
        Rich Table with Setting, Value and Description columns.
    """
    table = create_table("Launcher Settings")
    table.add_column("Setting", no_wrap=True)
    table.add_column("Value", width=6, justify="center")
    table.add_column("Description", style="muted")

    for name, value in settings.model_dump().items():
        table.add_row(name, format_toggle(value), SETTING_DESCRIPTIONS.get(name, ""))

    return table


def folder_size(path: Path) -> int | None:
    """Return the total size in bytes of files under path, or None if unreadable."""
    try:
        if not path.is_dir():
            return None
        return sum(p.stat().st_size for p in path.rglob("*") if p.is_file())
    except OSError:
        return None


def format_size(size_bytes: int | None) -> str:
    """Format byte count as human-readable string."""
    if size_bytes is None:
        return "-"
    if size_bytes == 0:
        return "0 B"
    size = float(size_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if abs(size) < 1024:
            return f"{size:.1f} {unit}" if unit != "B" else f"{int(size)} B"
        size /= 1024
    return f"{size:.1f} TB"
