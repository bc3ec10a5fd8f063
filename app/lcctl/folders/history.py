"""Data folder history recording.

Records data folder deletions to the shared history file, enabling
audit trails for clean up runs.
"""

from lcctl.core.state import StateManager
from lcctl.models.history import HistoryActionType, HistoryItem, create_history_entry


def record_folder_deletions(
    deleted_names: list[str],
    command: str = "lcctl data clean",
    error: str | None = None,
) -> None:
    """Record deleted data folders to history.

    A run that stopped on a failed deletion is recorded with
    success=False and the error message in its metadata.

    Args:
        deleted_names: Data folder names that were deleted.
        command: Command that triggered the deletions.
        error: Error that stopped the run, if any.

    Raises:
        ValueError: If deleted_names is empty.
    """
    items = [HistoryItem(name=name, domain="data") for name in deleted_names]

    metadata: dict[str, object] = {"command": command, "deleted_count": len(deleted_names)}
    if error is not None:
        metadata["error"] = error

    entry = create_history_entry(
        action_type=HistoryActionType.FOLDER_DELETE,
        items=items,
        success=error is None,
        metadata=metadata,
    )

    StateManager().record_action(entry)
