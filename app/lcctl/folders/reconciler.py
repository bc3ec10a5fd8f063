"""Reconciliation of data folders against registered apps.

Finds data folders that no registered app refers to, asks for
confirmation through an injected async callback, and deletes the
folders one by one while keeping the known folder list in step with
the disk.

A run moves through these states:

    IDLE -> AWAITING_CONFIRMATION -> CANCELLED
                                  -> DELETING -> COMPLETED
                                              -> FAILED
"""

import logging
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from enum import Enum

from lcctl.folders.operator import FolderActionResult
from lcctl.models.app import AppInfo

logger = logging.getLogger(__name__)

# Receives the number of candidate folders, resolves True to delete them.
ConfirmCallback = Callable[[int], Awaitable[bool]]

# Deletes one folder by name under the base data path.
DeleteFolder = Callable[[str], FolderActionResult]


class ReconcileState(str, Enum):
    """State of a reconciliation run.

    Attributes:
        IDLE: No run has started on this reconciler.
        AWAITING_CONFIRMATION: Waiting for the confirm callback to resolve.
        CANCELLED: The user declined; nothing was changed.
        DELETING: Candidate folders are being deleted.
        COMPLETED: Every candidate folder was deleted.
        FAILED: A deletion failed; earlier deletions were kept.
    """

    IDLE = "idle"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    CANCELLED = "cancelled"
    DELETING = "deleting"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_running(self) -> bool:
        """Whether a run is in flight in this state."""
        return self in (ReconcileState.AWAITING_CONFIRMATION, ReconcileState.DELETING)


@dataclass(frozen=True, slots=True)
class ReconcileResult:
    """Outcome of a run that did not fail.

    Attributes:
        status: CANCELLED or COMPLETED.
        candidates: Unused folder names that were offered for deletion.
        deleted: Folder names actually deleted, in deletion order.
    """

    status: ReconcileState
    candidates: tuple[str, ...]
    deleted: tuple[str, ...] = ()

    @property
    def deleted_count(self) -> int:
        """Number of folders deleted."""
        return len(self.deleted)

    @property
    def cancelled(self) -> bool:
        """Whether the user declined the deletion."""
        return self.status == ReconcileState.CANCELLED


class FolderDeletionError(Exception):
    """Raised when deleting a candidate folder fails.

    Folders deleted before the failure stay deleted and are already
    removed from the known folder list.

    Attributes:
        message: Underlying error message.
        folder: Folder name whose deletion failed.
        deleted: Folder names deleted before the failure.
    """

    def __init__(self, message: str, folder: str, deleted: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.folder = folder
        self.deleted: tuple[str, ...] = tuple(deleted)

    @property
    def partial_deleted_count(self) -> int:
        """Number of folders deleted before the failure."""
        return len(self.deleted)


class ReconcileInProgressError(RuntimeError):
    """Raised when a run is started while another is in flight."""


def find_orphan_folders(apps: Iterable[AppInfo], known_folders: Iterable[str]) -> list[str]:
    """Return known folder names that no app refers to.

    Apps without a data folder contribute nothing. Order follows
    known_folders, and a repeated name is listed once per occurrence.

    Args:
        apps: Registered apps.
        known_folders: Known data folder names.

    Returns:
        Unused folder names in their original order.
    """
    referenced: set[str] = set()
    for app in apps:
        folder = app.data_folder_no_assign()
        if folder is not None:
            referenced.add(folder)

    return [name for name in known_folders if name not in referenced]


class FolderReconciler:
    """Deletes unused data folders after confirmation.

    One run at a time per instance; callers sharing a known folder list
    must share the reconciler too so runs cannot interleave.
    """

    def __init__(self, delete_folder: DeleteFolder) -> None:
        """Initialize the FolderReconciler.

        Args:
            delete_folder: Primitive that deletes one folder by name.
        """
        self._delete_folder = delete_folder
        self._state = ReconcileState.IDLE

    @property
    def state(self) -> ReconcileState:
        """Current run state."""
        return self._state

    async def run(
        self,
        apps: Iterable[AppInfo],
        known_folders: list[str],
        confirm: ConfirmCallback,
    ) -> ReconcileResult:
        """Find unused folders, confirm, and delete them.

        confirm is awaited exactly once, even when there is nothing to
        delete. There is no timeout on it.

        Args:
            apps: Registered apps. Never modified.
            known_folders: Known data folder names. Every occurrence of a
                deleted name is removed in place right after its deletion.
            confirm: Async callback given the candidate count.

        Returns:
            ReconcileResult with status CANCELLED or COMPLETED.

        Raises:
            ReconcileInProgressError: If a run is already in flight.
            FolderDeletionError: On the first failed deletion.
        """
        if self._state.is_running:
            msg = f"Reconciliation already in progress ({self._state.value})"
            raise ReconcileInProgressError(msg)

        candidates = find_orphan_folders(apps, known_folders)
        logger.debug("Found %d unused data folder(s): %s", len(candidates), candidates)

        self._state = ReconcileState.AWAITING_CONFIRMATION
        try:
            confirmed = await confirm(len(candidates))
        except BaseException:
            self._state = ReconcileState.IDLE
            raise

        if not confirmed:
            logger.info("Data folder clean up cancelled")
            self._state = ReconcileState.CANCELLED
            return ReconcileResult(status=ReconcileState.CANCELLED, candidates=tuple(candidates))

        self._state = ReconcileState.DELETING
        deleted: list[str] = []
        for name in candidates:
            error = self._delete(name)
            if error is not None:
                self._state = ReconcileState.FAILED
                logger.info(
                    "Stopped after %d of %d folder(s): %s",
                    len(deleted),
                    len(candidates),
                    error,
                )
                raise FolderDeletionError(error, folder=name, deleted=deleted)

            known_folders[:] = [known for known in known_folders if known != name]
            deleted.append(name)

        self._state = ReconcileState.COMPLETED
        logger.info("Deleted %d unused data folder(s)", len(deleted))
        return ReconcileResult(
            status=ReconcileState.COMPLETED,
            candidates=tuple(candidates),
            deleted=tuple(deleted),
        )

    def _delete(self, name: str) -> str | None:
        """Delete one folder, returning an error message on failure."""
        try:
            result = self._delete_folder(name)
        except OSError as e:
            return str(e) or f"Failed to delete {name}"
        if result.success:
            return None
        return result.error or f"Failed to delete {name}"


async def reconcile(
    apps: Iterable[AppInfo],
    known_folders: list[str],
    confirm: ConfirmCallback,
    delete_folder: DeleteFolder,
) -> ReconcileResult:
    """Run a one-off reconciliation with a fresh FolderReconciler.

    See FolderReconciler.run for the arguments and errors.
    """
    return await FolderReconciler(delete_folder).run(apps, known_folders, confirm)
