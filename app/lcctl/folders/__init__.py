"""Data folder reconciliation module.

This module finds per-app data folders that no registered app refers
to and deletes them after confirmation.
"""

from lcctl.folders.history import record_folder_deletions
from lcctl.folders.operator import FolderActionResult, FolderOperator
from lcctl.folders.reconciler import (
    ConfirmCallback,
    DeleteFolder,
    FolderDeletionError,
    FolderReconciler,
    ReconcileInProgressError,
    ReconcileResult,
    ReconcileState,
    find_orphan_folders,
    reconcile,
)

__all__ = [
    "ConfirmCallback",
    "DeleteFolder",
    "FolderActionResult",
    "FolderDeletionError",
    "FolderOperator",
    "FolderReconciler",
    "ReconcileInProgressError",
    "ReconcileResult",
    "ReconcileState",
    "find_orphan_folders",
    "reconcile",
    "record_folder_deletions",
]
