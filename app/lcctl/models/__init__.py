"""Data models for lcctl.

This module exports the app and history models.
"""

from lcctl.models.app import AppInfo
from lcctl.models.history import (
    HistoryActionType,
    HistoryEntry,
    HistoryItem,
    create_history_entry,
)

__all__ = [
    "AppInfo",
    "HistoryActionType",
    "HistoryEntry",
    "HistoryItem",
    "create_history_entry",
]
