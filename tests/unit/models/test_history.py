"""Unit tests for history models.

Tests for HistoryItem, HistoryEntry and create_history_entry.
"""

import json

import pytest
from lcctl.models.history import (
    HistoryActionType,
    HistoryEntry,
    HistoryItem,
    create_history_entry,
)


class TestHistoryItem:
    """Tests for HistoryItem."""

    def test_to_dict_without_detail(self) -> None:
        """detail is omitted when None."""
        item = HistoryItem(name="A1B2", domain="data")

        assert item.to_dict() == {"name": "A1B2", "domain": "data"}

    def test_from_dict_with_detail(self) -> None:
        """detail is restored from the dictionary."""
        item = HistoryItem.from_dict(
            {"name": "frame_short_icons", "domain": "settings", "detail": "on"}
        )

        assert item == HistoryItem(name="frame_short_icons", domain="settings", detail="on")

    def test_empty_name_rejected(self) -> None:
        """An item needs a name."""
        with pytest.raises(ValueError, match="cannot be empty"):
            HistoryItem(name="", domain="data")


class TestHistoryEntry:
    """Tests for HistoryEntry."""

    @pytest.fixture
    def entry(self) -> HistoryEntry:
        """A partial folder deletion entry."""
        return HistoryEntry(
            id="abc123456789",
            timestamp="2026-01-26T14:30:00+00:00",
            action_type=HistoryActionType.FOLDER_DELETE,
            items=(HistoryItem(name="X", domain="data"),),
            success=False,
            metadata={"error": "Permission denied"},
        )

    def test_json_line_is_single_line(self, entry: HistoryEntry) -> None:
        """to_json_line produces compact JSON without newlines."""
        line = entry.to_json_line()

        assert "\n" not in line
        assert json.loads(line)["action_type"] == "folder_delete"

    def test_from_json_line(self, entry: HistoryEntry) -> None:
        """from_json_line restores an equal entry."""
        assert HistoryEntry.from_json_line(entry.to_json_line() + "\n") == entry

    def test_unknown_action_type(self) -> None:
        """Unknown action types are rejected."""
        data = {
            "id": "abc",
            "timestamp": "2026-01-26T14:30:00+00:00",
            "action_type": "install",
            "items": [{"name": "X", "domain": "data"}],
        }
        with pytest.raises(ValueError):
            HistoryEntry.from_dict(data)

    def test_requires_items(self) -> None:
        """An entry without items is invalid."""
        with pytest.raises(ValueError, match="at least one item"):
            HistoryEntry(
                id="abc",
                timestamp="2026-01-26T14:30:00+00:00",
                action_type=HistoryActionType.SETTING_CHANGE,
                items=(),
            )


class TestCreateHistoryEntry:
    """Tests for create_history_entry."""

    def test_generates_id_and_timestamp(self) -> None:
        """A 12-character id and an ISO timestamp are generated."""
        entry = create_history_entry(
            HistoryActionType.SETTING_CHANGE,
            [HistoryItem(name="load_tweaks_to_self", domain="settings", detail="off")],
        )

        assert len(entry.id) == 12
        assert "T" in entry.timestamp
        assert entry.success is True
        assert entry.metadata == {}

    def test_empty_items_rejected(self) -> None:
        """No items means nothing to record."""
        with pytest.raises(ValueError, match="no items"):
            create_history_entry(HistoryActionType.FOLDER_DELETE, [])
