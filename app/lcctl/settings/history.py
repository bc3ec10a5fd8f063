"""Settings history recording."""

from lcctl.core.state import StateManager
from lcctl.models.history import HistoryActionType, HistoryItem, create_history_entry


def record_setting_change(name: str, value: bool, command: str = "lcctl settings set") -> None:
    """Record a changed launcher setting to history.

    Args:
        name: Setting name.
        value: New value.
        command: Command that triggered the change.
    """
    entry = create_history_entry(
        action_type=HistoryActionType.SETTING_CHANGE,
        items=[HistoryItem(name=name, domain="settings", detail="on" if value else "off")],
        metadata={"command": command},
    )

    StateManager().record_action(entry)
