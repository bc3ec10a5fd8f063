"""App model for registered launcher apps.

This module defines the data structure for an app known to the launcher
registry. Each app may own one data folder under the base data path.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppInfo:
    """Represents an app registered with the launcher.

    Immutable so that folder reconciliation can read apps without any
    risk of changing them.

    Attributes:
        bundle_id: Unique app identifier (e.g., "com.example.notes").
        name: Human-readable display name.
        data_folder: Name of the app's data folder, or None if the app
            has not been given one yet.
    """

    bundle_id: str
    name: str
    data_folder: str | None = None

    def __post_init__(self) -> None:
        """Validate app data after initialization."""
        if not self.bundle_id:
            msg = "Bundle identifier cannot be empty"
            raise ValueError(msg)
        if self.data_folder == "":
            msg = "Data folder name cannot be empty (use None for no folder)"
            raise ValueError(msg)

    def data_folder_no_assign(self) -> str | None:
        """Return the assigned data folder without assigning a new one.

        Returns:
            The data folder name, or None if the app has none yet.
        """
        return self.data_folder
