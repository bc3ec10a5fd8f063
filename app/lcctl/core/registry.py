"""App registry I/O.

The registry pairs the apps registered with the launcher (stored in
apps.toml) with the data folder names currently present under the base
data path. Folder reconciliation reads the apps and updates the folder
name list in place.
"""

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from lcctl.core.paths import get_data_dir, get_registry_path
from lcctl.models.app import AppInfo

logger = logging.getLogger(__name__)


class RegistryError(Exception):
    """Base exception for registry-related errors."""


class RegistryNotFoundError(RegistryError):
    """Raised when the registry file is not found."""


class RegistryParseError(RegistryError):
    """Raised when the registry file cannot be parsed."""


class RegistryValidationError(RegistryError):
    """Raised when registry content is invalid."""


class AppEntry(BaseModel):
    """A single [[apps]] table in apps.toml.

    Attributes:
        bundle_id: Unique app identifier.
        name: Display name (defaults to the bundle identifier).
        data_folder: Assigned data folder name, if any.
    """

    model_config = ConfigDict(extra="forbid")

    bundle_id: Annotated[str, Field(min_length=1, description="Unique app identifier")]
    name: Annotated[str | None, Field(description="Display name")] = None
    data_folder: Annotated[
        str | None,
        Field(min_length=1, description="Assigned data folder name"),
    ] = None


class RegistryFile(BaseModel):
    """Schema of apps.toml."""

    model_config = ConfigDict(extra="forbid")

    apps: Annotated[list[AppEntry], Field(description="Registered apps")] = []


@dataclass
class AppRegistry:
    """Registered apps and the data folders known to exist.

    Attributes:
        apps: Registered apps, read-only from the reconciler's view.
        data_folder_names: Known data folder names in order. Mutated in
            place as folders are deleted.
        data_dir: Base data path holding the folders.
    """

    apps: list[AppInfo] = field(default_factory=list)
    data_folder_names: list[str] = field(default_factory=list)
    data_dir: Path = field(default_factory=get_data_dir)

    def owner_of(self, folder_name: str) -> AppInfo | None:
        """Return the first app whose data folder is folder_name, if any."""
        for app in self.apps:
            if app.data_folder_no_assign() == folder_name:
                return app
        return None


def discover_data_folders(data_dir: Path) -> list[str]:
    """List data folder names present under the base data path.

    Hidden entries and plain files are ignored. A missing base path
    yields an empty list.

    Args:
        data_dir: Base data path.

    Returns:
        Folder names sorted alphabetically.

    Raises:
        RegistryError: If the directory cannot be listed.
    """
    if not data_dir.exists():
        logger.debug("Data directory %s does not exist yet", data_dir)
        return []

    try:
        names = [
            entry.name
            for entry in data_dir.iterdir()
            if entry.is_dir() and not entry.name.startswith(".")
        ]
    except OSError as e:
        raise RegistryError(f"Failed to list data directory {data_dir}: {e}") from e

    return sorted(names)


def load_apps(path: Path | None = None) -> list[AppInfo]:
    """Load registered apps from a TOML file.

    Args:
        path: Path to apps.toml. If None, uses the default registry path.

    Returns:
        Apps in file order.

    Raises:
        RegistryNotFoundError: If the registry file doesn't exist.
        RegistryParseError: If the TOML syntax is invalid.
        RegistryValidationError: If the content doesn't match the schema.
    """
    registry_path = path or get_registry_path()

    if not registry_path.exists():
        raise RegistryNotFoundError(f"Registry not found: {registry_path}")

    try:
        with open(registry_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise RegistryParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise RegistryError(f"Failed to read registry: {e}") from e

    try:
        parsed = RegistryFile.model_validate(data)
    except ValidationError as e:
        raise RegistryValidationError(f"Invalid registry content: {e}") from e

    return [
        AppInfo(
            bundle_id=entry.bundle_id,
            name=entry.name or entry.bundle_id,
            data_folder=entry.data_folder,
        )
        for entry in parsed.apps
    ]


def load_registry(path: Path | None = None, data_dir: Path | None = None) -> AppRegistry:
    """Load the app registry and discover the data folders on disk.

    Args:
        path: Path to apps.toml. If None, uses the default registry path.
        data_dir: Base data path. If None, uses the default data path.

    Returns:
        AppRegistry with apps and current folder names.

    Raises:
        RegistryError: If apps.toml cannot be loaded or the data
            directory cannot be listed.
    """
    base = data_dir or get_data_dir()
    apps = load_apps(path)
    folders = discover_data_folders(base)
    logger.debug("Loaded %d app(s) and %d data folder(s)", len(apps), len(folders))
    return AppRegistry(apps=apps, data_folder_names=folders, data_dir=base)


def require_registry(path: Path | None = None, data_dir: Path | None = None) -> AppRegistry:
    """Load the registry or exit with a helpful error message.

    Args:
        path: Optional custom apps.toml path.
        data_dir: Optional custom base data path.

    Returns:
        Loaded AppRegistry.

    Raises:
        typer.Exit: If the registry cannot be loaded.
    """
    import typer

    from lcctl.utils.formatting import print_error, print_info

    registry_path = path or get_registry_path()
    try:
        return load_registry(registry_path, data_dir)
    except RegistryNotFoundError as e:
        print_error(f"Registry not found: {registry_path}")
        print_info("Add one [[apps]] table per registered app to create it.")
        raise typer.Exit(code=1) from e
    except RegistryError as e:
        print_error(f"Failed to load registry: {e}")
        raise typer.Exit(code=1) from e
