"""Unit tests for app registry I/O.

Tests loading apps from apps.toml, discovering data folders on disk,
saving the registry, and the CLI helper that exits on error.
"""

from pathlib import Path

import pytest
import tomli_w
import typer
from lcctl.core.paths import get_data_dir, get_registry_path
from lcctl.core.registry import (
    AppRegistry,
    RegistryError,
    RegistryNotFoundError,
    RegistryParseError,
    RegistryValidationError,
    discover_data_folders,
    load_apps,
    load_registry,
    require_registry,
)
from lcctl.models.app import AppInfo


def _write_registry(path: Path, apps: list[dict[str, str]]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(tomli_w.dumps({"apps": apps}).encode())
    return path


class TestLoadApps:
    """Tests for load_apps."""

    def test_loads_apps_in_file_order(self, tmp_path: Path) -> None:
        """Apps come back as AppInfo in file order."""
        path = _write_registry(
            tmp_path / "apps.toml",
            [
                {"bundle_id": "com.example.notes", "name": "Notes", "data_folder": "A"},
                {"bundle_id": "com.example.fresh"},
            ],
        )

        apps = load_apps(path)

        assert apps == [
            AppInfo(bundle_id="com.example.notes", name="Notes", data_folder="A"),
            AppInfo(bundle_id="com.example.fresh", name="com.example.fresh"),
        ]

    def test_empty_registry(self, tmp_path: Path) -> None:
        """A file without apps yields no apps."""
        path = tmp_path / "apps.toml"
        path.write_text("")

        assert load_apps(path) == []

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing registry raises RegistryNotFoundError."""
        with pytest.raises(RegistryNotFoundError):
            load_apps(tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises RegistryParseError."""
        path = tmp_path / "apps.toml"
        path.write_text("[[apps]\n")

        with pytest.raises(RegistryParseError):
            load_apps(path)

    def test_unknown_field(self, tmp_path: Path) -> None:
        """Unknown keys are rejected."""
        path = _write_registry(tmp_path / "apps.toml", [{"bundle_id": "x", "color": "red"}])

        with pytest.raises(RegistryValidationError):
            load_apps(path)

    def test_empty_data_folder_rejected(self, tmp_path: Path) -> None:
        """An empty data folder string is invalid."""
        path = _write_registry(tmp_path / "apps.toml", [{"bundle_id": "x", "data_folder": ""}])

        with pytest.raises(RegistryValidationError):
            load_apps(path)

    def test_errors_share_base_class(self) -> None:
        """All registry errors derive from RegistryError."""
        assert issubclass(RegistryNotFoundError, RegistryError)
        assert issubclass(RegistryParseError, RegistryError)
        assert issubclass(RegistryValidationError, RegistryError)


class TestDiscoverDataFolders:
    """Tests for discover_data_folders."""

    def test_lists_directories_sorted(self, data_dir: Path) -> None:
        """Only visible directories are listed, sorted by name."""
        for name in ("C", "A", "B", ".hidden"):
            (data_dir / name).mkdir()
        (data_dir / "stray.txt").write_text("x")

        assert discover_data_folders(data_dir) == ["A", "B", "C"]

    def test_missing_directory(self, tmp_path: Path) -> None:
        """A missing base path means no folders."""
        assert discover_data_folders(tmp_path / "nope") == []


class TestLoadRegistry:
    """Tests for load_registry."""

    def test_combines_apps_and_folders(self, tmp_path: Path, data_dir: Path) -> None:
        """Apps come from the file, folders from disk."""
        path = _write_registry(
            tmp_path / "apps.toml",
            [{"bundle_id": "com.example.notes", "data_folder": "A"}],
        )
        (data_dir / "A").mkdir()
        (data_dir / "Z").mkdir()

        registry = load_registry(path, data_dir)

        assert [a.bundle_id for a in registry.apps] == ["com.example.notes"]
        assert registry.data_folder_names == ["A", "Z"]
        assert registry.data_dir == data_dir

    def test_uses_default_paths(self) -> None:
        """Default locations come from the XDG paths."""
        _write_registry(get_registry_path(), [])
        get_data_dir().mkdir(parents=True)
        (get_data_dir() / "A").mkdir()

        registry = load_registry()

        assert registry.data_folder_names == ["A"]
        assert registry.data_dir == get_data_dir()


class TestAppRegistry:
    """Tests for AppRegistry helpers."""

    def test_owner_of(self, sample_registry: AppRegistry) -> None:
        """owner_of finds the app using a folder."""
        owner = sample_registry.owner_of("B")

        assert owner is not None
        assert owner.bundle_id == "com.example.maps"

    def test_owner_of_unused(self, sample_registry: AppRegistry) -> None:
        """Unused folders have no owner."""
        assert sample_registry.owner_of("C") is None


class TestRequireRegistry:
    """Tests for require_registry."""

    def test_missing_registry_exits(self) -> None:
        """A missing registry exits with code 1."""
        with pytest.raises(typer.Exit) as exc_info:
            require_registry()

        assert exc_info.value.exit_code == 1

    def test_invalid_registry_exits(self) -> None:
        """A broken registry exits with code 1."""
        path = get_registry_path()
        path.parent.mkdir(parents=True)
        path.write_text("not = [valid")

        with pytest.raises(typer.Exit):
            require_registry()

    def test_returns_registry(self) -> None:
        """A valid registry is returned."""
        _write_registry(get_registry_path(), [{"bundle_id": "x", "data_folder": "A"}])

        registry = require_registry()

        assert registry.apps[0].data_folder == "A"
