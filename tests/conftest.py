"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Iterator
from pathlib import Path

import pytest
from lcctl.core.registry import AppRegistry
from lcctl.models.app import AppInfo
from lcctl.utils.formatting import set_quiet


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point all XDG directories at a temporary home."""
    home = tmp_path / "home"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(home / ".local" / "state"))
    monkeypatch.setenv("XDG_DATA_HOME", str(home / ".local" / "share"))
    monkeypatch.delenv("LCCTL_DATA_DIR", raising=False)
    return home


@pytest.fixture(autouse=True)
def reset_quiet() -> Iterator[None]:
    """Restore normal output after tests that pass --quiet."""
    yield
    set_quiet(False)


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Base data path with no folders yet."""
    path = tmp_path / "Data" / "Application"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def sample_apps() -> list[AppInfo]:
    """Two apps with data folders and one without."""
    return [
        AppInfo(bundle_id="com.example.notes", name="Notes", data_folder="A"),
        AppInfo(bundle_id="com.example.maps", name="Maps", data_folder="B"),
        AppInfo(bundle_id="com.example.fresh", name="Fresh"),
    ]


@pytest.fixture
def sample_registry(data_dir: Path, sample_apps: list[AppInfo]) -> AppRegistry:
    """Registry with folders A, B (in use) and C (unused) on disk."""
    for name in ("A", "B", "C"):
        (data_dir / name).mkdir()
        (data_dir / name / "Library").mkdir()
        (data_dir / name / "Library" / "prefs.plist").write_text("data")
    return AppRegistry(apps=sample_apps, data_folder_names=["A", "B", "C"], data_dir=data_dir)
