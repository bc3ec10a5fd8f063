"""Launcher settings and their persistence.

This module provides the settings model and I/O functions for the
launcher's boolean toggles. Settings are read once per command and
written back whenever a toggle changes.

Configuration is stored in ~/.config/lcctl/settings.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from lcctl.core.paths import get_settings_path

logger = logging.getLogger(__name__)

# Keys used by earlier launcher builds, mapped to current field names
LEGACY_KEYS: dict[str, str] = {
    "LCIgnoreALTCertificate": "ignore_alt_certificate",
    "LCFrameShortcutIcons": "frame_short_icons",
    "LCSwitchAppWithoutAsking": "switch_app_without_asking",
    "LCLoadTweaksToSelf": "load_tweaks_to_self",
}

SETTING_DESCRIPTIONS: dict[str, str] = {
    "ignore_alt_certificate": "Ignore ALTCertificate.p12. Enable this if apps are re-signed often.",
    "frame_short_icons": "Frame shortcut icons with the launcher icon.",
    "switch_app_without_asking": (
        "Switch app immediately instead of asking first. Any unsaved data will be lost."
    ),
    "load_tweaks_to_self": (
        "Load tweaks from the global Tweaks folder into the launcher itself."
    ),
}


class LauncherSettings(BaseModel):
    """Boolean toggles of the launcher.

    Attributes:
        ignore_alt_certificate: Ignore the bundled ALTCertificate.p12.
        frame_short_icons: Frame shortcut icons with the launcher icon.
        switch_app_without_asking: Switch apps without a confirmation prompt.
        load_tweaks_to_self: Load global tweaks into the launcher itself.
    """

    model_config = ConfigDict(extra="forbid")

    ignore_alt_certificate: Annotated[
        bool,
        Field(description="Ignore ALTCertificate.p12"),
    ] = False
    frame_short_icons: Annotated[
        bool,
        Field(description="Frame shortcut icons with the launcher icon"),
    ] = False
    switch_app_without_asking: Annotated[
        bool,
        Field(description="Switch app without asking"),
    ] = False
    load_tweaks_to_self: Annotated[
        bool,
        Field(description="Load tweaks to the launcher itself"),
    ] = False


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


def setting_names() -> list[str]:
    """Return the names of all settings in declaration order."""
    return list(LauncherSettings.model_fields)


def load_settings(path: Path | None = None) -> LauncherSettings:
    """Load launcher settings from a TOML file.

    A missing file yields the defaults.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated LauncherSettings object.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the file cannot be read or doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        logger.debug("No settings file at %s, using defaults", settings_path)
        return LauncherSettings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    for legacy_key, field_name in LEGACY_KEYS.items():
        if legacy_key in data:
            logger.warning(
                "Deprecated key '%s' in settings.toml. Migrating to '%s'. Remove it from %s",
                legacy_key,
                field_name,
                settings_path,
            )
            value = data.pop(legacy_key)
            data.setdefault(field_name, value)

    try:
        return LauncherSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings content: {e}") from e


def save_settings(settings: LauncherSettings, path: Path | None = None) -> Path:
    """Save launcher settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        settings: The settings to save.
        path: Path to save to. If None, uses the default path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()

    tmp_path: Path | None = None
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(settings.model_dump(), f)
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path


def update_setting(name: str, value: bool, path: Path | None = None) -> LauncherSettings:
    """Change one toggle and persist the result.

    Args:
        name: Setting name (see setting_names()).
        value: New value.
        path: Settings file path. If None, uses the default path.

    Returns:
        The updated settings.

    Raises:
        SettingsError: If the name is unknown or the file cannot be
            read or written.
    """
    if name not in LauncherSettings.model_fields:
        valid = ", ".join(setting_names())
        raise SettingsError(f"Unknown setting '{name}'. Valid settings: {valid}")

    current = load_settings(path)
    updated = current.model_copy(update={name: value})
    save_settings(updated, path)
    logger.debug("Setting %s changed to %s", name, value)
    return updated
