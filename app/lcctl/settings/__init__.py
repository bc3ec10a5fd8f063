"""Launcher settings module.

This module exports the settings model and its load/save functions.
"""

from lcctl.settings.config import (
    SETTING_DESCRIPTIONS,
    LauncherSettings,
    SettingsError,
    SettingsParseError,
    load_settings,
    save_settings,
    setting_names,
    update_setting,
)

__all__ = [
    "SETTING_DESCRIPTIONS",
    "LauncherSettings",
    "SettingsError",
    "SettingsParseError",
    "load_settings",
    "save_settings",
    "setting_names",
    "update_setting",
]
