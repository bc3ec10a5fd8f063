"""XDG-compliant path management for lcctl.

This module provides standardized paths following the XDG Base Directory
Specification for configuration, state, and launcher data storage.

XDG defaults:
- Config: ~/.config/lcctl/
- State: ~/.local/state/lcctl/
- Data: ~/.local/share/lcctl/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "lcctl"

# Environment override for the per-app data folder root
DATA_DIR_ENV = "LCCTL_DATA_DIR"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/lcctl/ (or XDG_CONFIG_HOME/lcctl/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_state_dir() -> Path:
    """Get the state directory path.

    State data includes the history file, which should persist
    between runs but is not configuration.

    Returns:
        Path to ~/.local/state/lcctl/ (or XDG_STATE_HOME/lcctl/).
    """
    return _get_xdg_dir("XDG_STATE_HOME", ".local/state")


def get_launcher_home() -> Path:
    """Get the launcher home directory.

    Holds the app registry and the per-app data folder root.

    Returns:
        Path to ~/.local/share/lcctl/ (or XDG_DATA_HOME/lcctl/).
    """
    return _get_xdg_dir("XDG_DATA_HOME", ".local/share")


def get_data_dir() -> Path:
    """Get the base data path under which per-app data folders live.

    Returns:
        Path from LCCTL_DATA_DIR if set, else ~/.local/share/lcctl/Data/Application.
    """
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override)
    return get_launcher_home() / "Data" / "Application"


def get_registry_path() -> Path:
    """Get the app registry file path.

    Returns:
        Path to ~/.local/share/lcctl/apps.toml.
    """
    return get_launcher_home() / "apps.toml"


def get_settings_path() -> Path:
    """Get the launcher settings file path.

    Returns:
        Path to ~/.config/lcctl/settings.toml.
    """
    return get_config_dir() / "settings.toml"


def get_history_path() -> Path:
    """Get the history file path.

    Returns:
        Path to ~/.local/state/lcctl/history.jsonl.
    """
    return get_state_dir() / "history.jsonl"


def _ensure_dir(path: Path, name: str) -> Path:
    """Create directory if it doesn't exist.

    Args:
        path: Directory path to create.
        name: Human-readable name for error messages.

    Returns:
        The created/existing directory path.

    Raises:
        RuntimeError: If directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create {name} directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create {name} directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path


def ensure_config_dir() -> Path:
    """Create the configuration directory if it doesn't exist.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    return _ensure_dir(get_config_dir(), "config")


def ensure_state_dir() -> Path:
    """Create the state directory if it doesn't exist.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    return _ensure_dir(get_state_dir(), "state")


def ensure_data_dir() -> Path:
    """Create the per-app data folder root if it doesn't exist.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    return _ensure_dir(get_data_dir(), "data")
