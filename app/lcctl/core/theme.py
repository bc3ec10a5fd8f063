"""Color theme for lcctl output.

Colors are grouped by what they mark: general text, message status,
data folder ownership, and setting toggles. The bundled data/theme.toml
holds the defaults; ~/.config/lcctl/theme.toml may override any subset,
section by section.
"""

import functools
import logging
import tomllib
from importlib import resources
from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from rich.theme import Theme

from lcctl.core.paths import get_config_dir

logger = logging.getLogger(__name__)

HexColor = Annotated[str, Field(pattern=r"^#(?:[0-9a-fA-F]{3}){1,2}$")]


class _Section(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class TextColors(_Section):
    """Plain text, table headers and borders."""

    muted: HexColor = "#b2bec3"
    header: HexColor = "#69B9A1"
    border: HexColor = "#29526d"


class StatusColors(_Section):
    """Message severities."""

    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    info: HexColor = "#0ec1c8"


class FolderColors(_Section):
    """Data folder names by ownership."""

    owned: HexColor = "#69B9A1"
    orphan: HexColor = "#f5b332"
    candidate: HexColor = "#f53263"


class SettingColors(_Section):
    """Setting toggle values."""

    on: HexColor = "#03b971"
    off: HexColor = "#226666"


class ThemeColors(_Section):
    """All theme colors, one section per TOML table."""

    text: TextColors = TextColors()
    status: StatusColors = StatusColors()
    folders: FolderColors = FolderColors()
    settings: SettingColors = SettingColors()

    def styles(self) -> dict[str, str]:
        """Map the Rich style names used in markup to style strings."""
        return {
            "muted": self.text.muted,
            "dim": self.text.muted,
            "header": self.text.header,
            "bold_header": f"bold {self.text.header}",
            "border": self.text.border,
            "success": self.status.success,
            "warning": self.status.warning,
            "error": f"bold {self.status.error}",
            "info": self.status.info,
            "folder_owned": self.folders.owned,
            "folder_orphan": f"bold {self.folders.orphan}",
            "folder_candidate": self.folders.candidate,
            "setting_on": f"bold {self.settings.on}",
            "setting_off": self.settings.off,
        }


def get_user_theme_path() -> Path:
    """Get the user theme override path (~/.config/lcctl/theme.toml)."""
    return get_config_dir() / "theme.toml"


def _read_sections(source: Any) -> dict[str, dict[str, Any]]:
    """Read the section tables of a theme file, ignoring non-table keys."""
    with source.open("rb") as f:
        data = tomllib.load(f)
    return {name: table for name, table in data.items() if isinstance(table, dict)}


def load_colors(user_path: Path | None = None) -> ThemeColors:
    """Load the bundled colors and apply the user's overrides.

    An unreadable or invalid user file is logged and ignored.

    Args:
        user_path: Override file. If None, uses the default path.

    Returns:
        Validated ThemeColors.
    """
    sections = _read_sections(resources.files("lcctl.data").joinpath("theme.toml"))

    user_path = user_path or get_user_theme_path()
    if not user_path.exists():
        return ThemeColors.model_validate(sections)

    try:
        overrides = _read_sections(user_path)
        merged = {
            name: {**sections.get(name, {}), **overrides.get(name, {})}
            for name in sections.keys() | overrides.keys()
        }
        colors = ThemeColors.model_validate(merged)
    except (OSError, tomllib.TOMLDecodeError, ValidationError) as e:
        logger.warning("Ignoring theme overrides in %s: %s", user_path, e)
        return ThemeColors.model_validate(sections)

    logger.debug("Loaded theme overrides from %s", user_path)
    return colors


@functools.cache
def get_theme() -> Theme:
    """Get the Rich theme, loaded once per process."""
    return Theme(load_colors().styles())
