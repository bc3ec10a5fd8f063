"""Data folder deletion operator.

Deletes a single per-app data folder under the base data path and
reports the outcome as a result object instead of raising.
"""

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from lcctl.core.paths import get_data_dir

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FolderActionResult:
    """Result of a single data folder deletion.

    Attributes:
        name: Data folder name that was operated on.
        path: Absolute path that was operated on.
        success: Whether the folder was deleted.
        error: Error message if the deletion failed, None otherwise.
    """

    name: str
    path: str
    success: bool
    error: str | None = None


class FolderOperator:
    """Deletes data folders under a base data path.

    Attributes:
        _data_dir: Base data path that folder names are joined onto.
    """

    def __init__(self, data_dir: Path | None = None) -> None:
        """Initialize the FolderOperator.

        Args:
            data_dir: Base data path. Default: the launcher data path.
        """
        self._data_dir = data_dir if data_dir is not None else get_data_dir()

    @property
    def data_dir(self) -> Path:
        """Base data path."""
        return self._data_dir

    def delete_folder(self, name: str) -> FolderActionResult:
        """Delete one data folder by name.

        A folder that no longer exists is reported as a failure.

        Args:
            name: Data folder name (a single path component).

        Returns:
            FolderActionResult indicating success or failure.
        """
        target = self._data_dir / name

        if not _is_plain_name(name):
            return FolderActionResult(
                name=name,
                path=str(target),
                success=False,
                error=f"Invalid data folder name: {name!r}",
            )

        try:
            # Directories (but not symlinks to directories)
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            elif target.exists() or target.is_symlink():
                target.unlink()
            else:
                return FolderActionResult(
                    name=name,
                    path=str(target),
                    success=False,
                    error=f"Folder does not exist: {target}",
                )
        except OSError as e:
            logger.debug("Deleting %s failed: %s", target, e)
            return FolderActionResult(name=name, path=str(target), success=False, error=str(e))

        logger.info("Deleted data folder %s", target)
        return FolderActionResult(name=name, path=str(target), success=True)


def _is_plain_name(name: str) -> bool:
    """Check that name is a single path component."""
    if name in ("", ".", ".."):
        return False
    if os.sep in name:
        return False
    return not (os.altsep and os.altsep in name)
