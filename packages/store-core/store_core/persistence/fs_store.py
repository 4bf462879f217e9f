"""
Store Filesystem Implementation.

Local-disk FileAccess rooted at a base directory.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from .interfaces import FileAccess, ReadResult

logger = logging.getLogger(__name__)


def get_store_home() -> Path:
    """
    Get the store home directory.

    Uses STORE_HOME env var, then ``storage.root`` from config, then
    defaults to ~/.versioned-store
    """
    home = os.environ.get("STORE_HOME")
    if home:
        return Path(home).expanduser()

    from ..services.config_service import get_storage_settings

    root = get_storage_settings().get("root")
    if root:
        return Path(root).expanduser()
    return Path.home() / ".versioned-store"


class LocalFileAccess(FileAccess):
    """
    Filesystem-based store access.

    Resolves relative store paths against {base_dir}.
    """

    def __init__(self, base_dir: Optional[Path] = None):
        """
        Initialize the accessor.

        Args:
            base_dir: Base directory (default: STORE_HOME)
        """
        if base_dir is None:
            base_dir = get_store_home()
        self.base_dir = Path(base_dir)

    def _get_path(self, path: str) -> Path:
        """Resolve a relative store path under the base directory."""
        full = (self.base_dir / path).resolve()
        # absolute paths and ".." segments must not escape the base directory
        if not full.is_relative_to(self.base_dir.resolve()):
            raise PermissionError(f"Store path escapes {self.base_dir}: {path}")
        return full

    def exists(self, path: str) -> bool:
        try:
            return self._get_path(path).is_file()
        except PermissionError as e:
            logger.warning(str(e))
            return False

    def read_text(self, path: str) -> ReadResult:
        full = path
        try:
            full = self._get_path(path)
            with open(full, "r", encoding="utf-8") as f:
                return ReadResult(content=f.read(), success=True)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read {full}: {e}")
            return ReadResult()

    def write_text(self, path: str, content: str) -> None:
        full = self._get_path(path)
        full.parent.mkdir(parents=True, exist_ok=True)
        with open(full, "w", encoding="utf-8") as f:
            f.write(content)

    def delete(self, path: str) -> None:
        self._get_path(path).unlink()
