"""Shell helper exposed as the `shell` capability."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


class Shell:
    """File operations used by commands."""

    def copy(self, src: str | Path, dst: str | Path, force: bool = True) -> Path:
        """Recursively copy a file or directory tree.

        Args:
            src: Source file or directory
            dst: Destination path (created)
            force: Overwrite files that already exist at the destination

        Returns:
            The destination path.
        """
        src, dst = Path(src), Path(dst)
        logger.debug(f"Copying {src} -> {dst}")
        if src.is_dir():
            shutil.copytree(src, dst, dirs_exist_ok=force)
        else:
            if dst.exists() and not force:
                raise FileExistsError(f"Destination exists: {dst}")
            dst.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(src, dst)
        return dst
