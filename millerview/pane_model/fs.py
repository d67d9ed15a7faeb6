"""Filesystem access used by the pane model.

Every read of the real filesystem made by panes goes through this module:
canonicalization, directory scans, and entry-kind probes.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class DirectoryUnreadable(OSError):
    """Raised when a directory listing cannot be read."""

    def __init__(self, directory: Path, reason: str = "") -> None:
        self.directory = directory
        message = f"cannot read directory {directory}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


def canonical_path(path: Path) -> Path | None:
    """Return the absolute, symlink-resolved form of ``path``.

    Returns ``None`` when ``path`` does not exist or cannot be resolved
    (dangling link, symlink loop, permission error on a component).
    """
    try:
        return Path(path).resolve(strict=True)
    except (OSError, RuntimeError):
        return None


def scan_directory(directory: Path) -> list[Path]:
    """Return child paths of ``directory`` in filesystem order.

    Raises ``DirectoryUnreadable`` when the listing fails.
    """
    try:
        with os.scandir(directory) as entries:
            children = [directory / entry.name for entry in entries]
    except OSError as exc:
        logger.warning("scan failed for %s: %s", directory, exc)
        raise DirectoryUnreadable(directory, exc.strerror or str(exc)) from exc
    return children


def is_directory(path: Path) -> bool:
    """Return whether ``path`` is a directory, following symlinks."""
    try:
        return path.is_dir()
    except OSError:
        return False


def is_regular_file(path: Path) -> bool:
    """Return whether ``path`` is a regular file, following symlinks."""
    try:
        return path.is_file()
    except OSError:
        return False


def safe_file_size(path: Path) -> int | None:
    """Return file size for ``path`` or ``None`` on stat failure."""
    try:
        return int(path.stat().st_size)
    except OSError:
        return None


__all__ = [
    "DirectoryUnreadable",
    "canonical_path",
    "scan_directory",
    "is_directory",
    "is_regular_file",
    "safe_file_size",
]
