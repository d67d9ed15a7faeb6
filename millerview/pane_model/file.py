"""Placeholder pane for regular files.

File content is never read; the pane only carries the path, a scroll
offset, and metadata shown in place of a preview.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

from ..geometry import Rect
from .fs import canonical_path, safe_file_size

if TYPE_CHECKING:
    from .directory import DirectoryPane

PLAIN_TEXT_LABEL = "Plain text"


@lru_cache(maxsize=512)
def file_kind_label(file_name: str) -> str:
    """Return a human-readable file type resolved from the file name alone."""
    try:
        lexer = get_lexer_for_filename(file_name)
    except ClassNotFound:
        return PLAIN_TEXT_LABEL
    return str(lexer.name)


def format_size_label(size_bytes: int | None) -> str:
    """Format byte counts the way the directory panes label them."""
    if size_bytes is None:
        return "?"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    if size_bytes < 1024 * 1024:
        return f"{size_bytes // 1024} KB"
    return f"{size_bytes // (1024 * 1024)} MB"


class FilePane:
    """Pane standing in for a regular file at a canonical path."""

    def __init__(self, geometry: Rect, path: Path) -> None:
        self.geometry = geometry
        self._path = Path(path).resolve(strict=True)
        self.scroll = 0

    def __repr__(self) -> str:
        return f"FilePane({str(self._path)!r})"

    def path(self) -> Path:
        return self._path

    def file_name(self) -> str:
        return self._path.name

    def kind_label(self) -> str:
        return file_kind_label(self._path.name)

    def size_label(self) -> str:
        return format_size_label(safe_file_size(self._path))

    def derive_parent_pane(self) -> DirectoryPane | None:
        from .directory import DirectoryPane

        parent = canonical_path(self._path.parent)
        if parent is None:
            return None
        return DirectoryPane(self.geometry, parent)


__all__ = ["FilePane", "file_kind_label", "format_size_label"]
