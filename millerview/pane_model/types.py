"""Closed ``Pane`` union and the accessors that dispatch over it.

Callers never branch on pane kind themselves; every helper here checks both
variants explicitly and rejects anything else.
"""

from __future__ import annotations

from pathlib import Path

from ..geometry import Rect
from .directory import DirectoryPane
from .file import FilePane

Pane = DirectoryPane | FilePane


def _unknown_pane(pane: object) -> TypeError:
    return TypeError(f"not a pane: {type(pane).__name__}")


def pane_path(pane: Pane) -> Path:
    """Return the canonical path a pane is keyed by."""
    if isinstance(pane, DirectoryPane):
        return pane.directory_path()
    if isinstance(pane, FilePane):
        return pane.path()
    raise _unknown_pane(pane)


def pane_name(pane: Pane) -> str:
    if isinstance(pane, DirectoryPane):
        return pane.directory_name()
    if isinstance(pane, FilePane):
        return pane.file_name()
    raise _unknown_pane(pane)


def pane_geometry(pane: Pane) -> Rect:
    if isinstance(pane, (DirectoryPane, FilePane)):
        return pane.geometry
    raise _unknown_pane(pane)


def set_pane_geometry(pane: Pane, geometry: Rect) -> None:
    if isinstance(pane, (DirectoryPane, FilePane)):
        pane.geometry = geometry
        return
    raise _unknown_pane(pane)


def derive_parent_pane(pane: Pane) -> DirectoryPane | None:
    if isinstance(pane, (DirectoryPane, FilePane)):
        return pane.derive_parent_pane()
    raise _unknown_pane(pane)


def as_directory(pane: Pane | None) -> DirectoryPane | None:
    return pane if isinstance(pane, DirectoryPane) else None


def as_file(pane: Pane | None) -> FilePane | None:
    return pane if isinstance(pane, FilePane) else None


__all__ = [
    "Pane",
    "pane_path",
    "pane_name",
    "pane_geometry",
    "set_pane_geometry",
    "derive_parent_pane",
    "as_directory",
    "as_file",
]
