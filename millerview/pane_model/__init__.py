"""Pane domain model: directory listings, file placeholders, and the union.

This package contains the non-UI pane primitives:
- filesystem helpers (canonical paths, scans, entry-kind probes)
- ``DirectoryPane`` with its sort permutation, cursor, and scroll state
- ``FilePane`` placeholders for regular files
- the closed ``Pane`` union plus accessors that dispatch over it
"""

from __future__ import annotations

from .directory import DEFAULT_SORT_ORDER, SORT_ORDERS, DirectoryPane, available_sort_orders
from .file import FilePane, file_kind_label, format_size_label
from .fs import (
    DirectoryUnreadable,
    canonical_path,
    is_directory,
    is_regular_file,
    safe_file_size,
    scan_directory,
)
from .types import (
    Pane,
    as_directory,
    as_file,
    derive_parent_pane,
    pane_geometry,
    pane_name,
    pane_path,
    set_pane_geometry,
)

__all__ = [
    "DEFAULT_SORT_ORDER",
    "SORT_ORDERS",
    "DirectoryPane",
    "available_sort_orders",
    "FilePane",
    "file_kind_label",
    "format_size_label",
    "DirectoryUnreadable",
    "canonical_path",
    "is_directory",
    "is_regular_file",
    "safe_file_size",
    "scan_directory",
    "Pane",
    "as_directory",
    "as_file",
    "derive_parent_pane",
    "pane_geometry",
    "pane_name",
    "pane_path",
    "set_pane_geometry",
]
