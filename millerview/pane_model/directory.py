"""Directory pane: one scanned listing plus its display order and cursor.

Three index spaces are in play:

- *original index*: position in ``entries`` as returned by the last scan
- *sorted index*: position in ``sorted_indices`` (the rows shown on screen)
- ``selection`` holds sorted indices; ``selection[0]`` is the primary cursor

``sort`` is the only operation that rewrites the permutation, and it remaps
``selection`` through it so the cursor follows the same entry, not the same row.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from ..geometry import Rect
from .file import FilePane
from .fs import canonical_path, is_directory, is_regular_file, scan_directory


def _name_key(entries: list[Path]) -> Callable[[int], object]:
    return lambda index: entries[index].name


def _dirs_first_key(entries: list[Path]) -> Callable[[int], object]:
    return lambda index: (not is_directory(entries[index]), entries[index].name.lower())


# Each order maps the entry list to a sort key over original indices.
SORT_ORDERS: dict[str, Callable[[list[Path]], Callable[[int], object]]] = {
    "name": _name_key,
    "dirs_first": _dirs_first_key,
}
DEFAULT_SORT_ORDER = "name"


def available_sort_orders() -> tuple[str, ...]:
    """Return registered sort-order names."""
    return tuple(sorted(SORT_ORDERS))


class DirectoryPane:
    """Listing state for one directory, addressed by its canonical path."""

    def __init__(self, geometry: Rect, directory: Path) -> None:
        """Bind the pane to ``directory`` without scanning it.

        Raises ``OSError`` when ``directory`` cannot be canonicalized.
        """
        self.geometry = geometry
        self.directory = Path(directory).resolve(strict=True)
        self.selection: list[int] = [0]
        self.scroll = 0
        self.entries: list[Path] = []
        self.sorted_indices: list[int] = []

    def __repr__(self) -> str:
        return f"DirectoryPane({str(self.directory)!r}, entries={len(self.entries)}, selection={self.selection!r})"

    def scan(self) -> None:
        """Replace entries with the directory's current children.

        The permutation is reset to identity. Selection survives unless any
        selected row falls outside the new entry count, in which case it
        collapses back to ``[0]``. Raises ``DirectoryUnreadable`` and leaves
        the previous listing in place when the directory cannot be read.
        """
        entries = scan_directory(self.directory)
        self.entries = entries
        if len(self.entries) <= max(self.selection, default=0):
            self.selection = [0]
        self.sorted_indices = list(range(len(self.entries)))

    def sort(self, order: str = DEFAULT_SORT_ORDER) -> None:
        """Recompute display order, keeping the selected entries selected."""
        try:
            make_key = SORT_ORDERS[order]
        except KeyError:
            raise ValueError(f"unknown sort order: {order!r}") from None
        if not self.entries:
            self.sorted_indices = []
            return

        # Selection to original indices, then back through the new permutation.
        absolute = [self.sorted_indices[row] for row in self.selection]
        self.sorted_indices = sorted(range(len(self.entries)), key=make_key(self.entries))
        positions = {original: row for row, original in enumerate(self.sorted_indices)}
        self.selection = [positions[original] for original in absolute]

    def increment_selection(self, delta: int) -> int:
        """Move the primary cursor by ``delta`` rows, clamped to the listing.

        Returns the signed number of rows actually moved.
        """
        if not self.entries:
            return 0
        old_index = self.selection[0]
        new_index = min(max(0, old_index + delta), len(self.entries) - 1)
        self.selection[0] = new_index
        return new_index - old_index

    def visible_rows(self) -> int:
        return self.geometry.h

    def ensure_selection_visible(self) -> None:
        """Scroll by the minimum amount that puts the cursor row on screen."""
        height = self.visible_rows()
        if height <= 0:
            return
        row = self.selection[0] - self.scroll
        if row >= height:
            self.scroll += row - height + 1
        elif row < 0:
            self.scroll += row

    def select_first(self) -> None:
        if self.selection and self.sorted_indices:
            self.selection[0] = 0

    def select_by_name(self, name: str) -> None:
        """Put the cursor on the entry called ``name``; no-op when absent."""
        if not self.selection:
            return
        for row, original in enumerate(self.sorted_indices):
            if self.entries[original].name == name:
                self.selection[0] = row
                return

    def directory_path(self) -> Path:
        return self.directory

    def directory_name(self) -> str:
        return self.directory.name or str(self.directory)

    def entry_count(self) -> int:
        return len(self.entries)

    def entry_path(self, original_index: int) -> Path:
        return self.entries[original_index]

    def entry_name(self, original_index: int) -> str:
        return self.entries[original_index].name

    def selected_path(self) -> Path | None:
        """Return the path under the primary cursor, or ``None`` when empty."""
        if not self.sorted_indices:
            return None
        return self.entry_path(self.sorted_indices[self.selection[0]])

    def selected_name(self) -> str | None:
        if not self.sorted_indices:
            return None
        return self.entry_name(self.sorted_indices[self.selection[0]])

    def is_selected_row(self, row: int) -> bool:
        return row in self.selection

    def derive_child_pane(self) -> DirectoryPane | FilePane | None:
        """Build an unscanned pane for the selected entry.

        Returns ``None`` when nothing is selected, or the entry is neither a
        directory nor a regular file, or it vanished before it could be
        canonicalized.
        """
        selected = self.selected_path()
        if selected is None:
            return None
        try:
            if is_directory(selected):
                return DirectoryPane(self.geometry, selected)
            if is_regular_file(selected):
                return FilePane(self.geometry, selected)
        except OSError:
            return None
        return None

    def derive_parent_pane(self) -> DirectoryPane | None:
        """Build an unscanned pane for the parent directory, ``None`` at root."""
        parent = self.directory.parent
        if parent == self.directory:
            return None
        resolved = canonical_path(parent)
        if resolved is None:
            return None
        return DirectoryPane(self.geometry, resolved)


__all__ = [
    "DEFAULT_SORT_ORDER",
    "SORT_ORDERS",
    "DirectoryPane",
    "available_sort_orders",
]
