"""Path-keyed store of every materialized pane.

Panes never reference each other; neighbours are found again by path. Keys
are canonical, and lookups canonicalize their argument first, so two raw
spellings of one location always reach the same entry. The cache only
grows: nothing is evicted while the browser runs.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from .pane_model import Pane, canonical_path, pane_path


class ViewCache:
    """Mapping from canonical path to the pane materialized for it."""

    def __init__(self) -> None:
        self._panes: dict[Path, Pane] = {}

    def __len__(self) -> int:
        return len(self._panes)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, Path):
            return False
        return self.get(path) is not None

    def __iter__(self) -> Iterator[Path]:
        return iter(self._panes)

    def _key(self, path: Path) -> Path | None:
        if path in self._panes:
            return path
        return canonical_path(path)

    def get(self, path: Path | None) -> Pane | None:
        """Return the pane cached for ``path``, or ``None``."""
        if path is None:
            return None
        key = self._key(path)
        if key is None:
            return None
        return self._panes.get(key)

    def insert(self, pane: Pane) -> Path:
        """Store ``pane`` under its own canonical path and return that key."""
        key = pane_path(pane)
        self._panes[key] = pane
        return key

    def paths(self) -> list[Path]:
        return list(self._panes)


__all__ = ["ViewCache"]
