"""Pane navigator: focus path, lazy pane population, and action dispatch.

The navigator owns the ``ViewCache`` and the focus path. Every neighbouring
pane is found by resolving a *level offset* relative to the focus:

- ``0`` is the focus itself
- ``+k`` follows the selected entry ``k`` times (needs cached directory panes)
- ``-k`` takes the filesystem parent ``k`` times (fails at the root)

Resolution is recomputed on every call because selections, the focus, and
the cache all change between keystrokes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from .actions import Action, Quit, action_delta
from .geometry import Rect
from .layout import PaneSlot, compute_pane_layout, visible_offset_range
from .pane_model import (
    DEFAULT_SORT_ORDER,
    DirectoryPane,
    DirectoryUnreadable,
    FilePane,
    Pane,
    as_directory,
    derive_parent_pane,
    pane_path,
    set_pane_geometry,
)
from .render import RegionSurface, draw_pane
from .view_cache import ViewCache

logger = logging.getLogger(__name__)

DEFAULT_PANE_COUNT = 3


class PaneNavigator:
    """Miller-columns controller over a path-keyed pane cache."""

    def __init__(
        self,
        geometry: Rect,
        directory: Path,
        styles: Mapping[str, str],
        bindings: Mapping[str, Action],
        *,
        pane_count: int = DEFAULT_PANE_COUNT,
        sort_order: str = DEFAULT_SORT_ORDER,
    ) -> None:
        """Create the focus pane for ``directory`` (unscanned).

        Raises ``OSError`` when ``directory`` does not exist and ``ValueError``
        for a pane count the layout cannot place.
        """
        visible_offset_range(pane_count)
        self.geometry = geometry
        self.styles = dict(styles)
        self.bindings = dict(bindings)
        self.pane_count = pane_count
        self.sort_order = sort_order
        self.cache = ViewCache()
        focus = DirectoryPane(geometry.at_origin(), directory)
        self.focus_path = self.cache.insert(focus)

    def start(self) -> None:
        """Scan the focus directory and materialize its visible neighbours.

        Raises ``DirectoryUnreadable`` when the focus directory cannot be
        listed; nothing else in the browser can work without it.
        """
        focus = self.directory_at(0)
        if focus is None:
            raise DirectoryUnreadable(self.focus_path, "not a directory")
        focus.scan()
        focus.sort(self.sort_order)
        focus.select_first()
        self.ensure_populated(1)
        self.ensure_populated(-(self.pane_count - 2))

    # -- resolution ---------------------------------------------------------

    def traverse(self, level_offset: int) -> Path | None:
        """Return the path ``level_offset`` levels from the focus.

        A forward step lands on the cache key of the selected entry's pane.
        Only when no pane is cached for it is the joined path returned, so
        levels that are already populated resolve without filesystem reads
        beyond canonicalizing a symlinked entry.
        """
        path = self.focus_path
        for _ in range(max(0, level_offset)):
            directory = as_directory(self.cache.get(path))
            if directory is None:
                return None
            name = directory.selected_name()
            if name is None:
                return None
            path = path / name
            cached = self.cache.get(path)
            if cached is not None:
                path = pane_path(cached)
        for _ in range(max(0, -level_offset)):
            parent = path.parent
            if parent == path:
                return None
            path = parent
        return path

    def pane_at(self, level_offset: int) -> Pane | None:
        return self.cache.get(self.traverse(level_offset))

    def directory_at(self, level_offset: int) -> DirectoryPane | None:
        return as_directory(self.pane_at(level_offset))

    # -- population ---------------------------------------------------------

    def _prepare_directory(self, pane: DirectoryPane) -> bool:
        try:
            pane.scan()
        except DirectoryUnreadable:
            return False
        pane.sort(self.sort_order)
        return True

    def _populate_forward(self, offset: int) -> int:
        for level in range(1, offset + 1):
            child_path = self.traverse(level)
            if child_path is None:
                logger.debug("level %d unresolvable from %s", level, self.focus_path)
                return level - 1
            if child_path in self.cache:
                continue

            parent = self.directory_at(level - 1)
            if parent is None:
                return level - 1
            child = parent.derive_child_pane()
            if isinstance(child, DirectoryPane):
                if not self._prepare_directory(child):
                    return level - 1
                child.select_first()
                self.cache.insert(child)
            elif isinstance(child, FilePane):
                self.cache.insert(child)
            else:
                logger.debug("selected entry %s has no pane", child_path)
                return level - 1
        return offset

    def _populate_backward(self, offset: int) -> int:
        for level in range(-1, offset - 1, -1):
            child = self.pane_at(level + 1)
            if child is None:
                return level + 1
            child_path = pane_path(child)
            parent_path = child_path.parent
            if parent_path == child_path:
                return level + 1
            if parent_path in self.cache:
                continue

            parent = derive_parent_pane(child)
            if parent is None or not self._prepare_directory(parent):
                return level + 1
            parent.select_by_name(child_path.name)
            parent.ensure_selection_visible()
            self.cache.insert(parent)
        return offset

    def ensure_populated(self, offset: int) -> int:
        """Materialize panes from the focus out to ``offset`` levels.

        Returns the signed number of levels reachable, which is smaller in
        magnitude than ``offset`` when population stops early. Already cached
        levels are not rescanned.
        """
        if offset > 0:
            return self._populate_forward(offset)
        if offset < 0:
            return self._populate_backward(offset)
        return 0

    # -- actions ------------------------------------------------------------

    def action_for_key(self, key: str) -> Action | None:
        return self.bindings.get(key)

    def move_selection(self, rows: int) -> bool:
        """Move the focused cursor; return whether a redraw is needed."""
        focused = self.directory_at(0)
        if focused is None:
            return False
        if focused.increment_selection(rows) == 0:
            return False
        focused.ensure_selection_visible()
        self.ensure_populated(1)
        return True

    def move_level(self, levels: int) -> bool:
        """Shift the focus by up to ``levels``; return whether it moved."""
        steps = self.ensure_populated(levels)
        if steps == 0:
            return False
        target = self.pane_at(steps)
        if target is None:
            return False
        self.focus_path = pane_path(target)
        logger.debug("focus moved %d levels to %s", steps, self.focus_path)
        return True

    def dispatch(self, action: Action) -> bool:
        """Apply one navigation action; return whether a full redraw is needed."""
        if isinstance(action, Quit):
            return False
        rows, levels = action_delta(action)
        if rows:
            return self.move_selection(rows)
        return self.move_level(levels)

    # -- layout and drawing -------------------------------------------------

    def layout(self) -> list[tuple[PaneSlot, Pane]]:
        """Assign geometry to every visible, resolvable pane."""
        placed: list[tuple[PaneSlot, Pane]] = []
        for slot in compute_pane_layout(self.geometry.w, self.geometry.h, self.pane_count):
            pane = self.pane_at(slot.offset)
            if pane is None:
                continue
            set_pane_geometry(pane, slot.rect)
            placed.append((slot, pane))
        return placed

    def draw(self, surface: RegionSurface, *, clear: bool = False) -> None:
        if clear:
            surface.clear()
        for _slot, pane in self.layout():
            draw_pane(surface, pane, self.styles)
        surface.flush()


__all__ = ["DEFAULT_PANE_COUNT", "PaneNavigator"]
