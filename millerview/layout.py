"""Fixed-width column layout for the visible pane offsets.

With ``N`` panes the visible level offsets are ``-(N-2) .. +1``: the focus,
``N-2`` ancestors to its left, and one preview pane for the selected child.
"""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import Rect

MIN_PANE_COUNT = 2


@dataclass(frozen=True)
class PaneSlot:
    """Rectangle assigned to one level offset."""

    offset: int
    rect: Rect


def visible_offset_range(pane_count: int) -> range:
    """Return the level offsets shown for ``pane_count`` panes."""
    if pane_count < MIN_PANE_COUNT:
        raise ValueError(f"pane_count must be >= {MIN_PANE_COUNT}")
    return range(-(pane_count - 2), 2)


def pane_width(total_width: int, pane_count: int) -> int:
    """Return column width per pane, reserving the region's last column."""
    return max(0, (total_width - 1) // pane_count)


def compute_pane_layout(total_width: int, height: int, pane_count: int) -> list[PaneSlot]:
    """Place every visible offset side by side inside the region."""
    offsets = visible_offset_range(pane_count)
    width = pane_width(total_width, pane_count)
    first = offsets.start
    return [
        PaneSlot(offset=offset, rect=Rect((offset - first) * width, 0, width, max(0, height)))
        for offset in offsets
    ]


__all__ = [
    "MIN_PANE_COUNT",
    "PaneSlot",
    "compute_pane_layout",
    "pane_width",
    "visible_offset_range",
]
