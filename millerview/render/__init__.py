"""Rendering of panes into the browser's screen region."""

from __future__ import annotations

from .ansi import ELLIPSIS, display_width, ellipsize, fit_to_width
from .panes import draw_pane, directory_row_labels, file_row_labels
from .surface import RegionSurface

__all__ = [
    "ELLIPSIS",
    "RegionSurface",
    "directory_row_labels",
    "display_width",
    "draw_pane",
    "ellipsize",
    "file_row_labels",
    "fit_to_width",
]
