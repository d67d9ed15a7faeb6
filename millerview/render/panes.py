"""Row rendering for directory and file panes."""

from __future__ import annotations

from collections.abc import Mapping

from ..pane_model import DirectoryPane, FilePane, Pane, is_directory
from ..ui_theme import STYLE_DIRECTORY, STYLE_FILE, STYLE_SELECTED
from .ansi import fit_to_width
from .surface import RegionSurface

RESET = "\033[0m"


def styled(text: str, *styles: str) -> str:
    """Prefix ``text`` with SGR fragments; reset only when something was applied."""
    prefix = "".join(styles)
    if not prefix:
        return text
    return f"{prefix}{text}{RESET}"


def directory_row_labels(pane: DirectoryPane, styles: Mapping[str, str]) -> list[str]:
    """Return the styled rows visible in ``pane`` from its scroll offset."""
    width = pane.geometry.w
    rows: list[str] = []
    for screen_row in range(pane.geometry.h):
        row = pane.scroll + screen_row
        if row >= len(pane.sorted_indices):
            break
        original = pane.sorted_indices[row]
        label = fit_to_width(pane.entry_name(original), width)
        kind = STYLE_DIRECTORY if is_directory(pane.entry_path(original)) else STYLE_FILE
        kind_style = styles.get(kind, "")
        if pane.is_selected_row(row):
            rows.append(styled(label, kind_style, styles.get(STYLE_SELECTED, "")))
        else:
            rows.append(styled(label, kind_style))
    return rows


def file_row_labels(pane: FilePane, styles: Mapping[str, str]) -> list[str]:
    width = pane.geometry.w
    lines = [
        styled(fit_to_width(pane.file_name(), width), styles.get(STYLE_FILE, "")),
        fit_to_width(pane.kind_label(), width),
        fit_to_width(pane.size_label(), width),
    ]
    return lines[pane.scroll : pane.scroll + pane.geometry.h]


def draw_pane(surface: RegionSurface, pane: Pane, styles: Mapping[str, str]) -> None:
    """Clear the pane rectangle, then draw its rows into ``surface``."""
    geometry = pane.geometry
    if geometry.w <= 0 or geometry.h <= 0:
        return
    surface.fill(geometry)

    if isinstance(pane, DirectoryPane):
        if not is_directory(pane.directory_path()):
            return
        rows = directory_row_labels(pane, styles)
    elif isinstance(pane, FilePane):
        rows = file_row_labels(pane, styles)
    else:
        raise TypeError(f"not a pane: {type(pane).__name__}")

    with surface.drawing(geometry):
        for index, row in enumerate(rows):
            surface.goto(0, index)
            surface.print(row)


__all__ = ["draw_pane", "directory_row_labels", "file_row_labels", "styled"]
