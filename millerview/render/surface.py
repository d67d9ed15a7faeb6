"""Bounded drawing surface for the browser's screen region.

The browser draws inline, inside a fixed rectangle of the terminal rather
than on the alternate screen. Coordinates handed to ``goto`` are relative to
the current draw area (a pane rectangle inside the region) and are checked
against both the draw area and the region. Output is buffered and written in
one call per frame.
"""

from __future__ import annotations

import contextlib
from collections.abc import Callable, Iterator

from ..geometry import Rect


class RegionSurface:
    """Canvas over one absolute terminal rectangle."""

    def __init__(self, region: Rect, write: Callable[[str], None]) -> None:
        self.region = region
        self._write = write
        self._draw_area: Rect | None = None
        self._out: list[str] = []

    @property
    def draw_area(self) -> Rect | None:
        return self._draw_area

    @contextlib.contextmanager
    def drawing(self, area: Rect) -> Iterator[RegionSurface]:
        """Restrict ``goto`` coordinates to ``area`` (region-relative)."""
        previous = self._draw_area
        self._draw_area = area
        try:
            yield self
        finally:
            self._draw_area = previous

    def absolute_position(self, x: int, y: int) -> tuple[int, int]:
        """Translate draw-area coordinates into 0-based terminal cells."""
        area = self._draw_area
        if area is None:
            raise ValueError("no draw area set")
        if not (0 <= x < area.w) or not (0 <= y < area.h):
            raise ValueError(f"out of bounds coordinate: ({x}, {y}) in {area}")

        abs_x = x + area.x + self.region.x
        abs_y = y + area.y + self.region.y
        if abs_x >= self.region.x + self.region.w:
            raise ValueError(f"out of bounds absolute x: {abs_x}")
        if abs_y >= self.region.y + self.region.h:
            raise ValueError(f"out of bounds absolute y: {abs_y}")
        return abs_x, abs_y

    def goto_absolute(self, x: int, y: int) -> None:
        self._out.append(f"\033[{y + 1};{x + 1}H")

    def goto(self, x: int, y: int) -> None:
        abs_x, abs_y = self.absolute_position(x, y)
        self.goto_absolute(abs_x, abs_y)

    def print(self, text: str) -> None:
        self._out.append(text)

    def fill(self, area: Rect) -> None:
        """Blank ``area`` (region-relative) with spaces."""
        if area.w <= 0:
            return
        blank = " " * area.w
        with self.drawing(area):
            for row in range(area.h):
                self.goto(0, row)
                self.print(blank)

    def clear(self) -> None:
        """Blank the whole region."""
        self.fill(self.region.at_origin())

    def flush(self) -> None:
        if not self._out:
            return
        payload = "".join(self._out)
        self._out.clear()
        self._write(payload)


__all__ = ["RegionSurface"]
