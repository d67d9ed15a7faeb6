"""Terminal control helpers for the inline browser session.

Owns raw-mode lifecycle, cursor visibility, cursor-position queries, and the
scrolling needed to make room for the browser region below the prompt.
"""

from __future__ import annotations

import contextlib
import os
import re
import select
import shutil
import termios
import tty

from .geometry import Rect

CURSOR_REPORT_TIMEOUT_MS = 200
_CURSOR_REPORT_RE = re.compile(rb"\x1b\[(\d+);(\d+)R")


def fit_region(region: Rect, columns: int, lines: int) -> tuple[Rect, int]:
    """Clamp ``region`` to the terminal and return ``(region, scroll_lines)``.

    Width is cut at the right edge. When the region would extend past the
    last line, the terminal must be scrolled up by ``scroll_lines`` and the
    region origin moves up by the same amount.
    """
    width = max(0, min(region.w, columns - region.x))
    height = max(0, min(region.h, lines))
    room = (lines - 1) - region.y
    scroll = 0
    if room < height:
        scroll = min(region.y, height - room - 1)
    return Rect(region.x, region.y - scroll, width, height), scroll


class TerminalController:
    """Manage terminal mode transitions for an inline (non-alternate) UI."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def write(self, text: str) -> None:
        os.write(self.stdout_fd, text.encode("utf-8", errors="replace"))

    def enable_raw_mode(self) -> None:
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)

    def disable_raw_mode(self) -> None:
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def hide_cursor(self) -> None:
        self.write("\x1b[?25l")

    def show_cursor(self) -> None:
        self.write("\x1b[?25h")

    def goto(self, x: int, y: int) -> None:
        """Move the cursor to 0-based column ``x``, row ``y``."""
        self.write(f"\x1b[{y + 1};{x + 1}H")

    def scroll_up(self, lines: int) -> None:
        if lines > 0:
            self.write(f"\x1b[{lines}S")

    def size(self) -> os.terminal_size:
        return shutil.get_terminal_size((80, 24))

    def cursor_position(self) -> tuple[int, int]:
        """Ask the terminal for the cursor position as 0-based ``(x, y)``.

        Must run in raw mode. Falls back to ``(0, 0)`` when the terminal does
        not answer in time.
        """
        self.write("\x1b[6n")
        response = b""
        while True:
            ready, _, _ = select.select([self.stdin_fd], [], [], CURSOR_REPORT_TIMEOUT_MS / 1000.0)
            if not ready:
                return 0, 0
            chunk = os.read(self.stdin_fd, 1)
            if not chunk:
                return 0, 0
            response += chunk
            if chunk == b"R":
                break
            if len(response) > 32:
                return 0, 0
        match = _CURSOR_REPORT_RE.search(response)
        if match is None:
            return 0, 0
        row, col = int(match.group(1)), int(match.group(2))
        return max(0, col - 1), max(0, row - 1)

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with raw-mode enter/exit and cursor hiding."""
        try:
            self.enable_raw_mode()
            self.hide_cursor()
            yield
        finally:
            self.show_cursor()
            self.disable_raw_mode()


__all__ = ["CURSOR_REPORT_TIMEOUT_MS", "TerminalController", "fit_region"]
