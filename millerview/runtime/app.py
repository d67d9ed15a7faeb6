"""Browser bootstrap: terminal region setup, navigator wiring, teardown."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from ..config import BrowserConfig
from ..geometry import Rect
from ..input import read_key
from ..navigator import PaneNavigator
from ..render import RegionSurface
from ..terminal import TerminalController, fit_region
from ..ui_theme import resolve_theme
from .loop import run_main_loop

logger = logging.getLogger(__name__)


def run_browser(directory: Path, config: BrowserConfig, *, no_color: bool = False) -> None:
    """Run the browser inline below the cursor until the user quits.

    The region is cleared and the cursor returned to where it was (adjusted
    for any scrolling done to make room) before returning. Errors raised
    while building the first pane propagate after the terminal is restored.
    """
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if not os.isatty(stdin_fd):
        raise SystemExit("millerview needs an interactive terminal on stdin.")

    styles = resolve_theme(config.theme, no_color=no_color).style_table()
    terminal = TerminalController(stdin_fd, stdout_fd)
    with terminal.raw_mode():
        cursor_x, cursor_y = terminal.cursor_position()
        term = terminal.size()
        region, scrolled = fit_region(
            Rect(cursor_x, cursor_y, config.width, config.height),
            term.columns,
            term.lines,
        )
        terminal.scroll_up(scrolled)
        logger.info("browser region %s (scrolled %d lines)", region, scrolled)

        navigator = PaneNavigator(
            region,
            directory,
            styles,
            config.key_bindings,
            pane_count=config.pane_count,
            sort_order=config.sort_order,
        )
        navigator.start()

        surface = RegionSurface(region, terminal.write)
        try:
            run_main_loop(navigator, surface, lambda: read_key(stdin_fd))
        finally:
            surface.clear()
            surface.flush()
            terminal.goto(cursor_x, cursor_y - scrolled)
