"""Main interactive event loop.

One blocking key read per iteration, processed to completion before the
next read. Quitting is decided here; everything else goes to the navigator.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..actions import Quit
from ..navigator import PaneNavigator
from ..render import RegionSurface

logger = logging.getLogger(__name__)

INTERRUPT_KEYS = frozenset({"CTRL_C"})


def run_main_loop(
    navigator: PaneNavigator,
    surface: RegionSurface,
    read_next_key: Callable[[], str],
) -> None:
    """Draw, then read and dispatch keys until a quit action or end of input."""
    navigator.draw(surface, clear=True)
    while True:
        key = read_next_key()
        if not key or key in INTERRUPT_KEYS:
            return
        action = navigator.action_for_key(key)
        if action is None:
            logger.debug("unbound key %r", key)
            continue
        if isinstance(action, Quit):
            return
        redraw = navigator.dispatch(action)
        navigator.draw(surface, clear=redraw)
