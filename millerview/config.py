"""JSON config loading.

Holds theme, pane count, region size, sort order, and key bindings. All
access is defensive: a missing or malformed file, or a single bad value,
falls back to defaults instead of failing startup. Nothing is written back.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

from .actions import KeyBindings, default_key_bindings, merge_key_bindings, parse_action_spec
from .layout import MIN_PANE_COUNT
from .navigator import DEFAULT_PANE_COUNT
from .pane_model import DEFAULT_SORT_ORDER, SORT_ORDERS

logger = logging.getLogger(__name__)

APP_NAME = "millerview"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_WIDTH = 90
DEFAULT_HEIGHT = 5


@dataclass
class BrowserConfig:
    """Resolved startup settings."""

    theme: str | None = None
    pane_count: int = DEFAULT_PANE_COUNT
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    sort_order: str = DEFAULT_SORT_ORDER
    key_bindings: KeyBindings = field(default_factory=default_key_bindings)


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_int(value: object, minimum: int) -> int | None:
    """Accept plain ints at or above ``minimum``; booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value < minimum:
        return None
    return value


def _load_theme_name(data: dict[str, object]) -> str | None:
    value = data.get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _load_sort_order(data: dict[str, object]) -> str:
    value = data.get("sort_order")
    if isinstance(value, str) and value in SORT_ORDERS:
        return value
    return DEFAULT_SORT_ORDER


def load_key_bindings(data: dict[str, object]) -> KeyBindings:
    """Merge valid ``key_bindings`` entries over the defaults.

    Keys must be non-empty strings and values action specs such as
    ``"move_down 5"``; anything else is dropped.
    """
    raw = data.get("key_bindings")
    if not isinstance(raw, dict):
        return default_key_bindings()

    overrides: KeyBindings = {}
    for key, spec in raw.items():
        if not isinstance(key, str) or not key or not isinstance(spec, str):
            continue
        try:
            overrides[key] = parse_action_spec(spec)
        except ValueError as exc:
            logger.warning("dropping key binding %r: %s", key, exc)
    return merge_key_bindings(default_key_bindings(), overrides)


def load_browser_config() -> BrowserConfig:
    """Read the config file and validate every setting independently."""
    data = load_config()
    pane_count = _coerce_int(data.get("pane_count"), MIN_PANE_COUNT)
    width = _coerce_int(data.get("width"), 1)
    height = _coerce_int(data.get("height"), 1)
    return BrowserConfig(
        theme=_load_theme_name(data),
        pane_count=pane_count if pane_count is not None else DEFAULT_PANE_COUNT,
        width=width if width is not None else DEFAULT_WIDTH,
        height=height if height is not None else DEFAULT_HEIGHT,
        sort_order=_load_sort_order(data),
        key_bindings=load_key_bindings(data),
    )


__all__ = [
    "APP_NAME",
    "BrowserConfig",
    "CONFIG_PATH",
    "DEFAULT_HEIGHT",
    "DEFAULT_WIDTH",
    "load_browser_config",
    "load_config",
    "load_key_bindings",
]
