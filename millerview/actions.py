"""Navigation actions and the key-to-action table.

Keys are the tokens produced by ``millerview.input.read_key``: single
characters, or names such as ``UP`` for decoded escape sequences.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class Quit:
    """Leave the browser."""


@dataclass(frozen=True)
class _Move:
    count: int = 1

    def __post_init__(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count <= 0:
            raise ValueError(f"{type(self).__name__} count must be a positive integer")


@dataclass(frozen=True)
class MoveUp(_Move):
    """Move the cursor up ``count`` rows."""


@dataclass(frozen=True)
class MoveDown(_Move):
    """Move the cursor down ``count`` rows."""


@dataclass(frozen=True)
class MoveLeft(_Move):
    """Move focus ``count`` levels toward the filesystem root."""


@dataclass(frozen=True)
class MoveRight(_Move):
    """Move focus ``count`` levels into the selection."""


Action = Quit | MoveUp | MoveDown | MoveLeft | MoveRight
KeyBindings = dict[str, Action]

_ACTION_NAMES: dict[str, type] = {
    "quit": Quit,
    "move_up": MoveUp,
    "move_down": MoveDown,
    "move_left": MoveLeft,
    "move_right": MoveRight,
}


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one or more key tokens to a single action."""

    keys: tuple[str, ...]
    action: Action


DEFAULT_BINDINGS: tuple[KeyBinding, ...] = (
    KeyBinding(("q",), Quit()),
    KeyBinding(("j", "DOWN"), MoveDown(1)),
    KeyBinding(("k", "UP"), MoveUp(1)),
    KeyBinding(("h", "LEFT"), MoveLeft(1)),
    KeyBinding(("l", "RIGHT"), MoveRight(1)),
)


def build_key_table(*bindings: KeyBinding) -> KeyBindings:
    """Flatten bindings into a key table; later bindings win."""
    table: KeyBindings = {}
    for binding in bindings:
        for key in binding.keys:
            table[key] = binding.action
    return table


def default_key_bindings() -> KeyBindings:
    return build_key_table(*DEFAULT_BINDINGS)


def parse_action_spec(spec: str) -> Action:
    """Parse ``"quit"`` or ``"move_down"``/``"move_down 5"`` style strings.

    Raises ``ValueError`` for unknown names, counts on ``quit``, or
    non-positive counts.
    """
    parts = str(spec).split()
    if not parts or len(parts) > 2:
        raise ValueError(f"invalid action: {spec!r}")
    name = parts[0].lower()
    action_type = _ACTION_NAMES.get(name)
    if action_type is None:
        raise ValueError(f"unknown action: {parts[0]!r}")
    if action_type is Quit:
        if len(parts) != 1:
            raise ValueError("quit takes no count")
        return Quit()
    count = 1
    if len(parts) == 2:
        try:
            count = int(parts[1])
        except ValueError as exc:
            raise ValueError(f"invalid count in action: {spec!r}") from exc
    return action_type(count)


def merge_key_bindings(base: Mapping[str, Action], overrides: Mapping[str, Action]) -> KeyBindings:
    merged = dict(base)
    merged.update(overrides)
    return merged


def action_delta(action: Action) -> tuple[int, int]:
    """Return ``(rows, levels)`` moved by ``action``; ``Quit`` moves nothing."""
    if isinstance(action, MoveDown):
        return action.count, 0
    if isinstance(action, MoveUp):
        return -action.count, 0
    if isinstance(action, MoveRight):
        return 0, action.count
    if isinstance(action, MoveLeft):
        return 0, -action.count
    if isinstance(action, Quit):
        return 0, 0
    raise TypeError(f"not an action: {type(action).__name__}")


__all__ = [
    "Action",
    "KeyBinding",
    "KeyBindings",
    "DEFAULT_BINDINGS",
    "MoveDown",
    "MoveLeft",
    "MoveRight",
    "MoveUp",
    "Quit",
    "action_delta",
    "build_key_table",
    "default_key_bindings",
    "merge_key_bindings",
    "parse_action_spec",
]
