"""Rectangle value type used for pane and region placement."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Rect:
    """Origin plus size in terminal cells."""

    x: int
    y: int
    w: int
    h: int

    def __post_init__(self) -> None:
        for name in ("x", "y", "w", "h"):
            if getattr(self, name) < 0:
                raise ValueError(f"Rect.{name} must be non-negative")

    def at_origin(self) -> Rect:
        """Return a rectangle of the same size placed at ``(0, 0)``."""
        return replace(self, x=0, y=0)


__all__ = ["Rect"]
