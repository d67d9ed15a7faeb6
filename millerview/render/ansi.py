"""Display-width aware text shaping for pane rows.

Entry names are measured in terminal cells, not code points, so wide and
combining characters line up with the pane grid.
"""

from __future__ import annotations

import re
import unicodedata

ELLIPSIS = "…"
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns, and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def sanitize_terminal_text(text: str) -> str:
    """Escape control bytes so file names cannot move the cursor or ring the bell."""
    if _CONTROL_RE.search(text) is None:
        return text
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", text)


def clip_to_width(text: str, max_cols: int) -> str:
    """Trim ``text`` to at most ``max_cols`` display columns."""
    if max_cols <= 0:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


def ellipsize(text: str, max_cols: int) -> str:
    """Shorten ``text`` to ``max_cols`` columns, ending in an ellipsis when cut."""
    if max_cols <= 0:
        return ""
    if display_width(text) <= max_cols:
        return text
    return clip_to_width(text, max_cols - 1) + ELLIPSIS


def fit_to_width(text: str, width: int) -> str:
    """Left-justify ``text`` in exactly ``width`` columns, ellipsizing overflow."""
    shaped = ellipsize(sanitize_terminal_text(text), width)
    return shaped + " " * max(0, width - display_width(shaped))


__all__ = [
    "ELLIPSIS",
    "char_display_width",
    "clip_to_width",
    "display_width",
    "ellipsize",
    "fit_to_width",
    "sanitize_terminal_text",
]
