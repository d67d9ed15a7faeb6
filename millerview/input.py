"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into key tokens: printable
characters are returned as-is, arrow keys as ``UP``/``DOWN``/``LEFT``/
``RIGHT``, and a lone escape as ``ESC``.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []
_ARROWS = {b"A": "UP", b"B": "DOWN", b"C": "RIGHT", b"D": "LEFT"}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, lead: bytes) -> bytes:
    """Complete a multi-byte UTF-8 character whose first byte is ``lead``."""
    first = lead[0]
    if first >= 0xF0:
        missing = 3
    elif first >= 0xE0:
        missing = 2
    elif first >= 0xC0:
        missing = 1
    else:
        return lead
    data = lead
    for _ in range(missing):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return data


def read_key(fd: int) -> str:
    """Block for the next key and return its token.

    Returns an empty string at end of input.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        ch = os.read(fd, 1)
        if not ch:
            return ""

    if ch == b"\x03":
        return "CTRL_C"
    if ch != b"\x1b":
        return _read_utf8_tail(fd, ch).decode("utf-8", errors="replace")

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq not in {b"[", b"O"}:
        _PENDING_BYTES.append(seq)
        return "ESC"
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    return _ARROWS.get(seq, "ESC")


__all__ = ["ESC_SEQUENCE_TIMEOUT_MS", "read_key"]
