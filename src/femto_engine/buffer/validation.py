"""Bounds helpers shared by buffer mutators."""

from __future__ import annotations

from typing import Optional, Tuple

from .text import TextBuffer


def clamp_cursor(buffer: TextBuffer, cursor: int) -> int:
    return max(0, min(cursor, buffer.char_len()))


def clamp_region(buffer: TextBuffer, start: int, end: int) -> Optional[Tuple[int, int]]:
    """Return ``(start, end)`` with ``end`` clamped, or ``None`` when empty."""

    if start >= end:
        return None
    safe_end = min(end, buffer.char_len())
    if start >= safe_end:
        return None
    return (start, safe_end)


__all__ = ["clamp_cursor", "clamp_region"]
