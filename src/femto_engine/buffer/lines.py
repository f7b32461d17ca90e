"""Conversions between character offsets and 1-based line/column pairs."""

from __future__ import annotations

from typing import Optional, Tuple

LineCol = Tuple[int, int]  # (line, col), both 1-based


def line_col_at(text: str, offset: int) -> LineCol:
    """Return the 1-based ``(line, col)`` of ``offset`` within ``text``."""

    prefix = text[: max(0, offset)]
    line = prefix.count("\n") + 1
    col = len(prefix) - (prefix.rfind("\n") + 1) + 1
    return (line, col)


def line_col_to_cursor(text: str, target_line: int, target_col: int) -> Optional[int]:
    """Offset of ``target_col`` on ``target_line``, clamped to the line length.

    Returns ``None`` when either coordinate is below 1 or the line does not
    exist.
    """

    if target_line < 1 or target_col < 1:
        return None

    start = 0
    for _ in range(target_line - 1):
        newline = text.find("\n", start)
        if newline < 0:
            return None
        start = newline + 1

    end = text.find("\n", start)
    if end < 0:
        end = len(text)
    return min(start + target_col - 1, end)


__all__ = ["LineCol", "line_col_at", "line_col_to_cursor"]
