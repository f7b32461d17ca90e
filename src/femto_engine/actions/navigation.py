"""Cursor motions.

Each motion is a pure function of a buffer's text and cursor returning the
new cursor offset; ``move`` applies one to a ``BufferState``.
"""

from __future__ import annotations

from typing import Callable

from femto_engine.buffer import BufferState, line_col_at, line_col_to_cursor

Motion = Callable[[str, int], int]


def is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def forward_char(text: str, cursor: int) -> int:
    return min(cursor + 1, len(text))


def backward_char(text: str, cursor: int) -> int:
    del text
    return max(cursor - 1, 0)


def line_start(text: str, cursor: int) -> int:
    return text.rfind("\n", 0, cursor) + 1


def line_end(text: str, cursor: int) -> int:
    newline = text.find("\n", cursor)
    return len(text) if newline < 0 else newline


def next_line(text: str, cursor: int) -> int:
    line, col = line_col_at(text, cursor)
    target = line_col_to_cursor(text, line + 1, col)
    return cursor if target is None else target


def previous_line(text: str, cursor: int) -> int:
    line, col = line_col_at(text, cursor)
    if line <= 1:
        return cursor
    target = line_col_to_cursor(text, line - 1, col)
    return cursor if target is None else target


def forward_word(text: str, cursor: int) -> int:
    pos = cursor
    while pos < len(text) and is_word_char(text[pos]):
        pos += 1
    while pos < len(text) and not is_word_char(text[pos]):
        pos += 1
    return pos


def backward_word(text: str, cursor: int) -> int:
    if cursor == 0 or not text:
        return cursor
    pos = cursor - 1
    while pos > 0 and not is_word_char(text[pos]):
        pos -= 1
    while pos > 0 and is_word_char(text[pos - 1]):
        pos -= 1
    return pos


def buffer_start(text: str, cursor: int) -> int:
    del text, cursor
    return 0


def buffer_end(text: str, cursor: int) -> int:
    del cursor
    return len(text)


def move(state: BufferState, motion: Motion) -> int:
    """Apply ``motion`` to ``state`` and return the new cursor."""

    state.set_cursor(motion(state.text, state.cursor))
    return state.cursor


__all__ = [
    "Motion",
    "backward_char",
    "backward_word",
    "buffer_end",
    "buffer_start",
    "forward_char",
    "forward_word",
    "is_word_char",
    "line_end",
    "line_start",
    "move",
    "next_line",
    "previous_line",
]
