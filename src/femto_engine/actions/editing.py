"""Mutating editing verbs: insert, delete, kill, copy and yank."""

from __future__ import annotations

from femto_engine.buffer import BufferState, KillRing, clamp_region


def insert_text(state: BufferState, text: str) -> None:
    if not text:
        return
    with state.edit("insert_text"):
        state.buffer.insert_at(state.cursor, text)
        state.set_cursor(state.cursor + len(text))
    state.set_status_message(None)


def delete_char(state: BufferState) -> None:
    if state.cursor >= state.buffer.char_len():
        return
    with state.edit("delete_char"):
        state.buffer.remove_range(state.cursor, state.cursor + 1)
    state.set_status_message(None)


def delete_backward_char(state: BufferState) -> None:
    if state.cursor == 0:
        return
    with state.edit("delete_backward_char"):
        state.buffer.remove_range(state.cursor - 1, state.cursor)
        state.set_cursor(state.cursor - 1)
    state.set_status_message(None)


def kill_line(state: BufferState, kill_ring: KillRing) -> None:
    """Kill from the cursor through the end of the line and its newline."""

    text = state.text
    if state.cursor >= len(text):
        return
    end = text.find("\n", state.cursor)
    end = len(text) if end < 0 else end + 1

    killed = text[state.cursor : end]
    with state.edit("kill_line"):
        state.buffer.remove_range(state.cursor, end)
    kill_ring.push(killed)
    state.set_status_message("Killed line")


def copy_region(state: BufferState, start: int, end: int, kill_ring: KillRing) -> None:
    region = clamp_region(state.buffer, start, end)
    if region is None:
        return
    kill_ring.push(state.buffer.slice(*region))
    state.set_status_message("Copied region")


def kill_region(state: BufferState, start: int, end: int, kill_ring: KillRing) -> None:
    region = clamp_region(state.buffer, start, end)
    if region is None:
        return
    killed = state.buffer.slice(*region)
    with state.edit("kill_region"):
        state.buffer.remove_range(*region)
        state.set_cursor(region[0])
    kill_ring.push(killed)
    state.set_status_message("Killed region")


def yank(state: BufferState, kill_ring: KillRing) -> None:
    text = kill_ring.latest()
    if text is None:
        state.set_status_message("Kill ring empty")
        return
    with state.edit("yank"):
        state.buffer.insert_at(state.cursor, text)
        state.set_cursor(state.cursor + len(text))
    state.set_status_message("Yank")


def set_cursor(state: BufferState, cursor: int) -> None:
    state.set_cursor(cursor)


__all__ = [
    "copy_region",
    "delete_backward_char",
    "delete_char",
    "insert_text",
    "kill_line",
    "kill_region",
    "set_cursor",
    "yank",
]
