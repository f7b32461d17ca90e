"""Command-name dispatch for the editor's command surface."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Callable, Dict, Optional, Type, TypeVar

from femto_engine.actions import editing, navigation, search
from femto_engine.errors import InvalidPayloadError, UnknownCommandError

from .payloads import (
    CommandPayload,
    CursorPayload,
    InsertPayload,
    RegionPayload,
    SearchPayload,
)

if TYPE_CHECKING:
    from .state import EditorState

CommandHandler = Callable[["EditorState", Optional[CommandPayload]], None]

P = TypeVar("P", InsertPayload, RegionPayload, SearchPayload, CursorPayload)

_PAYLOAD_KIND = {
    InsertPayload: "insert",
    RegionPayload: "region",
    SearchPayload: "search",
    CursorPayload: "cursor",
}


def resolve(command: str) -> CommandHandler:
    handler = _COMMAND_HANDLERS.get(command)
    if handler is None:
        raise UnknownCommandError(f"unknown command: {command}", command=command)
    return handler


def command_names() -> tuple[str, ...]:
    return tuple(sorted(_COMMAND_HANDLERS))


def _require(command: str, payload: Optional[CommandPayload], kind: Type[P]) -> P:
    if not isinstance(payload, kind):
        raise InvalidPayloadError(
            f"{command} requires {_PAYLOAD_KIND[kind]} payload", command=command
        )
    return payload


def _handle_noop(editor: "EditorState", payload: Optional[CommandPayload]) -> None:
    del editor, payload


def _handle_keyboard_quit(
    editor: "EditorState", payload: Optional[CommandPayload]
) -> None:
    del payload
    search.cancel_query_replace(editor.current)
    editor.current.set_status_message("Quit")


def _handle_motion(
    editor: "EditorState",
    payload: Optional[CommandPayload],
    *,
    motion: navigation.Motion,
) -> None:
    del payload
    navigation.move(editor.current, motion)


def _handle_delete_char(editor: "EditorState", payload: Optional[CommandPayload]) -> None:
    del payload
    editing.delete_char(editor.current)


def _handle_delete_backward_char(
    editor: "EditorState", payload: Optional[CommandPayload]
) -> None:
    del payload
    editing.delete_backward_char(editor.current)


def _handle_kill_line(editor: "EditorState", payload: Optional[CommandPayload]) -> None:
    del payload
    editing.kill_line(editor.current, editor.kill_ring)


def _handle_yank(editor: "EditorState", payload: Optional[CommandPayload]) -> None:
    del payload
    editing.yank(editor.current, editor.kill_ring)


def _handle_undo(editor: "EditorState", payload: Optional[CommandPayload]) -> None:
    del payload
    editor.current.undo()


def _handle_redo(editor: "EditorState", payload: Optional[CommandPayload]) -> None:
    del payload
    editor.current.redo()


def _handle_kill_region(
    editor: "EditorState", payload: Optional[CommandPayload]
) -> None:
    region = _require("kill_region", payload, RegionPayload)
    editing.kill_region(editor.current, region.start, region.end, editor.kill_ring)


def _handle_copy_region(
    editor: "EditorState", payload: Optional[CommandPayload]
) -> None:
    region = _require("copy_region", payload, RegionPayload)
    editing.copy_region(editor.current, region.start, region.end, editor.kill_ring)


def _handle_isearch(
    editor: "EditorState",
    payload: Optional[CommandPayload],
    *,
    backward: bool,
) -> None:
    name = "isearch_backward" if backward else "isearch_forward"
    query = _require(name, payload, SearchPayload).query
    if backward:
        search.isearch_backward(editor.current, query)
    else:
        search.isearch_forward(editor.current, query)


def _handle_set_cursor(editor: "EditorState", payload: Optional[CommandPayload]) -> None:
    cursor = _require("set_cursor", payload, CursorPayload).cursor
    editing.set_cursor(editor.current, cursor)


def _handle_insert_text(
    editor: "EditorState", payload: Optional[CommandPayload]
) -> None:
    text = _require("insert_text", payload, InsertPayload).text
    editing.insert_text(editor.current, text)


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "noop": _handle_noop,
    "keyboard_quit": _handle_keyboard_quit,
    "move_forward": partial(_handle_motion, motion=navigation.forward_char),
    "move_backward": partial(_handle_motion, motion=navigation.backward_char),
    "move_to_line_start": partial(_handle_motion, motion=navigation.line_start),
    "move_to_line_end": partial(_handle_motion, motion=navigation.line_end),
    "move_next_line": partial(_handle_motion, motion=navigation.next_line),
    "move_previous_line": partial(_handle_motion, motion=navigation.previous_line),
    "move_forward_word": partial(_handle_motion, motion=navigation.forward_word),
    "move_backward_word": partial(_handle_motion, motion=navigation.backward_word),
    "move_to_buffer_start": partial(_handle_motion, motion=navigation.buffer_start),
    "move_to_buffer_end": partial(_handle_motion, motion=navigation.buffer_end),
    "delete_char": _handle_delete_char,
    "delete_backward_char": _handle_delete_backward_char,
    "kill_line": _handle_kill_line,
    "yank": _handle_yank,
    "undo": _handle_undo,
    "redo": _handle_redo,
    "kill_region": _handle_kill_region,
    "copy_region": _handle_copy_region,
    "isearch_forward": partial(_handle_isearch, backward=False),
    "isearch_backward": partial(_handle_isearch, backward=True),
    "set_cursor": _handle_set_cursor,
    "insert_text": _handle_insert_text,
}


__all__ = ["CommandHandler", "command_names", "resolve"]
