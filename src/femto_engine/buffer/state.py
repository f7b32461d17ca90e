"""Per-document state: text, cursor, undo history and file metadata."""

from __future__ import annotations

from contextlib import AbstractContextManager
from pathlib import PurePath
from typing import TYPE_CHECKING, ContextManager, Optional, Union

from femto_engine.config import EngineConfig
from femto_engine.runtime import telemetry

from .lines import LineCol, line_col_at
from .text import TextBuffer
from .undo import UndoCheckpoint, UndoSnapshot, UndoStack
from .validation import clamp_cursor

if TYPE_CHECKING:
    from femto_engine.actions.search import QueryReplaceSession

PathLike = Union[str, PurePath]


class BufferState:
    """One open document.

    ``cursor`` is a character offset and always lies within
    ``[0, buffer.char_len()]``; every mutator re-clamps it.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.config = config or EngineConfig()
        self.buffer = TextBuffer()
        self.cursor = 0
        self.undo_stack = UndoStack(self.config.undo_limit)
        self.modified = False
        self.encoding = self.config.default_encoding
        self.line_ending = self.config.default_line_ending
        self.file_path: Optional[str] = None
        self.status_message: Optional[str] = None
        self.query_session: Optional["QueryReplaceSession"] = None

    @classmethod
    def from_text(
        cls, text: str, *, config: Optional[EngineConfig] = None
    ) -> "BufferState":
        state = cls(config)
        state.buffer = TextBuffer.from_text(text)
        return state

    @property
    def name(self) -> str:
        if self.file_path is None:
            return self.config.scratch_name
        return PurePath(self.file_path).name or self.file_path

    @property
    def text(self) -> str:
        return self.buffer.as_text()

    def load_content(
        self,
        content: str,
        encoding: str,
        line_ending: str,
        file_path: Optional[PathLike],
    ) -> None:
        """Replace the document wholesale with freshly decoded file content."""

        self.buffer = TextBuffer.from_text(content)
        self.cursor = 0
        self.modified = False
        self.encoding = encoding
        self.line_ending = line_ending
        self.file_path = None if file_path is None else str(file_path)
        self.undo_stack.clear_all()
        self.query_session = None

    def set_file_path(self, file_path: PathLike) -> None:
        self.file_path = str(file_path)

    def mark_saved(self) -> None:
        self.modified = False

    def set_status_message(self, message: Optional[str]) -> None:
        self.status_message = message

    def set_cursor(self, cursor: int) -> None:
        self.cursor = clamp_cursor(self.buffer, cursor)

    def capture(self) -> UndoSnapshot:
        return UndoSnapshot(text=self.buffer.as_text(), cursor=self.cursor)

    def restore(self, snapshot: UndoSnapshot) -> None:
        self.buffer = TextBuffer.from_text(snapshot.text)
        self.cursor = clamp_cursor(self.buffer, snapshot.cursor)

    def record_undo_snapshot(self) -> None:
        self.undo_stack.push_undo(self.capture())
        self.undo_stack.clear_redo()

    def edit(self, label: str) -> "Transaction":
        return Transaction(self, label)

    def undo(self) -> None:
        previous = self.undo_stack.pop_undo()
        if previous is None:
            self.set_status_message("Undo: no more changes")
            return
        self.undo_stack.push_redo(self.capture())
        self.restore(previous)
        self.modified = True
        self.set_status_message("Undo")

    def redo(self) -> None:
        following = self.undo_stack.pop_redo()
        if following is None:
            self.set_status_message("Redo: no more changes")
            return
        self.undo_stack.push_undo(self.capture())
        self.restore(following)
        self.modified = True
        self.set_status_message("Redo")

    def line_col(self) -> LineCol:
        return line_col_at(self.buffer.as_text(), self.cursor)

    def line_col_at(self, offset: int) -> LineCol:
        return line_col_at(self.buffer.as_text(), offset)


class Transaction(AbstractContextManager["Transaction"]):
    """Undo checkpoint around one mutating operation.

    Entering records the pre-edit snapshot on the undo stack and clears redo.
    If the block raises, the text, cursor and both history stacks are put
    back as they were, so a failed command leaves no partial mutation behind
    and loses neither redo entries nor the oldest undo entry.
    """

    def __init__(self, state: BufferState, label: str) -> None:
        self.state = state
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None
        self._before: Optional[UndoSnapshot] = None
        self._history: Optional[UndoCheckpoint] = None
        self._modified_before = False

    def __enter__(self) -> "Transaction":
        self._before = self.state.capture()
        self._history = self.state.undo_stack.checkpoint()
        self._modified_before = self.state.modified
        self._span_cm = telemetry.buffer_span(f"buffer::{self.label}", self.state)
        self._span_cm.__enter__()
        self.state.record_undo_snapshot()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is not None and self._before is not None:
            if self._history is not None:
                self.state.undo_stack.restore(self._history)
            self.state.restore(self._before)
            self.state.modified = self._modified_before
        else:
            self.state.modified = True
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["BufferState", "Transaction", "PathLike"]
