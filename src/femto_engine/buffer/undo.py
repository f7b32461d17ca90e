"""Bounded undo/redo history of whole-buffer snapshots."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional, Tuple

DEFAULT_UNDO_LIMIT = 1000


@dataclass(frozen=True, slots=True)
class UndoSnapshot:
    """Buffer text and cursor captured before a mutation."""

    text: str
    cursor: int


@dataclass(frozen=True, slots=True)
class UndoCheckpoint:
    """Contents of both stacks at one moment, oldest entry first."""

    undo: Tuple[UndoSnapshot, ...]
    redo: Tuple[UndoSnapshot, ...]


class UndoStack:
    """Two LIFO stacks; pushing past ``max_size`` drops the oldest entry."""

    def __init__(self, max_size: int = DEFAULT_UNDO_LIMIT) -> None:
        if max_size < 1:
            raise ValueError("max_size must be a positive integer")
        self.max_size = max_size
        self._undo: Deque[UndoSnapshot] = deque(maxlen=max_size)
        self._redo: Deque[UndoSnapshot] = deque(maxlen=max_size)

    def push_undo(self, snapshot: UndoSnapshot) -> None:
        self._undo.append(snapshot)

    def pop_undo(self) -> Optional[UndoSnapshot]:
        if not self._undo:
            return None
        return self._undo.pop()

    def push_redo(self, snapshot: UndoSnapshot) -> None:
        self._redo.append(snapshot)

    def pop_redo(self) -> Optional[UndoSnapshot]:
        if not self._redo:
            return None
        return self._redo.pop()

    def clear_redo(self) -> None:
        self._redo.clear()

    def clear_all(self) -> None:
        self._undo.clear()
        self._redo.clear()

    def checkpoint(self) -> UndoCheckpoint:
        return UndoCheckpoint(undo=tuple(self._undo), redo=tuple(self._redo))

    def restore(self, checkpoint: UndoCheckpoint) -> None:
        """Put both stacks back exactly as ``checkpoint`` recorded them."""

        self._undo = deque(checkpoint.undo, maxlen=self.max_size)
        self._redo = deque(checkpoint.redo, maxlen=self.max_size)

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)


__all__ = ["UndoCheckpoint", "UndoSnapshot", "UndoStack", "DEFAULT_UNDO_LIMIT"]
