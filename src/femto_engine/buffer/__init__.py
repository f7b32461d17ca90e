"""Buffer storage, undo history and the shared kill ring."""

from .kill_ring import KillRing
from .lines import LineCol, line_col_at, line_col_to_cursor
from .state import BufferState, Transaction
from .text import TextBuffer
from .undo import UndoCheckpoint, UndoSnapshot, UndoStack
from .validation import clamp_cursor, clamp_region

__all__ = [
    "BufferState",
    "KillRing",
    "LineCol",
    "TextBuffer",
    "Transaction",
    "UndoCheckpoint",
    "UndoSnapshot",
    "UndoStack",
    "clamp_cursor",
    "clamp_region",
    "line_col_at",
    "line_col_to_cursor",
]
