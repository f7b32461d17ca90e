"""Read-only projections handed back to the presentation shell."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from femto_engine.buffer import BufferState


@dataclass(frozen=True, slots=True)
class EditorSnapshot:
    """Point-in-time view of the current buffer, taken after every command."""

    text: str
    cursor: int
    line: int
    col: int
    chars: int
    modified: bool
    encoding: str
    line_ending: str
    file_path: Optional[str]
    status_message: Optional[str]

    @classmethod
    def of(cls, state: BufferState) -> "EditorSnapshot":
        line, col = state.line_col()
        return cls(
            text=state.text,
            cursor=state.cursor,
            line=line,
            col=col,
            chars=state.buffer.char_len(),
            modified=state.modified,
            encoding=state.encoding,
            line_ending=state.line_ending,
            file_path=state.file_path,
            status_message=state.status_message,
        )

    def as_dict(self) -> dict[str, object]:
        return {
            "text": self.text,
            "cursor": self.cursor,
            "line": self.line,
            "col": self.col,
            "chars": self.chars,
            "modified": self.modified,
            "encoding": self.encoding,
            "lineEnding": self.line_ending,
            "filePath": self.file_path,
            "statusMessage": self.status_message,
        }


@dataclass(frozen=True, slots=True)
class BufferList:
    names: Tuple[str, ...]
    current: str
    default_switch: str

    def as_dict(self) -> dict[str, object]:
        return {
            "names": list(self.names),
            "current": self.current,
            "defaultSwitch": self.default_switch,
        }


__all__ = ["EditorSnapshot", "BufferList"]
