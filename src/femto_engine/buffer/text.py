"""Character-indexed text storage backing every buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class TextBuffer:
    """Owned, mutable character sequence.

    Every index accepted or returned here is a character (code point) offset.
    ``storage_offset`` translates such an offset into the position of the same
    character once the text is encoded, for hosts that address raw storage.
    """

    _text: str = ""
    version: int = 0

    @classmethod
    def from_text(cls, text: str) -> "TextBuffer":
        return cls(_text=text, version=0)

    def as_text(self) -> str:
        return self._text

    def char_len(self) -> int:
        return len(self._text)

    def __len__(self) -> int:
        return len(self._text)

    def insert_at(self, char_index: int, text: str) -> None:
        if not text:
            return
        index = self._clamp(char_index)
        self._text = self._text[:index] + text + self._text[index:]
        self.version += 1

    def remove_range(self, start: int, end: int) -> None:
        """Remove ``[start, end)``; a no-op when ``start >= end``."""

        if start >= end:
            return
        start = self._clamp(start)
        end = self._clamp(end)
        if start == end:
            return
        self._text = self._text[:start] + self._text[end:]
        self.version += 1

    def slice(self, start: int, end: int) -> str:
        return self._text[self._clamp(start) : self._clamp(end)]

    def find(self, query: str, start: int = 0) -> Optional[int]:
        """Offset of the first ``query`` at or after ``start``."""

        if start > len(self._text):
            return None
        index = self._text.find(query, max(0, start))
        return None if index < 0 else index

    def rfind(self, query: str, end: int) -> Optional[int]:
        """Offset of the last ``query`` lying entirely before ``end``."""

        index = self._text.rfind(query, 0, self._clamp(end))
        return None if index < 0 else index

    def storage_offset(self, char_index: int, encoding: str = "utf-8") -> int:
        """Encoded length of the text preceding ``char_index``."""

        prefix = self._text[: self._clamp(char_index)]
        return len(prefix.encode(encoding))

    def _clamp(self, index: int) -> int:
        return max(0, min(index, len(self._text)))


__all__ = ["TextBuffer"]
