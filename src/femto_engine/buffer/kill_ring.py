"""Kill ring shared by every buffer of one editor session."""

from __future__ import annotations

from typing import List, Optional, Sequence

DEFAULT_KILL_RING_LIMIT = 10


class KillRing:
    """Most-recent-first history of killed and copied text."""

    def __init__(self, max_size: int = DEFAULT_KILL_RING_LIMIT) -> None:
        if max_size < 1:
            raise ValueError("max_size must be a positive integer")
        self.max_size = max_size
        self._entries: List[str] = []

    def push(self, text: str) -> None:
        if not text:
            return
        self._entries.insert(0, text)
        del self._entries[self.max_size :]

    def latest(self) -> Optional[str]:
        return self._entries[0] if self._entries else None

    def entries(self) -> Sequence[str]:
        return tuple(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)


__all__ = ["KillRing", "DEFAULT_KILL_RING_LIMIT"]
