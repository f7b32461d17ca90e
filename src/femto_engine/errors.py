"""Error types surfaced through the command surface.

Every error is recoverable: the command that raised it applied no mutation,
and ``str(error)`` is the descriptive message handed back to the host.
"""

from __future__ import annotations

from typing import Optional


class EditorError(RuntimeError):
    """Base class for failures reported to the presentation shell."""

    def __init__(self, message: str, *, command: Optional[str] = None) -> None:
        super().__init__(message)
        self.command = command


class InvalidPayloadError(EditorError):
    """Raised when a command receives a missing or wrongly shaped payload."""


class InvalidArgumentError(EditorError):
    """Raised for empty queries, unknown replace actions and search misses."""


class UnknownCommandError(InvalidArgumentError):
    """Raised when the dispatcher has no handler for a command name."""


class NoActiveSessionError(EditorError):
    """Raised when stepping a query-replace that was never started."""


class BufferNotFoundError(EditorError):
    """Raised when switching to a buffer name that is not open."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No buffer named '{name}'")
        self.name = name


__all__ = [
    "EditorError",
    "InvalidPayloadError",
    "InvalidArgumentError",
    "UnknownCommandError",
    "NoActiveSessionError",
    "BufferNotFoundError",
]
