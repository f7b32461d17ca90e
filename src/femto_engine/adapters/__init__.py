"""Host-facing adapters wrapping the editor state."""

from .session import EditorSession, SessionHooks, SessionResult

__all__ = ["EditorSession", "SessionHooks", "SessionResult"]
