"""Lock-serialised session facade a presentation shell talks to."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

from femto_engine.actions.search import QueryReplaceStatus
from femto_engine.buffer.state import PathLike
from femto_engine.editor import (
    BufferList,
    EditorSnapshot,
    EditorState,
    QueryReplacePayload,
    QueryReplaceStepPayload,
)
from femto_engine.errors import EditorError
from femto_engine.runtime import telemetry


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class SessionHooks:
    """Callbacks invoked after every call so the host can re-render."""

    update_snapshot: Callable[[EditorSnapshot], None] = _noop
    update_status: Callable[[str], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


@dataclass(frozen=True, slots=True)
class SessionResult:
    """Either a fresh snapshot or a descriptive error, never both missing.

    ``snapshot`` is always present; on failure it shows the unchanged state.
    """

    snapshot: EditorSnapshot
    error: Optional[str] = None
    replace_status: Optional[QueryReplaceStatus] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"snapshot": self.snapshot.as_dict()}
        if self.error is not None:
            payload["error"] = self.error
        if self.replace_status is not None:
            payload["status"] = self.replace_status.as_dict()
        return payload


class EditorSession:
    """Serialises every call into one ``EditorState`` behind a single lock."""

    def __init__(
        self,
        editor: Optional[EditorState] = None,
        hooks: Optional[SessionHooks] = None,
    ) -> None:
        self.editor = editor or EditorState()
        self.hooks = hooks or SessionHooks()
        self._lock = threading.Lock()

    def initialize(self) -> SessionResult:
        with self._lock:
            return self._finish("initialize", SessionResult(self.editor.snapshot()))

    def command(self, name: str, payload: object = None) -> SessionResult:
        with self._lock:
            self._log_state("command ->", command=name, payload=payload)
            try:
                result = SessionResult(self.editor.execute(name, payload))
            except EditorError as exc:
                result = SessionResult(self.editor.snapshot(), error=str(exc))
            return self._finish(name, result)

    def start_query_replace(
        self, payload: Mapping[str, Any] | QueryReplacePayload
    ) -> SessionResult:
        with self._lock:
            try:
                if not isinstance(payload, QueryReplacePayload):
                    payload = QueryReplacePayload.from_mapping(payload)
                snapshot, status = self.editor.start_query_replace(
                    payload.query, payload.replace_with
                )
                result = SessionResult(snapshot, replace_status=status)
            except EditorError as exc:
                result = SessionResult(self.editor.snapshot(), error=str(exc))
            return self._finish("start_query_replace", result)

    def query_replace_step(
        self, payload: Mapping[str, Any] | QueryReplaceStepPayload | str
    ) -> SessionResult:
        with self._lock:
            try:
                if isinstance(payload, str):
                    payload = QueryReplaceStepPayload(action=payload)
                elif not isinstance(payload, QueryReplaceStepPayload):
                    payload = QueryReplaceStepPayload.from_mapping(payload)
                snapshot, status = self.editor.query_replace_step(payload.action)
                result = SessionResult(snapshot, replace_status=status)
            except EditorError as exc:
                result = SessionResult(self.editor.snapshot(), error=str(exc))
            return self._finish("query_replace_step", result)

    def load_content(
        self,
        text: str,
        encoding: str,
        line_ending: str,
        file_path: Optional[PathLike] = None,
    ) -> SessionResult:
        with self._lock:
            snapshot = self.editor.load_content(text, encoding, line_ending, file_path)
            return self._finish("load_content", SessionResult(snapshot))

    def open_buffer(
        self, text: str, encoding: str, line_ending: str, file_path: PathLike
    ) -> SessionResult:
        with self._lock:
            snapshot = self.editor.open_buffer(text, encoding, line_ending, file_path)
            return self._finish("open_buffer", SessionResult(snapshot))

    def mark_saved(self) -> SessionResult:
        with self._lock:
            return self._finish("mark_saved", SessionResult(self.editor.mark_saved()))

    def set_file_path(self, file_path: PathLike) -> SessionResult:
        with self._lock:
            snapshot = self.editor.set_file_path(file_path)
            return self._finish("set_file_path", SessionResult(snapshot))

    def list_buffers(self) -> BufferList:
        with self._lock:
            return self.editor.list_buffers()

    def switch_buffer(self, name: str) -> SessionResult:
        with self._lock:
            try:
                result = SessionResult(self.editor.switch_to_buffer(name))
            except EditorError as exc:
                result = SessionResult(self.editor.snapshot(), error=str(exc))
            return self._finish("switch_buffer", result)

    def _finish(self, name: str, result: SessionResult) -> SessionResult:
        if result.error is not None:
            telemetry.record_event(
                "command.error",
                level="warning",
                data={"command": name, "error": result.error},
            )
        status = result.error or result.snapshot.status_message
        if status:
            self.hooks.update_status(status)
        self.hooks.update_snapshot(result.snapshot)
        self._log_state(
            "result <-",
            command=name,
            error=result.error,
            done=result.replace_status.done if result.replace_status else None,
        )
        return result

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        current = self.editor.current
        return {
            **telemetry.buffer_fields(current),
            "replacing": current.query_session is not None,
            "kill_ring": len(self.editor.kill_ring),
        }


__all__ = ["EditorSession", "SessionHooks", "SessionResult"]
