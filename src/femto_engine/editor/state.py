"""Top-level editor session: open buffers, the shared kill ring, dispatch."""

from __future__ import annotations

from typing import List, Optional, Tuple

from femto_engine.actions import search
from femto_engine.actions.search import QueryReplaceStatus
from femto_engine.buffer import BufferState, KillRing
from femto_engine.buffer.state import PathLike
from femto_engine.config import EngineConfig
from femto_engine.errors import BufferNotFoundError
from femto_engine.runtime import telemetry

from .commands import resolve
from .payloads import parse_payload
from .snapshot import BufferList, EditorSnapshot


class EditorState:
    """Owns every open buffer and the kill ring they share.

    There is always at least one buffer, and ``current_index`` always points
    at one of them. ``previous_index`` remembers the buffer that was current
    before the last switch and drives ``default_switch_name``.
    """

    def __init__(self, *, config: Optional[EngineConfig] = None) -> None:
        self.config = config or EngineConfig()
        self.buffers: List[BufferState] = [BufferState(self.config)]
        self.current_index = 0
        self.previous_index = 0
        self.kill_ring = KillRing(self.config.kill_ring_limit)

    @property
    def current(self) -> BufferState:
        return self.buffers[self.current_index]

    def snapshot(self) -> EditorSnapshot:
        return EditorSnapshot.of(self.current)

    def execute(self, command: str, payload: object = None) -> EditorSnapshot:
        """Run one command against the current buffer and snapshot the result."""

        handler = resolve(command)
        typed = parse_payload(payload)
        with telemetry.buffer_span(
            f"command::{command}", self.current, component="commands"
        ):
            handler(self, typed)
        return self.snapshot()

    def start_query_replace(
        self, query: str, replacement: str
    ) -> Tuple[EditorSnapshot, QueryReplaceStatus]:
        with telemetry.buffer_span(
            "command::start_query_replace", self.current, component="commands"
        ):
            status = search.start_query_replace(self.current, query, replacement)
        return self.snapshot(), status

    def query_replace_step(
        self, action: str
    ) -> Tuple[EditorSnapshot, QueryReplaceStatus]:
        with telemetry.buffer_span(
            "command::query_replace_step",
            self.current,
            component="commands",
            action=action,
        ):
            status = search.query_replace_step(self.current, action)
        return self.snapshot(), status

    def set_status_message(self, message: Optional[str]) -> None:
        self.current.set_status_message(message)

    def load_content(
        self,
        text: str,
        encoding: str,
        line_ending: str,
        file_path: Optional[PathLike] = None,
    ) -> EditorSnapshot:
        """Seed the current buffer with decoded file content."""

        self.current.load_content(text, encoding, line_ending, file_path)
        telemetry.record_event(
            "buffer.load",
            data={
                **telemetry.buffer_fields(self.current),
                "encoding": encoding,
                "line_ending": line_ending,
            },
        )
        return self.snapshot()

    def mark_saved(self) -> EditorSnapshot:
        self.current.mark_saved()
        return self.snapshot()

    def set_file_path(self, file_path: PathLike) -> EditorSnapshot:
        self.current.set_file_path(file_path)
        return self.snapshot()

    # Multi-buffer capability; hosts that only ever edit one document can
    # ignore everything below.

    def open_buffer(
        self,
        text: str,
        encoding: str,
        line_ending: str,
        file_path: PathLike,
    ) -> EditorSnapshot:
        """Visit ``file_path`` in its own buffer, reusing one already visiting it."""

        index = self.find_buffer_by_path(file_path)
        if index is None:
            self.buffers.append(BufferState(self.config))
            index = len(self.buffers) - 1
        self.switch_to_index(index)
        return self.load_content(text, encoding, line_ending, file_path)

    def buffer_names(self) -> List[str]:
        return [buffer.name for buffer in self.buffers]

    def list_buffers(self) -> BufferList:
        return BufferList(
            names=tuple(self.buffer_names()),
            current=self.current.name,
            default_switch=self.default_switch_name(),
        )

    def find_buffer_by_path(self, file_path: PathLike) -> Optional[int]:
        target = str(file_path)
        for index, buffer in enumerate(self.buffers):
            if buffer.file_path == target:
                return index
        return None

    def switch_to_index(self, index: int) -> None:
        if not 0 <= index < len(self.buffers):
            raise IndexError(f"buffer index {index} out of range")
        if index != self.current_index:
            self.previous_index = self.current_index
            self.current_index = index
            telemetry.record_event(
                "buffer.switch", data={"buffer": self.current.name, "index": index}
            )

    def switch_to_buffer(self, name: str) -> EditorSnapshot:
        for index, buffer in enumerate(self.buffers):
            if buffer.name == name:
                break
        else:
            raise BufferNotFoundError(name)
        self.switch_to_index(index)
        self.current.set_status_message(f"Switched to {name}")
        return self.snapshot()

    def default_switch_name(self) -> str:
        if (
            self.previous_index < len(self.buffers)
            and self.previous_index != self.current_index
        ):
            return self.buffers[self.previous_index].name
        for index, buffer in enumerate(self.buffers):
            if index != self.current_index:
                return buffer.name
        return self.current.name


__all__ = ["EditorState"]
