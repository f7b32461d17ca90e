"""Editor session façade, command dispatch and snapshots."""

from .commands import command_names, resolve
from .payloads import (
    CommandPayload,
    CursorPayload,
    InsertPayload,
    QueryReplacePayload,
    QueryReplaceStepPayload,
    RegionPayload,
    SearchPayload,
    parse_payload,
)
from .snapshot import BufferList, EditorSnapshot
from .state import EditorState

__all__ = [
    "BufferList",
    "CommandPayload",
    "CursorPayload",
    "EditorSnapshot",
    "EditorState",
    "InsertPayload",
    "QueryReplacePayload",
    "QueryReplaceStepPayload",
    "RegionPayload",
    "SearchPayload",
    "command_names",
    "parse_payload",
    "resolve",
]
