from __future__ import annotations

import pytest

from femto_engine.config import EngineConfig
from femto_engine.editor import EditorState
from femto_engine.errors import BufferNotFoundError


def test_starts_with_scratch_buffer() -> None:
    editor = EditorState()

    snapshot = editor.snapshot()

    assert editor.buffer_names() == ["*scratch*"]
    assert snapshot.text == ""
    assert (snapshot.line, snapshot.col) == (1, 1)
    assert snapshot.encoding == "UTF-8"
    assert snapshot.line_ending == "CRLF"
    assert snapshot.file_path is None
    assert snapshot.modified is False


def test_load_content_seeds_current_buffer() -> None:
    editor = EditorState()
    editor.execute("insert_text", {"text": "draft"})

    snapshot = editor.load_content("line one\nline two", "Shift-JIS", "LF", "/docs/notes.txt")

    assert snapshot.text == "line one\nline two"
    assert snapshot.cursor == 0
    assert snapshot.modified is False
    assert snapshot.encoding == "Shift-JIS"
    assert snapshot.line_ending == "LF"
    assert snapshot.file_path == "/docs/notes.txt"
    assert editor.current.name == "notes.txt"
    assert not editor.current.undo_stack.can_undo()


def test_mark_saved_and_set_file_path() -> None:
    editor = EditorState()
    editor.execute("insert_text", {"text": "x"})

    editor.set_file_path("/tmp/out.txt")
    snapshot = editor.mark_saved()

    assert snapshot.modified is False
    assert snapshot.file_path == "/tmp/out.txt"


def test_kill_ring_is_shared_across_buffers() -> None:
    editor = EditorState()
    editor.load_content("shared text", "UTF-8", "LF", "/a.txt")
    editor.execute("copy_region", {"start": 0, "end": 6})

    editor.open_buffer("", "UTF-8", "LF", "/b.txt")
    snapshot = editor.execute("yank")

    assert snapshot.text == "shared"
    assert editor.buffer_names() == ["a.txt", "b.txt"]


def test_open_buffer_reuses_existing_path() -> None:
    editor = EditorState()
    editor.open_buffer("one", "UTF-8", "LF", "/x/one.txt")
    editor.open_buffer("two", "UTF-8", "LF", "/x/two.txt")

    snapshot = editor.open_buffer("one again", "UTF-8", "LF", "/x/one.txt")

    assert len(editor.buffers) == 3
    assert snapshot.text == "one again"
    assert editor.current_index == 1
    assert editor.find_buffer_by_path("/x/two.txt") == 2
    assert editor.find_buffer_by_path("/missing") is None


def test_switch_to_buffer_tracks_previous() -> None:
    editor = EditorState()
    editor.open_buffer("a", "UTF-8", "LF", "/a.txt")
    editor.open_buffer("b", "UTF-8", "LF", "/b.txt")

    assert editor.default_switch_name() == "a.txt"

    snapshot = editor.switch_to_buffer("*scratch*")
    assert snapshot.status_message == "Switched to *scratch*"
    assert editor.default_switch_name() == "b.txt"

    listing = editor.list_buffers()
    assert listing.names == ("*scratch*", "a.txt", "b.txt")
    assert listing.current == "*scratch*"
    assert listing.default_switch == "b.txt"


def test_switch_to_unknown_buffer_fails_without_change() -> None:
    editor = EditorState()

    with pytest.raises(BufferNotFoundError, match="No buffer named 'nope'"):
        editor.switch_to_buffer("nope")
    assert editor.current_index == 0


def test_default_switch_name_with_single_buffer() -> None:
    editor = EditorState()

    assert editor.default_switch_name() == "*scratch*"


def test_switch_to_index_rejects_out_of_range() -> None:
    editor = EditorState()

    with pytest.raises(IndexError):
        editor.switch_to_index(3)


def test_sessions_do_not_share_kill_rings() -> None:
    first, second = EditorState(), EditorState()
    first.execute("insert_text", {"text": "abc"})
    first.execute("copy_region", {"start": 0, "end": 3})

    snapshot = second.execute("yank")

    assert snapshot.status_message == "Kill ring empty"
    assert len(first.kill_ring) == 1


def test_config_limits_are_applied() -> None:
    editor = EditorState(config=EngineConfig(undo_limit=2, kill_ring_limit=1))
    for text in ("a", "b", "c"):
        editor.execute("insert_text", {"text": text})
        editor.execute("copy_region", {"start": 0, "end": 1})

    assert editor.current.undo_stack.undo_depth == 2
    assert len(editor.kill_ring) == 1


def test_snapshot_as_dict_uses_wire_names() -> None:
    editor = EditorState()
    editor.execute("insert_text", {"text": "hé\nx"})

    payload = editor.snapshot().as_dict()

    assert payload["chars"] == 4
    assert payload["line"] == 2
    assert payload["col"] == 2
    assert payload["lineEnding"] == "CRLF"
    assert payload["statusMessage"] is None
    assert payload["filePath"] is None
