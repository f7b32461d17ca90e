from __future__ import annotations

import threading
from typing import List

from femto_engine.adapters import EditorSession, SessionHooks
from femto_engine.editor import EditorSnapshot


def make_session() -> tuple[EditorSession, List[str], List[EditorSnapshot], List[str]]:
    statuses: List[str] = []
    snapshots: List[EditorSnapshot] = []
    logs: List[str] = []
    hooks = SessionHooks(
        update_snapshot=snapshots.append,
        update_status=statuses.append,
        log=logs.append,
    )
    return EditorSession(hooks=hooks), statuses, snapshots, logs


def test_initialize_returns_scratch_snapshot() -> None:
    session, _statuses, snapshots, _logs = make_session()

    result = session.initialize()

    assert result.ok
    assert result.snapshot.text == ""
    assert snapshots == [result.snapshot]


def test_command_errors_become_descriptive_strings() -> None:
    session, statuses, _snapshots, _logs = make_session()
    session.command("insert_text", {"text": "abc"})

    result = session.command("kill_region")

    assert not result.ok
    assert result.error == "kill_region requires region payload"
    assert result.snapshot.text == "abc"
    assert statuses[-1] == "kill_region requires region payload"

    unknown = session.command("teleport")
    assert unknown.error == "unknown command: teleport"
    assert unknown.as_dict()["error"] == "unknown command: teleport"


def test_query_replace_through_session() -> None:
    session, statuses, _snapshots, _logs = make_session()
    session.load_content("cat cat cat", "UTF-8", "LF", "/pets.txt")

    started = session.start_query_replace({"query": "cat", "replaceWith": "dog"})
    assert started.replace_status is not None
    assert started.replace_status.done is False

    for _ in range(3):
        result = session.query_replace_step({"action": "y"})

    assert result.snapshot.text == "dog dog dog"
    assert result.replace_status is not None
    assert result.replace_status.done is True
    assert result.as_dict()["status"]["replacedCount"] == 3
    assert statuses[-1] == "Replaced 3 occurrences"


def test_query_replace_errors() -> None:
    session, _statuses, _snapshots, _logs = make_session()

    missing = session.query_replace_step("y")
    assert missing.error == "query replace is not active"

    bad_payload = session.start_query_replace({"query": "x"})
    assert bad_payload.error is not None

    empty = session.start_query_replace({"query": "", "replace_with": "x"})
    assert empty.error == "query must not be empty"


def test_query_replace_rejects_non_mapping_payloads() -> None:
    session, statuses, _snapshots, _logs = make_session()

    started = session.start_query_replace(None)  # type: ignore[arg-type]
    assert started.error == "query replace requires query and replaceWith strings"
    assert started.replace_status is None

    stepped = session.query_replace_step(None)  # type: ignore[arg-type]
    assert stepped.error == "query replace step requires an action string"
    assert statuses[-1] == stepped.error


def test_buffer_management_through_session() -> None:
    session, _statuses, _snapshots, _logs = make_session()
    session.open_buffer("alpha", "UTF-8", "LF", "/alpha.txt")

    listing = session.list_buffers()
    assert listing.as_dict() == {
        "names": ["*scratch*", "alpha.txt"],
        "current": "alpha.txt",
        "defaultSwitch": "*scratch*",
    }

    switched = session.switch_buffer("*scratch*")
    assert switched.ok
    assert switched.snapshot.status_message == "Switched to *scratch*"
    assert session.switch_buffer("ghost").error == "No buffer named 'ghost'"


def test_save_touch_points() -> None:
    session, _statuses, _snapshots, _logs = make_session()
    session.command("insert_text", {"text": "note"})

    session.set_file_path("/notes/today.md")
    result = session.mark_saved()

    assert result.snapshot.modified is False
    assert result.snapshot.file_path == "/notes/today.md"


def test_log_hook_receives_state_lines() -> None:
    session, _statuses, _snapshots, logs = make_session()

    session.command("insert_text", {"text": "x"})

    assert any(line.startswith("command ->") for line in logs)
    assert any("result <-" in line and "cursor=1" in line for line in logs)


def test_concurrent_commands_are_serialised() -> None:
    session = EditorSession()

    def type_many() -> None:
        for _ in range(50):
            session.command("insert_text", {"text": "a"})

    threads = [threading.Thread(target=type_many) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    snapshot = session.initialize().snapshot
    assert snapshot.text == "a" * 200
    assert snapshot.cursor == 200
