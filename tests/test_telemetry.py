from __future__ import annotations

import pytest

from femto_engine.buffer import BufferState
from femto_engine.runtime import telemetry


def test_config_and_level_are_mutually_exclusive() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), level="debug")
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), quiet=True)


def test_reconfiguring_drops_cached_loggers() -> None:
    logger = telemetry.get_logger("femto_engine.tests")
    assert telemetry.get_logger("femto_engine.tests") is logger

    telemetry.configure(quiet=True)
    try:
        assert telemetry.get_logger("femto_engine.tests") is not logger
    finally:
        telemetry.configure()


def test_span_reraises_and_keeps_logger_cached() -> None:
    logger = telemetry.get_logger("femto_engine.tests")

    with pytest.raises(KeyError):
        with telemetry.span(
            "tests::boom", fields={"step": 1}, logger_name="femto_engine.tests"
        ):
            raise KeyError("boom")

    assert telemetry.get_logger("femto_engine.tests") is logger


def test_buffer_fields_describe_the_buffer() -> None:
    state = BufferState.from_text("hello")
    state.set_cursor(3)
    state.set_file_path("/tmp/notes.txt")

    assert telemetry.buffer_fields(state) == {
        "buffer": "notes.txt",
        "cursor": 3,
        "chars": 5,
        "modified": False,
    }


def test_buffer_span_wraps_an_edit() -> None:
    state = BufferState.from_text("abc")

    with telemetry.buffer_span("tests::edit", state, action="y"):
        state.buffer.insert_at(0, "x")

    with pytest.raises(ValueError):
        with telemetry.buffer_span("tests::fail", state):
            raise ValueError("nope")

    assert state.text == "xabc"


def test_unsupported_event_level() -> None:
    with pytest.raises(ValueError, match="Unsupported log level"):
        telemetry.record_event("tests.event", level="shouting")
