from __future__ import annotations

import pytest

from femto_engine.config import EngineConfig


def test_defaults() -> None:
    config = EngineConfig()

    assert config.undo_limit == 1000
    assert config.kill_ring_limit == 10
    assert config.default_encoding == "UTF-8"
    assert config.default_line_ending == "CRLF"
    assert config.scratch_name == "*scratch*"


def test_from_env_overrides() -> None:
    config = EngineConfig.from_env(
        {
            "FEMTO_ENGINE_UNDO_LIMIT": "50",
            "FEMTO_ENGINE_KILL_RING_LIMIT": "3",
            "FEMTO_ENGINE_DEFAULT_ENCODING": "EUC-JP",
            "FEMTO_ENGINE_DEFAULT_LINE_ENDING": "lf",
            "UNRELATED": "1",
        }
    )

    assert config.undo_limit == 50
    assert config.kill_ring_limit == 3
    assert config.default_encoding == "EUC-JP"
    assert config.default_line_ending == "LF"


def test_from_env_without_variables_keeps_defaults() -> None:
    assert EngineConfig.from_env({}) == EngineConfig()


def test_from_env_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FEMTO_ENGINE_UNDO_LIMIT", "7")

    assert EngineConfig.from_env().undo_limit == 7


@pytest.mark.parametrize("raw", ["0", "-3", "many"])
def test_from_env_rejects_bad_limits(raw: str) -> None:
    with pytest.raises(ValueError):
        EngineConfig.from_env({"FEMTO_ENGINE_KILL_RING_LIMIT": raw})


def test_rejects_non_positive_limits() -> None:
    with pytest.raises(ValueError):
        EngineConfig(undo_limit=0)
