"""Engine limits and buffer defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

ENV_PREFIX = "FEMTO_ENGINE_"

SCRATCH_BUFFER_NAME = "*scratch*"


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Tunables threaded into every buffer and the shared kill ring."""

    undo_limit: int = 1000
    kill_ring_limit: int = 10
    default_encoding: str = "UTF-8"
    default_line_ending: str = "CRLF"
    scratch_name: str = SCRATCH_BUFFER_NAME

    def __post_init__(self) -> None:
        if self.undo_limit < 1:
            raise ValueError("undo_limit must be a positive integer")
        if self.kill_ring_limit < 1:
            raise ValueError("kill_ring_limit must be a positive integer")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        """Build a config from ``FEMTO_ENGINE_*`` variables, keeping defaults."""

        env = os.environ if environ is None else environ
        config = cls()
        overrides: dict[str, object] = {}

        undo_limit = env.get(f"{ENV_PREFIX}UNDO_LIMIT")
        if undo_limit is not None:
            overrides["undo_limit"] = _positive_int("UNDO_LIMIT", undo_limit)
        kill_ring_limit = env.get(f"{ENV_PREFIX}KILL_RING_LIMIT")
        if kill_ring_limit is not None:
            overrides["kill_ring_limit"] = _positive_int(
                "KILL_RING_LIMIT", kill_ring_limit
            )
        encoding = env.get(f"{ENV_PREFIX}DEFAULT_ENCODING")
        if encoding:
            overrides["default_encoding"] = encoding
        line_ending = env.get(f"{ENV_PREFIX}DEFAULT_LINE_ENDING")
        if line_ending:
            overrides["default_line_ending"] = line_ending.upper()

        return replace(config, **overrides) if overrides else config


def _positive_int(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc
    if value < 1:
        raise ValueError(f"{ENV_PREFIX}{name} must be positive, got {value}")
    return value


__all__ = ["EngineConfig", "SCRATCH_BUFFER_NAME"]
