"""telelog plumbing for the editing engine.

Callers use ``record_event`` for one-off facts (a load, a buffer switch, a
finished query-replace) and ``buffer_span`` to profile work done against one
buffer. A span pushes the buffer's name, cursor and length as logger context
so every line emitted inside it can be traced back to the document.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from typing import (
    TYPE_CHECKING,
    Any,
    ContextManager,
    Dict,
    Iterator,
    MutableMapping,
    Optional,
    cast,
)

import telelog  # type: ignore[import]

if TYPE_CHECKING:
    from femto_engine.buffer.state import BufferState

tl = cast(Any, telelog)

ENV_PREFIX = "FEMTO_ENGINE_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "femto_engine")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def _build_config(level: Optional[str], quiet: bool) -> Any:
    config = tl.Config()
    if quiet:
        # Embedded hosts render their own status line; only problems get out.
        config.with_min_level("WARNING")
        config.with_console_output(False)
    else:
        config.with_min_level((level or _env("LOG_LEVEL") or "INFO").upper())
        config.with_console_output(not _env_flag("DISABLE_CONSOLE"))
        config.with_colored_output(not _env_flag("NO_COLOR"))
    if _env_flag("LOG_JSON"):
        config.with_json_format(True)
    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    return config


def configure(
    *,
    config: Optional[Any] = None,
    level: Optional[str] = None,
    quiet: bool = False,
) -> None:
    """Swap the telelog configuration every engine logger is built from.

    ``config`` adopts a ready ``tl.Config``. Otherwise one is built from
    ``level`` (falling back to ``FEMTO_ENGINE_LOG_LEVEL``), or, with
    ``quiet``, one that only records warnings and never writes to the console.
    """

    global _ACTIVE_CONFIG
    if config is not None and (level is not None or quiet):
        raise ValueError("Pass a telelog config or level/quiet, not both.")
    _ACTIVE_CONFIG = config if config is not None else _build_config(level, quiet)
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        if _ACTIVE_CONFIG is None:
            configure()
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def _text(value: Any) -> str:
    return value if isinstance(value, str) else repr(value)


def _emit(log: Any, level: str, message: str, fields: Dict[str, Any]) -> None:
    name = str(level).lower()
    structured = getattr(log, f"{name}_with", None)
    if structured is not None:
        structured(message, [(key, _text(value)) for key, value in fields.items()])
        return
    plain = getattr(log, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {fields}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` as structured fields."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


def buffer_fields(state: "BufferState") -> Dict[str, Any]:
    return {
        "buffer": state.name,
        "cursor": state.cursor,
        "chars": state.buffer.char_len(),
        "modified": state.modified,
    }


@contextmanager
def span(
    name: str,
    *,
    component: Optional[str] = None,
    fields: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> Iterator[None]:
    """Profile the block as ``name``, with ``fields`` pushed as logger context.

    A block that raises is logged as ``span::fail`` and the error propagates.
    """

    log = get_logger(logger_name)
    context = {key: _text(value) for key, value in (fields or {}).items()}
    with ExitStack() as stack:
        for key, value in context.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))
        try:
            yield
        except Exception as exc:
            failure = {"span": name, **context, "reason": str(exc)}
            _emit(log, "error", "span::fail", failure)
            raise


def buffer_span(
    name: str,
    state: "BufferState",
    *,
    component: str = "buffer",
    **extra: Any,
) -> ContextManager[None]:
    """``span`` tagged with the buffer ``state`` as it stood on entry."""

    return span(name, component=component, fields={**buffer_fields(state), **extra})


__all__ = [
    "buffer_fields",
    "buffer_span",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
