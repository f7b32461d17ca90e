"""Typed command payloads and the parser for the host's raw mappings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from femto_engine.errors import InvalidPayloadError


@dataclass(frozen=True, slots=True)
class InsertPayload:
    text: str


@dataclass(frozen=True, slots=True)
class RegionPayload:
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class SearchPayload:
    query: str


@dataclass(frozen=True, slots=True)
class CursorPayload:
    cursor: int


@dataclass(frozen=True, slots=True)
class QueryReplacePayload:
    query: str
    replace_with: str

    @classmethod
    def from_mapping(cls, raw: object) -> "QueryReplacePayload":
        if not isinstance(raw, Mapping):
            raise InvalidPayloadError("query replace requires query and replaceWith strings")
        replacement = raw.get("replace_with", raw.get("replaceWith"))
        query = raw.get("query")
        if not isinstance(query, str) or not isinstance(replacement, str):
            raise InvalidPayloadError(
                "query replace requires query and replaceWith strings"
            )
        return cls(query=query, replace_with=replacement)


@dataclass(frozen=True, slots=True)
class QueryReplaceStepPayload:
    action: str

    @classmethod
    def from_mapping(cls, raw: object) -> "QueryReplaceStepPayload":
        if not isinstance(raw, Mapping):
            raise InvalidPayloadError("query replace step requires an action string")
        action = raw.get("action")
        if not isinstance(action, str):
            raise InvalidPayloadError("query replace step requires an action string")
        return cls(action=action)


CommandPayload = Union[InsertPayload, RegionPayload, SearchPayload, CursorPayload]

_PAYLOAD_TYPES = (InsertPayload, RegionPayload, SearchPayload, CursorPayload)


def parse_payload(raw: object) -> Optional[CommandPayload]:
    """Coerce ``raw`` into a typed payload.

    Typed payloads pass through. Mappings are matched by their keys, in the
    order insert, region, search, cursor; extra keys are ignored. ``None``
    stays ``None`` so handlers can report the missing payload themselves.
    """

    if raw is None or isinstance(raw, _PAYLOAD_TYPES):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidPayloadError(f"unsupported payload type: {type(raw).__name__}")

    if isinstance(raw.get("text"), str):
        return InsertPayload(text=raw["text"])
    if "start" in raw and "end" in raw:
        return RegionPayload(
            start=_offset(raw["start"], "start"), end=_offset(raw["end"], "end")
        )
    if isinstance(raw.get("query"), str):
        return SearchPayload(query=raw["query"])
    if "cursor" in raw:
        return CursorPayload(cursor=_offset(raw["cursor"], "cursor"))
    raise InvalidPayloadError(f"unrecognized payload keys: {sorted(raw)}")


def _offset(value: object, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidPayloadError(
            f"{field_name} must be a non-negative integer, got {value!r}"
        )
    return value


__all__ = [
    "CommandPayload",
    "CursorPayload",
    "InsertPayload",
    "QueryReplacePayload",
    "QueryReplaceStepPayload",
    "RegionPayload",
    "SearchPayload",
    "parse_payload",
]
