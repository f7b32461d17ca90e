"""Incremental search and the interactive query-replace state machine.

A buffer is either idle (``query_session is None``) or has one active
``QueryReplaceSession``. ``start_query_replace`` opens a session and every
``query_replace_step`` either advances it or ends it; a finished, cancelled or
exhausted session is always cleared from the buffer. Query-replace never
wraps around the buffer end, unlike incremental search.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from femto_engine.buffer import BufferState
from femto_engine.errors import InvalidArgumentError, NoActiveSessionError
from femto_engine.runtime import telemetry

REPLACE_ACTIONS = frozenset({"y", "n", "!", "q"})


@dataclass(slots=True)
class QueryReplaceSession:
    query: str
    replacement: str
    search_from: int = 0
    replaced_count: int = 0


@dataclass(frozen=True, slots=True)
class QueryReplaceStatus:
    """Outcome of starting or stepping a query-replace."""

    done: bool
    replaced_count: int
    message: str
    next_line: Optional[int] = None
    next_col: Optional[int] = None

    def as_dict(self) -> dict[str, object]:
        return {
            "done": self.done,
            "replacedCount": self.replaced_count,
            "nextLine": self.next_line,
            "nextCol": self.next_col,
            "message": self.message,
        }


def isearch_forward(state: BufferState, query: str) -> int:
    """Move to the next ``query`` after the cursor, wrapping to the top."""

    if not query:
        raise InvalidArgumentError("search query is empty")

    start = min(state.cursor + 1, state.buffer.char_len())
    found = state.buffer.find(query, start)
    if found is not None:
        state.set_cursor(found)
        state.set_status_message(f"I-Search forward: {query}")
        return found

    found = state.buffer.find(query, 0)
    if found is not None:
        state.set_cursor(found)
        state.set_status_message(f"I-Search wrapped: {query}")
        return found

    raise InvalidArgumentError(f"Not found: {query}")


def isearch_backward(state: BufferState, query: str) -> int:
    """Move to the previous ``query`` before the cursor, wrapping to the end."""

    if not query:
        raise InvalidArgumentError("search query is empty")

    found = state.buffer.rfind(query, max(state.cursor - 1, 0))
    if found is not None:
        state.set_cursor(found)
        state.set_status_message(f"I-Search backward: {query}")
        return found

    found = state.buffer.rfind(query, state.buffer.char_len())
    if found is not None:
        state.set_cursor(found)
        state.set_status_message(f"I-Search wrapped: {query}")
        return found

    raise InvalidArgumentError(f"Not found: {query}")


def start_query_replace(
    state: BufferState, query: str, replacement: str
) -> QueryReplaceStatus:
    if not query:
        raise InvalidArgumentError("query must not be empty")
    state.query_session = QueryReplaceSession(query=query, replacement=replacement)
    return query_replace_next_status(state)


def query_replace_step(state: BufferState, action: str) -> QueryReplaceStatus:
    action = action.lower()
    if action not in REPLACE_ACTIONS:
        raise InvalidArgumentError("action must be one of y/n/!/q")

    session = state.query_session
    if session is None:
        raise NoActiveSessionError("query replace is not active")

    if action == "q":
        state.query_session = None
        state.set_status_message(
            f"Query replace cancelled ({session.replaced_count} replaced)"
        )
        return QueryReplaceStatus(
            done=True, replaced_count=session.replaced_count, message="Cancelled"
        )

    pos = state.buffer.find(session.query, session.search_from)
    if pos is None:
        return _finish(state, session.replaced_count)

    if action == "!":
        return _replace_all(state, session, pos)

    if action == "y":
        with state.edit("query_replace"):
            _replace_at(state, pos, session)
            state.set_cursor(pos + len(session.replacement))
        session.search_from = state.cursor
        session.replaced_count += 1
    else:
        session.search_from = pos + len(session.query)

    return query_replace_next_status(state)


def query_replace_next_status(state: BufferState) -> QueryReplaceStatus:
    """Prompt for the next match, or end the session when there is none."""

    session = state.query_session
    if session is None:
        return QueryReplaceStatus(
            done=True, replaced_count=0, message="No active query replace"
        )

    pos = state.buffer.find(session.query, session.search_from)
    if pos is None:
        return _finish(state, session.replaced_count)

    state.set_cursor(pos)
    line, col = state.line_col_at(pos)
    return QueryReplaceStatus(
        done=False,
        replaced_count=session.replaced_count,
        next_line=line,
        next_col=col,
        message=f"Replace at L:{line} C:{col}? (y/n/!/q)",
    )


def cancel_query_replace(state: BufferState) -> bool:
    """Drop any active session; returns whether one was active."""

    active = state.query_session is not None
    state.query_session = None
    return active


def _replace_all(
    state: BufferState, session: QueryReplaceSession, first: int
) -> QueryReplaceStatus:
    count = session.replaced_count
    with state.edit("query_replace_all"):
        found: Optional[int] = first
        while found is not None:
            _replace_at(state, found, session)
            count += 1
            # Skip past the inserted text so a replacement containing the
            # query is never matched again.
            found = state.buffer.find(
                session.query, found + len(session.replacement)
            )
        state.set_cursor(state.cursor)
    return _finish(state, count)


def _replace_at(state: BufferState, pos: int, session: QueryReplaceSession) -> None:
    state.buffer.remove_range(pos, pos + len(session.query))
    state.buffer.insert_at(pos, session.replacement)


def _finish(state: BufferState, replaced: int) -> QueryReplaceStatus:
    state.query_session = None
    message = f"Replaced {replaced} occurrences"
    state.set_status_message(message)
    telemetry.record_event(
        "query_replace.done",
        data={**telemetry.buffer_fields(state), "replaced": replaced},
    )
    return QueryReplaceStatus(done=True, replaced_count=replaced, message=message)


__all__ = [
    "QueryReplaceSession",
    "QueryReplaceStatus",
    "REPLACE_ACTIONS",
    "cancel_query_replace",
    "isearch_backward",
    "isearch_forward",
    "query_replace_next_status",
    "query_replace_step",
    "start_query_replace",
]
