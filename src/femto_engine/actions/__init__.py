"""Navigation, editing and search verbs operating on a ``BufferState``."""

from . import navigation
from .editing import (
    copy_region,
    delete_backward_char,
    delete_char,
    insert_text,
    kill_line,
    kill_region,
    set_cursor,
    yank,
)
from .search import (
    QueryReplaceSession,
    QueryReplaceStatus,
    cancel_query_replace,
    isearch_backward,
    isearch_forward,
    query_replace_next_status,
    query_replace_step,
    start_query_replace,
)

__all__ = [
    "navigation",
    "copy_region",
    "delete_backward_char",
    "delete_char",
    "insert_text",
    "kill_line",
    "kill_region",
    "set_cursor",
    "yank",
    "QueryReplaceSession",
    "QueryReplaceStatus",
    "cancel_query_replace",
    "isearch_backward",
    "isearch_forward",
    "query_replace_next_status",
    "query_replace_step",
    "start_query_replace",
]
