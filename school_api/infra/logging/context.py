"""Context management for structured logging.

Request-scoped fields (request_id, operation_name) are kept in a ContextVar
and copied onto every LogRecord by ContextInjectingFilter, so resolvers and
infrastructure code never pass them around explicitly.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any

# Each asyncio task gets its own copy automatically
_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})


def set_log_context(**kwargs: Any) -> None:
    """Add fields to the logging context of the current task.

    Example:
        ```python
        set_log_context(request_id="abc-123")
        logger.info("Executing operation")  # record carries request_id
        ```
    """
    current = _log_context.get().copy()
    current.update(kwargs)
    _log_context.set(current)


def get_log_context() -> dict[str, Any]:
    """Return a copy of the current logging context."""
    return _log_context.get().copy()


def clear_log_context() -> None:
    """Clear all logging context for the current task."""
    _log_context.set({})


class ContextInjectingFilter(logging.Filter):
    """Logging filter that copies the contextvars log context onto records.

    Attached to the QueueHandler by configure_logging(), so it runs in the
    emitting task where the context is visible.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _log_context.get().items():
            # Explicit extra= values win over context
            if not hasattr(record, key):
                setattr(record, key, value)
        return True
