"""Database exceptions.

Store failures are reported to API clients without internal detail; the
original SQLAlchemy error stays attached as ``__cause__`` for logging.
"""

from __future__ import annotations

from typing import Any

from school_api.core.exceptions import AppException


class DatabaseError(AppException):
    """A statement failed to execute."""

    def __init__(self, detail: str = "Database error", *, extra: dict[str, Any] | None = None) -> None:
        super().__init__(detail, extra=extra)


class TransactionBeginError(DatabaseError):
    """The request transaction could not be started."""

    def __init__(self, *, extra: dict[str, Any] | None = None) -> None:
        super().__init__("Transaction begin failed", extra=extra)
