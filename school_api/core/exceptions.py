"""Custom exception classes for the application.

Every exception carries a GraphQL ``extensions.code`` so the error formatter
can classify it without knowing the concrete class.
"""

from __future__ import annotations

from typing import Any


class AppException(Exception):
    """Base application exception.

    Attributes:
        detail: Human-readable error message, safe to show to API clients.
        code: Machine-readable error code reported in GraphQL extensions.
        extra: Additional context for logs (never sent to clients).
    """

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, detail: str, *, extra: dict[str, Any] | None = None) -> None:
        self.detail = detail
        self.extra = extra or {}
        super().__init__(detail)

    @property
    def is_client_error(self) -> bool:
        return self.code != "INTERNAL_SERVER_ERROR"


class UserInputError(AppException):
    """The request carried arguments that cannot be processed."""

    code = "BAD_USER_INPUT"


class InvalidArgumentError(UserInputError):
    """A resolver argument is out of range (e.g. an impossible calendar date)."""


class InvalidStoredDataError(AppException):
    """A stored value does not have the shape the API expects."""
