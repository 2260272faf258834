"""GraphQL error formatting and masking.

Errors raised by resolvers reach the client with an ``extensions.code``:
application exceptions carry their own code and message, anything else is
logged with its traceback and, when masking is enabled, replaced by a
generic message.

Usage:
    result = await schema.execute(query, context_value=context)
    payload = {"data": result.data}
    if result.errors:
        payload["errors"] = format_graphql_errors(result.errors)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from school_api.core.exceptions import AppException

if TYPE_CHECKING:
    from graphql import GraphQLError
    from strawberry.types import ExecutionContext

logger = logging.getLogger(__name__)

__all__ = [
    "ErrorCode",
    "format_graphql_error",
    "format_graphql_errors",
    "log_graphql_errors",
]

MASKED_MESSAGE = "Internal server error"


class ErrorCode:
    """Error codes reported in ``extensions.code``."""

    BAD_USER_INPUT = "BAD_USER_INPUT"
    INTERNAL = "INTERNAL_SERVER_ERROR"
    VALIDATION_FAILED = "GRAPHQL_VALIDATION_FAILED"
    PERSISTED_QUERY_NOT_FOUND = "PERSISTED_QUERY_NOT_FOUND"
    PERSISTED_QUERY_NOT_SUPPORTED = "PERSISTED_QUERY_NOT_SUPPORTED"


def error_code(error: GraphQLError) -> str:
    """Classify an execution error."""
    original = error.original_error
    if isinstance(original, AppException):
        return original.code
    if original is None:
        # Parse and validation errors carry no original exception
        return (error.extensions or {}).get("code", ErrorCode.VALIDATION_FAILED)
    return ErrorCode.INTERNAL


def format_graphql_error(error: GraphQLError, *, mask: bool = True) -> dict[str, Any]:
    """Format one error for the response body.

    Args:
        error: Error collected during execution.
        mask: Hide messages of unexpected exceptions.
    """
    formatted: dict[str, Any] = dict(error.formatted)
    code = error_code(error)
    original = error.original_error

    if mask and original is not None and not isinstance(original, AppException):
        formatted["message"] = MASKED_MESSAGE

    formatted["extensions"] = {**(formatted.get("extensions") or {}), "code": code}
    return formatted


def format_graphql_errors(errors: Sequence[GraphQLError], *, mask: bool = True) -> list[dict[str, Any]]:
    return [format_graphql_error(error, mask=mask) for error in errors]


def log_graphql_errors(
    errors: Sequence[GraphQLError],
    execution_context: ExecutionContext | None = None,
) -> None:
    """Log execution errors server-side.

    Client errors are logged at INFO without a traceback; server errors at
    ERROR with the original exception attached.
    """
    operation_name = execution_context.operation_name if execution_context else None

    for error in errors:
        original = error.original_error
        log_context: dict[str, Any] = {
            "error_message": error.message,
            "error_path": error.path,
            "error_code": error_code(error),
            "operation_name": operation_name,
        }
        if isinstance(original, AppException):
            log_context.update(original.extra)

        if original is None or (isinstance(original, AppException) and original.is_client_error):
            logger.info("GraphQL request error: %s", error.message, extra=log_context)
        else:
            logger.error(
                "GraphQL execution error: %s",
                error.message,
                exc_info=original,
                extra=log_context,
            )
