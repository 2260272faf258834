"""Global exception handlers for the FastAPI application.

GraphQL errors are reported inside the GraphQL response body; these
handlers cover the plain HTTP endpoints.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from school_api.core.exceptions import AppException

logger = logging.getLogger(__name__)

_STATUS_BY_CODE = {
    "BAD_USER_INPUT": status.HTTP_400_BAD_REQUEST,
}


def _get_request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle application exceptions raised outside of GraphQL execution."""
    status_code = _STATUS_BY_CODE.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= 500:
        logger.error(
            "Application exception: %s",
            exc.detail,
            exc_info=exc,
            extra={"path": request.url.path, **exc.extra},
        )
    return JSONResponse(
        status_code=status_code,
        content={
            "errors": [{"message": exc.detail, "extensions": {"code": exc.code}}],
            "request_id": _get_request_id(request),
        },
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle malformed request bodies (e.g. a GraphQL body that is not an object)."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "errors": [
                {
                    "message": "Invalid request body",
                    "extensions": {
                        "code": "BAD_REQUEST",
                        "details": jsonable_encoder(exc.errors()),
                    },
                }
            ],
            "request_id": _get_request_id(request),
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception", extra={"path": request.url.path})
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "errors": [{"message": "Internal server error", "extensions": {"code": "INTERNAL_SERVER_ERROR"}}],
            "request_id": _get_request_id(request),
        },
    )


def configure_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the application."""
    app.add_exception_handler(AppException, app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
