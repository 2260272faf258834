"""Middleware configuration.

Order of execution for a request (outermost first):
1. RequestIDMiddleware - sets X-Request-ID and logging context
2. CORSMiddleware
3. GZipMiddleware
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from school_api.core.settings import get_app_settings

from .request_id import RequestIDMiddleware

if TYPE_CHECKING:
    from fastapi import FastAPI

    from school_api.core.settings import AppSettings

logger = logging.getLogger(__name__)


def configure_middleware(app: FastAPI, app_settings: AppSettings | None = None) -> None:
    """Configure middleware for the application.

    Middleware added last runs first.
    """
    app_settings = app_settings or get_app_settings()

    app.add_middleware(GZipMiddleware, minimum_size=app_settings.gzip_minimum_size)

    cors_origins = app_settings.cors_origins or ["*"]
    logger.info("Configuring CORS", extra={"cors_origins": cors_origins})
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_methods=app_settings.cors_allow_methods,
        allow_headers=app_settings.cors_allow_headers,
        max_age=app_settings.cors_max_age,
    )

    app.add_middleware(RequestIDMiddleware)


__all__ = ["RequestIDMiddleware", "configure_middleware"]
