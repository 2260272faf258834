"""Application lifespan management.

Startup Order:
1. Logging and application info metric
2. Database - fails fast when unreachable
3. Redis - best-effort, only when REDIS_URL is set

Shutdown Order: reverse of startup.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from school_api.core.settings import (
    get_app_settings,
    get_db_settings,
    get_logging_settings,
    get_redis_settings,
)
from school_api.infra.cache import start_cache, stop_cache
from school_api.infra.database import close_database, init_database
from school_api.infra.logging.config import setup_logging
from school_api.infra.logging.config import shutdown as shutdown_logging
from school_api.infra.metrics.prometheus import app_info

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan events.

    Raises:
        ConnectionError: The database is unreachable at startup.
    """
    _ = app
    app_settings = get_app_settings()

    setup_logging(get_logging_settings())
    app_info.labels(version=app_settings.version, environment=app_settings.environment).set(1)

    logger.info(
        "Application starting",
        extra={
            "service": app_settings.service_name,
            "version": app_settings.version,
            "environment": app_settings.environment,
        },
    )

    await init_database(get_db_settings())
    try:
        await start_cache(get_redis_settings())
        logger.info("Application ready")
        yield
    finally:
        logger.info("Application shutting down")
        await stop_cache()
        await close_database()
        logger.info("Application shutdown complete")
        shutdown_logging()
