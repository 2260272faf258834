"""Database engine and session management (SQLAlchemy async)."""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from school_api.core.settings import get_db_settings
from school_api.infra.metrics.prometheus import database_connections_active, database_errors_total

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from school_api.core.settings import DatabaseSettings

logger = logging.getLogger(__name__)

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def create_engine(db_settings: DatabaseSettings | None = None) -> AsyncEngine:
    """Create an async engine from settings with pool metrics attached."""
    db_settings = db_settings or get_db_settings()
    engine = create_async_engine(db_settings.url, **db_settings.sqlalchemy_engine_kwargs())
    _instrument_pool(engine)
    return engine


def _instrument_pool(engine: AsyncEngine) -> None:
    @event.listens_for(engine.sync_engine.pool, "connect")
    def _receive_connect(dbapi_conn: Any, connection_record: Any) -> None:
        _ = dbapi_conn, connection_record
        database_connections_active.inc()

    @event.listens_for(engine.sync_engine.pool, "close")
    def _receive_close(dbapi_conn: Any, connection_record: Any) -> None:
        _ = dbapi_conn, connection_record
        database_connections_active.dec()


def configure_engine(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Install an engine as the process-wide engine and build its session factory."""
    global _engine, _session_factory

    _engine = engine
    _session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    return _session_factory


def get_engine() -> AsyncEngine:
    if _engine is None:
        msg = "Database engine is not initialized. Call init_database() first."
        raise RuntimeError(msg)
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    if _session_factory is None:
        msg = "Database engine is not initialized. Call init_database() first."
        raise RuntimeError(msg)
    return _session_factory


@asynccontextmanager
async def get_async_session() -> AsyncIterator[AsyncSession]:
    """Get async database session.

    Yields:
        Database session that is automatically closed.

    Example:
        async with get_async_session() as session:
            result = await session.execute(select(Post))
    """
    async with get_session_factory()() as session:
        yield session


async def ping_database(timeout: float = 2.0) -> bool:
    """Run ``SELECT 1`` against the engine.

    Returns:
        True when the database answered within the timeout.
    """
    try:
        async with asyncio.timeout(timeout):
            async with get_engine().connect() as conn:
                await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError, TimeoutError, RuntimeError) as exc:
        database_errors_total.labels(operation="ping").inc()
        logger.warning("Database ping failed", extra={"error": str(exc)})
        return False
    return True


async def init_database(db_settings: DatabaseSettings | None = None) -> None:
    """Create the engine and verify connectivity.

    Raises:
        ConnectionError: If the database does not answer ``SELECT 1``.
    """
    db_settings = db_settings or get_db_settings()
    logger.info(
        "Trying to connect to database",
        extra={"dialect": db_settings.dialect, "host": db_settings.host},
    )

    configure_engine(create_engine(db_settings))

    try:
        async with get_engine().connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as exc:
        logger.exception("Could not connect to database")
        msg = "Database is unreachable"
        raise ConnectionError(msg) from exc

    logger.info("Connected to database")


async def close_database() -> None:
    """Dispose the engine. Called during application shutdown."""
    global _engine, _session_factory

    if _engine is None:
        return

    logger.info("Closing database connection")
    await _engine.dispose()
    _engine = None
    _session_factory = None
