"""Database infrastructure: async engine and session factory.

Example:
    from school_api.infra.database import get_async_session

    async with get_async_session() as session:
        result = await session.execute(select(Post))
"""

from __future__ import annotations

from .session import (
    close_database,
    configure_engine,
    create_engine,
    get_async_session,
    get_engine,
    get_session_factory,
    init_database,
    ping_database,
)

__all__ = [
    "close_database",
    "configure_engine",
    "create_engine",
    "get_async_session",
    "get_engine",
    "get_session_factory",
    "init_database",
    "ping_database",
]
