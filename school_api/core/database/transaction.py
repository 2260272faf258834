"""Request-scoped transaction shared by every resolver of one GraphQL request."""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from sqlalchemy.exc import SQLAlchemyError

from school_api.core.database.exceptions import DatabaseError, TransactionBeginError
from school_api.infra.metrics.prometheus import database_errors_total

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from sqlalchemy import Result
    from sqlalchemy.ext.asyncio import AsyncSession
    from sqlalchemy.sql import Executable

logger = logging.getLogger(__name__)


class RequestTransaction:
    """Serialized access to the session of one request.

    Strawberry resolves sibling fields concurrently, while an AsyncSession
    allows one statement at a time; every statement therefore goes through
    :meth:`execute`, which holds a lock for the duration of the call and
    converts store failures into :class:`DatabaseError`.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self._lock = asyncio.Lock()

    async def begin(self) -> None:
        """Start the transaction and check out a connection.

        Raises:
            TransactionBeginError: If no connection could be obtained.
        """
        try:
            await self.session.connection()
        except SQLAlchemyError as exc:
            database_errors_total.labels(operation="begin").inc()
            logger.exception("Could not start transaction")
            raise TransactionBeginError from exc

    async def execute(self, statement: Executable, params: dict[str, Any] | None = None) -> Result[Any]:
        """Execute a statement inside the request transaction.

        Raises:
            DatabaseError: On any SQLAlchemy failure.
        """
        async with self._lock:
            try:
                return await self.session.execute(statement, params)
            except SQLAlchemyError as exc:
                database_errors_total.labels(operation="execute").inc()
                logger.exception("Statement execution failed")
                raise DatabaseError from exc

    async def commit(self) -> None:
        """Commit, falling back to a rollback when the commit fails.

        A failed commit is logged and never propagated: the request was
        read-only and its response is already computed.
        """
        async with self._lock:
            try:
                await self.session.commit()
            except SQLAlchemyError:
                database_errors_total.labels(operation="commit").inc()
                logger.exception("Could not commit transaction")
                await self.session.rollback()

    async def rollback(self) -> None:
        async with self._lock:
            await self.session.rollback()


@asynccontextmanager
async def request_transaction(session: AsyncSession) -> AsyncIterator[RequestTransaction]:
    """Open a request transaction and commit it when the block exits.

    Example:
        async with request_transaction(session) as tx:
            result = await schema.execute(query, context_value=GraphQLContext(tx, ...))
    """
    transaction = RequestTransaction(session)
    await transaction.begin()
    try:
        yield transaction
    except BaseException:
        await transaction.rollback()
        raise
    await transaction.commit()
