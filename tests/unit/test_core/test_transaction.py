"""Unit tests for the request transaction."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import select, text
from sqlalchemy.exc import OperationalError

from school_api.core.database import (
    DatabaseError,
    RequestTransaction,
    TransactionBeginError,
    request_transaction,
)
from school_api.features.posts.models import PostData


def _failing_session(method: str) -> MagicMock:
    session = MagicMock()
    for name in ("connection", "execute", "commit", "rollback"):
        setattr(session, name, AsyncMock())
    getattr(session, method).side_effect = OperationalError("SELECT", {}, Exception("boom"))
    return session


@pytest.mark.unit
class TestRequestTransaction:
    """Tests for RequestTransaction and request_transaction."""

    async def test_execute(self, tx):
        result = await tx.execute(select(PostData.title).where(PostData.id == 1))

        assert result.scalar_one() == "Winter concert"

    async def test_execute_wraps_store_errors(self, tx):
        with pytest.raises(DatabaseError) as exc_info:
            await tx.execute(text("SELECT * FROM missing_table"))

        assert exc_info.value.detail == "Database error"
        assert exc_info.value.code == "INTERNAL_SERVER_ERROR"

    async def test_begin_failure(self):
        session = _failing_session("connection")

        with pytest.raises(TransactionBeginError) as exc_info:
            async with request_transaction(session):
                pass

        assert exc_info.value.detail == "Transaction begin failed"

    async def test_commit_failure_is_not_raised(self):
        """A failed commit falls back to a rollback."""
        session = _failing_session("commit")

        async with request_transaction(session):
            pass

        session.rollback.assert_awaited_once()

    async def test_exception_rolls_back(self):
        session = _failing_session("execute")

        with pytest.raises(RuntimeError):
            async with request_transaction(session):
                raise RuntimeError

        session.rollback.assert_awaited_once()
        session.commit.assert_not_awaited()

    async def test_commit_on_success(self):
        session = _failing_session("execute")
        transaction = RequestTransaction(session)

        await transaction.commit()

        session.commit.assert_awaited_once()
