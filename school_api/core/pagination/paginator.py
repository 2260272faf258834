"""Paginated-query facade used by the GraphQL resolvers."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from .bounds import StatementExecutor, fetch_bounds
from .connection import assemble_connection
from .cursor import decode_optional
from .window import Keyset, PageArgumentError, PageWindow

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement, Select

    from .schemas import Connection

logger = logging.getLogger(__name__)

Join = tuple[Any, Any]


def resolve_page_size(
    *,
    after: str | None,
    before: str | None,
    first: int | None,
    last: int | None,
    default_page_size: int | None,
    max_page_size: int | None,
) -> tuple[int | None, int | None]:
    """Apply the default page size and enforce the maximum.

    Without an explicit size, a request paging forward from an ``after``
    cursor gets ``first=default``; every other request gets the newest
    ``last=default`` records.

    Raises:
        PageArgumentError: A requested size exceeds ``max_page_size``.
    """
    if max_page_size is not None:
        for name, value in (("first", first), ("last", last)):
            if value is not None and value > max_page_size:
                msg = f'The "{name}" parameter must not exceed {max_page_size}'
                raise PageArgumentError(msg)

    if first is None and last is None and default_page_size is not None:
        if after is not None and before is None:
            return default_page_size, None
        return None, default_page_size
    return first, last


class KeysetPaginator:
    """Keyset pagination over one entity ordered by ``(date, id)``.

    Attributes:
        entity: Mapped class the statement selects from.
        keyset: Ordering and cursor columns.
        eligibility: Predicate applied to every page and to the global bounds.

    Example:
        POSTS = KeysetPaginator(PostData, PostData.date, PostData.id,
                                eligibility=PostData.published.is_(True))
        connection = await POSTS.paginate(tx, columns=[PostData.id, PostData.date, PostData.title],
                                          where=[PostData.featured.is_(True)], first=10)
    """

    def __init__(
        self,
        entity: Any,
        date_column: Any,
        id_column: Any,
        *,
        eligibility: ColumnElement[bool] | None = None,
    ) -> None:
        self.entity = entity
        self.keyset = Keyset(date_column, id_column)
        self.eligibility = eligibility

    def eligible_statement(
        self,
        columns: Sequence[Any],
        where: Sequence[ColumnElement[bool]] = (),
        joins: Sequence[Join] = (),
    ) -> Select[Any]:
        """Select ``columns`` from the eligible dataset, without any window."""
        statement = select(*columns).select_from(self.entity)
        for target, onclause in joins:
            statement = statement.join(target, onclause)

        clauses = list(where)
        if self.eligibility is not None:
            clauses.insert(0, self.eligibility)
        if clauses:
            statement = statement.where(*clauses)
        return statement

    async def paginate(
        self,
        executor: StatementExecutor,
        *,
        columns: Sequence[Any],
        where: Sequence[ColumnElement[bool]] = (),
        joins: Sequence[Join] = (),
        after: str | None = None,
        before: str | None = None,
        first: int | None = None,
        last: int | None = None,
    ) -> Connection[Mapping[str, Any]]:
        """Fetch one page and its navigation flags.

        Args:
            executor: Request transaction executing the statements.
            columns: Projected columns; the keyset columns are always added.
            where: Caller filters, combined with the eligibility predicate.
            joins: ``(target, onclause)`` pairs for filtering through related tables.
            after: Cursor string, records after it.
            before: Cursor string, records before it.
            first: Oldest-first page size.
            last: Newest-first page size.

        Returns:
            Newest-first connection; empty when nothing matches.

        Raises:
            CursorError: A cursor string cannot be decoded.
            PageArgumentError: Invalid first/last combination.
            DatabaseError: A statement failed.
        """
        window = PageWindow(
            after=decode_optional(after),
            before=decode_optional(before),
            first=first,
            last=last,
        )

        selected = _with_keyset(columns, self.keyset)
        base = self.eligible_statement(selected, where, joins)
        rows = (await executor.execute(window.apply(base, self.keyset))).mappings().all()

        if not rows:
            return assemble_connection(rows, None)

        bounds = await fetch_bounds(executor, base, self.keyset)
        connection = assemble_connection(rows, bounds)

        logger.debug(
            "Paginated %s",
            getattr(self.entity, "__tablename__", self.entity),
            extra={
                "page_size": len(rows),
                "has_previous_page": connection.page_info.has_previous_page,
                "has_next_page": connection.page_info.has_next_page,
            },
        )
        return connection


def _with_keyset(columns: Sequence[Any], keyset: Keyset) -> list[Any]:
    chosen: dict[str, Any] = {
        keyset.id_column.key: keyset.id_column,
        keyset.date_column.key: keyset.date_column,
    }
    for column in columns:
        chosen.setdefault(column.key, column)
    return list(chosen.values())
