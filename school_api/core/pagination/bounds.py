"""Global minimum/maximum lookup over the eligible dataset."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from school_api.core.exceptions import AppException

from .cursor import KeysetCursor

if TYPE_CHECKING:
    from sqlalchemy import Result, Select
    from sqlalchemy.sql import Executable

    from .window import Keyset

logger = logging.getLogger(__name__)


class StatementExecutor(Protocol):
    """Anything that can run a statement: a RequestTransaction or an AsyncSession."""

    async def execute(self, statement: Executable) -> Result[Any]: ...


class BoundsNotFoundError(AppException):
    """The eligible dataset is empty, so it has no minimum or maximum."""

    def __init__(self) -> None:
        super().__init__("Could not get min value")


@dataclass(frozen=True, slots=True)
class KeysetBounds:
    """Smallest and largest ``(date, id)`` of the eligible dataset."""

    minimum: KeysetCursor
    maximum: KeysetCursor


def bounds_statements(base: Select[Any], keyset: Keyset) -> tuple[Select[Any], Select[Any]]:
    """Build the min and max lookups for an eligible-set select.

    ``base`` carries the eligibility filters and joins; its column list is
    replaced by the two keyset columns.
    """
    keyed = base.with_only_columns(keyset.date_column, keyset.id_column)
    minimum = keyed.order_by(*keyset.ascending()).limit(1)
    maximum = keyed.order_by(*keyset.descending()).limit(1)
    return minimum, maximum


async def fetch_bounds(executor: StatementExecutor, base: Select[Any], keyset: Keyset) -> KeysetBounds:
    """Fetch the global bounds of the eligible dataset.

    Raises:
        BoundsNotFoundError: The eligible dataset is empty.
    """
    min_stmt, max_stmt = bounds_statements(base, keyset)

    minimum = (await executor.execute(min_stmt)).first()
    if minimum is None:
        raise BoundsNotFoundError
    maximum = (await executor.execute(max_stmt)).first()
    if maximum is None:
        raise BoundsNotFoundError

    bounds = KeysetBounds(
        minimum=KeysetCursor.from_row(minimum._mapping),
        maximum=KeysetCursor.from_row(maximum._mapping),
    )
    logger.debug(
        "Fetched keyset bounds",
        extra={"min": bounds.minimum.encode(), "max": bounds.maximum.encode()},
    )
    return bounds
