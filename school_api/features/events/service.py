"""Read queries for calendar events."""

from __future__ import annotations

import calendar
import datetime as dt
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from school_api.core.exceptions import InvalidArgumentError

from .models import Event

if TYPE_CHECKING:
    from school_api.core.database import RequestTransaction


def month_bounds(year: int, month: int) -> tuple[dt.datetime, dt.datetime]:
    """Midnight of the first day of the month and of the following month."""
    if not 1 <= month <= 12:
        msg = "invalid date"
        raise InvalidArgumentError(msg, extra={"year": year, "month": month})
    try:
        start = dt.datetime(year, month, 1)
        end = start + dt.timedelta(days=calendar.monthrange(year, month)[1])
    except (ValueError, OverflowError) as exc:
        msg = "invalid date"
        raise InvalidArgumentError(msg, extra={"year": year, "month": month}) from exc
    return start, end


async def list_events(
    tx: RequestTransaction, *, columns: Sequence[Any], year: int, month: int
) -> Sequence[Mapping[str, Any]]:
    """Events ending within the month, ordered by start."""
    start, end = month_bounds(year, month)
    statement = (
        select(*columns)
        .where(Event.date_to >= start, Event.date_to < end)
        .order_by(Event.date_from.asc(), Event.id.asc())
    )
    result = await tx.execute(statement)
    return result.mappings().all()
