"""Read queries for canteen menus."""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from school_api.core.exceptions import InvalidArgumentError

from .models import CanteenDay, CanteenMenu, canteen_pivot_menus_data

if TYPE_CHECKING:
    from school_api.core.database import RequestTransaction


def iso_week_range(year: int, week: int) -> tuple[dt.date, dt.date]:
    """Return the Monday and Sunday of an ISO week.

    Raises:
        InvalidArgumentError: The week does not exist in that ISO year.
    """
    try:
        return dt.date.fromisocalendar(year, week, 1), dt.date.fromisocalendar(year, week, 7)
    except ValueError as exc:
        msg = "invalid date"
        raise InvalidArgumentError(msg, extra={"year": year, "week": week}) from exc


async def list_week(
    tx: RequestTransaction, *, columns: Sequence[Any], year: int, week: int
) -> Sequence[Mapping[str, Any]]:
    """Canteen days of one ISO week, Monday first."""
    monday, sunday = iso_week_range(year, week)
    statement = (
        select(*columns)
        .where(CanteenDay.date >= monday, CanteenDay.date <= sunday)
        .order_by(CanteenDay.date.asc())
    )
    result = await tx.execute(statement)
    return result.mappings().all()


async def menus_for_day(
    tx: RequestTransaction, *, columns: Sequence[Any], day_id: int
) -> Sequence[Mapping[str, Any]]:
    """Menus served on a day, ordered by course type."""
    statement = (
        select(*columns)
        .select_from(CanteenMenu)
        .join(canteen_pivot_menus_data, canteen_pivot_menus_data.c.menu_id == CanteenMenu.id)
        .where(canteen_pivot_menus_data.c.data_id == day_id)
        .order_by(CanteenMenu.type.asc(), CanteenMenu.id.asc())
    )
    result = await tx.execute(statement)
    return result.mappings().all()
