"""Read queries for the staff directory."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from .models import Colleague

if TYPE_CHECKING:
    from school_api.core.database import RequestTransaction

TITLE_PREFIX = "Dr. "


def sort_name(name: str | None) -> str:
    """Name used for ordering: academic title stripped."""
    if not name:
        return ""
    return name.removeprefix(TITLE_PREFIX)


async def list_colleagues(
    tx: RequestTransaction, *, columns: Sequence[Any]
) -> list[Mapping[str, Any]]:
    """All colleagues ordered by name, ignoring a leading "Dr. "."""
    result = await tx.execute(select(*columns).order_by(Colleague.name.asc(), Colleague.id.asc()))
    rows = list(result.mappings().all())
    rows.sort(key=lambda row: sort_name(row.get("name")))
    return rows
