"""Read queries for the navigation menu."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from .models import MenuItem

if TYPE_CHECKING:
    from school_api.core.database import RequestTransaction


async def list_items(
    tx: RequestTransaction, *, columns: Sequence[Any], parent_id: int | None = None
) -> Sequence[Mapping[str, Any]]:
    """Menu items under ``parent_id`` (top level when None), ordered by ``lft``."""
    parent = MenuItem.parent_id.is_(None) if parent_id is None else MenuItem.parent_id == parent_id
    statement = select(*columns).where(parent).order_by(MenuItem.lft.asc(), MenuItem.id.asc())
    result = await tx.execute(statement)
    return result.mappings().all()
