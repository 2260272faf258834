"""Read queries for CMS pages."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from .models import Page

if TYPE_CHECKING:
    from school_api.core.database import RequestTransaction


async def get_page_by_slug(
    tx: RequestTransaction, *, columns: Sequence[Any], slug: str
) -> Mapping[str, Any] | None:
    """Fetch a page that has not been soft-deleted."""
    statement = (
        select(*columns)
        .where(Page.slug == slug, Page.deleted_at.is_(None))
        .order_by(Page.id)
        .limit(1)
    )
    result = await tx.execute(statement)
    return result.mappings().first()


async def get_page_slug(tx: RequestTransaction, page_id: int) -> str | None:
    result = await tx.execute(select(Page.slug).where(Page.id == page_id))
    return result.scalar_one_or_none()
