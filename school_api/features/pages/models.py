"""SQLAlchemy models for CMS pages."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from school_api.core.database import Base, ColumnProjection, IntegerPKMixin


class Page(IntegerPKMixin, Base):
    """A CMS page. Rows with ``deleted_at`` set are soft-deleted."""

    __tablename__ = "pages"

    template: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    extras: Mapped[Any] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    def __repr__(self) -> str:
        return f"<Page(id={self.id}, slug={self.slug!r})>"


PAGE_PROJECTION = ColumnProjection(
    fields={
        "id": (Page.id,),
        "template": (Page.template,),
        "name": (Page.name,),
        "title": (Page.title,),
        "content": (Page.content,),
        "extras": (Page.extras,),
    },
    required=(Page.id,),
)
