"""SQLAlchemy models for calendar events."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from school_api.core.database import Base, ColumnProjection, IntegerPKMixin


class Event(IntegerPKMixin, Base):
    """A calendar event spanning ``date_from`` to ``date_to``."""

    __tablename__ = "events_data"

    date_from: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    date_to: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    color: Mapped[str | None] = mapped_column(String(32), nullable=True)

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, title={self.title!r})>"


EVENT_PROJECTION = ColumnProjection(
    fields={
        "id": (Event.id,),
        "dateFrom": (Event.date_from,),
        "dateTo": (Event.date_to,),
        "title": (Event.title,),
        "description": (Event.description,),
        "color": (Event.color,),
    },
    required=(Event.id,),
)
