"""SQLAlchemy models for the canteen feature."""

from __future__ import annotations

import datetime as dt

from sqlalchemy import Column, Date, DateTime, ForeignKey, SmallInteger, Table, Text
from sqlalchemy.orm import Mapped, mapped_column

from school_api.core.database import Base, ColumnProjection, IntegerPKMixin

# Many-to-many association table for canteen days <-> menus
canteen_pivot_menus_data = Table(
    "canteen_pivot_menus_data",
    Base.metadata,
    Column("data_id", ForeignKey("canteen_data.id"), primary_key=True),
    Column("menu_id", ForeignKey("canteen_menus.id"), primary_key=True),
)


class CanteenDay(IntegerPKMixin, Base):
    """One day of canteen service."""

    __tablename__ = "canteen_data"

    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    created_at: Mapped[dt.datetime | None] = mapped_column(DateTime, nullable=True)
    updated_at: Mapped[dt.datetime | None] = mapped_column(DateTime, nullable=True)

    def __repr__(self) -> str:
        return f"<CanteenDay(id={self.id}, date={self.date})>"


class CanteenMenu(IntegerPKMixin, Base):
    """A dish served on one or more days."""

    __tablename__ = "canteen_menus"

    menu: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[int] = mapped_column(
        SmallInteger,
        nullable=False,
        comment="Course identifier (soup, main course, dessert...)",
    )

    def __repr__(self) -> str:
        return f"<CanteenMenu(id={self.id}, type={self.type})>"


CANTEEN_PROJECTION = ColumnProjection(
    fields={
        "id": (CanteenDay.id,),
        "date": (CanteenDay.date,),
        "menus": (CanteenDay.id,),
    },
    required=(CanteenDay.id,),
)

MENU_PROJECTION = ColumnProjection(
    fields={
        "id": (CanteenMenu.id,),
        "menu": (CanteenMenu.menu,),
        "type": (CanteenMenu.type,),
    },
    required=(CanteenMenu.id,),
)
