"""SQLAlchemy models for the navigation menu.

Menu items form a nested set maintained by the CMS; siblings are ordered
by ``lft``.
"""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from school_api.core.database import Base, ColumnProjection, IntegerPKMixin


class MenuItem(IntegerPKMixin, Base):
    """One entry of the navigation menu."""

    __tablename__ = "menu_items"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="page_link, external_link or internal_link",
    )
    link: Mapped[str | None] = mapped_column(String(255), nullable=True)
    page_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("pages.id"), nullable=True)
    parent_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("menu_items.id"), nullable=True, index=True
    )
    lft: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<MenuItem(id={self.id}, name={self.name!r})>"


MENU_ITEM_PROJECTION = ColumnProjection(
    fields={
        "name": (MenuItem.name,),
        "type": (MenuItem.type,),
        "link": (MenuItem.link,),
        "slug": (MenuItem.page_id,),
        "children": (MenuItem.id,),
    },
    required=(MenuItem.id,),
)
