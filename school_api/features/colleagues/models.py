"""SQLAlchemy models for the staff directory."""

from __future__ import annotations

from sqlalchemy import SmallInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from school_api.core.database import Base, ColumnProjection, IntegerPKMixin


class Colleague(IntegerPKMixin, Base):
    """A staff member."""

    __tablename__ = "colleagues_data"

    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    jobs: Mapped[str | None] = mapped_column(Text, nullable=True)
    subjects: Mapped[str | None] = mapped_column(Text, nullable=True)
    roles: Mapped[str | None] = mapped_column(Text, nullable=True)
    awards: Mapped[str | None] = mapped_column(Text, nullable=True)
    image: Mapped[str | None] = mapped_column(String(255), nullable=True)
    category: Mapped[int | None] = mapped_column(SmallInteger, nullable=True)

    def __repr__(self) -> str:
        return f"<Colleague(id={self.id}, name={self.name!r})>"


COLLEAGUE_PROJECTION = ColumnProjection(
    fields={
        "id": (Colleague.id,),
        "name": (Colleague.name,),
        "jobs": (Colleague.jobs,),
        "subjects": (Colleague.subjects,),
        "roles": (Colleague.roles,),
        "awards": (Colleague.awards,),
        "image": (Colleague.image,),
        "category": (Colleague.category,),
    },
    # name drives the ordering applied after the fetch
    required=(Colleague.id, Colleague.name),
)
