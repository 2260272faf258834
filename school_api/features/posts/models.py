"""SQLAlchemy models for the posts feature."""

from __future__ import annotations

import datetime as dt
from typing import Any

from sqlalchemy import JSON, Boolean, Column, Date, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column

from school_api.core.database import Base, ColumnProjection, IntegerPKMixin

# Many-to-many association table for posts <-> labels
posts_pivot_labels_data = Table(
    "posts_pivot_labels_data",
    Base.metadata,
    Column("posts_id", ForeignKey("posts_data.id"), primary_key=True),
    Column("labels_id", ForeignKey("posts_labels.id"), primary_key=True),
)


class PostAuthor(IntegerPKMixin, Base):
    """Author of blog posts."""

    __tablename__ = "posts_authors"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="File name under the authors_images storage folder",
    )

    def __repr__(self) -> str:
        return f"<PostAuthor(id={self.id}, name={self.name!r})>"


class PostLabel(IntegerPKMixin, Base):
    """Category label attached to posts."""

    __tablename__ = "posts_labels"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    color: Mapped[str] = mapped_column(String(32), nullable=False)

    def __repr__(self) -> str:
        return f"<PostLabel(id={self.id}, name={self.name!r})>"


class PostData(IntegerPKMixin, Base):
    """Blog post.

    Only rows with ``published`` set are visible through the listing
    queries; unpublished rows can be previewed with their ``preview_token``.
    """

    __tablename__ = "posts_data"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    color: Mapped[str] = mapped_column(String(32), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    index_image: Mapped[str | None] = mapped_column(String(255), nullable=True)
    author_id: Mapped[int] = mapped_column(Integer, ForeignKey("posts_authors.id"), nullable=False)
    images: Mapped[Any] = mapped_column(
        JSON,
        nullable=True,
        comment="Array of file names, or an object whose values are file names",
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    preview_token: Mapped[str | None] = mapped_column(String(64), nullable=True)

    def __repr__(self) -> str:
        return f"<PostData(id={self.id}, title={self.title!r}, date={self.date})>"


POST_PROJECTION = ColumnProjection(
    fields={
        "id": (PostData.id,),
        "title": (PostData.title,),
        "color": (PostData.color,),
        "description": (PostData.description,),
        "content": (PostData.content,),
        "date": (PostData.date,),
        "indexImage": (PostData.index_image,),
        "images": (PostData.images,),
        "author": (PostData.author_id,),
        "labels": (PostData.id,),
    },
    required=(PostData.id,),
)

AUTHOR_PROJECTION = ColumnProjection(
    fields={
        "id": (PostAuthor.id,),
        "name": (PostAuthor.name,),
        "description": (PostAuthor.description,),
        "image": (PostAuthor.image,),
        "posts": (PostAuthor.id,),
    },
    required=(PostAuthor.id,),
)

LABEL_PROJECTION = ColumnProjection(
    fields={
        "id": (PostLabel.id,),
        "name": (PostLabel.name,),
        "color": (PostLabel.color,),
        "posts": (PostLabel.id,),
    },
    required=(PostLabel.id,),
)
