"""Read queries for posts, authors, labels and the post archive.

Every function takes the request transaction and the columns to project,
and returns RowMappings; mapping rows to GraphQL types is left to the
GraphQL layer.
"""

from __future__ import annotations

import calendar
import datetime as dt
import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from sqlalchemy import Integer, cast, extract, func, or_, select

from school_api.core.exceptions import InvalidArgumentError
from school_api.core.pagination import KeysetPaginator

from .models import PostAuthor, PostData, PostLabel, posts_pivot_labels_data

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement

    from school_api.core.database import RequestTransaction
    from school_api.core.pagination import Connection

logger = logging.getLogger(__name__)

Row = Mapping[str, Any]

PUBLISHED = PostData.published.is_(True)

POSTS = KeysetPaginator(PostData, PostData.date, PostData.id, eligibility=PUBLISHED)

LIKE_ESCAPE = "\\"


def featured_filter(featured: bool) -> list[ColumnElement[bool]]:
    return [PostData.featured.is_(True)] if featured else []


def search_filter(term: str) -> ColumnElement[bool]:
    """Match ``term`` as a substring of the title, description or content.

    ``%`` and ``_`` in the term are matched literally.
    """
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    pattern = f"%{escaped}%"
    return or_(
        PostData.content.like(pattern, escape=LIKE_ESCAPE),
        PostData.description.like(pattern, escape=LIKE_ESCAPE),
        PostData.title.like(pattern, escape=LIKE_ESCAPE),
    )


def author_filter(author_id: int) -> ColumnElement[bool]:
    return PostData.author_id == author_id


def label_join() -> tuple[Any, Any]:
    return posts_pivot_labels_data, posts_pivot_labels_data.c.posts_id == PostData.id


def label_filter(label_id: int) -> ColumnElement[bool]:
    return posts_pivot_labels_data.c.labels_id == label_id


async def list_posts(
    tx: RequestTransaction,
    *,
    columns: Sequence[Any],
    where: Sequence[ColumnElement[bool]] = (),
    joins: Sequence[tuple[Any, Any]] = (),
    after: str | None = None,
    before: str | None = None,
    first: int | None = None,
    last: int | None = None,
) -> Connection[Row]:
    """Paginate published posts, newest first."""
    return await POSTS.paginate(
        tx,
        columns=columns,
        where=where,
        joins=joins,
        after=after,
        before=before,
        first=first,
        last=last,
    )


async def get_post(
    tx: RequestTransaction,
    *,
    columns: Sequence[Any],
    post_id: int,
    token: str | None = None,
) -> Row | None:
    """Fetch one post.

    Without a token only published posts are visible. With a token the post
    must be unpublished and carry that preview token.
    """
    statement = select(*columns).where(PostData.id == post_id)
    if token is not None:
        statement = statement.where(
            PostData.published.is_(False),
            PostData.preview_token == token,
        )
    else:
        statement = statement.where(PUBLISHED)

    result = await tx.execute(statement.order_by(PostData.id.desc()).limit(1))
    return result.mappings().first()


async def get_author(tx: RequestTransaction, *, columns: Sequence[Any], author_id: int) -> Row | None:
    result = await tx.execute(select(*columns).where(PostAuthor.id == author_id))
    return result.mappings().first()


async def get_label(tx: RequestTransaction, *, columns: Sequence[Any], label_id: int) -> Row | None:
    result = await tx.execute(select(*columns).where(PostLabel.id == label_id))
    return result.mappings().first()


async def labels_for_post(
    tx: RequestTransaction, *, columns: Sequence[Any], post_id: int
) -> Sequence[Row]:
    """Labels attached to a post, highest label id first."""
    statement = (
        select(*columns)
        .select_from(PostLabel)
        .join(posts_pivot_labels_data, posts_pivot_labels_data.c.labels_id == PostLabel.id)
        .where(posts_pivot_labels_data.c.posts_id == post_id)
        .order_by(PostLabel.id.desc())
    )
    result = await tx.execute(statement)
    return result.mappings().all()


def month_range(year: int, month: int) -> tuple[dt.date, dt.date]:
    """Return the first day of the month and the first day of the next one.

    Raises:
        InvalidArgumentError: The year/month pair is not a calendar month.
    """
    if not 1 <= month <= 12:
        msg = "invalid date"
        raise InvalidArgumentError(msg, extra={"year": year, "month": month})
    try:
        start = dt.date(year, month, 1)
        end = start + dt.timedelta(days=calendar.monthrange(year, month)[1])
    except (ValueError, OverflowError) as exc:
        msg = "invalid date"
        raise InvalidArgumentError(msg, extra={"year": year, "month": month}) from exc
    return start, end


async def archive_posts(
    tx: RequestTransaction, *, columns: Sequence[Any], year: int, month: int
) -> Sequence[Row]:
    """Published posts dated within one month, newest first."""
    start, end = month_range(year, month)
    statement = (
        select(*columns)
        .where(PUBLISHED, PostData.date >= start, PostData.date < end)
        .order_by(PostData.date.desc(), PostData.id.desc())
    )
    result = await tx.execute(statement)
    return result.mappings().all()


async def archive_info(tx: RequestTransaction) -> Sequence[Row]:
    """Published post counts per year and month, newest month first."""
    year = cast(extract("year", PostData.date), Integer)
    month = cast(extract("month", PostData.date), Integer)
    statement = (
        select(
            func.count(PostData.id).label("count"),
            year.label("year"),
            month.label("month"),
        )
        .where(PUBLISHED, PostData.date.is_not(None))
        .group_by(year, month)
        .order_by(year.desc(), month.desc())
    )
    result = await tx.execute(statement)
    return result.mappings().all()
