"""GraphQL types for posts, authors and labels.

The three types reference each other (posts have an author and labels,
authors and labels have posts) and therefore live in one module.

Each type is built from a projected row: only the columns the query asked
for were selected, so attributes that were not requested hold None and are
never resolved.
"""

from __future__ import annotations

import datetime as dt
import json
from collections.abc import Mapping, Sequence
from typing import Any

import strawberry
from strawberry.types import Info

from school_api.core.exceptions import InvalidStoredDataError
from school_api.core.pagination import Connection, resolve_page_size
from school_api.features.graphql.context import GraphQLContext
from school_api.features.graphql.selection import connection_node_fields, requested_fields
from school_api.features.graphql.types.base import (
    AfterArg,
    BeforeArg,
    FeaturedArg,
    FirstArg,
    LastArg,
    PageInfoType,
)
from school_api.features.posts import service as posts_service
from school_api.features.posts.models import AUTHOR_PROJECTION, LABEL_PROJECTION, POST_PROJECTION

POSTS_IMAGES = "posts_images"
AUTHORS_IMAGES = "authors_images"


# ============================================================================
# Post
# ============================================================================


@strawberry.type(description="A blog post or article")
class Post:
    """Published blog post."""

    id: int = strawberry.field(description="Unique identifier")
    title: str = strawberry.field(description="Post title")
    color: str = strawberry.field(description="Theme color for display")
    description: str | None = strawberry.field(description="Short description or excerpt")
    content: str = strawberry.field(description="Full post content")
    date: dt.date = strawberry.field(description="Publication date")

    index_image_path: strawberry.Private[str | None]
    image_paths: strawberry.Private[Any]
    author_id: strawberry.Private[int | None]

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Post:
        return cls(
            id=row.get("id"),
            title=row.get("title"),
            color=row.get("color"),
            description=row.get("description"),
            content=row.get("content"),
            date=row.get("date"),
            index_image_path=row.get("index_image"),
            image_paths=row.get("images"),
            author_id=row.get("author_id"),
        )

    @strawberry.field(description="Main image URL for the post")
    def index_image(self, info: Info[GraphQLContext, None]) -> str:
        if not self.index_image_path:
            msg = "No index image found"
            raise InvalidStoredDataError(msg, extra={"post_id": self.id})
        return info.context.storage_url(POSTS_IMAGES, self.index_image_path)

    @strawberry.field(description="Additional image URLs associated with the post")
    def images(self, info: Info[GraphQLContext, None]) -> list[str]:
        return [
            info.context.storage_url(POSTS_IMAGES, name)
            for name in image_names(self.image_paths, post_id=self.id)
        ]

    @strawberry.field(description="The author of this post")
    async def author(self, info: Info[GraphQLContext, None]) -> Author | None:
        if self.author_id is None:
            return None
        row = await posts_service.get_author(
            info.context.tx,
            columns=AUTHOR_PROJECTION.columns(requested_fields(info)),
            author_id=self.author_id,
        )
        return Author.from_row(row) if row is not None else None

    @strawberry.field(description="Labels associated with this post")
    async def labels(self, info: Info[GraphQLContext, None]) -> list[Label]:
        rows = await posts_service.labels_for_post(
            info.context.tx,
            columns=LABEL_PROJECTION.columns(requested_fields(info)),
            post_id=self.id,
        )
        return [Label.from_row(row) for row in rows]


def image_names(value: Any, *, post_id: int | None = None) -> list[str]:
    """File names stored in the ``images`` column.

    The CMS stores either a JSON array of names or a JSON object whose
    values are names; non-string elements are skipped.

    Raises:
        InvalidStoredDataError: The value is neither an array nor an object.
    """
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            value = None

    if isinstance(value, list):
        return [name for name in value if isinstance(name, str)]
    if isinstance(value, dict):
        return [name for name in value.values() if isinstance(name, str)]

    msg = "invalid data in database"
    raise InvalidStoredDataError(msg, extra={"post_id": post_id})


@strawberry.type(description="An edge in a connection of posts")
class PostEdge:
    cursor: str = strawberry.field(description="Opaque cursor of this post")
    node: Post


@strawberry.type(description="A page of posts, newest first")
class PostConnection:
    edges: list[PostEdge]
    page_info: PageInfoType

    @strawberry.field(description="The posts of this page, without cursors")
    def nodes(self) -> list[Post]:
        return [edge.node for edge in self.edges]

    @classmethod
    def from_connection(cls, connection: Connection[Mapping[str, Any]]) -> PostConnection:
        return cls(
            edges=[
                PostEdge(cursor=edge.cursor, node=Post.from_row(edge.node))
                for edge in connection.edges
            ],
            page_info=PageInfoType.from_page_info(connection.page_info),
        )


async def post_connection(
    info: Info[GraphQLContext, None],
    *,
    where: Sequence[Any] = (),
    joins: Sequence[tuple[Any, Any]] = (),
    after: str | None = None,
    before: str | None = None,
    first: int | None = None,
    last: int | None = None,
) -> PostConnection:
    """Resolve a connection of published posts for the current field.

    Applies the configured default page size, projects the columns the
    query selected on the nodes and paginates.
    """
    settings = info.context.graphql_settings
    first, last = resolve_page_size(
        after=after,
        before=before,
        first=first,
        last=last,
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
    )
    page = await posts_service.list_posts(
        info.context.tx,
        columns=POST_PROJECTION.columns(connection_node_fields(info)),
        where=where,
        joins=joins,
        after=after,
        before=before,
        first=first,
        last=last,
    )
    return PostConnection.from_connection(page)


# ============================================================================
# Author
# ============================================================================


@strawberry.type(description="Author of blog posts")
class Author:
    id: int = strawberry.field(description="Unique identifier")
    name: str = strawberry.field(description="Display name")
    description: str | None = strawberry.field(description="Short biography")

    image_path: strawberry.Private[str | None]

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Author:
        return cls(
            id=row.get("id"),
            name=row.get("name"),
            description=row.get("description"),
            image_path=row.get("image"),
        )

    @strawberry.field(description="Portrait URL, if the author has one")
    def image(self, info: Info[GraphQLContext, None]) -> str | None:
        if not self.image_path:
            return None
        return info.context.storage_url(AUTHORS_IMAGES, self.image_path)

    @strawberry.field(description="Published posts written by this author")
    async def posts(
        self,
        info: Info[GraphQLContext, None],
        featured: FeaturedArg = False,
        after: AfterArg = None,
        before: BeforeArg = None,
        first: FirstArg = None,
        last: LastArg = None,
    ) -> PostConnection:
        return await post_connection(
            info,
            where=[
                *posts_service.featured_filter(featured),
                posts_service.author_filter(self.id),
            ],
            after=after,
            before=before,
            first=first,
            last=last,
        )


# ============================================================================
# Label
# ============================================================================


@strawberry.type(description="A category label for posts")
class Label:
    id: int = strawberry.field(description="Unique identifier")
    name: str = strawberry.field(description="Label name")
    color: str = strawberry.field(description="Display color (hex or named color)")

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Label:
        return cls(id=row.get("id"), name=row.get("name"), color=row.get("color"))

    @strawberry.field(description="Published posts with this label")
    async def posts(
        self,
        info: Info[GraphQLContext, None],
        featured: FeaturedArg = False,
        after: AfterArg = None,
        before: BeforeArg = None,
        first: FirstArg = None,
        last: LastArg = None,
    ) -> PostConnection:
        return await post_connection(
            info,
            where=[
                *posts_service.featured_filter(featured),
                posts_service.label_filter(self.id),
            ],
            joins=[posts_service.label_join()],
            after=after,
            before=before,
            first=first,
            last=last,
        )


__all__ = [
    "Author",
    "Label",
    "Post",
    "PostConnection",
    "PostEdge",
    "image_names",
    "post_connection",
]
