"""GraphQL types for the post archive."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any

import strawberry
from strawberry.types import Info

from school_api.features.graphql.context import GraphQLContext
from school_api.features.graphql.selection import requested_fields
from school_api.features.graphql.types.posts import Post
from school_api.features.posts import service as posts_service
from school_api.features.posts.models import POST_PROJECTION


@strawberry.type(name="ArchiveInfo", description="Number of published posts in one month")
class ArchiveInfo:
    count: int = strawberry.field(description="Number of posts in this month")
    year: int
    month: int = strawberry.field(description="Month (1-12)")

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> ArchiveInfo:
        return cls(count=int(row["count"]), year=int(row["year"]), month=int(row["month"]))


@strawberry.type(description="Access to published posts by year and month")
class Archive:
    @strawberry.field(description="Published posts of one month, newest first")
    async def posts(
        self,
        info: Info[GraphQLContext, None],
        year: Annotated[int, strawberry.argument(description="The year")],
        month: Annotated[int, strawberry.argument(description="The month (1-12)")],
    ) -> list[Post]:
        rows = await posts_service.archive_posts(
            info.context.tx,
            columns=POST_PROJECTION.columns(requested_fields(info)),
            year=year,
            month=month,
        )
        return [Post.from_row(row) for row in rows]

    @strawberry.field(description="Post counts grouped by month, newest first")
    async def info(self, info: Info[GraphQLContext, None]) -> list[ArchiveInfo]:
        rows = await posts_service.archive_info(info.context.tx)
        return [ArchiveInfo.from_row(row) for row in rows]
