"""Query resolvers for posts, authors and labels.

Provides:
- posts(featured, after, before, first, last): published posts, newest first
- search(term, ...): published posts matching a term
- post(id, token): a single post, or a preview of an unpublished one
- author(id) / label(id): single lookups with their own post connections
"""

from __future__ import annotations

import logging
from typing import Annotated

import strawberry
from strawberry.types import Info

from school_api.features.graphql.context import GraphQLContext
from school_api.features.graphql.selection import requested_fields
from school_api.features.graphql.types.base import AfterArg, BeforeArg, FeaturedArg, FirstArg, LastArg
from school_api.features.graphql.types.posts import Author, Label, Post, PostConnection, post_connection
from school_api.features.posts import service as posts_service
from school_api.features.posts.models import AUTHOR_PROJECTION, LABEL_PROJECTION, POST_PROJECTION
from school_api.infra.metrics.prometheus import graphql_resource_requests_total

logger = logging.getLogger(__name__)


@strawberry.type
class PostsQuery:
    @strawberry.field(description="Paginated list of published posts, newest first")
    async def posts(
        self,
        info: Info[GraphQLContext, None],
        featured: FeaturedArg = False,
        after: AfterArg = None,
        before: BeforeArg = None,
        first: FirstArg = None,
        last: LastArg = None,
    ) -> PostConnection:
        graphql_resource_requests_total.labels(resource="posts").inc()
        return await post_connection(
            info,
            where=posts_service.featured_filter(featured),
            after=after,
            before=before,
            first=first,
            last=last,
        )

    @strawberry.field(description="Search published posts by title, description or content")
    async def search(
        self,
        info: Info[GraphQLContext, None],
        term: Annotated[
            str, strawberry.argument(description="Text matched against title, description and content"),
        ],
        after: AfterArg = None,
        before: BeforeArg = None,
        first: FirstArg = None,
        last: LastArg = None,
    ) -> PostConnection:
        graphql_resource_requests_total.labels(resource="search").inc()
        return await post_connection(
            info,
            where=[posts_service.search_filter(term)],
            after=after,
            before=before,
            first=first,
            last=last,
        )

    @strawberry.field(description="Retrieve a single post by ID")
    async def post(
        self,
        info: Info[GraphQLContext, None],
        id: Annotated[int, strawberry.argument(description="The post ID")],
        token: Annotated[
            str | None,
            strawberry.argument(description="Preview token for accessing an unpublished post"),
        ] = None,
    ) -> Post | None:
        graphql_resource_requests_total.labels(resource="post").inc()
        row = await posts_service.get_post(
            info.context.tx,
            columns=POST_PROJECTION.columns(requested_fields(info)),
            post_id=id,
            token=token,
        )
        if row is None:
            logger.debug("Post not found", extra={"post_id": id, "preview": token is not None})
            return None
        return Post.from_row(row)

    @strawberry.field(description="Retrieve an author by ID")
    async def author(
        self,
        info: Info[GraphQLContext, None],
        id: Annotated[int, strawberry.argument(description="The author ID")],
    ) -> Author | None:
        graphql_resource_requests_total.labels(resource="author").inc()
        row = await posts_service.get_author(
            info.context.tx,
            columns=AUTHOR_PROJECTION.columns(requested_fields(info)),
            author_id=id,
        )
        return Author.from_row(row) if row is not None else None

    @strawberry.field(description="Retrieve a label by ID")
    async def label(
        self,
        info: Info[GraphQLContext, None],
        id: Annotated[int, strawberry.argument(description="The label ID")],
    ) -> Label | None:
        graphql_resource_requests_total.labels(resource="label").inc()
        row = await posts_service.get_label(
            info.context.tx,
            columns=LABEL_PROJECTION.columns(requested_fields(info)),
            label_id=id,
        )
        return Label.from_row(row) if row is not None else None
