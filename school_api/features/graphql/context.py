"""GraphQL context for request-scoped dependencies.

The context is created fresh for each GraphQL request and provides:
- The request transaction (shared by every resolver of the request)
- Application and GraphQL settings
- The HTTP request, when executed over HTTP
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from strawberry.fastapi import BaseContext

from school_api.core.settings import get_app_settings, get_graphql_settings

if TYPE_CHECKING:
    from starlette.requests import Request

    from school_api.core.database import RequestTransaction
    from school_api.core.settings import AppSettings, GraphQLSettings


@dataclass
class GraphQLContext(BaseContext):
    """Request context for GraphQL operations.

    Example usage in resolver:
        @strawberry.field
        async def page(self, info: Info[GraphQLContext, None], slug: str) -> Page | None:
            row = await get_page_by_slug(info.context.tx, columns=..., slug=slug)
    """

    transaction: RequestTransaction | None = None
    app_settings: AppSettings = field(default_factory=get_app_settings)
    graphql_settings: GraphQLSettings = field(default_factory=get_graphql_settings)
    request: Request | None = None

    @property
    def tx(self) -> RequestTransaction:
        """The request transaction; introspection runs without one."""
        if self.transaction is None:
            msg = "GraphQL operation executed without a request transaction"
            raise RuntimeError(msg)
        return self.transaction

    def storage_url(self, folder: str, path: str) -> str:
        return self.app_settings.storage_url(folder, path)


__all__ = ["GraphQLContext"]
