"""Serve the GraphiQL IDE on GET requests to the GraphQL endpoint."""

from __future__ import annotations

import html
import re
from typing import Final

from fastapi import APIRouter
from fastapi.responses import HTMLResponse
from strawberry.http.ides import get_graphql_ide_html

_TITLE_PATTERN: Final = re.compile(r"<title>.*?</title>", re.DOTALL)


def register_playground_routes(router: APIRouter, *, graphql_path: str, title: str) -> None:
    """Expose GraphiQL on ``GET graphql_path``; queries are posted back to the same URL."""
    page = render_playground_html(title=title)

    @router.get(graphql_path, include_in_schema=False)
    async def graphql_playground() -> HTMLResponse:
        return HTMLResponse(page)


def render_playground_html(*, title: str) -> str:
    page = get_graphql_ide_html(graphql_ide="graphiql")
    return _TITLE_PATTERN.sub(f"<title>{html.escape(title)}</title>", page, count=1)


__all__ = ["register_playground_routes", "render_playground_html"]
