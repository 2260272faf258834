"""Router registry and setup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from school_api.core.settings import get_graphql_settings
from school_api.features.graphql.router import create_graphql_router
from school_api.features.health.router import router as health_router
from school_api.features.metrics.router import router as metrics_router

if TYPE_CHECKING:
    from fastapi import FastAPI

    from school_api.core.settings import GraphQLSettings

logger = logging.getLogger(__name__)


def setup_routers(app: FastAPI, graphql_settings: GraphQLSettings | None = None) -> None:
    """Register all feature routers with the application.

    Probes and metrics are mounted at the root; the GraphQL endpoint at
    ``graphql_settings.path``.
    """
    graphql_settings = graphql_settings or get_graphql_settings()

    app.include_router(metrics_router)
    app.include_router(health_router)
    app.include_router(create_graphql_router())

    logger.info(
        "Routers configured",
        extra={
            "graphql_path": graphql_settings.path,
            "playground_enabled": graphql_settings.playground_enabled,
        },
    )
