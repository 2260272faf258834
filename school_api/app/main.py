"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from school_api.app.exception_handlers import configure_exception_handlers
from school_api.app.lifespan import lifespan
from school_api.app.middleware import configure_middleware
from school_api.app.router import setup_routers
from school_api.core.settings import get_app_settings, get_graphql_settings


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app_settings = get_app_settings()

    app = FastAPI(
        title=app_settings.title,
        version=app_settings.version,
        root_path=app_settings.root_path,
        debug=app_settings.debug,
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )

    # Configure exception handlers (must be before middleware)
    configure_exception_handlers(app)

    configure_middleware(app, app_settings)

    setup_routers(app, get_graphql_settings())

    return app


# Application instance for uvicorn
app = create_app()
