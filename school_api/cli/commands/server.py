"""Server commands."""

import click
import uvicorn

from school_api.cli.utils import detail, header
from school_api.core.settings import get_app_settings, get_logging_settings


@click.command(name="serve")
@click.option("--host", default=None, help="Host to bind (default: APP_HOST)")
@click.option("--port", default=None, type=int, help="Port to bind (default: APP_PORT)")
@click.option(
    "--reload/--no-reload",
    default=False,
    help="Enable auto-reload on code changes",
)
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the GraphQL API server."""
    settings = get_app_settings()
    log_settings = get_logging_settings()
    host = host or settings.host
    port = port or settings.port

    header("Starting school-api")
    detail("Address", f"http://{host}:{port}")
    detail("Environment", settings.environment)
    detail("Reload", reload)

    uvicorn.run(
        "school_api.app.main:app",
        host=host,
        port=port,
        reload=reload,
        access_log=settings.debug,
        log_level=log_settings.level.lower(),
    )
