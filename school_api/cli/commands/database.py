"""Database commands."""

import click

from school_api.cli.utils import coro, detail, error, header, success
from school_api.core.settings import get_db_settings
from school_api.infra.database import close_database, init_database


@click.group(name="db")
def db() -> None:
    """Database commands."""


@db.command()
@coro
async def check() -> None:
    """Test the database connection."""
    settings = get_db_settings()
    header("Database connection")
    detail("Dialect", settings.dialect)
    detail("Host", settings.host)
    detail("Database", settings.database)

    try:
        await init_database(settings)
    except ConnectionError as exc:
        error(f"Failed to connect: {exc}")
        raise SystemExit(1) from exc
    finally:
        await close_database()

    success("Database connection successful")
