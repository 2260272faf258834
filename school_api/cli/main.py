"""Main CLI entry point for school-api management commands."""

import click

from school_api import __version__
from school_api.cli.commands import database, schema, server
from school_api.infra.logging.config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="school-api")
def cli() -> None:
    """School API CLI.

    \b
    Commands:
      serve          Run the GraphQL API server
      schema         Print the GraphQL schema (SDL)
      db check       Test the database connection
    """


cli.add_command(server.serve)
cli.add_command(schema.schema)
cli.add_command(database.db)


def main() -> None:
    """Entry point for CLI."""
    setup_logging()
    cli()


if __name__ == "__main__":
    main()
