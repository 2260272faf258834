"""GraphQL schema command."""

from pathlib import Path

import click

from school_api.cli.utils import success


@click.command(name="schema")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def schema(output: Path | None) -> None:
    """Print the GraphQL schema in SDL form."""
    from school_api.features.graphql.schema import schema as graphql_schema

    sdl = graphql_schema.as_str()
    if output is None:
        click.echo(sdl)
        return

    output.write_text(sdl + "\n", encoding="utf-8")
    success(f"Schema written to {output}")
