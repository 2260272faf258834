"""Console output helpers for school-api commands."""

import click


def success(message: str) -> None:
    click.secho(f"✓ {message}", fg="green")


def error(message: str) -> None:
    click.secho(f"✗ {message}", fg="red", err=True)


def info(message: str) -> None:
    click.secho(f"ℹ {message}", fg="blue")


def detail(label: str, value: object) -> None:
    """Print an aligned ``label: value`` line, with a dim placeholder for unset values."""
    shown = click.style("(not set)", dim=True) if value in (None, "") else str(value)
    click.echo(f"  {label + ':':<14}{shown}")


def header(message: str) -> None:
    click.secho(f"\n{message}", fg="cyan", bold=True)
