"""Root CLI callback for commitform."""

import typer

from commitform import __version__
from commitform.cli.utils import configure_logging


def main_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show the version and exit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log composer state transitions to stderr",
    ),
) -> None:
    """Compose Conventional Commits messages."""
    if version:
        typer.echo(f"commitform {__version__}")
        raise typer.Exit(0)

    configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
