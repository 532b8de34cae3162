"""CLI entry point for commitform.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from commitform.cli.compose import compose_command
from commitform.cli.config import config_app
from commitform.cli.main import main_command
from commitform.cli.types import check_app, types_command

# Main application
app = typer.Typer(
    name="commitform",
    help="commitform: Conventional Commits message composer",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")
app.add_typer(check_app, name="check")

# Add individual commands
app.command("compose")(compose_command)
app.command("types")(types_command)

# Root callback (handles --version and --verbose)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "check_app",
    "compose_command",
    "types_command",
    "main_command",
]
