"""CLI commands for inspecting commit types and checking field values."""

import typer

from commitform.composer import (
    CUSTOM_TYPE,
    lookup,
    type_choices,
    type_label,
    validate_custom_type,
    validate_scope,
)
from commitform.composer.constants import CUSTOM_TYPE_DESCRIPTION, CUSTOM_TYPE_EMOJI
from commitform.exceptions import FormatError


def types_command() -> None:
    """List the available commit types."""
    typer.echo("Available commit types:")
    typer.echo()

    for key in type_choices():
        if key == CUSTOM_TYPE:
            emoji, description = CUSTOM_TYPE_EMOJI, CUSTOM_TYPE_DESCRIPTION
        else:
            commit_type = lookup(key)
            emoji, description = commit_type.emoji, commit_type.description
        typer.echo(f"  {emoji} {type_label(key)}")
        typer.echo(f"    {description}")


# Subcommand group for validating single fields
check_app = typer.Typer(
    name="check",
    help="Check a field value against its format rule",
    add_completion=False,
)


def _report(validator, value: str) -> None:
    try:
        validator(value)
    except FormatError as e:
        typer.echo(f"✗ {e.message}", err=True)
        raise typer.Exit(1)
    typer.echo("✓ Valid")


@check_app.command("scope")
def check_scope(
    value: str = typer.Argument("", help="Scope to check"),
) -> None:
    """Check that a scope is a single alphanumeric word."""
    _report(validate_scope, value)


@check_app.command("custom-type")
def check_custom_type(
    value: str = typer.Argument(..., help="Custom type to check (e.g. '🔀integration')"),
) -> None:
    """Check that a custom type is an emoji plus one word."""
    _report(validate_custom_type, value)
