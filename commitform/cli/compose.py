"""CLI command for composing a commit message."""

from pathlib import Path
from typing import Optional

import typer

from commitform.cli.utils import (
    echo_field_errors,
    get_effective_composer_config,
    write_message,
)
from commitform.composer import ComposerSession, footer_is_driven, type_choices
from commitform.drafts import load_draft
from commitform.exceptions import DraftError, FormatError


def compose_command(
    commit_type: Optional[str] = typer.Option(
        None,
        "--type",
        "-t",
        help="Commit type (feat, fix, docs, ..., or 'custom')",
    ),
    custom_type: Optional[str] = typer.Option(
        None,
        "--custom-type",
        help="Custom type token, used with --type custom (e.g. '🔀integration')",
    ),
    scope: Optional[str] = typer.Option(
        None,
        "--scope",
        "-s",
        help="Scope of this change (one word, e.g. api)",
    ),
    subject: Optional[str] = typer.Option(
        None,
        "--subject",
        "-m",
        help="Short, imperative description of the change",
    ),
    body: Optional[str] = typer.Option(
        None,
        "--body",
        "-b",
        help="Longer explanatory description of the change",
    ),
    footer: Optional[str] = typer.Option(
        None,
        "--footer",
        help="Free-form footer (replaced by the composed footer when a breaking change or issue is given)",
    ),
    with_emoji: Optional[bool] = typer.Option(
        None,
        "--emoji/--no-emoji",
        help="Prefix the type with its emoji (default from config)",
    ),
    breaking: Optional[bool] = typer.Option(
        None,
        "--breaking/--no-breaking",
        help="Mark or unmark the change as breaking",
    ),
    breaking_body: Optional[str] = typer.Option(
        None,
        "--breaking-body",
        help="Describe the breaking change (implies --breaking)",
    ),
    issues: Optional[bool] = typer.Option(
        None,
        "--issues/--no-issues",
        help="Mark or unmark the change as affecting issues",
    ),
    issues_body: Optional[str] = typer.Option(
        None,
        "--issues-body",
        help="Issue references, e.g. 'Closes #123' (implies --issues)",
    ),
    draft: Optional[Path] = typer.Option(
        None,
        "--draft",
        help="Start from a saved draft (JSON or YAML)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the message to a file instead of stdout",
    ),
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--no-strict",
        help="Refuse to output a message while a field is invalid",
    ),
) -> None:
    """Compose a Conventional Commits message and print it."""
    config = get_effective_composer_config(strict)

    if commit_type is not None and commit_type not in type_choices():
        typer.echo(f"Invalid type: {commit_type}", err=True)
        typer.echo(f"Valid types: {', '.join(type_choices())}")
        raise typer.Exit(1)

    values = None
    if draft is not None:
        try:
            values = load_draft(draft, config)
        except DraftError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)
    session = ComposerSession(values, config)

    # Replay the options as field events, in form order
    field_changes = [
        ("type", commit_type),
        ("custom_type", custom_type),
        ("scope", scope),
        ("subject", subject),
        ("body", body),
        ("footer", footer),
        ("with_emoji", with_emoji),
    ]
    for field, value in field_changes:
        if value is not None:
            session.change(field, value)

    if breaking is not None or breaking_body is not None:
        session.toggle_breaking_change(breaking if breaking is not None else True)
    if breaking_body is not None and session.values.is_breaking_change:
        session.change("breaking_body", breaking_body)

    if issues is not None or issues_body is not None:
        session.toggle_issue_affected(issues if issues is not None else True)
    if issues_body is not None and session.values.is_issue_affected:
        session.change("issues_body", issues_body)

    if footer_is_driven(session.values):
        session.focus_footer()

    echo_field_errors(session.errors)

    try:
        session.submit(lambda message: write_message(message, output))
    except FormatError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(1)
    except OSError as e:
        typer.echo(f"Error: Failed to write commit message to {output}: {e}", err=True)
        raise typer.Exit(1)
