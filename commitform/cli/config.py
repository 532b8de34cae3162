"""CLI commands for global configuration management."""

import typer

from commitform import global_config
from commitform.composer import CUSTOM_TYPE, COMMIT_TYPES
from commitform.exceptions import GlobalConfigError

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global commitform configuration in ~/.commitform/",
    add_completion=False,
)

CONFIG_KEYS = ("default_type", "with_emoji", "strict")

TRUE_VALUES = {"true", "yes", "on", "1"}
FALSE_VALUES = {"false", "no", "off", "0"}


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    typer.echo(f"Invalid boolean: {value} (use true or false)", err=True)
    raise typer.Exit(1)


@config_app.command("show")
def config_show() -> None:
    """Show current global configuration."""
    try:
        config = global_config.get_composer_config()
    except GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    if global_config.is_configured():
        typer.echo(f"Current commitform configuration ({global_config.get_config_file_path()}):")
    else:
        typer.echo("No configuration file found, showing defaults:")
    typer.echo()
    typer.echo(f"  Default Type: {config.default_type}")
    typer.echo(f"  With Emoji: {str(config.with_emoji).lower()}")
    typer.echo(f"  Strict: {str(config.strict).lower()}")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Setting name (default_type, with_emoji, strict)"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Set a composer setting."""
    if key not in CONFIG_KEYS:
        typer.echo(f"Invalid setting: {key}", err=True)
        typer.echo(f"Valid settings: {', '.join(CONFIG_KEYS)}")
        raise typer.Exit(1)

    try:
        config = global_config.get_composer_config()

        if key == "default_type":
            if value not in COMMIT_TYPES and value != CUSTOM_TYPE:
                typer.echo(f"Invalid type: {value}", err=True)
                raise typer.Exit(1)
            config.default_type = value
        elif key == "with_emoji":
            config.with_emoji = _parse_bool(value)
        else:
            config.strict = _parse_bool(value)

        global_config.set_composer_config(config)
    except GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ {key} set to '{value}'")
