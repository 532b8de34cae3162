"""Utility functions for CLI commands.

Contains helper functions used across multiple CLI commands:
- configure_logging: Set up console logging (--verbose)
- get_effective_composer_config: Load config, apply CLI overrides
- echo_field_errors: Print advisory validation errors
- write_message: Deliver a message to stdout or a file
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from commitform import global_config
from commitform.composer import ComposerConfig
from commitform.exceptions import GlobalConfigError


def configure_logging(verbose: bool) -> None:
    """Configure console logging.

    Args:
        verbose: Log debug messages when True. Otherwise package warnings are
            silenced, since commands already echo field errors themselves.
    """
    package_logger = logging.getLogger("commitform")
    if verbose:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        package_logger.setLevel(logging.DEBUG)
    else:
        package_logger.setLevel(logging.ERROR)


def get_effective_composer_config(strict: Optional[bool] = None) -> ComposerConfig:
    """Get composer config from global config, with CLI overrides applied.

    Args:
        strict: Override for strict mode, None to keep the configured value.

    Returns:
        The effective ComposerConfig.

    Raises:
        typer.Exit: If the config file cannot be loaded.
    """
    try:
        config = global_config.get_composer_config()
    except GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if strict is not None:
        config.strict = strict
    return config


def echo_field_errors(errors: dict[str, str]) -> None:
    """Print advisory field errors to stderr."""
    for field, message in errors.items():
        typer.echo(f"Warning ({field}): {message}", err=True)


def write_message(message: str, output: Optional[Path] = None) -> None:
    """Deliver the final message.

    Args:
        message: The commit message.
        output: File to write to. Stdout if None.
    """
    if output is None:
        typer.echo(message)
        return

    output.write_text(message, encoding="utf-8")
    typer.echo(f"✓ Commit message written to {output}", err=True)
