"""Configuration utilities for the commitform composer.

Contains functions for:
- Loading ComposerConfig from a configuration dictionary
- Converting ComposerConfig to a dictionary for saving
- Filling missing draft keys from ComposerConfig
"""

from commitform.composer.constants import CUSTOM_TYPE, DEFAULT_TYPE
from commitform.composer.models import ComposerConfig
from commitform.composer.registry import COMMIT_TYPES


def load_composer_config_from_dict(config_dict: dict) -> ComposerConfig:
    """Load ComposerConfig from a configuration dictionary.

    Args:
        config_dict: Dictionary with composer configuration.

    Returns:
        ComposerConfig instance.
    """
    composer_section = config_dict.get("composer") or {}

    # Unknown types fall back to the default
    default_type = composer_section.get("default_type", DEFAULT_TYPE)
    if default_type not in COMMIT_TYPES and default_type != CUSTOM_TYPE:
        default_type = DEFAULT_TYPE

    return ComposerConfig(
        default_type=default_type,
        with_emoji=bool(composer_section.get("with_emoji", False)),
        strict=bool(composer_section.get("strict", False)),
    )


def composer_config_to_dict(config: ComposerConfig) -> dict:
    """Convert ComposerConfig to a dictionary for saving.

    Args:
        config: ComposerConfig instance.

    Returns:
        Dictionary representation.
    """
    return {
        "composer": {
            "default_type": config.default_type,
            "with_emoji": config.with_emoji,
            "strict": config.strict,
        }
    }


def apply_config_defaults(draft: dict, config: ComposerConfig) -> dict:
    """Fill draft keys the draft does not carry from configuration.

    Args:
        draft: Draft mapping in camelCase or snake_case form.
        config: ComposerConfig supplying the defaults.

    Returns:
        A new mapping with type and emoji preference filled in.
    """
    data = dict(draft)
    if "type" not in data:
        data["type"] = config.default_type
    if "withEmoji" not in data and "with_emoji" not in data:
        data["with_emoji"] = config.with_emoji
    return data
