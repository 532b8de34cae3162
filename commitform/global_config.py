"""Global configuration management for commitform.

Handles user-level configuration stored in ~/.commitform/config.yaml:
- composer.default_type: Type preselected for new messages
- composer.with_emoji: Remembered "include emoji" preference
- composer.strict: Refuse to submit while a field has a format error
"""

from pathlib import Path
from typing import Any, Dict

import yaml

from commitform.composer.config import (
    composer_config_to_dict,
    load_composer_config_from_dict,
)
from commitform.composer.models import ComposerConfig
from commitform.exceptions import GlobalConfigError


_CONFIG_DIR = Path.home() / ".commitform"


def get_global_config_dir() -> Path:
    """Get the global commitform configuration directory.

    Returns:
        Path to ~/.commitform/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.commitform/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.commitform/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.commitform/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file exists but cannot be parsed.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.commitform/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w", encoding="utf-8") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def get_composer_config() -> ComposerConfig:
    """Get the effective composer configuration.

    Returns:
        ComposerConfig built from the global config, defaults for missing keys.
    """
    return load_composer_config_from_dict(load_global_config())


def set_composer_config(composer_config: ComposerConfig) -> None:
    """Set the composer section in global config.

    Args:
        composer_config: Configuration to store.
    """
    config = load_global_config()
    config.update(composer_config_to_dict(composer_config))
    save_global_config(config)


def is_configured() -> bool:
    """Check if commitform has been configured.

    Returns:
        True if config.yaml exists, False otherwise.
    """
    return get_config_file_path().exists()
