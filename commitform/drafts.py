"""Loading of saved drafts.

A draft is a raw replay of a CommitValues bag (camelCase keys, as saved by
the form that produced it) stored as JSON or YAML. Drafts are only read;
there is no versioning or migration.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from commitform.composer.config import apply_config_defaults
from commitform.composer.models import CommitValues, ComposerConfig
from commitform.exceptions import DraftError


def read_draft(path: Path) -> Dict[str, Any]:
    """Read the raw draft mapping from a JSON or YAML file.

    Args:
        path: Path to the draft file. ".json" files are parsed as JSON,
            anything else as YAML.

    Returns:
        The draft mapping.

    Raises:
        DraftError: If the file cannot be read or is not a mapping.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DraftError(f"Failed to read draft {path}: {e}")

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text) if text.strip() else {}
        else:
            data = yaml.safe_load(text) or {}
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DraftError(f"Failed to parse draft {path}: {e}")

    if not isinstance(data, dict):
        raise DraftError(f"Draft {path} must contain a mapping of fields")
    return data


def load_draft(path: Path, config: Optional[ComposerConfig] = None) -> CommitValues:
    """Load a draft file into a value bag.

    Args:
        path: Path to the draft file.
        config: Supplies the type and emoji preference when the draft
            does not carry them. Defaults to ComposerConfig().

    Returns:
        The value bag.

    Raises:
        DraftError: If the file cannot be read or has invalid field values.
    """
    data = apply_config_defaults(read_draft(path), config or ComposerConfig())
    try:
        return CommitValues.model_validate(data)
    except ValidationError as e:
        raise DraftError(f"Invalid draft {path}: {e}")
