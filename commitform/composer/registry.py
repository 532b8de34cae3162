"""Commit type registry.

Read-only table of the known commit types, built once at import time from
COMMIT_TYPE_DEFINITIONS. The "custom" key is a branch selector and never
resolves through the registry.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from commitform.composer.constants import (
    COMMIT_TYPE_DEFINITIONS,
    CUSTOM_TYPE,
    CUSTOM_TYPE_TITLE,
)
from commitform.composer.models import CommitType


COMMIT_TYPES: Mapping[str, CommitType] = MappingProxyType({
    key: CommitType(key=key, **definition)
    for key, definition in COMMIT_TYPE_DEFINITIONS.items()
})


def lookup(key: Optional[str], registry: Mapping[str, CommitType] = COMMIT_TYPES) -> Optional[CommitType]:
    """Look up a commit type by key.

    Args:
        key: Type key (e.g., "feat").
        registry: Registry to search. Defaults to COMMIT_TYPES.

    Returns:
        The CommitType, or None if the key is unknown or is the custom sentinel.
    """
    if not key or key == CUSTOM_TYPE:
        return None
    return registry.get(key)


def type_choices() -> list[str]:
    """Return the selectable type keys, registry order first, custom last."""
    return list(COMMIT_TYPES) + [CUSTOM_TYPE]


def type_label(key: str) -> str:
    """Return the picker label for a type key.

    Args:
        key: Type key or the custom sentinel.

    Returns:
        "<key>: <title>", or the key itself for unknown types.
    """
    if key == CUSTOM_TYPE:
        return f"{key}: {CUSTOM_TYPE_TITLE}"
    commit_type = lookup(key)
    if commit_type is None:
        return key
    return f"{key}: {commit_type.title}"
