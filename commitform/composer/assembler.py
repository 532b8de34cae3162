"""Conventional Commits message assembly.

Format:
    [<emoji> ]<type>[(<scope>)]: [<subject>]

    [<body>]

    [<footer>]
"""

from typing import Mapping

from commitform.composer.constants import (
    CUSTOM_TYPE,
    HEADER_SEPARATOR,
    SECTION_SEPARATOR,
)
from commitform.composer.models import CommitType, CommitValues
from commitform.composer.registry import COMMIT_TYPES, lookup


def resolve_type_token(values: CommitValues, registry: Mapping[str, CommitType] = COMMIT_TYPES) -> str:
    """Resolve the leading token of the header.

    Args:
        values: The value bag.
        registry: Registry used to find the emoji.

    Returns:
        The custom type verbatim for custom types, otherwise the type key,
        prefixed with its emoji when with_emoji is set.
    """
    if values.type == CUSTOM_TYPE:
        return values.custom_type or ""

    commit_type = lookup(values.type, registry)
    if values.with_emoji and commit_type is not None:
        return f"{commit_type.emoji} {values.type}"
    return values.type


def render_header(values: CommitValues, registry: Mapping[str, CommitType] = COMMIT_TYPES) -> str:
    """Render the "type(scope): subject" header line."""
    header = resolve_type_token(values, registry)
    if values.scope:
        header += f"({values.scope})"
    header += HEADER_SEPARATOR
    if values.subject:
        header += values.subject
    return header


def assemble(values: CommitValues, registry: Mapping[str, CommitType] = COMMIT_TYPES) -> str:
    """Assemble the final commit message.

    Fields are used verbatim: nothing is escaped, wrapped or truncated, and
    no trailing newline is added. Empty optional fields are skipped.

    Args:
        values: The value bag, including the footer.
        registry: Registry used to resolve emoji.

    Returns:
        The formatted commit message.

    Example output:
        ✨ feat(api): add login

        adds OAuth

        Closes #1
    """
    parts = [render_header(values, registry)]

    if values.body:
        parts.append(values.body)

    if values.footer:
        parts.append(values.footer)

    return SECTION_SEPARATOR.join(parts)
