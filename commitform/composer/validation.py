"""Format rules for the free-text fields of a commit message.

Contains:
- validate_custom_type: "emoji + one word" rule for custom types
- validate_scope: optional single-word rule for scopes
- field_error: current advisory error message for a field value
- collect_errors: all outstanding errors for a value bag

Validators raise FormatError. Callers that only need to display the error
use field_error, which never raises.
"""

import re
from typing import Optional

from commitform.composer.constants import (
    CUSTOM_TYPE,
    CUSTOM_TYPE_MISSING_EMOJI,
    CUSTOM_TYPE_NOT_ONE_WORD,
    FIELD_CUSTOM_TYPE,
    FIELD_SCOPE,
    SCOPE_NOT_ONE_WORD,
)
from commitform.composer.models import CommitValues
from commitform.exceptions import FormatError

# Legacy emoji ranges: (c), (R), U+2000-U+3300 and the code points reached by
# the \ud83c/\ud83d/\ud83e surrogate pairs (U+1F000-U+1FBFF).
EMOJI_CHARS = r"\u00a9\u00ae\u2000-\u3300\U0001F000-\U0001FBFF"
EMOJI_PATTERN = re.compile(f"[{EMOJI_CHARS}]")

# One emoji character plus an optional text/emoji presentation selector
EMOJI_SEQUENCE_PATTERN = re.compile(f"[{EMOJI_CHARS}]" r"[\uFE0E\uFE0F]?")

WORD_PATTERN = re.compile(r"[a-zA-Z0-9]+")


def contains_emoji(text: str) -> bool:
    """Check whether text contains at least one legacy-range emoji."""
    return EMOJI_PATTERN.search(text) is not None


def strip_emoji(text: str) -> str:
    """Remove every emoji sequence from text."""
    return EMOJI_SEQUENCE_PATTERN.sub("", text)


def validate_custom_type(text: Optional[str]) -> None:
    """Validate a custom commit type.

    The text must contain an emoji and, apart from its emoji, be a single
    alphanumeric word (e.g., "🔀integration").

    Args:
        text: The custom type text.

    Raises:
        FormatError: If the text has no emoji, or is not one bare word besides it.
    """
    text = text or ""

    if not contains_emoji(text):
        raise FormatError(CUSTOM_TYPE_MISSING_EMOJI, field=FIELD_CUSTOM_TYPE)

    if not WORD_PATTERN.fullmatch(strip_emoji(text)):
        raise FormatError(CUSTOM_TYPE_NOT_ONE_WORD, field=FIELD_CUSTOM_TYPE)


def validate_scope(text: Optional[str]) -> None:
    """Validate a commit scope.

    An empty scope is valid since scope is optional.

    Args:
        text: The scope text.

    Raises:
        FormatError: If the scope is not a single alphanumeric word.
    """
    if not text:
        return

    if not WORD_PATTERN.fullmatch(text):
        raise FormatError(SCOPE_NOT_ONE_WORD, field=FIELD_SCOPE)


VALIDATORS = {
    FIELD_CUSTOM_TYPE: validate_custom_type,
    FIELD_SCOPE: validate_scope,
}


def field_error(field: str, text: Optional[str]) -> Optional[str]:
    """Return the current error message for a field value.

    Args:
        field: Field name (custom_type or scope). Other fields have no rule.
        text: The field value.

    Returns:
        The error message, or None when the value is valid.
    """
    validator = VALIDATORS.get(field)
    if validator is None:
        return None

    try:
        validator(text)
    except FormatError as e:
        return e.message
    return None


def collect_errors(values: CommitValues) -> dict[str, str]:
    """Collect outstanding format errors for a value bag.

    The custom type is only checked while the custom type is selected.

    Args:
        values: The value bag.

    Returns:
        Mapping of field name to error message. Empty when everything is valid.
    """
    errors = {}

    if values.type == CUSTOM_TYPE:
        message = field_error(FIELD_CUSTOM_TYPE, values.custom_type)
        if message:
            errors[FIELD_CUSTOM_TYPE] = message

    message = field_error(FIELD_SCOPE, values.scope)
    if message:
        errors[FIELD_SCOPE] = message

    return errors
