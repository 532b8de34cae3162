"""Data models for the commitform composer.

Contains:
- CommitType: Immutable registry entry for a commit type
- CommitValues: Pydantic value bag for one commit message in progress
- ComposerConfig: Configuration dataclass for composition sessions
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from commitform.composer.constants import DEFAULT_TYPE


@dataclass(frozen=True)
class CommitType:
    """A known commit type.

    Attributes:
        key: Short type key used in the header (e.g., "feat").
        description: Human-readable description of the type.
        title: Category heading used in changelog generation.
        emoji: Glyph prefixed to the key when emoji output is enabled.
    """

    key: str
    description: str
    title: str
    emoji: str


class CommitValues(BaseModel):
    """Value bag for one in-progress or submitted commit message.

    Accepts both the snake_case field names and the camelCase keys used by
    saved drafts (customType, withEmoji, isBreakingChange, ...). Unknown keys
    are ignored.

    Attributes:
        type: Registry key, or "custom" to use custom_type.
        custom_type: User-supplied type token (only used when type is "custom").
        scope: Optional scope word.
        subject: Short description of the change.
        body: Longer explanatory text.
        with_emoji: Prefix the registry emoji (ignored for custom types).
        is_breaking_change: Whether the breaking-change sub-body is active.
        breaking_body: Breaking change description.
        is_issue_affected: Whether the issues sub-body is active.
        issues_body: Issue references (e.g., "Closes #123").
        footer: Footer text, derived from the sub-bodies while a toggle is on.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    type: str = DEFAULT_TYPE
    custom_type: Optional[str] = None
    scope: Optional[str] = None
    subject: Optional[str] = None
    body: Optional[str] = None
    with_emoji: bool = False
    is_breaking_change: bool = False
    breaking_body: Optional[str] = None
    is_issue_affected: bool = False
    issues_body: Optional[str] = None
    footer: Optional[str] = None

    @field_validator("type", mode="before")
    @classmethod
    def default_type_when_missing(cls, v):
        """Fall back to the default type for empty values."""
        if not v:
            return DEFAULT_TYPE
        return v

    @field_validator("with_emoji", "is_breaking_change", "is_issue_affected", mode="before")
    @classmethod
    def ensure_bool(cls, v):
        """Treat missing toggles as off."""
        if v is None:
            return False
        return v


@dataclass
class ComposerConfig:
    """Configuration for composition sessions."""

    default_type: str = DEFAULT_TYPE
    with_emoji: bool = False

    # Reject submission while a field still shows a format error
    strict: bool = False
