"""Composition session: drives a value bag through field events.

A ComposerSession owns one CommitValues bag and the advisory error state of
its validated fields. The surrounding UI reports events to it (field
changes, toggles, footer focus) and finally submits it once; the assembled
message is handed to a sink.
"""

import logging
from typing import Callable, Mapping, Optional

from commitform.composer.assembler import assemble
from commitform.composer.constants import (
    CUSTOM_TYPE,
    FIELD_CUSTOM_TYPE,
    FIELD_SCOPE,
)
from commitform.composer.config import apply_config_defaults
from commitform.composer.footer import (
    recompute_footer,
    set_breaking_change,
    set_issue_affected,
)
from commitform.composer.models import CommitValues, ComposerConfig
from commitform.composer.validation import collect_errors, field_error
from commitform.exceptions import FormatError, SessionClosedError

logger = logging.getLogger(__name__)

Sink = Callable[[str], object]


class ComposerSession:
    """One commit message being composed.

    Args:
        values: Initial value bag. A fresh bag built from config if omitted.
        config: Composer configuration.
    """

    def __init__(self, values: Optional[CommitValues] = None, config: Optional[ComposerConfig] = None):
        self.config = config or ComposerConfig()
        if values is None:
            values = CommitValues(
                type=self.config.default_type,
                with_emoji=self.config.with_emoji,
            )
        self._values = values
        self._errors = collect_errors(values)
        self._submitted = False

    @classmethod
    def from_draft(cls, draft: Mapping, config: Optional[ComposerConfig] = None) -> "ComposerSession":
        """Create a session pre-populated from a saved draft.

        Keys missing from the draft take their defaults from config.

        Args:
            draft: Draft mapping in camelCase or snake_case form.
            config: Composer configuration.

        Returns:
            A new session.
        """
        config = config or ComposerConfig()
        return cls(CommitValues.model_validate(apply_config_defaults(draft, config)), config)

    @property
    def values(self) -> CommitValues:
        """The current value bag."""
        return self._values

    @property
    def errors(self) -> dict[str, str]:
        """Current advisory errors, keyed by field name."""
        return dict(self._errors)

    @property
    def is_submitted(self) -> bool:
        return self._submitted

    def _ensure_open(self) -> None:
        if self._submitted:
            raise SessionClosedError("Session was already submitted")

    def _refresh_error(self, field: str, text: Optional[str]) -> None:
        message = field_error(field, text)
        if message:
            self._errors[field] = message
        else:
            self._errors.pop(field, None)

    def change(self, field: str, value) -> None:
        """Apply a field change event.

        Args:
            field: Field name (snake_case).
            value: New value.

        Raises:
            ValueError: If the field does not exist, or the value cannot be
                coerced to the field's type (pydantic ValidationError).
            SessionClosedError: If the session was already submitted.
        """
        self._ensure_open()

        if field not in CommitValues.model_fields:
            raise ValueError(f"Unknown field: {field}")

        if field == "is_breaking_change":
            self.toggle_breaking_change(bool(value))
            return
        if field == "is_issue_affected":
            self.toggle_issue_affected(bool(value))
            return

        # Rebuild through validation so the model's coercions apply to events too
        self._values = CommitValues.model_validate({**self._values.model_dump(), field: value})

        if field == FIELD_SCOPE:
            self._refresh_error(FIELD_SCOPE, self._values.scope)
        elif field == FIELD_CUSTOM_TYPE and self._values.type == CUSTOM_TYPE:
            self._refresh_error(FIELD_CUSTOM_TYPE, self._values.custom_type)
        elif field == "type":
            if self._values.type == CUSTOM_TYPE:
                self._refresh_error(FIELD_CUSTOM_TYPE, self._values.custom_type)
            else:
                self._errors.pop(FIELD_CUSTOM_TYPE, None)

    def toggle_breaking_change(self, enabled: bool) -> None:
        """Turn the breaking change sub-body on or off."""
        self._ensure_open()
        self._values = set_breaking_change(self._values, enabled)

    def toggle_issue_affected(self, enabled: bool) -> None:
        """Turn the issues sub-body on or off."""
        self._ensure_open()
        self._values = set_issue_affected(self._values, enabled)

    def focus_footer(self) -> str:
        """Handle the footer gaining focus by recomputing it.

        Returns:
            The footer text after recomputation.
        """
        self._ensure_open()
        self._values = recompute_footer(self._values)
        return self._values.footer or ""

    def preview(self) -> str:
        """Assemble the message without submitting."""
        return assemble(self._values)

    def submit(self, sink: Optional[Sink] = None) -> str:
        """Assemble the message and hand it to the sink, exactly once.

        Args:
            sink: Callable receiving the final message.

        Returns:
            The assembled message.

        Raises:
            SessionClosedError: If the session was already submitted.
            FormatError: In strict mode, if a field still has an error.
        """
        self._ensure_open()

        if self._errors and self.config.strict:
            field, error = next(iter(self._errors.items()))
            raise FormatError(error, field=field)
        for field, error in self._errors.items():
            logger.warning("Submitting with invalid %s: %s", field, error)

        message = assemble(self._values)
        self._submitted = True
        logger.debug("Submitted commit message (%d chars)", len(message))

        if sink is not None:
            sink(message)
        return message
