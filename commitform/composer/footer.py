"""Footer composition for the commitform composer.

The footer is derived from two optional sub-bodies, each gated by a toggle:
- is_breaking_change gates breaking_body
- is_issue_affected gates issues_body

Turning a toggle off discards its sub-body. The footer is recomputed on an
explicit focus event (recompute_footer), not on every sub-body change. While
both toggles are off the footer is a plain user-editable field.
"""

import logging
from typing import Optional

from commitform.composer.constants import SECTION_SEPARATOR
from commitform.composer.models import CommitValues

logger = logging.getLogger(__name__)


def compose_footer(breaking_body: Optional[str], issues_body: Optional[str]) -> str:
    """Compose the footer text from the two sub-bodies.

    The breaking body comes first. The issues body follows it after a blank
    line, or starts the footer when there is no breaking body.

    Args:
        breaking_body: Breaking change text, or None if absent.
        issues_body: Issue references, or None if absent.

    Returns:
        The composed footer. Empty string if both sub-bodies are absent.

    Example:
        >>> compose_footer("BREAKING: X", "Closes #1")
        'BREAKING: X\\n\\nCloses #1'
    """
    parts = []
    if breaking_body is not None:
        parts.append(breaking_body)
    if issues_body is not None:
        parts.append(issues_body)
    return SECTION_SEPARATOR.join(parts)


def footer_is_driven(values: CommitValues) -> bool:
    """Check whether the footer is currently derived from the sub-bodies."""
    return values.is_breaking_change or values.is_issue_affected


def set_breaking_change(values: CommitValues, enabled: bool) -> CommitValues:
    """Set the breaking change toggle.

    Args:
        values: Current value bag.
        enabled: New toggle state.

    Returns:
        New value bag. Turning the toggle off clears breaking_body.
    """
    update = {"is_breaking_change": enabled}
    if not enabled:
        if values.breaking_body is not None:
            logger.debug("Breaking change turned off, discarding breaking body")
        update["breaking_body"] = None
    return values.model_copy(update=update)


def set_issue_affected(values: CommitValues, enabled: bool) -> CommitValues:
    """Set the issue affected toggle.

    Args:
        values: Current value bag.
        enabled: New toggle state.

    Returns:
        New value bag. Turning the toggle off clears issues_body.
    """
    update = {"is_issue_affected": enabled}
    if not enabled:
        if values.issues_body is not None:
            logger.debug("Issue affected turned off, discarding issues body")
        update["issues_body"] = None
    return values.model_copy(update=update)


def recompute_footer(values: CommitValues) -> CommitValues:
    """Recompute the footer, as done when the footer field gains focus.

    Sub-bodies whose toggle is off are reset first. While a toggle is on the
    footer is replaced by the composed value; otherwise it is left as is.

    Args:
        values: Current value bag.

    Returns:
        New value bag with an up-to-date footer.
    """
    breaking_body = values.breaking_body if values.is_breaking_change else None
    issues_body = values.issues_body if values.is_issue_affected else None

    update = {"breaking_body": breaking_body, "issues_body": issues_body}
    if footer_is_driven(values):
        update["footer"] = compose_footer(breaking_body, issues_body)
        logger.debug("Recomputed footer (%d chars)", len(update["footer"]))

    return values.model_copy(update=update)
