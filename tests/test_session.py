"""Tests for commitform.composer.session module."""

import logging
from unittest.mock import MagicMock

import pytest

from commitform.composer import CommitValues, ComposerConfig, ComposerSession
from commitform.exceptions import FormatError, SessionClosedError


class TestSessionInit:
    """Tests for creating sessions."""

    def test_fresh_session_uses_config(self):
        """Test that a new bag takes the configured defaults."""
        session = ComposerSession(config=ComposerConfig(default_type="fix", with_emoji=True))
        assert session.values.type == "fix"
        assert session.values.with_emoji is True

    def test_default_session(self):
        """Test a session without config."""
        session = ComposerSession()
        assert session.values.type == "feat"
        assert session.errors == {}
        assert session.is_submitted is False

    def test_initial_errors_from_values(self):
        """Test that pre-populated invalid fields report errors."""
        session = ComposerSession(CommitValues(scope="two words"))
        assert session.errors == {"scope": "Scope must be one word string"}

    def test_from_draft(self, sample_draft_dict):
        """Test pre-populating from a camelCase draft."""
        session = ComposerSession.from_draft(sample_draft_dict)
        assert session.values.type == "fix"
        assert session.values.breaking_body.startswith("BREAKING CHANGE")
        assert session.values.issues_body == "Closes #42"

    def test_from_draft_defaults_from_config(self):
        """Test that keys missing from the draft come from config."""
        config = ComposerConfig(default_type="docs", with_emoji=True)
        session = ComposerSession.from_draft({"subject": "x"}, config)
        assert session.values.type == "docs"
        assert session.values.with_emoji is True

    def test_from_draft_keeps_explicit_emoji(self):
        """Test that a draft's emoji choice wins over config."""
        config = ComposerConfig(with_emoji=True)
        session = ComposerSession.from_draft({"withEmoji": False}, config)
        assert session.values.with_emoji is False


class TestSessionChange:
    """Tests for field change events."""

    def test_change_sets_field(self):
        """Test a plain field change."""
        session = ComposerSession()
        session.change("subject", "add login")
        assert session.values.subject == "add login"

    def test_change_does_not_mutate_previous_bag(self):
        """Test that changes produce a new bag."""
        session = ComposerSession()
        before = session.values
        session.change("subject", "add login")
        assert before.subject is None

    def test_scope_error_tracks_changes(self):
        """Test that the scope error appears and clears as the field changes."""
        session = ComposerSession()
        session.change("scope", "api gateway")
        assert session.errors["scope"] == "Scope must be one word string"
        session.change("scope", "api")
        assert "scope" not in session.errors
        session.change("scope", "")
        assert session.errors == {}

    def test_custom_type_error(self):
        """Test custom type validation while custom is selected."""
        session = ComposerSession()
        session.change("type", "custom")
        assert session.errors["custom_type"] == "Custom type must start with emoji"
        session.change("custom_type", "🔀integration")
        assert session.errors == {}

    def test_custom_type_error_cleared_on_type_change(self):
        """Test that leaving the custom type drops its error."""
        session = ComposerSession()
        session.change("type", "custom")
        session.change("custom_type", "bad value")
        session.change("type", "fix")
        assert "custom_type" not in session.errors

    def test_custom_type_ignored_for_registry_types(self):
        """Test that custom_type is not validated for registry types."""
        session = ComposerSession()
        session.change("custom_type", "bad value")
        assert session.errors == {}

    def test_toggle_fields_route_through_transitions(self):
        """Test that toggling off via change resets the sub-body."""
        session = ComposerSession()
        session.change("is_breaking_change", True)
        session.change("breaking_body", "BREAKING: X")
        session.change("is_breaking_change", False)
        assert session.values.breaking_body is None

    def test_unknown_field(self):
        """Test that unknown fields are rejected."""
        session = ComposerSession()
        with pytest.raises(ValueError, match="Unknown field"):
            session.change("customType", "x")

    def test_errors_is_a_copy(self):
        """Test that callers cannot modify the error state."""
        session = ComposerSession(CommitValues(scope="a b"))
        session.errors.clear()
        assert "scope" in session.errors

    def test_change_coerces_string_bool(self):
        """Test that toggle values go through the model's bool parsing."""
        session = ComposerSession()
        session.change("with_emoji", True)
        session.change("with_emoji", "false")
        session.change("subject", "x")
        assert session.values.with_emoji is False
        assert session.preview() == "feat: x"

    def test_change_none_bool_is_off(self):
        """Test that a None toggle value means off."""
        session = ComposerSession(CommitValues(with_emoji=True))
        session.change("with_emoji", None)
        assert session.values.with_emoji is False

    def test_change_empty_type_defaults_to_feat(self):
        """Test that clearing the type falls back to the default type."""
        session = ComposerSession(CommitValues(type="fix"))
        session.change("type", "")
        session.change("subject", "x")
        assert session.values.type == "feat"
        assert session.preview() == "feat: x"

    def test_change_rejects_uncoercible_value(self):
        """Test that values the model cannot parse are refused."""
        session = ComposerSession()
        with pytest.raises(ValueError):
            session.change("with_emoji", "not a bool")
        assert session.values.with_emoji is False


class TestSessionFooter:
    """Tests for footer focus handling."""

    def test_focus_composes_footer(self):
        """Test that focus recomputes the footer from both bodies."""
        session = ComposerSession()
        session.toggle_breaking_change(True)
        session.change("breaking_body", "BREAKING: X")
        session.toggle_issue_affected(True)
        session.change("issues_body", "Closes #1")
        assert session.focus_footer() == "BREAKING: X\n\nCloses #1"
        assert session.values.footer == "BREAKING: X\n\nCloses #1"

    def test_footer_not_recomputed_without_focus(self):
        """Test that sub-body edits alone do not touch the footer."""
        session = ComposerSession()
        session.toggle_issue_affected(True)
        session.change("issues_body", "Closes #1")
        assert session.values.footer is None

    def test_toggle_off_then_focus(self):
        """Test that a toggled-off body is excluded on the next focus."""
        session = ComposerSession()
        session.toggle_breaking_change(True)
        session.change("breaking_body", "BREAKING: X")
        session.toggle_issue_affected(True)
        session.change("issues_body", "Closes #1")
        session.toggle_breaking_change(False)
        assert session.focus_footer() == "Closes #1"

    def test_free_footer_kept_on_focus(self):
        """Test that a hand-written footer survives focus with no toggles."""
        session = ComposerSession()
        session.change("footer", "Reviewed-by: Jane")
        assert session.focus_footer() == "Reviewed-by: Jane"

    def test_direct_edit_overwritten_while_driven(self):
        """Test that focus replaces direct edits while a toggle is active."""
        session = ComposerSession()
        session.toggle_issue_affected(True)
        session.change("issues_body", "Closes #1")
        session.change("footer", "typed by hand")
        session.focus_footer()
        assert session.values.footer == "Closes #1"


class TestSessionSubmit:
    """Tests for submission."""

    def test_submit_hands_message_to_sink(self):
        """Test that the sink receives the assembled message once."""
        sink = MagicMock()
        session = ComposerSession()
        session.change("scope", "api")
        session.change("subject", "add login")
        session.change("body", "adds OAuth")
        session.change("with_emoji", True)

        message = session.submit(sink)

        assert message == "✨ feat(api): add login\n\nadds OAuth"
        sink.assert_called_once_with(message)
        assert session.is_submitted is True

    def test_submit_reflects_focus_recompute(self):
        """Test that a prior focus recompute is part of the output."""
        session = ComposerSession()
        session.change("subject", "drop v1 api")
        session.toggle_breaking_change(True)
        session.change("breaking_body", "BREAKING CHANGE: v1 removed")
        session.focus_footer()
        assert session.submit() == "feat: drop v1 api\n\nBREAKING CHANGE: v1 removed"

    def test_submit_twice(self):
        """Test that a session can only be submitted once."""
        sink = MagicMock()
        session = ComposerSession()
        session.submit(sink)
        with pytest.raises(SessionClosedError):
            session.submit(sink)
        sink.assert_called_once()

    @pytest.mark.parametrize(
        "event",
        [
            lambda s: s.change("subject", "x"),
            lambda s: s.toggle_breaking_change(True),
            lambda s: s.toggle_issue_affected(True),
            lambda s: s.focus_footer(),
        ],
    )
    def test_mutation_after_submit(self, event):
        """Test that a submitted bag can no longer change."""
        session = ComposerSession()
        session.submit()
        with pytest.raises(SessionClosedError):
            event(session)

    def test_permissive_submit_with_errors(self, caplog):
        """Test that errors are advisory by default."""
        session = ComposerSession()
        session.change("scope", "api gateway")
        session.change("subject", "x")
        with caplog.at_level(logging.WARNING, logger="commitform.composer.session"):
            message = session.submit()
        assert message == "feat(api gateway): x"
        assert "Scope must be one word string" in caplog.text

    def test_strict_submit_with_errors(self):
        """Test that strict mode blocks submission and keeps the session open."""
        sink = MagicMock()
        session = ComposerSession(config=ComposerConfig(strict=True))
        session.change("scope", "api gateway")

        with pytest.raises(FormatError) as exc_info:
            session.submit(sink)

        assert exc_info.value.field == "scope"
        sink.assert_not_called()
        assert session.is_submitted is False

        session.change("scope", "api")
        assert session.submit(sink) == "feat(api): "

    def test_preview_does_not_submit(self):
        """Test that preview leaves the session open."""
        session = ComposerSession()
        session.change("subject", "x")
        assert session.preview() == "feat: x"
        assert session.is_submitted is False
