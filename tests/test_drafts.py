"""Tests for commitform.drafts module."""

import json

import pytest
import yaml

from commitform.composer import ComposerConfig
from commitform.drafts import load_draft, read_draft
from commitform.exceptions import DraftError


class TestReadDraft:
    """Tests for read_draft function."""

    def test_reads_json(self, temp_dir, sample_draft_dict):
        """Test reading a JSON draft."""
        path = temp_dir / "draft.json"
        path.write_text(json.dumps(sample_draft_dict), encoding="utf-8")
        assert read_draft(path) == sample_draft_dict

    def test_reads_yaml(self, temp_dir, sample_draft_dict):
        """Test reading a YAML draft."""
        path = temp_dir / "draft.yaml"
        path.write_text(yaml.safe_dump(sample_draft_dict, allow_unicode=True), encoding="utf-8")
        assert read_draft(path) == sample_draft_dict

    def test_empty_file(self, temp_dir):
        """Test that an empty draft is an empty mapping."""
        path = temp_dir / "draft.json"
        path.write_text("", encoding="utf-8")
        assert read_draft(path) == {}

    def test_missing_file(self, temp_dir):
        """Test that a missing file raises DraftError."""
        with pytest.raises(DraftError, match="Failed to read draft"):
            read_draft(temp_dir / "missing.json")

    def test_invalid_json(self, temp_dir):
        """Test that malformed JSON raises DraftError."""
        path = temp_dir / "draft.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(DraftError, match="Failed to parse draft"):
            read_draft(path)

    def test_not_a_mapping(self, temp_dir):
        """Test that a list is rejected."""
        path = temp_dir / "draft.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(DraftError, match="must contain a mapping"):
            read_draft(path)


class TestLoadDraft:
    """Tests for load_draft function."""

    def test_loads_values(self, temp_dir, sample_draft_dict):
        """Test loading a draft into a value bag."""
        path = temp_dir / "draft.json"
        path.write_text(json.dumps(sample_draft_dict), encoding="utf-8")

        values = load_draft(path)

        assert values.type == "fix"
        assert values.scope == "auth"
        assert values.is_breaking_change is True

    def test_invalid_field_value(self, temp_dir):
        """Test that wrongly typed fields raise DraftError."""
        path = temp_dir / "draft.json"
        path.write_text(json.dumps({"isBreakingChange": "not a bool"}), encoding="utf-8")
        with pytest.raises(DraftError, match="Invalid draft"):
            load_draft(path)

    def test_config_defaults_for_missing_keys(self, temp_dir):
        """Test that config fills the type and emoji preference."""
        path = temp_dir / "draft.json"
        path.write_text(json.dumps({"subject": "x"}), encoding="utf-8")

        values = load_draft(path, ComposerConfig(default_type="docs", with_emoji=True))

        assert values.type == "docs"
        assert values.with_emoji is True

    def test_draft_values_win_over_config(self, temp_dir, sample_draft_dict):
        """Test that keys stored in the draft are kept."""
        path = temp_dir / "draft.json"
        path.write_text(json.dumps(sample_draft_dict), encoding="utf-8")

        values = load_draft(path, ComposerConfig(default_type="docs", with_emoji=False))

        assert values.type == "fix"
        assert values.with_emoji is True
