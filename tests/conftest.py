"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config_dir(temp_dir, mocker):
    """Point the global config directory at a temporary location."""
    config_dir = temp_dir / ".commitform"
    mocker.patch("commitform.global_config._CONFIG_DIR", config_dir)
    return config_dir


@pytest.fixture
def sample_draft_dict():
    """Draft as saved by the form (camelCase keys)."""
    return {
        "type": "fix",
        "customType": None,
        "scope": "auth",
        "subject": "handle expired tokens",
        "body": "Refresh the token before retrying the request.",
        "withEmoji": True,
        "isBreakingChange": True,
        "breakingBody": "BREAKING CHANGE: refresh() now raises on failure",
        "isIssueAffected": True,
        "issuesBody": "Closes #42",
        "footer": "",
        "issues": "legacy field",
    }
