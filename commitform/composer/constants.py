"""Constants for the commitform composer.

Contains:
- COMMIT_TYPE_DEFINITIONS: Known commit types with title, description and emoji
- CUSTOM_TYPE: Sentinel key selecting a user-supplied type
- Field names, separators and validation messages
"""

# Known commit types (ordered as they appear in the type picker)
COMMIT_TYPE_DEFINITIONS = {
    "feat": {
        "description": "A new feature",
        "title": "Features",
        "emoji": "✨",
    },
    "fix": {
        "description": "A bug fix",
        "title": "Bug Fixes",
        "emoji": "🐛",
    },
    "docs": {
        "description": "Documentation only changes",
        "title": "Documentation",
        "emoji": "📚",
    },
    "style": {
        "description": "Changes that do not affect the meaning of the code "
        "(white-space, formatting, missing semi-colons, etc)",
        "title": "Styles",
        "emoji": "💎",
    },
    "refactor": {
        "description": "A code change that neither fixes a bug nor adds a feature",
        "title": "Code Refactoring",
        "emoji": "📦",
    },
    "perf": {
        "description": "A code change that improves performance",
        "title": "Performance Improvements",
        "emoji": "🚀",
    },
    "test": {
        "description": "Adding missing tests or correcting existing tests",
        "title": "Tests",
        "emoji": "🚨",
    },
    "build": {
        "description": "Changes that affect the build system or external dependencies "
        "(example scopes: gulp, broccoli, npm)",
        "title": "Builds",
        "emoji": "🛠",
    },
    "ci": {
        "description": "Changes to our CI configuration files and scripts "
        "(example scopes: Travis, Circle, BrowserStack, SauceLabs)",
        "title": "Continuous Integrations",
        "emoji": "⚙️",
    },
    "chore": {
        "description": "Other changes that don't modify src or test files",
        "title": "Chores",
        "emoji": "♻️",
    },
    "revert": {
        "description": "Reverts a previous commit",
        "title": "Reverts",
        "emoji": "🗑",
    },
}

# Sentinel type key: the leading token comes from custom_type instead of the registry
CUSTOM_TYPE = "custom"
CUSTOM_TYPE_TITLE = "Your custom type"
CUSTOM_TYPE_DESCRIPTION = "Custom type"
CUSTOM_TYPE_EMOJI = "📝"

DEFAULT_TYPE = "feat"

# Field names that carry a format rule
FIELD_CUSTOM_TYPE = "custom_type"
FIELD_SCOPE = "scope"

# Message grammar
HEADER_SEPARATOR = ": "
SECTION_SEPARATOR = "\n\n"

# Validation messages
CUSTOM_TYPE_MISSING_EMOJI = "Custom type must start with emoji"
CUSTOM_TYPE_NOT_ONE_WORD = "Custom type must be one word string without emoji or two with emoji"
SCOPE_NOT_ONE_WORD = "Scope must be one word string"
