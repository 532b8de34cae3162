"""Conventional Commits composition engine for commitform.

This package turns a bag of commit fields into a formatted message:
- constants: COMMIT_TYPE_DEFINITIONS, CUSTOM_TYPE, validation messages
- models: CommitType, CommitValues, ComposerConfig
- registry: COMMIT_TYPES, lookup, type_choices, type_label
- validation: validate_custom_type, validate_scope, field_error, collect_errors
- footer: compose_footer, set_breaking_change, set_issue_affected, recompute_footer
- assembler: assemble, render_header
- session: ComposerSession
- config: load_composer_config_from_dict, composer_config_to_dict, apply_config_defaults
"""

# Constants
from commitform.composer.constants import (
    COMMIT_TYPE_DEFINITIONS,
    CUSTOM_TYPE,
    DEFAULT_TYPE,
)

# Models
from commitform.composer.models import (
    CommitType,
    CommitValues,
    ComposerConfig,
)

# Registry
from commitform.composer.registry import (
    COMMIT_TYPES,
    lookup,
    type_choices,
    type_label,
)

# Validation
from commitform.composer.validation import (
    collect_errors,
    field_error,
    validate_custom_type,
    validate_scope,
)

# Footer
from commitform.composer.footer import (
    compose_footer,
    footer_is_driven,
    recompute_footer,
    set_breaking_change,
    set_issue_affected,
)

# Assembly
from commitform.composer.assembler import (
    assemble,
    render_header,
)

# Session
from commitform.composer.session import ComposerSession

# Configuration utilities
from commitform.composer.config import (
    apply_config_defaults,
    composer_config_to_dict,
    load_composer_config_from_dict,
)


__all__ = [
    # Constants
    "COMMIT_TYPE_DEFINITIONS",
    "CUSTOM_TYPE",
    "DEFAULT_TYPE",
    # Models
    "CommitType",
    "CommitValues",
    "ComposerConfig",
    # Registry
    "COMMIT_TYPES",
    "lookup",
    "type_choices",
    "type_label",
    # Validation
    "validate_custom_type",
    "validate_scope",
    "field_error",
    "collect_errors",
    # Footer
    "compose_footer",
    "footer_is_driven",
    "recompute_footer",
    "set_breaking_change",
    "set_issue_affected",
    # Assembly
    "assemble",
    "render_header",
    # Session
    "ComposerSession",
    # Configuration
    "load_composer_config_from_dict",
    "composer_config_to_dict",
    "apply_config_defaults",
]
