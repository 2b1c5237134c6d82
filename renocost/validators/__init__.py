"""Input validators for renocost."""

from renocost.validators.scope_validator import (
    ValidationResult,
    validate_scope_items,
    ensure_valid_scope_items,
)

__all__ = ["ValidationResult", "validate_scope_items", "ensure_valid_scope_items"]
