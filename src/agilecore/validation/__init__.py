"""Validator - Field-level checks run before edits are sent to the API."""

from agilecore.validation.models import NON_FIELD_ERRORS, ValidationResult
from agilecore.validation.validator import validate_board, validate_issue, validate_sprint

__all__ = [
    "NON_FIELD_ERRORS",
    "ValidationResult",
    "validate_board",
    "validate_issue",
    "validate_sprint",
]
