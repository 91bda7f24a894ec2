"""Data models for the Validator."""

from dataclasses import dataclass, field

# Key used for errors that do not belong to a single field
NON_FIELD_ERRORS = "__all__"


@dataclass
class ValidationResult:
    """Outcome of validating a proposed set of field edits.

    Attributes:
        is_valid: True when no rule was violated.
        errors: Field name -> message for every violated rule, keyed by the
            spelling (snake_case or camelCase) the caller used.
    """

    is_valid: bool
    errors: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_errors(cls, errors: dict[str, str]) -> "ValidationResult":
        return cls(is_valid=not errors, errors=errors)
