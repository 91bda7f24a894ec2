"""Validator - Checks proposed board, sprint and issue edits against domain rules.

Every function takes a (possibly partial) mapping of field values, never
raises, and reports violations per field so a form can show them inline.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from datetime import datetime
from enum import StrEnum
from typing import Any

from agilecore.domain.dates import parse_date, to_datetime
from agilecore.domain.models import (
    BoardType,
    IssueStatus,
    IssueType,
    Priority,
    SprintStatus,
)
from agilecore.validation.models import NON_FIELD_ERRORS, ValidationResult

logger = logging.getLogger(__name__)

BOARD_NAME_MAX = 100
BOARD_DESCRIPTION_MAX = 500
SPRINT_NAME_MAX = 255
SPRINT_GOAL_MAX = 1000
SPRINT_CAPACITY_MAX = 1000
ISSUE_TITLE_MAX = 500
ISSUE_DESCRIPTION_MAX = 5000
ISSUE_STORY_POINTS_MAX = 100

_MISSING = object()


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _lookup(data: Mapping[str, Any], name: str) -> tuple[str, Any]:
    """Find a field under its snake_case or camelCase spelling.

    Returns:
        The key the caller used (snake_case if absent) and the value, or
        _MISSING when the field was not supplied.
    """
    if name in data:
        return name, data[name]
    camel = _camel(name)
    if camel in data:
        return camel, data[camel]
    return name, _MISSING


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool) and math.isfinite(value)


class _Checker:
    """Accumulates field errors for one mapping."""

    def __init__(self, data: Mapping[str, Any], partial: bool) -> None:
        self.data = data
        self.partial = partial
        self.errors: dict[str, str] = {}

    def text(self, name: str, label: str, max_length: int, message: str, *, required: bool = False) -> None:
        key, value = _lookup(self.data, name)
        if value is _MISSING:
            if required and not self.partial:
                self.errors[key] = f"{label} is required"
            return
        if value is None:
            if required:
                self.errors[key] = f"{label} is required"
            return
        if not isinstance(value, str):
            self.errors[key] = f"{label} must be text"
        elif required and not value.strip():
            self.errors[key] = f"{label} is required"
        elif len(value) > max_length:
            self.errors[key] = message

    def choice(self, name: str, label: str, options: type[StrEnum]) -> None:
        key, value = _lookup(self.data, name)
        if value is _MISSING or value is None:
            return
        allowed = [member.value for member in options]
        if value not in allowed:
            self.errors[key] = f"Invalid {label}. Must be one of: {', '.join(allowed)}"

    def number(
        self,
        name: str,
        label: str,
        message: str,
        *,
        minimum: float = 0,
        maximum: float | None = None,
        whole: bool = False,
    ) -> None:
        key, value = _lookup(self.data, name)
        if value is _MISSING or value is None:
            return
        if not _is_number(value):
            self.errors[key] = f"{label} must be a number"
        elif whole and not float(value).is_integer():
            self.errors[key] = f"{label} must be a whole number"
        elif value < minimum or (maximum is not None and value > maximum):
            self.errors[key] = message

    def date(self, name: str, label: str) -> datetime | None:
        """Check a date field and return it as naive UTC (None if absent or bad)."""
        key, value = _lookup(self.data, name)
        if value is _MISSING:
            return None
        try:
            parsed = parse_date(value)
            return None if parsed is None else to_datetime(parsed)
        except (TypeError, ValueError, OverflowError):
            self.errors[key] = f"{label} is not a valid date"
            return None

    def result(self, kind: str) -> ValidationResult:
        if self.errors:
            logger.debug("%s validation failed on %s", kind, ", ".join(sorted(self.errors)))
        return ValidationResult.from_errors(self.errors)


def _not_a_mapping(kind: str, data: Any) -> ValidationResult:
    logger.debug("%s validation got %s instead of a mapping", kind, type(data).__name__)
    return ValidationResult.from_errors({NON_FIELD_ERRORS: f"{kind} data must be an object"})


def validate_board(data: Mapping[str, Any], *, partial: bool = False) -> ValidationResult:
    """Validate board fields.

    Args:
        data: Field values keyed by name (name, description, type, columns).
        partial: Update semantics; an absent name is not an error.

    Returns:
        ValidationResult with one message per offending field.
    """
    if not isinstance(data, Mapping):
        return _not_a_mapping("Board", data)

    check = _Checker(data, partial)
    check.text(
        "name",
        "Board name",
        BOARD_NAME_MAX,
        f"Board name must be {BOARD_NAME_MAX} characters or less",
        required=True,
    )
    check.text(
        "description",
        "Description",
        BOARD_DESCRIPTION_MAX,
        f"Description must be {BOARD_DESCRIPTION_MAX} characters or less",
    )
    check.choice("type", "board type", BoardType)

    key, columns = _lookup(data, "columns")
    if columns is not _MISSING and columns is not None:
        statuses = [status.value for status in IssueStatus]
        if isinstance(columns, str) or not isinstance(columns, Sequence):
            check.errors[key] = "Columns must be a list of statuses"
        elif any(column not in statuses for column in columns):
            check.errors[key] = f"Columns must be statuses: {', '.join(statuses)}"
        elif len(set(columns)) != len(columns):
            check.errors[key] = "Columns must not repeat a status"

    return check.result("Board")


def validate_sprint(data: Mapping[str, Any], *, partial: bool = False) -> ValidationResult:
    """Validate sprint fields.

    A start date on or after the end date is reported on the end-date field.

    Args:
        data: Field values keyed by name (name, goal, start_date, end_date,
            capacity_story_points, status).
        partial: Update semantics; an absent name is not an error.

    Returns:
        ValidationResult with one message per offending field.
    """
    if not isinstance(data, Mapping):
        return _not_a_mapping("Sprint", data)

    check = _Checker(data, partial)
    check.text(
        "name",
        "Sprint name",
        SPRINT_NAME_MAX,
        f"Sprint name must be {SPRINT_NAME_MAX} characters or less",
        required=True,
    )
    check.text(
        "goal",
        "Sprint goal",
        SPRINT_GOAL_MAX,
        f"Sprint goal must be {SPRINT_GOAL_MAX} characters or less",
    )

    start = check.date("start_date", "Start date")
    end = check.date("end_date", "End date")
    if start is not None and end is not None and start >= end:
        end_key, _ = _lookup(data, "end_date")
        check.errors[end_key] = "End date must be after start date"

    check.number(
        "capacity_story_points",
        "Capacity",
        f"Capacity must be between 0 and {SPRINT_CAPACITY_MAX} story points",
        maximum=SPRINT_CAPACITY_MAX,
    )
    check.choice("status", "sprint status", SprintStatus)

    return check.result("Sprint")


def validate_issue(data: Mapping[str, Any], *, partial: bool = False) -> ValidationResult:
    """Validate issue fields.

    Args:
        data: Field values keyed by name (title, description, story_points,
            original_estimate, time_remaining, issue_type, status, priority,
            blocked_reason).
        partial: Update semantics; an absent title is not an error.

    Returns:
        ValidationResult with one message per offending field.
    """
    if not isinstance(data, Mapping):
        return _not_a_mapping("Issue", data)

    check = _Checker(data, partial)
    check.text(
        "title",
        "Issue title",
        ISSUE_TITLE_MAX,
        f"Title must be {ISSUE_TITLE_MAX} characters or less",
        required=True,
    )
    check.text(
        "description",
        "Description",
        ISSUE_DESCRIPTION_MAX,
        f"Description must be {ISSUE_DESCRIPTION_MAX} characters or less",
    )
    check.number(
        "story_points",
        "Story points",
        f"Story points must be between 0 and {ISSUE_STORY_POINTS_MAX}",
        maximum=ISSUE_STORY_POINTS_MAX,
        whole=True,
    )
    check.number("original_estimate", "Original estimate", "Original estimate must not be negative")
    check.number("time_remaining", "Time remaining", "Time remaining must not be negative")
    check.choice("issue_type", "issue type", IssueType)
    check.choice("status", "status", IssueStatus)
    check.choice("priority", "priority", Priority)

    _, status = _lookup(data, "status")
    if status == IssueStatus.BLOCKED:
        key, reason = _lookup(data, "blocked_reason")
        if not isinstance(reason, str) or not reason.strip():
            check.errors[key] = "Blocked reason is required when status is Blocked"

    return check.result("Issue")
