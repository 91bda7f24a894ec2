"""Pydantic records for data entering the core from external stores.

Snapshots arrive as plain JSON-like mappings (camelCase from the web client,
snake_case from Python callers). These models check their shape once, at
the boundary, and convert them into the frozen domain dataclasses.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from agilecore.domain.exceptions import InputShapeError
from agilecore.domain.models import (
    Assignee,
    Board,
    BoardType,
    Issue,
    IssueId,
    IssueStatus,
    IssueType,
    Priority,
    Sprint,
    SprintId,
    SprintStatus,
)


class _Record(BaseModel):
    """Base for boundary records: camelCase or snake_case keys, extras ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )


class AssigneeRecord(_Record):
    """Assignee reference as sent by the API."""

    id: IssueId
    display_name: str = ""

    def to_domain(self) -> Assignee:
        return Assignee(id=self.id, display_name=self.display_name)


class IssueRecord(_Record):
    """Issue as fetched from the issue store."""

    id: IssueId
    title: str = Field(..., min_length=1)
    status: IssueStatus = IssueStatus.TODO
    priority: Priority = Priority.P3
    order: float = 0.0
    story_points: int | None = Field(default=None, ge=0)
    assignee: AssigneeRecord | None = None
    sprint_id: SprintId | None = None
    issue_type: IssueType = IssueType.STORY
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    completed_at: datetime | None = None
    blocked_reason: str | None = None
    time_spent: float | None = None
    time_remaining: float | None = None
    original_estimate: float | None = None

    def to_domain(self) -> Issue:
        data = self.model_dump(exclude={"assignee"})
        return Issue(
            **data,
            assignee=self.assignee.to_domain() if self.assignee else None,
        )


class BoardRecord(_Record):
    """Board metadata as fetched from the board store."""

    id: IssueId
    name: str = Field(..., min_length=1)
    type: BoardType = BoardType.KANBAN
    description: str | None = None
    columns: list[IssueStatus] = Field(default_factory=lambda: list(IssueStatus))
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_domain(self) -> Board:
        data = self.model_dump(exclude={"columns"})
        return Board(**data, columns=tuple(self.columns))


class SprintRecord(_Record):
    """Sprint metadata as fetched from the sprint store."""

    id: SprintId
    name: str = Field(..., min_length=1)
    status: SprintStatus = SprintStatus.PLANNING
    goal: str | None = None
    start_date: date | datetime | None = None
    end_date: date | datetime | None = None
    capacity_story_points: int | None = None
    baseline_points: int | None = None
    scope_threshold_pct: float = 0.2
    created_at: datetime | None = None

    def to_domain(self) -> Sprint:
        return Sprint(**self.model_dump())


def _shape_error(kind: str, exc: ValidationError) -> InputShapeError:
    fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in exc.errors())
    return InputShapeError(f"Malformed {kind} record ({fields})")


def parse_issue(data: Mapping[str, Any]) -> Issue:
    """Read one issue record.

    Raises:
        InputShapeError: If the record is missing required fields or has
            values of the wrong type.
    """
    try:
        return IssueRecord.model_validate(data).to_domain()
    except ValidationError as e:
        raise _shape_error("issue", e) from e


def parse_issues(records: Iterable[Mapping[str, Any]]) -> list[Issue]:
    """Read a snapshot of issue records, preserving their order."""
    return [parse_issue(record) for record in records]


def parse_board(data: Mapping[str, Any]) -> Board:
    """Read one board record.

    Raises:
        InputShapeError: If the record cannot be read.
    """
    try:
        return BoardRecord.model_validate(data).to_domain()
    except ValidationError as e:
        raise _shape_error("board", e) from e


def parse_sprint(data: Mapping[str, Any]) -> Sprint:
    """Read one sprint record.

    Raises:
        InputShapeError: If the record cannot be read.
    """
    try:
        return SprintRecord.model_validate(data).to_domain()
    except ValidationError as e:
        raise _shape_error("sprint", e) from e
