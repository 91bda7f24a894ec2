"""Unit tests for board, sprint and issue view models."""

from datetime import date, datetime

import pytest

from agilecore.domain import Board, Issue, IssueStatus, Sprint
from agilecore.presentation import format_board, format_issue, format_sprint


@pytest.mark.unit
class TestFormatBoard:
    """Tests for format_board."""

    def test_view(self, board: Board, sprint_issues: list[Issue]) -> None:
        view = format_board(board, sprint_issues, now=datetime(2024, 1, 7, 16, 0))

        assert view.created_at == "1/2/2024"
        assert view.updated_at == "1/5/2024"
        assert view.last_updated == "Updated 2 days ago"
        assert view.stats is not None
        assert view.stats.total_issues == 5
        assert view.completion_percentage == 40

    def test_columns_follow_board_order(self, board: Board, sprint_issues: list[Issue]) -> None:
        view = format_board(board, sprint_issues)

        assert list(view.issues_by_status) == list(board.columns)
        assert [issue.id for issue in view.issues_by_status[IssueStatus.DONE]] == [1, 4]

    def test_columns_sorted_by_order(self, board: Board) -> None:
        issues = [Issue(id=1, title="A", order=2.0), Issue(id=2, title="B", order=1.0)]
        view = format_board(board, issues)

        assert [issue.id for issue in view.issues_by_status[IssueStatus.TODO]] == [2, 1]
        assert view.issues_by_status[IssueStatus.DONE] == []

    def test_issues_outside_columns_still_counted(self, sprint_issues: list[Issue]) -> None:
        board = Board(id=2, name="Flow", columns=(IssueStatus.TODO, IssueStatus.DONE))
        view = format_board(board, sprint_issues)

        assert list(view.issues_by_status) == [IssueStatus.TODO, IssueStatus.DONE]
        assert view.stats is not None
        assert view.stats.total_issues == 5
        assert view.created_at is None
        assert view.last_updated == "Never updated"


@pytest.mark.unit
class TestFormatSprint:
    """Tests for format_sprint."""

    def test_view(self, sprint: Sprint, sprint_issues: list[Issue]) -> None:
        view = format_sprint(sprint, sprint_issues, today=date(2024, 1, 3))

        assert view.start_date == "1/1/2024"
        assert view.end_date == "1/6/2024"
        assert view.created_at is None
        assert view.duration_days == 5
        assert view.stats.total_issues == 3
        assert view.stats.velocity == 3
        assert view.progress.days_elapsed == 2
        assert view.capacity_used_percentage == 25

    def test_without_dates_or_capacity(self, sprint_issues: list[Issue]) -> None:
        view = format_sprint(Sprint(id=10, name="S"), sprint_issues)

        assert view.start_date is None
        assert view.duration_days is None
        assert view.capacity_used_percentage is None
        assert view.progress.total_days == 0

    def test_reversed_dates_have_no_duration(self, sprint_issues: list[Issue]) -> None:
        sprint = Sprint(id=10, name="S", start_date=date(2024, 1, 10), end_date=date(2024, 1, 5))
        view = format_sprint(sprint, sprint_issues, today=date(2024, 1, 12))

        assert view.duration_days is None
        assert view.progress.total_days == 0
        assert not view.progress.is_overdue


@pytest.mark.unit
class TestFormatIssue:
    """Tests for format_issue."""

    def test_view(self) -> None:
        issue = Issue(
            id=1,
            title="A",
            time_spent=26,
            original_estimate=8,
            created_at=datetime(2024, 1, 1, 9, 0),
            updated_at=datetime(2024, 1, 10, 9, 0),
        )
        view = format_issue(issue, now=datetime(2024, 1, 10, 12, 0))

        assert view.created_at == "1/1/2024"
        assert view.last_updated == "Updated 3 hours ago"
        assert view.time_spent == "1d 2h"
        assert view.time_remaining == "0h"
        assert view.original_estimate == "8h"
