"""Unit tests for the Burndown Generator."""

import logging
from dataclasses import replace
from datetime import date, datetime

import pytest

from agilecore.burndown import BurndownSeries, generate_burndown, remaining_points_on
from agilecore.domain import Issue, IssueStatus, Sprint


@pytest.mark.unit
class TestGenerateBurndown:
    """Tests for generate_burndown."""

    def test_series_from_completion_history(self, sprint: Sprint, sprint_issues: list[Issue]) -> None:
        series = generate_burndown(sprint, sprint_issues)

        assert series.labels == ["1/1/2024", "1/2/2024", "1/3/2024", "1/4/2024", "1/5/2024", "1/6/2024"]
        assert series.ideal_line == pytest.approx([10, 8, 6, 4, 2, 0])
        assert series.actual_line == [10, 7, 7, 7, 7, 7]
        assert not series.degraded
        assert series.total_days == 5

    def test_length_is_total_days_plus_one(self) -> None:
        """Partial days round up."""
        sprint = Sprint(
            id=1,
            name="S",
            start_date=datetime(2024, 1, 1, 9, 0),
            end_date=datetime(2024, 1, 3, 17, 0),
        )
        series = generate_burndown(sprint, [])

        assert len(series.labels) == len(series.ideal_line) == len(series.actual_line) == 4

    def test_ideal_line_never_negative(self, sprint: Sprint, sprint_issues: list[Issue]) -> None:
        series = generate_burndown(sprint, sprint_issues)

        assert series.ideal_line[0] == 10
        assert series.ideal_line[-1] == 0
        assert min(series.ideal_line) >= 0

    def test_missing_history_is_degraded(
        self,
        sprint: Sprint,
        sprint_issues: list[Issue],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Done issues without completion dates give a flagged placeholder."""
        issues = [replace(issue, completed_at=None) for issue in sprint_issues]

        with caplog.at_level(logging.WARNING, logger="agilecore.burndown"):
            series = generate_burndown(sprint, issues)

        assert series.degraded
        assert series.actual_line == [7] * 6
        assert "placeholder" in caplog.text

    def test_no_done_issues_is_not_degraded(self, sprint: Sprint) -> None:
        issues = [Issue(id=1, title="A", story_points=4, sprint_id=10)]
        series = generate_burndown(sprint, issues)

        assert not series.degraded
        assert series.actual_line == [4] * 6

    def test_other_sprints_ignored(self, sprint: Sprint) -> None:
        issues = [Issue(id=1, title="A", story_points=4, sprint_id=11)]
        series = generate_burndown(sprint, issues)

        assert series.ideal_line == [0] * 6
        assert series.actual_line == [0] * 6

    @pytest.mark.parametrize(
        ("start", "end"),
        [(None, date(2024, 1, 5)), (date(2024, 1, 1), None), (None, None)],
    )
    def test_missing_dates_give_empty_series(
        self, sprint_issues: list[Issue], start: date | None, end: date | None
    ) -> None:
        sprint = Sprint(id=10, name="S", start_date=start, end_date=end)
        assert generate_burndown(sprint, sprint_issues) == BurndownSeries()

    def test_zero_length_sprint(self, sprint_issues: list[Issue]) -> None:
        """A sprint that ends the day it starts has one point, ideal 0."""
        sprint = Sprint(id=10, name="S", start_date=date(2024, 1, 2), end_date=date(2024, 1, 2))
        series = generate_burndown(sprint, sprint_issues)

        assert series.labels == ["1/2/2024"]
        assert series.ideal_line == [0.0]
        assert series.actual_line == [7]
        assert series.total_days == 0

    def test_end_before_start_is_empty(self, sprint_issues: list[Issue]) -> None:
        sprint = Sprint(id=10, name="S", start_date=date(2024, 1, 5), end_date=date(2024, 1, 1))
        assert generate_burndown(sprint, sprint_issues) == BurndownSeries()

    def test_label_format(self, sprint: Sprint) -> None:
        series = generate_burndown(sprint, [], label_format="%Y-%m-%d")
        assert series.labels[0] == "2024-01-01"

    def test_configured_label_format(self, sprint: Sprint, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AGILECORE_DATE_FORMAT", "%d.%m.")
        assert generate_burndown(sprint, []).labels[-1] == "06.01."


@pytest.mark.unit
class TestRemainingPointsOn:
    """Tests for remaining_points_on."""

    def test_completion_counts_from_its_day(self) -> None:
        issues = [
            Issue(
                id=1,
                title="A",
                status=IssueStatus.DONE,
                story_points=3,
                completed_at=datetime(2024, 1, 2, 23, 59),
            ),
            Issue(id=2, title="B", story_points=5),
        ]

        assert remaining_points_on(issues, date(2024, 1, 1)) == 8
        assert remaining_points_on(issues, date(2024, 1, 2)) == 5
