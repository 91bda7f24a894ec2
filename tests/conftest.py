"""Shared pytest fixtures and configuration."""

from datetime import date, datetime

import pytest

from agilecore.config import get_settings
from agilecore.domain import Assignee, Board, BoardType, Issue, IssueStatus, Priority, Sprint


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Re-read settings from the environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# Shared fixtures


@pytest.fixture
def alice() -> Assignee:
    return Assignee(id=7, display_name="Alice")


@pytest.fixture
def bob() -> Assignee:
    return Assignee(id=8, display_name="Bob")


@pytest.fixture
def sprint() -> Sprint:
    """A five-day sprint."""
    return Sprint(
        id=10,
        name="Sprint 10",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 6),
        capacity_story_points=40,
    )


@pytest.fixture
def board() -> Board:
    return Board(
        id=1,
        name="Platform",
        type=BoardType.SCRUM,
        created_at=datetime(2024, 1, 2, 9, 30),
        updated_at=datetime(2024, 1, 5, 16, 0),
    )


@pytest.fixture
def sprint_issues(alice: Assignee, bob: Assignee) -> list[Issue]:
    """Issues spread over two sprints and the backlog."""
    return [
        Issue(
            id=1,
            title="Login form",
            status=IssueStatus.DONE,
            priority=Priority.P1,
            story_points=3,
            assignee=alice,
            sprint_id=10,
            order=1.0,
            completed_at=datetime(2024, 1, 2, 15, 0),
        ),
        Issue(
            id=2,
            title="Password reset",
            status=IssueStatus.IN_PROGRESS,
            priority=Priority.P2,
            story_points=5,
            assignee=bob,
            sprint_id=10,
            order=2.0,
        ),
        Issue(
            id=3,
            title="Audit log",
            status=IssueStatus.BLOCKED,
            priority=Priority.P2,
            story_points=2,
            sprint_id=10,
            order=3.0,
            blocked_reason="Waiting on security review",
        ),
        Issue(
            id=4,
            title="Session timeout",
            status=IssueStatus.DONE,
            priority=Priority.P3,
            story_points=8,
            assignee=alice,
            sprint_id=11,
            order=1.0,
            completed_at=datetime(2024, 1, 3, 10, 0),
        ),
        Issue(
            id=5,
            title="Dark mode",
            status=IssueStatus.TODO,
            priority=Priority.P4,
            order=1.0,
        ),
    ]
