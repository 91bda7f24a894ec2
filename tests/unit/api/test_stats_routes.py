"""Unit tests for statistics routes."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from agilecore.api.routes import stats


@pytest.fixture
def client():
    """Create a test client for the statistics router."""
    app = FastAPI()
    app.include_router(stats.router, prefix="/api/v1")
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


ISSUES = [
    {"id": 1, "title": "Login", "status": "Done", "storyPoints": 3, "sprintId": 10},
    {"id": 2, "title": "Reset", "status": "To Do", "storyPoints": 5, "sprintId": 10},
    {"id": 3, "title": "Audit", "status": "Blocked", "storyPoints": 2},
]

SPRINT = {"id": 10, "name": "Sprint 10", "startDate": "2024-01-01", "endDate": "2024-01-11"}


@pytest.mark.unit
class TestBoardStats:
    """Tests for POST /stats/board."""

    def test_board_stats(self, client: TestClient) -> None:
        response = client.post("/api/v1/stats/board", json={"issues": ISSUES[:2]})

        assert response.status_code == 200
        assert response.json() == {
            "data": {
                "totalIssues": 2,
                "completedIssues": 1,
                "blockedIssues": 0,
                "totalStoryPoints": 8,
                "completedStoryPoints": 3,
            },
            "error": None,
        }

    def test_empty_board(self, client: TestClient) -> None:
        response = client.post("/api/v1/stats/board", json={})

        assert response.status_code == 200
        assert response.json()["data"]["totalIssues"] == 0

    def test_malformed_issue(self, client: TestClient) -> None:
        """Records that cannot be read are rejected."""
        response = client.post("/api/v1/stats/board", json={"issues": [{"id": 1}]})
        assert response.status_code == 422


@pytest.mark.unit
class TestSprintStats:
    """Tests for the sprint-scoped statistics routes."""

    def test_sprint_stats(self, client: TestClient) -> None:
        response = client.post("/api/v1/stats/sprint", json={"sprint": SPRINT, "issues": ISSUES})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["totalIssues"] == 2
        assert data["completionPercentage"] == 38
        assert data["velocity"] == 3

    def test_progress(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/stats/progress", json={"sprint": SPRINT, "today": "2024-01-06"}
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["totalDays"] == 10
        assert data["daysElapsed"] == 5
        assert data["progressPercentage"] == 50
        assert data["isOverdue"] is False

    def test_scope_creep(self, client: TestClient) -> None:
        sprint = {**SPRINT, "baselinePoints": 5}
        response = client.post("/api/v1/stats/scope-creep", json={"sprint": sprint, "issues": ISSUES})

        data = response.json()["data"]
        assert data["currentPoints"] == 8
        assert data["creepRatio"] == pytest.approx(0.6)
        assert data["exceeded"] is True


@pytest.mark.unit
class TestIssueAggregates:
    """Tests for completion and breakdown routes."""

    def test_completion(self, client: TestClient) -> None:
        response = client.post("/api/v1/stats/completion", json={"issues": ISSUES})
        assert response.json()["data"] == {"completionPercentage": 33}

    def test_completion_empty(self, client: TestClient) -> None:
        response = client.post("/api/v1/stats/completion", json={"issues": []})
        assert response.json()["data"] == {"completionPercentage": 0}

    def test_breakdown(self, client: TestClient) -> None:
        response = client.post("/api/v1/stats/breakdown", json={"issues": ISSUES})

        data = response.json()["data"]
        assert data["total"] == 3
        assert data["byStatus"] == {"Done": 1, "To Do": 1, "Blocked": 1}
        assert data["byType"] == {"Story": 3}
        assert data["totalStoryPoints"] == 10
