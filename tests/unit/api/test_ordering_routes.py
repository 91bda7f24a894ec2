"""Unit tests for ordering routes."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from agilecore.api.dependencies import get_api_settings
from agilecore.api.routes import ordering
from agilecore.config import Settings

COLUMN = [{"id": i, "title": f"Issue {i}", "order": float(i)} for i in range(1, 5)]


@pytest.fixture
def settings() -> Settings:
    return Settings(order_step=1.0, renormalize_stride=100.0)


@pytest.fixture
def client(settings: Settings):
    """Create a test client with overridden settings."""
    app = FastAPI()
    app.dependency_overrides[get_api_settings] = lambda: settings
    app.include_router(ordering.router, prefix="/api/v1")
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.mark.unit
class TestReorder:
    """Tests for POST /ordering/reorder."""

    def test_move_to_top(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/ordering/reorder",
            json={"issues": COLUMN, "movedIssueId": 3, "targetIndex": 0},
        )

        assert response.status_code == 200
        assert response.json()["data"] == [{"issueId": 3, "order": 0.0}]

    def test_noop(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/ordering/reorder",
            json={"issues": COLUMN, "movedIssueId": 2, "targetIndex": 1},
        )
        assert response.json()["data"] == []

    def test_bad_index_clamps(self, client: TestClient) -> None:
        """A malformed index still produces a move instead of an error."""
        response = client.post(
            "/api/v1/ordering/reorder",
            json={"issues": COLUMN, "movedIssueId": 1, "targetIndex": "bottom"},
        )

        assert response.status_code == 200
        assert response.json()["data"] == [{"issueId": 1, "order": 5.0}]

    def test_missing_moved_id(self, client: TestClient) -> None:
        response = client.post("/api/v1/ordering/reorder", json={"issues": COLUMN})
        assert response.status_code == 422


@pytest.mark.unit
class TestMove:
    """Tests for POST /ordering/move."""

    def test_cross_column(self, client: TestClient) -> None:
        issues = [*COLUMN, {"id": 9, "title": "Done thing", "status": "Done", "order": 1.0}]
        response = client.post(
            "/api/v1/ordering/move",
            json={
                "issues": issues,
                "issueId": 9,
                "destination": {"kind": "column", "key": "To Do"},
                "targetIndex": 4,
            },
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["reparented"] is True
        assert data["issue"]["status"] == "To Do"
        assert data["updates"] == [{"issueId": 9, "order": 5.0}]

    def test_into_sprint(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/ordering/move",
            json={
                "issues": COLUMN,
                "issueId": 2,
                "destination": {"kind": "sprint_backlog", "key": 10},
                "targetIndex": 0,
            },
        )

        data = response.json()["data"]
        assert data["issue"]["sprintId"] == 10
        assert data["updates"] == [{"issueId": 2, "order": 1.0}]

    def test_unknown_column(self) -> None:
        """Bad column names are shape errors, handled by the full app."""
        from agilecore.api.app import create_app  # noqa: PLC0415

        with TestClient(create_app(), raise_server_exceptions=False) as client:
            response = client.post(
                "/api/v1/ordering/move",
                json={
                    "issues": COLUMN,
                    "issueId": 2,
                    "destination": {"kind": "column", "key": "Archived"},
                },
            )

        assert response.status_code == 422
        assert "Archived" in response.json()["error"]

    def test_unknown_issue(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/ordering/move",
            json={"issues": COLUMN, "issueId": 42, "destination": {"kind": "column", "key": "Done"}},
        )
        assert response.json()["data"] == {"issue": None, "updates": [], "reparented": False}


@pytest.mark.unit
class TestRenormalize:
    """Tests for POST /ordering/renormalize."""

    def test_uses_configured_stride(self, client: TestClient) -> None:
        response = client.post("/api/v1/ordering/renormalize", json={"issues": COLUMN[:2]})

        assert response.json()["data"] == [
            {"issueId": 1, "order": 100.0},
            {"issueId": 2, "order": 200.0},
        ]

    def test_stride_override(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/ordering/renormalize", json={"issues": COLUMN[:1], "stride": 8}
        )
        assert response.json()["data"] == [{"issueId": 1, "order": 8.0}]

    def test_invalid_stride(self, client: TestClient) -> None:
        response = client.post("/api/v1/ordering/renormalize", json={"issues": [], "stride": 0})
        assert response.status_code == 422
