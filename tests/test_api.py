"""
Tests for the REST API.
"""

import pytest
from fastapi.testclient import TestClient

from vacation_tracker.api import create_app
from vacation_tracker.app.controller import VacationController
from vacation_tracker.store import InMemoryDocumentStore, StoreError


class RejectingStore(InMemoryDocumentStore):
    """In-memory store that rejects every write."""

    async def add(self, collection_path, data):
        raise StoreError("unavailable")

    async def set(self, document_path, data, merge=False):
        raise StoreError("unavailable")

    async def delete(self, document_path):
        raise StoreError("unavailable")


@pytest.fixture
def client(config, controller):
    """Create a test client serving the shared controller."""
    with TestClient(create_app(config=config, controller=controller)) as test_client:
        yield test_client


@pytest.fixture
def rejecting_client(config, authenticator):
    controller = VacationController(RejectingStore(), authenticator, config=config)
    with TestClient(create_app(config=config, controller=controller)) as test_client:
        yield test_client


class TestInfo:
    """Tests for the informational endpoints."""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "POST /requests" in response.json()["endpoints"]

    def test_health(self, client):
        response = client.get("/health")
        assert response.json()["status"] == "healthy"


class TestDashboard:
    """Tests for GET /dashboard and GET /business-days."""

    def test_dashboard(self, client):
        response = client.get("/dashboard")

        assert response.status_code == 200
        data = response.json()
        assert data["kind"] == "dashboard"
        assert data["remaining_days"] == 22
        assert data["requests"] == []

    def test_business_days(self, client):
        response = client.get("/business-days", params={"start": "2024-12-23", "end": "2024-12-27"})

        assert response.status_code == 200
        assert response.json()["business_days"] == 5
        assert response.json()["status"] == "ok"

    def test_business_days_inverted(self, client):
        response = client.get("/business-days", params={"start": "2024-12-27", "end": "2024-12-23"})
        assert response.json()["status"] == "invalid_range"


class TestRequests:
    """Tests for submitting and cancelling requests."""

    def test_submit(self, client):
        response = client.post("/requests", json={"start_date": "2024-12-02", "end_date": "2024-12-06"})

        assert response.status_code == 201
        data = response.json()
        assert data["id"]
        assert data["days"] == 5
        assert data["status"] == "Pending"
        assert data["startDate"] == "2024-12-02"

        dashboard = client.get("/dashboard").json()
        assert dashboard["pending_days"] == 5
        assert dashboard["requests"][0]["can_cancel"] is True

    def test_submit_exceeding_balance(self, client):
        client.put("/settings", json={"available_days": 3})

        response = client.post("/requests", json={"start_date": "2024-12-02", "end_date": "2024-12-06"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Request exceeds the remaining days (3)."

    def test_submit_weekend(self, client):
        response = client.post("/requests", json={"start_date": "2024-12-21", "end_date": "2024-12-22"})
        assert response.status_code == 400

    def test_cancel(self, client):
        created = client.post(
            "/requests", json={"start_date": "2024-12-02", "end_date": "2024-12-06"}
        ).json()

        response = client.delete(f"/requests/{created['id']}")

        assert response.status_code == 204
        assert client.get("/dashboard").json()["requests"] == []

    def test_cancel_unknown(self, client):
        assert client.delete("/requests/missing").status_code == 404

    def test_store_unavailable(self, rejecting_client):
        response = rejecting_client.post(
            "/requests", json={"start_date": "2024-12-02", "end_date": "2024-12-06"}
        )

        assert response.status_code == 503
        assert response.json()["detail"] == "Error saving the request. Please try again."


class TestSettings:
    """Tests for PUT /settings."""

    def test_update(self, client):
        response = client.put("/settings", json={"available_days": 25.6})

        assert response.status_code == 200
        assert response.json()["available_days"] == 25
        assert response.json()["kind"] == "dashboard"

    def test_store_unavailable(self, rejecting_client):
        response = rejecting_client.put("/settings", json={"available_days": 25})
        assert response.status_code == 503


class TestHolidays:
    """Tests for the holiday endpoints."""

    def test_add_list_delete(self, client):
        response = client.post("/holidays", json={"name": "Navidad", "date": "2024-12-25"})

        assert response.status_code == 201
        assert response.json()["holidays"] == [{"name": "Navidad", "holiday_date": "2024-12-25"}]
        assert client.get("/holidays").json() == [{"name": "Navidad", "holiday_date": "2024-12-25"}]

        assert client.delete("/holidays/2024-12-25").status_code == 204
        assert client.get("/holidays").json() == []

    def test_holiday_reduces_business_days(self, client):
        client.post("/holidays", json={"name": "Navidad", "date": "2024-12-25"})

        response = client.get("/business-days", params={"start": "2024-12-23", "end": "2024-12-27"})

        assert response.json()["business_days"] == 4

    def test_missing_name(self, client):
        response = client.post("/holidays", json={"name": "", "date": "2024-12-25"})
        assert response.status_code == 400

    def test_bad_date(self, client):
        response = client.post("/holidays", json={"name": "Navidad", "date": "someday"})

        assert response.status_code == 400
        assert "not valid" in response.json()["detail"]

    def test_delete_bad_date_path(self, client):
        assert client.delete("/holidays/someday").status_code == 422
