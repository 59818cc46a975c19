"""Integration tests for error handling middleware."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from src.api.middleware.error_handler import PersistenceError


class TestPersistenceErrors:
    """Tests for store failures surfacing through the API."""

    def test_store_failure_returns_generic_500(self, client: TestClient) -> None:
        """Test that storage details are not leaked to the client."""
        failure = PersistenceError()
        failure.__cause__ = RuntimeError("relation \"projects\" does not exist")

        with patch("src.core.memory_store.InMemoryRecordStore.find", side_effect=failure):
            response = client.get("/api/v1/projects")

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "persistence_error"
        assert data["message"] == "A storage error occurred"
        assert "relation" not in response.text

    def test_unexpected_error_returns_internal_error(self, client: TestClient) -> None:
        with patch("src.core.memory_store.InMemoryRecordStore.find", side_effect=RuntimeError("boom")):
            response = client.get("/api/v1/skills")

        assert response.status_code == 500
        assert response.json()["error"] == "internal_error"
        assert "boom" not in response.text

    def test_request_id_is_echoed(self, client: TestClient) -> None:
        response = client.patch(
            "/api/v1/projects/5",
            json={"title": "x"},
            headers={"X-Request-ID": "req-123"},
        )

        assert response.status_code == 404
        assert response.json()["request_id"] == "req-123"
