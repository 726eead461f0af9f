"""Unit tests for main FastAPI application configuration."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from content.dependencies import get_backing_store
from content.infrastructure.postgres_store import PostgresBackingStore


@pytest.fixture
def mock_store() -> MagicMock:
    return MagicMock(spec=PostgresBackingStore)


@pytest.fixture
def client(mock_store: MagicMock):
    from main import app

    app.dependency_overrides[get_backing_store] = lambda: mock_store
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealthEndpoints:
    """Tests for the health check endpoints."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"status": "ok"}

    def test_health_db_connected(
        self, client: TestClient, mock_store: MagicMock
    ) -> None:
        mock_store.verify_connection.return_value = True

        response = client.get("/health/db")

        assert response.json() == {"status": "ok", "connected": True}

    def test_health_db_unhealthy(
        self, client: TestClient, mock_store: MagicMock
    ) -> None:
        mock_store.verify_connection.return_value = False

        response = client.get("/health/db")

        assert response.json() == {"status": "unhealthy", "connected": False}

    def test_health_db_error(self, client: TestClient, mock_store: MagicMock) -> None:
        mock_store.verify_connection.side_effect = RuntimeError("pool closed")

        response = client.get("/health/db")

        body = response.json()
        assert body["status"] == "error"
        assert body["connected"] is False
        assert "pool closed" in body["error"]


class TestApplicationWiring:
    """Tests for router registration and middleware."""

    def test_routers_are_registered(self) -> None:
        from main import app

        paths = app.openapi()["paths"]

        assert "/labs/onboarding" in paths
        assert "/doc-content" in paths
        assert "/doc-content/bulk-save" in paths
        assert "/doc-content/{lab_prefix}/{document_id}" in paths
        assert "/users" in paths
        assert "/users/{email}" in paths
        assert "/users/{user_id}/status" in paths
        assert "/documents" in paths
        assert "/documents/{document_id}" in paths

    def test_cors_preflight_allowed_for_configured_origin(self) -> None:
        from main import app, settings

        origin = settings.cors_origins[0]
        response = TestClient(app).options(
            "/health",
            headers={
                "Origin": origin,
                "Access-Control-Request-Method": "GET",
            },
        )

        assert response.headers["access-control-allow-origin"] == origin
