"""Unit tests for document HTTP routes."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from documents.application.services import DocumentService
from documents.domain.aggregates import Document
from documents.ports.exceptions import DocumentOwnerNotFoundError

NEW_DOCUMENT = {"title": "SOP-1", "content": "Calibrate daily.", "owner_id": 3}


def _document(document_id=1, owner_id=3) -> Document:
    created = datetime(2026, 1, 1, tzinfo=timezone.utc)
    return Document(
        id=document_id,
        title="SOP-1",
        content="Calibrate daily.",
        owner_id=owner_id,
        created_at=created,
        updated_at=created,
    )


@pytest.fixture
def mock_document_service() -> AsyncMock:
    """Mock DocumentService for testing."""
    return AsyncMock(spec=DocumentService)


@pytest.fixture
def test_client(mock_document_service: AsyncMock) -> TestClient:
    """Create TestClient with mocked dependencies."""
    from documents.dependencies import get_document_service
    from documents.presentation import router

    app = FastAPI()

    app.dependency_overrides[get_document_service] = lambda: mock_document_service

    app.include_router(router)

    return TestClient(app)


class TestCreateDocument:
    """Tests for POST /documents."""

    def test_create_returns_201(self, test_client, mock_document_service):
        mock_document_service.create_document.return_value = _document(9)

        response = test_client.post("/documents", json=NEW_DOCUMENT)

        assert response.status_code == status.HTTP_201_CREATED
        result = response.json()
        assert result["id"] == 9
        assert result["owner_id"] == 3
        assert result["created_at"].startswith("2026-01-01")
        mock_document_service.create_document.assert_awaited_once_with(
            title="SOP-1", content="Calibrate daily.", owner_id=3
        )

    def test_unknown_owner_returns_400(self, test_client, mock_document_service):
        mock_document_service.create_document.side_effect = (
            DocumentOwnerNotFoundError(99)
        )

        response = test_client.post(
            "/documents", json={**NEW_DOCUMENT, "owner_id": 99}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "User 99 does not exist"

    @pytest.mark.parametrize(
        "override",
        [{"title": ""}, {"content": ""}, {"owner_id": 0}],
    )
    def test_invalid_body_returns_422(
        self, test_client, mock_document_service, override
    ):
        response = test_client.post("/documents", json={**NEW_DOCUMENT, **override})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        mock_document_service.create_document.assert_not_called()

    def test_unexpected_error_returns_500(self, test_client, mock_document_service):
        mock_document_service.create_document.side_effect = RuntimeError("boom")

        response = test_client.post("/documents", json=NEW_DOCUMENT)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["detail"] == "Failed to create document"


class TestListDocuments:
    """Tests for GET /documents."""

    def test_lists_documents(self, test_client, mock_document_service):
        mock_document_service.list_documents.return_value = [
            _document(2),
            _document(1),
        ]

        response = test_client.get("/documents")

        assert response.status_code == status.HTTP_200_OK
        assert [document["id"] for document in response.json()] == [2, 1]
        mock_document_service.list_documents.assert_awaited_once_with(owner_id=None)

    def test_filters_by_owner(self, test_client, mock_document_service):
        mock_document_service.list_documents.return_value = [_document(owner_id=7)]

        response = test_client.get("/documents", params={"owner_id": 7})

        assert response.status_code == status.HTTP_200_OK
        mock_document_service.list_documents.assert_awaited_once_with(owner_id=7)


class TestSingleDocument:
    """Tests for GET, PUT and DELETE /documents/{document_id}."""

    def test_get_document(self, test_client, mock_document_service):
        mock_document_service.get_document.return_value = _document(4)

        response = test_client.get("/documents/4")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["title"] == "SOP-1"
        mock_document_service.get_document.assert_awaited_once_with(4)

    def test_get_missing_returns_404(self, test_client, mock_document_service):
        mock_document_service.get_document.return_value = None

        response = test_client.get("/documents/4")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Document not found"

    def test_update_document(self, test_client, mock_document_service):
        mock_document_service.update_document.return_value = _document(4)

        response = test_client.put("/documents/4", json={"title": "SOP-1 rev 2"})

        assert response.status_code == status.HTTP_200_OK
        mock_document_service.update_document.assert_awaited_once_with(
            4, title="SOP-1 rev 2", content=None
        )

    def test_update_missing_returns_404(self, test_client, mock_document_service):
        mock_document_service.update_document.return_value = None

        response = test_client.put("/documents/4", json={"content": "x"})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_returns_204(self, test_client, mock_document_service):
        mock_document_service.delete_document.return_value = True

        response = test_client.delete("/documents/4")

        assert response.status_code == status.HTTP_204_NO_CONTENT

    def test_delete_missing_returns_404(self, test_client, mock_document_service):
        mock_document_service.delete_document.return_value = False

        response = test_client.delete("/documents/4")

        assert response.status_code == status.HTTP_404_NOT_FOUND
