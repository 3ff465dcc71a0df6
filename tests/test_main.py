"""Tests for main API endpoints."""

from fastapi.testclient import TestClient


def test_root_endpoint(anonymous_client: TestClient) -> None:
    """Test root endpoint returns welcome message."""
    response = anonymous_client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to Lexiflow API"}


def test_health_endpoint(anonymous_client: TestClient) -> None:
    """Test health check endpoint."""
    response = anonymous_client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_api_root_endpoint(anonymous_client: TestClient) -> None:
    """Test API v1 root endpoint."""
    response = anonymous_client.get("/api/v1/")
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Lexiflow API v1"
    assert data["version"] == "0.1.0"
    assert data["docs"] == "/api/v1/docs"


def test_settings_endpoint_is_public(anonymous_client: TestClient) -> None:
    response = anonymous_client.get("/api/v1/settings")
    assert response.status_code == 200
    data = response.json()
    assert data["feature_flags"] == {"user_registrations": True}
    assert data["default_session_words"] == 10
    assert data["srs_review_batch_size"] == 20


def test_protected_endpoint_requires_token(anonymous_client: TestClient) -> None:
    response = anonymous_client.get("/api/v1/dictionary")
    assert response.status_code == 401
