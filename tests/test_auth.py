"""Tests for authentication and user profile endpoints."""

import httpx
import pytest
from fastapi import status
from fastapi.testclient import TestClient

from lexiflow import models
from lexiflow.config import get_settings
from tests.conftest import TEST_PASSWORD


def _login(client: TestClient, email: str, password: str = TEST_PASSWORD) -> httpx.Response:
    return client.post("/api/v1/auth/login", data={"username": email, "password": password})


class TestLogin:
    """Test suite for POST /auth/login."""

    def test_login_success(self, anonymous_client: TestClient, test_user: models.User) -> None:
        response = _login(anonymous_client, test_user.email)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["access_token"]
        assert data["refresh_token"]
        assert data["expires_in"] == 15 * 60
        assert data["user"]["email"] == test_user.email
        assert "refresh_token" in response.cookies

    def test_login_wrong_password(
        self, anonymous_client: TestClient, test_user: models.User
    ) -> None:
        response = _login(anonymous_client, test_user.email, "wrong-password")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"] == "Incorrect email or password"

    def test_login_unknown_email(self, anonymous_client: TestClient) -> None:
        response = _login(anonymous_client, "nobody@example.com")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_email_is_case_insensitive(
        self, anonymous_client: TestClient, test_user: models.User
    ) -> None:
        response = _login(anonymous_client, " TEST@Example.com ")

        assert response.status_code == status.HTTP_200_OK

    def test_access_token_authenticates_requests(
        self, anonymous_client: TestClient, test_user: models.User
    ) -> None:
        token = _login(anonymous_client, test_user.email).json()["access_token"]

        response = anonymous_client.get(
            "/api/v1/users/me", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["email"] == test_user.email

    def test_refresh_token_is_not_an_access_token(
        self, anonymous_client: TestClient, test_user: models.User
    ) -> None:
        refresh_token = _login(anonymous_client, test_user.email).json()["refresh_token"]

        response = anonymous_client.get(
            "/api/v1/users/me", headers={"Authorization": f"Bearer {refresh_token}"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestRefresh:
    """Test suite for POST /auth/refresh."""

    def test_refresh_with_body(self, anonymous_client: TestClient, test_user: models.User) -> None:
        refresh_token = _login(anonymous_client, test_user.email).json()["refresh_token"]
        anonymous_client.cookies.clear()

        response = anonymous_client.post(
            "/api/v1/auth/refresh", json={"refresh_token": refresh_token}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["access_token"]

    def test_refresh_without_token(self, anonymous_client: TestClient) -> None:
        response = anonymous_client.post("/api/v1/auth/refresh")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"] == "Refresh token required"

    def test_refresh_with_invalid_token(self, anonymous_client: TestClient) -> None:
        response = anonymous_client.post(
            "/api/v1/auth/refresh", json={"refresh_token": "not-a-token"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"] == "Invalid or expired refresh token"

    def test_logout(self, anonymous_client: TestClient) -> None:
        response = anonymous_client.post("/api/v1/auth/logout")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"success": True, "message": "Logged out successfully"}


class TestRegister:
    """Test suite for POST /users/register."""

    def test_register_success(self, anonymous_client: TestClient) -> None:
        response = anonymous_client.post(
            "/api/v1/users/register",
            json={
                "email": "new@example.com",
                "password": "supersecret",
                "name": "New Learner",
                "base_language_code": "es",
            },
        )

        assert response.status_code == status.HTTP_200_OK
        token = response.json()["access_token"]
        me = anonymous_client.get("/api/v1/users/me", headers={"Authorization": f"Bearer {token}"})
        assert me.json()["email"] == "new@example.com"
        assert me.json()["base_language_code"] == "es"

    def test_register_duplicate_email(
        self, anonymous_client: TestClient, test_user: models.User
    ) -> None:
        response = anonymous_client.post(
            "/api/v1/users/register",
            json={"email": test_user.email, "password": "supersecret"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Email already registered"

    def test_register_short_password(self, anonymous_client: TestClient) -> None:
        response = anonymous_client.post(
            "/api/v1/users/register", json={"email": "short@example.com", "password": "abc"}
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_register_disabled(
        self, anonymous_client: TestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(get_settings(), "ALLOW_USER_REGISTRATIONS", False)

        response = anonymous_client.post(
            "/api/v1/users/register",
            json={"email": "blocked@example.com", "password": "supersecret"},
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN


class TestProfile:
    """Test suite for GET/POST /users/me."""

    def test_get_me(self, client: TestClient, test_user: models.User) -> None:
        response = client.get("/api/v1/users/me")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == test_user.id
        assert data["name"] == "Test User"
        assert data["base_language_code"] == "ru"

    def test_update_name_and_language(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/users/me", json={"name": "Renamed", "base_language_code": "de"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "Renamed"
        assert response.json()["base_language_code"] == "de"

    def test_change_password(
        self, client: TestClient, anonymous_client: TestClient, test_user: models.User
    ) -> None:
        response = client.post(
            "/api/v1/users/me",
            json={"current_password": TEST_PASSWORD, "new_password": "brand-new-password"},
        )
        assert response.status_code == status.HTTP_200_OK

        assert _login(anonymous_client, test_user.email, "brand-new-password").status_code == 200

    def test_change_password_wrong_current(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/users/me",
            json={"current_password": "nope-nope", "new_password": "brand-new-password"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Current password is incorrect"

    def test_change_email_to_taken_address(
        self, client: TestClient, other_user: models.User
    ) -> None:
        response = client.post("/api/v1/users/me", json={"email": other_user.email})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Email already registered"

