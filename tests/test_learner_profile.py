"""Tests for learning settings, practice preferences and account deletion."""

from fastapi import status
from fastapi.testclient import TestClient

from lexiflow import models
from tests.conftest import TEST_PASSWORD


class TestLearningSettings:
    """Test suite for /users/me/settings."""

    def test_defaults_without_stored_settings(self, client: TestClient) -> None:
        response = client.get("/api/v1/users/me/settings")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["daily_goal"] == 5
        assert data["session_duration"] == 15
        assert data["review_interval"] == 3
        assert data["learning_reminders"] == {}

    def test_partial_update(self, client: TestClient) -> None:
        response = client.put(
            "/api/v1/users/me/settings",
            json={"daily_goal": 25, "dark_mode": True, "learning_reminders": {"time": "08:00"}},
        )

        assert response.status_code == status.HTTP_200_OK
        stored = client.get("/api/v1/users/me/settings").json()
        assert stored["daily_goal"] == 25
        assert stored["dark_mode"] is True
        assert stored["sound_enabled"] is True
        assert stored["learning_reminders"] == {"time": "08:00"}

    def test_out_of_range_value(self, client: TestClient) -> None:
        response = client.put("/api/v1/users/me/settings", json={"session_duration": 500})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


class TestTypingPreferences:
    """Test suite for /users/me/preferences."""

    def test_defaults(self, client: TestClient) -> None:
        response = client.get("/api/v1/users/me/preferences/typing")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["words_count"] == 10
        assert data["difficulty_level"] == 3
        assert data["time_limit_seconds"] == 60
        assert data["game_sound_volume"] == 0.5

    def test_update_then_reset(self, client: TestClient) -> None:
        response = client.put(
            "/api/v1/users/me/preferences/typing",
            json={"words_count": 20, "enable_keystroke_sounds": True},
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["words_count"] == 20

        all_preferences = client.get("/api/v1/users/me/preferences").json()
        assert all_preferences["typing_practice"]["enable_keystroke_sounds"] is True
        assert all_preferences["typing_practice"]["auto_submit_after_correct"] is False

        reset = client.post("/api/v1/users/me/preferences/typing/reset")
        assert reset.json()["words_count"] == 10
        assert reset.json()["enable_keystroke_sounds"] is False


class TestTargetLanguage:
    def test_set_target_language(self, client: TestClient) -> None:
        response = client.post("/api/v1/users/me", json={"target_language_code": "en"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["target_language_code"] == "en"

    def test_target_equal_to_base_rejected(self, client: TestClient) -> None:
        response = client.post("/api/v1/users/me", json={"target_language_code": "ru"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestDeleteAccount:
    """Test suite for DELETE /users/me."""

    def _sign_in(self, client: TestClient, email: str) -> dict[str, str]:
        token = client.post(
            "/api/v1/auth/login", data={"username": email, "password": TEST_PASSWORD}
        ).json()["access_token"]
        return {"Authorization": f"Bearer {token}"}

    def test_wrong_confirmation(
        self, anonymous_client: TestClient, test_user: models.User
    ) -> None:
        headers = self._sign_in(anonymous_client, test_user.email)

        response = anonymous_client.request(
            "DELETE", "/api/v1/users/me", json={"confirmation": "delete"}, headers=headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert anonymous_client.get("/api/v1/users/me", headers=headers).status_code == 200

    def test_deleted_account_cannot_sign_in(
        self, anonymous_client: TestClient, test_user: models.User
    ) -> None:
        headers = self._sign_in(anonymous_client, test_user.email)

        response = anonymous_client.request(
            "DELETE", "/api/v1/users/me", json={"confirmation": "DELETE"}, headers=headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["success"] is True
        assert anonymous_client.get("/api/v1/users/me", headers=headers).status_code == 401
        login = anonymous_client.post(
            "/api/v1/auth/login", data={"username": test_user.email, "password": TEST_PASSWORD}
        )
        assert login.status_code == status.HTTP_401_UNAUTHORIZED
