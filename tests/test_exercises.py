"""Tests for exercise endpoints."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from lexiflow import models


class TestNextExercise:
    """Test suite for GET /exercises/next/:id endpoint."""

    def test_new_word_gets_flashcard(
        self, client: TestClient, vocabulary: list[models.UserWord]
    ) -> None:
        response = client.get(f"/api/v1/exercises/next/{vocabulary[0].id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        exercise = data["exercise"]
        assert exercise["exercise_type"] == "remember-translation"
        assert exercise["prompt"]["word"] == "apple"
        assert exercise["prompt"]["translation"] == "яблоко"
        assert data["selection"]["level"] == 0
        assert data["selection"]["can_advance"] is False

    def test_level_picks_exercise(
        self, client: TestClient, db_session: Session, vocabulary: list[models.UserWord]
    ) -> None:
        vocabulary[0].srs_level = 3
        db_session.commit()

        response = client.get(f"/api/v1/exercises/next/{vocabulary[0].id}")

        exercise = response.json()["exercise"]
        assert exercise["exercise_type"] == "make-up-word"
        assert sorted(exercise["character_pool"]) == sorted("apple")

    def test_disabled_exercise_falls_back_to_closest(
        self, client: TestClient, db_session: Session, vocabulary: list[models.UserWord]
    ) -> None:
        vocabulary[0].srs_level = 5
        db_session.commit()

        response = client.get(
            f"/api/v1/exercises/next/{vocabulary[0].id}",
            params={"enabled_exercises": ["choose-right-word", "write-by-definition"]},
        )

        assert response.json()["exercise"]["exercise_type"] == "write-by-definition"

    def test_force_level(self, client: TestClient, vocabulary: list[models.UserWord]) -> None:
        response = client.get(
            f"/api/v1/exercises/next/{vocabulary[0].id}", params={"force_level": 2}
        )

        exercise = response.json()["exercise"]
        assert exercise["exercise_type"] == "choose-right-word"
        assert "apple" in exercise["options"]

    def test_unknown_entry(self, client: TestClient) -> None:
        response = client.get("/api/v1/exercises/next/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestExerciseSettings:
    def test_practice_config(self, client: TestClient) -> None:
        response = client.get(
            "/api/v1/exercises/config/write-by-sound", params={"difficulty": 4}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "max_attempts": 3,
            "show_hints": False,
            "auto_advance": False,
            "time_limit_ms": 12000,
        }

    def test_difficulty_settings(self, client: TestClient) -> None:
        response = client.get("/api/v1/exercises/difficulty/2")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["words_per_session"] == 8

    def test_difficulty_level_out_of_range(self, client: TestClient) -> None:
        response = client.get("/api/v1/exercises/difficulty/6")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_word_complexity(self, client: TestClient) -> None:
        response = client.get("/api/v1/exercises/complexity", params={"word": "knight"})

        # 12 for length plus 4 for each of "gh", "ght" and "kn"
        assert response.json() == {"word": "knight", "complexity": 24}
