"""Tests for personal dictionary endpoints."""

from datetime import UTC, datetime

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from lexiflow import models
from tests.conftest import add_user_word, create_word, first_definition


class TestAddToDictionary:
    """Test suite for POST /dictionary endpoint."""

    def test_add_definition(
        self, client: TestClient, test_user: models.User, apple: models.Word
    ) -> None:
        definition = first_definition(apple)

        response = client.post("/api/v1/dictionary", json={"definition_id": definition.id})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["definition_id"] == definition.id
        assert data["word_id"] == apple.id
        assert data["word"] == "apple"
        assert data["translation"] == "яблоко"
        assert data["base_language_code"] == "ru"
        assert data["target_language_code"] == "en"
        assert data["learning_status"] == "notStarted"
        assert data["srs_level"] == 0
        assert data["is_modified"] is False

    def test_add_twice_is_conflict(self, client: TestClient, apple: models.Word) -> None:
        payload = {"definition_id": first_definition(apple).id}
        client.post("/api/v1/dictionary", json=payload)

        response = client.post("/api/v1/dictionary", json=payload)

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_add_unknown_definition(self, client: TestClient) -> None:
        response = client.post("/api/v1/dictionary", json={"definition_id": 99999})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_re_adding_removed_entry_restores_progress(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        apple: models.Word,
    ) -> None:
        user_word = add_user_word(db_session, test_user, apple, review_count=4, srs_level=2)
        client.delete(f"/api/v1/dictionary/{user_word.id}")

        response = client.post(
            "/api/v1/dictionary", json={"definition_id": first_definition(apple).id}
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["id"] == user_word.id
        assert data["review_count"] == 4
        assert data["srs_level"] == 2
        assert data["deleted_at"] is None


class TestListDictionary:
    """Test suite for GET /dictionary endpoint."""

    def test_list_entries(self, client: TestClient, vocabulary: list[models.UserWord]) -> None:
        response = client.get("/api/v1/dictionary", params={"sort_by": "word", "sort_order": "asc"})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["total"] == 5
        assert [item["word"] for item in data["items"]] == [
            "apple",
            "bread",
            "cheese",
            "garden",
            "window",
        ]

    def test_search_matches_word_and_definition(
        self, client: TestClient, vocabulary: list[models.UserWord]
    ) -> None:
        response = client.get("/api/v1/dictionary", params={"search": "food"})

        assert sorted(item["word"] for item in response.json()["items"]) == ["bread", "cheese"]

    def test_filter_by_status_and_favorite(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        vocabulary: list[models.UserWord],
    ) -> None:
        learned = add_user_word(
            db_session,
            test_user,
            create_word(db_session, "house", "A building for living in"),
            learning_status="learned",
            is_favorite=True,
        )

        by_status = client.get("/api/v1/dictionary", params={"learning_status": ["learned"]})
        favorites = client.get("/api/v1/dictionary", params={"is_favorite": True})

        assert [item["id"] for item in by_status.json()["items"]] == [learned.id]
        assert [item["id"] for item in favorites.json()["items"]] == [learned.id]

    def test_other_users_entries_are_hidden(
        self,
        client: TestClient,
        db_session: Session,
        other_user: models.User,
        apple: models.Word,
    ) -> None:
        theirs = add_user_word(db_session, other_user, apple)

        assert client.get("/api/v1/dictionary").json()["total"] == 0
        assert client.get(f"/api/v1/dictionary/{theirs.id}").status_code == 404


class TestCustomizeEntry:
    """Test suite for PATCH /dictionary/:id endpoint."""

    def test_custom_values_override_catalogue(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        apple: models.Word,
    ) -> None:
        user_word = add_user_word(db_session, test_user, apple)

        response = client.patch(
            f"/api/v1/dictionary/{user_word.id}",
            json={
                "custom_translation": "яблочко",
                "custom_notes": "Grandma's orchard",
                "custom_tags": ["fruit"],
            },
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["translation"] == "яблочко"
        assert data["custom_notes"] == "Grandma's orchard"
        assert data["is_modified"] is True

    def test_empty_string_clears_custom_value(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        apple: models.Word,
    ) -> None:
        user_word = add_user_word(db_session, test_user, apple, custom_translation="фрукт")

        response = client.patch(
            f"/api/v1/dictionary/{user_word.id}", json={"custom_translation": ""}
        )

        data = response.json()
        assert data["custom_translation"] is None
        assert data["translation"] == "яблоко"


class TestEntryActions:
    def test_toggle_favorite(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        apple: models.Word,
    ) -> None:
        user_word = add_user_word(db_session, test_user, apple)

        first = client.post(f"/api/v1/dictionary/{user_word.id}/favorite")
        second = client.post(f"/api/v1/dictionary/{user_word.id}/favorite")

        assert first.json()["is_favorite"] is True
        assert second.json()["is_favorite"] is False

    def test_skip_counts(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        apple: models.Word,
    ) -> None:
        user_word = add_user_word(db_session, test_user, apple)

        response = client.post(f"/api/v1/dictionary/{user_word.id}/skip")

        assert response.json()["skip_count"] == 1
        assert response.json()["last_reviewed_at"] is not None

    def test_remove_and_restore(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        apple: models.Word,
    ) -> None:
        user_word = add_user_word(db_session, test_user, apple)

        response = client.delete(f"/api/v1/dictionary/{user_word.id}")

        assert response.status_code == status.HTTP_200_OK
        assert client.get(f"/api/v1/dictionary/{user_word.id}").status_code == 404

        response = client.post(f"/api/v1/dictionary/{user_word.id}/restore")

        assert response.status_code == status.HTTP_200_OK
        assert client.post(f"/api/v1/dictionary/{user_word.id}/restore").status_code == 400

    def test_analytics_without_history(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        apple: models.Word,
    ) -> None:
        user_word = add_user_word(db_session, test_user, apple)

        response = client.get(f"/api/v1/dictionary/{user_word.id}/analytics")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["user_word_id"] == user_word.id
        assert data["word"] == "apple"
        assert data["basic"]["total_attempts"] == 0
        assert data["errors"]["total_mistakes"] == 0
        assert data["timeline"]["milestones"] == []

    def test_analytics_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/dictionary/99999/analytics")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_learning_status(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        apple: models.Word,
    ) -> None:
        user_word = add_user_word(db_session, test_user, apple)

        response = client.put(
            f"/api/v1/dictionary/{user_word.id}/status",
            json={"learning_status": "learned", "mastery_score": 95, "progress": 100},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["learning_status"] == "learned"
        assert data["mastery_score"] == 95.0
        assert data["review_count"] == 1
        assert data["learned_at"] is not None

    def test_update_learning_status_validates_range(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        apple: models.Word,
    ) -> None:
        user_word = add_user_word(db_session, test_user, apple)

        response = client.put(
            f"/api/v1/dictionary/{user_word.id}/status",
            json={"learning_status": "learned", "mastery_score": 150},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


class TestDictionaryStats:
    """Test suite for GET /dictionary/stats endpoint."""

    def test_empty_dictionary(self, client: TestClient) -> None:
        response = client.get("/api/v1/dictionary/stats")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["total_words"] == 0
        assert data["average_mastery_score"] == 0.0
        assert data["status_breakdown"]["learned"] == 0

    def test_counts_entries(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        vocabulary: list[models.UserWord],
    ) -> None:
        vocabulary[0].is_favorite = True
        vocabulary[0].mastery_score = 80.0
        vocabulary[0].learning_status = "learned"
        vocabulary[1].mastery_score = 40.0
        vocabulary[1].next_review_due = datetime(2000, 1, 1, tzinfo=UTC)
        db_session.commit()
        client.delete(f"/api/v1/dictionary/{vocabulary[4].id}")

        data = client.get("/api/v1/dictionary/stats").json()

        assert data["total_words"] == 4
        assert data["favorite_words"] == 1
        assert data["words_needing_review"] == 1
        assert data["average_mastery_score"] == 30.0
        assert data["status_breakdown"]["learned"] == 1
        assert data["status_breakdown"]["notStarted"] == 3
