"""Tests for catalogue word endpoints."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from lexiflow import models
from tests.conftest import add_user_word, create_word, first_definition


def _word_payload(text: str = "river", **overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "text": text,
        "language_code": "en",
        "phonetic": "/ˈrɪv.ər/",
        "details": [
            {
                "part_of_speech": "noun",
                "forms": "rivers",
                "definitions": [
                    {
                        "text": "A large natural stream of water",
                        "translation": "река",
                        "examples": ["The river flooded the valley", "  "],
                    },
                    {"text": "A copious flow of something"},
                ],
            }
        ],
    }
    payload.update(overrides)
    return payload


class TestCreateWord:
    """Test suite for POST /words endpoint."""

    def test_create_word_with_details(self, client: TestClient) -> None:
        response = client.post("/api/v1/words", json=_word_payload())

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["id"] > 0
        assert data["text"] == "river"
        assert len(data["details"]) == 1
        detail = data["details"][0]
        assert detail["part_of_speech"] == "noun"
        assert [d["text"] for d in detail["definitions"]] == [
            "A large natural stream of water",
            "A copious flow of something",
        ]
        # Definitions take the word's language; blank examples are dropped
        assert detail["definitions"][0]["language_code"] == "en"
        assert detail["definitions"][0]["examples"] == ["The river flooded the valley"]

    def test_create_word_trims_text(self, client: TestClient) -> None:
        response = client.post("/api/v1/words", json=_word_payload("  lake  ", details=[]))

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["text"] == "lake"

    def test_create_duplicate_word_is_conflict(
        self, client: TestClient, apple: models.Word
    ) -> None:
        response = client.post("/api/v1/words", json=_word_payload("Apple", details=[]))

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_same_text_in_another_language_is_allowed(
        self, client: TestClient, apple: models.Word
    ) -> None:
        response = client.post(
            "/api/v1/words", json=_word_payload("apple", language_code="da", details=[])
        )

        assert response.status_code == status.HTTP_201_CREATED

    def test_create_word_with_empty_definition(self, client: TestClient) -> None:
        payload = _word_payload(details=[{"part_of_speech": "noun", "definitions": [{"text": ""}]}])

        response = client.post("/api/v1/words", json=payload)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_create_word_negative_frequency(self, client: TestClient) -> None:
        response = client.post("/api/v1/words", json=_word_payload(frequency=-1))

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


class TestGetWord:
    """Test suite for GET /words/:id endpoint."""

    def test_get_word(self, client: TestClient, apple: models.Word) -> None:
        response = client.get(f"/api/v1/words/{apple.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["text"] == "apple"
        assert data["phonetic"] == "/ˈæp.əl/"
        assert len(data["details"][0]["definitions"]) == 2

    def test_get_word_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/words/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_get_definition_with_word(self, client: TestClient, apple: models.Word) -> None:
        definition = first_definition(apple)

        response = client.get(f"/api/v1/words/definitions/{definition.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["word"]["id"] == apple.id
        assert data["word"]["definition_count"] == 2
        assert data["definition"]["translation"] == "яблоко"

    def test_get_definition_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/words/definitions/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestSearchWords:
    """Test suite for GET /words endpoint."""

    def test_search_by_prefix(self, client: TestClient, db_session: Session) -> None:
        for text in ("table", "tablet", "cable", "Tab"):
            create_word(db_session, text, f"Meaning of {text}")

        response = client.get("/api/v1/words", params={"q": "tab"})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["total"] == 3
        assert sorted(item["text"] for item in data["items"]) == ["Tab", "table", "tablet"]

    def test_search_filters_language(self, client: TestClient, db_session: Session) -> None:
        create_word(db_session, "hus", "Bygning til at bo i", language_code="da")
        create_word(db_session, "house", "A building for living in")

        response = client.get("/api/v1/words", params={"language_code": "da"})

        assert [item["text"] for item in response.json()["items"]] == ["hus"]

    def test_search_paginates(self, client: TestClient, db_session: Session) -> None:
        for index in range(5):
            create_word(db_session, f"word{index}", f"Meaning {index}")

        response = client.get("/api/v1/words", params={"page": 2, "page_size": 2})

        data = response.json()
        assert data["total"] == 5
        assert data["page"] == 2
        assert data["total_pages"] == 3
        assert data["has_next"] is True
        assert data["has_previous"] is True
        assert len(data["items"]) == 2


class TestDeleteWord:
    """Test suite for DELETE /words/:id endpoint."""

    def test_delete_word_removes_dictionary_entries(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        apple: models.Word,
    ) -> None:
        user_word = add_user_word(db_session, test_user, apple)
        user_word_id = user_word.id

        response = client.delete(f"/api/v1/words/{apple.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["success"] is True
        assert client.get(f"/api/v1/words/{apple.id}").status_code == 404
        assert client.get(f"/api/v1/dictionary/{user_word_id}").status_code == 404

    def test_delete_word_not_found(self, client: TestClient) -> None:
        response = client.delete("/api/v1/words/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
