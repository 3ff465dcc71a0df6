"""Tests for the user's list collection."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from lexiflow import models
from tests.conftest import add_user_word, create_word, first_definition


def _public_list(
    db: Session, words: list[models.Word], owner: models.User | None = None, **fields: object
) -> models.WordList:
    word_list = models.WordList(
        name="Kitchen",
        description="Things you find in a kitchen",
        base_language_code="ru",
        target_language_code="en",
        owner_id=owner.id if owner else None,
        tags=[],
        difficulty_level="elementary",
        entries=[
            models.WordListDefinition(definition_id=first_definition(word).id, position=index)
            for index, word in enumerate(words)
        ],
        **fields,
    )
    db.add(word_list)
    db.commit()
    db.refresh(word_list)
    return word_list


def _kitchen_words(db: Session) -> list[models.Word]:
    return [
        create_word(db, "knife", "A tool for cutting", "нож"),
        create_word(db, "spoon", "A utensil for eating soup", "ложка"),
        create_word(db, "kettle", "A pot for boiling water", "чайник"),
    ]


class TestAddListToCollection:
    """Test suite for POST /user-lists endpoint."""

    def test_adopting_list_fills_dictionary(
        self, client: TestClient, db_session: Session
    ) -> None:
        word_list = _public_list(db_session, _kitchen_words(db_session))

        response = client.post("/api/v1/user-lists", json={"list_id": word_list.id})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["list_id"] == word_list.id
        assert data["is_custom"] is False
        assert data["name"] == "Kitchen"
        assert data["difficulty"] == "elementary"
        assert data["word_count"] == 3
        assert data["progress"] == 0.0

        dictionary = client.get("/api/v1/dictionary").json()
        assert dictionary["total"] == 3

    def test_existing_entries_are_reused(
        self, client: TestClient, db_session: Session, test_user: models.User
    ) -> None:
        words = _kitchen_words(db_session)
        existing = add_user_word(db_session, test_user, words[0], learning_status="learned")
        word_list = _public_list(db_session, words)

        response = client.post("/api/v1/user-lists", json={"list_id": word_list.id})

        data = response.json()
        assert data["user_word_ids"][0] == existing.id
        assert data["progress"] == 33.33

    def test_adopting_twice_is_conflict(self, client: TestClient, db_session: Session) -> None:
        word_list = _public_list(db_session, _kitchen_words(db_session))
        client.post("/api/v1/user-lists", json={"list_id": word_list.id})

        response = client.post("/api/v1/user-lists", json={"list_id": word_list.id})

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_private_list_of_other_user(
        self, client: TestClient, db_session: Session, other_user: models.User
    ) -> None:
        word_list = _public_list(
            db_session, _kitchen_words(db_session), owner=other_user, is_public=False
        )

        response = client.post("/api/v1/user-lists", json={"list_id": word_list.id})

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestCustomLists:
    """Test suite for custom lists."""

    def test_create_custom_list(
        self, client: TestClient, vocabulary: list[models.UserWord]
    ) -> None:
        response = client.post(
            "/api/v1/user-lists/custom",
            json={
                "name": "Breakfast",
                "target_language_code": "en",
                "user_word_ids": [vocabulary[1].id, vocabulary[2].id],
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["is_custom"] is True
        assert data["list_id"] is None
        assert data["name"] == "Breakfast"
        assert data["user_word_ids"] == [vocabulary[1].id, vocabulary[2].id]

    def test_custom_list_with_foreign_entry(
        self,
        client: TestClient,
        db_session: Session,
        other_user: models.User,
        apple: models.Word,
    ) -> None:
        theirs = add_user_word(db_session, other_user, apple)

        response = client.post(
            "/api/v1/user-lists/custom",
            json={"name": "Stolen", "target_language_code": "en", "user_word_ids": [theirs.id]},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_blank_name_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/user-lists/custom", json={"name": "   ", "target_language_code": "en"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_manage_words(self, client: TestClient, vocabulary: list[models.UserWord]) -> None:
        created = client.post(
            "/api/v1/user-lists/custom", json={"name": "Food", "target_language_code": "en"}
        ).json()
        url = f"/api/v1/user-lists/{created['id']}/words"

        client.post(url, json={"user_word_id": vocabulary[0].id})
        response = client.post(url, json={"user_word_id": vocabulary[1].id})

        assert response.json()["word_count"] == 2
        words = client.get(url).json()
        assert [word["word"] for word in words] == ["apple", "bread"]

        response = client.delete(f"{url}/{vocabulary[0].id}")

        assert response.json()["user_word_ids"] == [vocabulary[1].id]
        assert client.delete(f"{url}/{vocabulary[0].id}").status_code == 404


class TestManageCollection:
    def test_customizing_inherited_list_marks_modified(
        self, client: TestClient, db_session: Session
    ) -> None:
        word_list = _public_list(db_session, _kitchen_words(db_session))
        adopted = client.post("/api/v1/user-lists", json={"list_id": word_list.id}).json()

        response = client.patch(
            f"/api/v1/user-lists/{adopted['id']}", json={"custom_name": "My kitchen"}
        )

        data = response.json()
        assert data["name"] == "My kitchen"
        assert data["description"] == "Things you find in a kitchen"
        assert data["is_modified"] is True

    def test_list_collection_filters(
        self, client: TestClient, db_session: Session, vocabulary: list[models.UserWord]
    ) -> None:
        word_list = _public_list(db_session, _kitchen_words(db_session))
        client.post("/api/v1/user-lists", json={"list_id": word_list.id})
        client.post(
            "/api/v1/user-lists/custom", json={"name": "Food", "target_language_code": "en"}
        )

        everything = client.get("/api/v1/user-lists").json()
        custom = client.get("/api/v1/user-lists", params={"custom_only": True}).json()

        assert len(everything) == 2
        assert [entry["name"] for entry in custom] == ["Food"]

    def test_remove_keeps_dictionary_entries(
        self, client: TestClient, db_session: Session
    ) -> None:
        word_list = _public_list(db_session, _kitchen_words(db_session))
        adopted = client.post("/api/v1/user-lists", json={"list_id": word_list.id}).json()

        response = client.delete(f"/api/v1/user-lists/{adopted['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert client.get(f"/api/v1/user-lists/{adopted['id']}").status_code == 404
        assert client.get("/api/v1/dictionary").json()["total"] == 3

    def test_readopting_restores_entry(self, client: TestClient, db_session: Session) -> None:
        word_list = _public_list(db_session, _kitchen_words(db_session))
        adopted = client.post("/api/v1/user-lists", json={"list_id": word_list.id}).json()
        client.delete(f"/api/v1/user-lists/{adopted['id']}")

        response = client.post("/api/v1/user-lists", json={"list_id": word_list.id})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["id"] == adopted["id"]

    def test_refresh_progress(
        self,
        client: TestClient,
        db_session: Session,
        vocabulary: list[models.UserWord],
    ) -> None:
        created = client.post(
            "/api/v1/user-lists/custom",
            json={
                "name": "Food",
                "target_language_code": "en",
                "user_word_ids": [vocabulary[0].id, vocabulary[1].id],
            },
        ).json()
        vocabulary[0].learning_status = "learned"
        db_session.commit()

        response = client.post(f"/api/v1/user-lists/{created['id']}/progress")

        assert response.json()["progress"] == 50.0
