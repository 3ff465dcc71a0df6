"""Tests for category and word list endpoints."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from lexiflow import models
from tests.conftest import create_word, first_definition


def _create_list(db: Session, name: str, owner: models.User | None = None, **fields: object):
    word_list = models.WordList(
        name=name,
        base_language_code="ru",
        target_language_code="en",
        owner_id=owner.id if owner else None,
        tags=[],
        **fields,
    )
    db.add(word_list)
    db.commit()
    db.refresh(word_list)
    return word_list


class TestCategories:
    def test_create_and_list_categories(self, client: TestClient) -> None:
        response = client.post("/api/v1/categories", json={"name": "Food", "description": "Meals"})
        assert response.status_code == status.HTTP_201_CREATED
        client.post("/api/v1/categories", json={"name": "Animals"})

        response = client.get("/api/v1/categories")

        assert response.status_code == status.HTTP_200_OK
        assert [c["name"] for c in response.json()] == ["Animals", "Food"]

    def test_duplicate_category(self, client: TestClient) -> None:
        client.post("/api/v1/categories", json={"name": "Food"})

        response = client.post("/api/v1/categories", json={"name": "Food"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "already exists" in response.json()["detail"]


class TestCreateWordList:
    """Test suite for POST /word-lists endpoint."""

    def test_create_list_with_definitions(
        self, client: TestClient, test_user: models.User, apple: models.Word
    ) -> None:
        definition_ids = [d.id for d in apple.details[0].definitions]

        response = client.post(
            "/api/v1/word-lists",
            json={
                "name": "  Fruit  ",
                "base_language_code": "ru",
                "target_language_code": "en",
                "tags": ["Food", " food ", "Basics"],
                "definition_ids": definition_ids,
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["name"] == "Fruit"
        assert data["owner_id"] == test_user.id
        assert data["is_official"] is False
        assert data["tags"] == ["food", "basics"]
        assert data["definition_ids"] == definition_ids
        assert data["word_count"] == 2

    def test_create_list_unknown_definition(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/word-lists",
            json={
                "name": "Broken",
                "base_language_code": "ru",
                "target_language_code": "en",
                "definition_ids": [99999],
            },
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_create_list_unknown_category(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/word-lists",
            json={
                "name": "Broken",
                "base_language_code": "ru",
                "target_language_code": "en",
                "category_id": 99999,
            },
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_create_list_unsupported_language(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/word-lists",
            json={"name": "Broken", "base_language_code": "xx", "target_language_code": "en"},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


class TestBrowseWordLists:
    """Test suite for GET /word-lists endpoints."""

    def test_private_lists_of_others_are_hidden(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        other_user: models.User,
    ) -> None:
        _create_list(db_session, "Official")
        _create_list(db_session, "Mine private", test_user, is_public=False)
        _create_list(db_session, "Theirs public", other_user)
        hidden = _create_list(db_session, "Theirs private", other_user, is_public=False)

        response = client.get("/api/v1/word-lists")

        assert response.status_code == status.HTTP_200_OK
        names = [item["name"] for item in response.json()["items"]]
        assert names == ["Mine private", "Official", "Theirs public"]
        assert client.get(f"/api/v1/word-lists/{hidden.id}").status_code == 404

    def test_public_only_hides_own_private_lists(
        self, client: TestClient, db_session: Session, test_user: models.User
    ) -> None:
        _create_list(db_session, "Official")
        _create_list(db_session, "Mine private", test_user, is_public=False)

        response = client.get("/api/v1/word-lists", params={"public_only": True})

        assert [item["name"] for item in response.json()["items"]] == ["Official"]

    def test_filters(self, client: TestClient, db_session: Session) -> None:
        _create_list(db_session, "Kitchen", difficulty_level="advanced")
        _create_list(db_session, "Kitchen basics")
        _create_list(db_session, "Travel")

        by_name = client.get("/api/v1/word-lists", params={"search": "kitchen"}).json()
        by_level = client.get(
            "/api/v1/word-lists", params={"difficulty_level": "advanced"}
        ).json()

        assert by_name["total"] == 2
        assert [item["name"] for item in by_level["items"]] == ["Kitchen"]

    def test_get_official_list(self, client: TestClient, db_session: Session) -> None:
        official = _create_list(db_session, "Official")

        response = client.get(f"/api/v1/word-lists/{official.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["is_official"] is True
        assert data["owner_id"] is None


class TestEditWordList:
    """Test suite for modifying word lists."""

    def test_update_own_list(
        self, client: TestClient, db_session: Session, test_user: models.User
    ) -> None:
        word_list = _create_list(db_session, "Mine", test_user)

        response = client.patch(
            f"/api/v1/word-lists/{word_list.id}",
            json={"name": "Renamed", "is_public": False, "tags": ["Verbs"]},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["name"] == "Renamed"
        assert data["is_public"] is False
        assert data["tags"] == ["verbs"]

    def test_official_list_is_read_only(self, client: TestClient, db_session: Session) -> None:
        official = _create_list(db_session, "Official")

        response = client.patch(f"/api/v1/word-lists/{official.id}", json={"name": "Mine now"})

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_official_list_cannot_be_deleted(self, client: TestClient, db_session: Session) -> None:
        official = _create_list(db_session, "Official")

        response = client.delete(f"/api/v1/word-lists/{official.id}")

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert client.get(f"/api/v1/word-lists/{official.id}").status_code == status.HTTP_200_OK

    def test_cannot_edit_other_users_public_list(
        self, client: TestClient, db_session: Session, other_user: models.User
    ) -> None:
        theirs = _create_list(db_session, "Theirs", other_user)

        response = client.delete(f"/api/v1/word-lists/{theirs.id}")

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_add_and_remove_definitions(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        apple: models.Word,
    ) -> None:
        word_list = _create_list(db_session, "Mine", test_user)
        bread = create_word(db_session, "bread", "Food made of flour")
        apple_definition = first_definition(apple).id
        bread_definition = first_definition(bread).id
        url = f"/api/v1/word-lists/{word_list.id}/definitions"

        client.post(url, json={"definition_id": bread_definition})
        client.post(url, json={"definition_id": apple_definition})
        response = client.post(url, json={"definition_id": bread_definition})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["definition_ids"] == [bread_definition, apple_definition]

        response = client.delete(f"{url}/{bread_definition}")

        assert response.json()["definition_ids"] == [apple_definition]
        assert client.delete(f"{url}/{bread_definition}").status_code == 404

    def test_delete_and_restore(
        self, client: TestClient, db_session: Session, test_user: models.User
    ) -> None:
        word_list = _create_list(db_session, "Mine", test_user)

        response = client.delete(f"/api/v1/word-lists/{word_list.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["success"] is True
        assert client.get(f"/api/v1/word-lists/{word_list.id}").status_code == 404

        response = client.post(f"/api/v1/word-lists/{word_list.id}/restore")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "Mine"

    def test_restore_active_list(
        self, client: TestClient, db_session: Session, test_user: models.User
    ) -> None:
        word_list = _create_list(db_session, "Mine", test_user)

        response = client.post(f"/api/v1/word-lists/{word_list.id}/restore")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
