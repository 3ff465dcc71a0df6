"""Pytest configuration and fixtures."""

# ruff: noqa: E402

import os

# Settings are cached on first read, so the environment must be set before imports
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-enough-length-for-hs256")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("COOKIE_SECURE", "false")

from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from lexiflow import models
from lexiflow.database import Base, enable_sqlite_foreign_keys, get_db
from lexiflow.domain.common.value_objects.ids import UserId
from lexiflow.domain.identity.entities.user import User
from lexiflow.infrastructure.identity.dependencies import get_current_user
from lexiflow.infrastructure.identity.repositories.user_repository import (
    UserRepository,
)
from lexiflow.infrastructure.identity.routers.auth import limiter
from lexiflow.infrastructure.identity.services.password_service import get_password_service
from lexiflow.main import app

TEST_PASSWORD = "password123"

# Test database URL (in-memory SQLite shared across connections)
test_engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(test_engine)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


def create_word(
    db: Session,
    text: str,
    definition: str,
    translation: str | None = None,
    language_code: str = "en",
    part_of_speech: str = "noun",
    phonetic: str | None = None,
    forms: str | None = None,
    extra_definitions: list[str] | None = None,
) -> models.Word:
    """Insert a catalogue word with one detail and its definitions."""
    definitions = [
        models.Definition(
            text=definition,
            language_code=language_code,
            translation=translation,
            examples=[],
        )
    ]
    definitions.extend(
        models.Definition(text=extra, language_code=language_code, examples=[])
        for extra in extra_definitions or []
    )
    word = models.Word(
        text=text,
        language_code=language_code,
        phonetic=phonetic,
        details=[
            models.WordDetail(
                part_of_speech=part_of_speech,
                phonetic=phonetic,
                forms=forms,
                definitions=definitions,
            )
        ],
    )
    db.add(word)
    db.commit()
    db.refresh(word)
    return word


def first_definition(word: models.Word) -> models.Definition:
    return word.details[0].definitions[0]


def add_user_word(
    db: Session, user: models.User, word: models.Word, **fields: Any
) -> models.UserWord:
    """Insert a dictionary entry for the first definition of a word."""
    user_word = models.UserWord(
        user_id=user.id,
        definition_id=first_definition(word).id,
        base_language_code=user.base_language_code,
        target_language_code=word.language_code,
        **fields,
    )
    db.add(user_word)
    db.commit()
    db.refresh(user_word)
    return user_word


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    user = models.User(
        email="test@example.com",
        name="Test User",
        base_language_code="ru",
        hashed_password=get_password_service().hash_password(TEST_PASSWORD),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def other_user(db_session: Session) -> models.User:
    user = models.User(
        email="other@example.com",
        name="Other User",
        base_language_code="en",
        hashed_password=get_password_service().hash_password(TEST_PASSWORD),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def anonymous_client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Test client with the database override only; authentication is real."""

    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    limiter.reset()

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def client(
    anonymous_client: TestClient, db_session: Session, test_user: models.User
) -> TestClient:
    """Test client authenticated as ``test_user``."""

    def override_get_current_user() -> User:
        user = UserRepository(db_session).find_by_id(UserId(test_user.id))
        assert user is not None
        return user

    app.dependency_overrides[get_current_user] = override_get_current_user
    return anonymous_client


@pytest.fixture
def apple(db_session: Session) -> models.Word:
    return create_word(
        db_session,
        "apple",
        "A round fruit with red or green skin",
        translation="яблоко",
        phonetic="/ˈæp.əl/",
        forms="apples",
        extra_definitions=["The tree which bears apples"],
    )


@pytest.fixture
def vocabulary(db_session: Session, test_user: models.User) -> list[models.UserWord]:
    """Five dictionary entries for ``test_user``, none practiced yet."""
    words = [
        ("apple", "A round fruit with red or green skin", "яблоко"),
        ("bread", "Food made of flour, water and yeast", "хлеб"),
        ("cheese", "Food made from pressed milk curds", "сыр"),
        ("garden", "A piece of ground for growing plants", "сад"),
        ("window", "An opening in a wall that lets in light", "окно"),
    ]
    return [
        add_user_word(db_session, test_user, create_word(db_session, text, definition, translation))
        for text, definition, translation in words
    ]
