"""Builders for domain objects used across unit tests."""

from datetime import UTC, datetime
from typing import Any

from lexiflow.domain.common.value_objects.ids import (
    DefinitionId,
    LearningMistakeId,
    LearningSessionId,
    SessionItemId,
    UserId,
    UserWordId,
    WordId,
)
from lexiflow.domain.dictionary.value_objects import LanguageCode
from lexiflow.domain.practice.entities.learning_mistake import LearningMistake
from lexiflow.domain.practice.entities.learning_session import LearningSession, SessionItem
from lexiflow.domain.practice.value_objects import MistakeType, SessionType
from lexiflow.domain.vocabulary.entities.user_word import UserWord
from lexiflow.domain.vocabulary.value_objects import WordContent

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)


def make_user_word(
    user_word_id: int = 1,
    word: str = "apple",
    definition: str = "A round fruit",
    translation: str | None = "яблоко",
    content: dict[str, Any] | None = None,
    **fields: Any,
) -> UserWord:
    word_content = WordContent(
        word_id=WordId(user_word_id),
        definition_id=DefinitionId(user_word_id),
        word_text=word,
        definition_text=definition,
        translation=translation,
        **(content or {}),
    )
    fields.setdefault("created_at", NOW)
    return UserWord(
        id=UserWordId(user_word_id),
        user_id=UserId(1),
        definition_id=DefinitionId(user_word_id),
        base_language_code=LanguageCode.RU,
        target_language_code=LanguageCode.EN,
        content=word_content,
        **fields,
    )


def make_session(
    session_id: int,
    start_time: datetime,
    correct: int = 0,
    incorrect: int = 0,
    response_times: list[int] | None = None,
    **fields: Any,
) -> LearningSession:
    """A finished session; ``response_times`` become items for entry 1."""
    items = [
        SessionItem(
            id=SessionItemId(session_id * 100 + index),
            user_word_id=UserWordId(1),
            is_correct=True,
            response_time=response_time,
            created_at=start_time,
        )
        for index, response_time in enumerate(response_times or [])
    ]
    fields.setdefault("session_type", SessionType.PRACTICE)
    fields.setdefault("end_time", start_time)
    return LearningSession(
        id=LearningSessionId(session_id),
        user_id=UserId(1),
        start_time=start_time,
        correct_answers=correct,
        incorrect_answers=incorrect,
        items=items,
        **fields,
    )


def make_mistake(
    user_word_id: int,
    created_at: datetime,
    mistake_type: MistakeType = MistakeType.SPELLING,
    mistake_id: int = 1,
) -> LearningMistake:
    return LearningMistake(
        id=LearningMistakeId(mistake_id),
        user_id=UserId(1),
        user_word_id=UserWordId(user_word_id),
        definition_id=DefinitionId(user_word_id),
        mistake_type=mistake_type,
        created_at=created_at,
    )
