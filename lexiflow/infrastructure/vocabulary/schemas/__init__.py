"""Vocabulary context schemas."""

from lexiflow.infrastructure.vocabulary.schemas.user_list_schemas import (
    CustomListCreateRequest,
    UserListAddRequest,
    UserListResponse,
    UserListUpdateRequest,
    UserListWordRequest,
)
from lexiflow.infrastructure.vocabulary.schemas.user_word_schemas import (
    DictionaryAddRequest,
    DictionaryStatsResponse,
    LearningStatusUpdateRequest,
    UserWordCustomizeRequest,
    UserWordResponse,
)

__all__ = [
    "CustomListCreateRequest",
    "DictionaryAddRequest",
    "DictionaryStatsResponse",
    "LearningStatusUpdateRequest",
    "UserListAddRequest",
    "UserListResponse",
    "UserListUpdateRequest",
    "UserListWordRequest",
    "UserWordCustomizeRequest",
    "UserWordResponse",
]
