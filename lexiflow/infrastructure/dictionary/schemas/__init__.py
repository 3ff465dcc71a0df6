"""Dictionary context schemas."""

from lexiflow.infrastructure.dictionary.schemas.word_list_schemas import (
    CategoryCreateRequest,
    CategoryResponse,
    WordListCreateRequest,
    WordListDefinitionRequest,
    WordListResponse,
    WordListUpdateRequest,
)
from lexiflow.infrastructure.dictionary.schemas.word_schemas import (
    DefinitionCreate,
    DefinitionLookupResponse,
    DefinitionResponse,
    WordCreateRequest,
    WordDetailCreate,
    WordDetailResponse,
    WordResponse,
    WordSummary,
)

__all__ = [
    "CategoryCreateRequest",
    "CategoryResponse",
    "DefinitionCreate",
    "DefinitionLookupResponse",
    "DefinitionResponse",
    "WordCreateRequest",
    "WordDetailCreate",
    "WordDetailResponse",
    "WordListCreateRequest",
    "WordListDefinitionRequest",
    "WordListResponse",
    "WordListUpdateRequest",
    "WordResponse",
    "WordSummary",
]
