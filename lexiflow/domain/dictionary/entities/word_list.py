"""
Word list aggregate and its category.

Official lists have no owner and are curated; community lists are public lists
owned by a user.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from lexiflow.domain.common.aggregate_root import AggregateRoot
from lexiflow.domain.common.entity import Entity
from lexiflow.domain.common.exceptions import AuthorizationError, DomainError, ValidationError
from lexiflow.domain.common.value_objects.ids import CategoryId, DefinitionId, UserId, WordListId
from lexiflow.domain.dictionary.value_objects import DifficultyLevel, LanguageCode

MAX_LIST_NAME_LENGTH = 255


@dataclass
class Category(Entity[CategoryId]):
    id: CategoryId
    name: str
    description: str | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Category name cannot be empty", field="name")

    @classmethod
    def create(cls, name: str, description: str | None = None) -> "Category":
        return cls(id=CategoryId.generate(), name=name.strip(), description=description)


@dataclass
class WordList(AggregateRoot[WordListId]):
    """
    A curated, ordered list of definitions.

    Business Rules:
    - Name cannot be empty
    - A definition appears at most once; order is insertion order
    - Only the owner may modify an owned list; official lists have no owner
    - Deleted lists keep their content and can be restored
    """

    id: WordListId
    name: str
    base_language_code: LanguageCode
    target_language_code: LanguageCode
    category_id: CategoryId | None = None
    description: str | None = None
    owner_id: UserId | None = None
    is_public: bool = True
    tags: list[str] = field(default_factory=list)
    cover_image_url: str | None = None
    difficulty_level: DifficultyLevel = DifficultyLevel.BEGINNER
    definition_ids: list[DefinitionId] = field(default_factory=list)
    learned_word_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    def __post_init__(self) -> None:
        _validate_name(self.name)

    @property
    def word_count(self) -> int:
        return len(self.definition_ids)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def is_official(self) -> bool:
        return self.owner_id is None

    def ensure_editable_by(self, user_id: UserId) -> None:
        """
        Raises:
            AuthorizationError: If the list is official or owned by somebody else
        """
        if self.is_official:
            raise AuthorizationError("Official lists are read-only")
        if self.owner_id != user_id:
            raise AuthorizationError("Only the owner can modify this list")

    def update_details(
        self,
        name: str | None = None,
        description: str | None = None,
        difficulty_level: DifficultyLevel | None = None,
        is_public: bool | None = None,
        tags: list[str] | None = None,
        cover_image_url: str | None = None,
        category_id: CategoryId | None = None,
    ) -> None:
        if name is not None:
            _validate_name(name)
            self.name = name.strip()
        if description is not None:
            self.description = description
        if difficulty_level is not None:
            self.difficulty_level = difficulty_level
        if is_public is not None:
            self.is_public = is_public
        if tags is not None:
            self.tags = _normalize_tags(tags)
        if cover_image_url is not None:
            self.cover_image_url = cover_image_url
        if category_id is not None:
            self.category_id = category_id

    def add_definition(self, definition_id: DefinitionId) -> bool:
        """Append a definition. Returns False when it was already present."""
        if definition_id in self.definition_ids:
            return False
        self.definition_ids.append(definition_id)
        return True

    def remove_definition(self, definition_id: DefinitionId) -> bool:
        if definition_id not in self.definition_ids:
            return False
        self.definition_ids.remove(definition_id)
        return True

    def soft_delete(self, now: datetime | None = None) -> None:
        if self.is_deleted:
            raise DomainError("Word list is already deleted")
        self.deleted_at = now or datetime.now(UTC)

    def restore(self) -> None:
        if not self.is_deleted:
            raise DomainError("Word list is not deleted")
        self.deleted_at = None

    @classmethod
    def create(
        cls,
        name: str,
        base_language_code: LanguageCode,
        target_language_code: LanguageCode,
        owner_id: UserId | None = None,
        description: str | None = None,
        category_id: CategoryId | None = None,
        is_public: bool = True,
        tags: list[str] | None = None,
        cover_image_url: str | None = None,
        difficulty_level: DifficultyLevel = DifficultyLevel.BEGINNER,
    ) -> "WordList":
        """Create a new list (ID will be 0 until persisted)."""
        return cls(
            id=WordListId.generate(),
            name=name.strip(),
            base_language_code=base_language_code,
            target_language_code=target_language_code,
            owner_id=owner_id,
            description=description,
            category_id=category_id,
            is_public=is_public,
            tags=_normalize_tags(tags or []),
            cover_image_url=cover_image_url,
            difficulty_level=difficulty_level,
        )


def _validate_name(name: str) -> None:
    if not name or not name.strip():
        raise ValidationError("List name cannot be empty", field="name", value=name)
    if len(name) > MAX_LIST_NAME_LENGTH:
        raise ValidationError(
            f"List name cannot exceed {MAX_LIST_NAME_LENGTH} characters", field="name"
        )


def _normalize_tags(tags: list[str]) -> list[str]:
    seen: list[str] = []
    for tag in tags:
        cleaned = tag.strip().lower()
        if cleaned and cleaned not in seen:
            seen.append(cleaned)
    return seen
