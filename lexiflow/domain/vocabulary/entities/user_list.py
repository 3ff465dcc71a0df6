"""
UserList: a list in a user's collection.

Either a reference to a public WordList (``list_id`` set) or a custom list
built by the user. Words are referenced by dictionary entry so progress can
be computed per user.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from lexiflow.domain.common.aggregate_root import AggregateRoot
from lexiflow.domain.common.exceptions import DomainError, ValidationError
from lexiflow.domain.common.value_objects.ids import UserId, UserListId, UserWordId, WordListId
from lexiflow.domain.dictionary.value_objects import DifficultyLevel, LanguageCode
from lexiflow.utils import round_to


@dataclass
class UserList(AggregateRoot[UserListId]):
    """
    Business Rules:
    - Custom lists must have a custom name
    - A dictionary entry appears at most once
    - Editing the name, description or cover of an inherited list marks it modified
    """

    id: UserListId
    user_id: UserId
    base_language_code: LanguageCode
    target_language_code: LanguageCode
    list_id: WordListId | None = None
    custom_name: str | None = None
    custom_description: str | None = None
    custom_cover_image_url: str | None = None
    custom_difficulty: DifficultyLevel | None = None
    is_modified: bool = False
    user_word_ids: list[UserWordId] = field(default_factory=list)
    progress: float = 0.0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.list_id is None and not (self.custom_name and self.custom_name.strip()):
            raise ValidationError("Custom lists need a name", field="custom_name")

    @property
    def is_custom(self) -> bool:
        return self.list_id is None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def word_count(self) -> int:
        return len(self.user_word_ids)

    def customize(
        self,
        custom_name: str | None = None,
        custom_description: str | None = None,
        custom_cover_image_url: str | None = None,
        custom_difficulty: DifficultyLevel | None = None,
    ) -> None:
        if custom_name is not None:
            if not custom_name.strip():
                raise ValidationError("List name cannot be empty", field="custom_name")
            self.custom_name = custom_name.strip()
        if custom_description is not None:
            self.custom_description = custom_description
        if custom_cover_image_url is not None:
            self.custom_cover_image_url = custom_cover_image_url
        if custom_difficulty is not None:
            self.custom_difficulty = custom_difficulty
        if not self.is_custom and any(
            value is not None for value in (custom_name, custom_description, custom_cover_image_url)
        ):
            self.is_modified = True

    def add_word(self, user_word_id: UserWordId) -> bool:
        if user_word_id in self.user_word_ids:
            return False
        self.user_word_ids.append(user_word_id)
        return True

    def remove_word(self, user_word_id: UserWordId) -> bool:
        if user_word_id not in self.user_word_ids:
            return False
        self.user_word_ids.remove(user_word_id)
        return True

    def update_progress(self, learned_count: int) -> float:
        """Recompute progress as the learned share of the list, 0..100."""
        if not self.user_word_ids:
            self.progress = 0.0
        else:
            self.progress = round_to(min(learned_count / len(self.user_word_ids), 1.0) * 100, 2)
        return self.progress

    def soft_delete(self, now: datetime | None = None) -> None:
        if self.is_deleted:
            raise DomainError("List is already removed from the collection")
        self.deleted_at = now or datetime.now(UTC)

    def restore(self) -> None:
        self.deleted_at = None

    @classmethod
    def create_from_list(
        cls,
        user_id: UserId,
        list_id: WordListId,
        base_language_code: LanguageCode,
        target_language_code: LanguageCode,
        user_word_ids: list[UserWordId],
    ) -> "UserList":
        return cls(
            id=UserListId.generate(),
            user_id=user_id,
            list_id=list_id,
            base_language_code=base_language_code,
            target_language_code=target_language_code,
            user_word_ids=list(dict.fromkeys(user_word_ids)),
        )

    @classmethod
    def create_custom(
        cls,
        user_id: UserId,
        name: str,
        base_language_code: LanguageCode,
        target_language_code: LanguageCode,
        description: str | None = None,
        difficulty: DifficultyLevel | None = None,
    ) -> "UserList":
        return cls(
            id=UserListId.generate(),
            user_id=user_id,
            base_language_code=base_language_code,
            target_language_code=target_language_code,
            custom_name=name.strip() if name else name,
            custom_description=description,
            custom_difficulty=difficulty,
        )
