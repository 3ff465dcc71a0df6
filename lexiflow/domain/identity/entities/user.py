"""User entity for identity management."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from lexiflow.domain.common.entity import Entity
from lexiflow.domain.common.exceptions import DomainError, ValidationError
from lexiflow.domain.common.value_objects.ids import UserId
from lexiflow.domain.dictionary.value_objects import LanguageCode
from lexiflow.domain.identity.value_objects import LearningSettings, TypingPracticePreferences

MAX_EMAIL_LENGTH = 100
MAX_NAME_LENGTH = 100
ACCOUNT_DELETION_CONFIRMATION = "DELETE"


@dataclass
class User(Entity[UserId]):
    """
    A learner.

    Business Rules:
    - Email must be unique (enforced at repository level); a deleted account keeps it
    - Email is stored trimmed and lowercased, non-empty and at most MAX_EMAIL_LENGTH chars
    - ``base_language_code`` is the language translations are shown in
    - ``target_language_code``, when set, must differ from the base language
    - A deleted account stays in storage with ``deleted_at`` set and cannot sign in
    """

    id: UserId
    email: str
    name: str | None = None
    base_language_code: LanguageCode = LanguageCode.EN
    target_language_code: LanguageCode | None = None
    hashed_password: str | None = None
    learning_settings: LearningSettings = field(default_factory=LearningSettings)
    typing_preferences: TypingPracticePreferences = field(
        default_factory=TypingPracticePreferences
    )
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    def __post_init__(self) -> None:
        self.email = _normalize_email(self.email)
        _validate_email(self.email)
        if self.name is not None:
            _validate_name(self.name)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def has_password(self) -> bool:
        return self.hashed_password is not None

    def update_email(self, new_email: str) -> None:
        """
        Update the user's email address.

        Raises:
            ValidationError: If email is invalid
        """
        new_email = _normalize_email(new_email)
        _validate_email(new_email)
        self.email = new_email

    def update_name(self, new_name: str) -> None:
        _validate_name(new_name)
        self.name = new_name.strip()

    def change_base_language(self, language_code: LanguageCode) -> None:
        if language_code == self.target_language_code:
            raise ValidationError(
                "Base and target language must differ",
                field="base_language_code",
                value=language_code.value,
            )
        self.base_language_code = language_code

    def change_target_language(self, language_code: LanguageCode) -> None:
        if language_code == self.base_language_code:
            raise ValidationError(
                "Base and target language must differ",
                field="target_language_code",
                value=language_code.value,
            )
        self.target_language_code = language_code

    def update_password(self, new_hashed_password: str) -> None:
        """Replace the password hash (hashing is done by infrastructure)."""
        self.hashed_password = new_hashed_password

    # Settings and preferences

    def update_learning_settings(self, **changes: Any) -> LearningSettings:
        """
        Merge ``changes`` into the learning settings. ``None`` values keep the current value.

        Raises:
            ValidationError: If a value is out of range
        """
        self.learning_settings = self.learning_settings.with_changes(**changes)
        return self.learning_settings

    def update_typing_preferences(self, **changes: Any) -> TypingPracticePreferences:
        self.typing_preferences = self.typing_preferences.with_changes(**changes)
        return self.typing_preferences

    def reset_typing_preferences(self) -> TypingPracticePreferences:
        self.typing_preferences = TypingPracticePreferences()
        return self.typing_preferences

    def study_preferences(self) -> dict[str, dict[str, Any]]:
        """All practice preferences keyed by practice type."""
        return {"typing_practice": self.typing_preferences.to_dict()}

    def delete_account(self, confirmation: str, now: datetime) -> None:
        """
        Soft delete the account.

        Raises:
            ValidationError: If ``confirmation`` is not ACCOUNT_DELETION_CONFIRMATION
            DomainError: If the account is already deleted
        """
        if confirmation != ACCOUNT_DELETION_CONFIRMATION:
            raise ValidationError(
                f'Please type "{ACCOUNT_DELETION_CONFIRMATION}" to confirm account deletion',
                field="confirmation",
            )
        if self.is_deleted:
            raise DomainError("Account is already deleted")
        self.deleted_at = now

    @classmethod
    def create(
        cls,
        email: str,
        hashed_password: str | None = None,
        name: str | None = None,
        base_language_code: LanguageCode = LanguageCode.EN,
        target_language_code: LanguageCode | None = None,
    ) -> "User":
        """Create a new user (ID will be 0 until persisted)."""
        user = cls(
            id=UserId.generate(),
            email=email,
            name=name,
            base_language_code=base_language_code,
            hashed_password=hashed_password,
        )
        if target_language_code is not None:
            user.change_target_language(target_language_code)
        return user

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        email: str,
        name: str | None,
        base_language_code: LanguageCode,
        target_language_code: LanguageCode | None,
        hashed_password: str | None,
        learning_settings: LearningSettings,
        typing_preferences: TypingPracticePreferences,
        created_at: datetime,
        updated_at: datetime,
        deleted_at: datetime | None = None,
    ) -> "User":
        """Reconstitute a user from persistence."""
        return cls(
            id=id,
            email=email,
            name=name,
            base_language_code=base_language_code,
            target_language_code=target_language_code,
            hashed_password=hashed_password,
            learning_settings=learning_settings,
            typing_preferences=typing_preferences,
            created_at=created_at,
            updated_at=updated_at,
            deleted_at=deleted_at,
        )


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def _validate_email(email: str) -> None:
    if not email:
        raise ValidationError("Email cannot be empty", field="email", value=email)
    if len(email) > MAX_EMAIL_LENGTH:
        raise ValidationError(
            f"Email cannot exceed {MAX_EMAIL_LENGTH} characters", field="email", value=email
        )


def _validate_name(name: str) -> None:
    if not name.strip():
        raise ValidationError("Name cannot be empty", field="name", value=name)
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"Name cannot exceed {MAX_NAME_LENGTH} characters", field="name", value=name
        )
