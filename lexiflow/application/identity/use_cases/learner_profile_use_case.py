"""Use case for learning settings, practice preferences and account deletion."""

from typing import Any

import structlog

from lexiflow.application.identity.protocols.user_repository import UserRepositoryProtocol
from lexiflow.domain.common.value_objects.ids import UserId
from lexiflow.domain.identity.entities.user import User
from lexiflow.domain.identity.exceptions import UserNotFoundError
from lexiflow.domain.identity.value_objects import LearningSettings, TypingPracticePreferences
from lexiflow.utils import utc_now

logger = structlog.get_logger(__name__)


class LearnerProfileUseCase:
    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        self.user_repository = user_repository

    def get_learning_settings(self, user_id: int) -> LearningSettings:
        return self._get_user(user_id).learning_settings

    def update_learning_settings(self, user_id: int, **changes: Any) -> LearningSettings:
        """
        Merge the given values into the learner's settings.

        Raises:
            UserNotFoundError: If the account does not exist
            ValidationError: If a value is out of range
        """
        user = self._get_user(user_id)
        user.update_learning_settings(**changes)
        user = self.user_repository.save(user)
        logger.info(
            "learning_settings_updated",
            user_id=user_id,
            fields=sorted(key for key, value in changes.items() if value is not None),
        )
        return user.learning_settings

    def get_typing_preferences(self, user_id: int) -> TypingPracticePreferences:
        """Stored typing preferences, with defaults for anything never set."""
        return self._get_user(user_id).typing_preferences

    def update_typing_preferences(self, user_id: int, **changes: Any) -> TypingPracticePreferences:
        user = self._get_user(user_id)
        user.update_typing_preferences(**changes)
        user = self.user_repository.save(user)
        logger.info("typing_preferences_updated", user_id=user_id)
        return user.typing_preferences

    def reset_typing_preferences(self, user_id: int) -> TypingPracticePreferences:
        user = self._get_user(user_id)
        user.reset_typing_preferences()
        user = self.user_repository.save(user)
        logger.info("typing_preferences_reset", user_id=user_id)
        return user.typing_preferences

    def get_study_preferences(self, user_id: int) -> dict[str, dict[str, Any]]:
        return self._get_user(user_id).study_preferences()

    def delete_account(self, user_id: int, confirmation: str) -> None:
        """
        Soft delete the learner's account. Their data is kept, but the account
        can no longer sign in and its tokens stop working.

        Raises:
            ValidationError: If ``confirmation`` is not "DELETE"
        """
        user = self._get_user(user_id)
        user.delete_account(confirmation, utc_now())
        self.user_repository.save(user)
        logger.info("account_deleted", user_id=user_id)

    def _get_user(self, user_id: int) -> User:
        user = self.user_repository.find_by_id(UserId(user_id))
        if user is None:
            raise UserNotFoundError(user_id)
        return user
