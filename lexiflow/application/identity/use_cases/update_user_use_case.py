"""Use case for user profile management."""

import structlog

from lexiflow.application.identity.protocols.password_service import PasswordServiceProtocol
from lexiflow.application.identity.protocols.user_repository import UserRepositoryProtocol
from lexiflow.domain.common.value_objects.ids import UserId
from lexiflow.domain.dictionary.value_objects import LanguageCode
from lexiflow.domain.identity.entities.user import User
from lexiflow.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    PasswordVerificationError,
    UserNotFoundError,
)

logger = structlog.get_logger(__name__)


class UpdateUserUseCase:
    """Use case for user profile operations."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
    ) -> None:
        self.user_repository = user_repository
        self.password_service = password_service

    def update_user(
        self,
        user_id: int,
        email: str | None = None,
        name: str | None = None,
        base_language_code: LanguageCode | None = None,
        target_language_code: LanguageCode | None = None,
        current_password: str | None = None,
        new_password: str | None = None,
    ) -> User:
        """
        Update the user's profile.

        Args:
            user_id: ID of the user to update
            email: New email address (optional)
            name: New display name (optional)
            base_language_code: New base language (optional)
            target_language_code: New language to learn (optional)
            current_password: Current password for verification (required if changing password)
            new_password: New password (optional)

        Returns:
            Updated user entity

        Raises:
            UserNotFoundError: If user is not found
            PasswordVerificationError: If current_password is missing or incorrect
            EmailAlreadyExistsError: If another account uses the new email
            ValidationError: If email or name is invalid, or both languages are the same
        """
        user = self.user_repository.find_by_id(UserId(user_id))
        if not user:
            raise UserNotFoundError(user_id)

        if email is not None and email.strip().lower() != user.email:
            existing = self.user_repository.find_by_email(email)
            if existing and existing.id != user.id:
                raise EmailAlreadyExistsError(email)
            user.update_email(email)

        if name is not None:
            user.update_name(name)

        if base_language_code is not None:
            user.change_base_language(base_language_code)

        if target_language_code is not None:
            user.change_target_language(target_language_code)

        if new_password is not None:
            if current_password is None:
                raise PasswordVerificationError

            if not user.hashed_password or not self.password_service.verify_password(
                current_password, user.hashed_password
            ):
                raise PasswordVerificationError

            user.update_password(self.password_service.hash_password(new_password))

        user = self.user_repository.save(user)

        logger.info("user_profile_updated", user_id=user_id)

        return user
