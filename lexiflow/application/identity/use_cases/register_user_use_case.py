"""Use case for user registration."""

import structlog

from lexiflow.application.identity.protocols.password_service import PasswordServiceProtocol
from lexiflow.application.identity.protocols.token_service import TokenServiceProtocol
from lexiflow.application.identity.protocols.user_repository import UserRepositoryProtocol
from lexiflow.domain.dictionary.value_objects import LanguageCode
from lexiflow.domain.identity.entities.user import User
from lexiflow.domain.identity.exceptions import EmailAlreadyExistsError, RegistrationDisabledError
from lexiflow.feature_flags import is_user_registrations_enabled
from lexiflow.infrastructure.identity.services.token_service import TokenWithRefresh

logger = structlog.get_logger(__name__)


class RegisterUserUseCase:
    """Use case for user registration operations."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        token_service: TokenServiceProtocol,
    ) -> None:
        self.user_repository = user_repository
        self.password_service = password_service
        self.token_service = token_service

    def register_user(
        self,
        email: str,
        password: str,
        name: str | None = None,
        base_language_code: LanguageCode = LanguageCode.EN,
        target_language_code: LanguageCode | None = None,
    ) -> tuple[User, TokenWithRefresh]:
        """
        Register a new user account.

        Args:
            email: User's email address
            password: User's plain text password (will be hashed)
            name: Optional display name
            base_language_code: Language translations are shown in
            target_language_code: Language the user is learning (optional)

        Returns:
            Tuple of (created user, token pair for immediate login)

        Raises:
            RegistrationDisabledError: If registration is disabled via feature flag
            EmailAlreadyExistsError: If email is already registered
            ValidationError: If the base and target language are the same
        """
        if not is_user_registrations_enabled():
            raise RegistrationDisabledError

        if self.user_repository.find_by_email(email):
            raise EmailAlreadyExistsError(email)

        hashed_password = self.password_service.hash_password(password)

        user = User.create(
            email=email,
            hashed_password=hashed_password,
            name=name,
            base_language_code=base_language_code,
            target_language_code=target_language_code,
        )
        user = self.user_repository.save(user)
        token_pair = self.token_service.create_token_pair(user.id.value)

        logger.info("user_registered", user_id=user.id.value, email=user.email)

        return user, token_pair
