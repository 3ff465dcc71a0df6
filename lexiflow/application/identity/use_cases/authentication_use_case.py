"""Sign-in, token refresh and the account lookup behind every authenticated request."""

import structlog

from lexiflow.application.identity.protocols.password_service import PasswordServiceProtocol
from lexiflow.application.identity.protocols.token_service import TokenServiceProtocol
from lexiflow.application.identity.protocols.user_repository import UserRepositoryProtocol
from lexiflow.domain.common.value_objects.ids import UserId
from lexiflow.domain.identity.entities.user import User
from lexiflow.domain.identity.exceptions import InvalidCredentialsError, UserNotFoundError
from lexiflow.infrastructure.identity.services.token_service import TokenWithRefresh

logger = structlog.get_logger(__name__)


class AuthenticationUseCase:
    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        token_service: TokenServiceProtocol,
    ) -> None:
        self.user_repository = user_repository
        self.password_service = password_service
        self.token_service = token_service

    def authenticate_user(self, email: str, password: str) -> tuple[User, TokenWithRefresh]:
        """
        Check a learner's email and password and open a session for them.

        Deleted accounts are treated like unknown emails.

        Returns:
            The learner and a fresh access/refresh token pair

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        user = self.user_repository.find_by_email(email)
        if user is None:
            # Same hashing cost as a real check so response time does not reveal the email
            self.password_service.verify_password(password, self.password_service.get_dummy_hash())
            raise InvalidCredentialsError
        if not user.has_password() or not self.password_service.verify_password(
            password, user.hashed_password or ""
        ):
            logger.info("login_rejected", user_id=user.id.value)
            raise InvalidCredentialsError

        return user, self._issue_tokens(user, "user_authenticated")

    def refresh_access_token(self, refresh_token: str) -> tuple[User, TokenWithRefresh]:
        """
        Trade a refresh token for a new token pair.

        Raises:
            InvalidCredentialsError: If the token is invalid or its account is gone
        """
        user_id = self.token_service.verify_refresh_token(refresh_token)
        user = self.user_repository.find_by_id(UserId(user_id)) if user_id is not None else None
        if user is None:
            raise InvalidCredentialsError
        return user, self._issue_tokens(user, "access_token_refreshed")

    def get_user_by_id(self, user_id: int) -> User:
        """
        Raises:
            UserNotFoundError: If there is no active account with this id
        """
        user = self.user_repository.find_by_id(UserId(user_id))
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def _issue_tokens(self, user: User, event: str) -> TokenWithRefresh:
        token_pair = self.token_service.create_token_pair(user.id.value)
        logger.info(event, user_id=user.id.value)
        return token_pair
