"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from lexiflow.config import get_settings
from lexiflow.database import DatabaseSession
from lexiflow.domain.identity.entities.user import User
from lexiflow.domain.identity.exceptions import UserNotFoundError
from lexiflow.exceptions import CredentialsException
from lexiflow.infrastructure.common.di import request_scope

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{get_settings().API_V1_PREFIX}/auth/login")


async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)], db: DatabaseSession
) -> User:
    """
    Resolve the learner behind a bearer access token.

    Raises:
        CredentialsException: If the token is invalid or the account is gone or deleted
    """
    with request_scope(db) as scope:
        user_id = scope.token_service().verify_access_token(token)
        if user_id is None:
            raise CredentialsException
        try:
            return scope.authentication_use_case().get_user_by_id(user_id)
        except UserNotFoundError:
            raise CredentialsException from None
