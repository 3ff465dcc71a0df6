import logging
from typing import Annotated

from fastapi import APIRouter, Cookie, Depends, HTTPException, Request, Response
from fastapi.security import OAuth2PasswordRequestForm
from pydantic import BaseModel
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette import status

from lexiflow.application.identity.use_cases.authentication_use_case import (
    AuthenticationUseCase,
)
from lexiflow.config import get_settings
from lexiflow.core import container
from lexiflow.domain.identity.exceptions import InvalidCredentialsError
from lexiflow.infrastructure.common.di import inject_use_case
from lexiflow.infrastructure.common.schemas.response_wrappers import SuccessResponse
from lexiflow.infrastructure.identity.schemas import LoginResponse
from lexiflow.infrastructure.identity.services.token_service import TokenWithRefresh

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])
limiter = Limiter(key_func=get_remote_address)
settings = get_settings()

REFRESH_COOKIE = "refresh_token"


class RefreshTokenRequest(BaseModel):
    """Refresh token in the body, for clients that cannot keep cookies."""

    refresh_token: str | None = None


def _cookie_options() -> dict[str, object]:
    return {
        "httponly": True,
        "secure": settings.COOKIE_SECURE,
        "samesite": "strict",
        "path": f"{settings.API_V1_PREFIX}/auth",
    }


def set_refresh_cookie(response: Response, refresh_token: str) -> None:
    """Store the refresh token in an httpOnly cookie scoped to the auth routes."""
    response.set_cookie(
        key=REFRESH_COOKIE,
        value=refresh_token,
        max_age=settings.REFRESH_TOKEN_EXPIRE_DAYS * 24 * 60 * 60,
        **_cookie_options(),  # type: ignore[arg-type]
    )


def clear_refresh_cookie(response: Response) -> None:
    response.delete_cookie(key=REFRESH_COOKIE, **_cookie_options())  # type: ignore[arg-type]


@router.post("/login", response_model=LoginResponse)
@limiter.limit("5/minute")  # type: ignore[misc]
async def login(
    request: Request,
    response: Response,
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    use_case: AuthenticationUseCase = Depends(inject_use_case(container.authentication_use_case)),
) -> LoginResponse:
    """
    Sign in with email and password.

    The OAuth2 form field ``username`` carries the email. The refresh token is
    returned in the body and also set as a cookie.
    """
    try:
        user, token_pair = use_case.authenticate_user(form_data.username, form_data.password)
    except InvalidCredentialsError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        ) from None
    set_refresh_cookie(response, token_pair.refresh_token)
    return LoginResponse.build(user, token_pair)


@router.post("/refresh")
@limiter.limit("10/minute")  # type: ignore[misc]
async def refresh(
    request: Request,
    response: Response,
    body: RefreshTokenRequest | None = None,
    refresh_token: Annotated[str | None, Cookie()] = None,
    use_case: AuthenticationUseCase = Depends(inject_use_case(container.authentication_use_case)),
) -> TokenWithRefresh:
    """
    Exchange a refresh token for a new token pair.

    The cookie wins when both the cookie and the body carry a token.
    """
    token = refresh_token or (body.refresh_token if body else None)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Refresh token required",
        )

    try:
        _, token_pair = use_case.refresh_access_token(token)
    except InvalidCredentialsError:
        clear_refresh_cookie(response)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired refresh token",
        ) from None
    set_refresh_cookie(response, token_pair.refresh_token)
    return token_pair


@router.post("/logout", response_model=SuccessResponse)
async def logout(response: Response) -> SuccessResponse:
    """Drop the refresh cookie. Issued access tokens run until they expire."""
    clear_refresh_cookie(response)
    return SuccessResponse(success=True, message="Logged out successfully")
