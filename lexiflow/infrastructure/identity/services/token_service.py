"""JWT access and refresh tokens."""

from datetime import UTC, datetime, timedelta

import jwt
from jwt import InvalidTokenError
from pydantic import BaseModel

from lexiflow.config import Settings, get_settings

ALGORITHM = "HS256"


class TokenWithRefresh(BaseModel):
    """Access token plus the refresh token that renews it."""

    access_token: str
    refresh_token: str
    token_type: str
    expires_in: int


class TokenService:
    """
    Issue and check the signed token pair of an authenticated user.

    Access and refresh tokens carry a ``type`` claim so neither can stand in
    for the other, and refresh tokens may be signed with their own key.
    """

    def __init__(
        self,
        secret_key: str,
        access_token_minutes: int,
        refresh_token_days: int,
        refresh_secret_key: str = "",
    ) -> None:
        self.secret_key = secret_key
        self.refresh_secret_key = refresh_secret_key or secret_key
        self.access_lifetime = timedelta(minutes=access_token_minutes)
        self.refresh_lifetime = timedelta(days=refresh_token_days)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret_key=settings.SECRET_KEY,
            access_token_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
            refresh_token_days=settings.REFRESH_TOKEN_EXPIRE_DAYS,
            refresh_secret_key=settings.REFRESH_TOKEN_SECRET_KEY,
        )

    def create_token_pair(self, user_id: int) -> TokenWithRefresh:
        return TokenWithRefresh(
            access_token=self._encode(user_id, "access", self.access_lifetime, self.secret_key),
            refresh_token=self._encode(
                user_id, "refresh", self.refresh_lifetime, self.refresh_secret_key
            ),
            token_type="bearer",  # noqa: S106
            expires_in=int(self.access_lifetime.total_seconds()),
        )

    def verify_access_token(self, token: str) -> int | None:
        """Return the user id of a valid access token, None otherwise."""
        return self._decode(token, "access", self.secret_key)

    def verify_refresh_token(self, token: str) -> int | None:
        """Return the user id of a valid refresh token, None otherwise."""
        return self._decode(token, "refresh", self.refresh_secret_key)

    @staticmethod
    def _encode(user_id: int, token_type: str, lifetime: timedelta, key: str) -> str:
        claims = {"sub": str(user_id), "exp": datetime.now(UTC) + lifetime, "type": token_type}
        return jwt.encode(claims, key, algorithm=ALGORITHM)

    @staticmethod
    def _decode(token: str, token_type: str, key: str) -> int | None:
        try:
            claims = jwt.decode(token, key, algorithms=[ALGORITHM])
        except InvalidTokenError:
            return None
        subject = claims.get("sub")
        if claims.get("type") != token_type or subject is None:
            return None
        try:
            return int(subject)
        except ValueError:
            return None


def get_token_service() -> TokenService:
    return TokenService.from_settings(get_settings())
