"""Password hashing with argon2 and an application-wide pepper."""

from functools import cached_property

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError

from lexiflow.config import get_settings


class PasswordService:
    """Hash and verify account passwords."""

    def __init__(self, pepper: str = "") -> None:
        self.pepper = pepper
        self._hasher = PasswordHash.recommended()

    def hash_password(self, password: str) -> str:
        return self._hasher.hash(password + self.pepper)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return self._hasher.verify(plain_password + self.pepper, hashed_password)
        except UnknownHashError:
            return False

    @cached_property
    def dummy_hash(self) -> str:
        # Verified against when the email is unknown so login timing stays uniform
        return self._hasher.hash("lexiflow-unknown-account")

    def get_dummy_hash(self) -> str:
        return self.dummy_hash


def get_password_service() -> PasswordService:
    return PasswordService(pepper=get_settings().PASSWORD_PEPPER)
