from .password_service import PasswordService
from .token_service import TokenService

__all__ = [
    "PasswordService",
    "TokenService",
]
