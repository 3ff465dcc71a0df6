"""Custom exception hierarchy for the Lexiflow application."""

from fastapi import HTTPException
from starlette import status


class LexiflowError(Exception):
    """Base exception for all Lexiflow errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(LexiflowError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=404)


class ValidationError(LexiflowError):
    """Validation error."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code=status_code)


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
