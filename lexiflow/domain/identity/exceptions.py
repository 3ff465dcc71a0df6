from lexiflow.domain.common.exceptions import DomainError, EntityNotFoundError


class UserNotFoundError(EntityNotFoundError):
    def __init__(self, user_id: int) -> None:
        super().__init__("User", user_id)


class EmailAlreadyExistsError(DomainError):
    def __init__(self, email: str) -> None:
        super().__init__("Email already registered", {"email": email})
        self.email = email


class InvalidCredentialsError(DomainError):
    def __init__(self) -> None:
        super().__init__("Incorrect email or password")


class PasswordVerificationError(DomainError):
    """The current password sent with a password change did not match."""

    def __init__(self) -> None:
        super().__init__("Current password is incorrect")


class RegistrationDisabledError(DomainError):
    def __init__(self) -> None:
        super().__init__("User registration is currently disabled")
