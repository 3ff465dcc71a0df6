from typing import Protocol

from lexiflow.domain.common.value_objects.ids import UserId
from lexiflow.domain.identity.entities.user import User


class UserRepositoryProtocol(Protocol):
    """Storage of learner accounts. Lookups skip deleted accounts."""

    def find_by_id(self, user_id: UserId) -> User | None: ...

    def find_by_email(self, email: str) -> User | None:
        """Find an active account by email, compared case-insensitively."""
        ...

    def save(self, user: User) -> User:
        """Insert or update the account with its settings; returns the stored state."""
        ...
