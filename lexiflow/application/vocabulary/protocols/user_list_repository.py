"""Protocol for the user's list collection."""

from typing import Protocol

from lexiflow.application.vocabulary.dtos import UserListFilters
from lexiflow.domain.common.value_objects.ids import UserId, UserListId, WordListId
from lexiflow.domain.vocabulary.entities.user_list import UserList


class UserListRepositoryProtocol(Protocol):
    def find_by_id(self, user_list_id: UserListId, user_id: UserId) -> UserList | None:
        """Active collection entry owned by the user."""
        ...

    def find_by_list_id(self, user_id: UserId, list_id: WordListId) -> UserList | None:
        """The user's entry for a public list, including a removed one."""
        ...

    def find_filtered(self, user_id: UserId, filters: UserListFilters) -> list[UserList]:
        """
        Active entries matching the filters.

        Name, difficulty and language filters fall back to the adopted word
        list when the entry has no custom value.
        """
        ...

    def save(self, user_list: UserList) -> UserList: ...
