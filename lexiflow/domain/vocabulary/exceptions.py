"""User dictionary domain exceptions."""

from lexiflow.domain.common.exceptions import DomainError, EntityNotFoundError


class UserWordNotFoundError(EntityNotFoundError):
    def __init__(self, user_word_id: int) -> None:
        super().__init__("Dictionary entry", user_word_id)


class UserListNotFoundError(EntityNotFoundError):
    def __init__(self, user_list_id: int) -> None:
        super().__init__("User list", user_list_id)


class WordAlreadyInDictionaryError(DomainError):
    """Raised when a definition is already an active entry in the user's dictionary."""

    def __init__(self, definition_id: int) -> None:
        super().__init__(
            f"Definition {definition_id} is already in your dictionary",
            {"definition_id": definition_id},
        )
        self.definition_id = definition_id


class ListAlreadyInCollectionError(DomainError):
    def __init__(self, list_id: int) -> None:
        super().__init__(
            f"List {list_id} is already in your collection", {"list_id": list_id}
        )
        self.list_id = list_id
