from .user_list_repository import UserListRepositoryProtocol
from .user_word_repository import UserWordRepositoryProtocol

__all__ = [
    "UserListRepositoryProtocol",
    "UserWordRepositoryProtocol",
]
