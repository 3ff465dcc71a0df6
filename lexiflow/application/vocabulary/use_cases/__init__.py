from .user_dictionary_use_case import UserDictionaryUseCase
from .user_list_use_case import UserListUseCase

__all__ = [
    "UserDictionaryUseCase",
    "UserListUseCase",
]
