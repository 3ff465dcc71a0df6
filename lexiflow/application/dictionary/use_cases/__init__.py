from .category_use_case import CategoryUseCase
from .word_list_use_case import WordListUseCase
from .word_use_case import WordUseCase

__all__ = [
    "CategoryUseCase",
    "WordListUseCase",
    "WordUseCase",
]
