from .category_repository import CategoryRepositoryProtocol
from .word_list_repository import WordListRepositoryProtocol
from .word_repository import WordRepositoryProtocol

__all__ = [
    "CategoryRepositoryProtocol",
    "WordListRepositoryProtocol",
    "WordRepositoryProtocol",
]
