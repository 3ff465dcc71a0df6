from typing import Protocol

from lexiflow.domain.common.value_objects.ids import CategoryId
from lexiflow.domain.dictionary.entities.word_list import Category


class CategoryRepositoryProtocol(Protocol):
    def find_by_id(self, category_id: CategoryId) -> Category | None: ...

    def find_by_name(self, name: str) -> Category | None: ...

    def find_all(self) -> list[Category]: ...

    def save(self, category: Category) -> Category: ...
