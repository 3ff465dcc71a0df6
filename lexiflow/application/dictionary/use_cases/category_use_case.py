"""Use case for word list categories."""

import structlog

from lexiflow.application.dictionary.protocols.category_repository import (
    CategoryRepositoryProtocol,
)
from lexiflow.domain.common.exceptions import DomainError
from lexiflow.domain.dictionary.entities.word_list import Category

logger = structlog.get_logger(__name__)


class CategoryUseCase:
    def __init__(self, category_repository: CategoryRepositoryProtocol) -> None:
        self.category_repository = category_repository

    def create_category(self, name: str, description: str | None = None) -> Category:
        """
        Create a category.

        Raises:
            ValidationError: If the name is empty
            DomainError: If a category with the same name exists
        """
        category = Category.create(name=name, description=description)
        if self.category_repository.find_by_name(category.name):
            raise DomainError(f"Category '{category.name}' already exists", {"name": category.name})

        category = self.category_repository.save(category)
        logger.info("category_created", category_id=category.id.value, name=category.name)
        return category

    def list_categories(self) -> list[Category]:
        return self.category_repository.find_all()
