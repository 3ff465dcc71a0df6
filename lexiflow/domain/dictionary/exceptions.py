"""Dictionary domain exceptions."""

from lexiflow.domain.common.exceptions import DomainError, EntityNotFoundError


class WordNotFoundError(EntityNotFoundError):
    def __init__(self, word_id: int) -> None:
        super().__init__("Word", word_id)


class DefinitionNotFoundError(EntityNotFoundError):
    def __init__(self, definition_id: int) -> None:
        super().__init__("Definition", definition_id)


class WordListNotFoundError(EntityNotFoundError):
    def __init__(self, list_id: int) -> None:
        super().__init__("Word list", list_id)


class CategoryNotFoundError(EntityNotFoundError):
    def __init__(self, category_id: int) -> None:
        super().__init__("Category", category_id)


class WordAlreadyExistsError(DomainError):
    """Raised when a word with the same text already exists for a language."""

    def __init__(self, text: str, language_code: str) -> None:
        super().__init__(
            f"Word '{text}' already exists for language {language_code}",
            {"text": text, "language_code": language_code},
        )
        self.text = text
        self.language_code = language_code
