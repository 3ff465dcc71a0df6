"""
Errors raised by the domain model.

Every class derives from ``DomainError``. The API maps not-found errors to
404, authorization errors to 403 and everything else to 400.
"""


class DomainError(Exception):
    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return f"{self.message} {self.details}" if self.details else self.message


class ValidationError(DomainError):
    """A value broke a field rule, e.g. blank word text or a level outside 0..5."""

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details = {key: item for key, item in (("field", field), ("value", value)) if item is not None}
        super().__init__(message, details)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    def __init__(self, entity_type: str, entity_id: object) -> None:
        super().__init__(
            f"{entity_type} {entity_id} not found",
            {"entity_type": entity_type, "entity_id": entity_id},
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class BusinessRuleViolationError(DomainError):
    """An operation is not allowed in the aggregate's current state."""

    def __init__(self, rule: str, message: str | None = None) -> None:
        super().__init__(message or f"Rule '{rule}' does not allow this", {"rule": rule})
        self.rule = rule


class AuthorizationError(DomainError):
    """The user may read the resource but not change it, e.g. an official word list."""

    def __init__(self, message: str = "You cannot modify this resource") -> None:
        super().__init__(message)
