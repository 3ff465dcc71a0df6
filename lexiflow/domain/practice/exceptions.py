"""Practice domain exceptions."""

from lexiflow.domain.common.exceptions import BusinessRuleViolationError, EntityNotFoundError


class LearningSessionNotFoundError(EntityNotFoundError):
    def __init__(self, session_id: int) -> None:
        super().__init__("Learning session", session_id)


class SessionAlreadyEndedError(BusinessRuleViolationError):
    """Raised when an ended session receives attempts or is ended again."""

    def __init__(self, session_id: int) -> None:
        super().__init__(
            "session_active", f"Learning session {session_id} has already ended"
        )
        self.session_id = session_id


class NoWordsAvailableError(BusinessRuleViolationError):
    def __init__(self) -> None:
        super().__init__("words_available", "No words are available for practice")


class SessionPausedError(BusinessRuleViolationError):
    """Raised when a paused session receives attempts or is paused again."""

    def __init__(self, session_id: int) -> None:
        super().__init__("session_running", f"Learning session {session_id} is paused")
        self.session_id = session_id


class SessionNotPausedError(BusinessRuleViolationError):
    def __init__(self, session_id: int) -> None:
        super().__init__("session_paused", f"Learning session {session_id} is not paused")
        self.session_id = session_id
