import logging
from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from lexiflow.application.practice.dtos import SessionHistoryFilters
from lexiflow.application.practice.use_cases.learning_session_use_case import (
    LearningSessionUseCase,
)
from lexiflow.application.practice.use_cases.practice_attempt_use_case import (
    PracticeAttemptUseCase,
)
from lexiflow.core import container
from lexiflow.domain.common.exceptions import DomainError
from lexiflow.domain.identity.entities.user import User
from lexiflow.domain.practice.value_objects import SessionType
from lexiflow.exceptions import LexiflowError
from lexiflow.infrastructure.common.di import inject_use_case
from lexiflow.infrastructure.common.schemas.response_wrappers import PaginatedResponse
from lexiflow.infrastructure.identity.dependencies import get_current_user
from lexiflow.infrastructure.practice.schemas import (
    AttemptRequest,
    AttemptResponse,
    DailyProgressSummaryResponse,
    SessionResponse,
    SessionStartRequest,
    SessionStartResponse,
    SessionStatsResponse,
    SessionSummaryResponse,
    SessionUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/practice/sessions", tags=["practice"])


def _unexpected(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.post("", response_model=SessionStartResponse, status_code=status.HTTP_201_CREATED)
def start_session(
    request: SessionStartRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: LearningSessionUseCase = Depends(
        inject_use_case(container.learning_session_use_case)
    ),
) -> SessionStartResponse:
    """
    Start a practice session.

    The response carries the session together with the words picked for it
    and the first exercise for each word.

    Raises:
        HTTPException: 400 if there are no words to practice
    """
    try:
        start = use_case.start_session(
            current_user.id.value,
            request.session_type,
            user_list_id=request.user_list_id,
            list_id=request.list_id,
            word_count=request.word_count,
            difficulty=request.difficulty,
            enabled_exercises=request.enabled_exercises,
            skip_remember_translation=request.skip_remember_translation,
        )
        return SessionStartResponse.from_start(start)
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"start session for user {current_user.id.value}", e) from e


@router.get("/active", response_model=SessionResponse | None)
def get_active_session(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: LearningSessionUseCase = Depends(
        inject_use_case(container.learning_session_use_case)
    ),
) -> SessionResponse | None:
    """Get the most recent session that has not ended, if any."""
    session = use_case.get_active_session(current_user.id.value)
    return SessionResponse.from_domain(session) if session else None


@router.get("/history", response_model=PaginatedResponse[SessionResponse])
def get_session_history(
    current_user: Annotated[User, Depends(get_current_user)],
    session_type: SessionType | None = Query(None),
    user_list_id: int | None = Query(None),
    list_id: int | None = Query(None),
    start_date: datetime | None = Query(None),
    end_date: datetime | None = Query(None),
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    use_case: LearningSessionUseCase = Depends(
        inject_use_case(container.learning_session_use_case)
    ),
) -> PaginatedResponse[SessionResponse]:
    """List past sessions, newest first."""
    try:
        filters = SessionHistoryFilters(
            session_type=session_type,
            user_list_id=user_list_id,
            list_id=list_id,
            start_date=start_date,
            end_date=end_date,
        )
        result = use_case.get_history(current_user.id.value, filters, page, page_size)
        return PaginatedResponse[SessionResponse].from_result(
            result,
            [SessionResponse.from_domain(session, include_items=False) for session in result.items],
        )
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"get session history for user {current_user.id.value}", e) from e


@router.get("/stats", response_model=SessionStatsResponse)
def get_session_stats(
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: LearningSessionUseCase = Depends(
        inject_use_case(container.learning_session_use_case)
    ),
) -> SessionStatsResponse:
    try:
        return SessionStatsResponse.from_stats(use_case.get_stats(current_user.id.value))
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"get session stats for user {current_user.id.value}", e) from e


@router.get("/daily-progress", response_model=DailyProgressSummaryResponse)
def get_daily_progress(
    current_user: Annotated[User, Depends(get_current_user)],
    days: int = Query(7, ge=1, le=365),
    use_case: LearningSessionUseCase = Depends(
        inject_use_case(container.learning_session_use_case)
    ),
) -> DailyProgressSummaryResponse:
    """Study totals per day for the last ``days`` days, today included."""
    try:
        summary = use_case.get_daily_progress(current_user.id.value, days)
        return DailyProgressSummaryResponse.from_summary(summary)
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"get daily progress for user {current_user.id.value}", e) from e


@router.get("/{session_id}", response_model=SessionResponse)
def get_session(
    session_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: LearningSessionUseCase = Depends(
        inject_use_case(container.learning_session_use_case)
    ),
) -> SessionResponse:
    return SessionResponse.from_domain(use_case.get_session(current_user.id.value, session_id))


@router.patch("/{session_id}", response_model=SessionResponse)
def update_session(
    session_id: int,
    request: SessionUpdateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: LearningSessionUseCase = Depends(
        inject_use_case(container.learning_session_use_case)
    ),
) -> SessionResponse:
    try:
        session = use_case.update_session(
            current_user.id.value,
            session_id,
            end_time=request.end_time,
            duration=request.duration,
            score=request.score,
            completion_percentage=request.completion_percentage,
        )
        return SessionResponse.from_domain(session)
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"update session {session_id}", e) from e


@router.post("/{session_id}/complete", response_model=SessionSummaryResponse)
def complete_session(
    session_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: LearningSessionUseCase = Depends(
        inject_use_case(container.learning_session_use_case)
    ),
) -> SessionSummaryResponse:
    """
    Score and close a session.

    Raises:
        HTTPException: 404 if the session does not exist, 400 if it already ended
    """
    try:
        summary = use_case.complete_session(current_user.id.value, session_id)
        return SessionSummaryResponse.from_summary(summary)
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"complete session {session_id}", e) from e


@router.post("/{session_id}/cancel", response_model=SessionResponse)
def cancel_session(
    session_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: LearningSessionUseCase = Depends(
        inject_use_case(container.learning_session_use_case)
    ),
) -> SessionResponse:
    try:
        return SessionResponse.from_domain(
            use_case.cancel_session(current_user.id.value, session_id)
        )
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"cancel session {session_id}", e) from e


@router.post("/{session_id}/pause", response_model=SessionResponse)
def pause_session(
    session_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: LearningSessionUseCase = Depends(
        inject_use_case(container.learning_session_use_case)
    ),
) -> SessionResponse:
    """
    Stop the session clock. Attempts are rejected until the session is resumed.

    Raises:
        HTTPException: 400 if the session has ended or is already paused
    """
    try:
        return SessionResponse.from_domain(
            use_case.pause_session(current_user.id.value, session_id)
        )
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"pause session {session_id}", e) from e


@router.post("/{session_id}/resume", response_model=SessionResponse)
def resume_session(
    session_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: LearningSessionUseCase = Depends(
        inject_use_case(container.learning_session_use_case)
    ),
) -> SessionResponse:
    try:
        return SessionResponse.from_domain(
            use_case.resume_session(current_user.id.value, session_id)
        )
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"resume session {session_id}", e) from e


@router.post("/{session_id}/attempts", response_model=AttemptResponse)
def submit_attempt(
    session_id: int,
    request: AttemptRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: PracticeAttemptUseCase = Depends(
        inject_use_case(container.practice_attempt_use_case)
    ),
) -> AttemptResponse:
    """
    Answer one exercise in an active session.

    The answer is graded, recorded on the session and applied to the word's
    level, learning status, mastery and review schedule. The response includes
    the exercise to practice the word with next.
    """
    try:
        result = use_case.submit_attempt(
            current_user.id.value,
            session_id,
            request.user_word_id,
            request.exercise_type,
            request.response_time,
            attempts_count=request.attempts_count,
            user_input=request.user_input,
            selected_index=request.selected_index,
            options=request.options,
            remembered=request.remembered,
            enabled_exercises=request.enabled_exercises,
            skip_remember_translation=request.skip_remember_translation,
        )
        return AttemptResponse.from_result(result)
    except (LexiflowError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(f"submit attempt in session {session_id}", e) from e
