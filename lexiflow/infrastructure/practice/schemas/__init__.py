"""Practice context schemas."""

from lexiflow.infrastructure.practice.schemas.difficulty_schemas import (
    BatchAssessmentRequest,
    BatchAssessmentResponse,
    DifficultyAssessmentResponse,
    WordSelectionRequest,
    WordSelectionResponse,
)
from lexiflow.infrastructure.practice.schemas.exercise_schemas import (
    DifficultySettingsResponse,
    PlannedExerciseResponse,
    PracticeConfigResponse,
    WordComplexityResponse,
)
from lexiflow.infrastructure.practice.schemas.session_schemas import (
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
from lexiflow.infrastructure.practice.schemas.srs_schemas import (
    DueWordsResponse,
    RecalculateRequest,
    RecalculateResponse,
    ReviewScheduleResponse,
    ReviewSessionRequest,
    ReviewSessionResponse,
    ReviewStatisticsResponse,
)

__all__ = [
    "AttemptRequest",
    "AttemptResponse",
    "BatchAssessmentRequest",
    "BatchAssessmentResponse",
    "DailyProgressSummaryResponse",
    "DifficultyAssessmentResponse",
    "DifficultySettingsResponse",
    "DueWordsResponse",
    "PlannedExerciseResponse",
    "PracticeConfigResponse",
    "RecalculateRequest",
    "RecalculateResponse",
    "ReviewScheduleResponse",
    "ReviewSessionRequest",
    "ReviewSessionResponse",
    "ReviewStatisticsResponse",
    "SessionResponse",
    "SessionStartRequest",
    "SessionStartResponse",
    "SessionStatsResponse",
    "SessionSummaryResponse",
    "SessionUpdateRequest",
    "WordComplexityResponse",
    "WordSelectionRequest",
    "WordSelectionResponse",
]
