"""Pydantic schemas for exercises and their configuration."""

from pydantic import BaseModel, ConfigDict, Field

from lexiflow.application.practice.dtos import PlannedExercise
from lexiflow.domain.practice.services.exercise_generator import Exercise
from lexiflow.domain.practice.value_objects import ExerciseType
from lexiflow.infrastructure.vocabulary.schemas import UserWordResponse


class PracticeConfigResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    max_attempts: int
    show_hints: bool
    auto_advance: bool
    time_limit_ms: int = Field(..., description="0 means no time limit")


class DifficultySettingsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    level: int
    words_per_session: int
    time_limit_seconds: int
    partial_credit: bool
    hints: bool


class WordComplexityResponse(BaseModel):
    word: str
    complexity: int = Field(..., ge=0, le=50, description="Higher is harder to spell")


class ExerciseSelectionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    exercise_type: ExerciseType
    level: int
    can_advance: bool
    should_regress: bool
    attempts: int
    successes: int
    required_attempts: int


class ExerciseResponse(BaseModel):
    """Schema for a ready-to-render exercise."""

    exercise_type: ExerciseType
    user_word_id: int
    prompt: dict[str, str | None]
    config: PracticeConfigResponse
    options: list[str] | None = None
    correct_index: int | None = None
    character_pool: list[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, exercise: Exercise) -> "ExerciseResponse":
        return cls(
            exercise_type=exercise.exercise_type,
            user_word_id=exercise.user_word_id,
            prompt=exercise.prompt,
            config=PracticeConfigResponse.model_validate(exercise.config),
            options=exercise.options,
            correct_index=exercise.correct_index,
            character_pool=exercise.character_pool,
        )


class PlannedExerciseResponse(BaseModel):
    """A word together with the exercise it will be practiced with."""

    user_word: UserWordResponse
    selection: ExerciseSelectionResponse
    exercise: ExerciseResponse

    @classmethod
    def from_planned(cls, planned: PlannedExercise) -> "PlannedExerciseResponse":
        return cls(
            user_word=UserWordResponse.from_domain(planned.user_word),
            selection=ExerciseSelectionResponse.model_validate(planned.selection),
            exercise=ExerciseResponse.from_domain(planned.exercise),
        )
