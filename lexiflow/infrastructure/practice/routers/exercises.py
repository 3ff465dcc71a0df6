from typing import Annotated

from fastapi import APIRouter, Depends, Query

from lexiflow.application.practice.use_cases.exercise_use_case import ExerciseUseCase
from lexiflow.core import container
from lexiflow.domain.identity.entities.user import User
from lexiflow.domain.practice.value_objects import ExerciseType
from lexiflow.infrastructure.common.di import inject_use_case
from lexiflow.infrastructure.identity.dependencies import get_current_user
from lexiflow.infrastructure.practice.schemas import (
    DifficultySettingsResponse,
    PlannedExerciseResponse,
    PracticeConfigResponse,
    WordComplexityResponse,
)

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.get("/next/{user_word_id}", response_model=PlannedExerciseResponse)
def get_next_exercise(
    user_word_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    enabled_exercises: Annotated[list[ExerciseType] | None, Query()] = None,
    skip_remember_translation: bool = Query(False),
    force_level: int | None = Query(None, ge=0),
    difficulty: int | None = Query(None, ge=1, le=5),
    use_case: ExerciseUseCase = Depends(inject_use_case(container.exercise_use_case)),
) -> PlannedExerciseResponse:
    """
    Build the exercise a dictionary entry should be practiced with next.

    ``force_level`` overrides the entry's progression level, which is handy
    for previewing exercises.
    """
    planned = use_case.next_exercise(
        current_user.id.value,
        user_word_id,
        enabled_exercises=enabled_exercises,
        skip_remember_translation=skip_remember_translation,
        force_level=force_level,
        difficulty=difficulty,
    )
    return PlannedExerciseResponse.from_planned(planned)


@router.get("/config/{exercise_type}", response_model=PracticeConfigResponse)
def get_practice_config(
    exercise_type: ExerciseType,
    _current_user: Annotated[User, Depends(get_current_user)],
    difficulty: int = Query(1, ge=1, le=5),
) -> PracticeConfigResponse:
    return PracticeConfigResponse.model_validate(
        ExerciseUseCase.practice_config(exercise_type, difficulty)
    )


@router.get("/difficulty/{level}", response_model=DifficultySettingsResponse)
def get_difficulty_settings(
    level: int,
    _current_user: Annotated[User, Depends(get_current_user)],
) -> DifficultySettingsResponse:
    return DifficultySettingsResponse.model_validate(ExerciseUseCase.difficulty_settings(level))


@router.get("/complexity", response_model=WordComplexityResponse)
def get_word_complexity(
    _current_user: Annotated[User, Depends(get_current_user)],
    word: str = Query(..., min_length=1),
) -> WordComplexityResponse:
    return WordComplexityResponse(word=word, complexity=ExerciseUseCase.word_complexity(word))
