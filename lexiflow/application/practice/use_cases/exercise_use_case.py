"""Use case for building standalone exercises outside of a session."""

from lexiflow.application.practice.dtos import PlannedExercise
from lexiflow.application.practice.services.exercise_planner import ExercisePlanner
from lexiflow.application.vocabulary.protocols.user_word_repository import (
    UserWordRepositoryProtocol,
)
from lexiflow.domain.common.exceptions import ValidationError
from lexiflow.domain.common.value_objects.ids import UserId, UserWordId
from lexiflow.domain.practice.services.exercise_generator import (
    ExerciseGenerator,
    PracticeConfig,
)
from lexiflow.domain.practice.services.learning_metrics import (
    DifficultySettings,
    get_difficulty_settings,
)
from lexiflow.domain.practice.services.progression_service import MAX_LEVEL, MIN_LEVEL
from lexiflow.domain.practice.value_objects import ExerciseType
from lexiflow.domain.vocabulary.exceptions import UserWordNotFoundError


class ExerciseUseCase:
    def __init__(
        self,
        user_word_repository: UserWordRepositoryProtocol,
        exercise_planner: ExercisePlanner | None = None,
    ) -> None:
        self.user_word_repository = user_word_repository
        self.exercise_planner = exercise_planner or ExercisePlanner()

    def next_exercise(
        self,
        user_id: int,
        user_word_id: int,
        enabled_exercises: list[ExerciseType] | None = None,
        skip_remember_translation: bool = False,
        force_level: int | None = None,
        difficulty: int | None = None,
    ) -> PlannedExercise:
        """
        Build the exercise the entry should be practiced with next.

        Raises:
            UserWordNotFoundError: If the entry does not exist
            ValidationError: If force_level or difficulty is out of range
        """
        if force_level is not None and force_level < MIN_LEVEL:
            raise ValidationError(
                "force_level cannot be negative", field="force_level", value=force_level
            )
        if difficulty is not None:
            get_difficulty_settings(difficulty)

        user_id_vo = UserId(user_id)
        user_word = self.user_word_repository.find_by_id(UserWordId(user_word_id), user_id_vo)
        if not user_word:
            raise UserWordNotFoundError(user_word_id)

        return self.exercise_planner.plan(
            user_word,
            distractor_words=self.user_word_repository.find_active(user_id_vo),
            enabled_exercises=enabled_exercises,
            skip_remember_translation=skip_remember_translation,
            force_level=min(force_level, MAX_LEVEL) if force_level is not None else None,
            difficulty=difficulty,
        )

    @staticmethod
    def practice_config(exercise_type: ExerciseType, difficulty: int) -> PracticeConfig:
        return ExerciseGenerator.practice_config(exercise_type, difficulty)

    @staticmethod
    def difficulty_settings(level: int) -> DifficultySettings:
        return get_difficulty_settings(level)

    @staticmethod
    def word_complexity(word: str) -> int:
        return ExerciseGenerator.word_complexity(word)
