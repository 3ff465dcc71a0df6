"""Picks the exercise type for an entry and builds its payload."""

from lexiflow.application.practice.dtos import PlannedExercise
from lexiflow.domain.practice.services.exercise_generator import (
    ExerciseGenerator,
    clamp_difficulty,
)
from lexiflow.domain.practice.services.progression_service import ProgressionService
from lexiflow.domain.practice.value_objects import ExerciseType
from lexiflow.domain.vocabulary.entities.user_word import UserWord


def exercise_difficulty(user_word: UserWord) -> int:
    """Custom difficulty when the learner set one, otherwise the practice level."""
    if user_word.custom_difficulty_level is not None:
        return user_word.custom_difficulty_level.rank
    return clamp_difficulty(user_word.srs_level)


class ExercisePlanner:
    def __init__(self, exercise_generator: ExerciseGenerator | None = None) -> None:
        self.exercise_generator = exercise_generator or ExerciseGenerator()

    def plan(
        self,
        user_word: UserWord,
        distractor_words: list[UserWord] | None = None,
        enabled_exercises: list[ExerciseType] | None = None,
        skip_remember_translation: bool = False,
        force_level: int | None = None,
        difficulty: int | None = None,
    ) -> PlannedExercise:
        """
        Args:
            user_word: Entry to practice
            distractor_words: Other entries whose words may serve as wrong options
            enabled_exercises: Exercise types the learner allows (all when None)
            skip_remember_translation: Move past the flashcard stage
            force_level: Practice at this level instead of the entry's own
            difficulty: 1..5 override for attempts, hints and time limits
        """
        selection = ProgressionService.determine_exercise_type(
            user_word,
            enabled_exercises=enabled_exercises,
            skip_remember_translation=skip_remember_translation,
            force_level=force_level,
        )
        pool = [
            other.word_text
            for other in distractor_words or []
            if other.id != user_word.id and other.word_text
        ]
        exercise = self.exercise_generator.build_exercise(
            user_word,
            selection.exercise_type,
            difficulty if difficulty is not None else exercise_difficulty(user_word),
            distractor_pool=pool,
        )
        return PlannedExercise(user_word=user_word, selection=selection, exercise=exercise)
