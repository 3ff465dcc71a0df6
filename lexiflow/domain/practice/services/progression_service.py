"""
Domain service for per-word practice progression.

A word climbs practice levels 0..5 as the learner answers correctly; each
level maps to a harder exercise type. The same level doubles as the SRS level
that drives review intervals.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from lexiflow.domain.practice.services.learning_metrics import calculate_mastery_score
from lexiflow.domain.practice.value_objects import ExerciseType
from lexiflow.domain.vocabulary.entities.user_word import UserWord
from lexiflow.domain.vocabulary.value_objects import LearningStatus
from lexiflow.utils import round_half_up

MIN_LEVEL = 0
MAX_LEVEL = 5
ATTEMPTS_TO_ADVANCE = 2
ATTEMPTS_TO_REGRESS = 3
SUCCESS_RATE_THRESHOLD = 0.6
DIFFICULT_RATE_THRESHOLD = 0.4
ATTEMPTS_FOR_DIFFICULT = 5

LEVEL_EXERCISES: dict[int, ExerciseType] = {
    0: ExerciseType.REMEMBER_TRANSLATION,
    1: ExerciseType.REMEMBER_TRANSLATION,
    2: ExerciseType.CHOOSE_RIGHT_WORD,
    3: ExerciseType.MAKE_UP_WORD,
    4: ExerciseType.WRITE_BY_DEFINITION,
    5: ExerciseType.WRITE_BY_SOUND,
}

# Level each exercise type is considered to sit at, for fallbacks
EXERCISE_LEVELS: dict[ExerciseType, int] = {
    ExerciseType.REMEMBER_TRANSLATION: 0,
    ExerciseType.CHOOSE_RIGHT_WORD: 2,
    ExerciseType.MAKE_UP_WORD: 3,
    ExerciseType.WRITE_BY_DEFINITION: 4,
    ExerciseType.WRITE_BY_SOUND: 5,
    ExerciseType.TYPING: 3,
    ExerciseType.UNIFIED_PRACTICE: 3,
}

# SRS base intervals in hours, indexed by level
SRS_BASE_INTERVAL_HOURS = (1, 4, 8, 24, 72, 168)
MAX_STREAK_MULTIPLIER_BONUS = 1.0
STREAK_MULTIPLIER_STEP = 0.2
FAILURE_MULTIPLIER = 0.5


@dataclass(frozen=True)
class ExerciseSelection:
    exercise_type: ExerciseType
    level: int
    can_advance: bool
    should_regress: bool
    attempts: int
    successes: int
    required_attempts: int = ATTEMPTS_TO_ADVANCE


@dataclass(frozen=True)
class ProgressionOutcome:
    previous_level: int
    new_level: int
    learning_status: LearningStatus
    mastery_score: int
    attempts: int
    successes: int
    next_exercise: ExerciseType

    @property
    def level_changed(self) -> bool:
        return self.previous_level != self.new_level


@dataclass(frozen=True)
class SrsInterval:
    hours: int
    next_review: datetime


class ProgressionService:
    """Stateless rules for practice levels and SRS intervals."""

    @staticmethod
    def exercise_for_level(level: int) -> ExerciseType:
        return LEVEL_EXERCISES[max(MIN_LEVEL, min(level, MAX_LEVEL))]

    @staticmethod
    def closest_enabled(target_level: int, enabled: list[ExerciseType]) -> ExerciseType:
        """Pick the enabled exercise whose level is closest to ``target_level``."""
        if not enabled:
            return ExerciseType.REMEMBER_TRANSLATION
        return min(enabled, key=lambda exercise: abs(EXERCISE_LEVELS[exercise] - target_level))

    @classmethod
    def determine_exercise_type(
        cls,
        user_word: UserWord,
        enabled_exercises: list[ExerciseType] | None = None,
        skip_remember_translation: bool = False,
        force_level: int | None = None,
    ) -> ExerciseSelection:
        """
        Choose the next exercise for a word.

        Args:
            user_word: Entry whose srs_level is its practice level
            enabled_exercises: Exercise types the learner allows (all when None)
            skip_remember_translation: Move past the flashcard stage
            force_level: Practice at this level instead, when enabled
        """
        enabled = list(enabled_exercises) if enabled_exercises else list(ExerciseType)
        level = user_word.srs_level
        attempts = user_word.review_count
        successes = user_word.correct_answers
        rate = successes / attempts if attempts > 0 else 0.0

        exercise = cls.exercise_for_level(level)

        if skip_remember_translation and exercise == ExerciseType.REMEMBER_TRANSLATION:
            for next_level in range(level + 1, MAX_LEVEL + 1):
                candidate = cls.exercise_for_level(next_level)
                if candidate != ExerciseType.REMEMBER_TRANSLATION and candidate in enabled:
                    exercise = candidate
                    break

        if force_level is not None:
            forced = cls.exercise_for_level(min(force_level, MAX_LEVEL))
            if forced in enabled:
                exercise = forced

        if exercise not in enabled:
            exercise = cls.closest_enabled(EXERCISE_LEVELS[exercise], enabled)

        return ExerciseSelection(
            exercise_type=exercise,
            level=level,
            can_advance=(
                attempts >= ATTEMPTS_TO_ADVANCE
                and rate >= SUCCESS_RATE_THRESHOLD
                and level < MAX_LEVEL
            ),
            should_regress=(
                attempts >= ATTEMPTS_TO_REGRESS
                and rate < SUCCESS_RATE_THRESHOLD
                and level > MIN_LEVEL
            ),
            attempts=attempts,
            successes=successes,
        )

    @classmethod
    def evaluate_answer(cls, user_word: UserWord, is_correct: bool) -> ProgressionOutcome:
        """
        Apply one answer to the word's level, status and mastery.

        Must be called before the answer is recorded on the entry, since the
        attempt counts are derived from the entry's prior state.
        """
        previous_level = user_word.srs_level
        attempts = user_word.review_count + 1
        successes = user_word.correct_answers + (1 if is_correct else 0)
        rate = successes / attempts

        new_level = previous_level
        if (
            is_correct
            and attempts >= ATTEMPTS_TO_ADVANCE
            and rate >= SUCCESS_RATE_THRESHOLD
            and previous_level < MAX_LEVEL
        ):
            new_level = previous_level + 1
        elif (
            not is_correct
            and attempts >= ATTEMPTS_TO_REGRESS
            and rate < SUCCESS_RATE_THRESHOLD
            and previous_level > MIN_LEVEL
        ):
            new_level = previous_level - 1

        status = user_word.learning_status
        if new_level == MIN_LEVEL:
            status = LearningStatus.NOT_STARTED
        elif new_level < MAX_LEVEL:
            status = LearningStatus.IN_PROGRESS
        elif rate >= SUCCESS_RATE_THRESHOLD:
            status = LearningStatus.LEARNED

        if rate < DIFFICULT_RATE_THRESHOLD and attempts >= ATTEMPTS_FOR_DIFFICULT:
            status = LearningStatus.DIFFICULT
        elif rate < SUCCESS_RATE_THRESHOLD and attempts >= ATTEMPTS_TO_REGRESS:
            status = LearningStatus.NEEDS_REVIEW

        mastery = calculate_mastery_score(rate * 100, successes, 1, attempts)

        return ProgressionOutcome(
            previous_level=previous_level,
            new_level=new_level,
            learning_status=status,
            mastery_score=min(mastery, 100),
            attempts=attempts,
            successes=successes,
            next_exercise=cls.exercise_for_level(new_level),
        )

    @staticmethod
    def calculate_srs_interval(
        level: int, is_correct: bool, consecutive_correct: int, now: datetime
    ) -> SrsInterval:
        """
        Hours until the next review.

        Correct answers stretch the base interval by up to 2x with the streak;
        wrong answers halve it. Never less than one hour.
        """
        base = SRS_BASE_INTERVAL_HOURS[max(MIN_LEVEL, min(level, MAX_LEVEL))]
        if is_correct:
            multiplier = 1 + min(
                consecutive_correct * STREAK_MULTIPLIER_STEP, MAX_STREAK_MULTIPLIER_BONUS
            )
            hours = round_half_up(base * multiplier)
        else:
            hours = round_half_up(base * FAILURE_MULTIPLIER)
        hours = max(1, hours)
        return SrsInterval(hours=hours, next_review=now + timedelta(hours=hours))
