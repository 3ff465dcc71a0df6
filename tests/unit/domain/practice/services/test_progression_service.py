"""Tests for practice levels and SRS intervals."""

from datetime import timedelta

import pytest

from lexiflow.domain.practice.services.progression_service import ProgressionService
from lexiflow.domain.practice.value_objects import ExerciseType
from lexiflow.domain.vocabulary.value_objects import LearningStatus
from tests.unit.factories import NOW, make_user_word


class TestDetermineExerciseType:
    """Test suite for picking the next exercise of a word."""

    @pytest.mark.parametrize(
        ("level", "exercise"),
        [
            (0, ExerciseType.REMEMBER_TRANSLATION),
            (1, ExerciseType.REMEMBER_TRANSLATION),
            (2, ExerciseType.CHOOSE_RIGHT_WORD),
            (3, ExerciseType.MAKE_UP_WORD),
            (4, ExerciseType.WRITE_BY_DEFINITION),
            (5, ExerciseType.WRITE_BY_SOUND),
        ],
    )
    def test_level_maps_to_exercise(self, level: int, exercise: ExerciseType) -> None:
        selection = ProgressionService.determine_exercise_type(make_user_word(srs_level=level))

        assert selection.exercise_type == exercise
        assert selection.level == level

    def test_skip_remember_translation(self) -> None:
        selection = ProgressionService.determine_exercise_type(
            make_user_word(), skip_remember_translation=True
        )

        assert selection.exercise_type == ExerciseType.CHOOSE_RIGHT_WORD

    def test_skip_moves_to_next_enabled_exercise(self) -> None:
        selection = ProgressionService.determine_exercise_type(
            make_user_word(),
            enabled_exercises=[ExerciseType.REMEMBER_TRANSLATION, ExerciseType.MAKE_UP_WORD],
            skip_remember_translation=True,
        )

        assert selection.exercise_type == ExerciseType.MAKE_UP_WORD

    def test_force_level(self) -> None:
        selection = ProgressionService.determine_exercise_type(
            make_user_word(srs_level=1), force_level=4
        )

        assert selection.exercise_type == ExerciseType.WRITE_BY_DEFINITION
        assert selection.level == 1

    def test_disabled_exercise_uses_closest_level(self) -> None:
        selection = ProgressionService.determine_exercise_type(
            make_user_word(srs_level=3),
            enabled_exercises=[ExerciseType.CHOOSE_RIGHT_WORD, ExerciseType.WRITE_BY_SOUND],
        )

        assert selection.exercise_type == ExerciseType.CHOOSE_RIGHT_WORD

    def test_advance_and_regress_flags(self) -> None:
        doing_well = make_user_word(srs_level=1, review_count=2, mastery_score=100)
        struggling = make_user_word(srs_level=2, review_count=4, mastery_score=25)

        assert ProgressionService.determine_exercise_type(doing_well).can_advance is True
        assert ProgressionService.determine_exercise_type(struggling).should_regress is True
        assert ProgressionService.determine_exercise_type(make_user_word()).can_advance is False


class TestEvaluateAnswer:
    """Test suite for applying one answer to a word's level."""

    def test_first_correct_answer_keeps_level(self) -> None:
        outcome = ProgressionService.evaluate_answer(make_user_word(), is_correct=True)

        assert outcome.new_level == 0
        assert outcome.level_changed is False
        assert outcome.learning_status == LearningStatus.NOT_STARTED
        assert outcome.attempts == 1
        assert outcome.successes == 1

    def test_second_correct_answer_advances(self) -> None:
        user_word = make_user_word(review_count=1, mastery_score=100)

        outcome = ProgressionService.evaluate_answer(user_word, is_correct=True)

        assert outcome.previous_level == 0
        assert outcome.new_level == 1
        assert outcome.learning_status == LearningStatus.IN_PROGRESS
        assert outcome.next_exercise == ExerciseType.REMEMBER_TRANSLATION

    def test_reaching_top_level_is_learned(self) -> None:
        user_word = make_user_word(srs_level=4, review_count=9, mastery_score=100)

        outcome = ProgressionService.evaluate_answer(user_word, is_correct=True)

        assert outcome.new_level == 5
        assert outcome.learning_status == LearningStatus.LEARNED
        assert outcome.next_exercise == ExerciseType.WRITE_BY_SOUND

    def test_single_miss_at_top_level_stays(self) -> None:
        user_word = make_user_word(srs_level=5, review_count=9, mastery_score=100)

        outcome = ProgressionService.evaluate_answer(user_word, is_correct=False)

        assert outcome.new_level == 5
        assert outcome.learning_status == LearningStatus.LEARNED

    def test_poor_rate_regresses_to_needs_review(self) -> None:
        # One correct out of two so far
        user_word = make_user_word(srs_level=2, review_count=2, mastery_score=50)

        outcome = ProgressionService.evaluate_answer(user_word, is_correct=False)

        assert outcome.new_level == 1
        assert outcome.learning_status == LearningStatus.NEEDS_REVIEW

    def test_very_poor_rate_is_difficult(self) -> None:
        user_word = make_user_word(srs_level=3, review_count=4, mastery_score=25)

        outcome = ProgressionService.evaluate_answer(user_word, is_correct=False)

        assert outcome.new_level == 2
        assert outcome.successes == 1
        assert outcome.learning_status == LearningStatus.DIFFICULT


class TestSrsInterval:
    def test_streak_stretches_interval(self) -> None:
        interval = ProgressionService.calculate_srs_interval(1, True, 2, NOW)

        assert interval.hours == 6
        assert interval.next_review == NOW + timedelta(hours=6)

    def test_streak_bonus_is_capped(self) -> None:
        assert ProgressionService.calculate_srs_interval(5, True, 10, NOW).hours == 336

    def test_wrong_answer_halves_interval(self) -> None:
        assert ProgressionService.calculate_srs_interval(3, False, 0, NOW).hours == 12

    def test_interval_is_at_least_one_hour(self) -> None:
        assert ProgressionService.calculate_srs_interval(0, False, 0, NOW).hours == 1
