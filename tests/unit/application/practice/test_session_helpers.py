"""Tests for the session planning helpers."""

import random
from datetime import date

import pytest

from lexiflow.application.practice.services.exercise_planner import (
    ExercisePlanner,
    exercise_difficulty,
)
from lexiflow.application.practice.use_cases.learning_session_use_case import (
    consecutive_day_streak,
    matches_session_difficulty,
    trailing_correct_streak,
)
from lexiflow.domain.dictionary.value_objects import DifficultyLevel
from lexiflow.domain.practice.services.exercise_generator import ExerciseGenerator
from lexiflow.domain.practice.value_objects import ExerciseType
from lexiflow.domain.vocabulary.value_objects import LearningStatus
from tests.unit.factories import make_user_word


class TestSessionDifficulty:
    @pytest.mark.parametrize(
        ("status", "mastery", "difficulty", "expected"),
        [
            (LearningStatus.NOT_STARTED, 0, 1, True),
            (LearningStatus.IN_PROGRESS, 60, 1, False),
            (LearningStatus.IN_PROGRESS, 40, 2, True),
            (LearningStatus.IN_PROGRESS, 80, 2, False),
            (LearningStatus.DIFFICULT, 10, 3, True),
            (LearningStatus.LEARNED, 100, 3, False),
        ],
    )
    def test_matches_session_difficulty(
        self, status: LearningStatus, mastery: float, difficulty: int, expected: bool
    ) -> None:
        user_word = make_user_word(learning_status=status, mastery_score=mastery)

        assert matches_session_difficulty(user_word, difficulty) is expected


class TestStreaks:
    def test_trailing_correct_streak(self) -> None:
        assert trailing_correct_streak([]) == 0
        assert trailing_correct_streak([True, False, True, True]) == 2
        assert trailing_correct_streak([True, True, False]) == 0

    def test_streak_ending_today(self) -> None:
        days = {date(2024, 6, 13), date(2024, 6, 14), date(2024, 6, 15)}

        assert consecutive_day_streak(days, date(2024, 6, 15)) == 3

    def test_streak_ending_yesterday_still_counts(self) -> None:
        days = {date(2024, 6, 10), date(2024, 6, 13), date(2024, 6, 14)}

        assert consecutive_day_streak(days, date(2024, 6, 15)) == 2

    def test_broken_streak(self) -> None:
        assert consecutive_day_streak({date(2024, 6, 12)}, date(2024, 6, 15)) == 0


class TestExercisePlanner:
    def test_custom_difficulty_wins(self) -> None:
        assert exercise_difficulty(make_user_word(srs_level=3)) == 3
        assert exercise_difficulty(make_user_word(srs_level=0)) == 1
        assert (
            exercise_difficulty(
                make_user_word(srs_level=1, custom_difficulty_level=DifficultyLevel.ADVANCED)
            )
            == 4
        )

    def test_distractors_come_from_other_entries(self) -> None:
        planner = ExercisePlanner(ExerciseGenerator(random.Random(3)))
        apple = make_user_word(1, "apple", srs_level=2)
        others = [apple, make_user_word(2, "bread"), make_user_word(3, "cheese")]

        planned = planner.plan(apple, distractor_words=others)

        assert planned.selection.exercise_type == ExerciseType.CHOOSE_RIGHT_WORD
        options = planned.exercise.options or []
        assert options.count("apple") == 1
        assert {"bread", "cheese"} <= set(options)
