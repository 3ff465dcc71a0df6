"""Tests for ExerciseGenerator."""

import random

import pytest

from lexiflow.domain.practice.services.exercise_generator import (
    ExerciseGenerator,
    PracticeConfig,
    clamp_difficulty,
    is_similar_enough,
    normalize_text,
)
from lexiflow.domain.practice.value_objects import ExerciseType
from tests.unit.factories import make_user_word


@pytest.fixture
def generator() -> ExerciseGenerator:
    return ExerciseGenerator(random.Random(42))


class TestTextHelpers:
    def test_normalize_text(self) -> None:
        assert normalize_text("  Hello,  World! ") == "hello world"

    def test_is_similar_enough(self) -> None:
        assert is_similar_enough("apple", "Apples") is True
        assert is_similar_enough("apple", "zzzzzzzzzz") is False

    def test_clamp_difficulty(self) -> None:
        assert clamp_difficulty(0) == 1
        assert clamp_difficulty(9) == 5


class TestWordComplexity:
    @pytest.mark.parametrize(
        ("word", "complexity"),
        [
            ("knight", 24),
            ("jazz", 21),
            ("climb", 14),
            ("xjackknightquiz", 50),
        ],
    )
    def test_word_complexity(self, word: str, complexity: int) -> None:
        assert ExerciseGenerator.word_complexity(word) == complexity


class TestPracticeConfig:
    def test_timed_flashcards_at_high_difficulty(self) -> None:
        config = ExerciseGenerator.practice_config(ExerciseType.REMEMBER_TRANSLATION, 4)

        assert config == PracticeConfig(
            max_attempts=1, show_hints=True, auto_advance=True, time_limit_ms=5000
        )

    def test_choice_is_untimed_when_easy(self) -> None:
        config = ExerciseGenerator.practice_config(ExerciseType.CHOOSE_RIGHT_WORD, 2)

        assert config.time_limit_ms == 0

    def test_hints_fade_with_difficulty(self) -> None:
        easy = ExerciseGenerator.practice_config(ExerciseType.MAKE_UP_WORD, 2)
        hard = ExerciseGenerator.practice_config(ExerciseType.MAKE_UP_WORD, 3)

        assert easy.show_hints is True
        assert hard.show_hints is False

    def test_other_exercises_get_defaults(self) -> None:
        assert ExerciseGenerator.practice_config(ExerciseType.TYPING, 3) == PracticeConfig()


class TestDistractors:
    def test_pool_words_come_first(self, generator: ExerciseGenerator) -> None:
        options = generator.distractor_options("apple", ["bread", "cheese", "pear", "Apple"])

        assert sorted(options) == ["bread", "cheese", "pear"]

    def test_generated_distractors(self, generator: ExerciseGenerator) -> None:
        options = generator.distractor_options("apple")

        assert len(options) == 3
        assert len(set(options)) == 3
        assert "apple" not in options

    def test_word_variants_swap_the_last_letter(self) -> None:
        assert ExerciseGenerator._variants("table") == [
            "tables",
            "tableed",
            "tableing",
            "tabler",
            "tably",
            "table",
            "untable",
            "retable",
        ]


class TestBuildExercise:
    """Test suite for assembling exercise payloads."""

    def test_flashcard(self, generator: ExerciseGenerator) -> None:
        user_word = make_user_word(content={"phonetic": "/ˈæp.əl/"})

        exercise = generator.build_exercise(user_word, ExerciseType.REMEMBER_TRANSLATION, 1)

        assert exercise.user_word_id == 1
        assert exercise.prompt["word"] == "apple"
        assert exercise.prompt["translation"] == "яблоко"
        assert exercise.prompt["phonetic"] == "/ˈæp.əl/"

    def test_choose_right_word(self, generator: ExerciseGenerator) -> None:
        exercise = generator.build_exercise(
            make_user_word(), ExerciseType.CHOOSE_RIGHT_WORD, 2, ["bread", "cheese"]
        )

        assert exercise.options is not None
        assert len(exercise.options) == 4
        assert exercise.options[exercise.correct_index] == "apple"
        assert "word" not in exercise.prompt

    def test_make_up_word(self, generator: ExerciseGenerator) -> None:
        exercise = generator.build_exercise(make_user_word(), ExerciseType.MAKE_UP_WORD, 2)

        assert sorted(exercise.character_pool) == sorted("apple")

    def test_character_pool_drops_spaces(self, generator: ExerciseGenerator) -> None:
        assert sorted(generator.character_pool("Ice cream")) == sorted("icecream")

    def test_write_by_sound_hides_translation(self, generator: ExerciseGenerator) -> None:
        user_word = make_user_word(content={"audio_url": "https://cdn.example.com/apple.mp3"})

        exercise = generator.build_exercise(user_word, ExerciseType.WRITE_BY_SOUND, 4)

        assert exercise.prompt["audio_url"] == "https://cdn.example.com/apple.mp3"
        assert "translation" not in exercise.prompt
        assert exercise.config.time_limit_ms == 12000
