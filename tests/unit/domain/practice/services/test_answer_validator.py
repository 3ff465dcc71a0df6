"""Tests for AnswerValidator and the string similarity helpers."""

from lexiflow.domain.practice.services.answer_validator import (
    AnswerValidator,
    CharacterDifference,
    levenshtein_distance,
    similarity_accuracy,
)
from lexiflow.domain.practice.value_objects import ExerciseType, MistakeType


class TestSimilarity:
    def test_levenshtein_distance(self) -> None:
        assert levenshtein_distance("kitten", "sitting") == 3
        assert levenshtein_distance("apple", "apple") == 0
        assert levenshtein_distance("", "pear") == 4

    def test_similarity_accuracy(self) -> None:
        assert similarity_accuracy("aple", "apple") == 80
        assert similarity_accuracy("", "apple") == 0

    def test_similarity_half_rounds_up(self) -> None:
        # Three edits across eight letters leave 62.5%
        assert similarity_accuracy("abcdexyz", "abcdefgh") == 63


class TestTypedInput:
    """Typed answers from write-by-definition and write-by-sound."""

    def test_exact_match_ignores_case_and_whitespace(self) -> None:
        check = AnswerValidator.validate_word_input("  Apple ", "apple")

        assert check.is_correct is True
        assert check.accuracy == 100
        assert check.partial_credit is False
        assert check.differences == []

    def test_missing_letter_gets_partial_credit(self) -> None:
        check = AnswerValidator.validate_word_input("aple", "apple")

        assert check.is_correct is False
        assert check.accuracy == 80
        assert check.partial_credit is True
        assert check.differences[0] == CharacterDifference(position=2, expected="p", actual="l")
        assert check.differences[-1] == CharacterDifference(position=4, expected="e", actual="")

    def test_construction_gives_partial_credit_earlier(self) -> None:
        typed = AnswerValidator.validate_word_input("lemonaed", "lemonade")
        built = AnswerValidator.validate_word_construction("lemonaed", "lemonade")

        assert typed.accuracy == built.accuracy == 75
        assert typed.partial_credit is False
        assert built.partial_credit is True


class TestMultipleChoice:
    def test_correct_option(self) -> None:
        check = AnswerValidator.validate_multiple_choice(2, 2)

        assert check.is_correct is True
        assert check.feedback == "Correct!"

    def test_wrong_option_names_the_right_one(self) -> None:
        check = AnswerValidator.validate_multiple_choice(0, 2)

        assert check.is_correct is False
        assert check.accuracy == 0
        assert check.feedback == "Incorrect. The correct answer was option 3"


class TestHelpers:
    def test_self_assessment(self) -> None:
        assert AnswerValidator.validate_self_assessment(True).accuracy == 100
        assert AnswerValidator.validate_self_assessment(False).is_correct is False

    def test_mistake_types(self) -> None:
        assert AnswerValidator.mistake_type(ExerciseType.WRITE_BY_SOUND) == MistakeType.PRONUNCIATION
        assert AnswerValidator.mistake_type(ExerciseType.CHOOSE_RIGHT_WORD) == MistakeType.RECOGNITION
        # Exercises without a dedicated type count as spelling
        assert AnswerValidator.mistake_type(ExerciseType.TYPING) == MistakeType.SPELLING

    def test_response_time_bonus(self) -> None:
        flashcard = ExerciseType.REMEMBER_TRANSLATION

        assert AnswerValidator.response_time_bonus(0, ExerciseType.CHOOSE_RIGHT_WORD) == 100
        assert AnswerValidator.response_time_bonus(1000, flashcard) == 50
        assert AnswerValidator.response_time_bonus(3000, flashcard) == 0

    def test_response_time_bonus_half_rounds_up(self) -> None:
        # 10 ms under a 2000 ms target is half a point
        bonus = AnswerValidator.response_time_bonus(1990, ExerciseType.REMEMBER_TRANSLATION)

        assert bonus == 1
