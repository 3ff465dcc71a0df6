"""Domain service for checking practice answers."""

from dataclasses import dataclass, field

from lexiflow.domain.practice.value_objects import ExerciseType, MistakeType
from lexiflow.utils import round_half_up

INPUT_PARTIAL_CREDIT_THRESHOLD = 80
CONSTRUCTION_PARTIAL_CREDIT_THRESHOLD = 70

MISTAKE_TYPES: dict[ExerciseType, MistakeType] = {
    ExerciseType.WRITE_BY_SOUND: MistakeType.PRONUNCIATION,
    ExerciseType.WRITE_BY_DEFINITION: MistakeType.MEANING,
    ExerciseType.REMEMBER_TRANSLATION: MistakeType.TRANSLATION,
    ExerciseType.CHOOSE_RIGHT_WORD: MistakeType.RECOGNITION,
    ExerciseType.MAKE_UP_WORD: MistakeType.SPELLING,
}

# Expected answer times in milliseconds
RESPONSE_TIME_THRESHOLDS: dict[ExerciseType, int] = {
    ExerciseType.REMEMBER_TRANSLATION: 2000,
    ExerciseType.CHOOSE_RIGHT_WORD: 3000,
    ExerciseType.MAKE_UP_WORD: 5000,
    ExerciseType.WRITE_BY_DEFINITION: 8000,
    ExerciseType.WRITE_BY_SOUND: 6000,
    ExerciseType.TYPING: 5000,
    ExerciseType.UNIFIED_PRACTICE: 5000,
}
DEFAULT_RESPONSE_TIME_THRESHOLD = 5000


@dataclass(frozen=True)
class CharacterDifference:
    position: int
    expected: str
    actual: str


@dataclass(frozen=True)
class AnswerCheck:
    is_correct: bool
    accuracy: int
    partial_credit: bool = False
    feedback: str | None = None
    differences: list[CharacterDifference] = field(default_factory=list)


def levenshtein_distance(first: str, second: str) -> int:
    """Edit distance between two strings."""
    if len(first) < len(second):
        return levenshtein_distance(second, first)
    if not second:
        return len(first)

    previous_row = list(range(len(second) + 1))
    for i, first_char in enumerate(first):
        current_row = [i + 1]
        for j, second_char in enumerate(second):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (first_char != second_char)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row
    return previous_row[-1]


def similarity_accuracy(first: str, second: str) -> int:
    """Similarity as a 0..100 percentage of the longer string."""
    if not first or not second:
        return 0
    max_length = max(len(first), len(second))
    distance = levenshtein_distance(first, second)
    return round_half_up((max_length - distance) / max_length * 100)


class AnswerValidator:
    """Stateless answer checks for each exercise family."""

    @staticmethod
    def _check_text(user_input: str, correct: str, partial_threshold: int) -> AnswerCheck:
        normalized_input = user_input.strip().lower()
        normalized_correct = correct.strip().lower()
        is_correct = normalized_input == normalized_correct
        accuracy = 100 if is_correct else similarity_accuracy(normalized_input, normalized_correct)

        differences = [
            CharacterDifference(
                position=index,
                expected=normalized_correct[index] if index < len(normalized_correct) else "",
                actual=normalized_input[index] if index < len(normalized_input) else "",
            )
            for index in range(max(len(normalized_input), len(normalized_correct)))
            if normalized_input[index : index + 1] != normalized_correct[index : index + 1]
        ]

        return AnswerCheck(
            is_correct=is_correct,
            accuracy=accuracy,
            partial_credit=not is_correct and accuracy >= partial_threshold,
            differences=differences,
        )

    @classmethod
    def validate_word_input(cls, user_input: str, correct: str) -> AnswerCheck:
        """Check a typed answer (write-by-definition, write-by-sound, typing)."""
        return cls._check_text(user_input, correct, INPUT_PARTIAL_CREDIT_THRESHOLD)

    @classmethod
    def validate_word_construction(cls, user_input: str, correct: str) -> AnswerCheck:
        """Check a word assembled from letters; partial credit comes earlier."""
        return cls._check_text(user_input, correct, CONSTRUCTION_PARTIAL_CREDIT_THRESHOLD)

    @staticmethod
    def validate_multiple_choice(selected_index: int, correct_index: int) -> AnswerCheck:
        is_correct = selected_index == correct_index
        feedback = (
            "Correct!"
            if is_correct
            else f"Incorrect. The correct answer was option {correct_index + 1}"
        )
        return AnswerCheck(
            is_correct=is_correct, accuracy=100 if is_correct else 0, feedback=feedback
        )

    @staticmethod
    def validate_self_assessment(remembered: bool) -> AnswerCheck:
        """Flashcard answers are graded by the learner."""
        return AnswerCheck(is_correct=remembered, accuracy=100 if remembered else 0)

    @staticmethod
    def mistake_type(exercise_type: ExerciseType) -> MistakeType:
        return MISTAKE_TYPES.get(exercise_type, MistakeType.SPELLING)

    @staticmethod
    def response_time_bonus(response_time_ms: int, exercise_type: ExerciseType) -> int:
        """0..100 bonus for answering faster than the exercise's expected time."""
        threshold = RESPONSE_TIME_THRESHOLDS.get(exercise_type, DEFAULT_RESPONSE_TIME_THRESHOLD)
        if response_time_ms > threshold:
            return 0
        return round_half_up((threshold - response_time_ms) / threshold * 100)
