"""
Learning metrics: thresholds and scoring formulas shared by practice,
progression and analytics.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from lexiflow.domain.common.exceptions import ValidationError
from lexiflow.domain.practice.value_objects import DifficultyAdjustment, PerformanceRating
from lexiflow.domain.vocabulary.value_objects import LearningStatus
from lexiflow.utils import round_half_up

# Status thresholds
MIN_CORRECT_ANSWERS = 3
MIN_CONSECUTIVE_CORRECT = 2
MAX_MISTAKES_BEFORE_DIFFICULT = 3
MIN_ACCURACY_FOR_LEARNED = 80
MIN_MASTERY_SCORE = 85
MASTERY_STREAK_FOR_LEARNED = 5
DIFFICULT_ACCURACY_CEILING = 40

# Review intervals in days, indexed by review count
REVIEW_INTERVALS_DAYS = (1, 3, 7, 14, 30, 60)

SESSION_SUCCESS_THRESHOLD = 70
SESSION_EXCELLENT_THRESHOLD = 90

# Mastery score bonuses
FAST_RESPONSE_SECONDS = 10
MAX_STREAK_BONUS = 10
MAX_EXPERIENCE_BONUS = 5
SPEED_BONUS = 5


@dataclass(frozen=True)
class PracticeSessionConfig:
    default_words: int = 10
    min_words: int = 3
    max_words: int = 50
    typing_time_limit_seconds: int = 30
    session_time_limit_seconds: int = 900
    points_correct: int = 10
    points_penalty_per_extra_attempt: int = 2
    points_speed_bonus: int = 5
    speed_bonus_threshold_seconds: int = 10


@dataclass(frozen=True)
class TypingConfig:
    tolerance_percent: int = 10
    partial_credit: bool = True
    min_chars_for_partial: int = 3


@dataclass(frozen=True)
class DifficultySettings:
    level: int
    words_per_session: int
    time_limit_seconds: int
    partial_credit: bool
    hints: bool


PRACTICE_SESSION_CONFIG = PracticeSessionConfig()
TYPING_CONFIG = TypingConfig()

DIFFICULTY_LEVELS: dict[int, DifficultySettings] = {
    1: DifficultySettings(1, 5, 45, True, True),
    2: DifficultySettings(2, 8, 35, True, True),
    3: DifficultySettings(3, 10, 30, True, False),
    4: DifficultySettings(4, 15, 25, False, False),
    5: DifficultySettings(5, 20, 20, False, False),
}


@dataclass(frozen=True)
class TypingCheck:
    is_correct: bool
    accuracy: int
    partial_credit: bool


def calculate_accuracy(correct: int, total: int) -> int:
    """Percentage of correct answers, 0 when nothing was answered."""
    if total == 0:
        return 0
    return round_half_up(correct / total * 100)


def calculate_mastery_score(
    accuracy: float,
    consecutive_correct: int,
    average_response_time: float,
    total_reviews: int,
) -> int:
    """
    Combine accuracy with streak, speed and experience bonuses.

    Args:
        accuracy: Accuracy percentage (0..100)
        consecutive_correct: Current streak of correct answers
        average_response_time: Average answer time in seconds
        total_reviews: Number of reviews so far

    Returns:
        Mastery score in 0..100
    """
    score = float(accuracy)
    score += min(consecutive_correct * 2, MAX_STREAK_BONUS)
    if average_response_time <= FAST_RESPONSE_SECONDS:
        score += SPEED_BONUS
    score += min(total_reviews * 0.5, MAX_EXPERIENCE_BONUS)
    return round_half_up(max(0.0, min(score, 100.0)))


def determine_learning_status(
    correct_answers: int,
    total_attempts: int,
    consecutive_correct: int,
    mistakes: int,
    mastery_score: float,
) -> LearningStatus:
    """Classify a word from its raw answer history. Rules are checked in order."""
    accuracy = calculate_accuracy(correct_answers, total_attempts)

    if mastery_score >= MIN_MASTERY_SCORE and consecutive_correct >= MASTERY_STREAK_FOR_LEARNED:
        return LearningStatus.LEARNED
    if (
        correct_answers >= MIN_CORRECT_ANSWERS
        and accuracy >= MIN_ACCURACY_FOR_LEARNED
        and consecutive_correct >= MIN_CONSECUTIVE_CORRECT
    ):
        return LearningStatus.LEARNED
    if mistakes >= MAX_MISTAKES_BEFORE_DIFFICULT or (
        total_attempts > 0 and accuracy <= DIFFICULT_ACCURACY_CEILING
    ):
        return LearningStatus.DIFFICULT
    if total_attempts > 0:
        return LearningStatus.IN_PROGRESS
    return LearningStatus.NOT_STARTED


def calculate_next_review_date(review_count: int, accuracy: float, now: datetime) -> datetime:
    """Step through REVIEW_INTERVALS_DAYS; poor accuracy steps back, great accuracy forward."""
    last_index = len(REVIEW_INTERVALS_DAYS) - 1
    index = min(review_count, last_index)
    if accuracy < SESSION_SUCCESS_THRESHOLD:
        index = max(0, index - 1)
    elif accuracy >= SESSION_EXCELLENT_THRESHOLD:
        index = min(last_index, index + 1)
    return now + timedelta(days=REVIEW_INTERVALS_DAYS[index])


def check_typing_accuracy(user_input: str, expected: str) -> TypingCheck:
    """Positional character comparison with a tolerance for small typos."""
    normalized_input = user_input.strip().lower()
    normalized_expected = expected.strip().lower()

    if normalized_input == normalized_expected:
        return TypingCheck(is_correct=True, accuracy=100, partial_credit=False)

    max_length = max(len(normalized_input), len(normalized_expected))
    if max_length == 0:
        return TypingCheck(is_correct=False, accuracy=0, partial_credit=False)

    matches = sum(
        1
        for index in range(max_length)
        if index < len(normalized_input)
        and index < len(normalized_expected)
        and normalized_input[index] == normalized_expected[index]
    )
    ratio = matches / max_length * 100
    is_correct = ratio >= 100 - TYPING_CONFIG.tolerance_percent
    # Partial credit is reported alongside a pass as well as a near miss
    partial_credit = (
        TYPING_CONFIG.partial_credit
        and ratio >= 50
        and len(normalized_input) >= TYPING_CONFIG.min_chars_for_partial
    )
    return TypingCheck(
        is_correct=is_correct, accuracy=round_half_up(ratio), partial_credit=partial_credit
    )


def get_difficulty_settings(level: int) -> DifficultySettings:
    """
    Raises:
        ValidationError: If level is outside 1..5
    """
    if level not in DIFFICULTY_LEVELS:
        raise ValidationError("Difficulty level must be between 1 and 5", field="level", value=level)
    return DIFFICULTY_LEVELS[level]


def rate_session(accuracy: float) -> PerformanceRating:
    if accuracy >= SESSION_EXCELLENT_THRESHOLD:
        return PerformanceRating.EXCELLENT
    if accuracy >= SESSION_SUCCESS_THRESHOLD:
        return PerformanceRating.GOOD
    return PerformanceRating.NEEDS_IMPROVEMENT


def recommend_difficulty_adjustment(
    level: int,
    accuracy: float,
    completion_ratio: float | None = None,
    recent_ratings: list[PerformanceRating] | None = None,
    timeouts: int = 0,
) -> DifficultyAdjustment:
    """
    Suggest moving a learner up or down a difficulty level.

    Args:
        level: Current difficulty level (1..5)
        accuracy: Session accuracy percentage
        completion_ratio: Time used divided by the time limit, when timed
        recent_ratings: Ratings of recent sessions, most recent last
        timeouts: Exercises that ran out of time in the session
    """
    ratings = recent_ratings or []
    excellent_streak = len(ratings) >= 3 and all(
        rating == PerformanceRating.EXCELLENT for rating in ratings[-3:]
    )
    poor_streak = len(ratings) >= 2 and all(
        rating == PerformanceRating.NEEDS_IMPROVEMENT for rating in ratings[-2:]
    )

    should_increase = (
        accuracy > 95
        or (completion_ratio is not None and completion_ratio < 0.7)
        or excellent_streak
    )
    should_decrease = accuracy < 50 or timeouts >= 3 or poor_streak

    if should_decrease and level > 1:
        return DifficultyAdjustment.DECREASE
    if should_increase and not should_decrease and level < 5:
        return DifficultyAdjustment.INCREASE
    return DifficultyAdjustment.MAINTAIN


def calculate_points(is_correct: bool, response_time_ms: int, attempts: int) -> int:
    """Points for one answer: base, speed bonus and extra-attempt penalty."""
    if not is_correct:
        return 0
    config = PRACTICE_SESSION_CONFIG
    points = config.points_correct
    if response_time_ms <= config.speed_bonus_threshold_seconds * 1000:
        points += config.points_speed_bonus
    points -= config.points_penalty_per_extra_attempt * max(attempts - 1, 0)
    return max(points, 0)
