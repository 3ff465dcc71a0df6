"""
Per-word difficulty scoring and the "words needing attention" list.

Only entries that have been practiced at least once are scored. Each entry is
judged from its own counters plus its most recent mistakes.
"""

import statistics
from collections import Counter

from lexiflow.domain.analytics.learner_reports import AttentionItem, UrgencyLevel, WordDifficulty
from lexiflow.domain.practice.entities.learning_mistake import LearningMistake
from lexiflow.domain.vocabulary.entities.user_word import UserWord
from lexiflow.domain.vocabulary.value_objects import LearningStatus
from lexiflow.utils import round_half_up, round_to

RECENT_MISTAKES = 20
PATTERN_WINDOW = 10
MIN_ATTEMPTS = 5
NEUTRAL_SCORE = 50
ATTENTION_THRESHOLD = 60
DEFAULT_ATTENTION_LIMIT = 20

STATUS_DIFFICULTY = {
    LearningStatus.NOT_STARTED: 30,
    LearningStatus.IN_PROGRESS: 50,
    LearningStatus.LEARNED: 20,
    LearningStatus.NEEDS_REVIEW: 80,
    LearningStatus.DIFFICULT: 90,
}

URGENCY_ORDER = {UrgencyLevel.HIGH: 0, UrgencyLevel.MEDIUM: 1, UrgencyLevel.LOW: 2}


def consistency_score(attempts: int, recent_mistakes: list[LearningMistake]) -> int:
    """
    How evenly mistakes spread over days, 0..100 (higher is steadier).

    Few attempts give a neutral 50; mistakes bunched on a single day give 70.
    """
    if attempts < MIN_ATTEMPTS:
        return NEUTRAL_SCORE
    per_day = Counter(
        mistake.created_at.date()
        for mistake in recent_mistakes[:PATTERN_WINDOW]
        if mistake.created_at is not None
    )
    if len(per_day) < 2:
        return 70
    variance = statistics.pvariance(per_day.values())
    return round_half_up((1 - min(variance, 10) / 10) * 100)


def recent_performance(attempts: int, recent_mistakes: list[LearningMistake]) -> int:
    """Share of the last attempts (up to ten) that were not mistakes, 0..100."""
    if attempts < MIN_ATTEMPTS:
        return NEUTRAL_SCORE
    window = min(PATTERN_WINDOW, attempts)
    wrong = min(len(recent_mistakes[:PATTERN_WINDOW]), window)
    return max(0, round_half_up((window - wrong) / window * 100))


class WordAttentionService:
    """Scores how hard practiced words are and picks the ones to focus on."""

    @staticmethod
    def analyze(entry: UserWord, recent_mistakes: list[LearningMistake]) -> WordDifficulty:
        """
        Args:
            entry: A practiced dictionary entry
            recent_mistakes: Its latest mistakes, newest first
        """
        attempts = entry.review_count
        mistake_rate = (
            min(100.0, entry.amount_of_mistakes / attempts * 100) if attempts else 0.0
        )
        consistency = consistency_score(attempts, recent_mistakes)
        recent = recent_performance(attempts, recent_mistakes)
        types = Counter(mistake.mistake_type for mistake in recent_mistakes)

        raw = (
            mistake_rate * 0.3
            + (100 - consistency) * 0.2
            + (100 - recent) * 0.25
            + (100 - entry.mastery_score) * 0.15
            + STATUS_DIFFICULTY[entry.learning_status] * 0.1
            + min(len(types) * 5, 20)
        )
        return WordDifficulty(
            user_word_id=entry.id.value,
            word_text=entry.word_text,
            difficulty_score=max(0, min(100, round_half_up(raw))),
            mistake_rate=round_to(mistake_rate, 2),
            mistake_count=entry.amount_of_mistakes,
            total_attempts=attempts,
            consistency_score=consistency,
            recent_performance=recent,
            mastery_score=entry.mastery_score,
            learning_status=entry.learning_status,
            mistake_types=dict(types),
        )

    @staticmethod
    def attention_item(difficulty: WordDifficulty) -> AttentionItem:
        if difficulty.difficulty_score >= 85:
            urgency = UrgencyLevel.HIGH
            issue = "Critical difficulty - multiple learning challenges"
            action = "Reset to basic recognition exercises and practice daily"
        elif difficulty.mistake_rate > 70:
            urgency = UrgencyLevel.HIGH
            issue = "Very high mistake rate"
            action = "Focus on easier exercise types and increase practice frequency"
        elif difficulty.consistency_score < 30:
            urgency = UrgencyLevel.MEDIUM
            issue = "Inconsistent performance"
            action = "Regular practice with consistent exercise types"
        elif difficulty.recent_performance < 40:
            urgency = UrgencyLevel.MEDIUM
            issue = "Declining recent performance"
            action = "Review fundamentals and practice more frequently"
        else:
            urgency = UrgencyLevel.LOW
            issue = "Moderate difficulty"
            action = "Continue regular practice with slight increase in frequency"

        return AttentionItem(
            user_word_id=difficulty.user_word_id,
            word_text=difficulty.word_text,
            difficulty_score=difficulty.difficulty_score,
            urgency=urgency,
            primary_issue=issue,
            recommended_action=action,
        )

    @classmethod
    def needing_attention(
        cls,
        entries: list[UserWord],
        mistakes_by_entry: dict[int, list[LearningMistake]],
        limit: int = DEFAULT_ATTENTION_LIMIT,
    ) -> list[AttentionItem]:
        """
        Practiced words scoring at least ``ATTENTION_THRESHOLD``, most urgent
        first and hardest first within the same urgency.
        """
        items = []
        for entry in entries:
            if entry.review_count == 0:
                continue
            recent = mistakes_by_entry.get(entry.id.value, [])[:RECENT_MISTAKES]
            difficulty = cls.analyze(entry, recent)
            if difficulty.difficulty_score >= ATTENTION_THRESHOLD:
                items.append(cls.attention_item(difficulty))

        items.sort(
            key=lambda item: (
                URGENCY_ORDER[item.urgency], -item.difficulty_score, item.user_word_id
            )
        )
        return items[:limit]
