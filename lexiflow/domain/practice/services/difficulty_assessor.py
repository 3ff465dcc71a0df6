"""
Domain service for estimating how hard a word is for a particular learner.

The composite score blends the learner's own performance history (70%) with
linguistic properties of the word (30%). Scores are in 0..1, higher is harder.
"""

import math
import random
from dataclasses import dataclass
from datetime import datetime, timedelta

from lexiflow.domain.practice.services.answer_validator import levenshtein_distance
from lexiflow.domain.vocabulary.entities.user_word import UserWord
from lexiflow.domain.vocabulary.value_objects import LearningStatus
from lexiflow.utils import round_to

PERFORMANCE_SHARE = 0.7
LINGUISTIC_SHARE = 0.3

PERFORMANCE_WEIGHTS = {
    "mistake_rate": 0.25,
    "streak": 0.2,
    "srs_level": 0.15,
    "learning_status": 0.15,
    "response_time": 0.1,
    "skip_rate": 0.1,
    "recency_frequency": 0.05,
}

LINGUISTIC_WEIGHTS = {
    "rarity": 0.3,
    "phonetic": 0.2,
    "polysemy": 0.15,
    "length": 0.15,
    "abstraction": 0.1,
    "relational": 0.1,
}

SRS_LEVEL_DIFFICULTY = {0: 1.0, 1: 0.8, 2: 0.6, 3: 0.4, 4: 0.2, 5: 0.1}

STATUS_DIFFICULTY = {
    LearningStatus.NOT_STARTED: 1.0,
    LearningStatus.DIFFICULT: 0.9,
    LearningStatus.NEEDS_REVIEW: 0.7,
    LearningStatus.IN_PROGRESS: 0.5,
    LearningStatus.LEARNED: 0.2,
}

# (inclusive upper bound in ms, difficulty)
RESPONSE_TIME_BANDS = ((3000, 0.1), (8000, 0.3), (15000, 0.6), (30000, 0.8))

CLASSIFICATION_BANDS = (
    (0.2, "very_easy"),
    (0.4, "easy"),
    (0.6, "medium"),
    (0.8, "hard"),
)

MAX_FREQUENCY_RANK = 10000
STREAK_SATURATION = 10
RECENCY_SATURATION_DAYS = 30
MAX_CANDIDATES = 100

DEFAULT_DISTRIBUTION = {"hard": 0.2, "medium": 0.5, "easy": 0.3}


@dataclass(frozen=True)
class PerformanceMetrics:
    mistake_rate: float
    streak: float
    srs_level: float
    learning_status: float
    response_time: float
    skip_rate: float
    recency_frequency: float


@dataclass(frozen=True)
class LinguisticMetrics:
    rarity: float
    phonetic: float
    polysemy: float
    length: float
    abstraction: float
    relational: float


@dataclass(frozen=True)
class DifficultyAssessment:
    user_word_id: int
    composite_score: float
    performance_score: float
    linguistic_score: float
    classification: str
    confidence: float
    performance: PerformanceMetrics
    linguistic: LinguisticMetrics

    @property
    def bucket(self) -> str:
        """Coarse hard/medium/easy bucket used for word selection."""
        if self.classification in ("hard", "very_hard"):
            return "hard"
        if self.classification == "medium":
            return "medium"
        return "easy"


@dataclass(frozen=True)
class WordSelection:
    words: list[UserWord]
    assessments: dict[int, DifficultyAssessment]
    hard_count: int
    medium_count: int
    easy_count: int


def _weighted(values: dict[str, float], weights: dict[str, float]) -> float:
    return sum(values[name] * weight for name, weight in weights.items())


def _string_similarity(first: str, second: str) -> float:
    longer = max(len(first), len(second))
    if longer == 0:
        return 1.0
    return (longer - levenshtein_distance(first, second)) / longer


class DifficultyAssessor:
    """Scores word difficulty per learner and picks balanced practice sets."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    @staticmethod
    def performance_metrics(
        user_word: UserWord, now: datetime, average_response_time: float | None = None
    ) -> PerformanceMetrics:
        reviews = user_word.review_count
        mistake_rate = user_word.amount_of_mistakes / (reviews + 1) if reviews > 0 else 0.0
        skip_rate = (
            user_word.skip_count / (reviews + user_word.skip_count) if reviews > 0 else 0.0
        )

        if user_word.last_reviewed_at is None:
            recency = 1.0
        else:
            days_since = (now - user_word.last_reviewed_at).total_seconds() / 86400
            recency = min(max(days_since, 0.0) / RECENCY_SATURATION_DAYS, 1.0)

        started = user_word.started_learning_at or user_word.created_at
        if reviews > 0 and started is not None:
            days_learning = max((now - started).total_seconds() / 86400, 1.0)
            frequency = min(reviews / days_learning, 1.0)
        else:
            frequency = 0.0

        # No timed answers averages to 0 ms, which falls in the fastest band
        average_ms = average_response_time or 0.0
        response_time = next(
            (score for bound, score in RESPONSE_TIME_BANDS if average_ms <= bound), 1.0
        )

        return PerformanceMetrics(
            mistake_rate=min(mistake_rate, 1.0),
            streak=max(0.0, 1 - user_word.correct_streak / STREAK_SATURATION),
            srs_level=SRS_LEVEL_DIFFICULTY.get(user_word.srs_level, 1.0),
            learning_status=STATUS_DIFFICULTY.get(user_word.learning_status, 1.0),
            response_time=response_time,
            skip_rate=skip_rate,
            recency_frequency=(recency + (1 - frequency)) / 2,
        )

    @staticmethod
    def linguistic_metrics(user_word: UserWord) -> LinguisticMetrics:
        content = user_word.content
        if content is None:
            return LinguisticMetrics(
                rarity=0.5, phonetic=0.5, polysemy=0.3, length=0.5, abstraction=0.5, relational=0.3
            )

        if not content.frequency:
            rarity = 1.0
        else:
            rarity = min(max((MAX_FREQUENCY_RANK - content.frequency) / MAX_FREQUENCY_RANK, 0), 1)

        phonetic_text = user_word.phonetic
        if not phonetic_text:
            phonetic = 0.5
        else:
            cleaned = phonetic_text.strip("/[] ").lower()
            phonetic = 1 - _string_similarity(content.word_text.lower(), cleaned)

        length = len(content.word_text)
        if length <= 4:
            length_score = 0.1
        elif length <= 7:
            length_score = 0.3
        elif length <= 10:
            length_score = 0.6
        else:
            length_score = 1.0

        return LinguisticMetrics(
            rarity=rarity,
            phonetic=phonetic,
            polysemy=min(content.definition_count / 10, 1.0),
            length=length_score,
            abstraction=0.2 if content.image_url else 0.8,
            # Word relationships are not modelled, so relational complexity is always 0
            relational=0.0,
        )

    @staticmethod
    def classify(score: float) -> str:
        for bound, label in CLASSIFICATION_BANDS:
            if score <= bound:
                return label
        return "very_hard"

    @staticmethod
    def confidence(data_points: int) -> float:
        if data_points == 0:
            return 0.1
        if data_points < 3:
            return 0.3
        if data_points < 10:
            return 0.6
        if data_points < 20:
            return 0.8
        return 1.0

    def assess(
        self,
        user_word: UserWord,
        now: datetime,
        session_item_count: int = 0,
        average_response_time: float | None = None,
    ) -> DifficultyAssessment:
        performance = self.performance_metrics(user_word, now, average_response_time)
        linguistic = self.linguistic_metrics(user_word)
        performance_score = _weighted(performance.__dict__, PERFORMANCE_WEIGHTS)
        linguistic_score = _weighted(linguistic.__dict__, LINGUISTIC_WEIGHTS)
        composite = PERFORMANCE_SHARE * performance_score + LINGUISTIC_SHARE * linguistic_score
        # Only the reported scores are rounded; classification sees the exact composite
        return DifficultyAssessment(
            user_word_id=user_word.id.value,
            composite_score=round_to(composite, 3),
            performance_score=round_to(performance_score, 3),
            linguistic_score=round_to(linguistic_score, 3),
            classification=self.classify(composite),
            confidence=self.confidence(user_word.review_count + session_item_count),
            performance=performance,
            linguistic=linguistic,
        )

    def assess_batch(
        self,
        user_words: list[UserWord],
        now: datetime,
        session_item_counts: dict[int, int] | None = None,
        response_times: dict[int, float] | None = None,
    ) -> dict[int, DifficultyAssessment]:
        counts = session_item_counts or {}
        times = response_times or {}
        return {
            word.id.value: self.assess(
                word, now, counts.get(word.id.value, 0), times.get(word.id.value)
            )
            for word in user_words
        }

    def select_words(
        self,
        user_words: list[UserWord],
        target_count: int,
        now: datetime,
        distribution: dict[str, float] | None = None,
        exclude_recent_hours: int | None = 24,
        session_item_counts: dict[int, int] | None = None,
        response_times: dict[int, float] | None = None,
    ) -> WordSelection:
        """
        Pick ``target_count`` words balanced across hard, medium and easy.

        Buckets that run short are topped up from the remaining candidates.
        """
        shares = distribution or DEFAULT_DISTRIBUTION
        candidates = [word for word in user_words if not word.is_deleted]
        if exclude_recent_hours:
            cutoff = now - timedelta(hours=exclude_recent_hours)
            candidates = [
                word
                for word in candidates
                if word.last_reviewed_at is None or word.last_reviewed_at < cutoff
            ]
        candidates = candidates[: min(target_count * 3, MAX_CANDIDATES)]

        assessments = self.assess_batch(candidates, now, session_item_counts, response_times)
        buckets: dict[str, list[UserWord]] = {"hard": [], "medium": [], "easy": []}
        for word in candidates:
            buckets[assessments[word.id.value].bucket].append(word)

        hard_target = math.ceil(target_count * shares.get("hard", 0))
        medium_target = math.ceil(target_count * shares.get("medium", 0))
        easy_target = max(target_count - hard_target - medium_target, 0)

        selected: list[UserWord] = []
        for name, wanted in (("hard", hard_target), ("medium", medium_target), ("easy", easy_target)):
            pool = buckets[name]
            self.rng.shuffle(pool)
            selected.extend(pool[:wanted])

        if len(selected) < target_count:
            selected_ids = {word.id.value for word in selected}
            leftovers = [word for word in candidates if word.id.value not in selected_ids]
            self.rng.shuffle(leftovers)
            selected.extend(leftovers[: target_count - len(selected)])
        selected = selected[:target_count]

        chosen = {word.id.value: assessments[word.id.value] for word in selected}
        return WordSelection(
            words=selected,
            assessments=chosen,
            hard_count=sum(1 for a in chosen.values() if a.bucket == "hard"),
            medium_count=sum(1 for a in chosen.values() if a.bucket == "medium"),
            easy_count=sum(1 for a in chosen.values() if a.bucket == "easy"),
        )
