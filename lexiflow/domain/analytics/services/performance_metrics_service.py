"""
Dictionary performance report.

Sessions and mistakes passed in are expected to be limited to the reporting
window already (see ``PERFORMANCE_WINDOW_DAYS``); dictionary entries are the
learner's whole active dictionary.
"""

import statistics
from collections import Counter
from datetime import datetime, timedelta

from lexiflow.domain.analytics.learner_reports import (
    DifficultyDistribution,
    LearningEfficiency,
    MasteryRangeShare,
    MistakeAnalysis,
    PerformanceMetrics,
    PerformanceScores,
    PerformanceTrend,
    PracticePerformance,
    ReviewSystem,
    SrsLevelShare,
    StatusShare,
    StudyHabits,
    VocabularyManagement,
    WordPerformance,
    WordPerformanceEntry,
)
from lexiflow.domain.analytics.services.learner_statistics_service import (
    MONTH_DAYS,
    RECENT_DAYS,
    TOP_PROBLEM_WORDS,
    mistakes_by_type,
    most_active_hour,
    percent,
    problem_words,
    session_accuracy,
    study_streaks,
    weekly_distribution,
)
from lexiflow.domain.practice.entities.learning_mistake import LearningMistake
from lexiflow.domain.practice.entities.learning_session import LearningSession
from lexiflow.domain.vocabulary.entities.user_word import MAX_SRS_LEVEL, UserWord
from lexiflow.domain.vocabulary.value_objects import LearningStatus
from lexiflow.utils import round_to

PERFORMANCE_WINDOW_DAYS = 90
TREND_THRESHOLD = 5.0
WORD_RANKING_SIZE = 10
IMPROVEMENT_SESSIONS = 10
DEFAULT_RESPONSE_TIME_MS = 5000

# (label, inclusive upper bound of mastery)
MASTERY_RANGES = (
    ("0-20", 20),
    ("21-40", 40),
    ("41-60", 60),
    ("61-80", 80),
    ("81-100", 100),
)

# Weights of the component scores in the overall score
SCORE_WEIGHTS = {
    "mistake_rate": 0.25,
    "streak": 0.2,
    "response_time": 0.15,
    "skip": 0.15,
    "srs_progression": 0.15,
    "improvement": 0.1,
}


def _mean(values: list[float]) -> float:
    return statistics.fmean(values) if values else 0.0


def _trend(sessions: list[LearningSession]) -> PerformanceTrend:
    """Average accuracy of the newer half of the sessions against the older half."""
    ordered = sorted(sessions, key=lambda session: session.start_time)
    if len(ordered) < 2:
        return PerformanceTrend.STABLE
    middle = len(ordered) // 2
    older = _mean([session_accuracy(s) for s in ordered[:middle]])
    newer = _mean([session_accuracy(s) for s in ordered[middle:]])
    if newer - older > TREND_THRESHOLD:
        return PerformanceTrend.IMPROVING
    if older - newer > TREND_THRESHOLD:
        return PerformanceTrend.DECLINING
    return PerformanceTrend.STABLE


def _mastery_range(mastery: float) -> str:
    for label, upper in MASTERY_RANGES:
        if mastery <= upper:
            return label
    return MASTERY_RANGES[-1][0]


class PerformanceMetricsService:
    """Builds the dictionary performance report from plain domain objects."""

    @staticmethod
    def learning_efficiency(entries: list[UserWord], now: datetime) -> LearningEfficiency:
        learned = [entry for entry in entries if entry.learned_at is not None]
        days_to_master = [
            (entry.learned_at - start).total_seconds() / 86400
            for entry in learned
            if (start := entry.started_learning_at or entry.created_at) is not None
        ]
        learned_this_month = sum(
            1 for entry in learned if entry.learned_at >= now - timedelta(days=MONTH_DAYS)
        )
        return LearningEfficiency(
            average_days_to_master=round_to(_mean(days_to_master), 2),
            words_learned_this_week=sum(
                1 for entry in learned if entry.learned_at >= now - timedelta(days=RECENT_DAYS)
            ),
            retention_rate=percent(
                sum(1 for entry in learned if entry.learning_status == LearningStatus.LEARNED),
                len(learned),
            ),
            learning_velocity=round_to(learned_this_month / MONTH_DAYS, 2),
        )

    @staticmethod
    def practice(sessions: list[LearningSession], now: datetime) -> PracticePerformance:
        if not sessions:
            return PracticePerformance()

        accuracies = [session_accuracy(session) for session in sessions]
        times = [item.response_time for session in sessions for item in session.items]
        durations = [session.duration for session in sessions if session.duration is not None]
        return PracticePerformance(
            total_sessions=len(sessions),
            average_accuracy=round_to(_mean(accuracies), 2),
            average_response_time=round_to(_mean(times), 2),
            fastest_response_time=min(times, default=0),
            slowest_response_time=max(times, default=0),
            consistency_score=round_to(max(0.0, 100 - statistics.pstdev(accuracies)), 2),
            response_time_consistency=(
                round_to(max(0.0, 100 - statistics.pstdev(times) / 10), 2) if times else 0.0
            ),
            trend=_trend(sessions),
            recent_sessions=sum(
                1
                for session in sessions
                if session.start_time >= now - timedelta(days=RECENT_DAYS)
            ),
            best_score=max(session.score or 0.0 for session in sessions),
            average_session_minutes=round_to(_mean(durations) / 60, 2),
        )

    @staticmethod
    def mistake_analysis(
        entries: list[UserWord], mistakes: list[LearningMistake]
    ) -> MistakeAnalysis:
        ranked = problem_words(mistakes, entries, TOP_PROBLEM_WORDS)
        mistake_days = {mistake.created_at.date() for mistake in mistakes if mistake.created_at}
        return MistakeAnalysis(
            total_mistakes=len(mistakes),
            mistakes_per_study_day=(
                round_to(len(mistakes) / len(mistake_days), 2) if mistake_days else 0.0
            ),
            problem_words=ranked,
            by_type=mistakes_by_type(mistakes),
            average_mistakes_per_word=round_to(
                _mean([entry.amount_of_mistakes for entry in entries]), 2
            ),
            highest_mistake_word=ranked[0] if ranked else None,
        )

    @staticmethod
    def study_habits(sessions: list[LearningSession], now: datetime) -> StudyHabits:
        days = {session.start_time.date() for session in sessions}
        current, longest = study_streaks(days, now.date())
        month_start = (now - timedelta(days=MONTH_DAYS)).date()
        durations = [session.duration for session in sessions if session.duration is not None]
        return StudyHabits(
            current_streak=current,
            longest_streak=longest,
            average_session_minutes=round_to(_mean(durations) / 60, 2),
            preferred_hour=most_active_hour(sessions),
            study_consistency=percent(sum(1 for day in days if day > month_start), MONTH_DAYS),
            weekly_pattern=weekly_distribution(sessions),
        )

    @staticmethod
    def vocabulary(entries: list[UserWord], now: datetime) -> VocabularyManagement:
        created = [entry.created_at for entry in entries if entry.created_at is not None]
        return VocabularyManagement(
            words_added_this_week=sum(
                1 for moment in created if moment >= now - timedelta(days=RECENT_DAYS)
            ),
            words_added_this_month=sum(
                1 for moment in created if moment >= now - timedelta(days=MONTH_DAYS)
            ),
            favorite_words=sum(1 for entry in entries if entry.is_favorite),
            modified_words=sum(1 for entry in entries if entry.is_modified),
            words_with_notes=sum(1 for entry in entries if entry.custom_notes),
        )

    @staticmethod
    def review_system(entries: list[UserWord], now: datetime) -> ReviewSystem:
        levels = Counter(entry.srs_level for entry in entries)
        upcoming = [
            entry.next_srs_review
            for entry in entries
            if entry.next_srs_review is not None and entry.next_srs_review > now
        ]
        return ReviewSystem(
            words_needing_review=sum(1 for entry in entries if entry.needs_review(now)),
            overdue_srs_words=sum(
                1
                for entry in entries
                if entry.next_srs_review is not None and entry.next_srs_review <= now
            ),
            average_srs_level=round_to(_mean([entry.srs_level for entry in entries]), 2),
            srs_distribution=[
                SrsLevelShare(
                    level=level,
                    count=levels[level],
                    percentage=percent(levels[level], len(entries)),
                )
                for level in range(MAX_SRS_LEVEL + 1)
            ],
            next_review_due=min(upcoming, default=None),
        )

    @staticmethod
    def difficulty(entries: list[UserWord]) -> DifficultyDistribution:
        statuses = Counter(entry.learning_status for entry in entries)
        ranges = Counter(_mastery_range(entry.mastery_score) for entry in entries)
        return DifficultyDistribution(
            by_status=[
                StatusShare(
                    learning_status=status,
                    count=statuses[status],
                    percentage=percent(statuses[status], len(entries)),
                )
                for status in LearningStatus
            ],
            by_mastery=[
                MasteryRangeShare(
                    label=label,
                    count=ranges[label],
                    percentage=percent(ranges[label], len(entries)),
                )
                for label, _ in MASTERY_RANGES
            ],
            average_difficulty=round_to(
                _mean([100 - entry.mastery_score for entry in entries]), 2
            ),
        )

    @staticmethod
    def word_performance(
        entries: list[UserWord], item_statistics: dict[int, tuple[int, float]]
    ) -> WordPerformance:
        if not entries:
            return WordPerformance()

        def to_entry(entry: UserWord) -> WordPerformanceEntry:
            _, average_time = item_statistics.get(entry.id.value, (0, 0.0))
            return WordPerformanceEntry(
                user_word_id=entry.id.value,
                word_text=entry.word_text,
                mastery_score=entry.mastery_score,
                correct_streak=entry.correct_streak,
                srs_level=entry.srs_level,
                mistake_count=entry.amount_of_mistakes,
                skip_count=entry.skip_count,
                average_response_time=round_to(average_time, 2),
            )

        top = sorted(entries, key=lambda entry: (-entry.mastery_score, entry.id.value))
        struggling = sorted(
            (entry for entry in entries if entry.amount_of_mistakes or entry.skip_count),
            key=lambda entry: (
                entry.mastery_score - 2 * entry.amount_of_mistakes - entry.skip_count,
                entry.id.value,
            ),
        )
        total_skips = sum(entry.skip_count for entry in entries)
        return WordPerformance(
            average_correct_streak=round_to(_mean([entry.correct_streak for entry in entries]), 2),
            longest_correct_streak=max(entry.correct_streak for entry in entries),
            total_skips=total_skips,
            average_skips_per_word=round_to(total_skips / len(entries), 2),
            average_mastery_score=round_to(_mean([entry.mastery_score for entry in entries]), 2),
            top_words=[to_entry(entry) for entry in top[:WORD_RANKING_SIZE]],
            struggling_words=[to_entry(entry) for entry in struggling[:WORD_RANKING_SIZE]],
        )

    @staticmethod
    def scores(
        entries: list[UserWord],
        sessions: list[LearningSession],
        item_statistics: dict[int, tuple[int, float]],
    ) -> PerformanceScores:
        """
        Component scores on a 0..10 scale and their weighted overall score.

        An empty dictionary scores zero everywhere.
        """
        if not entries:
            return PerformanceScores()

        timed = [
            (count, average) for count, average in item_statistics.values() if count > 0
        ]
        answered = sum(count for count, _ in timed)
        average_time = (
            sum(count * average for count, average in timed) / answered
            if answered
            else DEFAULT_RESPONSE_TIME_MS
        )
        newest = sorted(sessions, key=lambda session: session.start_time, reverse=True)
        ratios = [
            session.correct_answers / session.total_answers
            for session in newest[:IMPROVEMENT_SESSIONS]
            if session.total_answers
        ]

        parts = {
            "mistake_rate": max(0.0, 10 - _mean([e.amount_of_mistakes for e in entries]) * 2),
            "streak": min(10.0, _mean([e.correct_streak for e in entries]) / 2),
            "response_time": max(0.0, 10 - average_time / 1000),
            "skip": max(0.0, 10 - _mean([e.skip_count for e in entries]) * 2),
            "srs_progression": min(10.0, _mean([e.srs_level for e in entries]) * 2),
            "improvement": (_mean(ratios) if ratios else 0.5) * 10,
        }
        overall = sum(parts[name] * weight for name, weight in SCORE_WEIGHTS.items())
        return PerformanceScores(
            overall_score=round_to(overall, 1),
            mistake_rate_score=round_to(parts["mistake_rate"], 1),
            streak_score=round_to(parts["streak"], 1),
            response_time_score=round_to(parts["response_time"], 1),
            skip_score=round_to(parts["skip"], 1),
            srs_progression_score=round_to(parts["srs_progression"], 1),
            improvement_score=round_to(parts["improvement"], 1),
        )

    @classmethod
    def build(
        cls,
        entries: list[UserWord],
        sessions: list[LearningSession],
        mistakes: list[LearningMistake],
        item_statistics: dict[int, tuple[int, float]],
        now: datetime,
    ) -> PerformanceMetrics:
        return PerformanceMetrics(
            learning_efficiency=cls.learning_efficiency(entries, now),
            practice=cls.practice(sessions, now),
            mistakes=cls.mistake_analysis(entries, mistakes),
            study_habits=cls.study_habits(sessions, now),
            vocabulary=cls.vocabulary(entries, now),
            review_system=cls.review_system(entries, now),
            difficulty=cls.difficulty(entries),
            word_performance=cls.word_performance(entries, item_statistics),
            scores=cls.scores(entries, sessions, item_statistics),
        )
