"""
Per-word analytics over a learner's practice history.

Every figure is derived from the dictionary entry, its answered session items
and its mistake log. Session items must be passed oldest first.
"""

import statistics
from collections import Counter, defaultdict
from datetime import datetime, timedelta

from lexiflow.domain.analytics.word_analytics import (
    BasicMetrics,
    ComparativeMetrics,
    ContextualMetrics,
    ErrorAnalytics,
    ExerciseMistakes,
    ForecastPoint,
    Insight,
    MasteryTimeline,
    Milestone,
    Misspelling,
    MistakeRecurrence,
    ModalityMetrics,
    PerformanceTimeline,
    PositionBreakdown,
    Predictions,
    ProgressionMetrics,
    Recommendation,
    RetentionPoint,
    SessionPerformance,
    TrendPoint,
    WeekdayPerformance,
    WordAnalytics,
)
from lexiflow.domain.practice.entities.learning_mistake import LearningMistake
from lexiflow.domain.practice.entities.learning_session import SessionItem
from lexiflow.domain.practice.services.learning_metrics import (
    calculate_accuracy,
    calculate_mastery_score,
    determine_learning_status,
)
from lexiflow.domain.practice.services.progression_service import (
    SRS_BASE_INTERVAL_HOURS,
    ProgressionService,
)
from lexiflow.domain.practice.value_objects import ExerciseType, MistakeType
from lexiflow.domain.vocabulary.entities.user_word import MAX_SRS_LEVEL, UserWord
from lexiflow.utils import round_to

WEEKDAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
DEFAULT_BEST_HOUR = 12
NEVER_REVIEWED_DAYS = 999.0
MAX_CONTEXT_VARIETY = 10
TREND_POINTS = 20
TOP_MISSPELLINGS = 5
STREAK_MILESTONE = 5
HIGH_MISTAKE_COUNT = 5
PLATEAU_STREAK = 10
PLATEAU_MASTERY_CEILING = 80

VISUAL_EXERCISES = (ExerciseType.WRITE_BY_DEFINITION, ExerciseType.CHOOSE_RIGHT_WORD)
AUDITORY_EXERCISES = (ExerciseType.WRITE_BY_SOUND,)


def _days_between(start: datetime, end: datetime) -> float:
    return max(0.0, (end - start).total_seconds() / 86400)


def _percent(part: int, whole: int) -> float:
    return round_to(part / whole * 100, 2) if whole else 0.0


def _thirds(items: list[SessionItem]) -> tuple[list[SessionItem], ...]:
    count = len(items)
    first, second = count // 3, count * 2 // 3
    return items[:first], items[first:second], items[second:]


def _item_accuracy(items: list[SessionItem]) -> float:
    return _percent(sum(1 for item in items if item.is_correct), len(items))


def _mistake_exercise(mistake: LearningMistake) -> str | None:
    value = mistake.context.get("exercise_type")
    return str(value) if value else None


class WordAnalyticsService:
    """Stateless calculations behind the word analytics report."""

    @staticmethod
    def basic_metrics(user_word: UserWord, items: list[SessionItem]) -> BasicMetrics:
        correct = sum(1 for item in items if item.is_correct)
        times = [item.response_time for item in items]
        return BasicMetrics(
            total_attempts=len(items),
            correct_attempts=correct,
            accuracy=calculate_accuracy(correct, len(items)),
            average_response_time=round_to(statistics.fmean(times), 2) if times else 0.0,
            current_streak=user_word.correct_streak,
            mastery_score=user_word.mastery_score,
            skip_count=user_word.skip_count,
            mistake_count=user_word.amount_of_mistakes,
            srs_level=user_word.srs_level,
            learning_status=user_word.learning_status,
            history_status=determine_learning_status(
                correct,
                len(items),
                user_word.correct_streak,
                user_word.amount_of_mistakes,
                user_word.mastery_score,
            ),
        )

    @staticmethod
    def session_performance(items: list[SessionItem]) -> SessionPerformance:
        if not items:
            return SessionPerformance()

        times = [item.response_time for item in items if item.response_time > 0]
        mean = statistics.fmean(times) if times else 0.0
        variance = statistics.pvariance(times, mu=mean) if len(times) > 1 else 0.0

        first_try = sum(1 for item in items if item.is_correct and item.attempts_count == 1)
        retried = [item for item in items if item.attempts_count > 1]

        by_hour: dict[int, list[SessionItem]] = defaultdict(list)
        for item in items:
            if item.created_at is not None:
                by_hour[item.created_at.hour].append(item)

        early, middle, late = _thirds(items)
        return SessionPerformance(
            fastest_response=min(times, default=0),
            slowest_response=max(times, default=0),
            average_response_time=round_to(mean, 2),
            median_response_time=statistics.median(times) if times else 0.0,
            response_time_variance=round_to(variance, 2),
            consistency_score=round_to(max(0.0, 100 - variance**0.5 / 10), 2),
            average_attempts=round_to(statistics.fmean(item.attempts_count for item in items), 2),
            first_attempt_success_rate=_percent(first_try, len(items)),
            multiple_attempt_success_rate=_percent(
                sum(1 for item in retried if item.is_correct), len(retried)
            ),
            accuracy_by_hour={
                hour: _item_accuracy(hour_items)
                for hour, hour_items in sorted(by_hour.items())
                if _item_accuracy(hour_items) > 0
            },
            accuracy_by_position=PositionBreakdown(
                early=_item_accuracy(early),
                middle=_item_accuracy(middle),
                late=_item_accuracy(late),
            ),
        )

    @staticmethod
    def mastery_progression(items: list[SessionItem]) -> list[int]:
        """Mastery score after each answer, replayed from the answer history."""
        progression = []
        correct = streak = 0
        total_time = 0
        for count, item in enumerate(items, start=1):
            if item.is_correct:
                correct += 1
                streak += 1
            else:
                streak = 0
            total_time += item.response_time
            progression.append(
                calculate_mastery_score(
                    calculate_accuracy(correct, count), streak, total_time / count / 1000, count
                )
            )
        return progression

    @classmethod
    def progression_metrics(
        cls, user_word: UserWord, items: list[SessionItem], now: datetime
    ) -> ProgressionMetrics:
        mastery = user_word.mastery_score
        started = user_word.started_learning_at

        first_correct = next((item for item in items if item.is_correct), None)
        days_to_first_correct = None
        if started and first_correct and first_correct.created_at:
            days_to_first_correct = round_to(_days_between(started, first_correct.created_at), 2)

        days_to_stabilization = None
        if started and user_word.learned_at:
            days_to_stabilization = round_to(_days_between(started, user_word.learned_at), 2)

        exercise_types = {item.exercise_type for item in items if item.exercise_type}
        return ProgressionMetrics(
            mastery_progression=cls.mastery_progression(items),
            mastery_velocity=round_to(mastery / len(items), 2) if len(items) > 1 else 0.0,
            stability_index=min(100.0, mastery * 0.8),
            srs_interval_optimality=min(100.0, user_word.srs_level * 15.0),
            srs_success_rate=_item_accuracy(items),
            days_to_first_correct=days_to_first_correct,
            days_to_stabilization=days_to_stabilization,
            retention_strength=min(100.0, mastery * 0.9),
            context_variety=min(MAX_CONTEXT_VARIETY, len(exercise_types) or len(items)),
            days_since_last_review=(
                round_to(_days_between(user_word.last_reviewed_at, now), 2)
                if user_word.last_reviewed_at
                else NEVER_REVIEWED_DAYS
            ),
            frequency_optimality=min(100.0, len(items) * 10.0),
        )

    @staticmethod
    def error_analytics(
        user_word: UserWord, items: list[SessionItem], mistakes: list[LearningMistake]
    ) -> ErrorAnalytics:
        if not mistakes:
            return ErrorAnalytics(skipped=user_word.skip_count)

        attempts_by_type = Counter(item.exercise_type.value for item in items if item.exercise_type)
        mistakes_by_type = Counter(
            exercise for mistake in mistakes if (exercise := _mistake_exercise(mistake))
        )

        by_hour = Counter(
            mistake.created_at.hour for mistake in mistakes if mistake.created_at is not None
        )

        recurrence: dict[str, MistakeRecurrence] = {}
        for mistake in mistakes:
            kind = mistake.mistake_type.value
            occurred = mistake.created_at or datetime.min
            entry = recurrence.get(kind)
            if entry is None:
                recurrence[kind] = MistakeRecurrence(kind, 1, occurred)
            else:
                entry.frequency += 1
                entry.last_occurrence = max(entry.last_occurrence, occurred)

        misspellings = Counter(
            mistake.incorrect_value.strip().lower()
            for mistake in mistakes
            if mistake.mistake_type == MistakeType.SPELLING and mistake.incorrect_value
        )

        early, middle, late = _thirds(items)
        recovery_times = []
        for index, item in enumerate(items):
            if item.is_correct or item.created_at is None:
                continue
            recovered = next(
                (later for later in items[index + 1 :] if later.is_correct and later.created_at),
                None,
            )
            if recovered is not None and recovered.created_at is not None:
                recovery_times.append((recovered.created_at - item.created_at).total_seconds())

        first_half, second_half = items[: len(items) // 2], items[len(items) // 2 :]
        first_rate = 100 - _item_accuracy(first_half) if first_half else 0.0
        second_rate = 100 - _item_accuracy(second_half) if second_half else 0.0
        reduction = (
            round_to((first_rate - second_rate) / first_rate * 100, 2) if first_rate else 0.0
        )

        return ErrorAnalytics(
            total_mistakes=len(mistakes),
            mistakes_by_exercise_type={
                exercise: ExerciseMistakes(
                    count=count,
                    rate=(
                        _percent(count, attempts_by_type[exercise])
                        if attempts_by_type[exercise]
                        else 100.0
                    ),
                )
                for exercise, count in sorted(mistakes_by_type.items())
            },
            mistakes_by_hour=dict(sorted(by_hour.items())),
            mistakes_by_position=PositionBreakdown(
                early=sum(1 for item in early if not item.is_correct),
                middle=sum(1 for item in middle if not item.is_correct),
                late=sum(1 for item in late if not item.is_correct),
            ),
            recurrence=sorted(recurrence.values(), key=lambda r: (-r.frequency, r.mistake_type)),
            common_misspellings=[
                Misspelling(incorrect=text, frequency=count)
                for text, count in misspellings.most_common(TOP_MISSPELLINGS)
            ],
            recovery_time_after_mistake=(
                round_to(statistics.fmean(recovery_times) * 1000, 2) if recovery_times else 0.0
            ),
            self_corrected=sum(1 for item in items if item.is_correct and item.attempts_count > 1),
            skipped=user_word.skip_count,
            mistake_reduction_rate=reduction,
        )

    @staticmethod
    def comparative_metrics(user_word: UserWord, items: list[SessionItem]) -> ComparativeMetrics:
        mastery = user_word.mastery_score
        return ComparativeMetrics(
            learning_efficiency=round_to(mastery / max(len(items), 1), 2),
            predicted_days_to_mastery=max(1, int((100 - mastery) // 5)),
            optimal_review_frequency_hours=SRS_BASE_INTERVAL_HOURS[
                min(user_word.srs_level, MAX_SRS_LEVEL)
            ],
            performance_percentile=_item_accuracy(items),
        )

    @staticmethod
    def modality_metrics(user_word: UserWord, items: list[SessionItem]) -> ModalityMetrics:
        """
        Recall split by how the word was presented.

        Without practice in a modality the estimate falls back to a baseline
        derived from mastery.
        """
        content = user_word.content
        mastery = user_word.mastery_score
        baseline = max(50.0, mastery * 0.8)

        visual_items = [item for item in items if item.exercise_type in VISUAL_EXERCISES]
        audio_items = [item for item in items if item.exercise_type in AUDITORY_EXERCISES]
        has_image = bool(content and content.image_url)
        has_audio = bool(content and content.audio_url)

        image_recall = _item_accuracy(visual_items) if has_image and visual_items else baseline
        audio_recall = _item_accuracy(audio_items) if has_audio and audio_items else baseline
        textual = min(100.0, baseline + 5)

        if has_image:
            preferred = "visual"
        elif has_audio:
            preferred = "auditory"
        else:
            preferred = "textual"

        return ModalityMetrics(
            image_recall=image_recall,
            audio_recall=audio_recall,
            pronunciation_difficulty=max(20.0, 100 - mastery),
            listening_comprehension=min(100.0, audio_recall + 10),
            preferred_modality=preferred,
            effectiveness={"visual": image_recall, "auditory": audio_recall, "textual": textual},
        )

    @staticmethod
    def contextual_metrics(items: list[SessionItem]) -> ContextualMetrics:
        by_weekday = {}
        for index, day in enumerate(WEEKDAYS):
            day_items = [
                item
                for item in items
                if item.created_at is not None and (item.created_at.weekday() + 1) % 7 == index
            ]
            by_weekday[day] = WeekdayPerformance(
                accuracy=_item_accuracy(day_items),
                response_time=round_to(
                    sum(item.response_time for item in day_items) / max(len(day_items), 1), 2
                ),
            )

        by_hour: dict[int, list[SessionItem]] = defaultdict(list)
        for item in items:
            if item.created_at is not None:
                by_hour[item.created_at.hour].append(item)

        best_hour, best_accuracy = DEFAULT_BEST_HOUR, 0.0
        for hour, hour_items in sorted(by_hour.items()):
            accuracy = _item_accuracy(hour_items)
            if accuracy > best_accuracy:
                best_hour, best_accuracy = hour, accuracy

        return ContextualMetrics(
            by_weekday=by_weekday, best_hour=best_hour, best_hour_accuracy=best_accuracy
        )

    @staticmethod
    def predictions(
        user_word: UserWord, mistakes: list[LearningMistake], now: datetime
    ) -> Predictions:
        mastery = user_word.mastery_score
        mistake_penalty = len(mistakes) * 0.1

        if len(mistakes) > 5 or mastery < 50:
            risk = "high"
        elif len(mistakes) > 2 or mastery < 75:
            risk = "medium"
        else:
            risk = "low"

        plateau_risk = (
            70
            if user_word.correct_streak > PLATEAU_STREAK and mastery < PLATEAU_MASTERY_CEILING
            else 30
        )
        breakthrough = (
            [
                "Try different exercise types",
                "Practice in different contexts",
                "Take a short break from this word",
            ]
            if plateau_risk > 50
            else []
        )

        return Predictions(
            forgetting_curve=[
                RetentionPoint(days=1, probability=round_to(max(0.9 - mistake_penalty, 0.3), 2)),
                RetentionPoint(days=7, probability=round_to(max(0.8 - mistake_penalty, 0.2), 2)),
                RetentionPoint(days=30, probability=round_to(max(0.7 - mistake_penalty, 0.1), 2)),
            ],
            next_optimal_review=user_word.next_srs_review
            or now + timedelta(hours=max(user_word.srs_level, 1) * 24),
            retention_risk=risk,
            mastery_timeline=MasteryTimeline(
                optimistic=max(1, int((100 - mastery) // 8)),
                realistic=max(1, int((100 - mastery) // 5)),
                conservative=max(1, int((100 - mastery) // 3)),
            ),
            plateau_risk=plateau_risk,
            breakthrough_recommendations=breakthrough,
            next_exercise_type=ProgressionService.determine_exercise_type(user_word).exercise_type,
            recommended_intensity="increase" if mastery < 70 else "maintain",
        )

    @staticmethod
    def insights(
        user_word: UserWord, items: list[SessionItem], mistakes: list[LearningMistake]
    ) -> list[Insight]:
        result = []
        if user_word.mastery_score > 80:
            result.append(
                Insight(
                    kind="achievement",
                    title="High Mastery Achieved",
                    description="You have achieved high mastery for this word",
                    confidence=90,
                )
            )
        if len(mistakes) > HIGH_MISTAKE_COUNT:
            result.append(
                Insight(
                    kind="concern",
                    title="High Mistake Count",
                    description="This word has been challenging for you",
                    confidence=85,
                    suggested_action="Focus extra practice time on this word",
                )
            )
        if _item_accuracy(items) > 80:
            result.append(
                Insight(
                    kind="improvement",
                    title="Consistent Performance",
                    description="Your accuracy with this word is consistently high",
                    confidence=80,
                )
            )
        return result

    @staticmethod
    def recommendations(
        user_word: UserWord, mistakes: list[LearningMistake]
    ) -> list[Recommendation]:
        result = []
        if user_word.mastery_score < 70:
            result.append(
                Recommendation(
                    category="practice_timing",
                    priority="high",
                    recommendation="Practice this word more frequently",
                    expected_improvement="Faster mastery and better retention",
                    effort="low",
                )
            )
        if len(mistakes) > 3:
            result.append(
                Recommendation(
                    category="exercise_type",
                    priority="medium",
                    recommendation="Try different exercise types for this word",
                    expected_improvement="Reduced mistake frequency",
                    effort="medium",
                )
            )
        return result

    @staticmethod
    def timeline(
        user_word: UserWord, items: list[SessionItem], now: datetime
    ) -> PerformanceTimeline:
        milestones = []
        dated = [item for item in items if item.created_at is not None]
        if dated:
            milestones.append(
                Milestone(
                    date=dated[0].created_at or now,
                    event="first_attempt",
                    details="First practice attempt for this word",
                    performance=0,
                )
            )
        first_correct = next((item for item in dated if item.is_correct), None)
        if first_correct is not None:
            milestones.append(
                Milestone(
                    date=first_correct.created_at or now,
                    event="first_correct",
                    details="First correct answer achieved",
                    performance=25,
                )
            )
        if user_word.correct_streak >= STREAK_MILESTONE:
            milestones.append(
                Milestone(
                    date=user_word.last_reviewed_at or now,
                    event="streak_milestone",
                    details=f"Achieved {user_word.correct_streak} correct streak",
                    performance=75,
                )
            )
        if user_word.learned_at is not None:
            milestones.append(
                Milestone(
                    date=user_word.learned_at,
                    event="mastered",
                    details="Word marked as learned",
                    performance=100,
                )
            )

        mastery = user_word.mastery_score
        return PerformanceTimeline(
            milestones=milestones,
            trend=[
                TrendPoint(
                    date=item.created_at or now,
                    accuracy=100 if item.is_correct else 0,
                    response_time=item.response_time,
                )
                for item in dated[-TREND_POINTS:]
            ],
            forecast=[
                ForecastPoint(
                    date=now + timedelta(days=7),
                    predicted_performance=min(100.0, mastery + 10),
                ),
                ForecastPoint(
                    date=now + timedelta(days=30),
                    predicted_performance=min(100.0, mastery + 25),
                ),
            ],
        )

    @classmethod
    def analyze(
        cls,
        user_word: UserWord,
        items: list[SessionItem],
        mistakes: list[LearningMistake],
        now: datetime,
    ) -> WordAnalytics:
        """Build the full report for one dictionary entry."""
        return WordAnalytics(
            user_word_id=user_word.id.value,
            word=user_word.word_text,
            basic=cls.basic_metrics(user_word, items),
            session_performance=cls.session_performance(items),
            progression=cls.progression_metrics(user_word, items, now),
            errors=cls.error_analytics(user_word, items, mistakes),
            comparative=cls.comparative_metrics(user_word, items),
            modality=cls.modality_metrics(user_word, items),
            contextual=cls.contextual_metrics(items),
            predictions=cls.predictions(user_word, mistakes, now),
            insights=cls.insights(user_word, items, mistakes),
            recommendations=cls.recommendations(user_word, mistakes),
            timeline=cls.timeline(user_word, items, now),
        )
