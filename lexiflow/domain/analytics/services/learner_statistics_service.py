"""
Learner-wide statistics and activity analytics.

Inputs are plain domain objects: the learner, their active dictionary entries,
their sessions (any order) and their mistake log. Days are UTC calendar days.
"""

import statistics
from collections import Counter, defaultdict
from datetime import date, datetime, timedelta

from lexiflow.domain.analytics.learner_reports import (
    DailyActivity,
    GoalProgress,
    LanguageProgress,
    LearnerStatistics,
    LearningAnalytics,
    LearningPatterns,
    LearningProgress,
    MistakeSummary,
    MistakeTypeCount,
    ProblemWord,
    ProficiencyLevel,
    SessionStatistics,
    VocabularyGrowthPoint,
    WeekdayActivity,
)
from lexiflow.domain.identity.entities.user import User
from lexiflow.domain.practice.entities.learning_mistake import LearningMistake
from lexiflow.domain.practice.entities.learning_session import LearningSession
from lexiflow.domain.practice.value_objects import SessionType
from lexiflow.domain.vocabulary.entities.user_word import UserWord
from lexiflow.domain.vocabulary.value_objects import LearningStatus
from lexiflow.utils import round_half_up, round_to

WEEKDAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
RECENT_DAYS = 7
MONTH_DAYS = 30
TOP_PROBLEM_WORDS = 5
IMPROVEMENT_WINDOW = 5

# (vocabulary size below, average mastery below, level); the first matching row wins
PROFICIENCY_BANDS = (
    (500, 30, ProficiencyLevel.BEGINNER),
    (1500, 50, ProficiencyLevel.ELEMENTARY),
    (3000, 70, ProficiencyLevel.INTERMEDIATE),
    (5000, 85, ProficiencyLevel.ADVANCED),
)


def percent(part: float, whole: float) -> float:
    return round_to(part / whole * 100, 2) if whole else 0.0


def session_accuracy(session: LearningSession) -> float:
    """Accuracy of one session in 0..100; sessions without answers count as 0."""
    return session.current_accuracy


def weekday_name(moment: datetime) -> str:
    # Python weeks start on Monday; the report lists Sunday first
    return WEEKDAYS[(moment.weekday() + 1) % 7]


def study_streaks(days: set[date], today: date) -> tuple[int, int]:
    """
    Returns:
        (current streak ending today, longest run of consecutive days)
    """
    current = 0
    day = today
    while day in days:
        current += 1
        day -= timedelta(days=1)

    longest = run = 0
    previous: date | None = None
    for day in sorted(days):
        run = run + 1 if previous is not None and day - previous == timedelta(days=1) else 1
        longest = max(longest, run)
        previous = day
    return current, longest


def most_active_hour(sessions: list[LearningSession]) -> int:
    """Hour of day (0..23) with most session starts; the earliest hour wins ties."""
    counts = Counter(session.start_time.hour for session in sessions)
    if not counts:
        return 0
    return min(counts, key=lambda hour: (-counts[hour], hour))


def weekly_distribution(sessions: list[LearningSession]) -> list[WeekdayActivity]:
    by_day: dict[str, list[LearningSession]] = defaultdict(list)
    for session in sessions:
        by_day[weekday_name(session.start_time)].append(session)
    return [
        WeekdayActivity(
            day=day,
            sessions=len(by_day[day]),
            average_minutes=(
                round_to(statistics.fmean(s.duration or 0 for s in by_day[day]) / 60, 2)
                if by_day[day]
                else 0.0
            ),
        )
        for day in WEEKDAYS
    ]


def mistakes_by_type(mistakes: list[LearningMistake]) -> list[MistakeTypeCount]:
    """Mistake counts per type, most frequent first."""
    counts = Counter(mistake.mistake_type for mistake in mistakes)
    return [
        MistakeTypeCount(mistake_type=kind, count=count, percentage=percent(count, len(mistakes)))
        for kind, count in sorted(counts.items(), key=lambda pair: (-pair[1], pair[0].value))
    ]


def problem_words(
    mistakes: list[LearningMistake], entries: list[UserWord], limit: int
) -> list[ProblemWord]:
    """Entries with the most logged mistakes, worst first."""
    texts = {entry.id.value: entry.word_text for entry in entries}
    grouped: dict[int, list[LearningMistake]] = defaultdict(list)
    for mistake in mistakes:
        grouped[mistake.user_word_id.value].append(mistake)

    ranked = sorted(grouped.items(), key=lambda pair: (-len(pair[1]), pair[0]))[:limit]
    words = []
    for user_word_id, word_mistakes in ranked:
        times = [mistake.created_at for mistake in word_mistakes if mistake.created_at]
        words.append(
            ProblemWord(
                user_word_id=user_word_id,
                word_text=texts.get(user_word_id, ""),
                mistake_count=len(word_mistakes),
                last_mistake_at=max(times, default=None),
                mistake_types=sorted(
                    {mistake.mistake_type for mistake in word_mistakes}, key=lambda kind: kind.value
                ),
            )
        )
    return words


def estimate_proficiency(vocabulary_size: int, average_mastery: float) -> ProficiencyLevel:
    for size_below, mastery_below, level in PROFICIENCY_BANDS:
        if vocabulary_size < size_below or average_mastery < mastery_below:
            return level
    return ProficiencyLevel.PROFICIENT


class LearnerStatisticsService:
    """Stateless calculations behind the learner statistics and analytics reports."""

    @staticmethod
    def learning_progress(
        entries: list[UserWord], sessions: list[LearningSession], now: datetime
    ) -> LearningProgress:
        by_status = Counter(entry.learning_status for entry in entries)
        current, longest = study_streaks(
            {session.start_time.date() for session in sessions}, now.date()
        )
        return LearningProgress(
            total_words=len(entries),
            words_learned=by_status[LearningStatus.LEARNED],
            words_in_progress=by_status[LearningStatus.IN_PROGRESS],
            words_needing_review=by_status[LearningStatus.NEEDS_REVIEW],
            difficult_words=by_status[LearningStatus.DIFFICULT],
            average_mastery_score=(
                round_to(statistics.fmean(entry.mastery_score for entry in entries), 2)
                if entries
                else 0.0
            ),
            current_streak=current,
            longest_streak=longest,
            progress_percentage=percent(by_status[LearningStatus.LEARNED], len(entries)),
        )

    @staticmethod
    def session_statistics(sessions: list[LearningSession], now: datetime) -> SessionStatistics:
        durations = [session.duration for session in sessions if session.duration is not None]
        correct = sum(session.correct_answers for session in sessions)
        answered = sum(session.total_answers for session in sessions)
        return SessionStatistics(
            total_sessions=len(sessions),
            total_study_minutes=round_half_up(sum(durations) / 60),
            average_session_minutes=(
                round_half_up(statistics.fmean(durations) / 60) if durations else 0
            ),
            total_words_studied=sum(session.words_studied for session in sessions),
            average_accuracy=percent(correct, answered),
            best_score=max((session.score or 0.0 for session in sessions), default=0.0),
            recent_sessions=sum(
                1
                for session in sessions
                if session.start_time >= now - timedelta(days=RECENT_DAYS)
            ),
            last_session_at=max((session.start_time for session in sessions), default=None),
        )

    @staticmethod
    def improvement_rate(sessions: list[LearningSession]) -> float:
        """
        Percentage change in words studied per session: the latest five sessions
        against the five before them. Zero with fewer than five sessions.
        """
        newest_first = sorted(sessions, key=lambda session: session.start_time, reverse=True)
        if len(newest_first) < IMPROVEMENT_WINDOW:
            return 0.0
        recent = statistics.fmean(s.words_studied for s in newest_first[:IMPROVEMENT_WINDOW])
        older_sessions = newest_first[IMPROVEMENT_WINDOW : IMPROVEMENT_WINDOW * 2]
        older = (
            statistics.fmean(s.words_studied for s in older_sessions) if older_sessions else recent
        )
        if older == 0:
            return 0.0
        return round_to((recent - older) / older * 100, 2)

    @staticmethod
    def goal_progress(
        sessions: list[LearningSession], daily_goal: int, now: datetime
    ) -> GoalProgress:
        month_start = now - timedelta(days=MONTH_DAYS)
        month = [session for session in sessions if session.start_time >= month_start]

        per_day: dict[date, int] = defaultdict(int)
        for session in month:
            per_day[session.start_time.date()] += session.words_studied
        days_met = sum(1 for words in per_day.values() if words >= daily_goal)

        return GoalProgress(
            daily_goal=daily_goal,
            words_today=per_day.get(now.date(), 0),
            words_this_week=sum(
                session.words_studied
                for session in month
                if session.start_time >= now - timedelta(days=RECENT_DAYS)
            ),
            words_this_month=sum(session.words_studied for session in month),
            goal_achievement_rate=percent(days_met, min(len(per_day), MONTH_DAYS)),
        )

    @classmethod
    def build(
        cls,
        user: User,
        entries: list[UserWord],
        sessions: list[LearningSession],
        mistakes: list[LearningMistake],
        now: datetime,
    ) -> LearnerStatistics:
        progress = cls.learning_progress(entries, sessions, now)
        mistake_types = Counter(mistake.mistake_type for mistake in mistakes)
        recent_sessions = [
            session
            for session in sessions
            if session.start_time >= now - timedelta(days=MONTH_DAYS)
        ]
        return LearnerStatistics(
            learning_progress=progress,
            sessions=cls.session_statistics(sessions, now),
            mistakes=MistakeSummary(
                total_mistakes=len(mistakes),
                most_common_type=(
                    min(mistake_types, key=lambda kind: (-mistake_types[kind], kind.value))
                    if mistake_types
                    else None
                ),
                improvement_rate=cls.improvement_rate(recent_sessions),
                problem_words=problem_words(mistakes, entries, TOP_PROBLEM_WORDS),
            ),
            goal_progress=cls.goal_progress(sessions, user.learning_settings.daily_goal, now),
            language_progress=LanguageProgress(
                base_language_code=user.base_language_code,
                target_language_code=user.target_language_code,
                proficiency_level=estimate_proficiency(
                    progress.total_words, progress.average_mastery_score
                ),
                estimated_vocabulary_size=progress.total_words,
            ),
        )

    @staticmethod
    def analytics(
        entries: list[UserWord],
        sessions: list[LearningSession],
        mistakes: list[LearningMistake],
        days: int,
        now: datetime,
    ) -> LearningAnalytics:
        """
        Activity over the last ``days`` days. Sessions and mistakes outside the
        period are ignored; vocabulary growth starts from the entries that
        existed before it.
        """
        since = now - timedelta(days=days)
        period = sorted(
            (session for session in sessions if session.start_time >= since),
            key=lambda session: session.start_time,
        )

        per_day: dict[date, list[LearningSession]] = defaultdict(list)
        for session in period:
            per_day[session.start_time.date()].append(session)
        daily = [
            DailyActivity(
                day=day,
                words_studied=sum(s.words_studied for s in day_sessions),
                accuracy=percent(
                    sum(s.correct_answers for s in day_sessions),
                    sum(s.total_answers for s in day_sessions),
                ),
            )
            for day, day_sessions in sorted(per_day.items())
        ]

        type_counts = Counter(session.session_type for session in period)
        preferred = (
            min(type_counts, key=lambda kind: (-type_counts[kind], kind.value))
            if type_counts
            else SessionType.PRACTICE
        )

        created = [entry.created_at for entry in entries if entry.created_at is not None]
        total = sum(1 for moment in created if moment < since)
        added_per_day = Counter(moment.date() for moment in created if moment >= since)
        growth = []
        for day in sorted(added_per_day):
            total += added_per_day[day]
            growth.append(VocabularyGrowthPoint(day=day, total_words=total))

        return LearningAnalytics(
            days=days,
            daily_progress=daily,
            mistakes_by_type=mistakes_by_type(
                [m for m in mistakes if m.created_at is not None and m.created_at >= since]
            ),
            patterns=LearningPatterns(
                most_active_hour=most_active_hour(period),
                average_session_minutes=(
                    round_to(statistics.fmean(s.duration or 0 for s in period) / 60, 2)
                    if period
                    else 0.0
                ),
                preferred_session_type=preferred,
                weekly_distribution=weekly_distribution(period),
            ),
            vocabulary_growth=growth,
        )
