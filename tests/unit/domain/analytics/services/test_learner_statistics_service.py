"""Tests for the learner statistics and learning analytics calculations."""

from datetime import date, timedelta

from lexiflow.domain.analytics.learner_reports import ProficiencyLevel
from lexiflow.domain.analytics.services.learner_statistics_service import (
    LearnerStatisticsService,
    estimate_proficiency,
    most_active_hour,
    study_streaks,
    weekday_name,
)
from lexiflow.domain.dictionary.value_objects import LanguageCode
from lexiflow.domain.identity.entities.user import User
from lexiflow.domain.practice.value_objects import MistakeType, SessionType
from lexiflow.domain.vocabulary.value_objects import LearningStatus
from tests.unit.factories import NOW, make_mistake, make_session, make_user_word


class TestHelpers:
    def test_current_streak_ends_today(self) -> None:
        today = NOW.date()
        days = {today - timedelta(days=offset) for offset in (0, 1, 2, 5, 6)}

        assert study_streaks(days, today) == (3, 3)

    def test_no_study_today_breaks_current_streak(self) -> None:
        today = NOW.date()

        assert study_streaks({date(2024, 6, 14), date(2024, 6, 13)}, today) == (0, 2)
        assert study_streaks(set(), today) == (0, 0)

    def test_most_active_hour_prefers_earliest_on_tie(self) -> None:
        sessions = [
            make_session(1, NOW.replace(hour=18)),
            make_session(2, NOW.replace(hour=9)),
            make_session(3, NOW.replace(hour=9, minute=30)),
            make_session(4, NOW.replace(hour=18, minute=10)),
        ]

        assert most_active_hour(sessions) == 9
        assert most_active_hour([]) == 0

    def test_weekday_name(self) -> None:
        assert weekday_name(NOW) == "Saturday"
        assert weekday_name(NOW + timedelta(days=1)) == "Sunday"

    def test_estimate_proficiency(self) -> None:
        assert estimate_proficiency(100, 90) == ProficiencyLevel.BEGINNER
        assert estimate_proficiency(600, 40) == ProficiencyLevel.ELEMENTARY
        assert estimate_proficiency(6000, 80) == ProficiencyLevel.ADVANCED
        assert estimate_proficiency(6000, 90) == ProficiencyLevel.PROFICIENT


class TestLearningProgress:
    def test_counts_statuses_and_streaks(self) -> None:
        entries = [
            make_user_word(1, learning_status=LearningStatus.LEARNED, mastery_score=90.0),
            make_user_word(2, learning_status=LearningStatus.IN_PROGRESS, mastery_score=50.0),
            make_user_word(3, learning_status=LearningStatus.DIFFICULT, mastery_score=10.0),
            make_user_word(4),
        ]
        sessions = [make_session(1, NOW), make_session(2, NOW - timedelta(days=1))]

        progress = LearnerStatisticsService.learning_progress(entries, sessions, NOW)

        assert progress.total_words == 4
        assert progress.words_learned == 1
        assert progress.words_in_progress == 1
        assert progress.difficult_words == 1
        assert progress.average_mastery_score == 37.5
        assert progress.progress_percentage == 25.0
        assert progress.current_streak == 2
        assert progress.longest_streak == 2

    def test_empty_dictionary(self) -> None:
        progress = LearnerStatisticsService.learning_progress([], [], NOW)

        assert progress.total_words == 0
        assert progress.average_mastery_score == 0.0
        assert progress.progress_percentage == 0.0


class TestSessionStatistics:
    def test_totals(self) -> None:
        sessions = [
            make_session(
                1, NOW - timedelta(hours=1), 8, 2, duration=600, words_studied=10, score=80.0
            ),
            make_session(
                2, NOW - timedelta(days=10), 3, 1, duration=900, words_studied=4, score=60.0
            ),
            make_session(3, NOW, end_time=None),
        ]

        result = LearnerStatisticsService.session_statistics(sessions, NOW)

        assert result.total_sessions == 3
        assert result.total_study_minutes == 25
        # 12.5 minutes rounds up
        assert result.average_session_minutes == 13
        assert result.total_words_studied == 14
        assert result.average_accuracy == 78.57
        assert result.best_score == 80.0
        assert result.recent_sessions == 2
        assert result.last_session_at == NOW


class TestImprovementRate:
    def test_compares_latest_five_with_previous_five(self) -> None:
        sessions = [
            make_session(i, NOW - timedelta(days=i), words_studied=12 if i < 5 else 10)
            for i in range(10)
        ]

        assert LearnerStatisticsService.improvement_rate(sessions) == 20.0

    def test_needs_five_sessions(self) -> None:
        sessions = [make_session(i, NOW - timedelta(days=i), words_studied=5) for i in range(4)]

        assert LearnerStatisticsService.improvement_rate(sessions) == 0.0


class TestGoalProgress:
    def test_daily_goal_achievement(self) -> None:
        sessions = [
            make_session(1, NOW, words_studied=3),
            make_session(2, NOW - timedelta(hours=2), words_studied=4),
            make_session(3, NOW - timedelta(days=1), words_studied=2),
            make_session(4, NOW - timedelta(days=3), words_studied=6),
            make_session(5, NOW - timedelta(days=40), words_studied=20),
        ]

        goal = LearnerStatisticsService.goal_progress(sessions, 5, NOW)

        assert goal.daily_goal == 5
        assert goal.words_today == 7
        assert goal.words_this_week == 15
        assert goal.words_this_month == 15
        assert goal.goal_achievement_rate == 66.67


class TestBuild:
    def test_full_report(self) -> None:
        user = User.create(
            email="learner@example.com",
            base_language_code=LanguageCode.RU,
            target_language_code=LanguageCode.EN,
        )
        entries = [make_user_word(1, word="apple"), make_user_word(2, word="pear")]
        mistakes = [
            make_mistake(1, NOW - timedelta(days=1), mistake_id=1),
            make_mistake(1, NOW - timedelta(days=2), mistake_id=2),
            make_mistake(1, NOW - timedelta(days=3), mistake_id=3),
            make_mistake(2, NOW - timedelta(days=1), MistakeType.MEANING, mistake_id=4),
        ]

        report = LearnerStatisticsService.build(user, entries, [], mistakes, NOW)

        assert report.mistakes.total_mistakes == 4
        assert report.mistakes.most_common_type == MistakeType.SPELLING
        assert [word.word_text for word in report.mistakes.problem_words] == ["apple", "pear"]
        assert report.mistakes.problem_words[0].mistake_count == 3
        assert report.mistakes.problem_words[0].last_mistake_at == NOW - timedelta(days=1)
        assert report.goal_progress.daily_goal == user.learning_settings.daily_goal
        assert report.language_progress.target_language_code == LanguageCode.EN
        assert report.language_progress.proficiency_level == ProficiencyLevel.BEGINNER
        assert report.language_progress.estimated_vocabulary_size == 2

    def test_no_mistakes(self) -> None:
        user = User.create(email="learner@example.com")

        report = LearnerStatisticsService.build(user, [], [], [], NOW)

        assert report.mistakes.total_mistakes == 0
        assert report.mistakes.most_common_type is None
        assert report.mistakes.problem_words == []


class TestAnalytics:
    def test_activity_over_period(self) -> None:
        sessions = [
            make_session(
                1, NOW - timedelta(days=1), 4, 1, words_studied=5, duration=600
            ),
            make_session(
                2,
                NOW - timedelta(days=1) + timedelta(hours=1),
                1,
                1,
                words_studied=3,
                duration=300,
                session_type=SessionType.REVIEW,
            ),
            make_session(3, NOW - timedelta(days=3), 2, 0, words_studied=2, duration=900),
            make_session(4, NOW - timedelta(days=20), 5, 5, words_studied=9, duration=60),
        ]
        mistakes = [
            make_mistake(1, NOW - timedelta(days=1), mistake_id=1),
            make_mistake(1, NOW - timedelta(days=1), mistake_id=2),
            make_mistake(2, NOW - timedelta(days=2), MistakeType.MEANING, mistake_id=3),
            make_mistake(2, NOW - timedelta(days=30), mistake_id=4),
        ]
        entries = [
            make_user_word(1, created_at=NOW - timedelta(days=30)),
            make_user_word(2, created_at=NOW - timedelta(days=2)),
            make_user_word(3, created_at=NOW - timedelta(days=2)),
            make_user_word(4, created_at=NOW - timedelta(days=1)),
        ]

        analytics = LearnerStatisticsService.analytics(entries, sessions, mistakes, 7, NOW)

        assert analytics.days == 7
        assert [(d.day, d.words_studied, d.accuracy) for d in analytics.daily_progress] == [
            (date(2024, 6, 12), 2, 100.0),
            (date(2024, 6, 14), 8, 71.43),
        ]
        assert [(m.mistake_type, m.count) for m in analytics.mistakes_by_type] == [
            (MistakeType.SPELLING, 2),
            (MistakeType.MEANING, 1),
        ]
        assert analytics.mistakes_by_type[0].percentage == 66.67
        assert analytics.patterns.preferred_session_type == SessionType.PRACTICE
        assert analytics.patterns.most_active_hour == 12
        assert analytics.patterns.average_session_minutes == 10.0
        friday = next(d for d in analytics.patterns.weekly_distribution if d.day == "Friday")
        assert friday.sessions == 2
        assert friday.average_minutes == 7.5
        assert [(p.day, p.total_words) for p in analytics.vocabulary_growth] == [
            (date(2024, 6, 13), 3),
            (date(2024, 6, 14), 4),
        ]

    def test_empty_period(self) -> None:
        analytics = LearnerStatisticsService.analytics([], [], [], 30, NOW)

        assert analytics.daily_progress == []
        assert analytics.mistakes_by_type == []
        assert analytics.vocabulary_growth == []
        assert analytics.patterns.preferred_session_type == SessionType.PRACTICE
        assert len(analytics.patterns.weekly_distribution) == 7
