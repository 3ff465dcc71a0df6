"""Tests for PerformanceMetricsService."""

from datetime import timedelta

import pytest

from lexiflow.domain.analytics.learner_reports import PerformanceScores, PerformanceTrend
from lexiflow.domain.analytics.services.performance_metrics_service import (
    PerformanceMetricsService,
)
from lexiflow.domain.vocabulary.value_objects import LearningStatus
from tests.unit.factories import NOW, make_mistake, make_session, make_user_word


class TestLearningEfficiency:
    def test_mastery_time_and_retention(self) -> None:
        entries = [
            make_user_word(
                1,
                learning_status=LearningStatus.LEARNED,
                started_learning_at=NOW - timedelta(days=10),
                learned_at=NOW - timedelta(days=2),
            ),
            make_user_word(
                2,
                learning_status=LearningStatus.NEEDS_REVIEW,
                created_at=NOW - timedelta(days=60),
                learned_at=NOW - timedelta(days=50),
            ),
            make_user_word(3),
        ]

        efficiency = PerformanceMetricsService.learning_efficiency(entries, NOW)

        assert efficiency.average_days_to_master == 9.0
        assert efficiency.words_learned_this_week == 1
        assert efficiency.retention_rate == 50.0
        assert efficiency.learning_velocity == 0.03

    def test_nothing_learned(self) -> None:
        efficiency = PerformanceMetricsService.learning_efficiency([make_user_word()], NOW)

        assert efficiency.average_days_to_master == 0.0
        assert efficiency.retention_rate == 0.0


class TestPractice:
    def test_session_figures(self) -> None:
        sessions = [
            make_session(
                1,
                NOW - timedelta(days=1),
                6,
                4,
                response_times=[1000, 3000],
                score=70.0,
                duration=600,
            ),
            make_session(
                2,
                NOW - timedelta(days=20),
                9,
                1,
                response_times=[2000],
                score=95.0,
                duration=1200,
            ),
        ]

        practice = PerformanceMetricsService.practice(sessions, NOW)

        assert practice.total_sessions == 2
        assert practice.average_accuracy == 75.0
        assert practice.average_response_time == 2000.0
        assert practice.fastest_response_time == 1000
        assert practice.slowest_response_time == 3000
        assert practice.consistency_score == 85.0
        assert practice.response_time_consistency == 18.35
        assert practice.trend == PerformanceTrend.DECLINING
        assert practice.recent_sessions == 1
        assert practice.best_score == 95.0
        assert practice.average_session_minutes == 15.0

    def test_improving_trend(self) -> None:
        sessions = [
            make_session(1, NOW - timedelta(days=5), 5, 5),
            make_session(2, NOW, 8, 2),
        ]

        assert PerformanceMetricsService.practice(sessions, NOW).trend == (
            PerformanceTrend.IMPROVING
        )

    def test_single_session_is_stable(self) -> None:
        practice = PerformanceMetricsService.practice([make_session(1, NOW, 1, 9)], NOW)

        assert practice.trend == PerformanceTrend.STABLE

    def test_no_sessions(self) -> None:
        practice = PerformanceMetricsService.practice([], NOW)

        assert practice.total_sessions == 0
        assert practice.trend == PerformanceTrend.STABLE


class TestMistakeAnalysis:
    def test_per_day_and_per_word(self) -> None:
        entries = [
            make_user_word(1, word="apple", amount_of_mistakes=3),
            make_user_word(2, word="pear", amount_of_mistakes=1),
            make_user_word(3, word="plum"),
        ]
        mistakes = [
            make_mistake(1, NOW - timedelta(days=1), mistake_id=1),
            make_mistake(1, NOW - timedelta(days=1), mistake_id=2),
            make_mistake(1, NOW - timedelta(days=2), mistake_id=3),
            make_mistake(2, NOW - timedelta(days=2), mistake_id=4),
        ]

        analysis = PerformanceMetricsService.mistake_analysis(entries, mistakes)

        assert analysis.total_mistakes == 4
        assert analysis.mistakes_per_study_day == 2.0
        assert analysis.average_mistakes_per_word == 1.33
        assert analysis.highest_mistake_word is not None
        assert analysis.highest_mistake_word.word_text == "apple"
        assert analysis.highest_mistake_word.mistake_count == 3


class TestStudyHabits:
    def test_streaks_and_consistency(self) -> None:
        sessions = [
            make_session(1, NOW),
            make_session(2, NOW - timedelta(days=1)),
            make_session(3, NOW - timedelta(days=5)),
            make_session(4, NOW - timedelta(days=40)),
        ]

        habits = PerformanceMetricsService.study_habits(sessions, NOW)

        assert habits.current_streak == 2
        assert habits.longest_streak == 2
        assert habits.study_consistency == 10.0
        assert habits.preferred_hour == 12
        assert len(habits.weekly_pattern) == 7


class TestVocabulary:
    def test_counts(self) -> None:
        entries = [
            make_user_word(1, created_at=NOW - timedelta(days=2), is_favorite=True),
            make_user_word(
                2, created_at=NOW - timedelta(days=10), is_modified=True, custom_notes="fruit"
            ),
            make_user_word(3, created_at=NOW - timedelta(days=60)),
        ]

        vocabulary = PerformanceMetricsService.vocabulary(entries, NOW)

        assert vocabulary.words_added_this_week == 1
        assert vocabulary.words_added_this_month == 2
        assert vocabulary.favorite_words == 1
        assert vocabulary.modified_words == 1
        assert vocabulary.words_with_notes == 1


class TestReviewSystem:
    def test_srs_overview(self) -> None:
        entries = [
            make_user_word(1, srs_level=2, next_srs_review=NOW - timedelta(hours=1)),
            make_user_word(
                2,
                srs_level=4,
                next_srs_review=NOW + timedelta(days=2),
                next_review_due=NOW - timedelta(days=1),
            ),
            make_user_word(3),
        ]

        review = PerformanceMetricsService.review_system(entries, NOW)

        assert review.words_needing_review == 1
        assert review.overdue_srs_words == 1
        assert review.average_srs_level == 2.0
        assert [share.count for share in review.srs_distribution] == [1, 0, 1, 0, 1, 0]
        assert review.srs_distribution[0].percentage == 33.33
        assert review.next_review_due == NOW + timedelta(days=2)


class TestDifficulty:
    def test_mastery_ranges_are_inclusive_upper_bounds(self) -> None:
        entries = [
            make_user_word(1, mastery_score=10.0),
            make_user_word(2, mastery_score=20.0),
            make_user_word(3, mastery_score=40.5),
            make_user_word(4, mastery_score=99.5),
        ]

        distribution = PerformanceMetricsService.difficulty(entries)

        assert {share.label: share.count for share in distribution.by_mastery} == {
            "0-20": 2,
            "21-40": 0,
            "41-60": 1,
            "61-80": 0,
            "81-100": 1,
        }
        assert distribution.average_difficulty == 57.5
        not_started = distribution.by_status[0]
        assert not_started.learning_status == LearningStatus.NOT_STARTED
        assert not_started.percentage == 100.0
        assert len(distribution.by_status) == len(LearningStatus)


class TestWordPerformance:
    def test_rankings(self) -> None:
        entries = [
            make_user_word(1, mastery_score=90.0, correct_streak=5, srs_level=3),
            make_user_word(
                2, mastery_score=40.0, correct_streak=1, amount_of_mistakes=3, skip_count=1
            ),
            make_user_word(3, mastery_score=60.0, skip_count=2),
        ]

        performance = PerformanceMetricsService.word_performance(entries, {2: (4, 2500.0)})

        assert [word.user_word_id for word in performance.top_words] == [1, 3, 2]
        assert [word.user_word_id for word in performance.struggling_words] == [2, 3]
        assert performance.struggling_words[0].average_response_time == 2500.0
        assert performance.average_correct_streak == 2.0
        assert performance.longest_correct_streak == 5
        assert performance.total_skips == 3
        assert performance.average_skips_per_word == 1.0
        assert performance.average_mastery_score == 63.33


class TestScores:
    def test_component_and_overall_scores(self) -> None:
        entries = [
            make_user_word(1, amount_of_mistakes=1, correct_streak=4, srs_level=2),
            make_user_word(2, amount_of_mistakes=3, skip_count=2),
        ]
        sessions = [
            make_session(1, NOW, 3, 1),
            make_session(2, NOW - timedelta(days=1), 1, 1),
            make_session(3, NOW - timedelta(days=2)),
        ]
        item_statistics = {1: (2, 1000.0), 2: (2, 3000.0)}

        scores = PerformanceMetricsService.scores(entries, sessions, item_statistics)

        assert scores.mistake_rate_score == 6.0
        assert scores.streak_score == 1.0
        assert scores.response_time_score == 8.0
        assert scores.skip_score == 8.0
        assert scores.srs_progression_score == 2.0
        assert scores.improvement_score == 6.3
        assert scores.overall_score == pytest.approx(5.0)

    def test_defaults_without_practice(self) -> None:
        scores = PerformanceMetricsService.scores([make_user_word()], [], {})

        assert scores.response_time_score == 5.0
        assert scores.improvement_score == 5.0

    def test_empty_dictionary_scores_zero(self) -> None:
        assert PerformanceMetricsService.scores([], [], {}) == PerformanceScores()


class TestBuild:
    def test_empty_learner(self) -> None:
        metrics = PerformanceMetricsService.build([], [], [], {}, NOW)

        assert metrics.practice.total_sessions == 0
        assert metrics.mistakes.total_mistakes == 0
        assert metrics.mistakes.highest_mistake_word is None
        assert metrics.word_performance.top_words == []
        assert metrics.review_system.next_review_due is None
        assert metrics.scores.overall_score == 0.0
