"""Tests for SrsScheduler."""

from datetime import timedelta

from lexiflow.domain.practice.services.srs_scheduler import SrsScheduler
from lexiflow.domain.vocabulary.entities.user_word import UserWord
from tests.unit.factories import NOW, make_user_word


def _words() -> dict[str, UserWord]:
    return {
        "overdue": make_user_word(1, "apple", next_srs_review=NOW - timedelta(hours=2), srs_level=2),
        "due": make_user_word(2, "bread", next_srs_review=NOW + timedelta(hours=3)),
        "upcoming": make_user_word(3, "cheese", next_srs_review=NOW + timedelta(days=3)),
        "far": make_user_word(4, "garden", next_srs_review=NOW + timedelta(days=10)),
        "new": make_user_word(5, "window"),
    }


class TestDueWords:
    def test_due_and_unscheduled_words(self) -> None:
        words = _words()

        due = SrsScheduler.due_words(list(words.values()), NOW)

        assert due == [words["overdue"], words["new"]]

    def test_deleted_words_are_skipped(self) -> None:
        words = _words()
        words["overdue"].soft_delete(NOW)

        assert SrsScheduler.due_words(list(words.values()), NOW) == [words["new"]]

    def test_limit(self) -> None:
        words = _words()

        assert SrsScheduler.due_words(list(words.values()), NOW, limit=1) == [words["overdue"]]


class TestReviewSchedule:
    def test_groups_by_date_with_priority(self) -> None:
        schedule = SrsScheduler.review_schedule(list(_words().values()), NOW, days=7)

        assert list(schedule) == ["2024-06-15", "2024-06-18"]
        assert [(r.user_word.word_text, r.priority) for r in schedule["2024-06-15"]] == [
            ("apple", "overdue"),
            ("bread", "due"),
        ]
        assert schedule["2024-06-18"][0].priority == "upcoming"

    def test_longer_window_includes_later_reviews(self) -> None:
        schedule = SrsScheduler.review_schedule(list(_words().values()), NOW, days=30)

        assert "2024-06-25" in schedule


class TestStatistics:
    def test_counts(self) -> None:
        words = list(_words().values())
        words.append(make_user_word(6, "tomorrow", next_srs_review=NOW + timedelta(hours=20)))
        words[0].srs_interval = 12
        words[0].last_srs_success = True

        stats = SrsScheduler.statistics(words, NOW)

        assert stats.total_words == 6
        assert stats.overdue == 1
        assert stats.due_today == 1
        assert stats.due_tomorrow == 1
        assert stats.level_distribution == {0: 5, 2: 1}
        assert stats.average_interval == 2.0
        assert stats.streak_days == 1

    def test_empty(self) -> None:
        stats = SrsScheduler.statistics([], NOW)

        assert stats.total_words == 0
        assert stats.average_interval == 0.0
        assert stats.level_distribution == {}


class TestRecalculate:
    def test_only_unscheduled_by_default(self) -> None:
        words = _words()

        result = SrsScheduler.recalculate_intervals(list(words.values()), NOW)

        assert result.updated == [words["new"]]
        assert words["new"].srs_interval == 1
        assert words["new"].next_srs_review == NOW + timedelta(hours=1)

    def test_recalculate_all_uses_level_and_streak(self) -> None:
        word = make_user_word(
            srs_level=2,
            correct_streak=5,
            last_srs_success=True,
            next_srs_review=NOW + timedelta(days=1),
        )

        result = SrsScheduler.recalculate_intervals([word], NOW, recalculate_all=True)

        assert result.updated_count == 1
        # 8 hour base doubled by a capped streak bonus
        assert word.srs_interval == 16


class TestComposeReviewSession:
    """Test suite for filling a review session."""

    def test_overdue_then_due_then_new(self) -> None:
        words = _words()
        words["later_new"] = make_user_word(
            7, "later", created_at=NOW + timedelta(minutes=5)
        )

        plan = SrsScheduler.compose_review_session(list(words.values()), NOW, max_words=4)

        assert plan.words == [words["overdue"], words["due"], words["new"], words["later_new"]]
        assert (plan.overdue_count, plan.due_count, plan.new_count) == (1, 1, 2)
        assert plan.total == 4

    def test_due_soon_share_is_capped(self) -> None:
        due_soon = [
            make_user_word(n, f"word{n}", next_srs_review=NOW + timedelta(hours=n))
            for n in range(1, 6)
        ]

        plan = SrsScheduler.compose_review_session(due_soon, NOW, max_words=4)

        # floor(4 * 0.7)
        assert plan.due_count == 2

    def test_overdue_share_without_priority(self) -> None:
        overdue = [
            make_user_word(n, f"word{n}", next_srs_review=NOW - timedelta(hours=n))
            for n in range(1, 10)
        ]

        prioritized = SrsScheduler.compose_review_session(overdue, NOW, max_words=10)
        shared = SrsScheduler.compose_review_session(
            overdue, NOW, max_words=10, prioritize_overdue=False
        )

        assert prioritized.overdue_count == 9
        assert shared.overdue_count == 7

    def test_reviewed_words_without_schedule_are_not_new(self) -> None:
        reviewed = make_user_word(review_count=2)

        plan = SrsScheduler.compose_review_session([reviewed], NOW)

        assert plan.words == []
