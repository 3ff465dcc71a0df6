"""Tests for WordAttentionService."""

from datetime import timedelta

from lexiflow.domain.analytics.learner_reports import UrgencyLevel
from lexiflow.domain.analytics.services.word_attention_service import (
    WordAttentionService,
    consistency_score,
    recent_performance,
)
from lexiflow.domain.practice.entities.learning_mistake import LearningMistake
from lexiflow.domain.practice.value_objects import MistakeType
from lexiflow.domain.vocabulary.entities.user_word import UserWord
from lexiflow.domain.vocabulary.value_objects import LearningStatus
from tests.unit.factories import NOW, make_mistake, make_user_word


def _mistakes(user_word_id: int, days_ago: list[int]) -> list[LearningMistake]:
    return [
        make_mistake(user_word_id, NOW - timedelta(days=days), mistake_id=index)
        for index, days in enumerate(days_ago)
    ]


def _struggling(user_word_id: int) -> UserWord:
    return make_user_word(
        user_word_id,
        review_count=2,
        amount_of_mistakes=2,
        learning_status=LearningStatus.DIFFICULT,
    )


class TestPatternScores:
    def test_few_attempts_are_neutral(self) -> None:
        mistakes = _mistakes(1, [1, 2])

        assert consistency_score(4, mistakes) == 50
        assert recent_performance(4, mistakes) == 50

    def test_mistakes_on_one_day(self) -> None:
        assert consistency_score(10, _mistakes(1, [1, 1, 1])) == 70
        assert consistency_score(10, []) == 70

    def test_consistency_from_daily_spread(self) -> None:
        # three mistakes one day, one the next: variance of [3, 1] is 1
        assert consistency_score(10, _mistakes(1, [1, 1, 1, 2])) == 90

    def test_recent_performance(self) -> None:
        assert recent_performance(20, _mistakes(1, [1, 1, 2, 3])) == 60
        assert recent_performance(6, _mistakes(1, [1] * 8)) == 0


class TestAnalyze:
    def test_struggling_word(self) -> None:
        difficulty = WordAttentionService.analyze(_struggling(1), _mistakes(1, [1, 2]))

        assert difficulty.mistake_rate == 100.0
        assert difficulty.consistency_score == 50
        assert difficulty.recent_performance == 50
        assert difficulty.difficulty_score == 82
        assert difficulty.mistake_types == {MistakeType.SPELLING: 2}

    def test_well_known_word(self) -> None:
        entry = make_user_word(
            1, review_count=10, mastery_score=100.0, learning_status=LearningStatus.LEARNED
        )

        difficulty = WordAttentionService.analyze(entry, [])

        assert difficulty.mistake_rate == 0.0
        assert difficulty.recent_performance == 100
        assert difficulty.difficulty_score == 8

    def test_mistake_rate_is_capped(self) -> None:
        entry = make_user_word(1, review_count=1, amount_of_mistakes=3)

        assert WordAttentionService.analyze(entry, []).mistake_rate == 100.0


class TestNeedingAttention:
    def test_ranks_by_urgency_then_difficulty(self) -> None:
        critical = _struggling(4)
        declining = make_user_word(
            5,
            review_count=10,
            amount_of_mistakes=6,
            mastery_score=20.0,
            learning_status=LearningStatus.NEEDS_REVIEW,
        )
        easy = make_user_word(
            2, review_count=10, mastery_score=100.0, learning_status=LearningStatus.LEARNED
        )
        unpracticed = make_user_word(3, learning_status=LearningStatus.DIFFICULT)
        mistakes = {
            1: _mistakes(1, [1, 2]),
            4: [
                make_mistake(4, NOW, mistake_type, mistake_id=index)
                for index, mistake_type in enumerate(
                    [
                        MistakeType.SPELLING,
                        MistakeType.MEANING,
                        MistakeType.TRANSLATION,
                        MistakeType.RECOGNITION,
                    ]
                )
            ],
            5: _mistakes(5, [1, 1, 1, 1, 1, 1, 3]),
        }

        items = WordAttentionService.needing_attention(
            [declining, _struggling(1), easy, unpracticed, critical], mistakes
        )

        assert [item.user_word_id for item in items] == [4, 1, 5]
        assert [item.urgency for item in items] == [
            UrgencyLevel.HIGH,
            UrgencyLevel.HIGH,
            UrgencyLevel.MEDIUM,
        ]
        assert items[0].difficulty_score == 97
        assert items[0].primary_issue == "Critical difficulty - multiple learning challenges"
        assert items[1].primary_issue == "Very high mistake rate"
        assert items[2].difficulty_score == 73
        assert items[2].primary_issue == "Declining recent performance"

    def test_limit(self) -> None:
        entries = [_struggling(i) for i in range(1, 6)]

        items = WordAttentionService.needing_attention(entries, {}, limit=2)

        assert [item.user_word_id for item in items] == [1, 2]

    def test_nothing_practiced(self) -> None:
        assert WordAttentionService.needing_attention([make_user_word()], {}) == []
