"""Tests for the UserWord aggregate."""

from datetime import timedelta

import pytest

from lexiflow.domain.common.exceptions import DomainError, ValidationError
from lexiflow.domain.dictionary.value_objects import DifficultyLevel
from lexiflow.domain.vocabulary.entities.user_word import WordLearned
from lexiflow.domain.vocabulary.value_objects import LearningStatus
from tests.unit.factories import NOW, make_user_word


class TestInvariants:
    def test_srs_level_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            make_user_word(srs_level=6)

    def test_mastery_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            make_user_word(mastery_score=101)

    def test_correct_answers_derived_from_mastery(self) -> None:
        assert make_user_word(review_count=4, mastery_score=75).correct_answers == 3
        assert make_user_word().correct_answers == 0


class TestCustomize:
    def test_custom_values_override_catalogue(self) -> None:
        user_word = make_user_word()

        user_word.customize(custom_translation="  яблочко ", custom_definition="Fruit")

        assert user_word.translation == "яблочко"
        assert user_word.definition_text == "Fruit"
        assert user_word.is_modified is True

    def test_blank_value_falls_back_to_catalogue(self) -> None:
        user_word = make_user_word(custom_translation="яблочко")

        user_word.customize(custom_translation="  ")

        assert user_word.custom_translation is None
        assert user_word.translation == "яблоко"

    def test_tags_are_normalized(self) -> None:
        user_word = make_user_word()

        user_word.customize(custom_tags=["Fruit", " food ", "fruit", ""])

        assert user_word.custom_tags == ["food", "fruit"]

    def test_difficulty_level(self) -> None:
        user_word = make_user_word()

        user_word.customize(custom_difficulty_level=DifficultyLevel.BEGINNER)

        assert user_word.custom_difficulty_level == DifficultyLevel.BEGINNER

    def test_nothing_to_change(self) -> None:
        user_word = make_user_word()

        user_word.customize()

        assert user_word.is_modified is False


class TestLifecycle:
    def test_toggle_favorite(self) -> None:
        user_word = make_user_word()

        assert user_word.toggle_favorite() is True
        assert user_word.toggle_favorite() is False

    def test_soft_delete_and_restore(self) -> None:
        user_word = make_user_word()

        user_word.soft_delete(NOW)
        assert user_word.is_deleted is True
        with pytest.raises(DomainError):
            user_word.soft_delete(NOW)

        user_word.restore()
        assert user_word.deleted_at is None
        with pytest.raises(DomainError):
            user_word.restore()


class TestLearning:
    """Test suite for review counters and progression."""

    def test_record_review(self) -> None:
        user_word = make_user_word()

        user_word.record_review(True, NOW)
        user_word.record_review(True, NOW + timedelta(minutes=1))

        assert user_word.review_count == 2
        assert user_word.correct_streak == 2
        assert user_word.started_learning_at == NOW
        assert user_word.last_reviewed_at == NOW + timedelta(minutes=1)
        assert user_word.last_srs_success is True

    def test_wrong_answer_resets_streak(self) -> None:
        user_word = make_user_word(correct_streak=4, review_count=4)

        user_word.record_review(False, NOW)

        assert user_word.correct_streak == 0
        assert user_word.amount_of_mistakes == 1
        assert user_word.last_srs_success is False

    def test_record_skip(self) -> None:
        user_word = make_user_word()

        user_word.record_skip(NOW)

        assert user_word.skip_count == 1
        assert user_word.review_count == 0

    def test_learning_emits_event_once(self) -> None:
        user_word = make_user_word()

        user_word.apply_progression(5, LearningStatus.LEARNED, 95, NOW)
        user_word.apply_progression(5, LearningStatus.LEARNED, 100, NOW + timedelta(days=1))

        assert user_word.learned_at == NOW
        assert user_word.progress == 100.0
        events = user_word.collect_events()
        assert len(events) == 1
        assert isinstance(events[0], WordLearned)
        assert user_word.pending_events == []

    def test_progression_level_validated(self) -> None:
        with pytest.raises(ValidationError):
            make_user_word().apply_progression(7, LearningStatus.IN_PROGRESS, 50, NOW)

    def test_schedule_review(self) -> None:
        user_word = make_user_word()

        next_review = user_word.schedule_review(6, NOW)

        assert next_review == NOW + timedelta(hours=6)
        assert user_word.srs_interval == 6
        assert user_word.is_due(NOW) is False
        assert user_word.is_due(NOW + timedelta(hours=6)) is True

    def test_schedule_review_needs_an_hour(self) -> None:
        with pytest.raises(ValidationError):
            make_user_word().schedule_review(0, NOW)

    def test_needs_review(self) -> None:
        assert make_user_word(learning_status=LearningStatus.NEEDS_REVIEW).needs_review(NOW)
        assert not make_user_word().needs_review(NOW)

    def test_planned_review_comes_due(self) -> None:
        user_word = make_user_word()

        user_word.plan_next_review(NOW + timedelta(days=3))

        assert not user_word.needs_review(NOW)
        assert user_word.needs_review(NOW + timedelta(days=3))


class TestSetLearningStatus:
    """Test suite for setting the learning status by hand."""

    def test_counts_as_review(self) -> None:
        user_word = make_user_word(review_count=2)

        user_word.set_learning_status(LearningStatus.NEEDS_REVIEW, NOW)

        assert user_word.learning_status == LearningStatus.NEEDS_REVIEW
        assert user_word.review_count == 3
        assert user_word.last_reviewed_at == NOW

    def test_in_progress_sets_start_once(self) -> None:
        user_word = make_user_word()

        user_word.set_learning_status(LearningStatus.IN_PROGRESS, NOW)
        user_word.set_learning_status(LearningStatus.IN_PROGRESS, NOW + timedelta(days=1))

        assert user_word.started_learning_at == NOW

    def test_learned_records_event(self) -> None:
        user_word = make_user_word()

        user_word.set_learning_status(
            LearningStatus.LEARNED,
            NOW,
            progress=100,
            mastery_score=92,
            next_review_due=NOW + timedelta(days=7),
        )

        assert user_word.learned_at == NOW
        assert user_word.progress == 100.0
        assert user_word.mastery_score == 92.0
        assert user_word.next_review_due == NOW + timedelta(days=7)
        assert isinstance(user_word.pending_events[0], WordLearned)

    def test_optional_values_validated(self) -> None:
        user_word = make_user_word()

        with pytest.raises(ValidationError):
            user_word.set_learning_status(LearningStatus.LEARNED, NOW, mastery_score=120)
        with pytest.raises(ValidationError):
            user_word.set_learning_status(LearningStatus.LEARNED, NOW, progress=-1)
        assert user_word.review_count == 0
