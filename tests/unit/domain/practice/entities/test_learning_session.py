"""Tests for the LearningSession aggregate."""

from datetime import timedelta

import pytest

from lexiflow.domain.common.exceptions import DomainError, ValidationError
from lexiflow.domain.common.value_objects.ids import SessionItemId, UserId, UserWordId
from lexiflow.domain.practice.entities.learning_session import (
    LearningSession,
    SessionCompleted,
    SessionItem,
)
from lexiflow.domain.practice.exceptions import (
    SessionAlreadyEndedError,
    SessionNotPausedError,
    SessionPausedError,
)
from lexiflow.domain.practice.value_objects import ExerciseType, SessionType
from tests.unit.factories import NOW


def _session(target_words: int = 4) -> LearningSession:
    return LearningSession.start(UserId(1), SessionType.PRACTICE, NOW, target_words=target_words)


class TestStart:
    def test_new_session_is_active(self) -> None:
        session = _session()

        assert session.is_active is True
        assert session.total_answers == 0
        assert session.current_accuracy == 0.0

    def test_end_before_start_rejected(self) -> None:
        with pytest.raises(DomainError):
            LearningSession(
                id=_session().id,
                user_id=UserId(1),
                session_type=SessionType.REVIEW,
                start_time=NOW,
                end_time=NOW - timedelta(minutes=1),
            )

    def test_target_words_validated(self) -> None:
        with pytest.raises(ValidationError):
            _session(target_words=0)


class TestRecordItem:
    def test_counters_follow_items(self) -> None:
        session = _session()

        session.record_item(UserWordId(1), True, 1200, exercise_type=ExerciseType.MAKE_UP_WORD)
        session.record_item(UserWordId(2), True, 800)
        session.record_item(UserWordId(1), False, 4000, attempts_count=2)

        assert session.correct_answers == 2
        assert session.incorrect_answers == 1
        assert session.words_studied == 3
        assert len(session.items) == 3
        assert session.completion_percentage == 75.0
        assert session.current_accuracy == pytest.approx(66.67, abs=0.01)

    def test_completion_is_capped(self) -> None:
        session = _session(target_words=1)

        session.record_item(UserWordId(1), True, 500)
        session.record_item(UserWordId(2), True, 500)

        assert session.completion_percentage == 100.0

    def test_ended_session_rejects_items(self) -> None:
        session = _session()
        session.cancel(NOW + timedelta(minutes=5))

        with pytest.raises(SessionAlreadyEndedError):
            session.record_item(UserWordId(1), True, 500)

    def test_item_validation(self) -> None:
        with pytest.raises(ValidationError):
            SessionItem(
                id=SessionItemId(0), user_word_id=UserWordId(1), is_correct=True, response_time=-1
            )
        with pytest.raises(ValidationError):
            SessionItem(
                id=SessionItemId(0),
                user_word_id=UserWordId(1),
                is_correct=True,
                response_time=10,
                attempts_count=0,
            )


class TestFinish:
    """Test suite for completing, cancelling and updating sessions."""

    def test_complete(self) -> None:
        session = _session()

        session.complete(score=80.0, difficulty_score=0.4, now=NOW + timedelta(minutes=10))

        assert session.is_active is False
        assert session.duration == 600
        assert session.score == 80.0
        assert session.completion_percentage == 100.0
        assert session.difficulty_score == 0.4
        assert isinstance(session.pending_events[0], SessionCompleted)

    def test_complete_twice(self) -> None:
        session = _session()
        session.complete(score=80.0, difficulty_score=0.4, now=NOW)

        with pytest.raises(SessionAlreadyEndedError):
            session.complete(score=90.0, difficulty_score=0.4, now=NOW)

    def test_cancel_leaves_score_empty(self) -> None:
        session = _session()

        session.cancel(NOW + timedelta(seconds=30))

        assert session.score is None
        assert session.duration == 30

    def test_update_validations(self) -> None:
        session = _session()

        with pytest.raises(DomainError):
            session.update(end_time=NOW - timedelta(seconds=1))
        with pytest.raises(ValidationError):
            session.update(duration=-5)
        with pytest.raises(ValidationError):
            session.update(completion_percentage=120)

    def test_explicit_duration_wins(self) -> None:
        session = _session()

        session.update(end_time=NOW + timedelta(minutes=2), duration=90)

        assert session.duration == 90


class TestPause:
    """Test suite for pausing and resuming a session."""

    def test_pause_and_resume_track_paused_time(self) -> None:
        session = _session()

        session.pause(NOW + timedelta(minutes=1))
        assert session.is_paused is True

        session.resume(NOW + timedelta(minutes=4))

        assert session.is_paused is False
        assert session.paused_seconds == 180

    def test_paused_session_rejects_items(self) -> None:
        session = _session()
        session.pause(NOW)

        with pytest.raises(SessionPausedError):
            session.record_item(UserWordId(1), True, 500)

    def test_pause_twice(self) -> None:
        session = _session()
        session.pause(NOW)

        with pytest.raises(SessionPausedError):
            session.pause(NOW + timedelta(seconds=5))

    def test_resume_running_session(self) -> None:
        with pytest.raises(SessionNotPausedError):
            _session().resume(NOW)

    def test_ended_session_cannot_pause(self) -> None:
        session = _session()
        session.cancel(NOW + timedelta(seconds=30))

        with pytest.raises(SessionAlreadyEndedError):
            session.pause(NOW + timedelta(minutes=1))

    def test_duration_excludes_paused_time(self) -> None:
        session = _session()
        session.pause(NOW + timedelta(minutes=2))
        session.resume(NOW + timedelta(minutes=7))

        session.complete(score=70.0, difficulty_score=0.3, now=NOW + timedelta(minutes=10))

        assert session.duration == 300

    def test_ending_while_paused_closes_the_pause(self) -> None:
        session = _session()
        session.pause(NOW + timedelta(minutes=1))

        session.cancel(NOW + timedelta(minutes=3))

        assert session.is_paused is False
        assert session.paused_seconds == 120
        assert session.duration == 60
