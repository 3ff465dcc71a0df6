"""Use case for practice session lifecycle and history."""

from datetime import date, datetime, timedelta
from statistics import mean

import structlog

from lexiflow.application.common.pagination import PaginatedResult, Pagination
from lexiflow.application.dictionary.protocols.word_list_repository import (
    WordListRepositoryProtocol,
)
from lexiflow.application.practice.dtos import (
    DailyProgressSummary,
    SessionHistoryFilters,
    SessionStart,
    SessionStats,
    SessionSummary,
    WordResult,
)
from lexiflow.application.practice.protocols.daily_progress_repository import (
    DailyProgressRepositoryProtocol,
)
from lexiflow.application.practice.protocols.learning_session_repository import (
    LearningSessionRepositoryProtocol,
)
from lexiflow.application.practice.services.exercise_planner import ExercisePlanner
from lexiflow.application.vocabulary.protocols.user_list_repository import (
    UserListRepositoryProtocol,
)
from lexiflow.application.vocabulary.protocols.user_word_repository import (
    UserWordRepositoryProtocol,
)
from lexiflow.config import get_settings
from lexiflow.domain.common.exceptions import ValidationError
from lexiflow.domain.common.value_objects.ids import (
    LearningSessionId,
    UserId,
    UserListId,
    WordListId,
)
from lexiflow.domain.dictionary.exceptions import WordListNotFoundError
from lexiflow.domain.practice.entities.daily_progress import DailyProgress
from lexiflow.domain.practice.entities.learning_session import LearningSession
from lexiflow.domain.practice.exceptions import (
    LearningSessionNotFoundError,
    NoWordsAvailableError,
)
from lexiflow.domain.practice.services.difficulty_assessor import DifficultyAssessor
from lexiflow.domain.practice.services.exercise_generator import clamp_difficulty
from lexiflow.domain.practice.services.learning_metrics import (
    PRACTICE_SESSION_CONFIG,
    calculate_accuracy,
    calculate_mastery_score,
    calculate_next_review_date,
    rate_session,
    recommend_difficulty_adjustment,
)
from lexiflow.domain.practice.services.srs_scheduler import SrsScheduler
from lexiflow.domain.practice.value_objects import ExerciseType, PerformanceRating, SessionType
from lexiflow.domain.vocabulary.entities.user_word import UserWord
from lexiflow.domain.vocabulary.exceptions import UserListNotFoundError
from lexiflow.domain.vocabulary.value_objects import LearningStatus
from lexiflow.utils import round_half_up, round_to, utc_now

logger = structlog.get_logger(__name__)

SESSION_DIFFICULTIES = (1, 2, 3)
RECENT_RATINGS_WINDOW = 3
RECENT_SESSIONS_IN_STATS = 10
DEFAULT_PROGRESS_DAYS = 7


def matches_session_difficulty(user_word: UserWord, difficulty: int) -> bool:
    """
    Word filter for the 1..3 session difficulty.

    1 keeps fresh words, 2 words half way there, 3 the ones that need work.
    """
    status = user_word.learning_status
    if difficulty == 1:
        return (
            status in (LearningStatus.NOT_STARTED, LearningStatus.IN_PROGRESS)
            and user_word.mastery_score < 50
        )
    if difficulty == 2:
        return status == LearningStatus.IN_PROGRESS and 30 <= user_word.mastery_score < 70
    return status in (LearningStatus.NEEDS_REVIEW, LearningStatus.DIFFICULT)


def trailing_correct_streak(results: list[bool]) -> int:
    streak = 0
    for is_correct in reversed(results):
        if not is_correct:
            break
        streak += 1
    return streak


def consecutive_day_streak(days: set[date], today: date) -> int:
    """Days in a row with activity, ending today or yesterday."""
    current = today if today in days else today - timedelta(days=1)
    streak = 0
    while current in days:
        streak += 1
        current -= timedelta(days=1)
    return streak


class LearningSessionUseCase:
    """Start, finish and report on practice sessions."""

    def __init__(
        self,
        session_repository: LearningSessionRepositoryProtocol,
        user_word_repository: UserWordRepositoryProtocol,
        user_list_repository: UserListRepositoryProtocol,
        word_list_repository: WordListRepositoryProtocol,
        daily_progress_repository: DailyProgressRepositoryProtocol,
        exercise_planner: ExercisePlanner | None = None,
        difficulty_assessor: DifficultyAssessor | None = None,
    ) -> None:
        self.session_repository = session_repository
        self.user_word_repository = user_word_repository
        self.user_list_repository = user_list_repository
        self.word_list_repository = word_list_repository
        self.daily_progress_repository = daily_progress_repository
        self.exercise_planner = exercise_planner or ExercisePlanner()
        self.difficulty_assessor = difficulty_assessor or DifficultyAssessor()

    def start_session(
        self,
        user_id: int,
        session_type: SessionType,
        user_list_id: int | None = None,
        list_id: int | None = None,
        word_count: int | None = None,
        difficulty: int | None = None,
        enabled_exercises: list[ExerciseType] | None = None,
        skip_remember_translation: bool = False,
    ) -> SessionStart:
        """
        Start a session and pick the words to practice.

        Spaced sessions take overdue, soon-due and new words from the SRS
        schedule. Other sessions use difficulty-balanced selection that skips
        words reviewed in the last RECENT_REVIEW_EXCLUSION_HOURS when possible.

        Args:
            user_id: ID of the user
            session_type: Kind of session
            user_list_id: Restrict words to a list in the user's collection
            list_id: Restrict words to entries of a public word list
            word_count: Number of words (DEFAULT_SESSION_WORDS when omitted)
            difficulty: Optional 1..3 word filter
            enabled_exercises: Exercise types the learner allows
            skip_remember_translation: Move past the flashcard stage

        Returns:
            The persisted session with one planned exercise per word

        Raises:
            ValidationError: If word_count or difficulty is out of range
            UserListNotFoundError: If the user list is not in the collection
            WordListNotFoundError: If the word list does not exist
            NoWordsAvailableError: If nothing matches
        """
        settings = get_settings()
        config = PRACTICE_SESSION_CONFIG
        count = word_count if word_count is not None else settings.DEFAULT_SESSION_WORDS
        if not config.min_words <= count <= config.max_words:
            raise ValidationError(
                f"Word count must be between {config.min_words} and {config.max_words}",
                field="word_count",
                value=count,
            )
        if difficulty is not None and difficulty not in SESSION_DIFFICULTIES:
            raise ValidationError(
                "Session difficulty must be 1, 2 or 3", field="difficulty", value=difficulty
            )

        user_id_vo = UserId(user_id)
        now = utc_now()
        candidates = self._candidates(user_id_vo, user_list_id, list_id)
        if difficulty is not None:
            candidates = [w for w in candidates if matches_session_difficulty(w, difficulty)]

        breakdown: dict[str, int]
        if session_type == SessionType.SPACED:
            plan = SrsScheduler.compose_review_session(candidates, now, max_words=count)
            words = plan.words
            breakdown = {
                "overdue_count": plan.overdue_count,
                "due_count": plan.due_count,
                "new_count": plan.new_count,
            }
        else:
            item_stats = self.session_repository.item_statistics(user_id_vo)
            counts = {word_id: stats[0] for word_id, stats in item_stats.items()}
            times = {word_id: stats[1] for word_id, stats in item_stats.items()}
            selection = self.difficulty_assessor.select_words(
                candidates,
                count,
                now,
                exclude_recent_hours=settings.RECENT_REVIEW_EXCLUSION_HOURS,
                session_item_counts=counts,
                response_times=times,
            )
            if not selection.words:
                selection = self.difficulty_assessor.select_words(
                    candidates,
                    count,
                    now,
                    exclude_recent_hours=None,
                    session_item_counts=counts,
                    response_times=times,
                )
            words = selection.words
            breakdown = {
                "hard_count": selection.hard_count,
                "medium_count": selection.medium_count,
                "easy_count": selection.easy_count,
            }

        if not words:
            raise NoWordsAvailableError

        session = LearningSession.start(
            user_id=user_id_vo,
            session_type=session_type,
            now=now,
            user_list_id=UserListId(user_list_id) if user_list_id is not None else None,
            list_id=WordListId(list_id) if list_id is not None else None,
            target_words=len(words),
        )
        session = self.session_repository.save(session)
        exercises = [
            self.exercise_planner.plan(
                word,
                distractor_words=candidates,
                enabled_exercises=enabled_exercises,
                skip_remember_translation=skip_remember_translation,
            )
            for word in words
        ]

        logger.info(
            "practice_session_started",
            user_id=user_id,
            session_id=session.id.value,
            session_type=session_type.value,
            word_count=len(words),
        )
        return SessionStart(session=session, exercises=exercises, **breakdown)

    def get_session(self, user_id: int, session_id: int) -> LearningSession:
        session = self.session_repository.find_by_id(LearningSessionId(session_id), UserId(user_id))
        if not session:
            raise LearningSessionNotFoundError(session_id)
        return session

    def get_active_session(self, user_id: int) -> LearningSession | None:
        return self.session_repository.find_active(UserId(user_id))

    def update_session(
        self,
        user_id: int,
        session_id: int,
        end_time: datetime | None = None,
        duration: int | None = None,
        score: float | None = None,
        completion_percentage: float | None = None,
    ) -> LearningSession:
        """
        Update session fields; an end time without a duration derives it.

        Raises:
            LearningSessionNotFoundError: If the session does not exist
            DomainError: If the end time precedes the start time
        """
        session = self.get_session(user_id, session_id)
        session.update(
            end_time=end_time,
            duration=duration,
            score=score,
            completion_percentage=completion_percentage,
        )
        session = self.session_repository.save(session)

        logger.info("practice_session_updated", user_id=user_id, session_id=session_id)
        return session

    def complete_session(self, user_id: int, session_id: int) -> SessionSummary:
        """
        Score and close a session.

        The score uses the mastery formula over the session's answers; the
        difficulty score averages how hard the practiced words still are.

        Raises:
            LearningSessionNotFoundError: If the session does not exist
            SessionAlreadyEndedError: If the session has already ended
        """
        user_id_vo = UserId(user_id)
        session = self.get_session(user_id, session_id)
        now = utc_now()

        items = session.items
        total = len(items)
        correct = sum(1 for item in items if item.is_correct)
        accuracy = calculate_accuracy(correct, total)
        average_response_time = mean(item.response_time for item in items) if items else 0.0

        word_ids = list(dict.fromkeys(item.user_word_id for item in items))
        entries = self.user_word_repository.find_by_ids(word_ids, user_id_vo)
        difficulty_score = (
            round_to(
                mean(
                    min(100.0, w.amount_of_mistakes * 10 + (100 - w.mastery_score) + w.srs_level * 5)
                    for w in entries
                ),
                2,
            )
            if entries
            else 0.0
        )
        score = calculate_mastery_score(
            accuracy,
            trailing_correct_streak([item.is_correct for item in items]),
            average_response_time / 1000,
            total,
        )

        previous_ratings = self._recent_ratings(user_id_vo, session.id.value)
        session.complete(score=score, difficulty_score=difficulty_score, now=now)
        session = self.session_repository.save(session)

        level = clamp_difficulty(round_half_up(mean(w.srs_level for w in entries))) if entries else 1
        completion_ratio = (
            session.duration / PRACTICE_SESSION_CONFIG.session_time_limit_seconds
            if session.duration is not None
            else None
        )
        rating = rate_session(accuracy)
        adjustment = recommend_difficulty_adjustment(
            level, accuracy, completion_ratio, [*previous_ratings, rating]
        )

        self._record_completed_session(user_id_vo, now.date())

        entries_by_id = {entry.id: entry for entry in entries}
        word_results = []
        for word_id in word_ids:
            word_items = [item for item in items if item.user_word_id == word_id]
            word_correct = sum(1 for item in word_items if item.is_correct)
            word_accuracy = calculate_accuracy(word_correct, len(word_items))
            entry = entries_by_id.get(word_id)
            if entry is not None:
                entry.plan_next_review(
                    calculate_next_review_date(entry.review_count, word_accuracy, now)
                )
                entry = self.user_word_repository.save(entry)
            word_results.append(
                WordResult(
                    user_word_id=word_id.value,
                    word=entry.word_text if entry else "",
                    attempts=len(word_items),
                    correct=word_correct,
                    accuracy=word_accuracy,
                    average_response_time=mean(item.response_time for item in word_items),
                    mastery_score=entry.mastery_score if entry else 0.0,
                    next_review_due=entry.next_review_due if entry else None,
                    learning_status=(
                        entry.learning_status.value
                        if entry
                        else LearningStatus.NOT_STARTED.value
                    ),
                )
            )

        logger.info(
            "practice_session_completed",
            user_id=user_id,
            session_id=session_id,
            accuracy=accuracy,
            score=score,
            rating=rating.value,
        )
        return SessionSummary(
            session=session,
            total_words=total,
            correct_answers=correct,
            incorrect_answers=total - correct,
            accuracy=accuracy,
            average_response_time=average_response_time,
            difficulty_score=difficulty_score,
            performance_rating=rating,
            difficulty_adjustment=adjustment,
            word_results=word_results,
        )

    def cancel_session(self, user_id: int, session_id: int) -> LearningSession:
        """End a session now without scoring it."""
        session = self.get_session(user_id, session_id)
        session.cancel(utc_now())
        session = self.session_repository.save(session)

        logger.info("practice_session_cancelled", user_id=user_id, session_id=session_id)
        return session

    def pause_session(self, user_id: int, session_id: int) -> LearningSession:
        """
        Raises:
            LearningSessionNotFoundError: If the session does not exist
            SessionAlreadyEndedError: If the session has ended
            SessionPausedError: If the session is already paused
        """
        session = self.get_session(user_id, session_id)
        session.pause(utc_now())
        session = self.session_repository.save(session)

        logger.info("practice_session_paused", user_id=user_id, session_id=session_id)
        return session

    def resume_session(self, user_id: int, session_id: int) -> LearningSession:
        """
        Raises:
            LearningSessionNotFoundError: If the session does not exist
            SessionAlreadyEndedError: If the session has ended
            SessionNotPausedError: If the session is not paused
        """
        session = self.get_session(user_id, session_id)
        session.resume(utc_now())
        session = self.session_repository.save(session)

        logger.info(
            "practice_session_resumed",
            user_id=user_id,
            session_id=session_id,
            paused_seconds=session.paused_seconds,
        )
        return session

    def get_history(
        self,
        user_id: int,
        filters: SessionHistoryFilters,
        page: int = 1,
        page_size: int = 20,
    ) -> PaginatedResult[LearningSession]:
        pagination = Pagination(page=page, page_size=page_size)
        sessions, total = self.session_repository.find_history(
            UserId(user_id), filters, pagination
        )
        return PaginatedResult(items=sessions, total=total, pagination=pagination)

    def get_stats(self, user_id: int) -> SessionStats:
        sessions = self.session_repository.find_all(UserId(user_id))
        completed = [s for s in sessions if not s.is_active]
        scores = [s.score for s in completed if s.score is not None]
        return SessionStats(
            total_sessions=len(sessions),
            completed_sessions=len(completed),
            total_words_studied=sum(s.words_studied for s in sessions),
            total_words_learned=sum(s.words_learned for s in sessions),
            total_correct=sum(s.correct_answers for s in sessions),
            total_incorrect=sum(s.incorrect_answers for s in sessions),
            average_score=round_to(mean(scores), 2) if scores else 0.0,
            total_duration=sum(s.duration or 0 for s in sessions),
            streak_days=consecutive_day_streak(
                {s.start_time.date() for s in sessions}, utc_now().date()
            ),
            last_session_date=sessions[0].start_time if sessions else None,
            recent_sessions=sessions[:RECENT_SESSIONS_IN_STATS],
        )

    def get_daily_progress(
        self, user_id: int, days: int = DEFAULT_PROGRESS_DAYS
    ) -> DailyProgressSummary:
        """Daily totals for the last ``days`` days including today."""
        if days < 1:
            raise ValidationError("Days must be at least 1", field="days", value=days)
        end = utc_now().date()
        start = end - timedelta(days=days - 1)
        rows = self.daily_progress_repository.find_range(UserId(user_id), start, end)
        return DailyProgressSummary(days=rows, start_date=start, end_date=end)

    def _candidates(
        self, user_id: UserId, user_list_id: int | None, list_id: int | None
    ) -> list[UserWord]:
        if user_list_id is not None:
            user_list = self.user_list_repository.find_by_id(UserListId(user_list_id), user_id)
            if not user_list:
                raise UserListNotFoundError(user_list_id)
            return self.user_word_repository.find_by_ids(user_list.user_word_ids, user_id)
        if list_id is not None:
            word_list = self.word_list_repository.find_by_id(WordListId(list_id))
            if not word_list:
                raise WordListNotFoundError(list_id)
            definition_ids = set(word_list.definition_ids)
            return [
                entry
                for entry in self.user_word_repository.find_active(user_id)
                if entry.definition_id in definition_ids
            ]
        return self.user_word_repository.find_active(user_id)

    def _recent_ratings(self, user_id: UserId, exclude_session_id: int) -> list[PerformanceRating]:
        finished = [
            s
            for s in self.session_repository.find_all(user_id)
            if not s.is_active and s.score is not None and s.id.value != exclude_session_id
        ][: RECENT_RATINGS_WINDOW - 1]
        return [
            rate_session(calculate_accuracy(s.correct_answers, s.total_answers))
            for s in reversed(finished)
        ]

    def _record_completed_session(self, user_id: UserId, day: date) -> None:
        progress = self.daily_progress_repository.find_by_date(
            user_id, day
        ) or DailyProgress.start_day(user_id, day)
        progress.record_session()
        self.daily_progress_repository.save(progress)
