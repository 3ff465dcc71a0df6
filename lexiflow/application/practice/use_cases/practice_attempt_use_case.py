"""Use case for answering one exercise inside a practice session."""

import structlog

from lexiflow.application.practice.dtos import AttemptResult
from lexiflow.application.practice.protocols.daily_progress_repository import (
    DailyProgressRepositoryProtocol,
)
from lexiflow.application.practice.protocols.learning_mistake_repository import (
    LearningMistakeRepositoryProtocol,
)
from lexiflow.application.practice.protocols.learning_session_repository import (
    LearningSessionRepositoryProtocol,
)
from lexiflow.application.practice.services.exercise_planner import ExercisePlanner
from lexiflow.application.vocabulary.protocols.user_word_repository import (
    UserWordRepositoryProtocol,
)
from lexiflow.domain.common.exceptions import ValidationError
from lexiflow.domain.common.value_objects.ids import LearningSessionId, UserId, UserWordId
from lexiflow.domain.practice.entities.daily_progress import DailyProgress
from lexiflow.domain.practice.entities.learning_mistake import LearningMistake
from lexiflow.domain.practice.exceptions import LearningSessionNotFoundError
from lexiflow.domain.practice.services.answer_validator import AnswerCheck, AnswerValidator
from lexiflow.domain.practice.services.exercise_generator import normalize_text
from lexiflow.domain.practice.services.learning_metrics import (
    calculate_points,
    check_typing_accuracy,
)
from lexiflow.domain.practice.services.progression_service import ProgressionService
from lexiflow.domain.practice.value_objects import ExerciseType
from lexiflow.domain.vocabulary.entities.user_word import UserWord
from lexiflow.domain.vocabulary.exceptions import UserWordNotFoundError
from lexiflow.domain.vocabulary.value_objects import LearningStatus
from lexiflow.utils import utc_now

logger = structlog.get_logger(__name__)


class PracticeAttemptUseCase:
    """Grade an answer and apply it to the session, the entry and the daily totals."""

    def __init__(
        self,
        session_repository: LearningSessionRepositoryProtocol,
        user_word_repository: UserWordRepositoryProtocol,
        mistake_repository: LearningMistakeRepositoryProtocol,
        daily_progress_repository: DailyProgressRepositoryProtocol,
        exercise_planner: ExercisePlanner | None = None,
    ) -> None:
        self.session_repository = session_repository
        self.user_word_repository = user_word_repository
        self.mistake_repository = mistake_repository
        self.daily_progress_repository = daily_progress_repository
        self.exercise_planner = exercise_planner or ExercisePlanner()

    def submit_attempt(
        self,
        user_id: int,
        session_id: int,
        user_word_id: int,
        exercise_type: ExerciseType,
        response_time: int,
        attempts_count: int = 1,
        user_input: str | None = None,
        selected_index: int | None = None,
        options: list[str] | None = None,
        remembered: bool | None = None,
        enabled_exercises: list[ExerciseType] | None = None,
        skip_remember_translation: bool = False,
    ) -> AttemptResult:
        """
        Grade one answer and record its effects.

        The progression rules see the entry as it was before this answer;
        the review counters, level, status, mastery and SRS schedule are then
        updated from the outcome.

        Args:
            user_id: ID of the user
            session_id: Active session the answer belongs to
            user_word_id: Entry that was practiced
            exercise_type: Exercise the learner answered
            response_time: Time to answer in milliseconds
            attempts_count: Tries used on this exercise
            user_input: Typed or assembled answer for text exercises
            selected_index: Chosen option for choose-right-word
            options: The options that were shown for choose-right-word
            remembered: Self-assessment for remember-translation
            enabled_exercises: Exercise types allowed for the next exercise
            skip_remember_translation: Move past the flashcard stage

        Returns:
            The grading, the updated entry, points and the next exercise

        Raises:
            LearningSessionNotFoundError: If the session does not exist
            SessionAlreadyEndedError: If the session has ended
            UserWordNotFoundError: If the entry does not exist
            ValidationError: If the answer does not fit the exercise type
        """
        user_id_vo = UserId(user_id)
        now = utc_now()

        session = self.session_repository.find_by_id(LearningSessionId(session_id), user_id_vo)
        if not session:
            raise LearningSessionNotFoundError(session_id)

        user_word = self.user_word_repository.find_by_id(UserWordId(user_word_id), user_id_vo)
        if not user_word:
            raise UserWordNotFoundError(user_word_id)

        check = self._check_answer(
            user_word, exercise_type, user_input, selected_index, options, remembered
        )

        item = session.record_item(
            user_word_id=user_word.id,
            is_correct=check.is_correct,
            response_time=response_time,
            attempts_count=attempts_count,
            exercise_type=exercise_type,
            accuracy=check.accuracy,
            now=now,
        )

        outcome = ProgressionService.evaluate_answer(user_word, check.is_correct)
        was_learned = user_word.learned_at is not None
        user_word.record_review(check.is_correct, now)
        user_word.apply_progression(
            outcome.new_level, outcome.learning_status, outcome.mastery_score, now
        )
        word_learned = (
            not was_learned and user_word.learning_status == LearningStatus.LEARNED
        )
        if word_learned:
            session.record_word_learned()

        interval = ProgressionService.calculate_srs_interval(
            user_word.srs_level, check.is_correct, user_word.correct_streak, now
        )
        user_word.schedule_review(interval.hours, now)

        user_word = self.user_word_repository.save(user_word)
        session = self.session_repository.save(session)

        mistake = None
        if not check.is_correct:
            mistake = self.mistake_repository.save(
                LearningMistake.create(
                    user_id=user_id_vo,
                    user_word_id=user_word.id,
                    definition_id=user_word.definition_id,
                    mistake_type=AnswerValidator.mistake_type(exercise_type),
                    incorrect_value=self._given_answer(user_input, selected_index, options),
                    context={
                        "exercise_type": exercise_type.value,
                        "correct_answer": user_word.word_text,
                        "response_time": response_time,
                        "session_id": session_id,
                        "user_input": user_input,
                        "accuracy": check.accuracy,
                        "srs_level": outcome.previous_level,
                    },
                    now=now,
                )
            )

        progress = self.daily_progress_repository.find_by_date(
            user_id_vo, now.date()
        ) or DailyProgress.start_day(user_id_vo, now.date())
        progress.record_answer(response_time, check.is_correct)
        self.daily_progress_repository.save(progress)

        points = calculate_points(check.is_correct, response_time, attempts_count)
        bonus = (
            AnswerValidator.response_time_bonus(response_time, exercise_type)
            if check.is_correct
            else 0
        )

        next_exercise = None
        if user_word.learning_status != LearningStatus.LEARNED:
            next_exercise = self.exercise_planner.plan(
                user_word,
                distractor_words=self.user_word_repository.find_active(user_id_vo),
                enabled_exercises=enabled_exercises,
                skip_remember_translation=skip_remember_translation,
            )

        logger.info(
            "practice_attempt_recorded",
            user_id=user_id,
            session_id=session_id,
            user_word_id=user_word_id,
            exercise_type=exercise_type.value,
            is_correct=check.is_correct,
            srs_level=user_word.srs_level,
            next_review_hours=interval.hours,
        )
        if word_learned:
            logger.info("word_learned", user_id=user_id, user_word_id=user_word_id)

        return AttemptResult(
            check=check,
            item=session.items[-1],
            user_word=user_word,
            outcome=outcome,
            interval=interval,
            points=points,
            response_time_bonus=bonus,
            word_learned=word_learned,
            mistake=mistake,
            next_exercise=next_exercise,
        )

    @staticmethod
    def _check_answer(
        user_word: UserWord,
        exercise_type: ExerciseType,
        user_input: str | None,
        selected_index: int | None,
        options: list[str] | None,
        remembered: bool | None,
    ) -> AnswerCheck:
        word = user_word.word_text

        if exercise_type == ExerciseType.REMEMBER_TRANSLATION:
            if remembered is None:
                raise ValidationError(
                    "remembered is required for remember-translation", field="remembered"
                )
            return AnswerValidator.validate_self_assessment(remembered)

        if exercise_type == ExerciseType.CHOOSE_RIGHT_WORD:
            if selected_index is None or not options:
                raise ValidationError(
                    "selected_index and options are required for choose-right-word",
                    field="selected_index",
                )
            if not 0 <= selected_index < len(options):
                raise ValidationError(
                    "selected_index is out of range", field="selected_index", value=selected_index
                )
            normalized = [normalize_text(option) for option in options]
            if normalize_text(word) not in normalized:
                raise ValidationError("options must include the correct word", field="options")
            return AnswerValidator.validate_multiple_choice(
                selected_index, normalized.index(normalize_text(word))
            )

        if user_input is None:
            raise ValidationError(
                f"user_input is required for {exercise_type.value}", field="user_input"
            )

        if exercise_type == ExerciseType.MAKE_UP_WORD:
            return AnswerValidator.validate_word_construction(user_input, word)

        if exercise_type == ExerciseType.TYPING:
            typing = check_typing_accuracy(user_input, word)
            return AnswerCheck(
                is_correct=typing.is_correct,
                accuracy=typing.accuracy,
                partial_credit=typing.partial_credit,
            )

        return AnswerValidator.validate_word_input(user_input, word)

    @staticmethod
    def _given_answer(
        user_input: str | None, selected_index: int | None, options: list[str] | None
    ) -> str | None:
        if user_input is not None:
            return user_input
        if options and selected_index is not None and 0 <= selected_index < len(options):
            return options[selected_index]
        return None
