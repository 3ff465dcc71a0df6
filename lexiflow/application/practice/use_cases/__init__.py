from .difficulty_assessment_use_case import DifficultyAssessmentUseCase
from .exercise_use_case import ExerciseUseCase
from .learning_session_use_case import LearningSessionUseCase
from .practice_attempt_use_case import PracticeAttemptUseCase
from .srs_review_use_case import SrsReviewUseCase

__all__ = [
    "DifficultyAssessmentUseCase",
    "ExerciseUseCase",
    "LearningSessionUseCase",
    "PracticeAttemptUseCase",
    "SrsReviewUseCase",
]
