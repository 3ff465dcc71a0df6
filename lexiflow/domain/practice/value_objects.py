"""Value objects for practice sessions and exercises."""

from enum import Enum


class ExerciseType(str, Enum):
    """Mini-game a word is practiced with."""

    REMEMBER_TRANSLATION = "remember-translation"
    CHOOSE_RIGHT_WORD = "choose-right-word"
    MAKE_UP_WORD = "make-up-word"
    WRITE_BY_DEFINITION = "write-by-definition"
    WRITE_BY_SOUND = "write-by-sound"
    TYPING = "typing"
    UNIFIED_PRACTICE = "unified-practice"


class MistakeType(str, Enum):
    SPELLING = "spelling"
    PRONUNCIATION = "pronunciation"
    MEANING = "meaning"
    TRANSLATION = "translation"
    RECOGNITION = "recognition"


class SessionType(str, Enum):
    REVIEW = "review"
    NEW_LEARNING = "newLearning"
    PRACTICE = "practice"
    TEST = "test"
    SPACED = "spaced"


class PerformanceRating(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_IMPROVEMENT = "needs_improvement"


class DifficultyAdjustment(str, Enum):
    INCREASE = "increase"
    DECREASE = "decrease"
    MAINTAIN = "maintain"
