"""Domain service that builds the content of practice exercises."""

import random
import re
import string
from dataclasses import dataclass, field

from lexiflow.domain.practice.services.answer_validator import similarity_accuracy
from lexiflow.domain.practice.value_objects import ExerciseType
from lexiflow.domain.vocabulary.entities.user_word import UserWord

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 5
DEFAULT_DISTRACTOR_COUNT = 3
MAX_SPELLING_ATTEMPTS = 10
SIMILARITY_THRESHOLD = 0.3
MAX_COMPLEXITY = 50

RARE_LETTERS = ("q", "x", "z", "j")
TRICKY_PATTERNS = (r"gh", r"ght", r"kn", r"wr", r"mb$")
VARIANT_SUFFIXES = ("s", "ed", "ing", "er")
VARIANT_ENDINGS = ("y", "e")
VARIANT_PREFIXES = ("un", "re")


@dataclass(frozen=True)
class PracticeConfig:
    max_attempts: int = 3
    show_hints: bool = True
    auto_advance: bool = False
    time_limit_ms: int = 0


@dataclass
class Exercise:
    exercise_type: ExerciseType
    user_word_id: int
    prompt: dict[str, str | None]
    config: PracticeConfig
    options: list[str] | None = None
    correct_index: int | None = None
    character_pool: list[str] = field(default_factory=list)


def normalize_text(text: str) -> str:
    """Lowercase, strip punctuation and collapse whitespace."""
    without_punctuation = text.lower().translate(str.maketrans("", "", string.punctuation))
    return re.sub(r"\s+", " ", without_punctuation).strip()


def is_similar_enough(first: str, second: str, threshold: float = SIMILARITY_THRESHOLD) -> bool:
    return similarity_accuracy(normalize_text(first), normalize_text(second)) / 100 >= threshold


def clamp_difficulty(level: int) -> int:
    return max(MIN_DIFFICULTY, min(level, MAX_DIFFICULTY))


class ExerciseGenerator:
    """Builds exercise payloads. Pass a seeded ``random.Random`` for repeatable output."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def character_pool(self, word: str) -> list[str]:
        letters = [char for char in word.lower() if not char.isspace()]
        self.rng.shuffle(letters)
        return letters

    def _near_miss_spelling(self, word: str) -> str | None:
        alphabet = string.ascii_lowercase
        for _ in range(MAX_SPELLING_ATTEMPTS):
            position = self.rng.randrange(len(word))
            operations = ["substitute", "add"]
            if len(word) > 3:
                operations.append("remove")
            operation = self.rng.choice(operations)
            if operation == "substitute":
                candidate = word[:position] + self.rng.choice(alphabet) + word[position + 1 :]
            elif operation == "add":
                candidate = word[:position] + self.rng.choice(alphabet) + word[position:]
            else:
                candidate = word[:position] + word[position + 1 :]
            if candidate != word:
                return candidate
        return None

    @staticmethod
    def _variants(word: str) -> list[str]:
        variants = [word + suffix for suffix in VARIANT_SUFFIXES]
        # Swap the last letter; for words already ending in y or e this gives the word back
        variants.extend(word[:-1] + ending for ending in VARIANT_ENDINGS)
        variants.extend(prefix + word for prefix in VARIANT_PREFIXES)
        return variants

    def distractor_options(
        self, word: str, pool: list[str] | None = None, count: int = DEFAULT_DISTRACTOR_COUNT
    ) -> list[str]:
        """
        Wrong answers for a multiple-choice exercise.

        Words from ``pool`` of similar length come first, then generated
        near-miss spellings and morphological variants.
        """
        target = word.strip().lower()
        chosen: list[str] = []

        def add(candidate: str) -> None:
            cleaned = candidate.strip().lower()
            if cleaned and cleaned != target and cleaned not in chosen and len(chosen) < count:
                chosen.append(cleaned)

        candidates = [c for c in pool or [] if c.strip().lower() != target]
        self.rng.shuffle(candidates)
        candidates.sort(key=lambda c: abs(len(c) - len(target)))
        for candidate in candidates:
            add(candidate)

        if target:
            attempts = 0
            while len(chosen) < count and attempts < MAX_SPELLING_ATTEMPTS:
                attempts += 1
                spelling = self._near_miss_spelling(target)
                if spelling:
                    add(spelling)
            variants = self._variants(target)
            self.rng.shuffle(variants)
            for variant in variants:
                add(variant)
        return chosen

    @staticmethod
    def word_complexity(word: str) -> int:
        """Heuristic spelling complexity in 0..50."""
        lowered = word.lower()
        score = min(len(lowered), 10) * 2
        score += 5 * sum(1 for letter in RARE_LETTERS if letter in lowered)
        if re.search(r"(.)\1", lowered):
            score += 3
        score += 4 * sum(1 for pattern in TRICKY_PATTERNS if re.search(pattern, lowered))
        return min(score, MAX_COMPLEXITY)

    @staticmethod
    def practice_config(exercise_type: ExerciseType, difficulty: int) -> PracticeConfig:
        level = clamp_difficulty(difficulty)
        if exercise_type == ExerciseType.REMEMBER_TRANSLATION:
            return PracticeConfig(
                max_attempts=1, auto_advance=True, time_limit_ms=5000 if level > 3 else 0
            )
        if exercise_type == ExerciseType.CHOOSE_RIGHT_WORD:
            return PracticeConfig(
                max_attempts=1, auto_advance=True, time_limit_ms=8000 if level > 2 else 0
            )
        if exercise_type == ExerciseType.MAKE_UP_WORD:
            return PracticeConfig(max_attempts=2, show_hints=level < 3)
        if exercise_type == ExerciseType.WRITE_BY_DEFINITION:
            return PracticeConfig(max_attempts=3, show_hints=level < 4)
        if exercise_type == ExerciseType.WRITE_BY_SOUND:
            return PracticeConfig(
                max_attempts=3, show_hints=level < 3, time_limit_ms=12000 if level > 3 else 0
            )
        return PracticeConfig()

    def build_exercise(
        self,
        user_word: UserWord,
        exercise_type: ExerciseType,
        difficulty: int,
        distractor_pool: list[str] | None = None,
    ) -> Exercise:
        word = user_word.word_text
        prompt: dict[str, str | None] = {
            "definition": user_word.definition_text,
            "translation": user_word.translation,
        }
        exercise = Exercise(
            exercise_type=exercise_type,
            user_word_id=user_word.id.value,
            prompt=prompt,
            config=self.practice_config(exercise_type, difficulty),
        )

        if exercise_type == ExerciseType.REMEMBER_TRANSLATION:
            prompt["word"] = word
            prompt["phonetic"] = user_word.phonetic
        elif exercise_type == ExerciseType.CHOOSE_RIGHT_WORD:
            options = [word, *self.distractor_options(word, distractor_pool)]
            self.rng.shuffle(options)
            exercise.options = options
            exercise.correct_index = options.index(word)
        elif exercise_type == ExerciseType.MAKE_UP_WORD:
            exercise.character_pool = self.character_pool(word)
        elif exercise_type == ExerciseType.WRITE_BY_SOUND:
            prompt["audio_url"] = user_word.content.audio_url if user_word.content else None
            prompt["phonetic"] = user_word.phonetic
            prompt.pop("translation")
        elif exercise_type == ExerciseType.WRITE_BY_DEFINITION:
            prompt["image_url"] = user_word.content.image_url if user_word.content else None
        return exercise
