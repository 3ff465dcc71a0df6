"""Enumerations shared by the dictionary catalogue."""

from enum import Enum


class LanguageCode(str, Enum):
    """Supported languages (ISO 639-1)."""

    EN = "en"
    RU = "ru"
    DA = "da"
    ES = "es"
    FR = "fr"
    DE = "de"
    IT = "it"
    PT = "pt"
    ZH = "zh"
    JA = "ja"
    KO = "ko"
    AR = "ar"


class PartOfSpeech(str, Enum):
    NOUN = "noun"
    VERB = "verb"
    PHRASAL_VERB = "phrasal_verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    PRONOUN = "pronoun"
    PREPOSITION = "preposition"
    CONJUNCTION = "conjunction"
    INTERJECTION = "interjection"
    NUMERAL = "numeral"
    ARTICLE = "article"
    EXCLAMATION = "exclamation"
    ABBREVIATION = "abbreviation"
    SUFFIX = "suffix"
    PREFIX = "prefix"
    UNDEFINED = "undefined"


class DifficultyLevel(str, Enum):
    """CEFR-like difficulty bands used by lists and custom overrides."""

    BEGINNER = "beginner"
    ELEMENTARY = "elementary"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    PROFICIENT = "proficient"

    @property
    def rank(self) -> int:
        """1-based position, used as the practice difficulty for custom overrides."""
        return list(DifficultyLevel).index(self) + 1


class Gender(str, Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"
    COMMON = "common"


class SourceType(str, Enum):
    """Where a piece of dictionary content came from."""

    AI_GENERATED = "ai_generated"
    MERRIAM_WEBSTER = "merriam_webster"
    FREQUENCY_GOOGLE = "frequency_google"
    USER = "user"
    ADMIN = "admin"
