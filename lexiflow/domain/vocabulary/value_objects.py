"""Value objects for the user dictionary."""

from dataclasses import dataclass
from enum import Enum

from lexiflow.domain.common.value_object import ValueObject
from lexiflow.domain.common.value_objects.ids import DefinitionId, WordId
from lexiflow.domain.dictionary.value_objects import PartOfSpeech


class LearningStatus(str, Enum):
    """Learning state of a dictionary entry. Wire values are camelCase."""

    NOT_STARTED = "notStarted"
    IN_PROGRESS = "inProgress"
    LEARNED = "learned"
    NEEDS_REVIEW = "needsReview"
    DIFFICULT = "difficult"


@dataclass(frozen=True)
class WordContent(ValueObject):
    """
    Read-only snapshot of the catalogue content behind a dictionary entry.

    Loaded together with the entry so practice and analytics never have to
    reach into the dictionary aggregate.
    """

    word_id: WordId
    definition_id: DefinitionId
    word_text: str
    definition_text: str
    part_of_speech: PartOfSpeech = PartOfSpeech.UNDEFINED
    translation: str | None = None
    phonetic: str | None = None
    image_url: str | None = None
    audio_url: str | None = None
    frequency: int | None = None
    # Meanings listed under the same part of speech
    definition_count: int = 1
