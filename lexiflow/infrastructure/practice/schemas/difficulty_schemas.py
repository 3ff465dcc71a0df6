"""Pydantic schemas for word difficulty assessment."""

from pydantic import BaseModel, ConfigDict, Field

from lexiflow.domain.practice.services.difficulty_assessor import (
    DifficultyAssessment,
    WordSelection,
)
from lexiflow.infrastructure.vocabulary.schemas import UserWordResponse


class PerformanceMetricsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    mistake_rate: float
    streak: float
    srs_level: float
    learning_status: float
    response_time: float
    skip_rate: float
    recency_frequency: float


class LinguisticMetricsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    rarity: float
    phonetic: float
    polysemy: float
    length: float
    abstraction: float
    relational: float


class DifficultyAssessmentResponse(BaseModel):
    """Schema for how hard a word is for the learner, 0 (easy) to 1 (hard)."""

    model_config = ConfigDict(from_attributes=True)

    user_word_id: int
    composite_score: float
    performance_score: float
    linguistic_score: float
    classification: str
    confidence: float
    bucket: str
    performance: PerformanceMetricsResponse
    linguistic: LinguisticMetricsResponse

    @classmethod
    def from_domain(cls, assessment: DifficultyAssessment) -> "DifficultyAssessmentResponse":
        return cls.model_validate(assessment)


class BatchAssessmentRequest(BaseModel):
    user_word_ids: list[int] | None = Field(
        None, description="Entries to assess; every active entry when omitted"
    )


class BatchAssessmentResponse(BaseModel):
    assessments: list[DifficultyAssessmentResponse]
    total: int

    @classmethod
    def from_domain(
        cls, assessments: dict[int, DifficultyAssessment]
    ) -> "BatchAssessmentResponse":
        items = [DifficultyAssessmentResponse.from_domain(a) for a in assessments.values()]
        return cls(assessments=items, total=len(items))


class WordSelectionRequest(BaseModel):
    """
    Schema for picking a practice set balanced by difficulty.

    ``distribution`` maps hard, medium and easy to their share of the set.
    """

    target_count: int = Field(..., ge=1, le=100)
    distribution: dict[str, float] | None = None
    exclude_recent: bool = True


class WordSelectionResponse(BaseModel):
    words: list[UserWordResponse]
    assessments: list[DifficultyAssessmentResponse]
    hard_count: int
    medium_count: int
    easy_count: int

    @classmethod
    def from_domain(cls, selection: WordSelection) -> "WordSelectionResponse":
        return cls(
            words=[UserWordResponse.from_domain(word) for word in selection.words],
            assessments=[
                DifficultyAssessmentResponse.from_domain(a)
                for a in selection.assessments.values()
            ],
            hard_count=selection.hard_count,
            medium_count=selection.medium_count,
            easy_count=selection.easy_count,
        )
