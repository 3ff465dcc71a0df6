from pydantic import BaseModel, Field

from lexiflow.feature_flags import FeatureFlags


class AppSettingsResponse(BaseModel):
    """Schema for returning public application settings."""

    feature_flags: FeatureFlags = Field(..., description="All feature flags")
    default_session_words: int = Field(..., description="Words in a session when none is given")
    srs_review_batch_size: int = Field(..., description="Default size of an SRS review batch")
