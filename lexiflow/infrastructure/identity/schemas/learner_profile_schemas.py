from typing import Any

from pydantic import BaseModel, Field

from lexiflow.domain.identity.value_objects import LearningSettings, TypingPracticePreferences


class LearningSettingsResponse(BaseModel):
    daily_goal: int = Field(..., description="Words to study per day")
    notifications_enabled: bool
    sound_enabled: bool
    auto_play_audio: bool
    dark_mode: bool
    session_duration: int = Field(..., description="Preferred session length in minutes")
    review_interval: int = Field(..., description="Days between reviews")
    difficulty_preference: int = Field(..., description="1 (easiest) to 5 (hardest)")
    learning_reminders: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, settings: LearningSettings) -> "LearningSettingsResponse":
        return cls(**settings.to_dict())


class LearningSettingsUpdateRequest(BaseModel):
    """Partial update; omitted fields keep their value."""

    daily_goal: int | None = Field(None, ge=1, le=100)
    notifications_enabled: bool | None = None
    sound_enabled: bool | None = None
    auto_play_audio: bool | None = None
    dark_mode: bool | None = None
    session_duration: int | None = Field(None, ge=5, le=120)
    review_interval: int | None = Field(None, ge=1, le=30)
    difficulty_preference: int | None = Field(None, ge=1, le=5)
    learning_reminders: dict[str, Any] | None = None


class TypingPreferencesResponse(BaseModel):
    auto_submit_after_correct: bool
    show_definition_images: bool
    words_count: int
    difficulty_level: int
    enable_time_limit: bool
    time_limit_seconds: int
    play_audio_on_start: bool
    show_progress_bar: bool
    enable_game_sounds: bool
    game_sound_volume: float
    enable_keystroke_sounds: bool

    @classmethod
    def from_domain(cls, preferences: TypingPracticePreferences) -> "TypingPreferencesResponse":
        return cls(**preferences.to_dict())


class TypingPreferencesUpdateRequest(BaseModel):
    """Partial update; omitted fields keep their value."""

    auto_submit_after_correct: bool | None = None
    show_definition_images: bool | None = None
    words_count: int | None = Field(None, ge=5, le=50)
    difficulty_level: int | None = Field(None, ge=1, le=5)
    enable_time_limit: bool | None = None
    time_limit_seconds: int | None = Field(None, ge=10, le=600)
    play_audio_on_start: bool | None = None
    show_progress_bar: bool | None = None
    enable_game_sounds: bool | None = None
    game_sound_volume: float | None = Field(None, ge=0, le=1)
    enable_keystroke_sounds: bool | None = None


class StudyPreferencesResponse(BaseModel):
    """Every practice type's preferences."""

    typing_practice: TypingPreferencesResponse
