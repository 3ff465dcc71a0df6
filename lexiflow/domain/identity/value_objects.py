"""Learner settings and practice preferences."""

from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any

from lexiflow.domain.common.exceptions import ValidationError


def _check_range(name: str, value: float, low: float, high: float) -> None:
    if not low <= value <= high:
        raise ValidationError(f"{name} must be between {low} and {high}", field=name, value=value)


@dataclass(frozen=True)
class LearningSettings:
    """
    How a learner wants to study.

    ``session_duration`` is in minutes, ``review_interval`` in days.
    """

    daily_goal: int = 5
    notifications_enabled: bool = True
    sound_enabled: bool = True
    auto_play_audio: bool = True
    dark_mode: bool = False
    session_duration: int = 15
    review_interval: int = 3
    difficulty_preference: int = 1
    learning_reminders: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _check_range("daily_goal", self.daily_goal, 1, 100)
        _check_range("session_duration", self.session_duration, 5, 120)
        _check_range("review_interval", self.review_interval, 1, 30)
        _check_range("difficulty_preference", self.difficulty_preference, 1, 5)

    def with_changes(self, **changes: Any) -> "LearningSettings":
        """Copy with the given fields replaced; ``None`` values are ignored."""
        return replace(self, **_known(self, changes))

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class TypingPracticePreferences:
    """Options of the typing practice screen."""

    auto_submit_after_correct: bool = False
    show_definition_images: bool = True
    words_count: int = 10
    difficulty_level: int = 3
    enable_time_limit: bool = False
    time_limit_seconds: int = 60
    play_audio_on_start: bool = True
    show_progress_bar: bool = True
    enable_game_sounds: bool = True
    game_sound_volume: float = 0.5
    enable_keystroke_sounds: bool = False

    def __post_init__(self) -> None:
        _check_range("words_count", self.words_count, 5, 50)
        _check_range("difficulty_level", self.difficulty_level, 1, 5)
        _check_range("time_limit_seconds", self.time_limit_seconds, 10, 600)
        _check_range("game_sound_volume", self.game_sound_volume, 0, 1)

    def with_changes(self, **changes: Any) -> "TypingPracticePreferences":
        return replace(self, **_known(self, changes))

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "TypingPracticePreferences":
        """Build from stored JSON, filling missing keys with defaults and dropping unknown ones."""
        return cls().with_changes(**(data or {}))


def _known(instance: object, changes: dict[str, Any]) -> dict[str, Any]:
    names = {item.name for item in fields(instance)}  # type: ignore[arg-type]
    return {key: value for key, value in changes.items() if key in names and value is not None}
