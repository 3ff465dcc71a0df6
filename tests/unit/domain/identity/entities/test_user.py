"""Tests for the User entity and its settings."""

import pytest

from lexiflow.domain.common.exceptions import DomainError, ValidationError
from lexiflow.domain.dictionary.value_objects import LanguageCode
from lexiflow.domain.identity.entities.user import User
from lexiflow.domain.identity.value_objects import LearningSettings, TypingPracticePreferences
from tests.unit.factories import NOW


def make_user() -> User:
    return User.create(
        email="  Learner@Example.COM ", name="Learner", base_language_code=LanguageCode.RU
    )


class TestUser:
    def test_email_is_normalized(self) -> None:
        user = make_user()

        assert user.email == "learner@example.com"

        user.update_email(" New@Example.com")
        assert user.email == "new@example.com"

    def test_target_language_must_differ_from_base(self) -> None:
        user = make_user()

        with pytest.raises(ValidationError):
            user.change_target_language(LanguageCode.RU)

        user.change_target_language(LanguageCode.EN)
        assert user.target_language_code == LanguageCode.EN
        with pytest.raises(ValidationError):
            user.change_base_language(LanguageCode.EN)


class TestLearningSettings:
    def test_defaults(self) -> None:
        settings = make_user().learning_settings

        assert settings.daily_goal == 5
        assert settings.session_duration == 15
        assert settings.review_interval == 3
        assert settings.difficulty_preference == 1
        assert settings.notifications_enabled is True
        assert settings.dark_mode is False

    def test_partial_update_keeps_other_values(self) -> None:
        user = make_user()

        user.update_learning_settings(daily_goal=20, dark_mode=True, session_duration=None)

        assert user.learning_settings.daily_goal == 20
        assert user.learning_settings.dark_mode is True
        assert user.learning_settings.session_duration == 15

    @pytest.mark.parametrize(
        "changes",
        [{"daily_goal": 0}, {"session_duration": 121}, {"review_interval": 31}],
    )
    def test_out_of_range_rejected(self, changes: dict[str, int]) -> None:
        user = make_user()

        with pytest.raises(ValidationError):
            user.update_learning_settings(**changes)
        assert user.learning_settings == LearningSettings()


class TestTypingPreferences:
    def test_stored_values_merge_with_defaults(self) -> None:
        preferences = TypingPracticePreferences.from_dict({"words_count": 25, "unknown": 1})

        assert preferences.words_count == 25
        assert preferences.game_sound_volume == 0.5
        assert preferences.play_audio_on_start is True

    def test_update_and_reset(self) -> None:
        user = make_user()

        user.update_typing_preferences(enable_time_limit=True, time_limit_seconds=90)
        assert user.study_preferences()["typing_practice"]["time_limit_seconds"] == 90

        user.reset_typing_preferences()
        assert user.typing_preferences == TypingPracticePreferences()

    def test_volume_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            make_user().update_typing_preferences(game_sound_volume=1.5)


class TestDeleteAccount:
    def test_requires_confirmation_text(self) -> None:
        user = make_user()

        with pytest.raises(ValidationError):
            user.delete_account("delete", NOW)
        assert user.is_deleted is False

    def test_soft_delete(self) -> None:
        user = make_user()

        user.delete_account("DELETE", NOW)

        assert user.deleted_at == NOW
        with pytest.raises(DomainError):
            user.delete_account("DELETE", NOW)
