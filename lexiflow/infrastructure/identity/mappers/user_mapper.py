"""Mapper for User ORM <-> Domain conversion."""

from lexiflow.domain.common.value_objects.ids import UserId
from lexiflow.domain.dictionary.value_objects import LanguageCode
from lexiflow.domain.identity.entities.user import User
from lexiflow.domain.identity.value_objects import LearningSettings, TypingPracticePreferences
from lexiflow.models import User as UserORM
from lexiflow.models import UserSettings as UserSettingsORM
from lexiflow.utils import ensure_utc

TYPING_PRACTICE_KEY = "typing_practice"


class UserMapper:
    def to_domain(self, orm_model: UserORM) -> User:
        preferences = orm_model.study_preferences or {}
        return User.create_with_id(
            id=UserId(orm_model.id),
            email=orm_model.email,
            name=orm_model.name,
            base_language_code=LanguageCode(orm_model.base_language_code),
            target_language_code=(
                LanguageCode(orm_model.target_language_code)
                if orm_model.target_language_code
                else None
            ),
            hashed_password=orm_model.hashed_password,
            learning_settings=self._settings_to_domain(orm_model.settings),
            typing_preferences=TypingPracticePreferences.from_dict(
                preferences.get(TYPING_PRACTICE_KEY)
            ),
            created_at=ensure_utc(orm_model.created_at),
            updated_at=ensure_utc(orm_model.updated_at),
            deleted_at=ensure_utc(orm_model.deleted_at),
        )

    def to_orm(self, domain_entity: User, orm_model: UserORM | None = None) -> UserORM:
        if orm_model is None:
            orm_model = UserORM(id=domain_entity.id.value if domain_entity.id.value != 0 else None)

        orm_model.email = domain_entity.email
        orm_model.name = domain_entity.name
        orm_model.base_language_code = domain_entity.base_language_code.value
        orm_model.target_language_code = (
            domain_entity.target_language_code.value if domain_entity.target_language_code else None
        )
        orm_model.hashed_password = domain_entity.hashed_password
        # Reassign the whole dict so the JSON column is flagged dirty
        orm_model.study_preferences = {
            **(orm_model.study_preferences or {}),
            TYPING_PRACTICE_KEY: domain_entity.typing_preferences.to_dict(),
        }
        orm_model.deleted_at = domain_entity.deleted_at

        if orm_model.settings is None and domain_entity.learning_settings != LearningSettings():
            orm_model.settings = UserSettingsORM()
        if orm_model.settings is not None:
            self._settings_to_orm(domain_entity.learning_settings, orm_model.settings)
        return orm_model

    def _settings_to_domain(self, orm_settings: UserSettingsORM | None) -> LearningSettings:
        if orm_settings is None:
            return LearningSettings()
        return LearningSettings(
            daily_goal=orm_settings.daily_goal,
            notifications_enabled=orm_settings.notifications_enabled,
            sound_enabled=orm_settings.sound_enabled,
            auto_play_audio=orm_settings.auto_play_audio,
            dark_mode=orm_settings.dark_mode,
            session_duration=orm_settings.session_duration,
            review_interval=orm_settings.review_interval,
            difficulty_preference=orm_settings.difficulty_preference,
            learning_reminders=dict(orm_settings.learning_reminders or {}),
        )

    def _settings_to_orm(self, settings: LearningSettings, orm_settings: UserSettingsORM) -> None:
        orm_settings.daily_goal = settings.daily_goal
        orm_settings.notifications_enabled = settings.notifications_enabled
        orm_settings.sound_enabled = settings.sound_enabled
        orm_settings.auto_play_audio = settings.auto_play_audio
        orm_settings.dark_mode = settings.dark_mode
        orm_settings.session_duration = settings.session_duration
        orm_settings.review_interval = settings.review_interval
        orm_settings.difficulty_preference = settings.difficulty_preference
        orm_settings.learning_reminders = dict(settings.learning_reminders)
