"""Mapper for UserList ORM ↔ Domain conversion."""

from lexiflow.domain.common.value_objects.ids import UserId, UserListId, UserWordId, WordListId
from lexiflow.domain.dictionary.value_objects import DifficultyLevel, LanguageCode
from lexiflow.domain.vocabulary.entities.user_list import UserList
from lexiflow.models import UserList as UserListORM
from lexiflow.models import UserListWord as UserListWordORM
from lexiflow.utils import ensure_utc


class UserListMapper:
    def to_domain(self, orm_model: UserListORM) -> UserList:
        return UserList(
            id=UserListId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            base_language_code=LanguageCode(orm_model.base_language_code),
            target_language_code=LanguageCode(orm_model.target_language_code),
            list_id=WordListId(orm_model.list_id) if orm_model.list_id else None,
            custom_name=orm_model.custom_name,
            custom_description=orm_model.custom_description,
            custom_cover_image_url=orm_model.custom_cover_image_url,
            custom_difficulty=(
                DifficultyLevel(orm_model.custom_difficulty)
                if orm_model.custom_difficulty
                else None
            ),
            is_modified=orm_model.is_modified,
            user_word_ids=[UserWordId(entry.user_word_id) for entry in orm_model.entries],
            progress=orm_model.progress,
            created_at=ensure_utc(orm_model.created_at),
            updated_at=ensure_utc(orm_model.updated_at),
            deleted_at=ensure_utc(orm_model.deleted_at),
        )

    def to_orm(self, domain_entity: UserList, orm_model: UserListORM | None = None) -> UserListORM:
        if orm_model is None:
            orm_model = UserListORM(
                id=domain_entity.id.value if domain_entity.id.value != 0 else None,
                user_id=domain_entity.user_id.value,
            )

        orm_model.list_id = domain_entity.list_id.value if domain_entity.list_id else None
        orm_model.base_language_code = domain_entity.base_language_code.value
        orm_model.target_language_code = domain_entity.target_language_code.value
        orm_model.custom_name = domain_entity.custom_name
        orm_model.custom_description = domain_entity.custom_description
        orm_model.custom_cover_image_url = domain_entity.custom_cover_image_url
        orm_model.custom_difficulty = (
            domain_entity.custom_difficulty.value if domain_entity.custom_difficulty else None
        )
        orm_model.is_modified = domain_entity.is_modified
        orm_model.progress = domain_entity.progress
        orm_model.deleted_at = domain_entity.deleted_at

        existing = {entry.user_word_id: entry for entry in orm_model.entries}
        wanted = [user_word_id.value for user_word_id in domain_entity.user_word_ids]
        for user_word_id, entry in existing.items():
            if user_word_id not in wanted:
                orm_model.entries.remove(entry)
        for position, user_word_id in enumerate(wanted):
            if user_word_id in existing:
                existing[user_word_id].position = position
            else:
                orm_model.entries.append(
                    UserListWordORM(user_word_id=user_word_id, position=position)
                )
        return orm_model
