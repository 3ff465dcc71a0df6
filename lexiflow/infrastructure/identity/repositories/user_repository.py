"""Repository for User domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lexiflow.domain.common.value_objects.ids import UserId
from lexiflow.domain.identity.entities.user import User
from lexiflow.domain.identity.exceptions import EmailAlreadyExistsError, UserNotFoundError
from lexiflow.infrastructure.identity.mappers.user_mapper import UserMapper
from lexiflow.models import User as UserORM

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User domain entities. Deleted accounts are never returned."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_by_id(self, user_id: UserId) -> User | None:
        stmt = select(UserORM).where(UserORM.id == user_id.value, UserORM.deleted_at.is_(None))
        orm_model = self.db.execute(stmt).unique().scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_email(self, email: str) -> User | None:
        stmt = select(UserORM).where(
            UserORM.email == email.strip().lower(), UserORM.deleted_at.is_(None)
        )
        orm_model = self.db.execute(stmt).unique().scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, user: User) -> User:
        """
        Save a user entity, its learning settings and practice preferences.

        Raises:
            EmailAlreadyExistsError: If the email belongs to another user
            UserNotFoundError: If an existing user's row is gone
        """
        try:
            if user.id.value == 0:
                orm_model = self.mapper.to_orm(user)
                self.db.add(orm_model)
                self.db.commit()
                self.db.refresh(orm_model)
                logger.info(f"Created user with email: {user.email} (id={orm_model.id})")
                return self.mapper.to_domain(orm_model)

            existing = self.db.get(UserORM, user.id.value)
            if not existing:
                raise UserNotFoundError(user.id.value)

            orm_model = self.mapper.to_orm(user, existing)
            self.db.commit()
            self.db.refresh(orm_model)
            if user.is_deleted:
                logger.info(f"Deleted account of user {user.id.value}")
            else:
                logger.info(f"Updated user {user.id.value}")
            return self.mapper.to_domain(orm_model)
        except IntegrityError as e:
            self.db.rollback()
            if "email" in str(e.orig):
                raise EmailAlreadyExistsError(user.email) from e
            raise
