"""Repository for user database operations."""

from __future__ import annotations

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from coincollector.core.logging import get_logger
from coincollector.domain.entities import User
from coincollector.domain.exceptions import (
    AlreadyExistsError,
    NotFoundError,
    StorageConsistencyError,
)
from coincollector.infrastructure.persistence.mappers import user_from_row
from coincollector.infrastructure.persistence.models import UserModel
from coincollector.infrastructure.persistence.repositories.base import SqlRepository

logger = get_logger(__name__)


class UserRepository(SqlRepository):
    """Repository for user database operations."""

    entity = "user"

    def create(self, user: User, session: Session | None = None) -> User:
        """Create a new user.

        Args:
            user: User to persist.
            session: Optional caller-managed session.

        Returns:
            The created user.

        Raises:
            AlreadyExistsError: If the id or the name is taken.
        """
        with self._scope(user.id, session) as s:
            if self._exists(s, user.id):
                raise AlreadyExistsError(self.entity, user.id)
            if self._name_taken(s, user.name):
                raise AlreadyExistsError(self.entity, user.id, f"Name {user.name!r} is taken")
            s.add(UserModel(user_id=user.id, name=user.name))
            s.flush()

        logger.info("User created", user_id=user.id)
        return user

    def read(self, user_id: str, session: Session | None = None) -> User | None:
        """Get a user by ID.

        Returns:
            The user if found, None otherwise.
        """
        with self._scope(user_id, session) as s:
            row = s.execute(
                select(UserModel).where(UserModel.user_id == user_id)
            ).scalar_one_or_none()
            return user_from_row(row) if row is not None else None

    def get_by_name(self, name: str, session: Session | None = None) -> User | None:
        """Get a user by display name."""
        with self._scope(None, session) as s:
            row = s.execute(
                select(UserModel).where(UserModel.name == name)
            ).scalar_one_or_none()
            return user_from_row(row) if row is not None else None

    def get_all(self, session: Session | None = None) -> list[User]:
        with self._scope(None, session) as s:
            rows = s.execute(select(UserModel).order_by(UserModel.name)).scalars().all()
            return [user_from_row(row) for row in rows]

    def update(self, user: User, session: Session | None = None) -> User:
        """Update the user's name.

        Raises:
            NotFoundError: If the user does not exist.
            AlreadyExistsError: If another user has the new name.
            StorageConsistencyError: If the update did not hit exactly one row.
        """
        with self._scope(user.id, session) as s:
            if not self._exists(s, user.id):
                raise NotFoundError(self.entity, user.id)
            if self._name_taken(s, user.name, exclude_id=user.id):
                raise AlreadyExistsError(self.entity, user.id, f"Name {user.name!r} is taken")
            result = s.execute(
                update(UserModel)
                .where(UserModel.user_id == user.id)
                .values(name=user.name)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                raise StorageConsistencyError(self.entity, user.id, result.rowcount)

        logger.info("User updated", user_id=user.id)
        return user

    def delete(self, user_id: str, session: Session | None = None) -> None:
        """Delete a user. Its groups, collections and coins go with it.

        Raises:
            NotFoundError: If the user does not exist.
            StorageConsistencyError: If more than one row was deleted.
        """
        with self._scope(user_id, session) as s:
            result = s.execute(
                delete(UserModel)
                .where(UserModel.user_id == user_id)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                raise NotFoundError(self.entity, user_id)
            if result.rowcount != 1:
                raise StorageConsistencyError(self.entity, user_id, result.rowcount)

        logger.info("User deleted", user_id=user_id)

    def exists(self, user_id: str, session: Session | None = None) -> bool:
        with self._scope(user_id, session) as s:
            return self._exists(s, user_id)

    @staticmethod
    def _exists(session: Session, user_id: str) -> bool:
        return (
            session.execute(
                select(UserModel.user_id).where(UserModel.user_id == user_id).limit(1)
            ).first()
            is not None
        )

    @staticmethod
    def _name_taken(session: Session, name: str, exclude_id: str | None = None) -> bool:
        query = select(UserModel.user_id).where(UserModel.name == name)
        if exclude_id is not None:
            query = query.where(UserModel.user_id != exclude_id)
        return session.execute(query.limit(1)).first() is not None
