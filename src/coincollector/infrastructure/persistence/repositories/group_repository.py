"""Repository for collection group database operations."""

from __future__ import annotations

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from coincollector.core.logging import get_logger
from coincollector.domain.entities import EuroCoinCollectionGroup
from coincollector.domain.exceptions import (
    AlreadyExistsError,
    NotFoundError,
    ParentNotFoundError,
    StorageConsistencyError,
)
from coincollector.infrastructure.persistence.mappers import group_from_row
from coincollector.infrastructure.persistence.models import CollectionGroupModel, UserModel
from coincollector.infrastructure.persistence.repositories.base import SqlRepository

logger = get_logger(__name__)


class GroupRepository(SqlRepository):
    """Repository for collection group database operations.

    Only the group row is handled here; collections are loaded and stored
    through ``CollectionRepository``.
    """

    entity = "group"

    def create(
        self, group: EuroCoinCollectionGroup, session: Session | None = None
    ) -> EuroCoinCollectionGroup:
        """Create a new group row.

        Raises:
            AlreadyExistsError: If the id or the name is taken.
            ParentNotFoundError: If the owner does not exist.
        """
        with self._scope(group.id, session, parent_id=group.owner_id) as s:
            if self._exists(s, group.id):
                raise AlreadyExistsError(self.entity, group.id)
            if self._name_taken(s, group.name):
                raise AlreadyExistsError(self.entity, group.id, f"Name {group.name!r} is taken")
            owner = s.execute(
                select(UserModel.user_id).where(UserModel.user_id == group.owner_id).limit(1)
            ).first()
            if owner is None:
                raise ParentNotFoundError(self.entity, group.id, group.owner_id)
            s.add(
                CollectionGroupModel(
                    group_id=group.id,
                    name=group.name,
                    owner_id=group.owner_id,
                )
            )
            s.flush()

        logger.info("Group created", group_id=group.id, owner_id=group.owner_id)
        return group

    def read(
        self, group_id: str, session: Session | None = None
    ) -> EuroCoinCollectionGroup | None:
        """Get a group by ID, without its collections.

        Returns:
            The group if found, None otherwise.
        """
        with self._scope(group_id, session) as s:
            row = s.execute(
                select(CollectionGroupModel).where(CollectionGroupModel.group_id == group_id)
            ).scalar_one_or_none()
            return group_from_row(row) if row is not None else None

    def get_all_groups_by_owner(
        self, owner_id: str, session: Session | None = None
    ) -> list[EuroCoinCollectionGroup]:
        """List the groups of one user, ordered by name."""
        with self._scope(None, session) as s:
            rows = s.execute(
                select(CollectionGroupModel)
                .where(CollectionGroupModel.owner_id == owner_id)
                .order_by(CollectionGroupModel.name)
            ).scalars().all()
            return [group_from_row(row) for row in rows]

    def update(
        self, group: EuroCoinCollectionGroup, session: Session | None = None
    ) -> EuroCoinCollectionGroup:
        """Update the group's name.

        Raises:
            NotFoundError: If the group does not exist.
            AlreadyExistsError: If another group has the new name.
            StorageConsistencyError: If the update did not hit exactly one row.
        """
        with self._scope(group.id, session) as s:
            if not self._exists(s, group.id):
                raise NotFoundError(self.entity, group.id)
            if self._name_taken(s, group.name, exclude_id=group.id):
                raise AlreadyExistsError(self.entity, group.id, f"Name {group.name!r} is taken")
            result = s.execute(
                update(CollectionGroupModel)
                .where(CollectionGroupModel.group_id == group.id)
                .values(name=group.name)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                raise StorageConsistencyError(self.entity, group.id, result.rowcount)

        logger.info("Group updated", group_id=group.id)
        return group

    def delete(self, group_id: str, session: Session | None = None) -> None:
        """Delete a group. Its collections and coins go with it.

        Raises:
            NotFoundError: If the group does not exist.
            StorageConsistencyError: If more than one row was deleted.
        """
        with self._scope(group_id, session) as s:
            result = s.execute(
                delete(CollectionGroupModel)
                .where(CollectionGroupModel.group_id == group_id)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                raise NotFoundError(self.entity, group_id)
            if result.rowcount != 1:
                raise StorageConsistencyError(self.entity, group_id, result.rowcount)

        logger.info("Group deleted", group_id=group_id)

    def exists(self, group_id: str, session: Session | None = None) -> bool:
        with self._scope(group_id, session) as s:
            return self._exists(s, group_id)

    @staticmethod
    def _exists(session: Session, group_id: str) -> bool:
        return (
            session.execute(
                select(CollectionGroupModel.group_id)
                .where(CollectionGroupModel.group_id == group_id)
                .limit(1)
            ).first()
            is not None
        )

    @staticmethod
    def _name_taken(session: Session, name: str, exclude_id: str | None = None) -> bool:
        query = select(CollectionGroupModel.group_id).where(CollectionGroupModel.name == name)
        if exclude_id is not None:
            query = query.where(CollectionGroupModel.group_id != exclude_id)
        return session.execute(query.limit(1)).first() is not None
