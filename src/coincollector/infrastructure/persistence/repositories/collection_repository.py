"""Repository for collection database operations."""

from __future__ import annotations

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from coincollector.core.logging import get_logger
from coincollector.domain.entities import EuroCoinCollection
from coincollector.domain.exceptions import (
    AlreadyExistsError,
    NotFoundError,
    ParentNotFoundError,
    StorageConsistencyError,
)
from coincollector.infrastructure.persistence.mappers import collection_from_row
from coincollector.infrastructure.persistence.models import (
    CollectionGroupModel,
    CollectionModel,
)
from coincollector.infrastructure.persistence.repositories.base import SqlRepository

logger = get_logger(__name__)


class CollectionRepository(SqlRepository):
    """Repository for collection database operations.

    Only the collection row is handled here; coins are loaded and stored
    through ``CoinRepository``.
    """

    entity = "collection"

    def create(
        self, collection: EuroCoinCollection, session: Session | None = None
    ) -> EuroCoinCollection:
        """Create a new collection row.

        Raises:
            AlreadyExistsError: If the id or the name is taken.
            ParentNotFoundError: If the group does not exist.
        """
        with self._scope(collection.id, session, parent_id=collection.group_id) as s:
            if self._exists(s, collection.id):
                raise AlreadyExistsError(self.entity, collection.id)
            if self._name_taken(s, collection.name):
                raise AlreadyExistsError(
                    self.entity, collection.id, f"Name {collection.name!r} is taken"
                )
            group = s.execute(
                select(CollectionGroupModel.group_id)
                .where(CollectionGroupModel.group_id == collection.group_id)
                .limit(1)
            ).first()
            if group is None:
                raise ParentNotFoundError(self.entity, collection.id, collection.group_id)
            s.add(
                CollectionModel(
                    collection_id=collection.id,
                    name=collection.name,
                    group_id=collection.group_id,
                )
            )
            s.flush()

        logger.info(
            "Collection created", collection_id=collection.id, group_id=collection.group_id
        )
        return collection

    def read(
        self, collection_id: str, session: Session | None = None
    ) -> EuroCoinCollection | None:
        """Get a collection by ID, without its coins.

        Returns:
            The collection if found, None otherwise.
        """
        with self._scope(collection_id, session) as s:
            row = s.execute(
                select(CollectionModel).where(CollectionModel.collection_id == collection_id)
            ).scalar_one_or_none()
            return collection_from_row(row) if row is not None else None

    def get_all_by_group(
        self, group_id: str, session: Session | None = None
    ) -> list[EuroCoinCollection]:
        """List the collections of one group, ordered by name."""
        with self._scope(None, session) as s:
            rows = s.execute(
                select(CollectionModel)
                .where(CollectionModel.group_id == group_id)
                .order_by(CollectionModel.name)
            ).scalars().all()
            return [collection_from_row(row) for row in rows]

    def get_all(self, session: Session | None = None) -> list[EuroCoinCollection]:
        with self._scope(None, session) as s:
            rows = s.execute(
                select(CollectionModel).order_by(CollectionModel.name)
            ).scalars().all()
            return [collection_from_row(row) for row in rows]

    def update(
        self, collection: EuroCoinCollection, session: Session | None = None
    ) -> EuroCoinCollection:
        """Update the collection's name.

        Raises:
            NotFoundError: If the collection does not exist.
            AlreadyExistsError: If another collection has the new name.
            StorageConsistencyError: If the update did not hit exactly one row.
        """
        with self._scope(collection.id, session) as s:
            if not self._exists(s, collection.id):
                raise NotFoundError(self.entity, collection.id)
            if self._name_taken(s, collection.name, exclude_id=collection.id):
                raise AlreadyExistsError(
                    self.entity, collection.id, f"Name {collection.name!r} is taken"
                )
            result = s.execute(
                update(CollectionModel)
                .where(CollectionModel.collection_id == collection.id)
                .values(name=collection.name)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                raise StorageConsistencyError(self.entity, collection.id, result.rowcount)

        logger.info("Collection updated", collection_id=collection.id)
        return collection

    def delete(self, collection_id: str, session: Session | None = None) -> None:
        """Delete a collection. Its coins go with it.

        Raises:
            NotFoundError: If the collection does not exist.
            StorageConsistencyError: If more than one row was deleted.
        """
        with self._scope(collection_id, session) as s:
            result = s.execute(
                delete(CollectionModel)
                .where(CollectionModel.collection_id == collection_id)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                raise NotFoundError(self.entity, collection_id)
            if result.rowcount != 1:
                raise StorageConsistencyError(self.entity, collection_id, result.rowcount)

        logger.info("Collection deleted", collection_id=collection_id)

    def exists(self, collection_id: str, session: Session | None = None) -> bool:
        with self._scope(collection_id, session) as s:
            return self._exists(s, collection_id)

    @staticmethod
    def _exists(session: Session, collection_id: str) -> bool:
        return (
            session.execute(
                select(CollectionModel.collection_id)
                .where(CollectionModel.collection_id == collection_id)
                .limit(1)
            ).first()
            is not None
        )

    @staticmethod
    def _name_taken(session: Session, name: str, exclude_id: str | None = None) -> bool:
        query = select(CollectionModel.collection_id).where(CollectionModel.name == name)
        if exclude_id is not None:
            query = query.where(CollectionModel.collection_id != exclude_id)
        return session.execute(query.limit(1)).first() is not None
