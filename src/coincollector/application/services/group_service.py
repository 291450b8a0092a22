"""Collection group storage service.

Loads a group with its whole tree of collections and coins, and saves it
back in a single transaction.
"""

from sqlalchemy.orm import Session

from coincollector.application.services.collection_service import (
    CollectionStorageService,
)
from coincollector.core.logging import get_logger
from coincollector.domain.entities import EuroCoinCollectionGroup
from coincollector.domain.exceptions import NotFoundError
from coincollector.infrastructure.persistence.database import DatabaseManager
from coincollector.infrastructure.persistence.repositories import (
    GroupRepository,
    session_scope,
)

logger = get_logger(__name__)


class GroupStorageService:
    """Service for loading and saving collection group aggregates."""

    def __init__(
        self,
        db: DatabaseManager,
        group_repository: GroupRepository | None = None,
        collection_service: CollectionStorageService | None = None,
    ) -> None:
        self.db = db
        self.group_repository = group_repository or GroupRepository(db)
        self.collection_service = collection_service or CollectionStorageService(db)

    def get_by_id(
        self, group_id: str, session: Session | None = None
    ) -> EuroCoinCollectionGroup:
        """Load a group with its collections and their coins.

        Raises:
            NotFoundError: If the group does not exist.
        """
        with session_scope(self.db, "group", group_id, session) as s:
            group = self.group_repository.read(group_id, session=s)
            if group is None:
                raise NotFoundError("group", group_id)
            return self._hydrate(group, s)

    def get_all_by_owner(
        self, owner_id: str, session: Session | None = None
    ) -> list[EuroCoinCollectionGroup]:
        """Load every group of one user. Unknown users have no groups."""
        with session_scope(self.db, "group", None, session) as s:
            return [
                self._hydrate(group, s)
                for group in self.group_repository.get_all_groups_by_owner(owner_id, session=s)
            ]

    def save(
        self, group: EuroCoinCollectionGroup, session: Session | None = None
    ) -> EuroCoinCollectionGroup:
        """Persist the group row and every collection in it.

        Collections removed from the group since it was loaded are deleted
        together with their coins. All pending removals are applied before
        any row is created, so coins can move freely between collections.

        Raises:
            AlreadyExistsError: If a group, collection or coin clashes with a
                stored one.
            ParentNotFoundError: If the owner does not exist.
        """
        with session_scope(self.db, "group", group.id, session) as s:
            if self.group_repository.exists(group.id, session=s):
                self.group_repository.update(group, session=s)
            else:
                self.group_repository.create(group, session=s)

            for collection_id in group.pending_collection_removals:
                if self.collection_service.collection_repository.exists(
                    collection_id, session=s
                ):
                    self.collection_service.collection_repository.delete(
                        collection_id, session=s
                    )

            # Every delete goes first, a coin may move to an earlier collection
            for collection in group.collections:
                self.collection_service.delete_pending_removals(collection, s)
            for collection in group.collections:
                self.collection_service.write_rows(collection, s)

        if session is None:
            group.clear_pending_removals()
            for collection in group.collections:
                collection.clear_pending_removals()

        logger.info(
            "Group saved",
            group_id=group.id,
            collections=group.total_collections(),
            coins=group.total_coins(),
        )
        return group

    def _hydrate(
        self, group: EuroCoinCollectionGroup, session: Session
    ) -> EuroCoinCollectionGroup:
        for collection in self.collection_service.get_all_by_group(group.id, session=session):
            group.add_collection(collection)
        return group
