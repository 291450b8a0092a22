"""Collection storage service.

Loads collections together with their coins and saves a whole collection
aggregate in one transaction.
"""

from sqlalchemy.orm import Session

from coincollector.core.logging import get_logger
from coincollector.domain.entities import EuroCoinCollection
from coincollector.domain.exceptions import NotFoundError
from coincollector.infrastructure.persistence.database import DatabaseManager
from coincollector.infrastructure.persistence.repositories import (
    CoinRepository,
    CollectionRepository,
    session_scope,
)

logger = get_logger(__name__)


class CollectionStorageService:
    """Service for loading and saving collection aggregates."""

    def __init__(
        self,
        db: DatabaseManager,
        collection_repository: CollectionRepository | None = None,
        coin_repository: CoinRepository | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            db: Database manager used to open transactions.
            collection_repository: Optional collection repository.
            coin_repository: Optional coin repository.
        """
        self.db = db
        self.collection_repository = collection_repository or CollectionRepository(db)
        self.coin_repository = coin_repository or CoinRepository(db)

    def get_by_id(
        self, collection_id: str, session: Session | None = None
    ) -> EuroCoinCollection:
        """Load a collection with all of its coins.

        Raises:
            NotFoundError: If the collection does not exist.
        """
        with session_scope(self.db, "collection", collection_id, session) as s:
            collection = self.collection_repository.read(collection_id, session=s)
            if collection is None:
                raise NotFoundError("collection", collection_id)
            return self._hydrate(collection, s)

    def get_all_by_group(
        self, group_id: str, session: Session | None = None
    ) -> list[EuroCoinCollection]:
        """Load every collection of one group with its coins."""
        with session_scope(self.db, "collection", None, session) as s:
            return [
                self._hydrate(collection, s)
                for collection in self.collection_repository.get_all_by_group(
                    group_id, session=s
                )
            ]

    def save(
        self, collection: EuroCoinCollection, session: Session | None = None
    ) -> EuroCoinCollection:
        """Persist the collection row, its coins and its pending coin removals.

        Coins already stored for this collection get their description
        updated, the others are created. Rows of coins removed from the
        aggregate since it was loaded are deleted; nothing else is.

        With a caller-owned ``session`` the pending removals are left on the
        aggregate, since only the caller knows when the transaction commits.

        Raises:
            AlreadyExistsError: If the name is taken, or a coin with the same
                content is stored in another collection.
            ParentNotFoundError: If the group does not exist.
        """
        with session_scope(self.db, "collection", collection.id, session) as s:
            self.delete_pending_removals(collection, s)
            self.write_rows(collection, s)

        if session is None:
            collection.clear_pending_removals()
        return collection

    def delete_pending_removals(
        self, collection: EuroCoinCollection, session: Session
    ) -> None:
        """Delete the stored rows of coins removed from the aggregate."""
        stored_ids = self.coin_repository.get_ids_by_collection(collection.id, session=session)
        for coin_id in collection.pending_coin_removals & stored_ids:
            self.coin_repository.delete(coin_id, session=session)

    def write_rows(self, collection: EuroCoinCollection, session: Session) -> None:
        """Create or update the collection row and the rows of its coins.

        Run after every pending removal of the same transaction, so a coin
        moved between collections is deleted before it is created again.
        """
        if self.collection_repository.exists(collection.id, session=session):
            self.collection_repository.update(collection, session=session)
        else:
            self.collection_repository.create(collection, session=session)

        stored_ids = self.coin_repository.get_ids_by_collection(collection.id, session=session)
        for coin in collection.coins:
            if coin.id in stored_ids:
                self.coin_repository.update(coin, session=session)
            else:
                self.coin_repository.create(coin, session=session)

        logger.info(
            "Collection saved",
            collection_id=collection.id,
            coins=collection.coin_count(),
            removed=len(collection.pending_coin_removals),
        )

    def _hydrate(
        self, collection: EuroCoinCollection, session: Session
    ) -> EuroCoinCollection:
        for coin in self.coin_repository.get_all_by_collection(collection.id, session=session):
            collection.add_coin(coin)
        return collection
