"""Repository for coin database operations."""

from __future__ import annotations

from sqlalchemy import delete, literal_column, select, update
from sqlalchemy.orm import Session

from coincollector.core.logging import get_logger
from coincollector.domain.entities import EuroCoin
from coincollector.domain.exceptions import (
    AlreadyExistsError,
    NotFoundError,
    ParentNotFoundError,
    StorageConsistencyError,
    ValidationError,
)
from coincollector.infrastructure.persistence.mappers import coin_from_row
from coincollector.infrastructure.persistence.models import CoinModel, CollectionModel
from coincollector.infrastructure.persistence.repositories.base import SqlRepository

logger = get_logger(__name__)

# SQLite keeps insertion order in the implicit rowid
_INSERTION_ORDER = literal_column("coins.rowid")


class CoinRepository(SqlRepository):
    """Repository for coin database operations.

    Coin ids are derived from content, so creating a coin whose content is
    already stored (in any collection) fails with ``AlreadyExistsError``.
    """

    entity = "coin"

    def create(self, coin: EuroCoin, session: Session | None = None) -> EuroCoin:
        """Create a new coin row.

        Raises:
            ValidationError: If the coin is not bound to a collection.
            AlreadyExistsError: If a coin with the same id exists.
            ParentNotFoundError: If the collection does not exist.
        """
        if not coin.collection_id:
            raise ValidationError(f"Coin {coin.id} is not bound to a collection")

        with self._scope(coin.id, session, parent_id=coin.collection_id) as s:
            if self._exists(s, coin.id):
                raise AlreadyExistsError(self.entity, coin.id)
            collection = s.execute(
                select(CollectionModel.collection_id)
                .where(CollectionModel.collection_id == coin.collection_id)
                .limit(1)
            ).first()
            if collection is None:
                raise ParentNotFoundError(self.entity, coin.id, coin.collection_id)
            s.add(
                CoinModel(
                    coin_id=coin.id,
                    year=coin.year,
                    coin_value=coin.value.cent_value,
                    mint_country=coin.mint_country.iso_code,
                    mint=coin.mint.mint_mark if coin.mint is not None else None,
                    description=coin.description.text,
                    collection_id=coin.collection_id,
                )
            )
            s.flush()

        logger.info("Coin created", coin_id=coin.id, collection_id=coin.collection_id)
        return coin

    def read(self, coin_id: str, session: Session | None = None) -> EuroCoin | None:
        """Get a coin by ID.

        Returns:
            The coin if found, None otherwise.

        Raises:
            CorruptRowError: If the stored row is not a valid coin.
        """
        with self._scope(coin_id, session) as s:
            row = s.execute(
                select(CoinModel).where(CoinModel.coin_id == coin_id)
            ).scalar_one_or_none()
            return coin_from_row(row) if row is not None else None

    def get_all_by_collection(
        self, collection_id: str, session: Session | None = None
    ) -> list[EuroCoin]:
        """List the coins of one collection in insertion order."""
        with self._scope(None, session) as s:
            rows = s.execute(
                select(CoinModel)
                .where(CoinModel.collection_id == collection_id)
                .order_by(_INSERTION_ORDER)
            ).scalars().all()
            return [coin_from_row(row) for row in rows]

    def get_ids_by_collection(
        self, collection_id: str, session: Session | None = None
    ) -> set[str]:
        """Ids of the stored coins of one collection, without loading the rows."""
        with self._scope(None, session) as s:
            return set(
                s.execute(
                    select(CoinModel.coin_id).where(CoinModel.collection_id == collection_id)
                ).scalars()
            )

    def get_all(self, session: Session | None = None) -> list[EuroCoin]:
        with self._scope(None, session) as s:
            rows = s.execute(select(CoinModel).order_by(_INSERTION_ORDER)).scalars().all()
            return [coin_from_row(row) for row in rows]

    def update(self, coin: EuroCoin, session: Session | None = None) -> EuroCoin:
        """Update the coin's description, the only mutable column.

        Raises:
            NotFoundError: If the coin does not exist.
            StorageConsistencyError: If the update did not hit exactly one row.
        """
        with self._scope(coin.id, session) as s:
            if not self._exists(s, coin.id):
                raise NotFoundError(self.entity, coin.id)
            result = s.execute(
                update(CoinModel)
                .where(CoinModel.coin_id == coin.id)
                .values(description=coin.description.text)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                raise StorageConsistencyError(self.entity, coin.id, result.rowcount)

        logger.info("Coin updated", coin_id=coin.id)
        return coin

    def delete(self, coin_id: str, session: Session | None = None) -> None:
        """Delete a coin.

        Raises:
            NotFoundError: If the coin does not exist.
            StorageConsistencyError: If more than one row was deleted.
        """
        with self._scope(coin_id, session) as s:
            result = s.execute(
                delete(CoinModel)
                .where(CoinModel.coin_id == coin_id)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                raise NotFoundError(self.entity, coin_id)
            if result.rowcount != 1:
                raise StorageConsistencyError(self.entity, coin_id, result.rowcount)

        logger.info("Coin deleted", coin_id=coin_id)

    def exists(self, coin_id: str, session: Session | None = None) -> bool:
        with self._scope(coin_id, session) as s:
            return self._exists(s, coin_id)

    @staticmethod
    def _exists(session: Session, coin_id: str) -> bool:
        return (
            session.execute(
                select(CoinModel.coin_id).where(CoinModel.coin_id == coin_id).limit(1)
            ).first()
            is not None
        )
