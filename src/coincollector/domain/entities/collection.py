"""Collection aggregate holding Euro coins.

A collection belongs to exactly one collection group. Its metrics (coin
count, total value) are derived from the coins on every call and are never
stored.
"""

import uuid
from dataclasses import dataclass, field

from coincollector.domain.entities.euro_coin import EuroCoin
from coincollector.domain.exceptions import ValidationError


@dataclass(eq=False)
class EuroCoinCollection:
    """Named, ordered collection of :class:`EuroCoin`.

    Adding and removing coins only changes the in-memory aggregate. Removed
    coin ids are remembered as pending removals until the aggregate is saved
    through ``CollectionStorageService``.

    Attributes:
        id: Unique identifier (UUID string).
        name: Collection name (unique).
        group_id: Owning collection group.
    """

    id: str
    name: str
    group_id: str
    _coins: list[EuroCoin] = field(default_factory=list, repr=False)
    _removed_coin_ids: set[str] = field(default_factory=set, repr=False)

    def __post_init__(self) -> None:
        """Validate collection data after initialization."""
        if not self.id or not self.id.strip():
            raise ValidationError("Collection ID is required")
        if not self.name or not self.name.strip():
            raise ValidationError("Collection name is required")
        if not self.group_id or not self.group_id.strip():
            raise ValidationError("Group ID is required")
        coins = list(self._coins)
        self._coins = []
        for coin in coins:
            self.add_coin(coin)

    @classmethod
    def create(cls, name: str, group_id: str, coins: list[EuroCoin] | None = None) -> "EuroCoinCollection":
        """Create a new collection with a freshly generated id."""
        return cls(id=str(uuid.uuid4()), name=name, group_id=group_id, _coins=list(coins or []))

    @property
    def coins(self) -> tuple[EuroCoin, ...]:
        return tuple(self._coins)

    @property
    def pending_coin_removals(self) -> frozenset[str]:
        """Ids of coins removed in memory but not yet deleted from the store."""
        return frozenset(self._removed_coin_ids)

    def clear_pending_removals(self) -> None:
        self._removed_coin_ids.clear()

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Collection name is required")
        self.name = name

    def add_coin(self, coin: EuroCoin) -> EuroCoin:
        """Add a coin and return it bound to this collection.

        A coin already present (same content, therefore same id) is not added
        a second time.

        Raises:
            ValidationError: If the coin belongs to a different collection.
        """
        if coin.collection_id is None:
            coin = coin.with_collection(self.id)
        elif coin.collection_id != self.id:
            raise ValidationError(
                f"Coin {coin.id} belongs to collection {coin.collection_id}, not {self.id}"
            )

        for existing in self._coins:
            if existing.id == coin.id:
                return existing

        self._coins.append(coin)
        self._removed_coin_ids.discard(coin.id)
        return coin

    def remove_coin(self, coin: EuroCoin | str) -> bool:
        """Remove a coin (or coin id). Returns False if it was not present."""
        coin_id = coin if isinstance(coin, str) else coin.id
        for index, existing in enumerate(self._coins):
            if existing.id == coin_id:
                del self._coins[index]
                self._removed_coin_ids.add(coin_id)
                return True
        return False

    def get_coin(self, coin_id: str) -> EuroCoin | None:
        return next((coin for coin in self._coins if coin.id == coin_id), None)

    def total_value(self) -> int:
        """Sum of the face values of all coins, in cents."""
        return sum(coin.value.cent_value for coin in self._coins)

    def coin_count(self) -> int:
        return len(self._coins)
