"""Collection group aggregate owned by a single user."""

import uuid
from dataclasses import dataclass, field

from coincollector.domain.entities.collection import EuroCoinCollection
from coincollector.domain.exceptions import ValidationError


@dataclass(eq=False)
class EuroCoinCollectionGroup:
    """Named, ordered group of :class:`EuroCoinCollection` owned by one user.

    Totals are computed from the child collections on every call.

    Attributes:
        id: Unique identifier (UUID string).
        name: Group name (unique).
        owner_id: Id of the owning user.
    """

    id: str
    name: str
    owner_id: str
    _collections: list[EuroCoinCollection] = field(default_factory=list, repr=False)
    _removed_collection_ids: set[str] = field(default_factory=set, repr=False)

    def __post_init__(self) -> None:
        """Validate group data after initialization."""
        if not self.id or not self.id.strip():
            raise ValidationError("Group ID is required")
        if not self.name or not self.name.strip():
            raise ValidationError("Group name is required")
        if not self.owner_id or not self.owner_id.strip():
            raise ValidationError("Owner ID is required")
        collections = list(self._collections)
        self._collections = []
        for collection in collections:
            self.add_collection(collection)

    @classmethod
    def create(cls, name: str, owner_id: str) -> "EuroCoinCollectionGroup":
        """Create a new, empty group with a freshly generated id."""
        return cls(id=str(uuid.uuid4()), name=name, owner_id=owner_id)

    @property
    def collections(self) -> tuple[EuroCoinCollection, ...]:
        return tuple(self._collections)

    @property
    def pending_collection_removals(self) -> frozenset[str]:
        """Ids of collections removed in memory but not yet deleted from the store."""
        return frozenset(self._removed_collection_ids)

    def clear_pending_removals(self) -> None:
        self._removed_collection_ids.clear()

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Group name is required")
        self.name = name

    def new_collection(self, name: str) -> EuroCoinCollection:
        """Create an empty collection in this group and add it."""
        collection = EuroCoinCollection.create(name, self.id)
        self.add_collection(collection)
        return collection

    def add_collection(self, collection: EuroCoinCollection) -> None:
        """Add a collection that already points at this group.

        Raises:
            ValidationError: If the collection's group_id is a different group.
        """
        if collection.group_id != self.id:
            raise ValidationError(
                f"Collection {collection.id} belongs to group {collection.group_id}, not {self.id}"
            )
        if any(existing.id == collection.id for existing in self._collections):
            return
        self._collections.append(collection)
        self._removed_collection_ids.discard(collection.id)

    def remove_collection(self, collection: EuroCoinCollection | str) -> bool:
        """Remove a collection (or collection id). Returns False if it was not present."""
        collection_id = collection if isinstance(collection, str) else collection.id
        for index, existing in enumerate(self._collections):
            if existing.id == collection_id:
                del self._collections[index]
                self._removed_collection_ids.add(collection_id)
                return True
        return False

    def total_collections(self) -> int:
        return len(self._collections)

    def total_coins(self) -> int:
        return sum(collection.coin_count() for collection in self._collections)

    def total_value(self) -> int:
        """Sum of the values of all collections, in cents."""
        return sum(collection.total_value() for collection in self._collections)
