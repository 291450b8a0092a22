"""SQLAlchemy models for the CoinCollector tables.

All models inherit from the Base class defined in database.py and are
created by the schema initializer on startup.
"""

from coincollector.infrastructure.persistence.models.coin import CoinModel
from coincollector.infrastructure.persistence.models.collection import CollectionModel
from coincollector.infrastructure.persistence.models.collection_group import (
    CollectionGroupModel,
)
from coincollector.infrastructure.persistence.models.user import UserModel

__all__ = [
    "CoinModel",
    "CollectionGroupModel",
    "CollectionModel",
    "UserModel",
]
