"""Persistence repositories for database operations."""

from coincollector.infrastructure.persistence.repositories.base import (
    SqlRepository,
    session_scope,
)
from coincollector.infrastructure.persistence.repositories.coin_repository import (
    CoinRepository,
)
from coincollector.infrastructure.persistence.repositories.collection_repository import (
    CollectionRepository,
)
from coincollector.infrastructure.persistence.repositories.group_repository import (
    GroupRepository,
)
from coincollector.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "SqlRepository",
    "CoinRepository",
    "CollectionRepository",
    "GroupRepository",
    "UserRepository",
    "session_scope",
]
