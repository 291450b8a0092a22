"""Application services composing repository calls into aggregate operations."""

from coincollector.application.services.collection_service import (
    CollectionStorageService,
)
from coincollector.application.services.group_service import GroupStorageService

__all__ = ["CollectionStorageService", "GroupStorageService"]
