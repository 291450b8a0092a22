"""Pydantic projections returned by the CLI."""

from coincollector.application.schemas.collection_schemas import (
    CoinResponse,
    CollectionResponse,
    GroupResponse,
)

__all__ = ["CoinResponse", "CollectionResponse", "GroupResponse"]
