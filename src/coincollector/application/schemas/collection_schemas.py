"""Read-only projections of the coin collection aggregates."""

from pydantic import BaseModel, ConfigDict, Field

from coincollector.domain.entities import (
    EuroCoin,
    EuroCoinCollection,
    EuroCoinCollectionGroup,
)


class CoinResponse(BaseModel):
    """Projection of one Euro coin."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Deterministic coin id")
    year: int = Field(..., description="Minting year")
    value: int = Field(..., description="Face value in cents")
    country: str = Field(..., description="ISO 3166-1 alpha-2 code of the minting country")
    mint: str | None = Field(default=None, description="Mint mark, if known")
    description: str
    collection_id: str | None = None

    @classmethod
    def from_domain(cls, coin: EuroCoin) -> "CoinResponse":
        return cls(
            id=coin.id,
            year=coin.year,
            value=coin.value.cent_value,
            country=coin.mint_country.iso_code,
            mint=coin.mint.mint_mark if coin.mint is not None else None,
            description=coin.description.text,
            collection_id=coin.collection_id,
        )


class CollectionResponse(BaseModel):
    """Projection of a collection with its coins and derived metrics."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    group_id: str
    coins: list[CoinResponse] = Field(default_factory=list)
    coin_count: int = 0
    total_value: int = Field(default=0, description="Sum of face values in cents")

    @classmethod
    def from_domain(cls, collection: EuroCoinCollection) -> "CollectionResponse":
        return cls(
            id=collection.id,
            name=collection.name,
            group_id=collection.group_id,
            coins=[CoinResponse.from_domain(coin) for coin in collection.coins],
            coin_count=collection.coin_count(),
            total_value=collection.total_value(),
        )


class GroupResponse(BaseModel):
    """Projection of a collection group with its whole tree."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    owner_id: str
    collections: list[CollectionResponse] = Field(default_factory=list)
    total_collections: int = 0
    total_coins: int = 0
    total_value: int = Field(default=0, description="Sum of face values in cents")

    @classmethod
    def from_domain(cls, group: EuroCoinCollectionGroup) -> "GroupResponse":
        return cls(
            id=group.id,
            name=group.name,
            owner_id=group.owner_id,
            collections=[
                CollectionResponse.from_domain(collection) for collection in group.collections
            ],
            total_collections=group.total_collections(),
            total_coins=group.total_coins(),
            total_value=group.total_value(),
        )
