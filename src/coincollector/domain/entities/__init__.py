"""Domain entities for CoinCollector.

Entities are plain Python classes that represent core business concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from coincollector.domain.entities.coin_country import CoinCountry
from coincollector.domain.entities.coin_description import CoinDescription
from coincollector.domain.entities.coin_value import CoinValue
from coincollector.domain.entities.collection import EuroCoinCollection
from coincollector.domain.entities.collection_group import EuroCoinCollectionGroup
from coincollector.domain.entities.euro_coin import (
    EuroCoin,
    EuroCoinBuilder,
    derive_coin_id,
    normalize_description,
    rehydrate_coin,
)
from coincollector.domain.entities.mint import Mint
from coincollector.domain.entities.user import User

__all__ = [
    "CoinCountry",
    "CoinDescription",
    "CoinValue",
    "EuroCoin",
    "EuroCoinBuilder",
    "EuroCoinCollection",
    "EuroCoinCollectionGroup",
    "Mint",
    "User",
    "derive_coin_id",
    "normalize_description",
    "rehydrate_coin",
]
