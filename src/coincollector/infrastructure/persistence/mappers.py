"""Row mappers turning persisted rows into domain entities.

Each mapper accepts either an ORM model instance or a mapping of column name
to value (e.g. ``Row._mapping`` from a Core query) and returns a validated
entity. Rows that fail validation raise :class:`CorruptRowError`; aggregates
come back with empty child lists.
"""

from collections.abc import Mapping
from typing import Any

from coincollector.core.logging import get_logger
from coincollector.domain.entities import (
    CoinCountry,
    CoinValue,
    EuroCoin,
    EuroCoinCollection,
    EuroCoinCollectionGroup,
    Mint,
    User,
    rehydrate_coin,
)
from coincollector.domain.exceptions import CorruptRowError, ValidationError

logger = get_logger(__name__)

_MISSING = object()


def _field(row: Any, column: str) -> Any:
    if isinstance(row, Mapping):
        value = row.get(column, _MISSING)
    else:
        value = getattr(row, column, _MISSING)
    if value is _MISSING:
        raise KeyError(column)
    return value


def _required_text(row: Any, column: str) -> str:
    value = _field(row, column)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{column} is null or blank")
    return value


def _peek_id(row: Any, column: str) -> str | None:
    try:
        value = _field(row, column)
    except KeyError:
        return None
    return value if isinstance(value, str) else None


def _corrupt(entity: str, row: Any, id_column: str, error: Exception) -> CorruptRowError:
    entity_id = _peek_id(row, id_column)
    logger.error("Invalid data in database row", entity=entity, entity_id=entity_id, error=str(error))
    return CorruptRowError(entity, entity_id, str(error))


def user_from_row(row: Any) -> User:
    """Map a users row to a :class:`User`."""
    try:
        return User(id=_required_text(row, "user_id"), name=_required_text(row, "name"))
    except (ValidationError, KeyError, TypeError) as e:
        raise _corrupt("user", row, "user_id", e) from e


def group_from_row(row: Any) -> EuroCoinCollectionGroup:
    """Map a groups row to an empty :class:`EuroCoinCollectionGroup`."""
    try:
        return EuroCoinCollectionGroup(
            id=_required_text(row, "group_id"),
            name=_required_text(row, "name"),
            owner_id=_required_text(row, "owner_id"),
        )
    except (ValidationError, KeyError, TypeError) as e:
        raise _corrupt("group", row, "group_id", e) from e


def collection_from_row(row: Any) -> EuroCoinCollection:
    """Map a collections row to an empty :class:`EuroCoinCollection`."""
    try:
        return EuroCoinCollection(
            id=_required_text(row, "collection_id"),
            name=_required_text(row, "name"),
            group_id=_required_text(row, "group_id"),
        )
    except (ValidationError, KeyError, TypeError) as e:
        raise _corrupt("collection", row, "collection_id", e) from e


def coin_from_row(row: Any) -> EuroCoin:
    """Map a coins row to a :class:`EuroCoin`, keeping the stored id."""
    try:
        mint_mark = _field(row, "mint")
        return rehydrate_coin(
            coin_id=_required_text(row, "coin_id"),
            year=_field(row, "year"),
            value=CoinValue.from_cent_value(_field(row, "coin_value")),
            mint_country=CoinCountry.from_iso_code(_field(row, "mint_country")),
            mint=Mint.from_mint_mark(mint_mark) if mint_mark is not None else None,
            description=_required_text(row, "description"),
            collection_id=_required_text(row, "collection_id"),
        )
    except (ValidationError, KeyError, TypeError) as e:
        raise _corrupt("coin", row, "coin_id", e) from e
