"""Euro coin entity, its content-derived identity and its builder.

A coin's id is derived from its content: two coins with the same country,
value, year, mint and description are the same coin. The id format is::

    <ISO country code>_<value in cents>_<year>_<mint mark or UNKNOWN>_<DESCRIPTION>

where DESCRIPTION is the description text upper-cased with every run of
whitespace collapsed to one space and the ends stripped. The format is part
of the persisted data and must not change.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from coincollector.domain.entities.coin_country import CoinCountry
from coincollector.domain.entities.coin_description import CoinDescription
from coincollector.domain.entities.coin_value import CoinValue
from coincollector.domain.entities.mint import Mint
from coincollector.domain.exceptions import MissingRequiredFieldError, ValidationError

COIN_ID_SEPARATOR = "_"
UNKNOWN_MINT_TOKEN = "UNKNOWN"


def normalize_description(text: str) -> str:
    """Upper-case a description and collapse its whitespace."""
    return " ".join(text.upper().split())


def derive_coin_id(
    mint_country: CoinCountry,
    value: CoinValue,
    year: int,
    mint: Mint | None,
    description: CoinDescription | str,
) -> str:
    """Derive the deterministic id of a coin from its content."""
    tokens = [
        mint_country.iso_code,
        str(value.cent_value),
        str(year),
        mint.mint_mark if mint is not None else UNKNOWN_MINT_TOKEN,
        normalize_description(str(description)),
    ]
    return COIN_ID_SEPARATOR.join(tokens)


@dataclass(frozen=True, eq=False)
class EuroCoin:
    """A single Euro coin.

    Instances are created through :class:`EuroCoinBuilder` (new coins) or
    :func:`rehydrate_coin` (rows read back from the store). Structural fields
    are immutable because they make up the id; only the description text can
    be corrected afterwards.

    Attributes:
        id: Content-derived identifier.
        year: Minting year (positive).
        value: Face value.
        mint_country: Issuing country.
        description: Description text holder.
        mint: Mint, None when unknown.
        collection_id: Owning collection, None until the coin is added to one.
    """

    id: str
    year: int
    value: CoinValue
    mint_country: CoinCountry
    description: CoinDescription
    mint: Mint | None = None
    collection_id: str | None = None

    def with_collection(self, collection_id: str) -> EuroCoin:
        """Return the same coin bound to ``collection_id``."""
        if not collection_id or not collection_id.strip():
            raise ValidationError("collection_id is required")
        # The description is mutable, the bound coin gets its own copy
        return dataclasses.replace(
            self,
            collection_id=collection_id,
            description=CoinDescription(self.description.text),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EuroCoin):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


def _validate_structure(
    year: int,
    value: CoinValue | None,
    mint_country: CoinCountry | None,
    mint: Mint | None,
) -> None:
    if isinstance(year, bool) or not isinstance(year, int) or year <= 0:
        raise MissingRequiredFieldError("year", "Year must be a positive integer")
    if value is None:
        raise MissingRequiredFieldError("value", "CoinValue cannot be None")
    if not isinstance(value, CoinValue):
        raise ValidationError(f"value must be a CoinValue, got {value!r}")
    if mint_country is None:
        raise MissingRequiredFieldError("mint_country", "MintCountry cannot be None")
    if not isinstance(mint_country, CoinCountry):
        raise ValidationError(f"mint_country must be a CoinCountry, got {mint_country!r}")
    if mint is not None and not isinstance(mint, Mint):
        raise ValidationError(f"mint must be a Mint, got {mint!r}")


class EuroCoinBuilder:
    """Fluent builder for :class:`EuroCoin`.

    Validates the required fields, synthesizes a description when none was
    given and derives the id from the content.

    Example:
        coin = (
            EuroCoinBuilder()
            .set_year(2024)
            .set_value(CoinValue.ONE_EURO)
            .set_mint_country(CoinCountry.GERMANY)
            .set_mint(Mint.BERLIN)
            .build()
        )
    """

    def __init__(self) -> None:
        self._year: int = 0
        self._value: CoinValue | None = None
        self._mint_country: CoinCountry | None = None
        self._description: CoinDescription | None = None
        self._mint: Mint | None = None
        self._collection_id: str | None = None

    def set_year(self, year: int) -> EuroCoinBuilder:
        self._year = year
        return self

    def set_value(self, value: CoinValue | None) -> EuroCoinBuilder:
        self._value = value
        return self

    def set_mint_country(self, mint_country: CoinCountry | None) -> EuroCoinBuilder:
        self._mint_country = mint_country
        return self

    def set_description(self, description: CoinDescription | str | None) -> EuroCoinBuilder:
        if isinstance(description, str):
            # Blank text means "synthesize one"
            description = CoinDescription(description) if description.strip() else None
        self._description = description
        return self

    def set_mint(self, mint: Mint | None) -> EuroCoinBuilder:
        self._mint = mint
        return self

    def set_collection_id(self, collection_id: str | None) -> EuroCoinBuilder:
        self._collection_id = collection_id
        return self

    def build(self) -> EuroCoin:
        """Validate and build the coin.

        Returns:
            EuroCoin: New coin with a content-derived id.

        Raises:
            MissingRequiredFieldError: If year <= 0 or value/mint country is missing.
        """
        _validate_structure(self._year, self._value, self._mint_country, self._mint)

        description = self._description
        if description is None:
            description = CoinDescription.from_coin_fields(
                self._value, self._year, self._mint_country, self._mint
            )
        else:
            # Copy so later corrections through the builder's object do not leak in
            description = CoinDescription(description.text)

        return EuroCoin(
            id=derive_coin_id(
                self._mint_country, self._value, self._year, self._mint, description
            ),
            year=self._year,
            value=self._value,
            mint_country=self._mint_country,
            description=description,
            mint=self._mint,
            collection_id=self._collection_id,
        )


def rehydrate_coin(
    coin_id: str,
    year: int,
    value: CoinValue,
    mint_country: CoinCountry,
    description: CoinDescription | str,
    mint: Mint | None = None,
    collection_id: str | None = None,
) -> EuroCoin:
    """Rebuild a coin whose id is already known (e.g. read from the store).

    The id is kept verbatim; the remaining fields go through the same
    validation as :meth:`EuroCoinBuilder.build`.

    Raises:
        MissingRequiredFieldError: If the id, year, value or country is missing.
    """
    if not coin_id or not coin_id.strip():
        raise MissingRequiredFieldError("id", "Coin id cannot be blank")
    _validate_structure(year, value, mint_country, mint)
    if isinstance(description, str):
        description = CoinDescription(description)
    return EuroCoin(
        id=coin_id,
        year=year,
        value=value,
        mint_country=mint_country,
        description=description,
        mint=mint,
        collection_id=collection_id,
    )
