"""Coin description value object."""

from coincollector.domain.entities.coin_country import CoinCountry
from coincollector.domain.entities.coin_value import CoinValue
from coincollector.domain.entities.mint import Mint
from coincollector.domain.exceptions import InvalidDescriptionInputError


def _checked(text: str) -> str:
    if not isinstance(text, str) or not text.strip():
        raise InvalidDescriptionInputError("Description text cannot be blank")
    return text


class CoinDescription:
    """Text describing a coin.

    Either wraps a text verbatim or is synthesized from the coin's fields with
    :meth:`from_coin_fields`. The text can be corrected later through
    :meth:`set_text`.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        self._text = _checked(text)

    @classmethod
    def from_coin_fields(
        cls,
        value: CoinValue | None,
        year: int,
        country: CoinCountry | None,
        mint: Mint | None = None,
    ) -> "CoinDescription":
        """Synthesize a description such as "1 Euro coin from Germany from the year 2024".

        Args:
            value: Face value of the coin.
            year: Minting year, must be positive.
            country: Issuing country.
            mint: Optional mint, appended as " from mint <mark>".

        Raises:
            InvalidDescriptionInputError: If value or country is missing or year <= 0.
        """
        if value is None:
            raise InvalidDescriptionInputError("CoinValue cannot be None")
        if country is None:
            raise InvalidDescriptionInputError("CoinCountry cannot be None")
        if isinstance(year, bool) or not isinstance(year, int) or year <= 0:
            raise InvalidDescriptionInputError("Year must be greater than 0")

        text = f"{value.display_name} coin from {country.display_name} from the year {year}"
        if mint is not None:
            text += f" from mint {mint.mint_mark}"
        return cls(text)

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        """Replace the text.

        Raises:
            InvalidDescriptionInputError: If the text is not a non-blank string.
        """
        self._text = _checked(text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"CoinDescription({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CoinDescription):
            return NotImplemented
        return self._text == other._text

    __hash__ = None  # mutable
