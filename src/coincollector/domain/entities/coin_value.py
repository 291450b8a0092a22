"""Euro coin face values."""

from enum import Enum

from coincollector.domain.exceptions import UnknownEnumerationValueError


class CoinValue(Enum):
    """Fixed Euro coin denominations as cent amount plus display label."""

    ONE_CENT = (1, "1 Cent")
    TWO_CENTS = (2, "2 Cent")
    FIVE_CENTS = (5, "5 Cent")
    TEN_CENTS = (10, "10 Cent")
    TWENTY_CENTS = (20, "20 Cent")
    FIFTY_CENTS = (50, "50 Cent")
    ONE_EURO = (100, "1 Euro")
    TWO_EUROS = (200, "2 Euro")

    def __init__(self, cent_value: int, display_name: str) -> None:
        self.cent_value = cent_value
        self.display_name = display_name

    @property
    def code(self) -> int:
        """Storage code of the value (its amount in cents)."""
        return self.cent_value

    @classmethod
    def from_cent_value(cls, cent_value: int | None) -> "CoinValue":
        """Look up a value by its amount in cents.

        Raises:
            UnknownEnumerationValueError: If no denomination matches exactly.
        """
        # bool is an int subclass, True would otherwise match ONE_CENT
        if isinstance(cent_value, bool) or not isinstance(cent_value, int):
            raise UnknownEnumerationValueError("CoinValue", cent_value)
        try:
            return _BY_CENTS[cent_value]
        except KeyError:
            raise UnknownEnumerationValueError("CoinValue", cent_value) from None


_BY_CENTS: dict[int, CoinValue] = {value.cent_value: value for value in CoinValue}
