"""Euro issuing countries."""

from enum import Enum

from coincollector.domain.exceptions import UnknownEnumerationValueError


class CoinCountry(Enum):
    """Euro issuing countries with ISO 3166-1 alpha-2 code and display name."""

    AUSTRIA = ("AT", "Austria")
    BELGIUM = ("BE", "Belgium")
    CYPRUS = ("CY", "Cyprus")
    GERMANY = ("DE", "Germany")
    ESTONIA = ("EE", "Estonia")
    SPAIN = ("ES", "Spain")
    FINLAND = ("FI", "Finland")
    FRANCE = ("FR", "France")
    GREECE = ("GR", "Greece")
    IRELAND = ("IE", "Ireland")
    ITALY = ("IT", "Italy")
    LITHUANIA = ("LT", "Lithuania")
    LUXEMBOURG = ("LU", "Luxembourg")
    LATVIA = ("LV", "Latvia")
    MALTA = ("MT", "Malta")
    NETHERLANDS = ("NL", "Netherlands")
    PORTUGAL = ("PT", "Portugal")
    SLOVENIA = ("SI", "Slovenia")
    SLOVAKIA = ("SK", "Slovakia")
    SAN_MARINO = ("SM", "San Marino")
    VATICAN_CITY = ("VA", "Vatican City")
    MONACO = ("MC", "Monaco")
    ANDORRA = ("AD", "Andorra")
    BULGARIA = ("BG", "Bulgaria")

    def __init__(self, iso_code: str, display_name: str) -> None:
        self.iso_code = iso_code
        self.display_name = display_name

    @property
    def code(self) -> str:
        """Storage code of the country (its ISO code)."""
        return self.iso_code

    @classmethod
    def from_iso_code(cls, iso_code: str | None) -> "CoinCountry":
        """Look up a country by exact ISO code.

        Raises:
            UnknownEnumerationValueError: If the code is absent or unknown.
        """
        country = _BY_ISO_CODE.get(iso_code) if isinstance(iso_code, str) else None
        if country is None:
            raise UnknownEnumerationValueError("CoinCountry", iso_code)
        return country


_BY_ISO_CODE: dict[str, CoinCountry] = {country.iso_code: country for country in CoinCountry}
