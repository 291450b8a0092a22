"""German mints identified by their mint mark letters."""

from enum import Enum

from coincollector.domain.exceptions import UnknownEnumerationValueError


class Mint(Enum):
    BERLIN = "A"
    MUNICH = "D"
    STUTTGART = "F"
    KARLSRUHE = "G"
    HAMBURG = "J"

    @property
    def mint_mark(self) -> str:
        return self.value

    @property
    def code(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_mint_mark(cls, mint_mark: str | None) -> "Mint":
        """Look up a mint by exact mint mark.

        Raises:
            UnknownEnumerationValueError: If the mark is absent or unknown.
        """
        mint = _BY_MINT_MARK.get(mint_mark) if isinstance(mint_mark, str) else None
        if mint is None:
            raise UnknownEnumerationValueError("Mint", mint_mark)
        return mint


_BY_MINT_MARK: dict[str, Mint] = {mint.value: mint for mint in Mint}
