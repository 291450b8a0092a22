"""SQLAlchemy model for the coins table.

The coin id is derived from the coin's content, so it is a free-form text
column rather than a UUID.
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from coincollector.infrastructure.persistence.database import Base


class CoinModel(Base):
    """SQLAlchemy model for the coins table.

    Attributes:
        coin_id: Primary key (content-derived id).
        year: Minting year.
        coin_value: Face value in cents.
        mint_country: ISO 3166-1 alpha-2 code of the issuing country.
        mint: Mint mark, NULL when unknown.
        description: Description text.
        collection_id: Foreign key to collections table (cascade on delete).
    """

    __tablename__ = "coins"

    coin_id: Mapped[str] = mapped_column(
        Text,
        primary_key=True,
        comment="Content-derived coin ID",
    )
    year: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )
    coin_value: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Face value in cents",
    )
    mint_country: Mapped[str] = mapped_column(
        String(2),
        nullable=False,
        comment="ISO 3166-1 alpha-2 country code",
    )
    mint: Mapped[str | None] = mapped_column(
        String(16),
        nullable=True,
        comment="Mint mark",
    )
    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    collection_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("collections.collection_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Foreign key to collections table",
    )

    def __repr__(self) -> str:
        return f"<Coin(coin_id={self.coin_id}, collection_id={self.collection_id})>"
