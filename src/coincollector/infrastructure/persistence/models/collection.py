"""SQLAlchemy model for the collections table."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from coincollector.infrastructure.persistence.database import Base


class CollectionModel(Base):
    """SQLAlchemy model for the collections table.

    Attributes:
        collection_id: Primary key (UUID string).
        name: Collection name, unique across all collections.
        group_id: Foreign key to groups table (cascade on delete).
    """

    __tablename__ = "collections"

    collection_id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="Collection ID (UUID)",
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        comment="Collection name",
    )
    group_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("groups.group_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Foreign key to groups table",
    )

    def __repr__(self) -> str:
        return f"<Collection(collection_id={self.collection_id}, name={self.name}, group_id={self.group_id})>"
