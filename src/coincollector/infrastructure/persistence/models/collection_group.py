"""SQLAlchemy model for the groups table.

Groups are owned by a user and hold collections.
"""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from coincollector.infrastructure.persistence.database import Base


class CollectionGroupModel(Base):
    """SQLAlchemy model for the groups table.

    Attributes:
        group_id: Primary key (UUID string).
        name: Group name, unique across all groups.
        owner_id: Foreign key to users table (cascade on delete).
    """

    __tablename__ = "groups"

    group_id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="Group ID (UUID)",
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        comment="Group name",
    )
    owner_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Foreign key to users table",
    )

    def __repr__(self) -> str:
        return f"<CollectionGroup(group_id={self.group_id}, name={self.name}, owner_id={self.owner_id})>"
