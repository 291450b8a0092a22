"""SQLAlchemy model for the users table.

Users are the root of the ownership hierarchy. Deleting a user cascades to
its groups, their collections and their coins.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from coincollector.infrastructure.persistence.database import Base


class UserModel(Base):
    """SQLAlchemy model for the users table.

    Attributes:
        user_id: Primary key (UUID string).
        name: Display name, unique across all users.
    """

    __tablename__ = "users"

    user_id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        comment="User ID (UUID)",
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        comment="Display name",
    )

    def __repr__(self) -> str:
        return f"<User(user_id={self.user_id}, name={self.name})>"
