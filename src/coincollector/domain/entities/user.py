"""User entity."""

import uuid
from dataclasses import dataclass

from coincollector.domain.exceptions import ValidationError


@dataclass
class User:
    """A collector owning collection groups.

    Attributes:
        id: Unique identifier (UUID string).
        name: Display name (unique).
    """

    id: str
    name: str

    def __post_init__(self) -> None:
        """Validate user data after initialization."""
        if not self.id or not self.id.strip():
            raise ValidationError("User ID is required")
        if not self.name or not self.name.strip():
            raise ValidationError("User name is required")

    @classmethod
    def create(cls, name: str) -> "User":
        """Create a new user with a freshly generated id."""
        return cls(id=str(uuid.uuid4()), name=name)

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("User name is required")
        self.name = name
