"""Exceptions raised by the CoinCollector domain and persistence layers."""


class CoinCollectorError(Exception):
    """Base class for all CoinCollector errors."""

    pass


class ValidationError(CoinCollectorError):
    """Raised when input has the wrong shape, or the store rejects a malformed row."""

    pass


class UnknownEnumerationValueError(ValidationError):
    """Raised when a code has no matching enumeration member."""

    def __init__(self, enumeration: str, value: object) -> None:
        self.enumeration = enumeration
        self.value = value
        super().__init__(f"Unknown {enumeration} code: {value!r}")


class InvalidDescriptionInputError(ValidationError):
    """Raised when a coin description cannot be synthesized."""

    pass


class MissingRequiredFieldError(ValidationError):
    """Raised when a builder is asked to build without a required field."""

    def __init__(self, field_name: str, message: str | None = None) -> None:
        self.field_name = field_name
        super().__init__(message or f"{field_name} is required")


class RepositoryError(CoinCollectorError):
    """Base class for store-related errors.

    Attributes:
        entity: Entity type the operation was working on (e.g. "coin").
        entity_id: Identifier of the affected entity, if known.
    """

    def __init__(self, entity: str, entity_id: str | None, message: str | None = None) -> None:
        self.entity = entity
        self.entity_id = entity_id
        detail = f"{entity} id={entity_id}"
        super().__init__(f"{message}: {detail}" if message else detail)


class NotFoundError(RepositoryError):
    """Raised when no row exists for the given id."""

    def __init__(self, entity: str, entity_id: str | None) -> None:
        super().__init__(entity, entity_id, "Not found")


class AlreadyExistsError(RepositoryError):
    """Raised when a create or rename violates a uniqueness constraint."""

    def __init__(self, entity: str, entity_id: str | None, message: str | None = None) -> None:
        super().__init__(entity, entity_id, message or "Already exists")


class ParentNotFoundError(RepositoryError):
    """Raised when the parent referenced by a new row does not exist."""

    def __init__(self, entity: str, entity_id: str | None, parent_id: str | None = None) -> None:
        self.parent_id = parent_id
        super().__init__(entity, entity_id, f"Parent {parent_id!r} not found")


class CorruptRowError(RepositoryError):
    """Raised when a persisted row fails domain validation on read."""

    def __init__(self, entity: str, entity_id: str | None, reason: str) -> None:
        self.reason = reason
        super().__init__(entity, entity_id, f"Corrupt row ({reason})")


class StorageConsistencyError(RepositoryError):
    """Raised when a write affected an unexpected number of rows."""

    def __init__(self, entity: str, entity_id: str | None, rows_affected: int) -> None:
        self.rows_affected = rows_affected
        super().__init__(
            entity, entity_id, f"Write affected {rows_affected} rows, expected exactly 1"
        )


class StoreUnavailableError(RepositoryError):
    """Raised when the database engine fails to connect or run a transaction."""

    pass
