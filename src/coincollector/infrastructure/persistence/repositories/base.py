"""Transaction scoping and error translation shared by the repositories."""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from coincollector.core.logging import get_logger
from coincollector.domain.exceptions import (
    AlreadyExistsError,
    ParentNotFoundError,
    StoreUnavailableError,
    ValidationError,
)
from coincollector.infrastructure.persistence.database import DatabaseManager

logger = get_logger(__name__)


@contextmanager
def session_scope(
    db: DatabaseManager,
    entity: str,
    entity_id: str | None,
    session: Session | None = None,
    parent_id: str | None = None,
) -> Iterator[Session]:
    """Yield the caller's session, or a new one inside its own transaction.

    SQLAlchemy errors raised in the block (or while committing) are translated
    into repository errors carrying ``entity`` and ``entity_id``.
    """
    try:
        if session is not None:
            yield session
        else:
            with db.transaction() as own_session:
                yield own_session
    except IntegrityError as e:
        # Lost a race against a concurrent writer between check and insert
        message = str(e.orig).upper()
        logger.warning(
            "Integrity constraint violated",
            entity=entity,
            entity_id=entity_id,
            error=str(e.orig),
        )
        if "FOREIGN KEY" in message:
            raise ParentNotFoundError(entity, entity_id, parent_id) from e
        if "UNIQUE CONSTRAINT FAILED" in message:
            raise AlreadyExistsError(entity, entity_id, str(e.orig)) from e
        # NOT NULL and CHECK failures: the row itself was malformed
        raise ValidationError(f"Invalid {entity} {entity_id}: {e.orig}") from e
    except SQLAlchemyError as e:
        logger.error(
            "Database operation failed",
            entity=entity,
            entity_id=entity_id,
            error=str(e),
        )
        raise StoreUnavailableError(entity, entity_id, str(e)) from e


class SqlRepository:
    """Base class for the SQLite repositories.

    Every public repository method accepts an optional ``session``. Without
    one, the method opens its own session, runs inside a single transaction
    and commits or rolls back before returning. With one, the caller owns
    the transaction and the repository never commits, rolls back or closes.
    """

    entity: str = "entity"

    def __init__(self, db: DatabaseManager) -> None:
        """Initialize the repository.

        Args:
            db: Database manager providing sessions from the connection pool.
        """
        self.db = db

    def _scope(
        self,
        entity_id: str | None,
        session: Session | None = None,
        parent_id: str | None = None,
    ):
        return session_scope(self.db, self.entity, entity_id, session, parent_id)
