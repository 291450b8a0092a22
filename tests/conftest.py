"""Pytest configuration for all tests."""

from collections.abc import Callable, Generator

import pytest
import structlog

from coincollector.application.services import (
    CollectionStorageService,
    GroupStorageService,
)
from coincollector.core.config import MEMORY_DATABASE, Settings
from coincollector.domain.entities import (
    CoinCountry,
    CoinValue,
    EuroCoin,
    EuroCoinBuilder,
    EuroCoinCollection,
    EuroCoinCollectionGroup,
    Mint,
    User,
)
from coincollector.infrastructure.persistence.database import DatabaseManager, init_database
from coincollector.infrastructure.persistence.repositories import (
    CoinRepository,
    CollectionRepository,
    GroupRepository,
    UserRepository,
)


@pytest.fixture(autouse=True)
def _reset_structlog() -> Generator[None, None, None]:
    """Drop any logging configuration a test (e.g. a CLI run) installed."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def test_settings() -> Settings:
    """Settings for an in-memory store, ignoring any local .env file."""
    return Settings(
        _env_file=None,
        database_path=MEMORY_DATABASE,
        environment="testing",
        log_format="console",
    )


@pytest.fixture
def db(test_settings: Settings) -> Generator[DatabaseManager, None, None]:
    """Create an initialized in-memory database.

    The StaticPool keeps one connection alive, so every session sees the
    same database for the duration of the test.
    """
    manager = init_database(DatabaseManager(test_settings))
    yield manager
    manager.disconnect()


@pytest.fixture
def user_repo(db: DatabaseManager) -> UserRepository:
    return UserRepository(db)


@pytest.fixture
def group_repo(db: DatabaseManager) -> GroupRepository:
    return GroupRepository(db)


@pytest.fixture
def collection_repo(db: DatabaseManager) -> CollectionRepository:
    return CollectionRepository(db)


@pytest.fixture
def coin_repo(db: DatabaseManager) -> CoinRepository:
    return CoinRepository(db)


@pytest.fixture
def collection_service(db: DatabaseManager) -> CollectionStorageService:
    return CollectionStorageService(db)


@pytest.fixture
def group_service(db: DatabaseManager) -> GroupStorageService:
    return GroupStorageService(db)


@pytest.fixture
def make_coin() -> Callable[..., EuroCoin]:
    """Return a factory building coins with sensible defaults."""

    def _make(
        year: int = 2024,
        value: CoinValue = CoinValue.ONE_EURO,
        country: CoinCountry = CoinCountry.GERMANY,
        mint: Mint | None = Mint.BERLIN,
        description: str | None = None,
        collection_id: str | None = None,
    ) -> EuroCoin:
        return (
            EuroCoinBuilder()
            .set_year(year)
            .set_value(value)
            .set_mint_country(country)
            .set_mint(mint)
            .set_description(description)
            .set_collection_id(collection_id)
            .build()
        )

    return _make


@pytest.fixture
def alice(user_repo: UserRepository) -> User:
    """A stored user."""
    return user_repo.create(User(id="u1", name="Alice"))


@pytest.fixture
def stored_group(alice: User, group_repo: GroupRepository) -> EuroCoinCollectionGroup:
    """A stored, empty group owned by Alice."""
    return group_repo.create(EuroCoinCollectionGroup(id="g1", name="Euro Coins", owner_id=alice.id))


@pytest.fixture
def stored_collection(
    stored_group: EuroCoinCollectionGroup, collection_repo: CollectionRepository
) -> EuroCoinCollection:
    """A stored, empty collection in the stored group."""
    return collection_repo.create(
        EuroCoinCollection(id="c1", name="2024 Starter Set", group_id=stored_group.id)
    )
