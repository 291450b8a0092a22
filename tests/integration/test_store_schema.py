"""Integration tests for the SQLite schema, pragmas and initializer."""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from coincollector.core.config import Settings
from coincollector.domain.entities import User
from coincollector.domain.exceptions import StoreUnavailableError
from coincollector.infrastructure.persistence.database import DatabaseManager, init_database
from coincollector.infrastructure.persistence.repositories import UserRepository

pytestmark = pytest.mark.integration


@pytest.fixture
def file_db(tmp_path):
    """An initialized database in a file, served through the regular connection pool."""
    settings = Settings(
        _env_file=None,
        database_path=str(tmp_path / "data" / "coins.db"),
        environment="testing",
    )
    manager = init_database(DatabaseManager(settings))
    yield manager
    manager.disconnect()


def test_tables_created(db):
    assert set(db.table_names()) >= {"users", "groups", "collections", "coins"}


def test_init_database_twice_is_a_no_op(db, user_repo, alice):
    init_database(db)

    assert user_repo.read(alice.id) == alice


def test_database_file_and_directory_created(file_db, tmp_path):
    assert (tmp_path / "data" / "coins.db").exists()
    assert file_db.check_connection() is True


def test_foreign_keys_on_every_pooled_connection(file_db):
    """Test the pragma on several connections checked out at the same time."""
    connections = [file_db.engine.connect() for _ in range(3)]
    try:
        for conn in connections:
            assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1
    finally:
        for conn in connections:
            conn.close()

    assert file_db.foreign_keys_enabled() is True


def test_foreign_keys_on_memory_database(db):
    assert db.foreign_keys_enabled() is True


def test_cascade_declared_in_schema(db):
    with db.engine.connect() as conn:
        rows = conn.execute(text("PRAGMA foreign_key_list(coins)")).mappings().all()

    assert len(rows) == 1
    assert rows[0]["table"] == "collections"
    assert rows[0]["on_delete"] == "CASCADE"


def test_missing_tables_raise_store_unavailable(test_settings):
    """Test a repository against a store that was never initialized."""
    manager = DatabaseManager(test_settings)
    try:
        with pytest.raises(StoreUnavailableError) as exc_info:
            UserRepository(manager).read("u1")
        assert exc_info.value.entity == "user"
    finally:
        manager.disconnect()


def test_data_survives_reconnect(file_db, tmp_path):
    UserRepository(file_db).create(User(id="u1", name="Alice"))
    file_db.disconnect()

    assert UserRepository(file_db).read("u1").name == "Alice"


def test_unusable_database_path_raises_store_unavailable(tmp_path):
    """A directory cannot be opened as a database file."""
    settings = Settings(_env_file=None, database_path=str(tmp_path), environment="testing")
    manager = DatabaseManager(settings)
    try:
        with pytest.raises(StoreUnavailableError) as exc_info:
            init_database(manager)
        assert exc_info.value.entity == "schema"
    finally:
        manager.disconnect()


def test_table_creation_failure_raises_store_unavailable(monkeypatch, test_settings):
    def _fail(self):
        raise OperationalError("CREATE TABLE users", {}, Exception("disk I/O error"))

    monkeypatch.setattr(DatabaseManager, "create_tables", _fail)
    manager = DatabaseManager(test_settings)
    try:
        with pytest.raises(StoreUnavailableError):
            init_database(manager)
    finally:
        manager.disconnect()
