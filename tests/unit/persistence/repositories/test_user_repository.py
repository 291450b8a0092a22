"""Unit tests for UserRepository."""

import pytest

from coincollector.domain.entities import User
from coincollector.domain.exceptions import AlreadyExistsError, NotFoundError


def test_create_and_read(user_repo):
    """Test creating a user and reading it back."""
    created = user_repo.create(User(id="u1", name="Alice"))

    assert created.id == "u1"
    assert user_repo.read("u1") == User(id="u1", name="Alice")
    assert user_repo.exists("u1") is True


def test_read_missing_returns_none(user_repo):
    assert user_repo.read("nope") is None
    assert user_repo.exists("nope") is False


def test_create_twice_fails(user_repo, alice):
    with pytest.raises(AlreadyExistsError) as exc_info:
        user_repo.create(User(id=alice.id, name="Alice again"))

    assert exc_info.value.entity == "user"
    assert exc_info.value.entity_id == alice.id


def test_create_with_taken_name_fails(user_repo, alice):
    with pytest.raises(AlreadyExistsError):
        user_repo.create(User(id="u2", name=alice.name))

    assert user_repo.read("u2") is None


def test_update_renames(user_repo, alice):
    alice.rename("Alice B.")
    user_repo.update(alice)

    assert user_repo.read(alice.id).name == "Alice B."


def test_update_missing_fails_and_changes_nothing(user_repo, alice):
    with pytest.raises(NotFoundError):
        user_repo.update(User(id="ghost", name="Ghost"))

    assert user_repo.get_all() == [alice]


def test_rename_onto_taken_name_fails(user_repo, alice):
    bob = user_repo.create(User(id="u2", name="Bob"))
    bob.rename("Alice")

    with pytest.raises(AlreadyExistsError):
        user_repo.update(bob)
    assert user_repo.read("u2").name == "Bob"


def test_delete(user_repo, alice):
    user_repo.delete(alice.id)

    assert user_repo.read(alice.id) is None
    with pytest.raises(NotFoundError):
        user_repo.delete(alice.id)


def test_get_by_name_and_get_all(user_repo, alice):
    user_repo.create(User(id="u0", name="Bob"))

    assert user_repo.get_by_name("Alice") == alice
    assert user_repo.get_by_name("Carol") is None
    assert [user.name for user in user_repo.get_all()] == ["Alice", "Bob"]
