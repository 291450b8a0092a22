"""Unit tests for GroupRepository."""

import pytest

from coincollector.domain.entities import EuroCoinCollectionGroup, User
from coincollector.domain.exceptions import (
    AlreadyExistsError,
    NotFoundError,
    ParentNotFoundError,
)


def test_create_group(group_repo, alice):
    """Test creating a group."""
    group_repo.create(EuroCoinCollectionGroup(id="g1", name="Euro Coins", owner_id=alice.id))

    loaded = group_repo.read("g1")
    assert loaded.name == "Euro Coins"
    assert loaded.owner_id == alice.id
    assert loaded.collections == ()


def test_create_group_twice(group_repo, stored_group):
    with pytest.raises(AlreadyExistsError):
        group_repo.create(
            EuroCoinCollectionGroup(id=stored_group.id, name="Other", owner_id="u1")
        )


def test_create_group_for_missing_owner(group_repo):
    with pytest.raises(ParentNotFoundError) as exc_info:
        group_repo.create(EuroCoinCollectionGroup(id="g1", name="Euro Coins", owner_id="ghost"))

    assert exc_info.value.parent_id == "ghost"
    assert group_repo.exists("g1") is False


def test_get_by_id_missing(group_repo):
    assert group_repo.read("nope") is None


def test_update_group(group_repo, stored_group):
    stored_group.rename("Euro Coins 2")
    group_repo.update(stored_group)

    assert group_repo.read(stored_group.id).name == "Euro Coins 2"


def test_update_missing_group(group_repo, alice):
    with pytest.raises(NotFoundError):
        group_repo.update(EuroCoinCollectionGroup(id="ghost", name="Ghost", owner_id=alice.id))

    assert group_repo.get_all_groups_by_owner(alice.id) == []


def test_groups_by_owner(group_repo, user_repo, alice, stored_group):
    bob = user_repo.create(User(id="u2", name="Bob"))
    group_repo.create(EuroCoinCollectionGroup(id="g0", name="Commemoratives", owner_id=alice.id))
    group_repo.create(EuroCoinCollectionGroup(id="g2", name="Bob's", owner_id=bob.id))

    names = [group.name for group in group_repo.get_all_groups_by_owner(alice.id)]
    assert names == ["Commemoratives", "Euro Coins"]
    assert group_repo.get_all_groups_by_owner("ghost") == []


def test_delete_group(group_repo, stored_group):
    group_repo.delete(stored_group.id)

    assert group_repo.exists(stored_group.id) is False
    with pytest.raises(NotFoundError):
        group_repo.delete(stored_group.id)
