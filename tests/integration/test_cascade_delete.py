"""Integration tests for cascading deletes down the ownership hierarchy."""

import pytest

from coincollector.domain.entities import EuroCoinCollection

pytestmark = pytest.mark.integration


@pytest.fixture
def stored_coin(coin_repo, stored_collection, make_coin):
    return coin_repo.create(make_coin(collection_id=stored_collection.id))


def test_deleting_user_removes_everything_below(
    user_repo, group_repo, collection_repo, coin_repo, alice, stored_group, stored_collection, stored_coin
):
    user_repo.delete(alice.id)

    assert group_repo.read(stored_group.id) is None
    assert collection_repo.read(stored_collection.id) is None
    assert coin_repo.read(stored_coin.id) is None
    assert coin_repo.get_all() == []


def test_deleting_group_keeps_owner(
    user_repo, group_repo, collection_repo, coin_repo, alice, stored_group, stored_collection, stored_coin
):
    group_repo.delete(stored_group.id)

    assert user_repo.read(alice.id) == alice
    assert collection_repo.get_all() == []
    assert coin_repo.get_all() == []


def test_deleting_collection_only_removes_its_coins(
    collection_repo, coin_repo, stored_collection, stored_coin, make_coin
):
    other = collection_repo.create(EuroCoinCollection(id="c2", name="Other", group_id="g1"))
    kept = coin_repo.create(make_coin(year=2002, collection_id=other.id))

    collection_repo.delete(stored_collection.id)

    assert coin_repo.read(stored_coin.id) is None
    assert coin_repo.read(kept.id) == kept
