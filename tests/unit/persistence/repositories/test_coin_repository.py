"""Unit tests for CoinRepository."""

import pytest
from sqlalchemy import text

from coincollector.domain.entities import CoinValue
from coincollector.domain.exceptions import (
    AlreadyExistsError,
    CorruptRowError,
    NotFoundError,
    ParentNotFoundError,
    ValidationError,
)


def test_create_and_read(coin_repo, stored_collection, make_coin):
    coin = make_coin(collection_id=stored_collection.id)
    coin_repo.create(coin)

    loaded = coin_repo.read(coin.id)
    assert loaded == coin
    assert loaded.description.text == coin.description.text
    assert loaded.collection_id == stored_collection.id
    assert loaded.mint is coin.mint


def test_read_missing(coin_repo):
    assert coin_repo.read("DE_100_2024_A_NOTHING") is None


def test_create_requires_collection(coin_repo, make_coin):
    with pytest.raises(ValidationError):
        coin_repo.create(make_coin())


def test_create_twice(coin_repo, stored_collection, make_coin):
    coin = make_coin(collection_id=stored_collection.id)
    coin_repo.create(coin)

    with pytest.raises(AlreadyExistsError):
        coin_repo.create(coin)


def test_create_in_missing_collection(coin_repo, stored_collection, make_coin):
    with pytest.raises(ParentNotFoundError):
        coin_repo.create(make_coin(collection_id="ghost"))

    assert coin_repo.get_all() == []


def test_update_description_only(coin_repo, stored_collection, make_coin):
    coin = coin_repo.create(make_coin(collection_id=stored_collection.id))
    coin.description.set_text("Federal eagle")
    coin_repo.update(coin)

    loaded = coin_repo.read(coin.id)
    assert loaded.id == coin.id
    assert loaded.description.text == "Federal eagle"


def test_update_missing(coin_repo, stored_collection, make_coin):
    with pytest.raises(NotFoundError):
        coin_repo.update(make_coin(collection_id=stored_collection.id))

    assert coin_repo.get_all() == []


def test_delete(coin_repo, stored_collection, make_coin):
    coin = coin_repo.create(make_coin(collection_id=stored_collection.id))
    coin_repo.delete(coin.id)

    assert coin_repo.exists(coin.id) is False
    with pytest.raises(NotFoundError):
        coin_repo.delete(coin.id)


def test_list_by_collection_in_insertion_order(coin_repo, stored_collection, make_coin):
    values = [CoinValue.TWO_EUROS, CoinValue.ONE_CENT, CoinValue.FIFTY_CENTS]
    for value in values:
        coin_repo.create(make_coin(value=value, collection_id=stored_collection.id))

    coins = coin_repo.get_all_by_collection(stored_collection.id)
    assert [coin.value for coin in coins] == values
    assert coin_repo.get_ids_by_collection(stored_collection.id) == {c.id for c in coins}
    assert coin_repo.get_all_by_collection("ghost") == []


def test_corrupt_row_raises(db, coin_repo, stored_collection):
    with db.transaction() as session:
        session.execute(
            text(
                "INSERT INTO coins (coin_id, year, coin_value, mint_country, mint, "
                "description, collection_id) VALUES "
                "('XX_100_2024_A_BAD', 2024, 100, 'XX', 'A', 'Bad', :collection_id)"
            ),
            {"collection_id": stored_collection.id},
        )

    with pytest.raises(CorruptRowError) as exc_info:
        coin_repo.read("XX_100_2024_A_BAD")

    assert exc_info.value.entity_id == "XX_100_2024_A_BAD"


@pytest.mark.parametrize("description", ["", "  "])
def test_blank_description_round_trips(coin_repo, stored_collection, make_coin, description):
    """A coin built with a blank description reads back with the synthesized one."""
    coin = coin_repo.create(make_coin(description=description, collection_id=stored_collection.id))

    loaded = coin_repo.read(coin.id)
    assert loaded.description == coin.description
    assert loaded.description.text.startswith("1 Euro coin from Germany")
