"""Unit tests for the coin value, country and mint enumerations."""

import pytest

from coincollector.domain.entities import CoinCountry, CoinValue, Mint
from coincollector.domain.exceptions import UnknownEnumerationValueError


@pytest.mark.parametrize("value", list(CoinValue))
def test_coin_value_round_trip(value):
    assert CoinValue.from_cent_value(value.code) is value


@pytest.mark.parametrize("country", list(CoinCountry))
def test_coin_country_round_trip(country):
    assert CoinCountry.from_iso_code(country.code) is country


@pytest.mark.parametrize("mint", list(Mint))
def test_mint_round_trip(mint):
    assert Mint.from_mint_mark(mint.code) is mint


@pytest.mark.parametrize("cents", [None, 0, 3, 500, -100, "100", 1.0, True])
def test_coin_value_rejects_unknown_codes(cents):
    with pytest.raises(UnknownEnumerationValueError):
        CoinValue.from_cent_value(cents)


@pytest.mark.parametrize("code", [None, "", "de", "XX", " DE", "DEU"])
def test_coin_country_rejects_unknown_codes(code):
    with pytest.raises(UnknownEnumerationValueError):
        CoinCountry.from_iso_code(code)


@pytest.mark.parametrize("mark", [None, "", "a", "B", "UNKNOWN", "AD"])
def test_mint_rejects_unknown_marks(mark):
    with pytest.raises(UnknownEnumerationValueError):
        Mint.from_mint_mark(mark)


def test_enumeration_tables():
    """Test the fixed sizes and a few well-known members."""
    assert len(CoinValue) == 8
    assert len(CoinCountry) == 24
    assert len(Mint) == 5
    assert CoinValue.FIFTY_CENTS.cent_value == 50
    assert CoinValue.TWO_EUROS.display_name == "2 Euro"
    assert CoinCountry.VATICAN_CITY.iso_code == "VA"
    assert Mint.HAMBURG.mint_mark == "J"
    assert str(Mint.BERLIN) == "A"


def test_unknown_value_error_carries_details():
    with pytest.raises(UnknownEnumerationValueError) as exc_info:
        CoinCountry.from_iso_code("ZZ")

    assert exc_info.value.enumeration == "CoinCountry"
    assert exc_info.value.value == "ZZ"
