"""Tests for list types, quantity rounding and row output."""

import math

import pytest

from listparse.models import (
    FOOD_CATEGORIES,
    OTHER_CATEGORY,
    WISHLIST_CATEGORIES,
    ListType,
    ParsedItem,
    round_quantity,
)


class TestListType:
    def test_coerce_string(self):
        assert ListType.coerce(" Wishlist ") is ListType.WISHLIST

    def test_coerce_enum(self):
        assert ListType.coerce(ListType.PANTRY) is ListType.PANTRY

    def test_coerce_unknown(self):
        with pytest.raises(ValueError, match="Unknown list type"):
            ListType.coerce("garage")


@pytest.mark.parametrize(
    "amount,expected",
    [
        (1.0, 1),
        (1.5, 2),
        (2.5, 3),
        (2.4, 2),
        (0.25, 1),
        (0.5, 1),
        (0.0, 1),
        (-3.0, 1),
        (None, 1),
        (math.nan, 1),
        (math.inf, 1),
    ],
)
def test_round_quantity(amount, expected):
    assert round_quantity(amount) == expected


def test_other_is_last():
    assert FOOD_CATEGORIES[-1] == OTHER_CATEGORY
    assert WISHLIST_CATEGORIES[-1] == OTHER_CATEGORY


def test_to_row():
    item = ParsedItem(name="Flour", quantity=2, unit="cup", notes="sifted", category="Baking Supplies")
    assert item.to_row("pantry") == {
        "listType": "pantry",
        "name": "Flour",
        "quantity": 2,
        "unit": "cup",
        "category": "Baking Supplies",
        "notes": "sifted",
        "checked": False,
        "priority": None,
        "price": None,
        "perishable": None,
    }


def test_to_row_rejects_unknown_list_type():
    with pytest.raises(ValueError):
        ParsedItem(name="Milk").to_row("attic")
