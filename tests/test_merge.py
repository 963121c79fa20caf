"""Tests for duplicate merging."""

from listparse.merge import merge
from listparse.models import ParsedItem


def test_merge_sums_quantities():
    items = [
        ParsedItem(name="Onion", quantity=1),
        ParsedItem(name="onion", quantity=2),
        ParsedItem(name="ONION", quantity=3),
    ]
    result = merge(items)
    assert len(result) == 1
    assert result[0].quantity == 6


def test_merge_keeps_first_occurrence_fields():
    items = [
        ParsedItem(name="Milk", quantity=1, unit="l", category="Dairy"),
        ParsedItem(name="milk", quantity=1, unit="cup", category="Other"),
    ]
    result = merge(items)
    assert result[0].name == "Milk"
    assert result[0].unit == "l"
    assert result[0].category == "Dairy"


def test_merge_notes_skip_contained():
    items = [
        ParsedItem(name="Onion", notes=""),
        ParsedItem(name="Onion", notes="diced"),
        ParsedItem(name="Onion", notes="diced"),
        ParsedItem(name="Onion", notes="sliced"),
    ]
    assert merge(items)[0].notes == "diced; sliced"


def test_merge_preserves_first_seen_order():
    items = [
        ParsedItem(name="Flour"),
        ParsedItem(name="Eggs"),
        ParsedItem(name="flour"),
        ParsedItem(name="Milk"),
    ]
    assert [i.name for i in merge(items)] == ["Flour", "Eggs", "Milk"]


def test_merge_does_not_mutate_input():
    first = ParsedItem(name="Eggs", quantity=2)
    merge([first, ParsedItem(name="eggs", quantity=4)])
    assert first.quantity == 2


def test_merge_is_sum_preserving():
    items = [ParsedItem(name=n, quantity=q) for n, q in
             [("Rice", 2), ("Beans", 1), ("rice", 5), ("BEANS", 3), ("Corn", 1)]]
    totals = {i.name.lower(): i.quantity for i in merge(items)}
    assert totals == {"rice": 7, "beans": 4, "corn": 1}


def test_merge_empty():
    assert merge([]) == []
