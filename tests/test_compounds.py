"""Tests for compound item splitting."""

from listparse.categorizer import categorize_item
from listparse.compounds import contains_compound, match_compound, split_compound
from listparse.models import ParsedItem


class TestMatchCompound:
    def test_salt_and_pepper(self):
        assert match_compound("Salt and Pepper") == ("Salt", "Black Pepper")

    def test_ampersand(self):
        assert match_compound("salt & pepper") == ("Salt", "Black Pepper")

    def test_singular_relabel(self):
        assert match_compound("mac n cheese") == ("Mac and Cheese",)
        assert match_compound("Macaroni and Cheese") == ("Mac and Cheese",)

    def test_onion_garlic_powder_collapses(self):
        assert match_compound("garlic and onion powder") == ("Onion and Garlic Powder",)

    def test_bread_and_butter_pickles_before_bread_and_butter(self):
        assert match_compound("bread and butter pickles") == ("Bread and Butter Pickles",)
        assert match_compound("bread and butter") == ("Bread", "Butter")

    def test_partial_is_not_full_match(self):
        assert match_compound("salt and pepper chips") is None

    def test_no_match(self):
        assert match_compound("Flour") is None


class TestContainsCompound:
    def test_inside_longer_text(self):
        assert contains_compound("1 tsp salt and pepper to taste") is True

    def test_word_boundary(self):
        assert contains_compound("basalt and peppers") is False

    def test_empty(self):
        assert contains_compound("") is False


class TestSplitCompound:
    def test_split_inherits_fields(self):
        item = ParsedItem(name="Salt and Pepper", quantity=2, unit="tsp", notes="to taste")
        out = split_compound(item, categorize_item)
        assert [i.name for i in out] == ["Salt", "Black Pepper"]
        assert all(i.quantity == 2 for i in out)
        assert all(i.unit == "tsp" for i in out)
        assert all(i.notes == "to taste" for i in out)
        assert all(i.category == "Spices & Seasonings" for i in out)

    def test_split_recategorizes_each(self):
        item = ParsedItem(name="Peanut Butter and Jelly", category="Dairy")
        out = split_compound(item, categorize_item)
        assert [i.name for i in out] == ["Peanut Butter", "Jelly"]
        assert out[1].category == "Breakfast"

    def test_singular_relabel(self):
        item = ParsedItem(name="Mac & Cheese", quantity=3)
        out = split_compound(item)
        assert len(out) == 1
        assert out[0].name == "Mac and Cheese"
        assert out[0].quantity == 3

    def test_no_match_returns_same_item(self):
        item = ParsedItem(name="Flour", category="Baking Supplies")
        assert split_compound(item, categorize_item) == [item]
