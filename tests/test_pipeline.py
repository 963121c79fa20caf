"""Tests for the full bulk-paste pipeline."""

import pytest

from listparse import Categorizer, ListIngestPipeline, parse_bulk_text
from listparse.models import OTHER_CATEGORY

RECIPE = """\
Ingredients:
• 2 cups all-purpose flour
• 1 tsp salt
• 3 large eggs, beaten
• 1 (14 oz) can diced tomatoes
Instructions:
1. Preheat oven to 350°F.
2. Mix flour and salt.
"""


def _summary(items):
    return [(i.name, i.quantity, i.unit, i.category) for i in items]


class TestParseBulkText:
    def test_mixed_paste(self):
        items = parse_bulk_text("2 cups flour\n1 tsp salt, 1 tsp pepper\nPreheat oven to 350")
        assert _summary(items) == [
            ("Flour", 2, "cup", "Baking Supplies"),
            ("Salt", 1, "tsp", "Spices & Seasonings"),
            ("Pepper", 1, "tsp", "Spices & Seasonings"),
        ]

    def test_duplicates_merged(self):
        items = parse_bulk_text("1 onion\n1 onion, diced")
        assert len(items) == 1
        assert items[0].name == "Onion"
        assert items[0].quantity == 2
        assert items[0].notes == "diced"
        assert items[0].category == "Produce"

    def test_case_insensitive_merge(self):
        items = parse_bulk_text("Milk\nmilk\nMILK")
        assert [(i.name, i.quantity) for i in items] == [("Milk", 3)]

    def test_compound_split(self):
        items = parse_bulk_text("salt and pepper")
        assert [i.name for i in items] == ["Salt", "Black Pepper"]
        assert {i.category for i in items} == {"Spices & Seasonings"}

    def test_mixed_fraction(self):
        items = parse_bulk_text("1 ½ cups flour")
        assert _summary(items) == [("Flour", 2, "cup", "Baking Supplies")]

    def test_range_takes_upper_bound(self):
        items = parse_bulk_text("2-3 onions")
        assert [(i.name, i.quantity) for i in items] == [("Onions", 3)]

    def test_recipe_blob(self):
        items = parse_bulk_text(RECIPE)
        assert [i.name for i in items] == [
            "All-purpose Flour",
            "Salt",
            "Large Eggs",
            "Diced Tomatoes",
        ]
        eggs = items[2]
        assert eggs.quantity == 3
        assert eggs.notes == "beaten"
        assert eggs.category == "Dairy"
        tomatoes = items[3]
        assert tomatoes.unit == "can"
        assert tomatoes.notes == "14 oz"

    def test_single_line_commas(self):
        items = parse_bulk_text("milk, eggs, bread")
        assert [i.name for i in items] == ["Milk", "Eggs", "Bread"]

    def test_wishlist_categories(self):
        items = parse_bulk_text("headphones\nlaptop\njeans\nmilk", "wishlist")
        assert [(i.name, i.category) for i in items] == [
            ("Headphones", "Electronics"),
            ("Laptop", "Electronics"),
            ("Jeans", "Clothing"),
            ("Milk", OTHER_CATEGORY),
        ]

    def test_pantry_categorizes(self):
        items = parse_bulk_text("milk", "pantry")
        assert items[0].category == "Dairy"

    def test_unknown_list_type(self):
        with pytest.raises(ValueError, match="Unknown list type"):
            parse_bulk_text("milk", "garage")

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "\n\n", ")", "(((", "½", "Ingredients:\nInstructions:", "42\n3.5\n- -"],
    )
    def test_noise_only(self, text):
        assert parse_bulk_text(text) == []

    @pytest.mark.parametrize(
        "text",
        ["1/0 cups flour", "0 eggs", "(14 oz)", "• • •\n1.\n2)", "1 tsp each", "a\u0000b"],
    )
    def test_never_raises(self, text):
        assert isinstance(parse_bulk_text(text), list)

    def test_quantities_at_least_one(self):
        items = parse_bulk_text("0.25 cup sugar\n0 eggs\n½ lemon")
        assert items
        assert all(i.quantity >= 1 for i in items)


class TestListIngestPipeline:
    def test_compounds_disabled(self):
        pipeline = ListIngestPipeline(split_compounds=False)
        items = pipeline.run("salt and pepper")
        assert [(i.name, i.category) for i in items] == [
            ("Salt and Pepper", "Spices & Seasonings"),
        ]

    def test_custom_categorizer(self):
        pipeline = ListIngestPipeline(
            categorizer=Categorizer().with_keywords({"Bakery": ["croissant"]})
        )
        assert pipeline.run("2 croissant")[0].category == "Bakery"

    def test_parse_segment_noise(self):
        assert ListIngestPipeline().parse_segment("Instructions:") == []

    def test_parse_segment_unmerged(self):
        items = ListIngestPipeline().parse_segment("2 tbsp olive oil, divided")
        assert _summary(items) == [("Olive Oil", 2, "tbsp", "Condiments")]
        assert items[0].notes == "divided"


class TestSingleLineRecipes:
    def test_prep_words_stay_with_item(self):
        items = parse_bulk_text("2 cans tomatoes, drained, rinsed")
        assert [(i.name, i.quantity, i.unit, i.notes) for i in items] == [
            ("Tomatoes", 2, "can", "drained, rinsed"),
        ]

    def test_range_with_prep(self):
        items = parse_bulk_text("3–4 cloves garlic, minced")
        assert [(i.name, i.quantity, i.unit, i.notes) for i in items] == [
            ("Garlic", 4, "clove", "minced"),
        ]

    def test_to_taste_is_a_note(self):
        items = parse_bulk_text("Salt, to taste")
        assert [(i.name, i.notes, i.category) for i in items] == [
            ("Salt", "to taste", "Spices & Seasonings"),
        ]

    def test_numeric_list_kept_whole(self):
        assert len(parse_bulk_text("2, 14oz cans")) == 1

    def test_fraction_each_line(self):
        items = parse_bulk_text("½ tsp each salt, pepper, and paprika\nflour")
        assert [(i.name, i.unit, i.notes) for i in items] == [
            ("Salt, Pepper, Paprika", "tsp", "0.5 tsp each"),
            ("Flour", None, ""),
        ]

    def test_compound_among_other_items(self):
        items = parse_bulk_text("milk and eggs and bread")
        assert [(i.name, i.category) for i in items] == [
            ("Milk", "Dairy"),
            ("Eggs", "Dairy"),
            ("Bread", "Bread"),
        ]

    def test_compound_then_more_items(self):
        items = parse_bulk_text("salt and pepper and garlic")
        assert [i.name for i in items] == ["Salt", "Black Pepper", "Garlic"]

    def test_short_units(self):
        items = parse_bulk_text("1 gal milk\n2 qt cream\n1 doz eggs\n2 pcs chicken")
        assert [(i.name, i.unit) for i in items] == [
            ("Milk", "gallon"),
            ("Cream", "quart"),
            ("Eggs", "dozen"),
            ("Chicken", "piece"),
        ]

    def test_stir_fry_mix_kept(self):
        items = parse_bulk_text("1 bag stir fry mix\nStir fry the onions")
        assert [(i.name, i.unit, i.category) for i in items] == [
            ("Stir Fry Mix", "bag", "Produce"),
        ]
