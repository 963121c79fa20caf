"""Tests for item-name cleanup."""

from listparse.text.cleaner import (
    clean,
    is_prep_qualifier,
    strip_prep_qualifiers,
    strip_size_annotation,
    title_case,
)


class TestStripPrepQualifiers:
    def test_single(self):
        assert strip_prep_qualifiers("garlic, minced") == ("garlic", ["minced"])

    def test_with_adverb(self):
        name, prep = strip_prep_qualifiers("onion, finely chopped")
        assert name == "onion"
        assert prep == ["finely chopped"]

    def test_multiple_in_reading_order(self):
        name, prep = strip_prep_qualifiers("potatoes, peeled and diced")
        assert name == "potatoes"
        assert prep == ["peeled", "diced"]

    def test_to_taste(self):
        assert strip_prep_qualifiers("salt to taste") == ("salt", ["to taste"])

    def test_leading_qualifier_kept(self):
        assert strip_prep_qualifiers("diced tomatoes") == ("diced tomatoes", [])

    def test_lowercases_qualifier(self):
        assert strip_prep_qualifiers("Parsley, For Garnish") == ("Parsley", ["for garnish"])

    def test_never_strips_everything(self):
        assert strip_prep_qualifiers("chopped") == ("chopped", [])


class TestStripSizeAnnotation:
    def test_approximate(self):
        assert strip_size_annotation("chicken thighs (~2 lb)") == ("chicken thighs", "~2 lb")

    def test_plain_measurement(self):
        assert strip_size_annotation("tomatoes (14 oz)") == ("tomatoes", "14 oz")

    def test_no_annotation(self):
        assert strip_size_annotation("cheese (cheddar)") == ("cheese (cheddar)", "")


class TestTitleCase:
    def test_simple(self):
        assert title_case("flour") == "Flour"

    def test_linking_words(self):
        assert title_case("mac and cheese") == "Mac and Cheese"
        assert title_case("cream of mushroom soup") == "Cream of Mushroom Soup"

    def test_first_word_always_capitalized(self):
        assert title_case("the best bread") == "The Best Bread"

    def test_acronym_kept(self):
        assert title_case("BBQ sauce") == "BBQ Sauce"

    def test_parenthesis(self):
        assert title_case("cheese (cheddar)") == "Cheese (Cheddar)"


class TestClean:
    def test_diced(self):
        assert clean("onion, diced") == ("Onion", "diced")

    def test_leading_of(self):
        assert clean("of sugar") == ("Sugar", "")

    def test_punctuation_trimmed(self):
        assert clean(" - flour,  ") == ("Flour", "")

    def test_size_and_prep(self):
        assert clean("chicken, diced (~2 lb)") == ("Chicken", "diced, ~2 lb")

    def test_multiple(self):
        assert clean("carrots, peeled and sliced") == ("Carrots", "peeled, sliced")

    def test_empty(self):
        assert clean("") == ("", "")


class TestIsPrepQualifier:
    def test_qualifiers(self):
        assert is_prep_qualifier("to taste")
        assert is_prep_qualifier(" finely chopped ")
        assert is_prep_qualifier("peeled and diced")
        assert is_prep_qualifier("Drained, rinsed.")

    def test_ingredients(self):
        assert not is_prep_qualifier("garlic")
        assert not is_prep_qualifier("diced tomatoes")
        assert not is_prep_qualifier("")
