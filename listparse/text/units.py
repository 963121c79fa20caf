"""Cooking unit spellings and number parsing for ingredient lines."""

from __future__ import annotations

import re

# Written unit spelling → normalized short form
_UNIT_SYNONYMS: dict[str, str] = {
    "tsp": "tsp",
    "tsps": "tsp",
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    "tbsp": "tbsp",
    "tbsps": "tbsp",
    "tbs": "tbsp",
    "tbl": "tbsp",
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "cup": "cup",
    "cups": "cup",
    "fl oz": "fl oz",
    "fluid ounce": "fl oz",
    "fluid ounces": "fl oz",
    "oz": "oz",
    "ounce": "oz",
    "ounces": "oz",
    "lb": "lb",
    "lbs": "lb",
    "pound": "lb",
    "pounds": "lb",
    "g": "g",
    "gr": "g",
    "gram": "g",
    "grams": "g",
    "kg": "kg",
    "kgs": "kg",
    "kilogram": "kg",
    "kilograms": "kg",
    "ml": "ml",
    "milliliter": "ml",
    "milliliters": "ml",
    "millilitre": "ml",
    "millilitres": "ml",
    "l": "l",
    "liter": "l",
    "liters": "l",
    "litre": "l",
    "litres": "l",
    "lt": "l",
    "pint": "pint",
    "pints": "pint",
    "pt": "pint",
    "pts": "pint",
    "quart": "quart",
    "quarts": "quart",
    "qt": "quart",
    "qts": "quart",
    "gallon": "gallon",
    "gallons": "gallon",
    "gal": "gallon",
    "gals": "gallon",
    "clove": "clove",
    "cloves": "clove",
    "pinch": "pinch",
    "pinches": "pinch",
    "dash": "dash",
    "dashes": "dash",
    "stick": "stick",
    "sticks": "stick",
    "can": "can",
    "cans": "can",
    "jar": "jar",
    "jars": "jar",
    "bottle": "bottle",
    "bottles": "bottle",
    "package": "pkg",
    "packages": "pkg",
    "pkg": "pkg",
    "pkgs": "pkg",
    "packet": "packet",
    "packets": "packet",
    "bag": "bag",
    "bags": "bag",
    "box": "box",
    "boxes": "box",
    "carton": "carton",
    "cartons": "carton",
    "bunch": "bunch",
    "bunches": "bunch",
    "head": "head",
    "heads": "head",
    "slice": "slice",
    "slices": "slice",
    "piece": "piece",
    "pieces": "piece",
    "sprig": "sprig",
    "sprigs": "sprig",
    "handful": "handful",
    "handfuls": "handful",
    "dozen": "dozen",
    "dozens": "dozen",
    "doz": "dozen",
    "pc": "piece",
    "pcs": "piece",
    "pack": "pkg",
    "packs": "pkg",
    "container": "container",
    "containers": "container",
    "bar": "bar",
    "bars": "bar",
    "loaf": "loaf",
    "loaves": "loaf",
    "roll": "roll",
    "rolls": "roll",
    "serving": "serving",
    "servings": "serving",
}

# Longest spelling first so "fl oz" wins over "oz" and "tbsp" over "tbs"
UNIT_PATTERN = "|".join(
    r"\s+".join(re.escape(w) for w in u.split())
    for u in sorted(_UNIT_SYNONYMS, key=len, reverse=True)
)

# A unit token: must not run into a following letter ("g" vs "garlic")
UNIT_TOKEN = rf"(?:{UNIT_PATTERN})(?![a-z])\.?"

NUMBER = r"\d+(?:\.\d+)?"

_WS_RE = re.compile(r"\s+")


def normalize_unit(raw: str | None) -> str | None:
    """Map a written unit to its short form.

    Args:
        raw: e.g. "Tablespoons", "lbs", "fl. oz"

    Returns:
        The normalized unit, or None for an empty/unknown value.
    """
    if not raw:
        return None
    key = _WS_RE.sub(" ", raw.strip().lower().replace(".", ""))
    if not key:
        return None
    if key in _UNIT_SYNONYMS:
        return _UNIT_SYNONYMS[key]
    if key.endswith("s") and key[:-1] in _UNIT_SYNONYMS:
        return _UNIT_SYNONYMS[key[:-1]]
    return None


def parse_number(s: str | None) -> float:
    """Parse a number string that may contain a simple fraction.

    Defaults to 1.0 when the text is not a usable positive number.
    """
    if not s:
        return 1.0
    s = s.strip()
    if not s:
        return 1.0

    if "/" in s:
        parts = s.split("/")
        try:
            value = float(parts[0]) / float(parts[1])
        except (ValueError, ZeroDivisionError, IndexError):
            return 1.0
    else:
        try:
            value = float(s)
        except ValueError:
            return 1.0

    if value != value or value <= 0:  # NaN or non-positive
        return 1.0
    return value


def format_number(value: float) -> str:
    """Render a float compactly ("1.5", "3", "0.333333")."""
    return f"{value:g}"
