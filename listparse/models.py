"""Data models for parsed shopping-list and recipe-ingredient lines."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

OTHER_CATEGORY = "Other"

# Shared categories for grocery and pantry lists ("Other" is always last)
FOOD_CATEGORIES: tuple[str, ...] = (
    "Produce",
    "Dairy",
    "Meat & Seafood",
    "Bakery",
    "Bread",
    "Frozen",
    "Refrigerated",
    "Canned Goods",
    "Pasta & Rice",
    "Snacks",
    "Beverages",
    "Condiments",
    "Sauces",
    "Spreads",
    "Spices & Seasonings",
    "Baking Supplies",
    "Oils & Cooking Sprays",
    "Breakfast",
    "Instant Meals",
    "Household",
    "Personal Care",
    OTHER_CATEGORY,
)

WISHLIST_CATEGORIES: tuple[str, ...] = (
    "Electronics",
    "Clothing",
    "Books",
    "Home & Garden",
    "Sports & Outdoors",
    "Entertainment",
    "Kitchen",
    "School Supplies",
    "Gifts",
    OTHER_CATEGORY,
)


class ListType(str, Enum):
    """Destination list for a bulk paste."""

    GROCERY = "grocery"
    PANTRY = "pantry"
    WISHLIST = "wishlist"

    @classmethod
    def coerce(cls, value: ListType | str) -> ListType:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown list type: {value!r}  "
                f"(choose from grocery / pantry / wishlist)"
            ) from None


def round_quantity(amount: float | None) -> int:
    """Round half-up to an integer quantity of at least 1."""
    if amount is None or not math.isfinite(amount):
        return 1
    return max(1, int(math.floor(amount + 0.5)))


@dataclass
class ParsedLine:
    """One ingredient line as understood by the line parser."""

    name: str
    amount: float = 1.0
    unit: str | None = None
    notes: str = ""


@dataclass
class ParsedItem:
    """A cleaned, categorized item ready to be stored as a list row."""

    name: str
    quantity: int = 1
    unit: str | None = None
    notes: str = ""
    category: str = OTHER_CATEGORY

    def to_row(self, list_type: ListType | str = ListType.GROCERY) -> dict:
        """Return the field mapping callers persist as a shopping-list row."""
        return {
            "listType": ListType.coerce(list_type).value,
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "category": self.category,
            "notes": self.notes,
            "checked": False,
            "priority": None,
            "price": None,
            "perishable": None,
        }
