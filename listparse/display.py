"""Presentation helpers for parsed items: grouping and plain-text output."""

from __future__ import annotations

import json
from typing import Iterable

from .models import (
    FOOD_CATEGORIES,
    OTHER_CATEGORY,
    WISHLIST_CATEGORIES,
    ListType,
    ParsedItem,
)

_CATEGORY_ORDER = {
    name: i
    for i, name in enumerate(
        [*FOOD_CATEGORIES[:-1], *WISHLIST_CATEGORIES[:-1]]
    )
}


def _category_sort_key(category: str) -> tuple[int, int]:
    if category == OTHER_CATEGORY:
        return (2, 0)
    if category in _CATEGORY_ORDER:
        return (0, _CATEGORY_ORDER[category])
    return (1, 0)


def group_by_category(items: Iterable[ParsedItem]) -> dict[str, list[ParsedItem]]:
    """Group items by category, known categories first and "Other" last."""
    groups: dict[str, list[ParsedItem]] = {}
    for item in items:
        groups.setdefault(item.category, []).append(item)
    ordered = sorted(groups, key=_category_sort_key)
    return {category: groups[category] for category in ordered}


def format_item(item: ParsedItem) -> str:
    """Render one item, e.g. "2 cup Flour (sifted)"."""
    amount = f"{item.quantity} {item.unit}" if item.unit else str(item.quantity)
    line = f"{amount} {item.name}"
    if item.notes:
        line += f" ({item.notes})"
    return line


def format_items(items: Iterable[ParsedItem], group: bool = False) -> str:
    """Render items as plain text, optionally under category headings."""
    items = list(items)
    if not group:
        return "\n".join(f"- {format_item(i)}  [{i.category}]" for i in items)

    blocks: list[str] = []
    for category, members in group_by_category(items).items():
        lines = [f"{category}:"]
        lines.extend(f"  - {format_item(i)}" for i in members)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def items_to_json(
    items: Iterable[ParsedItem],
    list_type: ListType | str = ListType.GROCERY,
) -> str:
    """Serialize items as the row dicts callers persist."""
    rows = [item.to_row(list_type) for item in items]
    return json.dumps(rows, ensure_ascii=False, indent=2)
