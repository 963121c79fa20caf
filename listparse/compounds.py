"""Compound item phrases ("salt and pepper") and their canonical items."""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Callable

from .models import ParsedItem

_AND = r"\s*(?:&|\+|and|n'?)\s*"

# Ordered: the first full-string match wins. One replacement relabels the
# item, several replacements split it.
COMPOUND_RULES: tuple[tuple[re.Pattern, tuple[str, ...]], ...] = tuple(
    (re.compile(pattern, re.IGNORECASE), names)
    for pattern, names in (
        (rf"salt{_AND}(?:black\s+)?pepper", ("Salt", "Black Pepper")),
        (rf"(?:black\s+)?pepper{_AND}salt", ("Black Pepper", "Salt")),
        (
            rf"(?:onion{_AND}garlic|garlic{_AND}onion)\s+powders?",
            ("Onion and Garlic Powder",),
        ),
        (rf"mac(?:aroni)?{_AND}cheese", ("Mac and Cheese",)),
        (rf"half{_AND}half|half-and-half", ("Half and Half",)),
        (rf"sour\s+cream{_AND}onion(?:\s+chips)?", ("Sour Cream and Onion Chips",)),
        (rf"bread{_AND}butter\s+pickles?", ("Bread and Butter Pickles",)),
        (rf"cookies{_AND}cream(?:\s+ice\s+cream)?", ("Cookies and Cream Ice Cream",)),
        (rf"oil{_AND}vinegar", ("Olive Oil", "Vinegar")),
        (rf"peanut\s+butter{_AND}jelly", ("Peanut Butter", "Jelly")),
        (rf"bread{_AND}butter", ("Bread", "Butter")),
        (rf"chips{_AND}salsa", ("Tortilla Chips", "Salsa")),
        (rf"lettuce{_AND}tomato(?:es)?", ("Lettuce", "Tomatoes")),
        (rf"milk{_AND}eggs", ("Milk", "Eggs")),
        (rf"eggs{_AND}bacon", ("Eggs", "Bacon")),
        (rf"ham{_AND}cheese", ("Ham", "Cheese")),
        (rf"rice{_AND}beans", ("Rice", "Beans")),
    )
)

# Rule patterns anchored on word boundaries for searching inside longer text
_COMPOUND_SEARCH_RE = re.compile(
    r"\b(?:" + "|".join(p.pattern for p, _ in COMPOUND_RULES) + r")\b",
    re.IGNORECASE,
)


def find_compound(text: str) -> re.Match | None:
    """Return the leftmost known compound phrase in ``text``, if any."""
    if not text:
        return None
    return _COMPOUND_SEARCH_RE.search(text)


def contains_compound(text: str) -> bool:
    """Return True if a known compound phrase occurs anywhere in ``text``."""
    return find_compound(text) is not None


def match_compound(name: str) -> tuple[str, ...] | None:
    """Return the canonical names for a compound item name, if any."""
    name = name.strip()
    for pattern, names in COMPOUND_RULES:
        if pattern.fullmatch(name):
            return names
    return None


def split_compound(
    item: ParsedItem,
    categorize: Callable[[str], str] | None = None,
) -> list[ParsedItem]:
    """Expand a compound item into its canonical items.

    Args:
        item: a cleaned item, e.g. name "Salt and Pepper"
        categorize: recategorizes each emitted item when given

    Returns:
        One item per canonical name, all sharing the original quantity,
        unit and notes; ``[item]`` unchanged when no compound matches.
    """
    names = match_compound(item.name)
    if names is None:
        return [item]
    return [
        replace(
            item,
            name=name,
            category=categorize(name) if categorize else item.category,
        )
        for name in names
    ]
