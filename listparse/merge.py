"""Duplicate merging for parsed items."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from .models import ParsedItem


def merge(items: Iterable[ParsedItem]) -> list[ParsedItem]:
    """Merge items that share a case-insensitive name.

    Quantities are summed. Notes are appended ("; "-joined) unless already
    contained in the kept notes. Name, unit and category come from the
    first occurrence, and output keeps first-occurrence order.
    """
    merged: dict[str, ParsedItem] = {}
    for item in items:
        key = item.name.lower()
        existing = merged.get(key)
        if existing is None:
            merged[key] = replace(item)
            continue

        existing.quantity += item.quantity
        if item.notes and item.notes not in existing.notes:
            existing.notes = (
                f"{existing.notes}; {item.notes}" if existing.notes else item.notes
            )

    return list(merged.values())
