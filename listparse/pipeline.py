"""Bulk paste → structured list items."""

from __future__ import annotations

import logging

from .categorizer import DEFAULT_CATEGORIZER, WISHLIST_CATEGORIZER, Categorizer
from .compounds import split_compound
from .merge import merge
from .models import ListType, ParsedItem, round_quantity
from .text import clean, is_valid_ingredient, normalize, parse, segment

logger = logging.getLogger(__name__)


class ListIngestPipeline:
    """Turns freeform pasted text into deduplicated, categorized items.

    Stages run in order per segment: normalize → parse → clean → validate →
    categorize → split compounds (each part recategorized); the collected
    items are then merged.
    """

    def __init__(
        self,
        categorizer: Categorizer | None = None,
        split_compounds: bool = True,
        wishlist_categorizer: Categorizer | None = None,
    ) -> None:
        self._categorizer = categorizer or DEFAULT_CATEGORIZER
        self._wishlist_categorizer = wishlist_categorizer or WISHLIST_CATEGORIZER
        self._split_compounds = split_compounds

    @property
    def categorizer(self) -> Categorizer:
        return self._categorizer

    def parse_segment(
        self,
        segment_text: str,
        list_type: ListType | str = ListType.GROCERY,
    ) -> list[ParsedItem]:
        """Parse one segment into zero or more items (before merging)."""
        list_type = ListType.coerce(list_type)
        if not is_valid_ingredient(segment_text):
            return []

        parsed = parse(normalize(segment_text))
        if parsed is None:
            return []

        name, prep_notes = clean(parsed.name)
        if not is_valid_ingredient(name):
            return []

        notes = "; ".join(n for n in (parsed.notes, prep_notes) if n)
        item = ParsedItem(
            name=name,
            quantity=round_quantity(parsed.amount),
            unit=parsed.unit,
            notes=notes,
        )

        categorize = self._category_function(list_type)
        item.category = categorize(item.name)
        if self._split_compounds:
            return split_compound(item, categorize)
        return [item]

    def run(
        self,
        raw_text: str,
        list_type: ListType | str = ListType.GROCERY,
    ) -> list[ParsedItem]:
        """Run the whole pipeline over one pasted blob."""
        list_type = ListType.coerce(list_type)
        segments = segment(raw_text)

        items: list[ParsedItem] = []
        for seg in segments:
            parsed = self.parse_segment(seg, list_type)
            if not parsed:
                logger.debug("Dropped segment: %r", seg)
            items.extend(parsed)

        result = merge(items)
        logger.info(
            "Parsed %d item(s) from %d segment(s) for %s list",
            len(result),
            len(segments),
            list_type.value,
        )
        return result

    def _category_function(self, list_type: ListType):
        if list_type is ListType.WISHLIST:
            return self._wishlist_categorizer.categorize
        return self._categorizer.categorize


def parse_bulk_text(
    raw_text: str,
    destination_list_type: ListType | str = ListType.GROCERY,
) -> list[ParsedItem]:
    """Parse pasted text into items for the given destination list.

    Never raises for any text input; noise is silently dropped.

    Raises:
        ValueError: If ``destination_list_type`` is not a known list type.
    """
    return ListIngestPipeline().run(raw_text, destination_list_type)
