"""Freeform shopping-list and recipe-ingredient ingestion."""

from .categorizer import Categorizer, categorize_item
from .compounds import split_compound
from .config import (
    CategoryConfig,
    ListParseConfig,
    LoggingConfig,
    OutputConfig,
    PipelineConfig,
    load_config,
)
from .display import format_items, group_by_category
from .merge import merge
from .models import (
    FOOD_CATEGORIES,
    OTHER_CATEGORY,
    WISHLIST_CATEGORIES,
    ListType,
    ParsedItem,
    ParsedLine,
)
from .pipeline import ListIngestPipeline, parse_bulk_text

__all__ = [
    "parse_bulk_text",
    "categorize_item",
    "ListIngestPipeline",
    "Categorizer",
    "split_compound",
    "merge",
    "group_by_category",
    "format_items",
    "ParsedItem",
    "ParsedLine",
    "ListType",
    "FOOD_CATEGORIES",
    "WISHLIST_CATEGORIES",
    "OTHER_CATEGORY",
    "ListParseConfig",
    "PipelineConfig",
    "CategoryConfig",
    "OutputConfig",
    "LoggingConfig",
    "load_config",
]
