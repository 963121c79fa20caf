"""Line-level text routines for pasted shopping lists and recipes."""

from .cleaner import clean, title_case
from .normalizer import normalize
from .parser import parse
from .segmenter import segment
from .units import normalize_unit, parse_number
from .validator import is_valid_ingredient

__all__ = [
    "segment",
    "normalize",
    "parse",
    "is_valid_ingredient",
    "clean",
    "title_case",
    "normalize_unit",
    "parse_number",
]
