"""Ingredient line parsing: quantity, unit and item name.

Rules are tried in a fixed order and the first match wins. The more
specific shapes ("each" lists, dual measurements, parenthetical
conversions) come before the general unit/quantity rules, which would
otherwise swallow them.
"""

from __future__ import annotations

import re
from typing import Callable

from ..models import ParsedLine
from .cleaner import title_case
from .units import NUMBER, UNIT_TOKEN, format_number, normalize_unit, parse_number
from .validator import is_valid_ingredient

_I = re.IGNORECASE

_EACH_RE = re.compile(
    rf"^(?P<qty>{NUMBER})\s*(?P<unit>{UNIT_TOKEN})\s+each\s+(?:of\s+)?(?P<items>.+)$",
    _I,
)
_DUAL_RE = re.compile(
    rf"^(?P<qty>{NUMBER})\s*(?P<unit>{UNIT_TOKEN})\s*/\s*"
    rf"(?P<qty2>{NUMBER})\s*(?P<unit2>{UNIT_TOKEN})\s+(?P<rest>.+)$",
    _I,
)
_PAREN_CONVERSION_RE = re.compile(
    rf"^(?P<qty>{NUMBER})\s*(?P<unit>{UNIT_TOKEN})\s*"
    rf"\(\s*~?\s*{NUMBER}\s*{UNIT_TOKEN}\s*\)\s*(?P<rest>.+)$",
    _I,
)
_SIZE_THEN_UNIT_RE = re.compile(
    rf"^(?P<qty>{NUMBER})\s*\(\s*(?P<size>~?\s*{NUMBER}\s*{UNIT_TOKEN})\s*\)\s*"
    rf"(?P<unit>{UNIT_TOKEN})\s+(?P<rest>.+)$",
    _I,
)
_UNIT_PREFIXED_RE = re.compile(
    rf"^(?P<qty>{NUMBER})\s*(?P<unit>{UNIT_TOKEN})(?:\s+(?P<rest>.*))?$",
    _I,
)
_QUANTITY_ONLY_RE = re.compile(
    rf"^(?P<qty>{NUMBER})\s*(?:[x×]\s+)?(?P<rest>[^\d\s.].*)$",
    _I,
)

_EACH_SPLIT_RE = re.compile(r"\s*,\s*(?:(?:and|&)\s+)?|\s+(?:and|&)\s+", _I)
_PAREN_RE = re.compile(r"\(([^()]*)\)")
_MEASUREMENT_PAREN_RE = re.compile(rf"~?\s*{NUMBER}\s*{UNIT_TOKEN}", _I)
_NOTE_INDICATOR_RE = re.compile(
    r"\b(?:notes?|optional|i use|i used|about|approx(?:imately)?|or more|"
    r"or less|such as|brand|like|see|preferably|if desired|homemade|"
    r"store[- ]bought|recommended|substitute)\b",
    _I,
)
_WS_RE = re.compile(r"\s+")


def _measure(qty: str, unit: str) -> str:
    return f"{format_number(parse_number(qty))} {normalize_unit(unit) or unit.strip()}"


def _parse_each(line: str) -> ParsedLine | None:
    m = _EACH_RE.match(line)
    if not m:
        return None
    parts = [p.strip(" .;") for p in _EACH_SPLIT_RE.split(m.group("items"))]
    names = [title_case(p) for p in parts if p]
    if not names:
        return None
    return ParsedLine(
        name=", ".join(names),
        amount=parse_number(m.group("qty")),
        unit=normalize_unit(m.group("unit")),
        notes=f"{_measure(m.group('qty'), m.group('unit'))} each",
    )


def _parse_dual(line: str) -> ParsedLine | None:
    m = _DUAL_RE.match(line)
    if not m:
        return None
    return ParsedLine(
        name=m.group("rest"),
        amount=parse_number(m.group("qty")),
        unit=normalize_unit(m.group("unit")),
        notes=_measure(m.group("qty2"), m.group("unit2")),
    )


def _parse_paren_conversion(line: str) -> ParsedLine | None:
    m = _PAREN_CONVERSION_RE.match(line)
    if not m:
        return None
    # The parenthetical restates the same amount; it is dropped.
    return ParsedLine(
        name=m.group("rest"),
        amount=parse_number(m.group("qty")),
        unit=normalize_unit(m.group("unit")),
    )


def _parse_unit_prefixed(line: str) -> ParsedLine | None:
    m = _SIZE_THEN_UNIT_RE.match(line)
    if m:
        return ParsedLine(
            name=m.group("rest"),
            amount=parse_number(m.group("qty")),
            unit=normalize_unit(m.group("unit")),
            notes=_WS_RE.sub(" ", m.group("size")),
        )
    m = _UNIT_PREFIXED_RE.match(line)
    # "2 rolls" names the item itself; leave it to the quantity-only rule
    if not m or not m.group("rest"):
        return None
    return ParsedLine(
        name=m.group("rest"),
        amount=parse_number(m.group("qty")),
        unit=normalize_unit(m.group("unit")),
    )


def _parse_quantity_only(line: str) -> ParsedLine | None:
    m = _QUANTITY_ONLY_RE.match(line)
    if not m:
        return None
    return ParsedLine(name=m.group("rest"), amount=parse_number(m.group("qty")))


def _parse_bare(line: str) -> ParsedLine | None:
    return ParsedLine(name=line)


# Ordered: first rule returning a line wins
LINE_RULES: tuple[tuple[str, Callable[[str], ParsedLine | None]], ...] = (
    ("each", _parse_each),
    ("dual_measurement", _parse_dual),
    ("paren_conversion", _parse_paren_conversion),
    ("unit_prefixed", _parse_unit_prefixed),
    ("quantity_only", _parse_quantity_only),
    ("bare", _parse_bare),
)


def extract_paren_notes(name: str) -> tuple[str, list[str]]:
    """Move note-like parentheticals out of the name.

    Parentheticals that are plain measurements ("(14 oz)") stay put.
    """
    notes: list[str] = []

    def _extract(m: re.Match) -> str:
        content = m.group(1).strip()
        if _MEASUREMENT_PAREN_RE.fullmatch(content):
            return m.group(0)
        if _NOTE_INDICATOR_RE.search(content):
            notes.append(_WS_RE.sub(" ", content))
            return " "
        return m.group(0)

    name = _PAREN_RE.sub(_extract, name)
    return _WS_RE.sub(" ", name).strip(), notes


def parse(line: str) -> ParsedLine | None:
    """Parse a normalized ingredient line.

    Args:
        line: output of ``normalize``, e.g. "1.5 cups flour"

    Returns:
        ParsedLine with the raw (uncleaned) item name, or None when the line
        is noise or leaves no name.
    """
    if not is_valid_ingredient(line):
        return None

    for _, rule in LINE_RULES:
        parsed = rule(line)
        if parsed is not None:
            break
    else:
        return None

    name, paren_notes = extract_paren_notes(parsed.name)
    if not name:
        return None
    notes = [n for n in [parsed.notes, *paren_notes] if n]
    parsed.name = name
    parsed.notes = "; ".join(notes)
    return parsed
