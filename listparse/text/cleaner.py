"""Item-name cleanup: preparation qualifiers, size annotations, title case."""

from __future__ import annotations

import re

from .units import UNIT_PATTERN

_EDGE_PUNCT = " \t,;:.!?-–—•*·"

_ADVERBS = (
    r"(?:(?:finely|roughly|coarsely|thinly|thickly|freshly|lightly|very|"
    r"well|firmly|loosely|gently|evenly)\s+)*"
)

# Trailing preparation phrases, checked in order on every pass
_PREP_QUALIFIERS: tuple[str, ...] = (
    "to taste",
    "for garnish",
    "for garnishing",
    "for serving",
    "for frying",
    "for greasing",
    "for dusting",
    "as needed",
    "if needed",
    "or more",
    "plus more",
    "optional",
    "divided",
    "at room temperature",
    "room temperature",
    "minced",
    "chopped",
    "diced",
    "sliced",
    "grated",
    "shredded",
    "peeled",
    "melted",
    "softened",
    "drained",
    "rinsed",
    "crushed",
    "cubed",
    "halved",
    "quartered",
    "julienned",
    "trimmed",
    "beaten",
    "sifted",
    "packed",
    "thawed",
    "cooked",
    "toasted",
    "zested",
    "juiced",
    "seeded",
    "cored",
    "deveined",
    "pitted",
    "cut into pieces",
    "cut into cubes",
    "cut into strips",
)


def _phrase(words: str) -> str:
    return r"\s+".join(re.escape(w) for w in words.split())


_PREP_PATTERNS: tuple[re.Pattern, ...] = tuple(
    re.compile(
        rf"(?:,\s*|\s+)(?P<prep>{_ADVERBS}{_phrase(q)})[\s.,;]*$",
        re.IGNORECASE,
    )
    for q in _PREP_QUALIFIERS
)

_PREP_ALTERNATION = "|".join(_phrase(q) for q in _PREP_QUALIFIERS)

# A whole fragment of qualifiers, e.g. "peeled and diced", "to taste"
_PREP_ONLY_RE = re.compile(
    rf"^(?:{_ADVERBS}(?:{_PREP_ALTERNATION})(?:\s*(?:,|and|or|&)\s*)?)+[\s.,;]*$",
    re.IGNORECASE,
)
_TRAILING_JOINER_RE = re.compile(r"(?:[\s,]+(?:and|or|&))+[\s,]*$", re.IGNORECASE)
_SIZE_RE = re.compile(
    rf"\s*\(\s*(?P<size>~?\s*\d+(?:\.\d+)?\s*(?:{UNIT_PATTERN}|inch|inches|in|cm)\.?)\s*\)\s*$",
    re.IGNORECASE,
)
_LEADING_OF_RE = re.compile(r"^(?:of\s+)+", re.IGNORECASE)
_WS_RE = re.compile(r"\s+")
_FIRST_LETTER_RE = re.compile(r"^([(\"'\[]*)([^\W\d_])")

_LOWERCASE_WORDS: frozenset[str] = frozenset(
    {"and", "or", "of", "the", "a", "an", "to", "for", "with", "in", "on"}
)


def strip_prep_qualifiers(name: str) -> tuple[str, list[str]]:
    """Strip trailing preparation phrases, returning them in reading order."""
    found: list[str] = []
    changed = True
    while changed:
        changed = False
        for pattern in _PREP_PATTERNS:
            m = pattern.search(name)
            if m and m.start() > 0:
                found.append(_WS_RE.sub(" ", m.group("prep").lower()))
                name = _TRAILING_JOINER_RE.sub("", name[: m.start()])
                changed = True
                break
    found.reverse()
    return name, found


def is_prep_qualifier(text: str) -> bool:
    """Return True for a fragment that is only preparation wording ("to taste")."""
    return bool(text) and bool(_PREP_ONLY_RE.match(text.strip()))


def strip_size_annotation(name: str) -> tuple[str, str]:
    """Split "Chicken (~2 lb)" into ("Chicken", "~2 lb")."""
    m = _SIZE_RE.search(name)
    if not m or m.start() == 0:
        return name, ""
    return name[: m.start()], _WS_RE.sub(" ", m.group("size"))


def title_case(name: str) -> str:
    """Capitalize each word except linking words after the first."""
    words = name.split()
    out: list[str] = []
    for i, word in enumerate(words):
        if i > 0 and word.lower() in _LOWERCASE_WORDS:
            out.append(word.lower())
        else:
            out.append(_FIRST_LETTER_RE.sub(
                lambda m: m.group(1) + m.group(2).upper(), word, count=1
            ))
    return " ".join(out)


def clean(name: str) -> tuple[str, str]:
    """Clean an item name.

    Args:
        name: e.g. "onion, finely chopped", "of sugar", "chicken thighs (~2 lb)"

    Returns:
        (clean_name, prep_notes). prep_notes is comma-joined and may be "".
    """
    if not name:
        return ("", "")
    name = _WS_RE.sub(" ", name).strip(_EDGE_PUNCT)

    name, prep = strip_prep_qualifiers(name)
    name, size = strip_size_annotation(name)
    if size:
        prep.append(size)
        name, more = strip_prep_qualifiers(name)
        prep[:0] = more

    name = name.strip(_EDGE_PUNCT)
    name = _LEADING_OF_RE.sub("", name).strip(_EDGE_PUNCT)
    return (title_case(name), ", ".join(prep))
