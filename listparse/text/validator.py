"""Noise filter for pasted recipe and shopping-list text."""

from __future__ import annotations

import re

from .cleaner import is_prep_qualifier

# Section headers that show up between ingredient lines (matched exactly,
# optionally followed by "s" and/or ":")
_SECTION_HEADERS: frozenset[str] = frozenset({
    "ingredient",
    "instruction",
    "direction",
    "method",
    "step",
    "preparation",
    "equipment",
    "nutrition",
    "note",
    "tip",
    "for the",
    "assembly",
    "to assemble",
    "to serve",
    "serve",
    "serving",
    "yield",
    "makes",
    "prep time",
    "cook time",
    "total time",
    "shopping list",
    "grocery list",
    "you will need",
    "what you need",
})

# Cooking-instruction verbs that start instruction lines, not ingredients
_INSTRUCTION_VERBS = (
    "preheat", "bake", "mix", "whisk", "season", "serve", "stir", "combine",
    "heat", "cook", "add", "place", "pour", "bring", "simmer", "boil",
    "remove", "transfer", "let", "cover", "reduce", "spread", "fold",
    "beat", "blend", "cut", "saute", "sauté", "fry", "grill",
    "drain", "sprinkle", "garnish", "grease", "line", "refrigerate",
    "chill", "marinate", "toss", "arrange", "divide", "knead", "repeat",
    "enjoy", "allow", "meanwhile", "once", "until", "when",
    "using", "in a", "in the", "set aside", "turn", "melt", "whip",
)

# "Stir fry mix" is an ingredient; "stir fry the onions" is not
_INSTRUCTION_RE = re.compile(
    r"^(?!stir[\s-]*fry\b(?!\s+(?:the|for|until|over|in|on|with)\b))"
    r"(?:" + "|".join(re.escape(v) for v in _INSTRUCTION_VERBS) + r")\b",
    re.IGNORECASE,
)
_NUMERIC_RE = re.compile(r"^[\d\s.,/x×%~+\-–—]+$")
_PUNCT_ONLY_RE = re.compile(r"^[\W_]+$")
_NOTE_RE = re.compile(r"^notes?\s*\d*\s*:?$", re.IGNORECASE)
_HEADER_TRAILER_RE = re.compile(r"s?\s*:?$")
_HEADER_PREFIX_RE = re.compile(
    r"^(?:serves|servings?|yields?|makes|prep time|cook time|total time)\b"
)


def is_section_header(text: str) -> bool:
    """Return True for headers like "Ingredients:" or "For the sauce:"."""
    lowered = text.strip().lower()
    if lowered.endswith(":"):
        return True
    if lowered in _SECTION_HEADERS or _HEADER_PREFIX_RE.match(lowered):
        return True
    return _HEADER_TRAILER_RE.sub("", lowered, count=1) in _SECTION_HEADERS


def is_instruction(text: str) -> bool:
    """Return True when the text opens with a cooking-instruction verb."""
    return bool(_INSTRUCTION_RE.match(text.strip()))


def is_valid_ingredient(text: str) -> bool:
    """Decide whether a fragment can plausibly name an ingredient.

    Rejects short fragments, numbers, punctuation, parenthetical split
    artifacts, note markers, section headers, instruction lines and bare
    preparation wording left over from comma splitting ("to taste").
    """
    if not text:
        return False
    text = text.strip()
    if len(text) < 2:
        return False
    if _NUMERIC_RE.match(text) or _PUNCT_ONLY_RE.match(text):
        return False
    if text.startswith(")") or text.endswith("("):
        return False
    if _NOTE_RE.match(text):
        return False
    if is_section_header(text):
        return False
    if is_instruction(text):
        return False
    if is_prep_qualifier(text):
        return False
    return True
