"""Split pasted text into candidate item lines."""

from __future__ import annotations

import re

from ..compounds import find_compound
from .cleaner import is_prep_qualifier
from .normalizer import normalize
from .validator import is_instruction

_NEWLINE_RE = re.compile(r"\r\n|\r|\n")
_AND_RE = re.compile(r"\s+and\s+", re.IGNORECASE)
_EACH_LINE_RE = re.compile(r"^\s*\d[\d.\s]*\S*\s+[a-z.]*\s*each\b", re.IGNORECASE)
_QUANTIFIED_PIECE_RE = re.compile(r"^\d+(?:[./]\d+)?\s*[^\d\s,.]")


def _clean_pieces(pieces: list[str]) -> list[str]:
    return [p.strip() for p in pieces if p and p.strip()]


def _split_and(piece: str) -> list[str]:
    """Split on " and ", keeping known compounds ("salt and pepper") whole."""
    m = find_compound(piece)
    if m is None:
        return _AND_RE.split(piece)
    return [
        *_AND_RE.split(piece[: m.start()]),
        m.group(0),
        *_split_and(piece[m.end():]),
    ]


def _attach_prep(pieces: list[str]) -> list[str]:
    """Glue bare qualifiers ("minced", "to taste") back onto the item before them."""
    out: list[str] = []
    for piece in pieces:
        if out and is_prep_qualifier(piece):
            out[-1] = f"{out[-1]}, {piece}"
        else:
            out.append(piece)
    return out


def _split_inline(line: str) -> list[str]:
    """Split an inline list on commas, then on " and "."""
    out: list[str] = []
    for piece in line.split(","):
        out.extend(_split_and(piece))
    return _attach_prep(_clean_pieces(out))


def _all_pieces_quantified(head: str) -> bool:
    pieces = _clean_pieces(head.split(","))
    return len(pieces) > 1 and all(
        _QUANTIFIED_PIECE_RE.match(normalize(p)) for p in pieces
    )


def _may_split_commas(head: str) -> bool:
    """Comma guard shared by both modes; ``head`` is the normalized line."""
    if _EACH_LINE_RE.match(head) or is_instruction(head):
        return False
    if _all_pieces_quantified(head):
        return True
    # Numeric lists like "2, 14oz cans" must not fragment
    return not head[:1].isdigit()


def _is_inline_list(line: str) -> bool:
    head = normalize(line)
    if not _may_split_commas(head):
        return False
    if _all_pieces_quantified(head):
        return True
    commas = line.count(",")
    return commas >= 2 or (commas == 1 and " and " in line)


def segment(raw_text: str) -> list[str]:
    """Split raw pasted text into candidate item segments.

    Multi-line text is split per line and only list-like lines are split
    further. Single-line text is split on commas, else semicolons, else
    " and ", else kept whole. Lines opening with a quantity are only
    comma-split when every piece carries its own quantity.

    Args:
        raw_text: e.g. "2 cups flour\\n1 tsp salt, 1 tsp pepper"

    Returns:
        Non-blank segments in input order.
    """
    if not raw_text or not raw_text.strip():
        return []

    if _NEWLINE_RE.search(raw_text):
        segments: list[str] = []
        for line in _NEWLINE_RE.split(raw_text):
            line = line.strip()
            if not line:
                continue
            if _is_inline_list(line):
                segments.extend(_split_inline(line))
            else:
                segments.append(line)
        return segments

    text = raw_text.strip()
    head = normalize(text)
    if _EACH_LINE_RE.match(head):
        return [text]
    if "," in text:
        return _split_inline(text) if _may_split_commas(head) else [text]
    if ";" in text:
        return _attach_prep(_clean_pieces(text.split(";")))
    if _AND_RE.search(text):
        return _clean_pieces(_split_and(text))
    return [text]
