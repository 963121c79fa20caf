"""Line normalization: list markers, Unicode fractions, mixed fractions, ranges."""

from __future__ import annotations

import re

from .units import format_number

_VULGAR_FRACTIONS: dict[str, float] = {
    "½": 1 / 2,
    "¼": 1 / 4,
    "¾": 3 / 4,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "⅛": 1 / 8,
    "⅜": 3 / 8,
    "⅝": 5 / 8,
    "⅞": 7 / 8,
    "⅕": 1 / 5,
    "⅖": 2 / 5,
    "⅗": 3 / 5,
    "⅘": 4 / 5,
    "⅙": 1 / 6,
    "⅚": 5 / 6,
}

_BULLET_RE = re.compile(r"^(?:[-–—•*·◦▪▫‣⁃○●□■☐☑☒✓✔✗✘>]+\s*)+")
_NUMBERED_RE = re.compile(r"^\d{1,3}[.)]\s+")
_LETTERED_RE = re.compile(r"^[A-Za-z][.)]\s+")

_VULGAR_RE = re.compile(
    r"(?:(\d+)\s*-?\s*)?([" + "".join(_VULGAR_FRACTIONS) + r"])"
)
_MIXED_RE = re.compile(r"(?<![\d./])(\d+)\s+(\d+)/(\d+)(?![\d/])")
_LEADING_FRACTION_RE = re.compile(r"^(\d+)/(\d+)(?![\d/])")
_RANGE_RE = re.compile(r"^(\d+(?:\.\d+)?)\s*[-–—]\s*(\d+(?:\.\d+)?)")
_WS_RE = re.compile(r"\s+")


def strip_list_marker(line: str) -> str:
    """Remove a leading bullet, "1." / "1)" or "a." / "a)" marker."""
    line = _BULLET_RE.sub("", line.strip())
    line = _NUMBERED_RE.sub("", line)
    line = _LETTERED_RE.sub("", line)
    return line


def expand_fractions(line: str) -> str:
    """Turn vulgar, mixed and leading bare fractions into decimals."""
    line = line.replace("⁄", "/")

    def _vulgar(m: re.Match) -> str:
        whole = float(m.group(1)) if m.group(1) else 0.0
        return format_number(whole + _VULGAR_FRACTIONS[m.group(2)])

    line = _VULGAR_RE.sub(_vulgar, line)

    def _mixed(m: re.Match) -> str:
        denominator = float(m.group(3))
        if denominator == 0:
            return m.group(0)
        return format_number(float(m.group(1)) + float(m.group(2)) / denominator)

    line = _MIXED_RE.sub(_mixed, line)

    def _leading(m: re.Match) -> str:
        denominator = float(m.group(2))
        if denominator == 0:
            return m.group(0)
        return format_number(float(m.group(1)) / denominator)

    return _LEADING_FRACTION_RE.sub(_leading, line)


def collapse_range(line: str) -> str:
    """Replace a leading "a-b" range with its higher bound."""

    def _higher(m: re.Match) -> str:
        return format_number(max(float(m.group(1)), float(m.group(2))))

    return _RANGE_RE.sub(_higher, line, count=1)


def normalize(line: str) -> str:
    """Normalize one candidate item line.

    Args:
        line: e.g. "• 1 ½ cups flour", "2) 2-3 onions"

    Returns:
        e.g. "1.5 cups flour", "3 onions". Empty string for blank input.
    """
    if not line:
        return ""
    line = _WS_RE.sub(" ", line).strip()
    line = strip_list_marker(line)
    line = expand_fractions(line)
    line = collapse_range(line)
    return _WS_RE.sub(" ", line).strip()
