"""
Map ASCII letters to their styled look-alikes under a catalog rule.
"""

from __future__ import annotations

from typing import Optional

from .catalog import Rule, Style, rule_for
from .errors import GlyphTableError

MAX_CODE_POINT = 0x10FFFF
SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF


def letter_offset(ch: str) -> Optional[int]:
    """Index of ch in A-Z followed by a-z, or None for anything else."""
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A")
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 26
    return None


def scalar_to_char(code_point: int) -> str:
    # chr() accepts surrogates, which are not scalar values
    if not 0 <= code_point <= MAX_CODE_POINT or SURROGATE_MIN <= code_point <= SURROGATE_MAX:
        raise GlyphTableError(f"computed code point {code_point:#x} is not a Unicode scalar value")
    return chr(code_point)


def map_char(rule: Rule, ch: str) -> str:
    offset = letter_offset(ch)
    if offset is None:
        return ch
    override = rule.exceptions.get(ch)
    if override is not None:
        return scalar_to_char(override)
    return scalar_to_char(rule.base + offset)


def convert(rule: Rule, text: str) -> str:
    """
    Convert every ASCII letter in text using rule; everything else is copied.

    The result always has the same number of code points as the input.
    """
    return "".join(map_char(rule, ch) for ch in text)


def stylize(style: Style, text: str) -> str:
    return convert(rule_for(style), text)
