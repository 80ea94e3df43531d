"""
Style catalog: the 13 styles, their short tokens and the code point rules
behind them.

Each rule gives the code point an uppercase ``A`` maps to; the other letters
follow in ``A-Z`` then ``a-z`` order. Some styles have holes in the
Mathematical Alphanumeric Symbols block because the glyph was already encoded
in Letterlike Symbols (U+2100..U+214F). Those letters are listed in the
rule's ``exceptions`` table.
"""

from __future__ import annotations

import enum
import logging
import unicodedata
from types import MappingProxyType
from typing import Dict, List, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import GlyphTableError, UnrecognizedStyle

logger = logging.getLogger(__name__)

class Style(enum.Enum):
    BOLD = "b"
    ITALIC = "i"
    BOLD_ITALIC = "bi"
    SCRIPT = "sc"
    BOLD_SCRIPT = "bs"
    FRAKTUR = "f"
    DOUBLE_STRUCK = "d"
    BOLD_FRAKTUR = "bf"
    SANS_SERIF = "ss"
    SANS_SERIF_BOLD = "ssb"
    SANS_SERIF_ITALIC = "ssi"
    SANS_SERIF_BOLD_ITALIC = "ssbi"
    MONOSPACE = "m"

    @property
    def token(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").lower()


class Rule(BaseModel):
    model_config = ConfigDict(frozen=True)

    base: int = Field(description="Code point of the styled uppercase A")
    exceptions: Mapping[str, int] = Field(
        default_factory=lambda: MappingProxyType({}),
        description="Letters whose glyph lives outside base + offset",
    )

    @field_validator("exceptions", mode="after")
    @classmethod
    def _read_only(cls, value: Mapping[str, int]) -> Mapping[str, int]:
        return MappingProxyType(dict(value))


STYLE_TOKENS = tuple(style.token for style in Style)

_RULES: Dict[Style, Rule] = {
    Style.BOLD: Rule(base=0x1D400),
    Style.ITALIC: Rule(base=0x1D434, exceptions={"h": 0x210E}),
    Style.BOLD_ITALIC: Rule(base=0x1D468),
    Style.SCRIPT: Rule(
        base=0x1D49C,
        exceptions={
            "B": 0x212C,
            "E": 0x2130,
            "F": 0x2131,
            "H": 0x210B,
            "I": 0x2110,
            "L": 0x2112,
            "M": 0x2133,
            "R": 0x211B,
            "e": 0x212F,
            "g": 0x210A,
            "o": 0x2134,
        },
    ),
    Style.BOLD_SCRIPT: Rule(base=0x1D4D0),
    Style.FRAKTUR: Rule(
        base=0x1D504,
        exceptions={
            "C": 0x212D,
            "H": 0x210C,
            "I": 0x2111,
            "R": 0x211C,
            "Z": 0x2128,
        },
    ),
    Style.DOUBLE_STRUCK: Rule(
        base=0x1D538,
        exceptions={
            "C": 0x2102,
            "H": 0x210D,
            "N": 0x2115,
            "P": 0x2119,
            "Q": 0x211A,
            "R": 0x211D,
            "Z": 0x2124,
        },
    ),
    Style.BOLD_FRAKTUR: Rule(base=0x1D56C),
    Style.SANS_SERIF: Rule(base=0x1D5A0),
    Style.SANS_SERIF_BOLD: Rule(base=0x1D5D4),
    Style.SANS_SERIF_ITALIC: Rule(base=0x1D608),
    Style.SANS_SERIF_BOLD_ITALIC: Rule(base=0x1D63C),
    Style.MONOSPACE: Rule(base=0x1D670),
}


def resolve(token: str) -> Style:
    """Exact, case-sensitive lookup of a style token."""
    try:
        return Style(token)
    except ValueError:
        raise UnrecognizedStyle(token, STYLE_TOKENS) from None


def rule_for(style: Style) -> Rule:
    return _RULES[style]


def alphabet() -> str:
    return "".join(chr(ord("A") + i) for i in range(26)) + "".join(chr(ord("a") + i) for i in range(26))


def emitted_code_points(rule: Rule) -> Dict[str, int]:
    """
    Return letter -> code point for all 52 letters under the given rule.
    """
    result: Dict[str, int] = {}
    for offset, letter in enumerate(alphabet()):
        result[letter] = rule.exceptions.get(letter, rule.base + offset)
    return result


def validate_rule(style: Style, rule: Rule) -> None:
    """
    Check that every code point the rule can emit is an assigned character.

    Raises GlyphTableError naming the first bad entry.
    """
    letters = set(alphabet())
    for letter in rule.exceptions:
        if letter not in letters:
            raise GlyphTableError(f"{style.label}: exception key {letter!r} is not an ASCII letter")
    for letter, code_point in emitted_code_points(rule).items():
        if not 0 <= code_point <= 0x10FFFF or 0xD800 <= code_point <= 0xDFFF:
            raise GlyphTableError(f"{style.label}: {letter!r} maps to invalid scalar value {code_point:#x}")
        if unicodedata.name(chr(code_point), None) is None:
            raise GlyphTableError(f"{style.label}: {letter!r} maps to unassigned code point U+{code_point:04X}")


def validate_catalog() -> List[Style]:
    checked: List[Style] = []
    for style in Style:
        validate_rule(style, rule_for(style))
        checked.append(style)
    logger.debug("Validated %s style rules", len(checked))
    return checked
