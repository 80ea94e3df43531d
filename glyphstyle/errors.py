"""
Exceptions raised by glyphstyle.
"""

from __future__ import annotations

from typing import Sequence


class GlyphStyleError(Exception):
    pass


class UnrecognizedStyle(GlyphStyleError, ValueError):
    """The token does not name one of the known styles."""

    def __init__(self, token: str, accepted: Sequence[str]) -> None:
        self.token = token
        self.accepted = tuple(accepted)
        super().__init__(f"unrecognized style {token!r}; {usage_hint(self.accepted)}")


class GlyphTableError(GlyphStyleError, RuntimeError):
    """A catalog entry produced a code point that is not a usable character."""


class ConfigError(GlyphStyleError):
    pass


def usage_hint(tokens: Sequence[str]) -> str:
    return "expected one of " + ", ".join(f'"{t}"' for t in tokens)
