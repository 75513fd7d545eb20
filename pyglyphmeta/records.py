# records.py
"""
Glyph and Unicode records decoded from a glyph metadata report.

Main public pieces:

    - UnicodeData(name, category, encoding)
        One Unicode annotation of a glyph. Its identity is the code point
        alone: two instances with the same ``encoding`` are equal, hash alike
        and sort together, whatever their name/category text says.

    - GlyphRef(name, unicode)
        A glyph name plus the (possibly empty) tuple of its UnicodeData.
        Equality is structural; ordering puts encoded glyphs first, by the
        code point of their first encoding, then unencoded glyphs by name.

The identity and ordering rules live in two plain functions,
encoding_key() and glyph_sort_key(), which the comparison methods delegate
to, so they can be used (and tested) on their own, e.g. as a ``key=``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Tuple, Union

MAX_CODEPOINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)

_HEX_TOKEN = re.compile(r"[0-9A-Fa-f]+")


# ---------------------------------------------------------------------------
# Code point helpers
# ---------------------------------------------------------------------------

def is_scalar_value(cp: int) -> bool:
    """True if cp is a Unicode scalar value (any code point but a surrogate)."""
    return 0 <= cp <= MAX_CODEPOINT and cp not in SURROGATES


def format_codepoint(cp: Union[int, str]) -> str:
    """Render a code point as U+XXXX (at least 4 upper-case hex digits)."""
    if isinstance(cp, str):
        cp = ord(cp)
    return f"U+{cp:04X}"


def parse_codepoint(token: str) -> str:
    """
    Parse a bare hexadecimal token ("0041", "1f600") into its character.

    Only hex digits are accepted: no "0x" prefix, sign, underscores or
    surrounding whitespace. Raises ValueError for anything that is not
    base-16 or not a scalar value.
    """
    if not _HEX_TOKEN.fullmatch(token):
        raise ValueError(f"{token!r} not base 16 int?")
    cp = int(token, 16)
    if not is_scalar_value(cp):
        raise ValueError(f"{token!r} not representable as a Unicode scalar value?")
    return chr(cp)


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

def encoding_key(ud: "UnicodeData") -> int:
    """Identity of a UnicodeData: its code point, nothing else."""
    return ord(ud.encoding)


@total_ordering
@dataclass(frozen=True, eq=False)
class UnicodeData:
    """Name, general category and code point of one glyph encoding."""
    name: str
    category: str
    encoding: str

    def __post_init__(self):
        if not isinstance(self.encoding, str) or len(self.encoding) != 1:
            raise ValueError(f"encoding must be a single character, got {self.encoding!r}")
        if not is_scalar_value(ord(self.encoding)):
            raise ValueError(f"{format_codepoint(self.encoding)} is not a Unicode scalar value")

    @property
    def codepoint(self) -> int:
        return ord(self.encoding)

    def __eq__(self, other):
        if not isinstance(other, UnicodeData):
            return NotImplemented
        return encoding_key(self) == encoding_key(other)

    def __lt__(self, other):
        if not isinstance(other, UnicodeData):
            return NotImplemented
        return encoding_key(self) < encoding_key(other)

    def __hash__(self):
        return hash(encoding_key(self))

    def __str__(self):
        return format_codepoint(self.encoding)


def glyph_sort_key(glyph: "GlyphRef") -> Tuple[int, Union[int, str]]:
    """
    Sort key for glyphs: encoded glyphs first, by the code point of their
    first encoding; unencoded glyphs after them, by name.
    """
    if glyph.unicode:
        return (0, encoding_key(glyph.unicode[0]))
    return (1, glyph.name)


@dataclass(frozen=True)
class GlyphRef:
    """A glyph name and the Unicode encodings it carries, in report order."""
    name: str
    unicode: Tuple[UnicodeData, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # lists in, tuple stored
        if not isinstance(self.unicode, tuple):
            object.__setattr__(self, "unicode", tuple(self.unicode))

    @property
    def encodings(self) -> Tuple[int, ...]:
        return tuple(ud.codepoint for ud in self.unicode)

    @property
    def is_encoded(self) -> bool:
        return len(self.unicode) > 0

    def __lt__(self, other):
        if not isinstance(other, GlyphRef):
            return NotImplemented
        return glyph_sort_key(self) < glyph_sort_key(other)

    def __le__(self, other):
        if not isinstance(other, GlyphRef):
            return NotImplemented
        return glyph_sort_key(self) <= glyph_sort_key(other)

    def __gt__(self, other):
        if not isinstance(other, GlyphRef):
            return NotImplemented
        return glyph_sort_key(self) > glyph_sort_key(other)

    def __ge__(self, other):
        if not isinstance(other, GlyphRef):
            return NotImplemented
        return glyph_sort_key(self) >= glyph_sort_key(other)

    def __str__(self):
        return self.name
