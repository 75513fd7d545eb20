# reduction.py
"""
Fold decoded glyphs into the set of distinct code points they encode.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Set

from .records import GlyphRef, UnicodeData, encoding_key, format_codepoint

logger = logging.getLogger(__name__)


def to_unique_codepoints(glyphs: Iterable[GlyphRef]) -> Set[UnicodeData]:
    """
    Return the distinct UnicodeData across all glyphs.

    Identity is the code point only. The first UnicodeData seen for a code
    point (by glyph order, then position in the glyph) is the one kept; each
    later occurrence is dropped and logged as a warning. Never raises.
    """
    unique_encodings: Set[UnicodeData] = set()
    for glyph in glyphs:
        for ud in glyph.unicode:
            if ud in unique_encodings:
                hex_cp = format_codepoint(ud.encoding)[2:]
                logger.warning(
                    f"Two glyphs with identical encoding in font: U+{hex_cp}! "
                    f"Try `grep -R {hex_cp}` on glyphs dir."
                )
                continue
            unique_encodings.add(ud)
    return unique_encodings


def find_duplicate_encodings(glyphs: Iterable[GlyphRef]) -> Dict[int, List[str]]:
    """
    Map every code point claimed more than once to the glyph names claiming
    it, in encounter order. A glyph listing the same code point twice appears
    twice.
    """
    claims: Dict[int, List[str]] = {}
    for glyph in glyphs:
        for ud in glyph.unicode:
            claims.setdefault(encoding_key(ud), []).append(glyph.name)
    return {cp: names for cp, names in claims.items() if len(names) > 1}


def sorted_codepoints(unique: Iterable[UnicodeData]) -> List[UnicodeData]:
    """The given UnicodeData in ascending code point order."""
    return sorted(unique, key=encoding_key)
