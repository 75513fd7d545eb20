from pyglyphmeta import GlyphRef, UnicodeData

HEADER = ("glifname", "uniname", "codepoints", "unicat")


def make_glyph_report(rows, header=HEADER, newline="\n") -> str:
    """
    Factory helper for mocking MFEKmetadata's glyphs report.

    rows are sequences of already formatted field values, in header order.
    """
    lines = ["\t".join(header)]
    lines.extend("\t".join(row) for row in rows)
    return newline.join(lines) + newline


def ud(encoding: str, name: str = "", category: str = "Lu") -> UnicodeData:
    return UnicodeData(name=name, category=category, encoding=encoding)


def glyph(name: str, *encodings: str) -> GlyphRef:
    return GlyphRef(name, tuple(ud(e, name=f"NAME OF {name}") for e in encodings))
