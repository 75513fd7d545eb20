# tsv_decoder.py
"""
Decode the tab-separated glyph report of a UFO into GlyphRef records.

The report has a header row followed by one row per glyph. Columns are found
by name, so their order does not matter and unknown columns are ignored:

    glifname    glyph name, taken verbatim
    uniname     comma-separated Unicode character names
    codepoints  comma-separated hex code points, no "0x" prefix
    unicat      comma-separated Unicode general categories

The three list columns are zipped position by position into UnicodeData
records. Empty code point entries are dropped before zipping, and zipping
stops at the shortest list (pass strict=True to reject such rows instead).

Decoding is all-or-nothing: the first bad row raises and nothing is returned.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Sequence, Union

from .errors import MalformedRecordError, ReportEncodingError, SchemaError
from .records import GlyphRef, UnicodeData, parse_codepoint

REQUIRED_COLUMNS = ("glifname", "uniname", "codepoints", "unicat")

DELIMITER = "\t"
LIST_SEPARATOR = ","

HeaderMap = Mapping[str, int]


def build_header_map(header: Sequence[str]) -> HeaderMap:
    """
    Build the read-only column name -> index lookup for a header row.

    Raises SchemaError naming every required column that is absent.
    """
    index = {}
    for i, column in enumerate(header):
        index.setdefault(column, i)

    missing = [c for c in REQUIRED_COLUMNS if c not in index]
    if missing:
        raise SchemaError(missing)
    return MappingProxyType(index)


def _split_list(value: str) -> List[str]:
    return value.split(LIST_SEPARATOR)


def glyph_from_record(
    header_map: HeaderMap,
    record: Sequence[str],
    line_number: int,
    strict: bool = False,
) -> GlyphRef:
    """Build one GlyphRef from an already split data row."""
    name = record[header_map["glifname"]]
    uninames = _split_list(record[header_map["uniname"]])
    unicats = _split_list(record[header_map["unicat"]])

    encodings = []
    for token in _split_list(record[header_map["codepoints"]]):
        token = token.strip()
        if not token:
            continue
        try:
            encodings.append(parse_codepoint(token))
        except ValueError as e:
            raise MalformedRecordError(line_number, record, str(e)) from e

    if strict:
        # an empty column is an empty list here, not [""]
        nb_names = 0 if uninames == [""] else len(uninames)
        nb_cats = 0 if unicats == [""] else len(unicats)
        if not nb_names == len(encodings) == nb_cats:
            raise MalformedRecordError(
                line_number,
                record,
                f"misaligned lists: {nb_names} uniname, "
                f"{len(encodings)} codepoints, {nb_cats} unicat",
            )

    unicode = tuple(
        UnicodeData(name=uniname, category=unicat, encoding=encoding)
        for uniname, encoding, unicat in zip(uninames, encodings, unicats)
    )
    return GlyphRef(name, unicode)


def parse_tsv(tsv_data: str, strict: bool = False) -> List[GlyphRef]:
    """
    Decode a glyph report into GlyphRef records, in row order.

    Raises:
        SchemaError: the input is empty or its header lacks a required column.
        MalformedRecordError: a row has the wrong number of fields, or a code
            point is not hex or not a Unicode scalar value (or, when strict,
            the list columns of a row have different lengths), or the csv
            reader rejects the row.
    """
    reader = csv.reader(
        io.StringIO(tsv_data, newline=""),
        delimiter=DELIMITER,
        quoting=csv.QUOTE_NONE,
    )

    try:
        header = next(reader)
    except StopIteration:
        raise SchemaError(REQUIRED_COLUMNS, "Empty glyph report: no header row") from None
    except csv.Error as e:
        raise MalformedRecordError(reader.line_num, (), str(e)) from e

    header_map = build_header_map(header)
    width = len(header)

    glyphs: List[GlyphRef] = []
    try:
        for record in reader:
            if not record:
                # blank line
                continue
            if len(record) != width:
                raise MalformedRecordError(
                    reader.line_num,
                    record,
                    f"expected {width} fields, found {len(record)}",
                )
            glyphs.append(glyph_from_record(header_map, record, reader.line_num, strict=strict))
    except csv.Error as e:
        # e.g. a field over csv.field_size_limit()
        raise MalformedRecordError(reader.line_num, (), str(e)) from e
    return glyphs


decode = parse_tsv


def read_tsv(path: Union[str, Path], strict: bool = False) -> List[GlyphRef]:
    """Decode a glyph report previously saved to a UTF-8 file."""
    path = Path(path)
    try:
        with path.open("r", newline="", encoding="utf-8") as f:
            tsv_data = f.read()
    except UnicodeDecodeError as e:
        raise ReportEncodingError(path, e) from e
    return parse_tsv(tsv_data, strict=strict)
