from .errors import (
    GlyphMetaError,
    MalformedRecordError,
    MetadataToolError,
    ReportEncodingError,
    SchemaError,
)
from .records import (
    GlyphRef,
    UnicodeData,
    encoding_key,
    format_codepoint,
    glyph_sort_key,
    parse_codepoint,
)
from .tsv_decoder import REQUIRED_COLUMNS, build_header_map, decode, parse_tsv, read_tsv
from .reduction import find_duplicate_encodings, sorted_codepoints, to_unique_codepoints
from .metadata_tool import find_metadata_tool, for_ufo, run_metadata_tool

__all__ = [
    "GlyphMetaError",
    "MalformedRecordError",
    "MetadataToolError",
    "ReportEncodingError",
    "SchemaError",
    "GlyphRef",
    "UnicodeData",
    "encoding_key",
    "format_codepoint",
    "glyph_sort_key",
    "parse_codepoint",
    "REQUIRED_COLUMNS",
    "build_header_map",
    "decode",
    "parse_tsv",
    "read_tsv",
    "find_duplicate_encodings",
    "sorted_codepoints",
    "to_unique_codepoints",
    "find_metadata_tool",
    "for_ufo",
    "run_metadata_tool",
]
