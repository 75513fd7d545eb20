#!/usr/bin/env python3
# cli.py
"""
List the code points (or glyphs) of a UFO from its glyph metadata report.

Usage:
    pyglyphmeta path/to/Font.ufo                 # run MFEKmetadata, list code points
    pyglyphmeta --tsv glyphs.tsv                 # decode a saved report instead
    pyglyphmeta path/to/Font.ufo --glyphs -o glyphs.csv

Output is CSV. Duplicate encodings are reported as warnings and do not change
the exit status.
"""

from __future__ import annotations

import argparse
import csv
import logging
import sys
from typing import List, TextIO

from fontTools.misc.loggingTools import Timer, configLogger

from .errors import GlyphMetaError
from .metadata_tool import run_metadata_tool
from .records import GlyphRef, format_codepoint
from .reduction import find_duplicate_encodings, sorted_codepoints, to_unique_codepoints
from .tsv_decoder import parse_tsv, read_tsv

logger = logging.getLogger("pyglyphmeta")

# shared by every main() call; Logger.addHandler ignores a handler it already has
log_handler = logging.StreamHandler()


def load_glyphs(args) -> List[GlyphRef]:
    if args.tsv:
        with Timer(logger, f"decoded {args.source}"):
            return read_tsv(args.source, strict=args.strict)
    tsv_data = run_metadata_tool(args.source, tool=args.tool)
    with Timer(logger, f"decoded glyph report of {args.source}"):
        return parse_tsv(tsv_data, strict=args.strict)


def write_codepoints(glyphs: List[GlyphRef], out: TextIO) -> None:
    writer = csv.writer(out)
    writer.writerow(["codepoint", "name", "category"])
    for ud in sorted_codepoints(to_unique_codepoints(glyphs)):
        writer.writerow([format_codepoint(ud.encoding), ud.name, ud.category])


def write_glyphs(glyphs: List[GlyphRef], out: TextIO) -> None:
    writer = csv.writer(out)
    writer.writerow(["glyph_name", "codepoints"])
    for glyph in sorted(glyphs):
        writer.writerow(
            [glyph.name, " ".join(format_codepoint(cp) for cp in glyph.encodings)]
        )


def report_duplicates(glyphs: List[GlyphRef]) -> int:
    duplicates = find_duplicate_encodings(glyphs)
    for cp in sorted(duplicates):
        claims = duplicates[cp]
        names = list(dict.fromkeys(claims))
        if len(names) == 1:
            logger.warning(f"{format_codepoint(cp)} is listed {len(claims)} times by {names[0]}")
        else:
            logger.warning(f"{format_codepoint(cp)} is encoded by: {', '.join(names)}")
    return len(duplicates)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="List the Unicode encodings of a UFO's glyphs from MFEKmetadata's glyph report."
    )
    parser.add_argument(
        "source",
        type=str,
        help="UFO directory, or a saved tab-separated report with --tsv.",
    )
    parser.add_argument(
        "--tsv",
        action="store_true",
        help="Treat SOURCE as a saved glyph report instead of a UFO.",
    )
    parser.add_argument(
        "--tool",
        type=str,
        default=None,
        help="Path to the MFEKmetadata executable (default: $PYGLYPHMETA_METADATA_TOOL, then PATH).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject rows whose uniname/codepoints/unicat lists differ in length.",
    )
    parser.add_argument(
        "--glyphs",
        action="store_true",
        help="List glyphs with their code points instead of unique code points.",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output CSV file (default: stdout)",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Debug logging.")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Errors only.")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    configLogger(
        logger=logger,
        handlers=[log_handler],
        level=level,
        format="%(levelname)s: %(message)s",
    )

    write = write_glyphs if args.glyphs else write_codepoints
    try:
        glyphs = load_glyphs(args)
        if args.output:
            with open(args.output, "w", newline="", encoding="utf-8") as f:
                write(glyphs, f)
        else:
            write(glyphs, sys.stdout)
    except (GlyphMetaError, OSError) as e:
        logger.error(str(e))
        return 1

    if args.glyphs:
        # the code point listing already warned while reducing
        report_duplicates(glyphs)
    logger.info(f"{len(glyphs)} glyph(s) in {args.source}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
