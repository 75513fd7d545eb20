"""Exceptions raised by pyglyphmeta."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple


class GlyphMetaError(Exception):
    """Base class for every error raised by this package."""


class SchemaError(GlyphMetaError):
    """The header row lacks one or more required columns."""

    def __init__(self, missing: Sequence[str], message: Optional[str] = None):
        self.missing: Tuple[str, ...] = tuple(missing)
        if message is None:
            message = "Missing required column(s) in header: " + ", ".join(self.missing)
        super().__init__(message)


class MalformedRecordError(GlyphMetaError, ValueError):
    """A data row could not be turned into a glyph record."""

    def __init__(self, line_number: int, record: Sequence[str], reason: str):
        self.line_number = line_number
        self.record: Tuple[str, ...] = tuple(record)
        self.reason = reason
        shown = "\t".join(self.record)
        super().__init__(f"line {line_number}: {reason} (row: {shown!r})")


class MetadataToolError(GlyphMetaError):
    """The external metadata tool is missing or failed."""

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        self.command = list(command) if command is not None else None
        self.returncode = returncode
        self.stderr = stderr
        if stderr:
            message = f"{message}\n{stderr.rstrip()}"
        super().__init__(message)


class ReportEncodingError(GlyphMetaError, ValueError):
    """A saved glyph report is not valid UTF-8."""

    def __init__(self, path, error: UnicodeDecodeError):
        self.path = path
        super().__init__(f"{path} is not valid UTF-8: {error}")
