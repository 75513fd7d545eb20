# metadata_tool.py
"""
Run the external glyph metadata tool (MFEKmetadata) on a UFO.

The rest of the package only ever sees the text this module returns: given a
UFO directory, run

    MFEKmetadata <ufodir> glyphs

and hand back its stdout as a str. The tool is looked up, in order, from an
explicit path, the PYGLYPHMETA_METADATA_TOOL environment variable, then PATH.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from .errors import MetadataToolError
from .records import GlyphRef
from .tsv_decoder import parse_tsv

logger = logging.getLogger(__name__)

METADATA_TOOL = "MFEKmetadata"
METADATA_TOOL_ENV = "PYGLYPHMETA_METADATA_TOOL"
GLYPHS_REPORT = "glyphs"


def find_metadata_tool(explicit: Optional[str] = None) -> str:
    """Return the command to run, or raise MetadataToolError if none is found."""
    if explicit:
        return explicit

    from_env = os.environ.get(METADATA_TOOL_ENV)
    if from_env:
        return from_env

    found = shutil.which(METADATA_TOOL)
    if found is None:
        raise MetadataToolError(
            f"{METADATA_TOOL} unavailable; install it or set {METADATA_TOOL_ENV}"
        )
    return found


def run_metadata_tool(ufodir: Union[str, Path], tool: Optional[str] = None) -> str:
    """
    Run the glyphs report on ufodir and return its stdout, decoded as UTF-8.

    Blocks until the tool exits. Raises MetadataToolError if the tool cannot
    be started, exits non-zero, or prints something that is not UTF-8.
    """
    cmd = [find_metadata_tool(tool), str(ufodir), GLYPHS_REPORT]
    logger.debug(f"Running {' '.join(cmd)}")

    try:
        proc = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
    except OSError as e:
        raise MetadataToolError(f"{cmd[0]} failed to run: {e}", command=cmd) from e

    stderr = proc.stderr.decode("utf-8", errors="replace")
    if proc.returncode != 0:
        raise MetadataToolError(
            f"{cmd[0]} exited with status {proc.returncode}",
            command=cmd,
            returncode=proc.returncode,
            stderr=stderr,
        )

    try:
        return proc.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MetadataToolError(
            f"{cmd[0]} output is not valid UTF-8: {e}",
            command=cmd,
            returncode=proc.returncode,
            stderr=stderr,
        ) from e


def for_ufo(
    ufodir: Union[str, Path],
    tool: Optional[str] = None,
    strict: bool = False,
) -> List[GlyphRef]:
    """Run the metadata tool on ufodir and decode its glyph report."""
    return parse_tsv(run_metadata_tool(ufodir, tool=tool), strict=strict)
