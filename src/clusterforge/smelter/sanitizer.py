#!/usr/bin/env python3
"""
CLUSTERFORGE SANITIZER - Line Filter (Stage 2)
----------------------------------------------
Strips template noise from a single, already split document: stray
separators, full-line comments and the provenance labels chart
renderers stamp on every object.

The filter is textual and line based, not YAML aware. A value that
merely contains one of the markers is dropped along with real labels.

Author: Cluster Forge Team
Date: 2026-10-16
"""

from typing import Iterable, List

DOCUMENT_SEPARATOR = "---"
COMMENT_PREFIX = "#"

# Substrings that identify provenance metadata injected by templating tools
PROVENANCE_MARKERS = (
    "helm.sh/chart",
    "app.kubernetes.io/managed-by",
)


def is_noise(line: str) -> bool:
    """True when the line should not survive into split output."""
    if DOCUMENT_SEPARATOR in line:
        return True
    if line.lstrip().startswith(COMMENT_PREFIX):
        return True
    return any(marker in line for marker in PROVENANCE_MARKERS)


def sanitize_lines(lines: Iterable[str]) -> List[str]:
    """Keeps every non-noise line verbatim, each terminated with '\\n'."""
    return [line + "\n" for line in lines if not is_noise(line)]


def sanitize(text: str) -> str:
    """Filters a whole document. Line endings are normalized to LF."""
    lines = text.split("\n")
    # A trailing newline does not start another line
    if lines and lines[-1] == "":
        lines.pop()
    return "".join(sanitize_lines(line.rstrip("\r") for line in lines))
