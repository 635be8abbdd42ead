"""Core list functions for cleverlists.

This module contains list line parsing, marker style inference, ordered list
numbering and head derivation.
"""

from .markers import (
    FALLBACK_MARKER,
    MarkerLevelTable,
    build_marker_levels,
    determine_full_marker,
    iter_lines_by_proximity,
)
from .mutation import continuation_head, derive_head, outdent_head
from .numbering import resolve_next_number
from .parsing import (
    MarkerKind,
    MarkerToken,
    ParsedLine,
    parse_line,
    parse_marker_token,
    split_full_marker,
)

__all__ = [
    "FALLBACK_MARKER",
    "MarkerKind",
    "MarkerLevelTable",
    "MarkerToken",
    "ParsedLine",
    "build_marker_levels",
    "continuation_head",
    "derive_head",
    "determine_full_marker",
    "iter_lines_by_proximity",
    "outdent_head",
    "parse_line",
    "parse_marker_token",
    "resolve_next_number",
    "split_full_marker",
]
