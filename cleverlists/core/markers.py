"""Marker style inference from the surrounding document."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from loguru import logger

from ..editor.document import TextDocument
from .parsing import parse_line

FALLBACK_MARKER = "-"

MarkerLevelTable = dict[int, str]


def iter_lines_by_proximity(active_line: int, line_count: int) -> Iterator[int]:
    """Yield line numbers starting at ``active_line``.

    Lines are produced walking up to the first line, then walking down from the
    line after ``active_line`` to the end of the document.
    """
    for line in range(min(active_line, line_count - 1), -1, -1):
        yield line
    for line in range(active_line + 1, line_count):
        yield line


def build_marker_levels(
    document: TextDocument, active_line: int, max_level: int, tab_size: int
) -> MarkerLevelTable:
    """Collect the marker in use at each level from ``0`` to ``max_level``.

    The first list item found at a level, in proximity order around the active
    line, decides the marker for that level. Scanning stops as soon as every
    level has an entry.

    Args:
        document: Document snapshot to scan.
        active_line: Line the search starts from.
        max_level: Deepest level to record.
        tab_size: Editor tab width in columns.

    Returns:
        Mapping of level to full marker (spacing prefix and marker token).
    """
    levels: MarkerLevelTable = {}
    if max_level < 0:
        return levels

    for line_number in iter_lines_by_proximity(active_line, document.line_count):
        parsed = parse_line(document.line_at(line_number), tab_size)
        if parsed is None:
            continue
        if parsed.level <= max_level and parsed.level not in levels:
            levels[parsed.level] = parsed.full_marker
            if len(levels) == max_level + 1:
                break

    return levels


def determine_full_marker(
    levels: MarkerLevelTable, level: int, default_markers: Sequence[str]
) -> str:
    """Return the full marker for ``level``.

    Levels missing from the table cycle through ``default_markers``.
    """
    if level in levels:
        return levels[level]
    if not default_markers:
        logger.warning(
            f"No default markers configured, using '{FALLBACK_MARKER}' for level {level}"
        )
        return FALLBACK_MARKER
    return default_markers[level % len(default_markers)]
