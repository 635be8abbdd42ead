"""Derive new list item heads for a line."""

from __future__ import annotations

from collections.abc import Sequence

from ..editor.document import TextDocument
from ..editor.model import EditorOptions
from ..errors import InvariantViolation
from .markers import MarkerLevelTable, determine_full_marker
from .numbering import resolve_next_number
from .parsing import MarkerKind, ParsedLine, parse_marker_token, split_full_marker


def derive_head(
    document: TextDocument,
    line_number: int,
    parsed: ParsedLine,
    target_level: int,
    levels: MarkerLevelTable,
    options: EditorOptions,
    default_markers: Sequence[str],
) -> str:
    """Build the head ``parsed`` gets when moved to ``target_level``.

    The marker comes from the level table (or the default markers), numbered
    against the items above ``line_number`` when it is ordered. A checkbox on
    the line itself is kept, and the spaces after the marker are left as they
    were.

    Args:
        document: Document snapshot the line belongs to.
        line_number: Line being changed.
        parsed: The parsed line at ``line_number``.
        target_level: Level the item moves to.
        levels: Marker table covering ``target_level``.
        options: Editor indentation settings.
        default_markers: Markers cycled through for levels missing from the table.

    Returns:
        Indentation, marker and trailing spaces for the line.

    Raises:
        InvariantViolation: If ``target_level`` is negative.
    """
    if target_level < 0:
        raise InvariantViolation(f"Cannot move line {line_number} to level {target_level}")

    spacing, token_text = split_full_marker(
        determine_full_marker(levels, target_level, default_markers)
    )
    token = parse_marker_token(token_text)

    if token.kind is MarkerKind.ORDERED:
        marker = token.with_number(
            resolve_next_number(document, line_number, target_level, options.tab_size)
        )
    else:
        marker = token.text
    if parsed.checkbox:
        marker = parse_marker_token(marker).with_checkbox(parsed.checkbox)

    return options.indentation_for(target_level) + spacing + marker + parsed.trailing_spaces


def outdent_head(
    document: TextDocument,
    line_number: int,
    parsed: ParsedLine,
    levels: MarkerLevelTable,
    options: EditorOptions,
    default_markers: Sequence[str],
) -> str | None:
    """Head for ``parsed`` one level up, or None when it is already at level 0."""
    if parsed.level == 0:
        return None
    return derive_head(
        document, line_number, parsed, parsed.level - 1, levels, options, default_markers
    )


def continuation_head(
    document: TextDocument, line_number: int, parsed: ParsedLine, tab_size: int
) -> str:
    """Head for a new item inserted below ``line_number``.

    The new item repeats the indentation and marker of ``parsed``; an ordered
    marker gets the next number of its sequence.
    """
    marker = parsed.marker
    if parsed.kind is MarkerKind.ORDERED:
        marker = parse_marker_token(marker).with_number(
            resolve_next_number(document, line_number + 1, parsed.level, tab_size)
        )
    return parsed.indentation_raw + marker + parsed.trailing_spaces
