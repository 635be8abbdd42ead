"""Ordered list numbering."""

from __future__ import annotations

from ..editor.document import TextDocument
from .parsing import parse_line


def resolve_next_number(
    document: TextDocument, from_line: int, level: int, tab_size: int
) -> int:
    """Compute the numeral for an ordered item placed at ``from_line``.

    Walks up from the line above ``from_line``. Non-list lines and deeper items
    are skipped, an ordered item at ``level`` continues its sequence and a
    shallower item ends the search.

    Args:
        document: Document snapshot to scan.
        from_line: Line the new numeral is for.
        level: Level of the item being numbered.
        tab_size: Editor tab width in columns.

    Returns:
        The next number in the sequence, or 1 if the sequence starts here.
    """
    for line_number in range(min(from_line, document.line_count) - 1, -1, -1):
        parsed = parse_line(document.line_at(line_number), tab_size)
        if parsed is None:
            continue
        if parsed.level < level:
            return 1
        if parsed.level == level and parsed.number is not None:
            return parsed.number + 1
    return 1
