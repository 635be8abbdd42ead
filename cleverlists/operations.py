"""Continue, indent and outdent operations over every selection.

Each operation reads the editor state once, decides per selection whether the
list logic applies, and records either head replacements or a fallback command
in the transaction. Nothing is written to the document here; every decision is
made against the snapshot the operation started with.
"""

from __future__ import annotations

from collections.abc import Callable
from itertools import groupby

from loguru import logger

from .config import BlankListItemBehaviour, ListsConfig
from .core.markers import build_marker_levels
from .core.mutation import continuation_head, derive_head, outdent_head
from .core.parsing import ParsedLine, parse_line
from .editor.document import TextDocument
from .editor.model import Command, EditorState, Position, Range, Selection
from .editor.transaction import EditTransaction


def _head_range(line_number: int, parsed: ParsedLine) -> Range:
    return Range(Position(line_number, 0), Position(line_number, len(parsed.head)))


def _cursor_continues_list(
    document: TextDocument, selection: Selection, tab_size: int
) -> ParsedLine | None:
    """Parse the cursor line if Enter there should continue the list.

    The cursor has to sit after the marker and its spacing with nothing but
    whitespace to its right.
    """
    cursor = selection.active
    text = document.line_at(cursor.line)
    parsed = parse_line(text, tab_size)
    if parsed is None:
        return None
    if cursor.character < len(parsed.head) or text[cursor.character :].strip():
        return None
    return parsed


def continue_list(
    state: EditorState, transaction: EditTransaction, config: ListsConfig
) -> None:
    """Handle Enter on list items.

    Args:
        state: Document, selections and editor settings.
        transaction: Receives the edits, or a newline fallback for every cursor.
        config: Blank item behaviour and default markers.
    """
    document = state.document
    tab_size = state.options.tab_size

    cursor_items: list[ParsedLine] = []
    for selection in state.selections:
        parsed = _cursor_continues_list(document, selection, tab_size)
        if parsed is None:
            logger.debug("Not every cursor is on a list item, inserting a plain newline")
            transaction.execute_command(Command.TYPE_NEWLINE, state.selections)
            return
        cursor_items.append(parsed)
    if not cursor_items:
        return

    max_level = max(parsed.level for parsed in cursor_items)
    handled_lines: set[int] = set()

    for selection, parsed in zip(state.selections, cursor_items):
        line_number = selection.active.line
        if line_number in handled_lines:
            continue
        handled_lines.add(line_number)

        if not parsed.is_blank:
            head = continuation_head(document, line_number, parsed, tab_size)
            logger.debug(f"Continuing list on line {line_number} with {head!r}")
            transaction.insert(selection.active, "\n" + head)
            continue

        if config.blank_list_item_behaviour is BlankListItemBehaviour.REMOVE_LIST_ITEM:
            logger.debug(f"Removing blank list item on line {line_number}")
            transaction.delete(document.line_range_with_break(line_number))
            continue

        levels = build_marker_levels(document, line_number, max_level, tab_size)
        head = derive_head(
            document,
            line_number,
            parsed,
            max(parsed.level - 1, 0),
            levels,
            state.options,
            config.default_markers,
        )
        logger.debug(f"Outdenting blank list item on line {line_number} to {head!r}")
        transaction.replace(_head_range(line_number, parsed), head)


def _parse_selection(
    document: TextDocument, selection: Selection, tab_size: int
) -> dict[int, ParsedLine] | None:
    """Parse every line of ``selection`` and the line just above it.

    Returns:
        The parsed selected lines by line number, or None if any of the
        inspected lines is not a list item.
    """
    start = selection.start.line
    if start > 0 and parse_line(document.line_at(start - 1), tab_size) is None:
        return None

    parsed_lines: dict[int, ParsedLine] = {}
    for line_number in selection.line_numbers():
        parsed = parse_line(document.line_at(line_number), tab_size)
        if parsed is None:
            return None
        parsed_lines[line_number] = parsed
    return parsed_lines


def _untouched_parts(
    document: TextDocument, selection: Selection, handled_lines: set[int]
) -> list[Selection]:
    """Split ``selection`` into the runs of lines no list edit has touched."""
    lines = [n for n in selection.line_numbers() if n not in handled_lines]
    if len(lines) == len(selection.line_numbers()):
        return [selection]

    parts = []
    for _, run in groupby(enumerate(lines), key=lambda pair: pair[1] - pair[0]):
        numbers = [line_number for _, line_number in run]
        last = numbers[-1]
        parts.append(
            Selection(
                Position(numbers[0], 0), Position(last, len(document.line_at(last)))
            )
        )
    return parts


def _shift_selections(
    state: EditorState,
    transaction: EditTransaction,
    *,
    step: int,
    fallback: Command,
    new_head: Callable[..., str | None],
) -> None:
    document = state.document
    options = state.options
    deferred: list[Selection] = []
    handled_lines: set[int] = set()

    for selection in state.selections:
        parsed_lines = _parse_selection(document, selection, options.tab_size)
        if parsed_lines is None:
            deferred.append(selection)
            continue

        max_level = max(parsed.level for parsed in parsed_lines.values()) + step
        levels = build_marker_levels(
            document, selection.active.line, max_level, options.tab_size
        )
        for line_number, parsed in parsed_lines.items():
            if line_number in handled_lines:
                continue
            handled_lines.add(line_number)
            head = new_head(document, line_number, parsed, levels)
            if head is None or head == parsed.head:
                continue
            transaction.replace(_head_range(line_number, parsed), head)

    # Lines edited as list items must not also get the fallback command
    deferred = [
        part
        for selection in deferred
        for part in _untouched_parts(document, selection, handled_lines)
    ]
    if deferred:
        logger.debug(
            f"{len(deferred)} selection(s) include non-list lines, using {fallback.value}"
        )
        transaction.execute_command(fallback, tuple(deferred))


def indent_selection(
    state: EditorState, transaction: EditTransaction, config: ListsConfig
) -> None:
    """Indent the list items under every selection by one level.

    Selections touching a line that is not a list item, including the line just
    above the selection, are left to the host's default indent command.
    """

    def new_head(
        document: TextDocument, line_number: int, parsed: ParsedLine, levels: dict[int, str]
    ) -> str:
        return derive_head(
            document,
            line_number,
            parsed,
            parsed.level + 1,
            levels,
            state.options,
            config.default_markers,
        )

    _shift_selections(
        state,
        transaction,
        step=1,
        fallback=Command.DEFAULT_INDENT,
        new_head=new_head,
    )


def outdent_selection(
    state: EditorState, transaction: EditTransaction, config: ListsConfig
) -> None:
    """Outdent the list items under every selection by one level.

    Items already at level 0 stay as they are. Selections touching a line that is
    not a list item are left to the host's default outdent command.
    """

    def new_head(
        document: TextDocument, line_number: int, parsed: ParsedLine, levels: dict[int, str]
    ) -> str | None:
        return outdent_head(
            document, line_number, parsed, levels, state.options, config.default_markers
        )

    _shift_selections(
        state,
        transaction,
        step=-1,
        fallback=Command.DEFAULT_OUTDENT,
        new_head=new_head,
    )
