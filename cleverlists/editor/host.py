"""A minimal host that applies transactions to an in-memory document.

The host runs the fallback commands itself: the default indent and outdent
shift whole lines by one indentation unit, and typing a newline replaces each
selection with a line break.
"""

from __future__ import annotations

from loguru import logger

from ..errors import InvariantViolation
from .document import TextDocument
from .model import Command, EditorOptions, Position, Range, Selection
from .transaction import CommandCall, Edit, EditTransaction


def _selected_lines(selections: tuple[Selection, ...]) -> list[int]:
    lines: set[int] = set()
    for selection in selections:
        lines.update(selection.line_numbers())
    return sorted(lines)


def _default_indent(
    document: TextDocument, selections: tuple[Selection, ...], options: EditorOptions
) -> list[Edit]:
    lines = _selected_lines(selections)
    edits = []
    for line in lines:
        if len(lines) > 1 and not document.line_at(line).strip():
            continue
        edits.append(Edit(Range.at(Position(line, 0)), options.indent_unit))
    return edits


def _default_outdent(
    document: TextDocument, selections: tuple[Selection, ...], options: EditorOptions
) -> list[Edit]:
    edits = []
    for line in _selected_lines(selections):
        text = document.line_at(line)
        if text.startswith("\t"):
            width = 1
        else:
            width = len(text[: options.tab_size]) - len(text[: options.tab_size].lstrip(" "))
        if width:
            edits.append(Edit(Range(Position(line, 0), Position(line, width)), ""))
    return edits


def _type_newline(selections: tuple[Selection, ...]) -> list[Edit]:
    return [Edit(selection.range, "\n") for selection in selections]


def command_edits(
    document: TextDocument, call: CommandCall, options: EditorOptions
) -> list[Edit]:
    """Translate a fallback command into plain edits on ``document``."""
    if call.command is Command.DEFAULT_INDENT:
        return _default_indent(document, call.selections, options)
    if call.command is Command.DEFAULT_OUTDENT:
        return _default_outdent(document, call.selections, options)
    return _type_newline(call.selections)


def apply_edits(document: TextDocument, edits: list[Edit]) -> TextDocument:
    """Apply edits expressed against ``document`` all at once.

    Inserts at the same position keep the order they were given in.

    Raises:
        InvariantViolation: If two edits overlap or an edit lies outside the
            document.
    """
    ordered = sorted(edits, key=lambda edit: (edit.range.start, edit.range.end))
    for previous, current in zip(ordered, ordered[1:]):
        if previous.range.end > current.range.start:
            raise InvariantViolation(
                f"Overlapping edits at {current.range.start.line}:{current.range.start.character}"
            )

    text = document.text
    for edit in reversed(ordered):
        start = document.offset_at(edit.range.start)
        end = document.offset_at(edit.range.end)
        text = text[:start] + edit.text.replace("\n", document.eol) + text[end:]
    return TextDocument(tuple(text.split(document.eol)), document.eol)


def apply_transaction(
    document: TextDocument, transaction: EditTransaction, options: EditorOptions
) -> TextDocument:
    """Apply an operation's edits and fallback commands as one change.

    Args:
        document: Snapshot the transaction was computed against.
        transaction: Edits and commands recorded by an operation.
        options: Editor settings the fallback commands indent with.

    Returns:
        The document after the change. ``document`` itself is not modified.
    """
    edits = list(transaction.edits)
    for call in transaction.commands:
        logger.debug(f"Running {call.command.value} on {len(call.selections)} selection(s)")
        edits.extend(command_edits(document, call, options))
    if not edits:
        return document
    return apply_edits(document, edits)
