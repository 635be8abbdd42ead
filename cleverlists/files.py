"""Run list operations against markdown files on disk."""

from __future__ import annotations

import difflib
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from .config import ListsConfig
from .editor import (
    EditorOptions,
    EditorState,
    EditTransaction,
    Selection,
    TextDocument,
    apply_transaction,
)
from .errors import InvariantViolation

Operation = Callable[[EditorState, EditTransaction, ListsConfig], None]


@dataclass(frozen=True)
class FileChange:
    """Result of running an operation on one file."""

    path: Path
    original: str
    updated: str
    transaction: EditTransaction

    @property
    def changed(self) -> bool:
        return self.original != self.updated

    def diff(self) -> list[str]:
        """Unified diff between the original and updated text."""
        return list(
            difflib.unified_diff(
                self.original.splitlines(True),
                self.updated.splitlines(True),
                fromfile=str(self.path),
                tofile=str(self.path),
            )
        )


def create_backup_path(file_path: Path, backup_ext: str) -> Path:
    """Backup file that sits next to ``file_path``."""
    return file_path.with_suffix(file_path.suffix + backup_ext)


def run_on_text(
    text: str,
    operation: Operation,
    selections: Sequence[Selection],
    options: EditorOptions,
    lists_config: ListsConfig,
) -> tuple[str, EditTransaction]:
    """Run ``operation`` on ``text`` and apply the resulting transaction.

    Returns:
        Tuple of (updated text, transaction the operation produced).

    Raises:
        InvariantViolation: If a selection lies outside the document.
    """
    document = TextDocument.from_text(text)
    for selection in selections:
        # Validates both ends against the document
        document.offset_at(selection.start)
        document.offset_at(selection.end)

    state = EditorState(document, tuple(selections), options)
    transaction = EditTransaction()
    operation(state, transaction, lists_config)
    return apply_transaction(document, transaction, options).text, transaction


def process_file(
    path: Path,
    operation: Operation,
    selections: Sequence[Selection],
    options: EditorOptions,
    lists_config: ListsConfig,
    dry_run: bool = False,
    backup_ext: str | None = None,
) -> FileChange:
    """Run an operation on a markdown file and write the result back.

    Args:
        path: Markdown file to edit.
        operation: One of the list operations.
        selections: Cursors and selections, zero-based.
        options: Editor indentation settings.
        lists_config: List behaviour configuration.
        dry_run: If True, don't write changes.
        backup_ext: If given, copy the original file to ``<file><backup_ext>``
            before writing.

    Returns:
        The change made (or that would be made) to the file.
    """
    with path.open(encoding="utf-8", newline="") as f:
        original = f.read()
    try:
        updated, transaction = run_on_text(
            original, operation, selections, options, lists_config
        )
    except InvariantViolation as e:
        raise InvariantViolation(f"{path}: {e}") from e

    change = FileChange(path, original, updated, transaction)
    if change.changed and not dry_run:
        if backup_ext:
            create_backup_path(path, backup_ext).write_text(
                original, encoding="utf-8", newline=""
            )
        path.write_text(updated, encoding="utf-8", newline="")
    return change
