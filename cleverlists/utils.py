"""Utility functions for cleverlists."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

if TYPE_CHECKING:
    from .files import FileChange

console = Console()


def log_change(change: FileChange, dry: bool) -> None:
    """Log changes made to a file using rich console formatting."""
    edits = len(change.transaction.edits)
    commands = ", ".join(call.command.value for call in change.transaction.commands)
    fallback = f", fallback {commands}" if commands else ""
    console.print(
        f"[bold cyan]{change.path}[/]: {edits} list edit(s){fallback} "
        f"{escape('[dry-run]') if dry else ''}"
    )


def print_diff(change: FileChange) -> None:
    """Print the unified diff of a change."""
    diff = "".join(change.diff())
    if diff:
        console.print(Syntax(diff, "diff", theme="ansi_dark"))
