"""Editor model for cleverlists.

This module holds the document snapshot, positions and selections, the edit
transaction operations write into, and a small host that applies transactions.
"""

from .document import TextDocument
from .host import apply_edits, apply_transaction
from .model import Command, EditorOptions, EditorState, Position, Range, Selection
from .transaction import CommandCall, Edit, EditTransaction

__all__ = [
    "Command",
    "CommandCall",
    "Edit",
    "EditTransaction",
    "EditorOptions",
    "EditorState",
    "Position",
    "Range",
    "Selection",
    "TextDocument",
    "apply_edits",
    "apply_transaction",
]
