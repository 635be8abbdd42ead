"""Edit transaction accumulated by an operation and applied by the host."""

from __future__ import annotations

from dataclasses import dataclass, field

from .model import Command, Position, Range, Selection


@dataclass(frozen=True)
class Edit:
    """Replace the text in ``range`` with ``text``."""

    range: Range
    text: str


@dataclass(frozen=True)
class CommandCall:
    """A host command to run over ``selections``."""

    command: Command
    selections: tuple[Selection, ...]


@dataclass
class EditTransaction:
    """Edits and fallback commands collected during one operation.

    Every edit is expressed against the document as it was when the operation
    started. The host applies the whole transaction at once or not at all.
    """

    edits: list[Edit] = field(default_factory=list)
    commands: list[CommandCall] = field(default_factory=list)

    def replace(self, range: Range, text: str) -> None:
        self.edits.append(Edit(range, text))

    def insert(self, position: Position, text: str) -> None:
        self.edits.append(Edit(Range.at(position), text))

    def delete(self, range: Range) -> None:
        self.edits.append(Edit(range, ""))

    def execute_command(self, command: Command, selections: tuple[Selection, ...]) -> None:
        self.commands.append(CommandCall(command, tuple(selections)))

    @property
    def is_empty(self) -> bool:
        return not self.edits and not self.commands
