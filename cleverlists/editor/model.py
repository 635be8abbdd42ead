"""Positions, selections and editor settings shared with the host."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from ..errors import InvariantViolation

if TYPE_CHECKING:
    from .document import TextDocument


@dataclass(frozen=True, order=True)
class Position:
    """A zero-based line and character offset."""

    line: int
    character: int

    def __post_init__(self) -> None:
        if self.line < 0 or self.character < 0:
            raise InvariantViolation(f"Negative position {self.line}:{self.character}")


@dataclass(frozen=True)
class Range:
    """A span of text between two positions, ``start`` never after ``end``."""

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.end < self.start:
            start, end = self.end, self.start
            object.__setattr__(self, "start", start)
            object.__setattr__(self, "end", end)

    @classmethod
    def at(cls, position: Position) -> Range:
        return cls(position, position)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True)
class Selection:
    """A selection from ``anchor`` to the cursor at ``active``.

    An empty selection is a plain cursor.
    """

    anchor: Position
    active: Position

    @classmethod
    def cursor(cls, line: int, character: int) -> Selection:
        position = Position(line, character)
        return cls(position, position)

    @property
    def start(self) -> Position:
        return min(self.anchor, self.active)

    @property
    def end(self) -> Position:
        return max(self.anchor, self.active)

    @property
    def is_empty(self) -> bool:
        return self.anchor == self.active

    @property
    def range(self) -> Range:
        return Range(self.start, self.end)

    def line_numbers(self) -> range:
        """Every line the selection touches, first to last."""
        return range(self.start.line, self.end.line + 1)


@dataclass(frozen=True)
class EditorOptions:
    """Indentation settings of the editor hosting the document."""

    tab_size: int = 4
    insert_spaces: bool = True

    def __post_init__(self) -> None:
        if self.tab_size < 1:
            raise InvariantViolation(f"Tab size must be positive, got {self.tab_size}")

    @property
    def indent_unit(self) -> str:
        return " " * self.tab_size if self.insert_spaces else "\t"

    def indentation_for(self, level: int) -> str:
        """Indentation that places text at ``level``."""
        if level < 0:
            raise InvariantViolation(f"Cannot indent to negative level {level}")
        return self.indent_unit * level


class Command(str, Enum):
    """Host commands the operations fall back to."""

    DEFAULT_OUTDENT = "outdentLines"
    DEFAULT_INDENT = "indentLines"
    TYPE_NEWLINE = "type"


@dataclass(frozen=True)
class EditorState:
    """Everything an operation reads from the host for one invocation."""

    document: TextDocument
    selections: tuple[Selection, ...]
    options: EditorOptions = field(default_factory=EditorOptions)
