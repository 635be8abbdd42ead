"""Immutable text document snapshot."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvariantViolation
from .model import Position, Range


@dataclass(frozen=True)
class TextDocument:
    """The lines of a document as they were when an operation started.

    Lines are stored without their line breaks. ``eol`` is the line break used to
    join them back together.
    """

    lines: tuple[str, ...]
    eol: str = "\n"

    @classmethod
    def from_text(cls, text: str) -> TextDocument:
        """Split ``text`` into lines, keeping a trailing empty line if present."""
        eol = "\r\n" if "\r\n" in text else "\n"
        return cls(tuple(text.split(eol)), eol)

    @classmethod
    def from_lines(cls, *lines: str) -> TextDocument:
        return cls(tuple(lines))

    @property
    def text(self) -> str:
        return self.eol.join(self.lines)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line_at(self, line: int) -> str:
        """Return the text of ``line``.

        Raises:
            InvariantViolation: If the line does not exist.
        """
        if not 0 <= line < len(self.lines):
            raise InvariantViolation(
                f"Line {line} outside document of {len(self.lines)} lines"
            )
        return self.lines[line]

    def line_range(self, line: int) -> Range:
        """Range covering ``line`` without its line break."""
        return Range(Position(line, 0), Position(line, len(self.line_at(line))))

    def line_range_with_break(self, line: int) -> Range:
        """Range covering ``line`` and the line break that follows it, if any."""
        if line + 1 < self.line_count:
            self.line_at(line)
            return Range(Position(line, 0), Position(line + 1, 0))
        return self.line_range(line)

    def offset_at(self, position: Position) -> int:
        """Character offset of ``position`` in :attr:`text`.

        Raises:
            InvariantViolation: If the position is outside the document.
        """
        text = self.line_at(position.line)
        if position.character > len(text):
            raise InvariantViolation(
                f"Column {position.character} past end of line {position.line}"
            )
        preceding = sum(len(line) + len(self.eol) for line in self.lines[: position.line])
        return preceding + position.character
