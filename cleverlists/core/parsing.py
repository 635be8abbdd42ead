"""List line parsing for cleverlists."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from ..errors import InvariantViolation

LIST_ITEM_PATTERN = re.compile(
    r"^(?P<indentation>[ \t]*)"
    r"(?P<marker>[-*+](?: \[[xX ]\])?|[0-9]+[.)])"
    r"(?P<trailing> +)"
    r"(?P<content>.*)$"
)
MARKER_TOKEN_PATTERN = re.compile(
    r"^(?:(?P<bullet>[-*+])(?P<checkbox> \[[xX ]\])?|(?P<number>[0-9]+)(?P<delimiter>[.)]))$"
)


class MarkerKind(str, Enum):
    """The two families of list markers."""

    BULLET = "bullet"
    ORDERED = "ordered"


@dataclass(frozen=True)
class MarkerToken:
    """A list marker token split into its parts."""

    text: str
    kind: MarkerKind
    number: int | None = None
    delimiter: str | None = None
    checkbox: str = ""

    @property
    def bullet(self) -> str:
        """The marker without its checkbox (bullets only)."""
        return self.text[: len(self.text) - len(self.checkbox)]

    def with_number(self, number: int) -> str:
        """Render an ordered marker with a different numeral."""
        if self.kind is not MarkerKind.ORDERED:
            raise InvariantViolation(f"Marker {self.text!r} has no numeral to replace")
        return f"{number}{self.delimiter}"

    def with_checkbox(self, checkbox: str) -> str:
        """Render the marker carrying ``checkbox`` instead of its own."""
        if self.kind is MarkerKind.ORDERED:
            return self.text + checkbox
        return self.bullet + checkbox


@dataclass(frozen=True)
class ParsedLine:
    """A line of text that matched the list item grammar.

    ``indentation_raw + marker + trailing_spaces + content`` is always the
    original line.
    """

    indentation_raw: str
    indentation: str
    level: int
    marker_spacing: str
    marker: str
    kind: MarkerKind
    number: int | None
    delimiter: str | None
    trailing_spaces: str
    content: str

    @property
    def head(self) -> str:
        return self.indentation_raw + self.marker + self.trailing_spaces

    @property
    def full_marker(self) -> str:
        """The marker prefixed by the spacing that does not fill a whole level."""
        return self.marker_spacing + self.marker

    @property
    def checkbox(self) -> str:
        return parse_marker_token(self.marker).checkbox

    @property
    def is_blank(self) -> bool:
        return self.content == ""


def expand_tabs(indentation: str, tab_size: int) -> str:
    """Replace every tab in ``indentation`` by ``tab_size`` spaces."""
    return indentation.replace("\t", " " * tab_size)


def parse_marker_token(token: str) -> MarkerToken:
    """Split a bare marker token such as ``-``, ``* [x]`` or ``12)``.

    Args:
        token: Marker token without indentation or trailing spaces.

    Returns:
        The token split into kind, numeral, delimiter and checkbox.

    Raises:
        InvariantViolation: If ``token`` is not a list marker.
    """
    match = MARKER_TOKEN_PATTERN.match(token)
    if match is None:
        raise InvariantViolation(f"Not a list marker: {token!r}")
    if match.group("bullet") is not None:
        return MarkerToken(
            text=token,
            kind=MarkerKind.BULLET,
            checkbox=match.group("checkbox") or "",
        )
    return MarkerToken(
        text=token,
        kind=MarkerKind.ORDERED,
        number=int(match.group("number")),
        delimiter=match.group("delimiter"),
    )


def split_full_marker(full_marker: str) -> tuple[str, str]:
    """Split a full marker into its leading spacing and the marker token."""
    token = full_marker.lstrip(" ")
    return full_marker[: len(full_marker) - len(token)], token


def parse_line(text: str, tab_size: int) -> ParsedLine | None:
    """Parse one line of text as a markdown list item.

    Indentation is measured with tabs expanded to ``tab_size`` spaces. The
    indentation is split into whole levels of ``tab_size`` columns and the
    spacing left over, which stays attached to the marker.

    Args:
        text: A single line, without its line break.
        tab_size: Editor tab width in columns.

    Returns:
        The parsed line, or None if the line is not a list item.

    Raises:
        InvariantViolation: If ``tab_size`` is not positive.
    """
    if tab_size < 1:
        raise InvariantViolation(f"Tab size must be positive, got {tab_size}")

    match = LIST_ITEM_PATTERN.match(text)
    if match is None:
        return None

    indentation_raw = match.group("indentation")
    indentation = expand_tabs(indentation_raw, tab_size)
    level, excess = divmod(len(indentation), tab_size)
    token = parse_marker_token(match.group("marker"))

    return ParsedLine(
        indentation_raw=indentation_raw,
        indentation=indentation,
        level=level,
        marker_spacing=" " * excess,
        marker=token.text,
        kind=token.kind,
        number=token.number,
        delimiter=token.delimiter,
        trailing_spaces=match.group("trailing"),
        content=match.group("content"),
    )
