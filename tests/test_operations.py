"""Tests for the continue, indent and outdent operations."""

from collections.abc import Callable

from cleverlists.config import BlankListItemBehaviour, ListsConfig
from cleverlists.editor import (
    Command,
    CommandCall,
    EditorOptions,
    EditorState,
    EditTransaction,
    Position,
    Selection,
    TextDocument,
    apply_transaction,
)
from cleverlists.operations import continue_list, indent_selection, outdent_selection

Operation = Callable[[EditorState, EditTransaction, ListsConfig], None]


def run(
    operation: Operation,
    lines: list[str],
    selections: list[Selection],
    config: ListsConfig | None = None,
    tab_size: int = 2,
    insert_spaces: bool = True,
) -> tuple[list[str], EditTransaction]:
    """Run an operation and return the resulting lines and transaction."""
    document = TextDocument(tuple(lines))
    options = EditorOptions(tab_size=tab_size, insert_spaces=insert_spaces)
    transaction = EditTransaction()
    operation(EditorState(document, tuple(selections), options), transaction, config or ListsConfig())
    return list(apply_transaction(document, transaction, options).lines), transaction


def select(start: tuple[int, int], end: tuple[int, int]) -> Selection:
    return Selection(Position(*start), Position(*end))


class TestContinueList:
    """Test pressing Enter on list items."""

    def test_continue_bullet(self) -> None:
        """Test continuing a bullet list."""
        lines, transaction = run(continue_list, ["- item one"], [Selection.cursor(0, 10)])
        assert lines == ["- item one", "- "]
        assert transaction.commands == []

    def test_continue_ordered(self) -> None:
        """Test continuing an ordered list."""
        lines, _ = run(continue_list, ["1. a"], [Selection.cursor(0, 4)])
        assert lines == ["1. a", "2. "]

    def test_continue_keeps_checkbox_and_indentation(self) -> None:
        """Test continuing keeps checkbox and indentation."""
        lines, _ = run(continue_list, ["- a", "  * [x] b"], [Selection.cursor(1, 9)])
        assert lines == ["- a", "  * [x] b", "  * [x] "]

    def test_trailing_whitespace_after_cursor_allowed(self) -> None:
        """Test whitespace after the cursor still continues the list."""
        _, transaction = run(continue_list, ["- a  "], [Selection.cursor(0, 3)])
        assert transaction.commands == []
        assert transaction.edits[0].range.start == Position(0, 3)
        assert transaction.edits[0].text == "\n- "

    def test_numbers_increase_monotonically(self) -> None:
        """Test repeated continues number upwards."""
        lines = ["3. a"]
        numbers = []
        for text in ["b", "c", "d"]:
            last = len(lines) - 1
            lines, _ = run(continue_list, lines, [Selection.cursor(last, len(lines[last]))])
            numbers.append(int(lines[-1].split(".")[0]))
            lines[-1] += text
        assert numbers == [4, 5, 6]
        assert lines == ["3. a", "4. b", "5. c", "6. d"]

    def test_multiple_cursors(self) -> None:
        """Test continuing at several cursors."""
        lines, _ = run(
            continue_list,
            ["- a", "1. b"],
            [Selection.cursor(0, 3), Selection.cursor(1, 4)],
        )
        assert lines == ["- a", "- ", "1. b", "2. "]

    def test_cursor_in_content_inserts_plain_newline(self) -> None:
        """Test a cursor inside content falls back to a newline."""
        lines, transaction = run(continue_list, ["- item one"], [Selection.cursor(0, 4)])
        assert transaction.edits == []
        assert [call.command for call in transaction.commands] == [Command.TYPE_NEWLINE]
        assert lines == ["- it", "em one"]

    def test_cursor_before_marker_inserts_plain_newline(self) -> None:
        """Test a cursor before the marker falls back to a newline."""
        _, transaction = run(continue_list, ["- a"], [Selection.cursor(0, 0)])
        assert transaction.edits == []
        assert transaction.commands[0].command is Command.TYPE_NEWLINE

    def test_one_cursor_off_list_degrades_every_cursor(self) -> None:
        """Test one cursor off a list makes every cursor fall back."""
        selections = [Selection.cursor(0, 10), Selection.cursor(1, 4)]
        lines, transaction = run(continue_list, ["- item one", "text"], selections)
        assert transaction.edits == []
        assert transaction.commands == [CommandCall(Command.TYPE_NEWLINE, tuple(selections))]
        assert lines == ["- item one", "", "text", ""]

    def test_no_selections(self) -> None:
        """Test nothing happens without selections."""
        _, transaction = run(continue_list, ["- a"], [])
        assert transaction.is_empty

    def test_blank_item_outdents(self) -> None:
        """Test Enter on a blank item outdents it."""
        lines, _ = run(continue_list, ["  - "], [Selection.cursor(0, 4)])
        assert lines == ["- "]

    def test_blank_item_outdent_uses_nearest_marker(self) -> None:
        """Test outdenting a blank item uses the nearest marker."""
        lines, _ = run(
            continue_list, ["- a", "  * b", "    + "], [Selection.cursor(2, 6)]
        )
        assert lines == ["- a", "  * b", "  * "]

    def test_blank_item_outdent_renumbers(self) -> None:
        """Test outdenting a blank item renumbers it."""
        lines, _ = run(continue_list, ["1. a", "  - b", "  - "], [Selection.cursor(2, 4)])
        assert lines == ["1. a", "  - b", "2. "]

    def test_blank_item_outdent_at_level_zero_reproduces_marker(self) -> None:
        """Test a blank top-level item keeps its marker."""
        # Continue does not skip level 0 the way Outdent does; the head is
        # recomputed and comes out the same.
        lines, transaction = run(continue_list, ["1. a", "2. "], [Selection.cursor(1, 3)])
        assert lines == ["1. a", "2. "]
        assert len(transaction.edits) == 1
        assert transaction.edits[0].text == "2. "

    def test_blank_item_removed(self) -> None:
        """Test Enter on a blank item removes it."""
        config = ListsConfig(blank_list_item_behaviour=BlankListItemBehaviour.REMOVE_LIST_ITEM)
        lines, _ = run(continue_list, ["  - "], [Selection.cursor(0, 4)], config)
        assert lines == [""]

    def test_blank_item_removed_with_line_break(self) -> None:
        """Test removing a blank item also removes its line break."""
        config = ListsConfig(blank_list_item_behaviour=BlankListItemBehaviour.REMOVE_LIST_ITEM)
        lines, _ = run(
            continue_list, ["- a", "  - ", "b"], [Selection.cursor(1, 4)], config
        )
        assert lines == ["- a", "b"]


class TestIndentSelection:
    """Test indenting list items."""

    def test_indent_checkbox_item(self) -> None:
        """Test indenting a checkbox item."""
        lines, _ = run(indent_selection, ["- [ ] task"], [Selection.cursor(0, 0)])
        assert lines == ["  - [ ] task"]

    def test_indent_uses_default_marker(self) -> None:
        """Test indenting uses the default marker."""
        lines, _ = run(indent_selection, ["- a", "- b"], [Selection.cursor(1, 3)])
        assert lines == ["- a", "  - b"]

    def test_indent_cycles_default_markers(self) -> None:
        """Test indenting cycles through default markers."""
        config = ListsConfig(default_markers=["-", "*"])
        lines, _ = run(indent_selection, ["- a", "- b"], [Selection.cursor(1, 3)], config)
        assert lines == ["- a", "  * b"]

    def test_indent_reuses_marker_of_level(self) -> None:
        """Test indenting reuses the marker found at the level."""
        lines, _ = run(
            indent_selection, ["- a", "  * [ ] x", "- b"], [Selection.cursor(2, 0)]
        )
        assert lines == ["- a", "  * [ ] x", "  * [ ] b"]

    def test_indent_ordered_default(self) -> None:
        """Test indenting with an ordered default marker."""
        config = ListsConfig(default_markers=["1."])
        lines, _ = run(indent_selection, ["1. a", "2. b"], [Selection.cursor(1, 0)], config)
        assert lines == ["1. a", "  1. b"]

    def test_indent_multiple_lines(self) -> None:
        """Test indenting several lines at once."""
        lines, _ = run(indent_selection, ["- a", "- b", "- c"], [select((1, 0), (2, 3))])
        assert lines == ["- a", "  - b", "  - c"]

    def test_indent_with_tabs(self) -> None:
        """Test indenting with tabs."""
        lines, _ = run(
            indent_selection,
            ["- a", "- b"],
            [Selection.cursor(1, 0)],
            tab_size=4,
            insert_spaces=False,
        )
        assert lines == ["- a", "\t- b"]

    def test_line_above_not_a_list_item_defers(self) -> None:
        """Test a non-list line above falls back to default indent."""
        lines, transaction = run(indent_selection, ["Intro", "- a"], [Selection.cursor(1, 0)])
        assert transaction.edits == []
        assert [call.command for call in transaction.commands] == [Command.DEFAULT_INDENT]
        assert lines == ["Intro", "  - a"]

    def test_mixed_selections(self) -> None:
        """Test list and fallback selections in one operation."""
        good = Selection.cursor(1, 0)
        bad = Selection.cursor(3, 0)
        lines, transaction = run(
            indent_selection, ["- a", "- b", "text", "- c"], [good, bad]
        )
        assert len(transaction.edits) == 1
        assert transaction.commands == [CommandCall(Command.DEFAULT_INDENT, (bad,))]
        assert lines == ["- a", "  - b", "text", "  - c"]

    def test_overlapping_selections_edit_once(self) -> None:
        """Test overlapping selections edit a line once."""
        lines, transaction = run(
            indent_selection,
            ["- a", "- b"],
            [Selection.cursor(1, 0), Selection.cursor(1, 2)],
        )
        assert len(transaction.edits) == 1
        assert lines == ["- a", "  - b"]

    def test_fallback_skips_lines_indented_as_list_items(self) -> None:
        """Test fallback selections skip lines already indented."""
        lines, transaction = run(
            indent_selection,
            ["- a", "- b", "text"],
            [Selection.cursor(1, 0), select((1, 0), (2, 4))],
        )
        assert transaction.commands == [
            CommandCall(Command.DEFAULT_INDENT, (select((2, 0), (2, 4)),))
        ]
        assert lines == ["- a", "  - b", "  text"]

    def test_fallback_split_around_list_item(self) -> None:
        """Test fallback selections split around indented items."""
        lines, transaction = run(
            indent_selection,
            ["- a", "- b", "text"],
            [Selection.cursor(1, 0), select((0, 0), (2, 4))],
        )
        assert transaction.commands == [
            CommandCall(
                Command.DEFAULT_INDENT, (select((0, 0), (0, 3)), select((2, 0), (2, 4)))
            )
        ]
        assert lines == ["  - a", "  - b", "  text"]


class TestOutdentSelection:
    """Test outdenting list items."""

    def test_outdent_item(self) -> None:
        """Test outdenting an item."""
        lines, _ = run(outdent_selection, ["- a", "  - b"], [Selection.cursor(1, 0)])
        assert lines == ["- a", "- b"]

    def test_outdent_at_level_zero_is_noop(self) -> None:
        """Test outdenting a top-level item does nothing."""
        lines, transaction = run(outdent_selection, ["- a", "- b"], [Selection.cursor(1, 0)])
        assert transaction.is_empty
        assert lines == ["- a", "- b"]

    def test_outdent_into_ordered_list(self) -> None:
        """Test outdenting into an ordered list."""
        lines, _ = run(outdent_selection, ["1. a", "  - b"], [Selection.cursor(1, 0)])
        assert lines == ["1. a", "2. b"]

    def test_outdent_mixed_levels(self) -> None:
        """Test outdenting items at several levels."""
        lines, _ = run(
            outdent_selection,
            ["- a", "  * b", "    + c"],
            [select((1, 0), (2, 0))],
        )
        assert lines == ["- a", "- b", "  * c"]

    def test_outdent_keeps_content(self) -> None:
        """Test outdenting keeps the content."""
        lines, _ = run(outdent_selection, ["- a", "    -   spaced  text "], [Selection.cursor(1, 0)])
        assert lines == ["- a", "  -   spaced  text "]

    def test_paragraph_in_selection_defers(self) -> None:
        """Test a paragraph in the selection falls back to default outdent."""
        selection = select((0, 0), (1, 3))
        lines, transaction = run(outdent_selection, ["- a", "paragraph"], [selection])
        assert transaction.edits == []
        assert transaction.commands == [CommandCall(Command.DEFAULT_OUTDENT, (selection,))]
        assert lines == ["- a", "paragraph"]
