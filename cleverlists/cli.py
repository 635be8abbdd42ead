"""Command line interface for cleverlists."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
from loguru import logger
from rich.table import Table

from . import __version__
from .config import (
    BlankListItemBehaviour,
    Config,
    ListsConfig,
    config_path_for,
    find_config,
    load_config,
    save_config,
)
from .core import parse_line
from .editor import EditorOptions, Position, Selection
from .files import Operation, process_file
from .operations import continue_list, indent_selection, outdent_selection
from .utils import console, log_change, print_diff

POSITION_PATTERN = re.compile(r"^\s*(\d+):(\d+)\s*$")


def setup_logger(verbose: bool = False) -> Any:
    """Set up logger with appropriate level."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="{level}: {message}",
        level="DEBUG" if verbose else "INFO",
    )
    return logger


def _parse_position(value: str) -> tuple[int, int]:
    match = POSITION_PATTERN.match(value)
    if match is None:
        raise click.BadParameter(f"Expected LINE:COL, got '{value}'")
    return int(match.group(1)), int(match.group(2))


def parse_cursors(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> list[Selection]:
    """Turn ``LINE:COL`` option values into cursors."""
    return [Selection.cursor(*_parse_position(value)) for value in values]


def parse_selections(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> list[Selection]:
    """Turn ``LINE:COL-LINE:COL`` option values into selections."""
    selections = []
    for value in values:
        anchor, sep, active = value.partition("-")
        if not sep:
            raise click.BadParameter(f"Expected LINE:COL-LINE:COL, got '{value}'")
        selections.append(
            Selection(
                Position(*_parse_position(anchor)), Position(*_parse_position(active))
            )
        )
    return selections


def get_config_or_default(
    file_path: Path, config_path: Path | None, **kwargs: Any
) -> tuple[Config, EditorOptions]:
    """Load config for a file and merge with CLI arguments.

    CLI arguments override config values. If no config is found, uses defaults.

    Args:
        file_path: Markdown file being edited.
        config_path: Explicit config file, or None to search next to the file.
        **kwargs: CLI argument values that override config.

    Returns:
        Tuple of (config object, editor options).
    """
    if config_path is None:
        config_path = find_config(file_path)
    config = (load_config(config_path) if config_path else None) or Config()
    if config_path:
        logger.debug(f"Using config {config_path}")

    overrides: dict[str, Any] = {}
    if kwargs.get("blank_behaviour"):
        overrides["blank_list_item_behaviour"] = kwargs["blank_behaviour"]
    if kwargs.get("default_markers"):
        overrides["default_markers"] = list(kwargs["default_markers"])
    if overrides:
        config.lists = ListsConfig.model_validate(
            {**config.lists.model_dump(), **overrides}
        )

    options = EditorOptions(
        tab_size=kwargs.get("tab_size") or config.editor.tab_size,
        insert_spaces=(
            not kwargs["use_tabs"]
            if kwargs.get("use_tabs") is not None
            else config.editor.insert_spaces
        ),
    )
    return config, options


def operation_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by the continue, indent and outdent commands."""
    decorators = [
        click.argument(
            "file_path",
            type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
        ),
        click.option(
            "--cursor",
            "cursors",
            multiple=True,
            callback=parse_cursors,
            help="Cursor position as LINE:COL (zero-based, repeatable)",
        ),
        click.option(
            "--select",
            "selections",
            multiple=True,
            callback=parse_selections,
            help="Selection as LINE:COL-LINE:COL (zero-based, repeatable)",
        ),
        click.option(
            "--tab-size", "-t", type=click.IntRange(min=1), help="Tab width in columns"
        ),
        click.option(
            "--use-tabs/--use-spaces",
            default=None,
            help="Indent with tabs instead of spaces",
        ),
        click.option(
            "--blank-behaviour",
            type=click.Choice([b.value for b in BlankListItemBehaviour]),
            help="What Enter does on an empty list item",
        ),
        click.option(
            "--default-marker",
            "default_markers",
            multiple=True,
            help="Marker cycled through per level when none is found (repeatable)",
        ),
        click.option(
            "--config",
            "-c",
            "config_path",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            help="Path to a cleverlists config.yaml",
        ),
        click.option(
            "--dry-run",
            "-n",
            is_flag=True,
            help="Show what would be done without making changes",
        ),
        click.option(
            "--backup-ext", "-b", default=None, help="Keep a backup with this extension"
        ),
        click.option("--verbose", "-v", is_flag=True, help="Enable verbose output"),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def _run(name: str, operation: Operation, **kwargs: Any) -> None:
    logger = setup_logger(kwargs["verbose"])
    file_path: Path = kwargs["file_path"]
    selections = [*kwargs["cursors"], *kwargs["selections"]]
    if not selections:
        raise click.UsageError("Give at least one --cursor or --select")

    try:
        config, options = get_config_or_default(
            file_path,
            kwargs["config_path"],
            tab_size=kwargs["tab_size"],
            use_tabs=kwargs["use_tabs"],
            blank_behaviour=kwargs["blank_behaviour"],
            default_markers=kwargs["default_markers"],
        )
        if kwargs["dry_run"]:
            logger.info(f"DRY RUN: {name} on {file_path}")
        else:
            logger.info(f"{name.capitalize()} on {file_path}")

        change = process_file(
            file_path,
            operation,
            selections,
            options,
            config.lists,
            dry_run=kwargs["dry_run"],
            backup_ext=kwargs["backup_ext"],
        )
        log_change(change, kwargs["dry_run"])
        if kwargs["dry_run"]:
            print_diff(change)
    except Exception as e:
        logger.error(f"Error running {name}: {e}")
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(version=__version__, prog_name="cleverlists")
def cli() -> None:
    """Context-aware continue, indent and outdent for markdown lists.

    Positions are zero-based LINE:COL pairs. Each command edits FILE_PATH in
    place, the way the matching editor command would.
    """


@cli.command(name="continue")
@operation_options
def continue_(**kwargs: Any) -> None:
    """Press Enter at each cursor.

    FILE_PATH: Markdown file to edit

    This will:
    - Start a new list item below non-empty items, numbering ordered lists
    - Outdent or remove empty list items
    - Insert a plain newline when any cursor is not at the end of a list item
    """
    _run("continue", continue_list, **kwargs)


@cli.command()
@operation_options
def indent(**kwargs: Any) -> None:
    """Indent the list items under each selection by one level.

    FILE_PATH: Markdown file to edit
    """
    _run("indent", indent_selection, **kwargs)


@cli.command()
@operation_options
def outdent(**kwargs: Any) -> None:
    """Outdent the list items under each selection by one level.

    FILE_PATH: Markdown file to edit
    """
    _run("outdent", outdent_selection, **kwargs)


@cli.command()
@click.argument(
    "file_path",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
)
@click.option("--tab-size", "-t", type=click.IntRange(min=1), help="Tab width in columns")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a cleverlists config.yaml",
)
def parse(file_path: Path, tab_size: int | None, config_path: Path | None) -> None:
    """Show how each list line of a file is parsed.

    FILE_PATH: Markdown file to inspect
    """
    _, options = get_config_or_default(file_path, config_path, tab_size=tab_size)
    table = Table(title=f"List items in {file_path}")
    table.add_column("Line", justify="right", style="cyan")
    table.add_column("Level", justify="right")
    table.add_column("Marker")
    table.add_column("Kind")
    table.add_column("Content")

    text = file_path.read_text(encoding="utf-8")
    for number, line in enumerate(text.split("\n")):
        parsed = parse_line(line, options.tab_size)
        if parsed is None:
            continue
        table.add_row(
            str(number),
            str(parsed.level),
            repr(parsed.full_marker),
            parsed.kind.value,
            parsed.content,
        )
    console.print(table)


@cli.command()
@click.argument(
    "directory",
    type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "--overwrite-config",
    is_flag=True,
    help="Overwrite existing config.yaml if it exists",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def init(directory: Path, overwrite_config: bool, verbose: bool) -> None:
    """Create .cleverlists/config.yaml with default values.

    DIRECTORY: Directory whose markdown files the config applies to
    """
    logger = setup_logger(verbose)

    config_path = config_path_for(directory)
    if config_path.exists() and not overwrite_config:
        message = (
            f"config.yaml already exists at {config_path}. "
            "Use --overwrite-config to overwrite."
        )
        logger.error(message)
        raise click.ClickException(message)

    try:
        directory.mkdir(parents=True, exist_ok=True)
        written = save_config(Config(), directory)
        logger.info(f"Created {written} with default values")
    except OSError as e:
        logger.error(f"Error writing config: {e}")
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    cli()
