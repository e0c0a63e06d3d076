"""CLI interface for selrange using Typer"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from selrange import __version__
from selrange.core.config import (
    load_config_or_default,
    create_config,
    config_exists,
    get_config_path,
    ConfigInvalidError,
)
from selrange.core.snapshot import load_snapshot, save_snapshot, SnapshotInvalidError
from selrange.errors import SelectionError
from selrange.models.editor_state import EditorState
from selrange.models.range import Range
from selrange.utils.logging import get_logger, setup_logging

app = typer.Typer(
    name="selrange",
    help="Inspect and edit multi-range selection snapshots",
    invoke_without_command=True,
)
console = Console()
LOGGER = get_logger(__name__)


def version_callback(value: bool):
    if value:
        console.print(f"selrange version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", callback=version_callback, help="Show version"
    ),
):
    """selrange - multi-range selection snapshots

    Snapshots are YAML files holding document text and its selection.
    """
    try:
        config = load_config_or_default()
    except ConfigInvalidError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    setup_logging(config.log_level_number)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def _load_or_exit(snapshot_file: Path) -> EditorState:
    try:
        return load_snapshot(snapshot_file)
    except FileNotFoundError:
        console.print(f"[red]Error:[/red] Snapshot not found: {snapshot_file}")
        raise typer.Exit(1)
    except SnapshotInvalidError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _render(state: EditorState, title: str) -> None:
    table = Table(title=title)
    table.add_column("", style="bold yellow")
    table.add_column("#", style="cyan")
    table.add_column("Anchor")
    table.add_column("Focus")
    table.add_column("Direction")
    table.add_column("Text", style="green")

    selection = state.selection
    for index, range_ in enumerate(selection.ranges):
        marker = "*" if index == selection.focused_range_index else ""
        direction = "backwards" if range_.is_backwards else "forwards"
        preview = state.text[range_.first_offset:range_.last_offset]
        if len(preview) > 30:
            preview = preview[:30] + "..."
        table.add_row(
            marker,
            str(index),
            str(range_.anchor_offset),
            str(range_.focus_offset),
            direction,
            escape(preview.replace("\n", " ")),
        )

    console.print(table)


def _apply(snapshot_file: Path, operation) -> EditorState:
    """Apply a selection operation, save the snapshot, and show it"""
    state = _load_or_exit(snapshot_file)
    try:
        new_state = state.with_selection(operation(state.selection))
    except SelectionError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    save_snapshot(snapshot_file, new_state)
    LOGGER.info("Saved %d range(s) to %s", new_state.selection.range_count, snapshot_file)
    _render(new_state, str(snapshot_file))
    return new_state


@app.command()
def init(
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level name"),
):
    """Create .selrange/config.yaml configuration file"""
    if config_exists():
        if not typer.confirm("Config file already exists. Overwrite?"):
            raise typer.Exit(0)

    try:
        config = create_config(log_level)
    except ValueError as e:
        console.print(f"[red]Error creating config:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(f"[green]Created:[/green] {get_config_path()}")
    console.print(f"[dim]Log level:[/dim] {config.log_level}")


@app.command()
def show(
    snapshot_file: Path = typer.Argument(..., help="Snapshot YAML file"),
):
    """Show the ranges in a snapshot"""
    state = _load_or_exit(snapshot_file)
    _render(state, str(snapshot_file))


@app.command()
def normalize(
    snapshot_file: Path = typer.Argument(..., help="Snapshot YAML file"),
    write: bool = typer.Option(False, "--write", "-w", help="Save the result"),
):
    """Merge overlapping ranges in a snapshot"""
    state = _load_or_exit(snapshot_file)
    try:
        new_state = state.with_selection(state.selection.normalize())
    except SelectionError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    merged = state.selection.range_count - new_state.selection.range_count
    console.print(f"[dim]Merged away {merged} range(s)[/dim]")
    if write:
        save_snapshot(snapshot_file, new_state)
        console.print(f"[green]Saved:[/green] {snapshot_file}")
    _render(new_state, str(snapshot_file))


@app.command()
def add(
    snapshot_file: Path = typer.Argument(..., help="Snapshot YAML file"),
    anchor: int = typer.Option(..., "--anchor", "-a", help="Anchor offset"),
    focus: int = typer.Option(..., "--focus", "-f", help="Focus offset"),
):
    """Add a range and focus it"""
    _apply(
        snapshot_file,
        lambda selection: selection.add_range(Range(anchor_offset=anchor, focus_offset=focus)),
    )


@app.command()
def remove(
    snapshot_file: Path = typer.Argument(..., help="Snapshot YAML file"),
    index: int = typer.Argument(..., help="Index of the range to remove"),
):
    """Remove the range at an index"""
    _apply(snapshot_file, lambda selection: selection.remove_range_at_index(index))


@app.command()
def focus(
    snapshot_file: Path = typer.Argument(..., help="Snapshot YAML file"),
    index: int = typer.Argument(..., help="Index of the range to focus"),
):
    """Change which range is focused"""
    _apply(snapshot_file, lambda selection: selection.set_focused_range_index(index))


def main():
    """Entry point for CLI"""
    app()


if __name__ == "__main__":
    main()
