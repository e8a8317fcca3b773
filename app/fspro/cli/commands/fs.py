"""Filesystem commands.

Provides commands to move a filtered selection of a directory's
children, show metadata for a path and open a path on the desktop.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Annotated

import typer

from fspro.cli.types import (
    ExcludeOption,
    IncludeOption,
    OutputFormat,
    get_config,
    resolve_filters,
)
from fspro.filesystem.errors import FsproError, LaunchError, TransferError
from fspro.filesystem.launcher import open_path
from fspro.filesystem.mover import select_candidates, transfer
from fspro.filesystem.queries import Metadata, metadata
from fspro.utils.formatting import (
    console,
    create_table,
    format_size,
    print_error,
    print_info,
    print_success,
)

app = typer.Typer(
    help="Move, inspect and open filesystem paths.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def move(
    source: Annotated[
        Path,
        typer.Argument(help="Directory whose children are moved."),
    ],
    destination: Annotated[
        Path,
        typer.Argument(help="Directory to move into (created if missing)."),
    ],
    include: IncludeOption = None,
    exclude: ExcludeOption = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Show what would be moved."),
    ] = False,
) -> None:
    """Move the children of SOURCE into DESTINATION.

    Only SOURCE's immediate children are considered. Entries that
    already exist in DESTINATION are overwritten.

    Examples:
        fspro fs move ~/Downloads ~/archive -x keep.txt
        fspro fs move old new -i photos -i notes.md --dry-run
    """
    filters = resolve_filters(include, exclude, get_config())

    if dry_run:
        try:
            candidates = select_candidates(source, filters)
        except TransferError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e
        _print_move_plan(candidates, destination)
        print_info(f"[DRY-RUN] {len(candidates)} entries would be moved.")
        return

    try:
        moved = transfer(source, destination, filters)
    except TransferError as e:
        print_error(str(e))
        print_info("Entries moved before the failure were kept.")
        raise typer.Exit(code=1) from e

    print_success(f"Moved {len(moved)} entries into {destination}")


@app.command()
def info(
    path: Annotated[
        Path,
        typer.Argument(help="Path to inspect."),
    ],
    omit_size: Annotated[
        bool,
        typer.Option("--omit-size", help="Skip the recursive size computation."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Show metadata for PATH."""
    try:
        meta = metadata(path, omit_size=omit_size)
    except FsproError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(meta.to_dict()))
        return

    _print_metadata(path, meta)


@app.command("open")
def open_command(
    path: Annotated[
        Path,
        typer.Argument(help="Path to open."),
    ],
    explorer: Annotated[
        bool,
        typer.Option("--explorer", "-e", help="Reveal in the file manager."),
    ] = False,
    enter_dir: Annotated[
        bool,
        typer.Option("--enter-dir", help="With --explorer, open a directory itself."),
    ] = False,
) -> None:
    """Open PATH in its default application or the file manager."""
    if not path.exists():
        print_error(f"Path does not exist: {path}")
        raise typer.Exit(code=1)

    try:
        open_path(path, explorer=explorer, enter_dir=enter_dir)
    except LaunchError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


# === Private helper functions ===


def _print_move_plan(candidates: list[Path], destination: Path) -> None:
    """Display planned moves."""
    table = create_table("Planned Moves (dry-run)")
    table.add_column("Source", style="bold")
    table.add_column("Destination", style="dim")
    table.add_column("Existing", width=10)

    for candidate in candidates:
        target = destination / candidate.name
        existing = "[warning]replace[/]" if target.exists() else "-"
        table.add_row(str(candidate), str(target), existing)

    console.print(table)


def _print_metadata(path: Path, meta: Metadata) -> None:
    """Display metadata as a two-column table."""
    table = create_table(str(path))
    table.add_column("Field", style="bold")
    table.add_column("Value")

    kind = "directory" if meta.is_dir else "file" if meta.is_file else "other"
    table.add_row("Name", meta.full_name)
    table.add_row("Stem", meta.name)
    table.add_row("Extension", meta.extname or "-")
    table.add_row("Type", f"[{kind}]{kind}[/]" if kind != "other" else kind)
    table.add_row("Symlink", "yes" if meta.is_symlink else "no")
    table.add_row("Size", format_size(meta.size))
    table.add_row("Modified", _format_millis(meta.modified_at))
    table.add_row("Accessed", _format_millis(meta.accessed_at))
    table.add_row("Created", _format_millis(meta.created_at))

    console.print(table)


def _format_millis(value: int) -> str:
    """Format unix milliseconds as a local timestamp."""
    if not value:
        return "-"
    return datetime.fromtimestamp(value / 1000).strftime("%Y-%m-%d %H:%M:%S")
