"""Archive commands.

Provides commands to pack a directory into a tar.gz archive, unpack an
archive into a directory and list the records of an archive.
"""

import json
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
from fspro.filesystem.archive import ArchiveEntry, list_members, pack, unpack
from fspro.filesystem.errors import ArchiveError
from fspro.utils.formatting import (
    console,
    create_table,
    format_size,
    print_error,
    print_info,
    print_success,
)

app = typer.Typer(
    help="Pack and unpack tar.gz archives.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command("pack")
def pack_command(
    source: Annotated[
        Path,
        typer.Argument(help="Directory whose children are archived."),
    ],
    destination: Annotated[
        Path,
        typer.Argument(help="Archive file to create (overwritten if present)."),
    ],
    include: IncludeOption = None,
    exclude: ExcludeOption = None,
    level: Annotated[
        int | None,
        typer.Option(
            "--level",
            "-l",
            min=0,
            max=9,
            help="gzip compression level (0-9). Defaults to the configured level.",
        ),
    ] = None,
) -> None:
    """Compress the children of SOURCE into the tar.gz file DESTINATION.

    Filters match the exact names of SOURCE's immediate children; a
    directory that passes is archived with everything inside it.

    Examples:
        fspro archive pack ~/data backup.tar.gz
        fspro archive pack ~/data backup.tar.gz -x cache -x .DS_Store
        fspro archive pack ~/data notes.tar.gz -i notes -i todo.md
    """
    config = get_config()
    filters = resolve_filters(include, exclude, config)
    compression_level = config.compression_level if level is None else level

    if not filters.is_empty:
        print_info(_describe_filters(filters.includes, filters.excludes))

    try:
        count = pack(source, destination, filters, compression_level=compression_level)
    except ArchiveError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Packed {count} entries into {destination}")


@app.command("unpack")
def unpack_command(
    source: Annotated[
        Path,
        typer.Argument(help="tar.gz archive to extract."),
    ],
    destination: Annotated[
        Path,
        typer.Argument(help="Directory to extract into (created if missing)."),
    ],
) -> None:
    """Extract the tar.gz file SOURCE into DESTINATION."""
    try:
        count = unpack(source, destination)
    except ArchiveError as e:
        print_error(str(e))
        print_info("Entries extracted before the failure were kept.")
        raise typer.Exit(code=1) from e

    print_success(f"Unpacked {count} entries into {destination}")


@app.command("list")
def list_command(
    source: Annotated[
        Path,
        typer.Argument(help="tar.gz archive to read."),
    ],
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
    """List the records stored in the tar.gz file SOURCE."""
    try:
        entries = list_members(source)
    except ArchiveError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        data = [{"path": e.path, "size": e.size, "is_dir": e.is_dir} for e in entries]
        console.print_json(json.dumps(data))
        return

    if not entries:
        print_info("Archive is empty.")
        return

    _print_table(source, entries)


# === Private helper functions ===


def _describe_filters(includes: list[str], excludes: list[str]) -> str:
    """Summarize active filters in one line."""
    parts: list[str] = []
    if includes:
        parts.append(f"including {', '.join(includes)}")
    if excludes:
        parts.append(f"excluding {', '.join(excludes)}")
    return "Filters: " + "; ".join(parts)


def _print_table(source: Path, entries: list[ArchiveEntry]) -> None:
    """Display archive records as a Rich table."""
    table = create_table(f"Contents of {source.name}")
    table.add_column("Path", no_wrap=True)
    table.add_column("Type", width=10)
    table.add_column("Size", justify="right", width=10)

    for entry in entries:
        if entry.is_dir:
            table.add_row(f"[directory]{entry.path}/[/]", "directory", "-")
        else:
            table.add_row(f"[file]{entry.path}[/]", "file", format_size(entry.size))

    console.print(table)

    total = sum(e.size for e in entries)
    console.print(f"\n[dim]{len(entries)} records ({format_size(total)} uncompressed)[/dim]")
