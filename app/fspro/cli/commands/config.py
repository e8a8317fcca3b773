"""Configuration commands.

Provides commands to show, create and locate the fspro config file.
"""

from typing import Annotated

import typer

from fspro.core.config import ConfigError, FsproConfig, load_config_or_default, save_config
from fspro.core.paths import get_config_path
from fspro.utils.formatting import (
    console,
    create_table,
    print_error,
    print_info,
    print_success,
    print_warning,
)

app = typer.Typer(
    help="Show and initialize the fspro configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective configuration."""
    config_path = get_config_path()
    try:
        config = load_config_or_default(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not config_path.exists():
        print_info(f"No config file at {config_path}, showing defaults.")

    table = create_table("Configuration")
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    table.add_row("compression_level", str(config.compression_level))
    table.add_row("filters.includes", ", ".join(config.filters.includes) or "-")
    table.add_row("filters.excludes", ", ".join(config.filters.excludes) or "-")
    console.print(table)


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing config file.",
        ),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    config_path = get_config_path()

    if config_path.exists():
        if not force:
            print_error(f"Config already exists: {config_path}")
            print_info("Use --force to overwrite.")
            raise typer.Exit(code=1)
        print_warning(f"Overwriting existing config: {config_path}")

    try:
        saved_path = save_config(FsproConfig(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config created: {saved_path}")


@app.command()
def path() -> None:
    """Print the config file location."""
    typer.echo(str(get_config_path()))
