"""Shared types and utilities for CLI commands.

This module provides common enums, option types and helper functions
used across multiple CLI command modules to avoid code duplication.
"""

from enum import Enum
from typing import Annotated

import typer

from fspro.core.config import ConfigError, FsproConfig, load_config_or_default
from fspro.filesystem.filters import FilterOptions
from fspro.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options for commands that print data."""

    TABLE = "table"
    JSON = "json"


IncludeOption = Annotated[
    list[str] | None,
    typer.Option(
        "--include",
        "-i",
        help="Only process entries with this exact name (repeatable).",
    ),
]

ExcludeOption = Annotated[
    list[str] | None,
    typer.Option(
        "--exclude",
        "-x",
        help="Skip entries with this exact name (repeatable).",
    ),
]


def get_config() -> FsproConfig:
    """Load the user configuration or exit with an error.

    Returns:
        The user's FsproConfig, or defaults when no config file exists.

    Raises:
        typer.Exit: If the config file exists but is invalid.
    """
    try:
        return load_config_or_default()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def resolve_filters(
    includes: list[str] | None,
    excludes: list[str] | None,
    config: FsproConfig,
) -> FilterOptions:
    """Build the filters for a command.

    Filters given on the command line replace the configured defaults
    entirely; the defaults apply only when neither flag is passed.

    Args:
        includes: Values of ``--include``.
        excludes: Values of ``--exclude``.
        config: Loaded user configuration.

    Returns:
        FilterOptions for the operation.
    """
    if not includes and not excludes:
        return config.filters
    return FilterOptions(includes=includes or [], excludes=excludes or [])
