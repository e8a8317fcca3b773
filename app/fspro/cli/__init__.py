"""CLI package for fspro.

This package contains the Typer application and all subcommands.
"""

from fspro.cli.main import app

__all__ = ["app"]
