"""CLI commands for fspro.

This package contains all subcommand implementations.
"""

from fspro.cli.commands import archive, config, fs

__all__ = ["archive", "config", "fs"]
