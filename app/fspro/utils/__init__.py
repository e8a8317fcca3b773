"""Utility modules for fspro.

This module exports commonly used utility functions.
"""

from fspro.utils.formatting import (
    console,
    create_table,
    err_console,
    format_size,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from fspro.utils.shell import CommandResult, find_command, run_command

__all__ = [
    "CommandResult",
    "console",
    "create_table",
    "err_console",
    "find_command",
    "format_size",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
]
