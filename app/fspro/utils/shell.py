"""Shell execution utilities.

Thin wrappers over :mod:`subprocess` used to hand paths to desktop
helpers such as ``xdg-open``.
"""

import shutil
import subprocess
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


def run_command(
    args: list[str],
    *,
    timeout: float | None = 30.0,
) -> CommandResult:
    """Execute a command, wait for it and return the captured result.

    Args:
        args: Command and arguments to execute.
        timeout: Maximum time in seconds to wait for command.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=False,
        timeout=timeout,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def find_command(candidates: Iterable[str]) -> str | None:
    """Return the first command from ``candidates`` found on PATH.

    Args:
        candidates: Command names in order of preference.

    Returns:
        The first available command name, or None if none is installed.
    """
    for name in candidates:
        if shutil.which(name) is not None:
            return name
    return None
