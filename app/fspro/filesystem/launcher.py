"""Open paths in the default application or the file manager."""

import logging
import subprocess
import sys
from pathlib import Path

from fspro.filesystem.errors import LaunchError
from fspro.utils.shell import find_command, run_command

logger = logging.getLogger(__name__)

# Openers tried in order on Linux and other freedesktop systems
_LINUX_OPENERS = ("xdg-open", "gio", "kde-open", "gnome-open")


def _open_command(path: Path) -> list[str]:
    if sys.platform == "darwin":
        return ["open", str(path)]
    if sys.platform == "win32":
        return ["explorer", str(path)]

    opener = find_command(_LINUX_OPENERS)
    if opener is None:
        msg = f"No opener found (tried {', '.join(_LINUX_OPENERS)})"
        raise LaunchError(msg)
    if opener == "gio":
        return ["gio", "open", str(path)]
    return [opener, str(path)]


def _reveal_command(path: Path) -> list[str]:
    if sys.platform == "darwin":
        return ["open", "-R", str(path)]
    if sys.platform == "win32":
        return ["explorer", f"/select,{path}"]
    # freedesktop openers cannot select an item, so show its parent
    return _open_command(path.parent)


def open_path(path: Path, explorer: bool = False, enter_dir: bool = False) -> None:
    """Open a path in the default application or reveal it in the file manager.

    Args:
        path: Path to open.
        explorer: Show the path in the file manager instead of opening it.
        enter_dir: With ``explorer``, open a directory itself rather than
            revealing it inside its parent.

    Raises:
        LaunchError: If no opener is available or the opener fails.
    """
    if explorer and not (path.is_dir() and enter_dir):
        args = _reveal_command(path)
    else:
        args = _open_command(path)

    logger.debug("Launching %s", args)
    try:
        result = run_command(args)
    except (OSError, subprocess.TimeoutExpired) as e:
        raise LaunchError(f"Failed to open {path}: {e}") from e

    # explorer.exe reports 1 even on success
    if not result.success and sys.platform != "win32":
        raise LaunchError(result.stderr.strip() or f"Failed to open {path}")
