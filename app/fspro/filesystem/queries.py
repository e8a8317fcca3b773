"""Simple path queries: existence, type, size, names and metadata.

These are one-call wrappers over :mod:`pathlib` and :mod:`os` used by
the archive and transfer operations and exposed through ``fspro info``.
"""

import logging
import os
from collections.abc import Callable
from dataclasses import asdict, dataclass
from pathlib import Path

from fspro.filesystem.errors import DirectoryCreationError, FsproError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Metadata:
    """Metadata snapshot of a filesystem path.

    Attributes:
        size: Size in bytes (recursive for directories, 0 if omitted).
        name: Name without extension.
        full_name: Display name, including the extension for files.
        extname: Extension without the leading dot.
        is_dir: Whether the path is a directory.
        is_file: Whether the path is a regular file.
        is_exist: Whether the path exists.
        is_symlink: Whether the path is a symbolic link.
        is_absolute: Whether the path is absolute.
        is_relative: Whether the path is relative.
        accessed_at: Last access time in unix milliseconds.
        created_at: Creation time in unix milliseconds.
        modified_at: Last modification time in unix milliseconds.
    """

    size: int
    name: str
    full_name: str
    extname: str
    is_dir: bool
    is_file: bool
    is_exist: bool
    is_symlink: bool
    is_absolute: bool
    is_relative: bool
    accessed_at: int
    created_at: int
    modified_at: int

    def to_dict(self) -> dict[str, object]:
        """Serialize to a camelCase dictionary for JSON output."""
        return {_camel_case(key): value for key, value in asdict(self).items()}


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def is_exist(path: Path) -> bool:
    """Whether the path exists."""
    return path.exists()


def is_dir(path: Path) -> bool:
    """Whether the path is a directory."""
    return path.is_dir()


def is_file(path: Path) -> bool:
    """Whether the path is a regular file."""
    return path.is_file()


def size(path: Path) -> int:
    """Get the size of a path in bytes, or 0 if it cannot be read.

    Directories are measured recursively; symbolic links inside a
    directory are not followed.

    Args:
        path: File or directory to measure.

    Returns:
        Total size in bytes.
    """
    try:
        if not path.is_dir():
            return path.stat().st_size
        total = 0
        for root, _dirs, files in os.walk(path):
            for filename in files:
                total += os.lstat(os.path.join(root, filename)).st_size
        return total
    except OSError as e:
        logger.debug("Cannot determine size of %s: %s", path, e)
        return 0


def name(path: Path) -> str:
    """Get the name of a path without its extension."""
    return path.stem


def full_name(path: Path) -> str:
    """Get the display name of a path, including the extension."""
    return path.name


def extname(path: Path) -> str:
    """Get the extension of a path without the leading dot."""
    return path.suffix.removeprefix(".")


def list_children(directory: Path) -> list[Path]:
    """List the immediate children of a directory.

    The listing is a point-in-time snapshot in the order the OS reports
    it; it is not sorted and does not recurse.

    Args:
        directory: Directory to list.

    Returns:
        Absolute paths of every file and directory directly inside.

    Raises:
        OSError: If the directory cannot be read.
    """
    base = directory.absolute()
    with os.scandir(base) as entries:
        return [base / entry.name for entry in entries]


def ensure_directory(path: Path) -> Path:
    """Create a directory and all missing ancestors.

    Succeeds if the directory already exists.

    Args:
        path: Directory to create.

    Returns:
        The directory path.

    Raises:
        DirectoryCreationError: If the directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        msg = f"Cannot create directory {path}: {e}"
        raise DirectoryCreationError(msg) from e
    return path


def _unix_millis(read_time: Callable[[], float]) -> int:
    try:
        return int(read_time() * 1000)
    except (AttributeError, OSError):
        return 0


def metadata(path: Path, omit_size: bool = False) -> Metadata:
    """Collect metadata for a path.

    Args:
        path: Path to inspect.
        omit_size: Skip the (potentially recursive) size computation and
            report 0 instead.

    Returns:
        Metadata for the path.

    Raises:
        FsproError: If the path cannot be stat'ed.
    """
    try:
        stat = path.stat()
    except OSError as e:
        raise FsproError(f"Cannot read metadata of {path}: {e}") from e

    return Metadata(
        size=0 if omit_size else size(path),
        name=name(path),
        full_name=full_name(path),
        extname=extname(path),
        is_dir=path.is_dir(),
        is_file=path.is_file(),
        is_exist=path.exists(),
        is_symlink=path.is_symlink(),
        is_absolute=path.is_absolute(),
        is_relative=not path.is_absolute(),
        accessed_at=_unix_millis(lambda: stat.st_atime),
        created_at=_unix_millis(lambda: stat.st_birthtime),  # type: ignore[attr-defined]
        modified_at=_unix_millis(lambda: stat.st_mtime),
    )
