"""Selective tar.gz packing and separator-normalizing unpacking.

``pack`` writes the immediate children of a directory into a gzip
compressed tar stream. Include/exclude filters apply to those top-level
names only: a directory that passes is archived as a whole subtree.

``unpack`` streams the records of a tar.gz archive back onto disk in
archive order. Stored paths may use either separator; backslashes are
rewritten before the path is resolved against the destination, and any
member that would land outside the destination is rejected.

Neither operation is transactional. A failed pack can leave a truncated
archive behind and a failed unpack keeps whatever it already wrote.
"""

import gzip
import logging
import os
import tarfile
import zlib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Any

from fspro.filesystem.errors import (
    ArchiveError,
    ArchiveFormatError,
    DirectoryCreationError,
    UnsafeArchiveEntryError,
)
from fspro.filesystem.filters import FilterOptions
from fspro.filesystem.queries import ensure_directory, full_name, list_children

logger = logging.getLogger(__name__)

# zlib's default trade-off between speed and ratio
DEFAULT_COMPRESSION_LEVEL = 6

# Errors raised by gzip/tarfile for a corrupt or truncated stream
_FORMAT_ERRORS = (tarfile.ReadError, gzip.BadGzipFile, EOFError, zlib.error)


@dataclass(frozen=True, slots=True)
class ArchiveEntry:
    """A record stored in an archive.

    Attributes:
        path: Relative path with forward-slash separators.
        size: Size of the stored content in bytes (0 for directories).
        is_dir: Whether the record is a directory.
    """

    path: str
    size: int
    is_dir: bool


def normalize_member_path(stored: str) -> str:
    """Rewrite a stored member path to forward-slash separators.

    Archives are written with forward slashes, but producers on other
    platforms may store backslashes. Empty and ``.`` segments are
    dropped; ``..`` segments are kept so the caller can reject them.

    Args:
        stored: Path as stored in the tar header.

    Returns:
        Normalized relative path, or an empty string for the archive root.
    """
    path = PurePosixPath(stored.replace("\\", "/"))
    return path.as_posix() if path.parts else ""


def _resolve_member(root: Path, stored: str) -> Path:
    """Resolve a stored member path against the destination root.

    Raises:
        UnsafeArchiveEntryError: If the path is absolute, names a drive,
            or escapes ``root`` through ``..`` segments.
    """
    relative = normalize_member_path(stored)
    if relative.startswith("/") or PureWindowsPath(relative).drive:
        raise UnsafeArchiveEntryError(f"Absolute path in archive: {stored!r}")

    target = Path(os.path.normpath(root.joinpath(*PurePosixPath(relative).parts)))
    if not target.is_relative_to(root):
        raise UnsafeArchiveEntryError(f"Archive entry escapes destination: {stored!r}")
    return target


def pack(
    source_dir: Path,
    dest_file: Path,
    options: FilterOptions | Mapping[str, Any] | None = None,
    *,
    compression_level: int = DEFAULT_COMPRESSION_LEVEL,
) -> int:
    """Compress the children of a directory into a tar.gz archive.

    Only the immediate children of ``source_dir`` are filtered. Files
    are stored under their display name; directories that pass are
    stored recursively with every descendant, rooted at their display
    name. Rejected children leave no trace in the archive.

    Args:
        source_dir: Directory whose children are archived.
        dest_file: Archive file to create or overwrite.
        options: Include/exclude filters for the top-level names.
        compression_level: gzip level from 0 (store) to 9 (smallest).

    Returns:
        Number of top-level entries written to the archive.

    Raises:
        ArchiveError: If the source cannot be listed or any read or
            write fails. ``dest_file`` may be left truncated.
    """
    filters = FilterOptions.resolve(options)

    try:
        children = list_children(source_dir)
    except OSError as e:
        raise ArchiveError(f"Cannot read source directory {source_dir}: {e}") from e

    appended = 0
    try:
        with tarfile.open(dest_file, "w:gz", compresslevel=compression_level) as tar:
            for child in children:
                display_name = full_name(child)
                if not filters.passes(display_name):
                    logger.debug("Skipping %s (filtered)", child)
                    continue

                if child.is_file():
                    tar.add(child, arcname=display_name, recursive=False)
                else:
                    tar.add(child, arcname=display_name, recursive=True)
                logger.debug("Appended %s as %s", child, display_name)
                appended += 1
    except (OSError, tarfile.TarError) as e:
        raise ArchiveError(f"Failed to pack {source_dir} into {dest_file}: {e}") from e

    logger.info("Packed %d entries from %s into %s", appended, source_dir, dest_file)
    return appended


def unpack(source_file: Path, dest_dir: Path) -> int:
    """Extract a tar.gz archive into a directory.

    ``dest_dir`` and its ancestors are created when missing. Records are
    written in archive order; a later record for the same path replaces
    the earlier one.

    Args:
        source_file: Archive to read.
        dest_dir: Directory to extract into.

    Returns:
        Number of records extracted.

    Raises:
        ArchiveFormatError: If the gzip stream or a tar record is malformed.
        UnsafeArchiveEntryError: If a record would be written outside
            ``dest_dir``.
        ArchiveError: For any other I/O failure, including failure to
            create ``dest_dir``.
    """
    try:
        ensure_directory(dest_dir)
    except DirectoryCreationError as e:
        raise ArchiveError(str(e)) from e

    root = dest_dir.resolve()
    extracted = 0
    try:
        with tarfile.open(source_file, "r:gz") as tar:
            for member in tar:
                target = _resolve_member(root, member.name)
                if target == root:
                    continue

                member.name = target.relative_to(root).as_posix()
                if member.islnk():
                    member.linkname = normalize_member_path(member.linkname)
                tar.extract(member, root, filter="data")
                logger.debug("Extracted %s", target)
                extracted += 1
    except tarfile.FilterError as e:
        raise UnsafeArchiveEntryError(f"Refused archive entry in {source_file}: {e}") from e
    except _FORMAT_ERRORS as e:
        raise ArchiveFormatError(f"Malformed archive {source_file}: {e}") from e
    except (OSError, tarfile.TarError) as e:
        raise ArchiveError(f"Failed to unpack {source_file} into {dest_dir}: {e}") from e

    logger.info("Unpacked %d entries from %s into %s", extracted, source_file, dest_dir)
    return extracted


def list_members(source_file: Path) -> list[ArchiveEntry]:
    """Read the records of a tar.gz archive without extracting them.

    Args:
        source_file: Archive to read.

    Returns:
        One ArchiveEntry per record, in archive order, with normalized paths.

    Raises:
        ArchiveFormatError: If the archive is malformed.
        ArchiveError: If the archive cannot be read.
    """
    try:
        with tarfile.open(source_file, "r:gz") as tar:
            return [
                ArchiveEntry(
                    path=normalize_member_path(member.name),
                    size=0 if member.isdir() else member.size,
                    is_dir=member.isdir(),
                )
                for member in tar
            ]
    except _FORMAT_ERRORS as e:
        raise ArchiveFormatError(f"Malformed archive {source_file}: {e}") from e
    except (OSError, tarfile.TarError) as e:
        raise ArchiveError(f"Failed to read {source_file}: {e}") from e
