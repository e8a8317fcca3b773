"""Filtered bulk move of a directory's immediate children.

``transfer`` lists one level of ``source_dir``, keeps the children whose
display name passes the include/exclude filters and moves each one into
``dest_dir`` as a whole unit. An existing entry of the same name at the
destination is replaced, never merged. Moves are committed one by one:
if a move fails, the candidates moved before it stay moved.
"""

import logging
import os
import shutil
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fspro.filesystem.errors import DirectoryCreationError, TransferError
from fspro.filesystem.filters import FilterOptions
from fspro.filesystem.queries import ensure_directory, full_name, list_children

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveOptions:
    """Policy for entries that already exist at the destination.

    Attributes:
        overwrite: Replace an existing destination entry.
        skip_exist: Leave the candidate in place when the destination
            entry exists. Ignored when ``overwrite`` is set.
    """

    overwrite: bool = True
    skip_exist: bool = False


def _is_same_entry(source: Path, target: Path) -> bool:
    """Whether ``target`` is ``source`` itself, possibly spelled differently."""
    # both share a name, so they are one entry exactly when the parents match
    try:
        return os.path.samefile(source.parent, target.parent)
    except OSError:
        return False


def _contains(candidate: Path, dest_dir: Path) -> bool:
    """Whether ``dest_dir`` is ``candidate`` or lies inside it."""
    # resolve the parent only so a symlinked candidate is not followed
    real = candidate.parent.resolve() / candidate.name
    return dest_dir.resolve().is_relative_to(real)


def _remove_existing(target: Path) -> None:
    if target.is_dir() and not target.is_symlink():
        shutil.rmtree(target)
    else:
        target.unlink()


def move_items(
    paths: Sequence[Path],
    dest_dir: Path,
    options: MoveOptions | None = None,
) -> list[Path]:
    """Move each path into ``dest_dir``, keeping its name.

    A path that already is its own destination entry is left untouched.

    Args:
        paths: Files or directories to move, in the order to move them.
        dest_dir: Existing directory to move into.
        options: Policy for existing destination entries. Defaults to
            overwriting.

    Returns:
        Destination paths of the entries that were moved.

    Raises:
        TransferError: On the first failure. Earlier moves are kept.
    """
    options = options or MoveOptions()
    moved: list[Path] = []

    for source in paths:
        target = dest_dir / full_name(source)
        try:
            if target.exists() or target.is_symlink():
                if _is_same_entry(source, target):
                    logger.debug("Skipping %s, already at destination", source)
                    continue
                if options.overwrite:
                    logger.debug("Replacing existing %s", target)
                    _remove_existing(target)
                elif options.skip_exist:
                    logger.debug("Skipping %s, destination exists", source)
                    continue
                else:
                    msg = f"Destination already exists: {target}"
                    raise TransferError(msg)

            shutil.move(source, target)
        except OSError as e:
            raise TransferError(f"Failed to move {source} to {target}: {e}") from e

        logger.debug("Moved %s to %s", source, target)
        moved.append(target)

    return moved


def select_candidates(
    source_dir: Path,
    options: FilterOptions | Mapping[str, Any] | None = None,
) -> list[Path]:
    """List the children of ``source_dir`` that pass the filters.

    Args:
        source_dir: Directory to list (one level, not recursive).
        options: Include/exclude filters.

    Returns:
        Absolute paths of passing children in listing order.

    Raises:
        TransferError: If the directory cannot be listed.
    """
    filters = FilterOptions.resolve(options)
    try:
        children = list_children(source_dir)
    except OSError as e:
        raise TransferError(f"Cannot list {source_dir}: {e}") from e
    return filters.select(children)


def transfer(
    source_dir: Path,
    dest_dir: Path,
    options: FilterOptions | Mapping[str, Any] | None = None,
) -> list[Path]:
    """Move the filtered children of ``source_dir`` into ``dest_dir``.

    ``dest_dir`` and its ancestors are created when missing. Existing
    destination entries with the same name are overwritten. A child that
    is ``dest_dir`` or contains it stays where it is, and when both
    directories are the same nothing is moved.

    Args:
        source_dir: Directory whose immediate children are moved.
        dest_dir: Directory to move them into.
        options: Include/exclude filters for the children's names.

    Returns:
        Destination paths of the moved entries.

    Raises:
        TransferError: If the destination cannot be created, the source
            cannot be listed, or a move fails.
    """
    try:
        ensure_directory(dest_dir)
    except DirectoryCreationError as e:
        raise TransferError(str(e)) from e

    candidates = [
        candidate
        for candidate in select_candidates(source_dir, options)
        if not _contains(candidate, dest_dir)
    ]
    moved = move_items(candidates, dest_dir, MoveOptions(overwrite=True, skip_exist=False))

    logger.info("Moved %d entries from %s to %s", len(moved), source_dir, dest_dir)
    return moved
