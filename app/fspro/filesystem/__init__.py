"""Filesystem operations.

This module provides name filtering, selective tar.gz packing and
unpacking, filtered bulk transfers and simple path queries.
"""

from fspro.filesystem.archive import ArchiveEntry, list_members, pack, unpack
from fspro.filesystem.errors import (
    ArchiveError,
    ArchiveFormatError,
    DirectoryCreationError,
    FsproError,
    LaunchError,
    TransferError,
    UnsafeArchiveEntryError,
)
from fspro.filesystem.filters import FilterOptions, passes
from fspro.filesystem.launcher import open_path
from fspro.filesystem.mover import MoveOptions, move_items, select_candidates, transfer
from fspro.filesystem.queries import Metadata, metadata

__all__ = [
    "ArchiveEntry",
    "ArchiveError",
    "ArchiveFormatError",
    "DirectoryCreationError",
    "FilterOptions",
    "FsproError",
    "LaunchError",
    "Metadata",
    "MoveOptions",
    "TransferError",
    "UnsafeArchiveEntryError",
    "list_members",
    "metadata",
    "move_items",
    "open_path",
    "pack",
    "passes",
    "select_candidates",
    "transfer",
    "unpack",
]
