"""Asynchronous entry points for the filesystem operations.

Each coroutine runs the blocking operation on a worker thread and
resolves once it has completed or failed. There is no progress
reporting, cancellation or timeout, and no locking between calls that
touch overlapping paths.
"""

import asyncio
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from fspro.filesystem import archive, mover, queries
from fspro.filesystem.filters import FilterOptions
from fspro.filesystem.queries import Metadata


async def pack(
    source_dir: Path,
    dest_file: Path,
    options: FilterOptions | Mapping[str, Any] | None = None,
    *,
    compression_level: int = archive.DEFAULT_COMPRESSION_LEVEL,
) -> int:
    """Run :func:`fspro.filesystem.archive.pack` on a worker thread."""
    return await asyncio.to_thread(
        archive.pack,
        source_dir,
        dest_file,
        options,
        compression_level=compression_level,
    )


async def unpack(source_file: Path, dest_dir: Path) -> int:
    """Run :func:`fspro.filesystem.archive.unpack` on a worker thread."""
    return await asyncio.to_thread(archive.unpack, source_file, dest_dir)


async def transfer(
    source_dir: Path,
    dest_dir: Path,
    options: FilterOptions | Mapping[str, Any] | None = None,
) -> list[Path]:
    """Run :func:`fspro.filesystem.mover.transfer` on a worker thread."""
    return await asyncio.to_thread(mover.transfer, source_dir, dest_dir, options)


async def metadata(path: Path, omit_size: bool = False) -> Metadata:
    """Run :func:`fspro.filesystem.queries.metadata` on a worker thread."""
    return await asyncio.to_thread(queries.metadata, path, omit_size)


async def size(path: Path) -> int:
    """Run :func:`fspro.filesystem.queries.size` on a worker thread."""
    return await asyncio.to_thread(queries.size, path)
