"""Exception hierarchy for filesystem operations.

Every error carries the text of the underlying cause in its message and
is raised with the original exception chained as ``__cause__``.
"""


class FsproError(Exception):
    """Base exception for all fspro filesystem errors."""


class DirectoryCreationError(FsproError):
    """Raised when a directory or one of its ancestors cannot be created."""


class ArchiveError(FsproError):
    """Raised when packing or unpacking an archive fails."""


class ArchiveFormatError(ArchiveError):
    """Raised when an archive's gzip stream or tar records are malformed."""


class UnsafeArchiveEntryError(ArchiveError):
    """Raised when an archive member would be written outside the destination."""


class TransferError(FsproError):
    """Raised when listing or moving entries during a transfer fails."""


class LaunchError(FsproError):
    """Raised when a path cannot be handed to the desktop environment."""
