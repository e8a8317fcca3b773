"""Include/exclude name filtering shared by packing and transfers.

A name participates in an operation when it is not listed in
``excludes`` and, if ``includes`` is non-empty, is listed there.
Matching is exact string equality on the display name (base name plus
extension); there is no glob, prefix or case-insensitive matching.
Excludes always win over includes.
"""

from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fspro.filesystem.queries import full_name


def passes(display_name: str, includes: Sequence[str], excludes: Sequence[str]) -> bool:
    """Decide whether a display name participates in an operation.

    Args:
        display_name: Base name of the entry including its extension.
        includes: Names to keep. Empty means every name is kept.
        excludes: Names to drop. Takes precedence over ``includes``.

    Returns:
        True if the entry should be processed.
    """
    if display_name in excludes:
        return False
    if includes and display_name not in includes:
        return False
    return True


class FilterOptions(BaseModel):
    """Include/exclude name lists for a single operation.

    Either field may be omitted or given as None; both default to an
    empty list. A name present in both lists is excluded.

    Attributes:
        includes: Display names to process. Empty means all names.
        excludes: Display names to skip.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    includes: Annotated[
        list[str],
        Field(default_factory=list, description="Names to process (empty = all)"),
    ]
    excludes: Annotated[
        list[str],
        Field(default_factory=list, description="Names to skip"),
    ]

    @field_validator("includes", "excludes", mode="before")
    @classmethod
    def none_as_empty(cls, v: object) -> object:
        """Treat an explicit None like an omitted list."""
        return [] if v is None else v

    @classmethod
    def resolve(cls, options: "FilterOptions | Mapping[str, Any] | None") -> "FilterOptions":
        """Build FilterOptions from whatever the caller supplied.

        Args:
            options: Existing options, a mapping with ``includes`` and/or
                ``excludes`` keys, or None for no filtering.

        Returns:
            A FilterOptions instance.
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(dict(options))

    @property
    def is_empty(self) -> bool:
        """Whether these options let every name through."""
        return not self.includes and not self.excludes

    def passes(self, display_name: str) -> bool:
        """Check a display name against these options."""
        return passes(display_name, self.includes, self.excludes)

    def select(self, paths: Iterable[Path]) -> list[Path]:
        """Keep the paths whose display name passes, preserving order.

        Args:
            paths: Candidate paths.

        Returns:
            The passing paths in their original order.
        """
        return [path for path in paths if self.passes(full_name(path))]
