"""Data models for decoded backend lookup results."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EmptyResult:
    """The backend explicitly reported that no definition exists."""


@dataclass(frozen=True)
class NoTarget:
    """The response carried nothing actionable."""


@dataclass(frozen=True)
class DirectLocation:
    """A definition in an editable on-disk source file."""

    file: str
    line: str  # backend string form, converted at navigation
    column: str


@dataclass(frozen=True)
class ArchivedLocation:
    """A definition inside a member of an archive (e.g. a dependency jar)."""

    archive: str
    inner_path: str
    line: str
    column: str


LookupResult = EmptyResult | NoTarget | DirectLocation | ArchivedLocation
