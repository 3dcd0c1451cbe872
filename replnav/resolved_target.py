"""Data model for a location that can be opened and navigated to."""

from dataclasses import dataclass

from replnav.lookup_result import DirectLocation


@dataclass(frozen=True)
class ResolvedTarget:
    """Represents a directly openable file plus a 1-based line/column."""

    path: str
    line: str
    column: str

    @classmethod
    def from_direct(cls, location: DirectLocation) -> "ResolvedTarget":
        """Project an on-disk lookup result onto a navigation target."""
        return cls(location.file, location.line, location.column)
