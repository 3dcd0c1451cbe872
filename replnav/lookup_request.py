"""Data model for a single definition lookup request."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class LookupRequest:
    """A symbol to resolve, as seen from one source file."""

    source_file: Path  # absolute
    symbol: str

    @classmethod
    def build(cls, current_file: str | Path, symbol: str) -> "LookupRequest":
        """Build a request from the active file and the word under the cursor."""
        return cls(Path(current_file).absolute(), symbol.strip())

    def argv(self) -> list[str]:
        """Backend arguments for the definition lookup."""
        return ["find_def", str(self.source_file), self.symbol]
