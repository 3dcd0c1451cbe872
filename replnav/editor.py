"""Interface of the host editor that navigation is performed in."""

from enum import Enum
from typing import Protocol


class OpenOutcome(Enum):
    """Result of asking the editor to switch to another file."""

    OK = "ok"
    CONFLICT = "conflict"  # active buffer has unsaved changes


class Editor(Protocol):
    """Buffer, cursor and notification primitives of a host editor."""

    def current_file(self) -> str:
        """Path of the active buffer ("" for an unnamed buffer)."""
        ...

    def mark_jump(self) -> None:
        """Push the current position onto the jump history."""
        ...

    def open_file(self, path: str) -> OpenOutcome:
        """Make path the active buffer without adding jump-list entries."""
        ...

    def set_cursor(self, line: int, column: int) -> None:
        """Place the cursor at a 1-based line/column."""
        ...

    def center_view(self) -> None:
        """Scroll so the cursor line is vertically centered."""
        ...

    def warn(self, message: str) -> None:
        """Show a warning to the user."""
        ...
