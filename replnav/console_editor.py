"""An in-memory editor that reports navigation as ``path:line:column`` text."""

import sys
from typing import TextIO

from replnav.editor import OpenOutcome


class ConsoleEditor:
    """Tracks buffer, cursor and jump history, and prints where it lands.

    The printed ``path:line:column`` form is what grep-style consumers such as
    ``vim -q`` or an editor's "go to location" command accept.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        current_file: str = "",
        *,
        modified: bool = False,
    ) -> None:
        """Initialize with an output stream and the active buffer."""
        self.stream = stream if stream is not None else sys.stdout
        self.active_file = current_file
        self.modified = modified
        self.cursor = (1, 1)
        self.jump_list: list[tuple[str, int, int]] = []
        self.open_calls = 0

    def current_file(self) -> str:
        """Path of the active buffer."""
        return self.active_file

    def mark_jump(self) -> None:
        """Push the active file and cursor onto the jump list."""
        self.jump_list.append((self.active_file, *self.cursor))

    def open_file(self, path: str) -> OpenOutcome:
        """Switch buffers unless the active one has unsaved changes."""
        self.open_calls += 1
        if self.modified and path != self.active_file:
            return OpenOutcome.CONFLICT
        self.active_file = path
        self.modified = False
        self.cursor = (1, 1)
        return OpenOutcome.OK

    def set_cursor(self, line: int, column: int) -> None:
        """Move the cursor to a 1-based line/column."""
        self.cursor = (line, column)

    def center_view(self) -> None:
        """Report the cursor location as path:line:column."""
        line, column = self.cursor
        self.stream.write(f"{self.active_file}:{line}:{column}\n")

    def warn(self, message: str) -> None:
        """Write a warning to stderr, apart from location output."""
        print(f"Warning: {message}", file=sys.stderr)
