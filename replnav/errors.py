"""Exceptions raised by the backend client."""


class BackendUnavailableError(RuntimeError):
    """The configured backend executable is not on the search path."""

    def __init__(self, label: str, executable: str, search_path: str) -> None:
        """Record what was looked up and where."""
        self.label = label
        self.executable = executable
        self.search_path = search_path
        super().__init__(
            f"{label}: executable '{executable}' not found in PATH: {search_path}"
        )
