"""Orchestration logic for go-to-definition and documentation lookups."""

import logging
from pathlib import Path

from replnav.backend import Backend
from replnav.editor import Editor
from replnav.errors import BackendUnavailableError
from replnav.load_config import BackendConfig
from replnav.lookup_request import LookupRequest
from replnav.lookup_result import (
    ArchivedLocation,
    DirectLocation,
    EmptyResult,
    NoTarget,
)
from replnav.materialize_archive import resolve_archived
from replnav.navigator import jump_to
from replnav.parse_response import parse_response
from replnav.resolved_target import ResolvedTarget

logger = logging.getLogger(__name__)


class DefinitionLookup:
    """Resolves symbols through the backend and navigates the editor to them."""

    def __init__(
        self,
        config: BackendConfig,
        editor: Editor,
        backend: Backend | None = None,
    ) -> None:
        """Initialize with settings, the host editor and an optional backend."""
        self.config = config
        self.editor = editor
        self.backend = backend if backend is not None else Backend(config)
        self.backend_missing = False

    def backend_ready(self) -> bool:
        """Check the backend once per request, warning the user when it is absent."""
        try:
            self.backend.ensure_available()
        except BackendUnavailableError as e:
            self.backend_missing = True
            self.editor.warn(str(e))
            return False
        self.backend_missing = False
        return True

    def find_definition(
        self, current_file: str | Path, symbol: str
    ) -> ResolvedTarget | None:
        """Jump to the definition of symbol; returns the target navigated to."""
        if not self.backend_ready():
            return None

        request = LookupRequest.build(current_file, symbol)
        result = parse_response(self.backend.find_def(request))

        if isinstance(result, (EmptyResult, NoTarget)):
            logger.debug("No definition found for %s (%r)", request.symbol, result)
            return None

        if isinstance(result, ArchivedLocation):
            target = resolve_archived(result, self.backend, self.config)
        elif isinstance(result, DirectLocation):
            target = ResolvedTarget.from_direct(result)
        else:
            msg = f"Unhandled lookup result: {result!r}"
            raise TypeError(msg)

        jump_to(self.editor, target)
        return target

    def show_documentation(self, current_file: str | Path, symbol: str) -> str | None:
        """Return the backend's documentation for symbol, verbatim."""
        if not self.backend_ready():
            return None
        return self.backend.doc(LookupRequest.build(current_file, symbol))
