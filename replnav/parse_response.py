"""Logic for decoding the backend's line-oriented definition response.

Each record is ``TAG value...`` where the tag is the first whitespace-separated
word and the value is the remainder of the line. Tags may arrive in any order and
over any number of lines; a repeated tag overwrites the earlier value.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from replnav.lookup_result import (
    ArchivedLocation,
    DirectLocation,
    EmptyResult,
    LookupResult,
    NoTarget,
)

logger = logging.getLogger(__name__)

EMPTY_TAG = "IS-EMPTY"
DEFAULT_POSITION = "1"
FILE_URI_PREFIXES = ("file://", "file:")


@dataclass
class ResponseBuilder:
    """Accumulates tagged fields until the whole response has been read."""

    line: str | None = None
    column: str | None = None
    file: str | None = None
    jar: str | None = None

    def feed(self, tag: str, value: str) -> None:
        """Record one tagged value; unknown tags are ignored."""
        if tag == "LINE":
            self.line = value
        elif tag == "COLUMN":
            self.column = value
        elif tag == "FILE":
            self.file = strip_file_uri(value)
        elif tag == "JAR":
            self.jar = value
        else:
            logger.debug("Ignoring unknown response tag: %s", tag)

    def finish(self) -> LookupResult:
        """Convert the accumulated fields into a lookup result."""
        line = self.line or DEFAULT_POSITION
        column = self.column or DEFAULT_POSITION
        if self.jar:
            if not self.file:
                # Nothing inside the archive to extract
                return NoTarget()
            return ArchivedLocation(self.jar, self.file, line, column)
        if self.file:
            return DirectLocation(self.file, line, column)
        return NoTarget()


def strip_file_uri(value: str) -> str:
    """Reduce a ``file:`` URI (as nREPL reports it) to a plain path."""
    for prefix in FILE_URI_PREFIXES:
        if value.startswith(prefix):
            return value[len(prefix) :]
    return value


def parse_response(lines: Iterable[str]) -> LookupResult:
    """Decode backend output lines into a lookup result."""
    builder = ResponseBuilder()
    for raw in lines:
        parts = raw.strip().split(maxsplit=1)
        if not parts:
            continue
        tag = parts[0]
        if tag == EMPTY_TAG:
            return EmptyResult()
        value = parts[1].strip() if len(parts) > 1 else ""
        builder.feed(tag, value)
    return builder.finish()
