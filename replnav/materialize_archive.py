"""Logic for turning archive-embedded source into a navigable scratch file."""

import logging
import os
import tempfile
import zipfile
from pathlib import Path

from replnav.backend import Backend
from replnav.load_config import BackendConfig
from replnav.lookup_result import ArchivedLocation
from replnav.resolved_target import ResolvedTarget
from replnav.split_text_lines import split_text_lines

logger = logging.getLogger(__name__)

SCRATCH_PREFIX = "replnav-"


def read_archive_member(archive: str, inner_path: str) -> list[str]:
    """Read one member of a zip archive in-process; [] when it cannot be read."""
    try:
        with zipfile.ZipFile(archive) as zf:
            data = zf.read(inner_path)
    except (OSError, KeyError, zipfile.BadZipFile) as e:
        logger.info("Failed to read %s from %s: %s", inner_path, archive, e)
        return []
    return split_text_lines(data.decode("utf-8", errors="replace"))


def extract_archive_lines(
    backend: Backend, archive: str, inner_path: str, config: BackendConfig
) -> list[str]:
    """Return the text lines of an archive member."""
    if config.archive_extraction == "local":
        lines = read_archive_member(archive, inner_path)
    else:
        lines = backend.read_jar(archive, inner_path)
    if not lines:
        logger.info("No content extracted for %s in %s", inner_path, archive)
    return lines


def materialize_lines(lines: list[str], suffix: str) -> Path:
    """Write lines to a fresh, uniquely named temporary file and return its path."""
    fd, name = tempfile.mkstemp(prefix=SCRATCH_PREFIX, suffix=suffix)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write("\n".join(lines))
    return Path(name)


def resolve_archived(
    location: ArchivedLocation, backend: Backend, config: BackendConfig
) -> ResolvedTarget:
    """Extract an archived definition and point a target at its scratch copy."""
    lines = extract_archive_lines(
        backend, location.archive, location.inner_path, config
    )
    path = materialize_lines(lines, config.scratch_suffix)
    logger.debug(
        "Materialized %s!%s to %s", location.archive, location.inner_path, path
    )
    return ResolvedTarget(str(path), location.line, location.column)
