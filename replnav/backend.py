"""One-shot invocations of the code-navigation backend executable."""

import logging
import os
import shutil
import subprocess
from collections.abc import Sequence

from replnav.errors import BackendUnavailableError
from replnav.load_config import BackendConfig
from replnav.lookup_request import LookupRequest
from replnav.split_text_lines import split_text_lines

logger = logging.getLogger(__name__)


class Backend:
    """Runs the configured backend as a blocking subprocess per request."""

    def __init__(self, config: BackendConfig) -> None:
        """Initialize the client with its read-only settings."""
        self.config = config

    def is_available(self) -> bool:
        """Check whether the executable resolves on the search path."""
        return shutil.which(self.config.executable) is not None

    def ensure_available(self) -> None:
        """Raise BackendUnavailableError if the executable cannot be found."""
        if not self.is_available():
            raise BackendUnavailableError(
                self.config.label,
                self.config.executable,
                os.environ.get("PATH", ""),
            )

    def _invoke(self, args: Sequence[str], *, check: bool) -> str:
        """Run the backend with arguments and return its raw stdout."""
        cmd = [self.config.executable, *args]
        logger.debug("Running: %s", " ".join(cmd))
        proc = subprocess.run(
            cmd,
            check=check,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=self.config.timeout_seconds,
        )
        return proc.stdout

    def run(self, args: Sequence[str]) -> list[str]:
        """Run the backend with arguments and return its stdout lines.

        Raises subprocess.CalledProcessError on a non-zero exit and
        subprocess.TimeoutExpired when a configured timeout elapses.
        """
        return split_text_lines(self._invoke(args, check=True))

    def find_def(self, request: LookupRequest) -> list[str]:
        """Ask the backend where the requested symbol is defined."""
        try:
            return self.run(request.argv())
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError) as e:
            logger.info("Definition lookup for %s failed: %s", request.symbol, e)
            return []

    def read_jar(self, archive: str, inner_path: str) -> list[str]:
        """Fetch the text of one archive member; [] when extraction fails."""
        try:
            return self.run(["read_jar", archive, inner_path])
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError) as e:
            logger.info("Failed to read %s from %s: %s", inner_path, archive, e)
            return []

    def doc(self, request: LookupRequest) -> str:
        """Return the backend's documentation text for a symbol, verbatim."""
        args = ["doc", str(request.source_file), request.symbol]
        try:
            return self._invoke(args, check=False)
        except (subprocess.TimeoutExpired, OSError) as e:
            logger.info("Documentation lookup for %s failed: %s", request.symbol, e)
            return ""
