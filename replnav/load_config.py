"""Logic for loading and merging configuration files."""

import copy
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from replnav.deep_merge import deep_merge

BACKEND_ENV_VAR = "REPLNAV_BACKEND"
EXTRACTION_MODES = ("backend", "local")

DEFAULT_CONFIG: dict[str, Any] = {
    "backend": {
        "executable": "ultra-nrepl",
        "label": "ultra-nrepl",  # prefix for user-facing warnings
        "timeout_seconds": None,  # block until the backend exits
    },
    "archive": {
        "extraction": "backend",
        "scratch_suffix": ".clj",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Configuration file {path} must contain a mapping"
                raise ValueError(msg)
            config = deep_merge(config, user_config)
    executable = os.environ.get(BACKEND_ENV_VAR)
    if executable:
        config = deep_merge(config, {"backend": {"executable": executable}})
    return config


@dataclass(frozen=True)
class BackendConfig:
    """Settings for one backend client, read-only after construction."""

    executable: str = "ultra-nrepl"
    label: str = "ultra-nrepl"
    timeout_seconds: float | None = None
    archive_extraction: str = "backend"
    scratch_suffix: str = ".clj"

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "BackendConfig":
        """Build settings from a merged configuration mapping."""
        backend = _section(config, "backend")
        archive = _section(config, "archive")
        extraction = archive.get("extraction", "backend")
        if extraction not in EXTRACTION_MODES:
            msg = (
                f"Unsupported archive extraction mode: {extraction}. "
                f"Supported modes: {', '.join(EXTRACTION_MODES)}"
            )
            raise ValueError(msg)
        timeout = backend.get("timeout_seconds")
        return cls(
            executable=str(backend.get("executable", cls.executable)),
            label=str(backend.get("label", cls.label)),
            timeout_seconds=float(timeout) if timeout is not None else None,
            archive_extraction=extraction,
            scratch_suffix=str(archive.get("scratch_suffix", cls.scratch_suffix)),
        )


def _section(config: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a config section; an empty (null) section reads as no overrides."""
    section = config.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        msg = f"Configuration section '{name}' must be a mapping"
        raise ValueError(msg)
    return section
