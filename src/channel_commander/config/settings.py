"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _default_local_repository() -> Path:
    """Return the local Maven repository directory.

    CHCOM_LOCAL_REPOSITORY wins, then MAVEN_REPO_LOCAL, then ~/.m2/repository.
    """
    for var in ("CHCOM_LOCAL_REPOSITORY", "MAVEN_REPO_LOCAL"):
        value = os.environ.get(var, "")
        if value:
            return Path(value)
    return Path.home() / ".m2" / "repository"


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: str) -> Path:
    return Path(os.environ.get(name, "") or default)


@dataclass
class Settings:
    local_repository: Path = field(default_factory=_default_local_repository)
    request_timeout: float = field(default_factory=lambda: _env_float("CHCOM_REQUEST_TIMEOUT", 30.0))
    report_file: Path = field(default_factory=lambda: _env_path("CHCOM_REPORT_FILE", "report.html"))
    diff_manifest_file: Path = field(
        default_factory=lambda: _env_path("CHCOM_DIFF_MANIFEST_FILE", "diff-manifest.yaml")
    )
    upgraded_manifest_file: Path = field(
        default_factory=lambda: _env_path("CHCOM_UPGRADED_MANIFEST_FILE", "upgraded-manifest.yaml")
    )
    default_output: str = "table"
    manifest_schema_version: str = "1.0.0"
    channel_schema_version: str = "2.0.0"


# Global singleton
settings = Settings()
