"""Destination layout under ``pub/static``."""

from __future__ import annotations

from pathlib import Path

from staticdeploy.config.settings import VERSION_FILE_NAME

from ..domain.errors import InstallationError
from ..domain.models import DeployJob


def static_root(root: Path) -> Path:
    return root / "pub" / "static"


def read_deployed_version(root: Path) -> str | None:
    """Return the trimmed content of the version marker, or ``None``.

    A missing or blank marker means "no version".

    Raises:
        InstallationError: If the marker exists but cannot be read.
    """
    marker = static_root(root) / VERSION_FILE_NAME
    try:
        content = marker.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise InstallationError(marker, f"cannot read version marker: {exc}") from exc
    version = content.strip()
    return version or None


def destination_root(root: Path, job: DeployJob, version: str | None = None) -> Path:
    """Return ``pub/static[/<version>]/<area>/<Vendor>/<name>/<locale>``."""

    base = static_root(root)
    if version:
        base = base / version
    return base / job.area.value / job.theme.vendor / job.theme.name / job.locale.code


__all__ = ["destination_root", "read_deployed_version", "static_root"]
