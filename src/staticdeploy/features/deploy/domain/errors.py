"""
Summary: Exception hierarchy for deployment jobs.
Why: Carry source, destination and cause so failed jobs explain themselves.
"""

from __future__ import annotations

import errno
from pathlib import Path


class DeployError(Exception):
    """Base exception for deployment failures."""


class CopyError(DeployError):
    """Raised when copying one file fails."""

    def __init__(self, source: Path, destination: Path, cause: OSError) -> None:
        super().__init__(f"Failed to copy {source} to {destination}: {cause}")
        self.source: Path = source
        self.destination: Path = destination
        self.cause: OSError = cause

    @classmethod
    def from_os_error(cls, source: Path, destination: Path, cause: OSError) -> "CopyError":
        """Build the matching subclass for ``cause``."""

        if cause.errno == errno.ENOSPC:
            return DiskFullError(source, destination, cause)
        return cls(source, destination, cause)


class DiskFullError(CopyError):
    """Raised when the destination filesystem runs out of space."""


class CreateDirectoryError(DeployError):
    """Raised when a destination directory cannot be created."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Failed to create directory {path}: {cause}")
        self.path: Path = path
        self.cause: OSError = cause


class ToolchainError(DeployError):
    """Raised when the fallback toolchain fails or cannot be launched."""

    def __init__(self, returncode: int | None, stderr: str) -> None:
        detail = stderr.strip() or "no output"
        if returncode is None:
            message = f"Fallback toolchain could not be started: {detail}"
        else:
            message = f"Fallback toolchain exited with status {returncode}: {detail}"
        super().__init__(message)
        self.returncode: int | None = returncode
        self.stderr: str = stderr


class InstallationError(DeployError):
    """Raised when the root is not a usable installation."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path: Path = path
        self.reason: str = reason


class NothingToDeployError(DeployError):
    """Raised when discovery or filtering leaves no job to run."""


class CancelledError(DeployError):
    """Raised inside a job when the cancellation token is observed."""


__all__ = [
    "CancelledError",
    "CopyError",
    "CreateDirectoryError",
    "DeployError",
    "DiskFullError",
    "InstallationError",
    "NothingToDeployError",
    "ToolchainError",
]
