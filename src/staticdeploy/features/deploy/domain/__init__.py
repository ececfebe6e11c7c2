"""Deployment domain types and errors."""

from .errors import (
    CancelledError,
    CopyError,
    CreateDirectoryError,
    DeployError,
    DiskFullError,
    InstallationError,
    NothingToDeployError,
    ToolchainError,
)
from .models import (
    CancellationToken,
    DeployJob,
    DeployOutcome,
    DeployResult,
    DeployStats,
    RunDisposition,
    RunSummary,
    StatsSnapshot,
    determine_disposition,
)

__all__ = [
    "CancellationToken",
    "CancelledError",
    "CopyError",
    "CreateDirectoryError",
    "DeployError",
    "DeployJob",
    "DeployOutcome",
    "DeployResult",
    "DeployStats",
    "DiskFullError",
    "InstallationError",
    "NothingToDeployError",
    "RunDisposition",
    "RunSummary",
    "StatsSnapshot",
    "ToolchainError",
    "determine_disposition",
]
