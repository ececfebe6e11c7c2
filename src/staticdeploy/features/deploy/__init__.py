# Where: staticdeploy.features.deploy.__init__
# What: Expose job planning, execution and their result types.
# Why: Provide a cohesive import surface for the service and CLI layers.

from .domain import (
    CancellationToken,
    DeployError,
    DeployJob,
    DeployOutcome,
    DeployResult,
    DeployStats,
    InstallationError,
    NothingToDeployError,
    RunDisposition,
    RunSummary,
)
from .usecases import DeployExecutor, FallbackToolchainPort, ToolchainResult, plan_jobs

__all__ = [
    "CancellationToken",
    "DeployError",
    "DeployExecutor",
    "DeployJob",
    "DeployOutcome",
    "DeployResult",
    "DeployStats",
    "FallbackToolchainPort",
    "InstallationError",
    "NothingToDeployError",
    "RunDisposition",
    "RunSummary",
    "ToolchainResult",
    "plan_jobs",
]
