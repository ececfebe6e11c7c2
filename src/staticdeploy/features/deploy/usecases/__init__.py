"""
Summary: Package exports for deploy use cases.
Why: Give services one namespace for planning, copying and execution.
"""

from .copier import CopyReport, copy_file, copy_plan
from .executor import DeployExecutor, ProgressCallback
from .job_planner import plan_jobs
from .output_paths import destination_root, read_deployed_version
from .ports import FallbackToolchainPort, ToolchainResult

__all__ = [
    "CopyReport",
    "DeployExecutor",
    "FallbackToolchainPort",
    "ProgressCallback",
    "ToolchainResult",
    "copy_file",
    "copy_plan",
    "destination_root",
    "plan_jobs",
    "read_deployed_version",
]
