# Where: staticdeploy.features.sources.__init__
# What: Expose origin types and resolution plan building.
# Why: Let the executor depend on one entry point for source enumeration.

from .domain import ResolutionPlan, SourceKind, SourceOrigin
from .usecases import build_resolution_plan, scan_module_assets

__all__ = [
    "ResolutionPlan",
    "SourceKind",
    "SourceOrigin",
    "build_resolution_plan",
    "scan_module_assets",
]
