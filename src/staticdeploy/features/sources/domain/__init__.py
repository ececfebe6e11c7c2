"""Source origin value types and module metadata parsing."""

from .models import ResolutionPlan, SourceKind, SourceOrigin
from .module_metadata import parse_module_name, read_module_name

__all__ = [
    "ResolutionPlan",
    "SourceKind",
    "SourceOrigin",
    "parse_module_name",
    "read_module_name",
]
