"""Resolution plan enumeration."""

from .enumerator import (
    build_resolution_plan,
    scan_library_assets,
    scan_module_assets,
    scan_theme_assets,
    scan_theme_module_overrides,
)

__all__ = [
    "build_resolution_plan",
    "scan_library_assets",
    "scan_module_assets",
    "scan_theme_assets",
    "scan_theme_module_overrides",
]
