"""Where: src/staticdeploy/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
"""

from __future__ import annotations

from staticdeploy.config.config import (
    FAST_PATH_MARKERS_DEFAULT,
    FAST_PATH_VENDORS_DEFAULT,
    TOOLCHAIN_BINARY_DEFAULT,
    config as app_config,
)

# Worker pool ---------------------------------------------------------------

_workers = getattr(app_config, "workers", 1)
DEFAULT_WORKERS: int = _workers if isinstance(_workers, int) and _workers > 0 else 1

INCLUDE_DEV: bool = bool(getattr(app_config, "include_dev", False))


# Theme classification --------------------------------------------------------

FAST_PATH_MARKERS: tuple[str, ...] = (
    tuple(marker for marker in app_config.fast_path_markers if marker)
    or FAST_PATH_MARKERS_DEFAULT
)
FAST_PATH_VENDORS: tuple[str, ...] = (
    tuple(vendor for vendor in app_config.fast_path_vendors if vendor)
    or FAST_PATH_VENDORS_DEFAULT
)

TOOLCHAIN_BINARY: str = app_config.toolchain_binary or TOOLCHAIN_BINARY_DEFAULT


# Output tree ---------------------------------------------------------------

VERSION_FILE_NAME: str = "deployed_version.txt"


__all__ = [
    "DEFAULT_WORKERS",
    "FAST_PATH_MARKERS",
    "FAST_PATH_VENDORS",
    "INCLUDE_DEV",
    "TOOLCHAIN_BINARY",
    "VERSION_FILE_NAME",
]
