"""
Summary: Enumerate origin directories for a theme chain in override order.
Why: Encode the priority rules once so the copier only follows plan order.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from staticdeploy.features.themes.domain.models import Area, ThemeChain, ThemeNode
from staticdeploy.platform.filesystem import sorted_subdirectories
from staticdeploy.platform.logging import logger

from ..domain.models import ResolutionPlan, SourceKind, SourceOrigin
from ..domain.module_metadata import read_module_name

WEB_DIRECTORY = "web"


def _module_web_candidates(area: Area) -> tuple[str, ...]:
    return (
        f"view/{area.value}/web",
        f"src/view/{area.value}/web",
        "view/base/web",
        "src/view/base/web",
    )


def scan_theme_module_overrides(node: ThemeNode) -> list[SourceOrigin]:
    """Return ``<theme>/<Module_Name>/web`` origins in module name order."""

    origins: list[SourceOrigin] = []
    for child in sorted_subdirectories(node.path):
        if "_" not in child.name:
            continue
        web_dir = child / WEB_DIRECTORY
        if web_dir.is_dir():
            origins.append(
                SourceOrigin(
                    SourceKind.THEME_MODULE_OVERRIDE,
                    web_dir,
                    module=child.name,
                    theme=node.identity,
                )
            )
    return origins


def scan_theme_assets(node: ThemeNode) -> SourceOrigin | None:
    web_dir = node.path / WEB_DIRECTORY
    if not web_dir.is_dir():
        return None
    return SourceOrigin(SourceKind.THEME_ASSETS, web_dir, theme=node.identity)


def scan_library_assets(root: Path) -> SourceOrigin | None:
    library_dir = root / "lib" / WEB_DIRECTORY
    if not library_dir.is_dir():
        return None
    return SourceOrigin(SourceKind.LIBRARY_ASSETS, library_dir)


def scan_module_assets(root: Path, area: Area) -> list[SourceOrigin]:
    """Collect view-layer asset directories of every installed vendor module.

    Packages live at ``<root>/vendor/<vendor>/<package>`` and are visited in
    sorted order. Packages without a readable module name are skipped. For
    each module the area-specific directories precede the ``base`` ones.
    """
    origins: list[SourceOrigin] = []
    for vendor_dir in sorted_subdirectories(root / "vendor"):
        for package_dir in sorted_subdirectories(vendor_dir):
            module = read_module_name(package_dir)
            if module is None:
                continue
            for relative in _module_web_candidates(area):
                web_dir = package_dir / relative
                if web_dir.is_dir():
                    origins.append(SourceOrigin(SourceKind.MODULE_ASSETS, web_dir, module=module))
    logger.debug("Found %d module asset origin(s) for %s", len(origins), area)
    return origins


def build_resolution_plan(
    chain: ThemeChain,
    root: Path,
    area: Area,
    module_origins: Sequence[SourceOrigin] | None = None,
) -> ResolutionPlan:
    """Build the ordered resolution plan for ``chain``.

    Per chain link, most specific first: that theme's module overrides, then
    its own ``web`` directory. After the chain: the shared library, then the
    module-declared assets. Earlier origins win path conflicts.

    Args:
        chain: Resolved inheritance chain.
        root: Installation root.
        area: Area being deployed.
        module_origins: Pre-scanned module origins for ``area``; scanned on
            demand when omitted.

    Returns:
        ResolutionPlan: Existing origin directories only; may be empty.
    """
    plan: list[SourceOrigin] = []
    for node in chain:
        plan.extend(scan_theme_module_overrides(node))
        theme_assets = scan_theme_assets(node)
        if theme_assets is not None:
            plan.append(theme_assets)

    library = scan_library_assets(root)
    if library is not None:
        plan.append(library)

    if module_origins is None:
        module_origins = scan_module_assets(root, area)
    plan.extend(module_origins)
    return tuple(plan)


__all__ = [
    "build_resolution_plan",
    "scan_library_assets",
    "scan_module_assets",
    "scan_theme_assets",
    "scan_theme_module_overrides",
]
