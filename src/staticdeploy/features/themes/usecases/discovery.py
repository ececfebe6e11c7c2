"""
Summary: Discover themes under the design tree and index them per area.
Why: Build every ThemeNode once so jobs share one read-only snapshot.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import final

from staticdeploy.platform.filesystem import sorted_subdirectories
from staticdeploy.platform.logging import logger
from staticdeploy.shared.events import DeployEvent

from ..domain.lineage import walk_parent_chain
from ..domain.metadata import (
    THEME_METADATA_FILE,
    ThemeMetadataError,
    classify_strategy,
    has_marker,
    parse_theme_metadata,
)
from ..domain.models import Area, ThemeIdentity, ThemeNode


def design_root(root: Path, area: Area) -> Path:
    """Return ``<root>/app/design/<area>``."""

    return root / "app" / "design" / area.value


@dataclass(frozen=True, slots=True)
class _ThemeEntry:
    identity: ThemeIdentity
    path: Path
    declared_parent: ThemeIdentity | None
    has_fast_path_marker: bool


def _read_entry(
    theme_dir: Path,
    identity: ThemeIdentity,
    area: Area,
    markers: tuple[str, ...],
) -> _ThemeEntry | None:
    metadata_file = theme_dir / THEME_METADATA_FILE
    if not metadata_file.is_file():
        return None

    try:
        content = metadata_file.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.warning(
            "Skipping theme %s (%s): cannot read %s: %s",
            identity,
            area,
            metadata_file,
            exc,
            extra={"deploy_event": DeployEvent.DISCOVERY_WARNING, "theme": str(identity)},
        )
        return None

    try:
        metadata = parse_theme_metadata(content, markers)
    except ThemeMetadataError as exc:
        logger.warning(
            "Malformed %s for theme %s (%s): %s; treating it as having no parent",
            THEME_METADATA_FILE,
            identity,
            area,
            exc,
            extra={"deploy_event": DeployEvent.DISCOVERY_WARNING, "theme": str(identity)},
        )
        return _ThemeEntry(identity, theme_dir, None, has_marker(content, markers))

    return _ThemeEntry(identity, theme_dir, metadata.parent, metadata.has_fast_path_marker)


def discover_themes(
    root: Path,
    area: Area,
    *,
    fast_path_markers: Iterable[str],
    fast_path_vendors: Iterable[str],
) -> list[ThemeNode]:
    """Scan ``app/design/<area>/<Vendor>/<name>`` and return one node per theme.

    Only the two fixed directory levels are inspected. Directories without a
    theme.xml are skipped silently. Fast-path eligibility is classified here:
    a theme qualifies when it or any resolved ancestor carries a marker or
    belongs to a fast-path vendor.

    Args:
        root: Installation root.
        area: Area whose design tree is scanned.
        fast_path_markers: Strings that mark a theme.xml as fast-path.
        fast_path_vendors: Vendors of fast-path base themes.

    Returns:
        list[ThemeNode]: Nodes ordered by vendor then theme name.
    """
    markers = tuple(fast_path_markers)
    vendors = tuple(fast_path_vendors)

    entries: list[_ThemeEntry] = []
    for vendor_dir in sorted_subdirectories(design_root(root, area)):
        for theme_dir in sorted_subdirectories(vendor_dir):
            try:
                identity = ThemeIdentity(vendor_dir.name, theme_dir.name)
            except ValueError:
                continue
            entry = _read_entry(theme_dir, identity, area, markers)
            if entry is not None:
                entries.append(entry)

    parent_of = {entry.identity: entry.declared_parent for entry in entries}
    marked = {entry.identity for entry in entries if entry.has_fast_path_marker}
    nodes: list[ThemeNode] = []
    for entry in entries:
        lineage = walk_parent_chain(entry.identity, parent_of).lineage
        strategy = classify_strategy(
            has_fast_path_marker=any(identity in marked for identity in lineage),
            lineage=lineage,
            fast_path_vendors=vendors,
        )
        nodes.append(
            ThemeNode(
                identity=entry.identity,
                area=area,
                path=entry.path,
                declared_parent=entry.declared_parent,
                strategy=strategy,
            )
        )

    logger.debug("Discovered %d theme(s) in %s", len(nodes), design_root(root, area))
    return nodes


@final
class ThemeIndex:
    """Read-only lookup of discovered themes keyed by area and identity."""

    def __init__(self, nodes: Iterable[ThemeNode]) -> None:
        self._nodes: dict[tuple[Area, ThemeIdentity], ThemeNode] = {}
        self._parents: dict[Area, dict[ThemeIdentity, ThemeIdentity | None]] = {}
        for node in nodes:
            self._nodes[(node.area, node.identity)] = node
            self._parents.setdefault(node.area, {})[node.identity] = node.declared_parent

    @classmethod
    def discover(
        cls,
        root: Path,
        areas: Iterable[Area],
        *,
        fast_path_markers: Iterable[str],
        fast_path_vendors: Iterable[str],
    ) -> "ThemeIndex":
        markers = tuple(fast_path_markers)
        vendors = tuple(fast_path_vendors)
        nodes: list[ThemeNode] = []
        for area in dict.fromkeys(areas):
            nodes.extend(
                discover_themes(
                    root,
                    area,
                    fast_path_markers=markers,
                    fast_path_vendors=vendors,
                )
            )
        return cls(nodes)

    def get(self, area: Area, identity: ThemeIdentity) -> ThemeNode | None:
        return self._nodes.get((area, identity))

    def nodes_for(self, area: Area) -> list[ThemeNode]:
        return [node for (node_area, _), node in self._nodes.items() if node_area is area]

    def parent_map(self, area: Area) -> Mapping[ThemeIdentity, ThemeIdentity | None]:
        """Return the read-only identity to declared-parent lookup for ``area``."""

        return MappingProxyType(self._parents.get(area, {}))

    def __iter__(self) -> Iterator[ThemeNode]:
        return iter(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)


__all__ = ["ThemeIndex", "design_root", "discover_themes"]
