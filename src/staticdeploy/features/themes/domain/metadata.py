"""
Summary: Parse theme.xml metadata and classify themes by deployment strategy.
Why: Keep XML handling and fast-path rules out of the discovery walk.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterable
from dataclasses import dataclass

from .models import DeployStrategy, ThemeIdentity


THEME_METADATA_FILE = "theme.xml"


class ThemeMetadataError(ValueError):
    """Raised when theme.xml content cannot be parsed as XML."""


@dataclass(frozen=True, slots=True)
class ThemeMetadata:
    """Facts extracted from one theme.xml file."""

    parent: ThemeIdentity | None
    has_fast_path_marker: bool


def _local_name(tag: object) -> str:
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def parse_parent(content: str) -> ThemeIdentity | None:
    """Return the ``<parent>`` identity declared in theme.xml content.

    Raises:
        ThemeMetadataError: If the content is not well-formed XML.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as exc:
        raise ThemeMetadataError(str(exc)) from exc

    for element in root.iter():
        if _local_name(element.tag) != "parent":
            continue
        return ThemeIdentity.parse(element.text or "")
    return None


def has_marker(content: str, markers: Iterable[str]) -> bool:
    return any(marker and marker in content for marker in markers)


def parse_theme_metadata(content: str, markers: Iterable[str]) -> ThemeMetadata:
    """Parse theme.xml content into ``ThemeMetadata``.

    The fast-path marker is a plain substring check on the raw text, so it is
    reported even when ``parse_parent`` rejects the document.

    Raises:
        ThemeMetadataError: If the content is not well-formed XML.
    """
    return ThemeMetadata(parent=parse_parent(content), has_fast_path_marker=has_marker(content, markers))


def classify_strategy(
    *,
    has_fast_path_marker: bool,
    lineage: Iterable[ThemeIdentity],
    fast_path_vendors: Iterable[str],
) -> DeployStrategy:
    """Decide between direct copy and toolchain delegation.

    Args:
        has_fast_path_marker: Whether the theme or an ancestor carries a marker.
        lineage: The theme followed by its resolved ancestors.
        fast_path_vendors: Vendors whose themes are fast-path base themes.
    """
    if has_fast_path_marker:
        return DeployStrategy.FAST_PATH
    vendors = frozenset(fast_path_vendors)
    if any(identity.vendor in vendors for identity in lineage):
        return DeployStrategy.FAST_PATH
    return DeployStrategy.FALLBACK


__all__ = [
    "THEME_METADATA_FILE",
    "ThemeMetadata",
    "ThemeMetadataError",
    "classify_strategy",
    "has_marker",
    "parse_parent",
    "parse_theme_metadata",
]
