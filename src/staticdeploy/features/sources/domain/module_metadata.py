"""Read module names from ``etc/module.xml`` declarations."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from staticdeploy.platform.logging import logger

MODULE_METADATA_CANDIDATES: tuple[str, ...] = ("etc/module.xml", "src/etc/module.xml")


def parse_module_name(content: str) -> str | None:
    """Return the ``name`` attribute of the first ``<module>`` element.

    Malformed XML yields ``None``.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError:
        return None

    for element in root.iter():
        tag = element.tag if isinstance(element.tag, str) else ""
        if tag.rsplit("}", 1)[-1] != "module":
            continue
        name = (element.get("name") or "").strip()
        if name:
            return name
    return None


def read_module_name(package_dir: Path) -> str | None:
    """Return the module name declared by a package directory, if any."""

    for candidate in MODULE_METADATA_CANDIDATES:
        metadata_file = package_dir / candidate
        if not metadata_file.is_file():
            continue
        try:
            content = metadata_file.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.debug("Cannot read %s: %s", metadata_file, exc)
            continue
        name = parse_module_name(content)
        if name:
            return name
    return None


__all__ = ["MODULE_METADATA_CANDIDATES", "parse_module_name", "read_module_name"]
