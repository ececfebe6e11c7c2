"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

from pathlib import Path


def sorted_subdirectories(directory: Path) -> list[Path]:
    """Return the immediate child directories of ``directory`` in name order.

    A missing or unreadable directory yields an empty list.
    """

    try:
        children = list(directory.iterdir())
    except OSError:
        return []
    return sorted((child for child in children if child.is_dir()), key=lambda p: p.name)


__all__ = ["sorted_subdirectories"]
