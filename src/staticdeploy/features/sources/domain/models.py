"""
Summary: Source origins and the ordered resolution plan.
Why: Describe where files come from independently of how they are copied.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path, PurePath
from typing import TypeAlias

from staticdeploy.features.themes.domain.models import ThemeIdentity


class SourceKind(StrEnum):
    """Category of an origin root in a resolution plan."""

    THEME_ASSETS = "theme-own-assets"
    THEME_MODULE_OVERRIDE = "theme-level-module-override"
    LIBRARY_ASSETS = "shared-library-assets"
    MODULE_ASSETS = "module-declared-assets"


@dataclass(frozen=True, slots=True)
class SourceOrigin:
    """One directory whose subtree is copied into the destination.

    ``module`` is set for module-scoped kinds; their files land under
    ``<destination>/<module>/``. ``theme`` records the chain link that
    contributed a theme-owned origin.
    """

    kind: SourceKind
    path: Path
    module: str | None = None
    theme: ThemeIdentity | None = None

    def __post_init__(self) -> None:
        scoped = self.kind in (SourceKind.THEME_MODULE_OVERRIDE, SourceKind.MODULE_ASSETS)
        if scoped and not self.module:
            raise ValueError(f"{self.kind} origin requires a module name: {self.path}")
        if not scoped and self.module is not None:
            raise ValueError(f"{self.kind} origin cannot carry a module name: {self.path}")

    @property
    def destination_prefix(self) -> PurePath:
        """Relative directory under the destination root that receives this origin."""

        return PurePath(self.module) if self.module else PurePath()


ResolutionPlan: TypeAlias = tuple[SourceOrigin, ...]


__all__ = ["ResolutionPlan", "SourceKind", "SourceOrigin"]
