"""
Summary: Value types for themes, areas, locales and resolved inheritance chains.
Why: Give discovery, planning and deployment one immutable shared vocabulary.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Final

from staticdeploy.platform.logging import logger
from staticdeploy.shared.events import DeployEvent


_LOCALE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[a-z]{2}_[A-Z]{2}")


class Area(StrEnum):
    """Deployment target context."""

    FRONTEND = "frontend"
    ADMINHTML = "adminhtml"

    @staticmethod
    def from_user_input(value: str) -> "Area":
        """Translate raw input into the matching area."""

        normalized = value.strip().lower()
        for area in Area:
            if area.value == normalized:
                return area
        valid = ", ".join(a.value for a in Area)
        raise ValueError(f"Unsupported area '{value}'. Valid options: {valid}")


class DeployStrategy(StrEnum):
    """How a theme's assets reach the output tree."""

    FAST_PATH = "fast-path"
    FALLBACK = "fallback"


@dataclass(frozen=True, slots=True)
class ThemeIdentity:
    """``Vendor/name`` pair identifying a theme."""

    vendor: str
    name: str

    def __post_init__(self) -> None:
        if not self.vendor or not self.name:
            raise ValueError("Theme vendor and name must both be non-empty")
        if "/" in self.vendor or "/" in self.name:
            raise ValueError(f"Theme vendor and name cannot contain '/': {self.vendor}/{self.name}")

    @classmethod
    def parse(cls, value: str) -> "ThemeIdentity | None":
        """Parse ``Vendor/name``; return ``None`` when the text is not exactly one pair."""

        parts = value.strip().split("/")
        if len(parts) != 2:
            return None
        vendor, name = (part.strip() for part in parts)
        if not vendor or not name:
            return None
        return cls(vendor, name)

    def __str__(self) -> str:
        return f"{self.vendor}/{self.name}"


@dataclass(frozen=True, slots=True)
class LocaleIdentity:
    """Locale code such as ``en_US``.

    Non-standard codes are kept verbatim; ``is_standard`` reports whether the
    code follows the ``xx_YY`` convention.
    """

    code: str

    def __post_init__(self) -> None:
        if not self.code or self.code.strip() != self.code:
            raise ValueError(f"Locale code must be non-empty without surrounding spaces: {self.code!r}")
        if any(sep in self.code for sep in ("/", "\\")) or self.code in {".", ".."}:
            raise ValueError(f"Locale code cannot be used as a directory name: {self.code!r}")

    @property
    def is_standard(self) -> bool:
        return _LOCALE_PATTERN.fullmatch(self.code) is not None

    @classmethod
    def from_user_input(cls, value: str) -> "LocaleIdentity":
        """Build a locale, logging a warning when the code is non-standard."""

        locale = cls(value.strip())
        if not locale.is_standard:
            logger.warning(
                "Locale '%s' does not follow the xx_YY format; deploying it as given",
                locale.code,
                extra={"deploy_event": DeployEvent.LOCALE_WARNING, "locale": locale.code},
            )
        return locale

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True, slots=True)
class ThemeNode:
    """One discovered theme directory."""

    identity: ThemeIdentity
    area: Area
    path: Path
    declared_parent: ThemeIdentity | None
    strategy: DeployStrategy

    @property
    def fast_path_eligible(self) -> bool:
        return self.strategy is DeployStrategy.FAST_PATH


class ChainBreak(StrEnum):
    """Reason a parent walk stopped before reaching a root theme."""

    CYCLE = "cycle"
    MISSING_PARENT = "missing_parent"


@dataclass(frozen=True, slots=True)
class ThemeChain:
    """Inheritance chain, requested theme first and root ancestor last."""

    nodes: tuple[ThemeNode, ...]
    break_kind: ChainBreak | None = None
    break_at: ThemeIdentity | None = None

    def __iter__(self) -> Iterator[ThemeNode]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def head(self) -> ThemeNode:
        return self.nodes[0]

    @property
    def identities(self) -> tuple[ThemeIdentity, ...]:
        return tuple(node.identity for node in self.nodes)

    @property
    def truncated(self) -> bool:
        return self.break_kind is not None


__all__ = [
    "Area",
    "ChainBreak",
    "DeployStrategy",
    "LocaleIdentity",
    "ThemeChain",
    "ThemeIdentity",
    "ThemeNode",
]
