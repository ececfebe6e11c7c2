# Where: staticdeploy.features.themes.__init__
# What: Expose theme discovery, classification and chain resolution.
# Why: Give the deploy feature and services one import surface for themes.

from .domain import (
    Area,
    ChainBreak,
    DeployStrategy,
    LocaleIdentity,
    ThemeChain,
    ThemeIdentity,
    ThemeNode,
)
from .usecases import ThemeIndex, ThemeNotFoundError, discover_themes, resolve_chain

__all__ = [
    "Area",
    "ChainBreak",
    "DeployStrategy",
    "LocaleIdentity",
    "ThemeChain",
    "ThemeIdentity",
    "ThemeIndex",
    "ThemeNode",
    "ThemeNotFoundError",
    "discover_themes",
    "resolve_chain",
]
