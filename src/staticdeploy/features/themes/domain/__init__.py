"""Theme value types and metadata parsing."""

from .metadata import (
    THEME_METADATA_FILE,
    ThemeMetadata,
    ThemeMetadataError,
    classify_strategy,
    parse_theme_metadata,
)
from .lineage import ParentWalk, walk_parent_chain
from .models import (
    Area,
    ChainBreak,
    DeployStrategy,
    LocaleIdentity,
    ThemeChain,
    ThemeIdentity,
    ThemeNode,
)

__all__ = [
    "THEME_METADATA_FILE",
    "Area",
    "ChainBreak",
    "DeployStrategy",
    "LocaleIdentity",
    "ThemeChain",
    "ThemeIdentity",
    "ThemeMetadata",
    "ThemeMetadataError",
    "ThemeNode",
    "ParentWalk",
    "classify_strategy",
    "parse_theme_metadata",
    "walk_parent_chain",
]
