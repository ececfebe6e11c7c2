"""Theme discovery and chain resolution use cases."""

from .chain_resolver import ThemeNotFoundError, resolve_chain
from .discovery import ThemeIndex, design_root, discover_themes

__all__ = [
    "ThemeIndex",
    "ThemeNotFoundError",
    "design_root",
    "discover_themes",
    "resolve_chain",
]
