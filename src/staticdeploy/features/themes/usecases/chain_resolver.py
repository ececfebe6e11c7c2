"""
Summary: Resolve a theme's inheritance chain from the discovered index.
Why: Truncate broken chains with a warning instead of aborting the theme.
"""

from __future__ import annotations

from staticdeploy.platform.logging import logger
from staticdeploy.shared.events import DeployEvent

from ..domain.lineage import walk_parent_chain
from ..domain.models import Area, ChainBreak, ThemeChain, ThemeIdentity, ThemeNode
from .discovery import ThemeIndex


class ThemeNotFoundError(LookupError):
    """Raised when the requested theme was not discovered in the area."""

    def __init__(self, identity: ThemeIdentity, area: Area) -> None:
        super().__init__(f"Theme {identity} not found in area {area}")
        self.identity = identity
        self.area = area


def resolve_chain(identity: ThemeIdentity, area: Area, index: ThemeIndex) -> ThemeChain:
    """Build the chain for ``identity``, most specific theme first.

    Parents are looked up in the same area only. A cycle or an undiscovered
    parent ends the chain at the last valid link and logs a warning.

    Raises:
        ThemeNotFoundError: If ``identity`` itself was not discovered.
    """
    if index.get(area, identity) is None:
        raise ThemeNotFoundError(identity, area)

    walk = walk_parent_chain(identity, index.parent_map(area))
    nodes: list[ThemeNode] = []
    for link in walk.lineage:
        node = index.get(area, link)
        if node is not None:
            nodes.append(node)

    if walk.break_kind is ChainBreak.CYCLE:
        logger.warning(
            "Parent cycle detected for theme %s (%s) at %s; chain truncated after %s",
            identity,
            area,
            walk.break_at,
            walk.lineage[-1],
            extra={"deploy_event": DeployEvent.CHAIN_WARNING, "theme": str(identity)},
        )
    elif walk.break_kind is ChainBreak.MISSING_PARENT:
        logger.warning(
            "Parent theme %s declared by %s is not installed in %s; chain truncated there",
            walk.break_at,
            walk.lineage[-1],
            area,
            extra={"deploy_event": DeployEvent.CHAIN_WARNING, "theme": str(identity)},
        )

    return ThemeChain(nodes=tuple(nodes), break_kind=walk.break_kind, break_at=walk.break_at)


__all__ = ["ThemeNotFoundError", "resolve_chain"]
