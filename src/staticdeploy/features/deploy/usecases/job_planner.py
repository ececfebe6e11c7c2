"""Expand theme, area and locale selections into independent jobs."""

from __future__ import annotations

from collections.abc import Iterable

from staticdeploy.features.themes.domain.models import Area, LocaleIdentity, ThemeIdentity
from staticdeploy.features.themes.usecases.discovery import ThemeIndex
from staticdeploy.platform.logging import logger
from staticdeploy.shared.events import DeployEvent

from ..domain.models import DeployJob


def plan_jobs(
    index: ThemeIndex,
    areas: Iterable[Area],
    locales: Iterable[LocaleIdentity],
    themes: Iterable[ThemeIdentity] | None = None,
) -> list[DeployJob]:
    """Return the de-duplicated cross product of themes, areas and locales.

    Args:
        index: Discovered themes.
        areas: Areas to deploy, in order.
        locales: Locales to deploy, in order.
        themes: Explicit selection, or ``None`` for every discovered theme.
            A selected theme only yields jobs for areas it was discovered in.

    Returns:
        list[DeployJob]: Jobs ordered by area, theme, then locale.
    """
    unique_areas = list(dict.fromkeys(areas))
    unique_locales = list(dict.fromkeys(locales))
    selection = None if themes is None else list(dict.fromkeys(themes))

    jobs: list[DeployJob] = []
    matched: set[ThemeIdentity] = set()
    for area in unique_areas:
        if selection is None:
            identities = [node.identity for node in index.nodes_for(area)]
        else:
            identities = [theme for theme in selection if index.get(area, theme) is not None]
        matched.update(identities)
        for theme in identities:
            jobs.extend(DeployJob(theme, area, locale) for locale in unique_locales)

    for theme in selection or ():
        if theme not in matched:
            logger.warning(
                "Theme %s was not found in any selected area (%s)",
                theme,
                ", ".join(area.value for area in unique_areas),
                extra={"deploy_event": DeployEvent.DISCOVERY_WARNING, "theme": str(theme)},
            )
    return jobs


__all__ = ["plan_jobs"]
