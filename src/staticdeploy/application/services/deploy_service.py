"""Application service for deploying static assets.

This layer wires discovery, planning and execution together so that the CLI
only has to translate arguments and render the outcome.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import final

from staticdeploy.config.settings import (
    DEFAULT_WORKERS,
    FAST_PATH_MARKERS,
    FAST_PATH_VENDORS,
    INCLUDE_DEV,
)
from staticdeploy.features.deploy.adapters import MagentoToolchain
from staticdeploy.features.deploy.domain.errors import InstallationError, NothingToDeployError
from staticdeploy.features.deploy.domain.models import (
    CancellationToken,
    DeployJob,
    DeployStats,
    RunSummary,
)
from staticdeploy.features.deploy.usecases.executor import DeployExecutor, ProgressCallback
from staticdeploy.features.deploy.usecases.job_planner import plan_jobs
from staticdeploy.features.deploy.usecases.output_paths import read_deployed_version
from staticdeploy.features.deploy.usecases.ports import FallbackToolchainPort
from staticdeploy.features.sources.domain.models import SourceOrigin
from staticdeploy.features.sources.usecases.enumerator import scan_module_assets
from staticdeploy.features.themes.domain.models import Area, LocaleIdentity, ThemeIdentity
from staticdeploy.features.themes.usecases.discovery import ThemeIndex
from staticdeploy.platform.logging import logger
from staticdeploy.shared.events import DeployEvent

INSTALLATION_MARKER = Path("app") / "etc" / "env.php"


def check_installation(root: Path) -> None:
    """Verify that ``root`` looks like an installation.

    Raises:
        InstallationError: If the directory or its ``app/etc/env.php`` is missing.
    """
    if not root.is_dir():
        raise InstallationError(root, "directory does not exist")
    if not (root / INSTALLATION_MARKER).is_file():
        raise InstallationError(root, f"not an installation ({INSTALLATION_MARKER} not found)")


@dataclass(frozen=True)
class DeployRequest:
    """Validated input for one deployment run.

    Attributes:
        root: Installation root.
        areas: Areas to deploy.
        locales: Locales to deploy.
        themes: Explicit theme selection; ``None`` deploys every discovered theme.
        workers: Worker pool size.
        include_dev: Copy development artefacts as well.
    """

    root: Path
    areas: tuple[Area, ...] = (Area.FRONTEND, Area.ADMINHTML)
    locales: tuple[LocaleIdentity, ...] = (LocaleIdentity("en_US"),)
    themes: tuple[ThemeIdentity, ...] | None = None
    workers: int = DEFAULT_WORKERS
    include_dev: bool = INCLUDE_DEV


@dataclass(frozen=True)
class PreparedDeployment:
    """Discovery snapshot and the jobs planned from it."""

    index: ThemeIndex
    jobs: tuple[DeployJob, ...]
    version: str | None = None
    module_origins: dict[Area, tuple[SourceOrigin, ...]] = field(default_factory=dict)


@final
class DeployService:
    """Application service that orchestrates a deployment run."""

    def __init__(
        self,
        *,
        toolchain_factory: Callable[[], FallbackToolchainPort] | None = None,
        fast_path_markers: tuple[str, ...] = FAST_PATH_MARKERS,
        fast_path_vendors: tuple[str, ...] = FAST_PATH_VENDORS,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._toolchain_factory: Callable[[], FallbackToolchainPort] = (
            toolchain_factory or MagentoToolchain
        )
        self._fast_path_markers = fast_path_markers
        self._fast_path_vendors = fast_path_vendors
        self._clock = clock

    def prepare(self, request: DeployRequest) -> PreparedDeployment:
        """Discover themes and plan jobs for ``request``.

        Module asset directories are scanned once per area here and shared by
        every job of that area.

        Raises:
            NothingToDeployError: If no theme was discovered or selected.
            InstallationError: If the version marker cannot be read.
        """
        index = ThemeIndex.discover(
            request.root,
            request.areas,
            fast_path_markers=self._fast_path_markers,
            fast_path_vendors=self._fast_path_vendors,
        )
        if len(index) == 0:
            areas = ", ".join(area.value for area in request.areas)
            raise NothingToDeployError(f"No themes found under {request.root} for area(s): {areas}")

        jobs = plan_jobs(index, request.areas, request.locales, request.themes)
        if not jobs:
            raise NothingToDeployError("No deployment jobs match the selected themes, areas and locales")

        areas_in_use = dict.fromkeys(job.area for job in jobs)
        module_origins = {
            area: tuple(scan_module_assets(request.root, area)) for area in areas_in_use
        }
        return PreparedDeployment(
            index=index,
            jobs=tuple(jobs),
            version=read_deployed_version(request.root),
            module_origins=module_origins,
        )

    def execute(
        self,
        request: DeployRequest,
        prepared: PreparedDeployment,
        *,
        cancel_token: CancellationToken | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> RunSummary:
        """Run the prepared jobs and summarise the outcome."""

        token = cancel_token or CancellationToken()
        stats = DeployStats()
        workers = max(1, request.workers)
        executor = DeployExecutor(
            root=request.root,
            index=prepared.index,
            toolchain=self._toolchain_factory(),
            cancel_token=token,
            stats=stats,
            workers=workers,
            include_dev=request.include_dev,
            version=prepared.version,
            module_origins=prepared.module_origins,
            clock=self._clock,
        )

        logger.info(
            "Deploying %d job(s) with %d worker(s)",
            len(prepared.jobs),
            workers,
            extra={
                "deploy_event": DeployEvent.RUN_START.value,
                "total_jobs": len(prepared.jobs),
                "workers": workers,
            },
        )
        started = self._clock()
        results = executor.run(prepared.jobs, progress_callback)
        summary = RunSummary(
            results=tuple(results),
            stats=stats.snapshot(),
            elapsed_seconds=self._clock() - started,
            cancelled=token.is_cancelled,
        )
        logger.log(
            logging.INFO if summary.disposition.exit_code == 0 else logging.WARNING,
            "Deployment finished: %s",
            summary.disposition.value,
            extra={
                "deploy_event": DeployEvent.RUN_COMPLETE.value,
                "disposition": summary.disposition.value,
            },
        )
        return summary

    def run(
        self,
        request: DeployRequest,
        *,
        cancel_token: CancellationToken | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> RunSummary:
        prepared = self.prepare(request)
        return self.execute(
            request,
            prepared,
            cancel_token=cancel_token,
            progress_callback=progress_callback,
        )


__all__ = [
    "DeployRequest",
    "DeployService",
    "PreparedDeployment",
    "check_installation",
]
