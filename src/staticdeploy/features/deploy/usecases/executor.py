"""
Summary: Run deployment jobs on a bounded worker pool.
Why: Isolate failures per job while sharing counters and one cancellation flag.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Any, final

from staticdeploy.features.sources.domain.models import SourceOrigin
from staticdeploy.features.sources.usecases.enumerator import build_resolution_plan
from staticdeploy.features.themes.domain.models import Area
from staticdeploy.features.themes.usecases.chain_resolver import ThemeNotFoundError, resolve_chain
from staticdeploy.features.themes.usecases.discovery import ThemeIndex
from staticdeploy.platform.logging import logger
from staticdeploy.shared.events import DeployEvent

from ..domain.errors import CancelledError, ToolchainError
from ..domain.models import CancellationToken, DeployJob, DeployOutcome, DeployResult, DeployStats
from .copier import copy_plan, ensure_destination_directory
from .output_paths import destination_root
from .ports import FallbackToolchainPort

ProgressCallback = Callable[[int, int, DeployResult], None]


@final
class DeployExecutor:
    """Execute jobs concurrently and collect one result per job."""

    def __init__(
        self,
        *,
        root: Path,
        index: ThemeIndex,
        toolchain: FallbackToolchainPort,
        cancel_token: CancellationToken,
        stats: DeployStats,
        workers: int = 1,
        include_dev: bool = False,
        version: str | None = None,
        module_origins: Mapping[Area, Sequence[SourceOrigin]] | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.root = root
        self.index = index
        self.toolchain = toolchain
        self.cancel_token = cancel_token
        self.stats = stats
        self.workers = workers
        self.include_dev = include_dev
        self.version = version
        self.module_origins = dict(module_origins or {})
        self._clock = clock

    def _log_event(
        self,
        level: int,
        event: DeployEvent,
        message: str,
        *message_args: object,
        **context: Any,
    ) -> None:
        """Emit a structured log entry for job lifecycle events."""

        extra: dict[str, Any] = {"deploy_event": event.value, "root": str(self.root)}
        for key, value in context.items():
            extra[key] = str(value) if isinstance(value, Path) else value
        logger.log(level, message, *message_args, extra=extra, stacklevel=2)

    def run(
        self,
        jobs: Sequence[DeployJob],
        progress_callback: ProgressCallback | None = None,
    ) -> list[DeployResult]:
        """Run ``jobs`` and return their results in job order.

        Args:
            jobs: Independent jobs; none depends on another's outcome.
            progress_callback: Called as ``(finished, total, result)`` each
                time a job reaches a terminal state.
        """
        total = len(jobs)
        if total == 0:
            return []

        results: list[DeployResult | None] = [None] * total
        with ThreadPoolExecutor(
            max_workers=min(self.workers, total),
            thread_name_prefix="deploy-worker",
        ) as pool:
            futures = {
                pool.submit(self.run_job, job, position + 1, total): position
                for position, job in enumerate(jobs)
            }
            for finished, future in enumerate(as_completed(futures), start=1):
                result = future.result()
                results[futures[future]] = result
                if progress_callback is not None:
                    progress_callback(finished, total, result)

        return [result for result in results if result is not None]

    def run_job(self, job: DeployJob, sequence: int = 0, total: int = 0) -> DeployResult:
        """Execute one job to a terminal state; never raises."""

        started = self._clock()
        context: dict[str, Any] = {"job": job.label, "sequence": sequence, "total_jobs": total}

        if self.cancel_token.is_cancelled:
            self._log_event(logging.DEBUG, DeployEvent.JOB_CANCELLED, "Cancelled %s", job.label, **context)
            return DeployResult(job, DeployOutcome.CANCELLED)

        self._log_event(logging.DEBUG, DeployEvent.JOB_START, "Deploying %s", job.label, **context)
        files = 0
        size = 0

        def _on_file_copied(copied: int) -> None:
            nonlocal files, size
            files += 1
            size += copied
            self.stats.add_file(copied)

        destination = destination_root(self.root, job, self.version)
        try:
            node = self.index.get(job.area, job.theme)
            if node is None:
                raise ThemeNotFoundError(job.theme, job.area)
            if not node.fast_path_eligible:
                return self._delegate(job, started, context)

            chain = resolve_chain(job.theme, job.area, self.index)
            plan = build_resolution_plan(chain, self.root, job.area, self.module_origins.get(job.area))
            ensure_destination_directory(destination)
            report = copy_plan(
                plan,
                destination,
                self.cancel_token,
                include_dev=self.include_dev,
                on_file_copied=_on_file_copied,
            )
        except CancelledError:
            return self._cancelled(job, started, files, size, destination, context)
        except Exception as exc:
            return self._failed(job, started, exc, files, size, destination, context)

        if report.cancelled:
            return self._cancelled(job, started, files, size, destination, context)

        elapsed = self._clock() - started
        self._log_event(
            logging.INFO,
            DeployEvent.JOB_SUCCESS,
            "Deployed %s (%d files)",
            job.label,
            report.files_copied,
            destination=destination,
            files_copied=report.files_copied,
            elapsed_seconds=elapsed,
            **context,
        )
        return DeployResult(
            job,
            DeployOutcome.SUCCESS,
            files_copied=report.files_copied,
            bytes_copied=report.bytes_copied,
            elapsed_seconds=elapsed,
            destination=destination,
        )

    def _delegate(self, job: DeployJob, started: float, context: dict[str, Any]) -> DeployResult:
        """Hand the job to the fallback toolchain and map its exit status."""

        try:
            result = self.toolchain.deploy(job, self.root)
            if result.stdout:
                logger.debug("Toolchain output for %s:\n%s", job.label, result.stdout)
            if not result.ok:
                raise ToolchainError(result.returncode, result.stderr)
        except Exception as exc:
            return self._failed(job, started, exc, 0, 0, None, context)

        elapsed = self._clock() - started
        self._log_event(
            logging.INFO,
            DeployEvent.JOB_DELEGATED,
            "Delegated %s to the toolchain",
            job.label,
            elapsed_seconds=elapsed,
            **context,
        )
        return DeployResult(job, DeployOutcome.DELEGATED, elapsed_seconds=elapsed)

    def _cancelled(
        self,
        job: DeployJob,
        started: float,
        files: int,
        size: int,
        destination: Path,
        context: dict[str, Any],
    ) -> DeployResult:
        elapsed = self._clock() - started
        self._log_event(
            logging.INFO,
            DeployEvent.JOB_CANCELLED,
            "Cancelled %s",
            job.label,
            files_copied=files,
            elapsed_seconds=elapsed,
            **context,
        )
        return DeployResult(
            job,
            DeployOutcome.CANCELLED,
            files_copied=files,
            bytes_copied=size,
            elapsed_seconds=elapsed,
            destination=destination,
        )

    def _failed(
        self,
        job: DeployJob,
        started: float,
        error: Exception,
        files: int,
        size: int,
        destination: Path | None,
        context: dict[str, Any],
    ) -> DeployResult:
        elapsed = self._clock() - started
        self.stats.record_error()
        result = DeployResult(
            job,
            DeployOutcome.FAILED,
            files_copied=files,
            bytes_copied=size,
            elapsed_seconds=elapsed,
            destination=destination,
            error=error,
        )
        self._log_event(
            logging.ERROR,
            DeployEvent.JOB_FAILED,
            "Failed %s: %s",
            job.label,
            result.error_message,
            error_message=result.error_message,
            elapsed_seconds=elapsed,
            **context,
        )
        logger.debug("Failure details for %s", job.label, exc_info=error)
        return result


__all__ = ["DeployExecutor", "ProgressCallback"]
