"""
Summary: Jobs, per-job results, shared counters and the run disposition.
Why: Keep the executor's state explicit and safe to share across workers.
"""

from __future__ import annotations

import threading
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from staticdeploy.features.themes.domain.models import Area, LocaleIdentity, ThemeIdentity

from .errors import CancelledError


@dataclass(frozen=True, slots=True)
class DeployJob:
    """One theme deployed for one area and one locale."""

    theme: ThemeIdentity
    area: Area
    locale: LocaleIdentity

    @property
    def label(self) -> str:
        return f"{self.theme} [{self.area}/{self.locale}]"


class DeployOutcome(StrEnum):
    """Terminal state of a job."""

    SUCCESS = "success"
    FAILED = "failed"
    CANCELLED = "cancelled"
    DELEGATED = "delegated"


@dataclass(frozen=True, slots=True)
class DeployResult:
    """Outcome of one job, written once by the worker that ran it."""

    job: DeployJob
    outcome: DeployOutcome
    files_copied: int = 0
    bytes_copied: int = 0
    elapsed_seconds: float = 0.0
    destination: Path | None = None
    error: BaseException | None = None

    @property
    def succeeded(self) -> bool:
        return self.outcome in (DeployOutcome.SUCCESS, DeployOutcome.DELEGATED)

    @property
    def error_message(self) -> str | None:
        if self.error is None:
            return None
        return str(self.error) or type(self.error).__name__


@dataclass(frozen=True, slots=True)
class StatsSnapshot:
    files_copied: int = 0
    bytes_copied: int = 0
    errors: int = 0


@dataclass(slots=True)
class DeployStats:
    """Process-wide counters shared by every worker.

    Each update takes the lock so concurrent increments are never lost.
    """

    _files_copied: int = 0
    _bytes_copied: int = 0
    _errors: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def add_file(self, size: int) -> None:
        with self._lock:
            self._files_copied += 1
            self._bytes_copied += size

    def record_error(self) -> None:
        with self._lock:
            self._errors += 1

    @property
    def files_copied(self) -> int:
        return self._files_copied

    @property
    def bytes_copied(self) -> int:
        return self._bytes_copied

    @property
    def errors(self) -> int:
        return self._errors

    def snapshot(self) -> StatsSnapshot:
        with self._lock:
            return StatsSnapshot(self._files_copied, self._bytes_copied, self._errors)


class CancellationToken:
    """Run-wide cancellation flag; set once and never reset."""

    __slots__ = ("_event",)

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` once cancellation has been requested."""

        if self._event.is_set():
            raise CancelledError("Deployment cancelled")


class RunDisposition(StrEnum):
    """Overall result of a run, mapped onto a process exit status."""

    SUCCESS = "success"
    PARTIAL = "partial"
    FAILED = "failed"
    CANCELLED = "cancelled"

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self]


_EXIT_CODES: dict[RunDisposition, int] = {
    RunDisposition.SUCCESS: 0,
    RunDisposition.PARTIAL: 1,
    RunDisposition.FAILED: 2,
    RunDisposition.CANCELLED: 130,
}


def determine_disposition(results: Sequence[DeployResult], cancelled: bool) -> RunDisposition:
    """Aggregate job outcomes.

    Cancellation wins. Otherwise zero failures is success, failures next to at
    least one successful or delegated job is partial, and anything else is a
    complete failure.
    """
    if cancelled:
        return RunDisposition.CANCELLED
    failed = sum(1 for result in results if result.outcome is DeployOutcome.FAILED)
    if failed == 0:
        return RunDisposition.SUCCESS
    if any(result.succeeded for result in results):
        return RunDisposition.PARTIAL
    return RunDisposition.FAILED


@dataclass(frozen=True, slots=True)
class RunSummary:
    """Everything reported after a run finishes."""

    results: tuple[DeployResult, ...]
    stats: StatsSnapshot
    elapsed_seconds: float
    cancelled: bool = False

    @property
    def total_jobs(self) -> int:
        return len(self.results)

    @property
    def outcome_counts(self) -> Counter[DeployOutcome]:
        return Counter(result.outcome for result in self.results)

    @property
    def disposition(self) -> RunDisposition:
        return determine_disposition(self.results, self.cancelled)

    @property
    def files_per_second(self) -> float:
        if self.elapsed_seconds <= 0:
            return 0.0
        return self.stats.files_copied / self.elapsed_seconds


__all__ = [
    "CancellationToken",
    "DeployJob",
    "DeployOutcome",
    "DeployResult",
    "DeployStats",
    "RunDisposition",
    "RunSummary",
    "StatsSnapshot",
    "determine_disposition",
]
